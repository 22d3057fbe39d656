"""User domain service."""

from typing import Dict, Sequence

import logfire

from quill.domain.error import NotFoundError
from quill.domain.model import User
from quill.domain.repository import UserRepository
from quill.domain.value import UserId


class UserService:
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=user_id):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=user_id)
                raise NotFoundError("User", user_id)
            return user

    async def get_many(self, user_ids: Sequence[UserId]) -> Dict[UserId, User]:
        """Get several users with one lookup.

        Args:
            user_ids: User IDs (duplicates allowed)

        Returns:
            Mapping of user ID to user; unknown IDs are absent
        """
        unique_ids = list(dict.fromkeys(user_ids))
        if not unique_ids:
            return {}

        with logfire.span("user_service.get_many", count=len(unique_ids)):
            users = await self.user_repository.find_by_ids(unique_ids)
            return {user.id: user for user in users}
