"""User repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from quill.domain.model.user import User
from quill.domain.value import UserId


class UserRepository(ABC):
    """Repository for User entity.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Sequence[UserId]) -> List[User]:
        """Find several users in one lookup.

        Unknown IDs are skipped.

        Args:
            user_ids: User IDs to look up

        Returns:
            Users found, in no particular order
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update)."""
        pass
