"""Unit tests for UserService."""

import pytest

from quill.domain.error import NotFoundError
from quill.domain.model import User
from quill.domain.service import UserService
from quill.domain.value import UserId
from quill.persistence.repository.inmemory import InMemoryUserRepository


class TestUserService:
    """Tests for UserService."""

    @pytest.mark.asyncio
    async def test_get_by_id_missing_raises(self):
        """Should raise NotFoundError for an unknown user."""
        # Arrange
        service = UserService(InMemoryUserRepository())

        # Act & Assert
        with pytest.raises(NotFoundError, match="User not found"):
            await service.get_by_id(UserId(1))

    @pytest.mark.asyncio
    async def test_get_many_skips_unknown_and_duplicates(self):
        """Should return each known user once, keyed by ID."""
        # Arrange
        user_repo = InMemoryUserRepository()
        service = UserService(user_repo)
        alice = await user_repo.save(User(id=UserId(1), username="alice"))
        bob = await user_repo.save(User(id=UserId(2), username="bob"))

        # Act
        users = await service.get_many([UserId(1), UserId(2), UserId(1), UserId(3)])

        # Assert
        assert users == {alice.id: alice, bob.id: bob}

    @pytest.mark.asyncio
    async def test_get_many_empty(self):
        """Should not query for an empty list."""
        service = UserService(InMemoryUserRepository())

        assert await service.get_many([]) == {}
