"""Decoration repository interface."""

from abc import ABC, abstractmethod
from typing import List, Sequence, Tuple

from quill.domain.model.decoration import Decoration, UserDecoration
from quill.domain.value import UserId


class DecorationRepository(ABC):
    """Repository for decorations and their ownership records."""

    @abstractmethod
    async def save(self, decoration: Decoration) -> Decoration:
        """Save a catalogue decoration (create or update)."""
        pass

    @abstractmethod
    async def save_user_decoration(
        self, user_decoration: UserDecoration
    ) -> UserDecoration:
        """Save an ownership record, keyed by (user_id, decoration_id)."""
        pass

    @abstractmethod
    async def find_in_use_by_users(
        self, user_ids: Sequence[UserId]
    ) -> List[Tuple[UserDecoration, Decoration]]:
        """Find the decorations currently equipped by several users.

        Expiry is not checked here; callers decide what counts as active.

        Args:
            user_ids: Users to look up

        Returns:
            (ownership, decoration) pairs with ``is_using`` set
        """
        pass
