"""In-memory decoration repository for testing."""

from typing import List, Sequence, Tuple

from quill.domain.model.decoration import Decoration, UserDecoration
from quill.domain.repository.decoration import DecorationRepository
from quill.domain.value import DecorationId, UserId


class InMemoryDecorationRepository(DecorationRepository):
    """In-memory implementation of DecorationRepository for testing."""

    def __init__(self) -> None:
        self._decorations: dict[DecorationId, Decoration] = {}
        self._owned: dict[tuple[UserId, DecorationId], UserDecoration] = {}

    async def save(self, decoration: Decoration) -> Decoration:
        """Save or update a catalogue decoration."""
        self._decorations[decoration.id] = decoration
        return decoration

    async def save_user_decoration(
        self, user_decoration: UserDecoration
    ) -> UserDecoration:
        """Save or update an ownership record."""
        key = (user_decoration.user_id, user_decoration.decoration_id)
        self._owned[key] = user_decoration
        return user_decoration

    async def find_in_use_by_users(
        self, user_ids: Sequence[UserId]
    ) -> List[Tuple[UserDecoration, Decoration]]:
        """Find equipped decorations of several users."""
        wanted = set(user_ids)
        return [
            (owned, self._decorations[owned.decoration_id])
            for owned in self._owned.values()
            if owned.user_id in wanted
            and owned.is_using
            and owned.decoration_id in self._decorations
        ]
