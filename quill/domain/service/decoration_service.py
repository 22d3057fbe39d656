"""Decoration domain service."""

from datetime import datetime
from typing import Dict, Sequence

import logfire

from quill.domain.repository import DecorationRepository
from quill.domain.value import DecorationId, DecorationRarity, DecorationType, UserId
from quill.domain.value.common import WireValueObject

from .base import Service


class EquippedDecoration(WireValueObject):
    """A decoration a user currently shows next to their name."""

    id: DecorationId
    name: str
    type: DecorationType
    image_url: str
    rarity: DecorationRarity


EquippedByType = Dict[DecorationType, EquippedDecoration]


class DecorationService(Service):
    """Domain service for user decorations."""

    def __init__(self, decoration_repository: DecorationRepository) -> None:
        """Initialize decoration service.

        Args:
            decoration_repository: Decoration repository
        """
        self.decoration_repository = decoration_repository

    async def get_equipped_for_users(
        self, user_ids: Sequence[UserId], now: datetime | None = None
    ) -> Dict[UserId, EquippedByType]:
        """Get the active decorations of several users in one lookup.

        A decoration is active when it is equipped and either permanent or
        not yet expired. A user shows at most one decoration per type; if
        the store holds more than one, the most recently acquired wins.

        Args:
            user_ids: Users to look up (duplicates allowed)
            now: Reference time for expiry (defaults to the current time)

        Returns:
            Mapping of user ID to ``{decoration type: decoration}``. Every
            requested user is present, with an empty mapping if nothing is
            equipped.
        """
        unique_ids = list(dict.fromkeys(user_ids))
        if not unique_ids:
            return {}

        now = now or datetime.now()
        with logfire.span(
            "decoration_service.get_equipped_for_users", user_count=len(unique_ids)
        ):
            rows = await self.decoration_repository.find_in_use_by_users(unique_ids)

            equipped: Dict[UserId, EquippedByType] = {uid: {} for uid in unique_ids}
            acquired_at: Dict[tuple, datetime] = {}
            for ownership, decoration in rows:
                if not ownership.is_active(now):
                    continue
                slot = (ownership.user_id, decoration.type)
                if slot in acquired_at and acquired_at[slot] >= ownership.created_at:
                    continue
                acquired_at[slot] = ownership.created_at
                equipped.setdefault(ownership.user_id, {})[decoration.type] = (
                    EquippedDecoration(
                        id=decoration.id,
                        name=decoration.name,
                        type=decoration.type,
                        image_url=decoration.image_url,
                        rarity=decoration.rarity,
                    )
                )

            logfire.info(
                "Equipped decorations resolved",
                user_count=len(unique_ids),
                decoration_count=len(acquired_at),
            )
            return equipped
