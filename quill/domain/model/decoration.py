"""Decoration entities.

Decorations are cosmetic items (avatar frames, badges, ...) a user owns and
may equip, one per decoration type.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from quill.domain.model.common import DomainModel
from quill.domain.value import DecorationId, DecorationRarity, DecorationType, UserId


class Decoration(DomainModel):
    """Catalogue entry for a decoration."""

    id: DecorationId
    name: str = Field(min_length=1, max_length=100)
    type: DecorationType
    image_url: str
    rarity: DecorationRarity = DecorationRarity.COMMON


class UserDecoration(DomainModel):
    """Ownership of a decoration by a user."""

    user_id: UserId
    decoration_id: DecorationId
    is_using: bool = False
    is_permanent: bool = True
    expires_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=datetime.now)

    def is_active(self, now: datetime) -> bool:
        """Equipped and not expired at ``now``."""
        if not self.is_using:
            return False
        if self.is_permanent:
            return True
        return self.expires_at is not None and self.expires_at > now
