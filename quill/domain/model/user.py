"""User entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from quill.domain.model.common import DomainModel
from quill.domain.value import UserId


class User(DomainModel):
    """User account, reduced to what comment authorship displays."""

    id: UserId
    username: str = Field(min_length=1, max_length=50)
    nickname: Optional[str] = None
    avatar_url: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)
