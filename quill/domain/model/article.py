"""Article entity.

Only the fields the comment engine relies on are modelled here.
"""

from datetime import datetime

from pydantic import Field

from quill.domain.model.common import DomainModel
from quill.domain.value import ArticleId, UserId


class Article(DomainModel):
    """Article that comments attach to."""

    id: ArticleId
    title: str = Field(min_length=1, max_length=300)
    author_id: UserId
    comment_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
