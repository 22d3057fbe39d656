"""Comment entity.

Comments are threaded replies on articles with unlimited depth.
Every comment stores the id of its thread's top-level comment (root_id),
so a whole thread is one equality filter away.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from quill.domain.model.common import DomainModel
from quill.domain.value import ArticleId, CommentId, CommentStatus, UserId


class Comment(DomainModel):
    """Comment entity.

    Threading is managed through:
    - parent_id: Direct parent comment (None for top-level)
    - root_id: Top-level ancestor, fixed when the comment is created
      (equal to id for top-level comments)
    """

    id: CommentId
    article_id: ArticleId
    author_id: UserId
    content: str = Field(min_length=1, max_length=10000)
    parent_id: Optional[CommentId] = None
    root_id: CommentId
    status: CommentStatus = CommentStatus.PUBLISHED
    likes: int = Field(default=0, ge=0)
    reply_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def validate_thread_links(self) -> "Comment":
        """A top-level comment is its own root; a reply never points at itself."""
        if self.parent_id is None and self.root_id != self.id:
            raise ValueError("Top-level comment must be its own root")
        if self.parent_id is not None and self.parent_id == self.id:
            raise ValueError("Comment cannot reply to itself")
        return self

    @property
    def is_top_level(self) -> bool:
        return self.parent_id is None

    @property
    def is_deleted(self) -> bool:
        return self.status == CommentStatus.DELETED

    @property
    def is_published(self) -> bool:
        return self.status == CommentStatus.PUBLISHED
