"""Comment response items and their assembly.

Every comment leaves the service with its author attached: the author's
public profile plus the decorations they have equipped. Authors and
decorations are looked up once per batch of comments, never per comment.
"""

from datetime import datetime
from typing import Any, Dict, List, Sequence, Type, TypeVar

from quill.domain.model import Comment, User
from quill.domain.service import DecorationService, EquippedDecoration, UserService
from quill.domain.value import (
    ArticleId,
    CommentId,
    CommentStatus,
    DecorationType,
    ListResult,
    UserId,
)
from quill.domain.value.common import WireModel


class CommentAuthor(WireModel):
    """Public profile of a comment's author."""

    id: UserId
    username: str
    nickname: str | None = None
    avatar_url: str | None = None
    equipped_decorations: Dict[DecorationType, EquippedDecoration] = {}


class CommentItem(WireModel):
    """Comment item in responses.

    ``content`` is withheld (None) once a comment is deleted.
    """

    id: CommentId
    article_id: ArticleId
    parent_id: CommentId | None
    root_id: CommentId
    content: str | None
    status: CommentStatus
    likes: int
    reply_count: int
    created_at: datetime
    updated_at: datetime
    author: CommentAuthor | None


class CommentItemWithReplies(CommentItem):
    """Top-level comment with a preview of its first direct replies."""

    replies: List[CommentItem] = []


ItemT = TypeVar("ItemT", bound=CommentItem)


class CommentItemAssembler:
    """Turns domain comments into response items with their authors."""

    def __init__(
        self,
        user_service: UserService,
        decoration_service: DecorationService,
    ) -> None:
        """Initialize assembler.

        Args:
            user_service: User domain service
            decoration_service: Decoration domain service
        """
        self.user_service = user_service
        self.decoration_service = decoration_service

    async def authors(self, comments: Sequence[Comment]) -> Dict[UserId, CommentAuthor]:
        """Resolve the authors of ``comments`` with one user and one decoration lookup."""
        author_ids = [comment.author_id for comment in comments]
        users = await self.user_service.get_many(author_ids)
        equipped = await self.decoration_service.get_equipped_for_users(list(users))
        return {
            user_id: _author(user, equipped.get(user_id, {}))
            for user_id, user in users.items()
        }

    async def items(self, comments: Sequence[Comment]) -> List[CommentItem]:
        """Build response items for a batch of comments."""
        authors = await self.authors(comments)
        return [to_item(comment, authors) for comment in comments]

    async def item(self, comment: Comment) -> CommentItem:
        """Build the response item for a single comment."""
        items = await self.items([comment])
        return items[0]

    async def page(self, result: ListResult[Comment]) -> ListResult[CommentItem]:
        """Build response items for a page, keeping its metadata."""
        return ListResult[CommentItem](
            data=await self.items(result.data), meta=result.meta
        )


def _author(user: User, equipped: Dict[DecorationType, EquippedDecoration]) -> CommentAuthor:
    return CommentAuthor(
        id=user.id,
        username=user.username,
        nickname=user.nickname,
        avatar_url=user.avatar_url,
        equipped_decorations=equipped,
    )


def to_item(
    comment: Comment,
    authors: Dict[UserId, CommentAuthor],
    item_type: Type[ItemT] = CommentItem,
    **extra: Any,
) -> ItemT:
    """Build a response item from a comment and pre-resolved authors.

    Args:
        comment: Domain comment
        authors: Authors by user ID, from ``CommentItemAssembler.authors``
        item_type: Item class to build
        **extra: Additional fields of ``item_type``
    """
    return item_type(
        id=comment.id,
        article_id=comment.article_id,
        parent_id=comment.parent_id,
        root_id=comment.root_id,
        content=None if comment.is_deleted else comment.content,
        status=comment.status,
        likes=comment.likes,
        reply_count=comment.reply_count,
        created_at=comment.created_at,
        updated_at=comment.updated_at,
        author=authors.get(comment.author_id),
        **extra,
    )


def clamp_limit(limit: int, max_limit: int) -> int:
    """Cap a requested page size; non-positive sizes pass through to be rejected."""
    return min(limit, max_limit)
