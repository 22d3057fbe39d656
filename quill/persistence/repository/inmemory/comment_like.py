"""In-memory comment like repository for testing."""

from itertools import count
from typing import Optional

from sqlalchemy.exc import IntegrityError

from quill.domain.model.comment_like import CommentLike
from quill.domain.repository.comment_like import CommentLikeRepository
from quill.domain.value import CommentId, CommentLikeId, UserId


class InMemoryCommentLikeRepository(CommentLikeRepository):
    """In-memory implementation of CommentLikeRepository for testing."""

    def __init__(self) -> None:
        self._likes: list[CommentLike] = []
        self._ids = count(1)

    async def next_id(self) -> CommentLikeId:
        """Reserve the next like ID."""
        return CommentLikeId(next(self._ids))

    async def find_by_comment_and_user(
        self, comment_id: CommentId, user_id: UserId
    ) -> Optional[CommentLike]:
        """Find a user's like on a comment."""
        for like in self._likes:
            if like.comment_id == comment_id and like.user_id == user_id:
                return like
        return None

    async def save(self, like: CommentLike) -> CommentLike:
        """Save a like.

        Raises:
            IntegrityError: If the user already likes the comment
        """
        existing = await self.find_by_comment_and_user(like.comment_id, like.user_id)
        if existing:
            raise IntegrityError("Duplicate like", None, Exception())

        self._likes.append(like)
        return like

    async def delete(self, like_id: CommentLikeId) -> None:
        """Delete a like by ID."""
        self._likes = [like for like in self._likes if like.id != like_id]
