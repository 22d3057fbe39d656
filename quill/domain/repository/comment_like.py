"""Comment like repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from quill.domain.model.comment_like import CommentLike
from quill.domain.value import CommentId, CommentLikeId, UserId


class CommentLikeRepository(ABC):
    """Repository for CommentLike entity."""

    @abstractmethod
    async def next_id(self) -> CommentLikeId:
        """Reserve the identifier for a like about to be inserted."""
        pass

    @abstractmethod
    async def find_by_comment_and_user(
        self, comment_id: CommentId, user_id: UserId
    ) -> Optional[CommentLike]:
        """Find a user's like on a comment.

        Returns:
            The like if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, like: CommentLike) -> CommentLike:
        """Insert a like.

        Raises:
            IntegrityError: If the user already likes the comment
        """
        pass

    @abstractmethod
    async def delete(self, like_id: CommentLikeId) -> None:
        """Delete a like."""
        pass
