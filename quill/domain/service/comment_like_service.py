"""Comment like domain service."""

from datetime import datetime

import logfire
from sqlalchemy.exc import IntegrityError

from quill.domain.error import ConflictError, NotFoundError
from quill.domain.model.comment import Comment
from quill.domain.model.comment_like import CommentLike
from quill.domain.repository import CommentLikeRepository
from quill.domain.value import CommentId, UserId

from .base import Service
from .comment_service import CommentService


class CommentLikeService(Service):
    """Domain service for liking comments."""

    def __init__(
        self,
        comment_like_repository: CommentLikeRepository,
        comment_service: CommentService,
    ) -> None:
        """Initialize comment like service.

        Args:
            comment_like_repository: Comment like repository
            comment_service: Comment domain service
        """
        self.comment_like_repository = comment_like_repository
        self.comment_service = comment_service

    async def like_comment(self, comment_id: CommentId, user_id: UserId) -> Comment:
        """Like a comment.

        Creates the like record and atomically increments the comment's likes.

        Args:
            comment_id: Comment ID
            user_id: User ID

        Returns:
            The comment with its updated like count

        Raises:
            NotFoundError: If the comment does not exist
            ConflictError: If the user already likes the comment
        """
        with logfire.span(
            "comment_like_service.like_comment", comment_id=comment_id, user_id=user_id
        ):
            comment = await self.comment_service.get_comment(comment_id)

            # Unique (comment_id, user_id) rejects a second like
            like = CommentLike(
                id=await self.comment_like_repository.next_id(),
                comment_id=comment_id,
                user_id=user_id,
                created_at=datetime.now(),
            )
            try:
                await self.comment_like_repository.save(like)
            except IntegrityError:
                logfire.warn(
                    "Duplicate like attempt", comment_id=comment_id, user_id=user_id
                )
                raise ConflictError("Already liked this comment")

            await self.comment_service.increment_likes(comment)
            logfire.info("Comment liked", comment_id=comment_id, user_id=user_id)
            return await self.comment_service.get_comment(comment_id)

    async def unlike_comment(self, comment_id: CommentId, user_id: UserId) -> Comment:
        """Remove a like from a comment.

        Args:
            comment_id: Comment ID
            user_id: User ID

        Returns:
            The comment with its updated like count

        Raises:
            NotFoundError: If the comment does not exist or the user has
                not liked it
        """
        with logfire.span(
            "comment_like_service.unlike_comment",
            comment_id=comment_id,
            user_id=user_id,
        ):
            comment = await self.comment_service.get_comment(comment_id)

            like = await self.comment_like_repository.find_by_comment_and_user(
                comment_id, user_id
            )
            if like is None:
                logfire.info(
                    "No like to remove", comment_id=comment_id, user_id=user_id
                )
                raise NotFoundError("Like", f"comment {comment_id} by user {user_id}")

            await self.comment_like_repository.delete(like.id)
            await self.comment_service.decrement_likes(comment)
            logfire.info("Comment unliked", comment_id=comment_id, user_id=user_id)
            return await self.comment_service.get_comment(comment_id)

    async def has_liked(self, comment_id: CommentId, user_id: UserId) -> bool:
        """Whether the user currently likes the comment."""
        like = await self.comment_like_repository.find_by_comment_and_user(
            comment_id, user_id
        )
        return like is not None
