"""Like and unlike comment use cases."""

from pydantic import BaseModel

from quill.domain.service import CommentLikeService
from quill.domain.value import CommentId, UserId
from quill.domain.value.common import WireModel

from ..base import BaseUseCase


class LikeCommentRequest(BaseModel):
    """Like or unlike comment request."""

    comment_id: CommentId
    user_id: UserId  # User ID from authenticated user


class LikeCommentResponse(WireModel):
    """Like state of a comment after the action."""

    comment_id: CommentId
    liked: bool
    likes: int


class LikeCommentUseCase(BaseUseCase):
    """Use case for liking a comment."""

    def __init__(self, comment_like_service: CommentLikeService) -> None:
        self.comment_like_service = comment_like_service

    async def execute(self, request: LikeCommentRequest) -> LikeCommentResponse:
        """Like a comment.

        Raises:
            NotFoundError: If the comment does not exist
            ConflictError: If the user already likes the comment
        """
        comment = await self.comment_like_service.like_comment(
            request.comment_id, request.user_id
        )
        return LikeCommentResponse(
            comment_id=comment.id,
            liked=await self.comment_like_service.has_liked(
                comment.id, request.user_id
            ),
            likes=comment.likes,
        )


class UnlikeCommentUseCase(BaseUseCase):
    """Use case for taking back a like."""

    def __init__(self, comment_like_service: CommentLikeService) -> None:
        self.comment_like_service = comment_like_service

    async def execute(self, request: LikeCommentRequest) -> LikeCommentResponse:
        """Remove a like.

        Raises:
            NotFoundError: If the comment does not exist or was not liked
        """
        comment = await self.comment_like_service.unlike_comment(
            request.comment_id, request.user_id
        )
        return LikeCommentResponse(
            comment_id=comment.id,
            liked=await self.comment_like_service.has_liked(
                comment.id, request.user_id
            ),
            likes=comment.likes,
        )
