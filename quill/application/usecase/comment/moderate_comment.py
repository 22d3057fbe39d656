"""Moderate comment use case."""

from pydantic import BaseModel

from quill.domain.error import NotAuthorizedError
from quill.domain.service import ArticleService, CommentService
from quill.domain.value import CommentId, CommentStatus, Permission, Principal

from ..base import BaseUseCase
from .items import CommentItem, CommentItemAssembler


class ModerateCommentRequest(BaseModel):
    """Moderate comment request."""

    comment_id: CommentId
    principal: Principal
    status: CommentStatus


class ModerateCommentUseCase(BaseUseCase):
    """Use case for moderators publishing, rejecting or hiding a comment.

    The article's comment count follows the comment in and out of the
    PUBLISHED state.
    """

    def __init__(
        self,
        comment_service: CommentService,
        article_service: ArticleService,
        assembler: CommentItemAssembler,
    ) -> None:
        self.comment_service = comment_service
        self.article_service = article_service
        self.assembler = assembler

    async def execute(self, request: ModerateCommentRequest) -> CommentItem:
        """Set the status of a comment.

        Raises:
            NotAuthorizedError: If the caller is not a comment manager
            NotFoundError: If the comment does not exist
        """
        if not request.principal.has_permission(Permission.COMMENT_MANAGE):
            raise NotAuthorizedError(
                "moderate", "comment", request.comment_id, request.principal.user_id
            )

        previous = await self.comment_service.get_comment(request.comment_id)
        updated = await self.comment_service.update_status(
            request.comment_id, request.status
        )

        if previous.is_published and not updated.is_published:
            await self.article_service.decrement_comment_count(updated.article_id)
        elif updated.is_published and not previous.is_published:
            await self.article_service.increment_comment_count(updated.article_id)

        return await self.assembler.item(updated)
