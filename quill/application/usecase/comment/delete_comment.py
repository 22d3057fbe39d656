"""Delete comment use case."""

from pydantic import BaseModel

from quill.domain.error import NotAuthorizedError
from quill.domain.service import ArticleService, CommentService
from quill.domain.value import CommentId, Permission, Principal

from ..base import BaseUseCase


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: CommentId
    principal: Principal


class DeleteCommentUseCase(BaseUseCase):
    """Use case for deleting a comment.

    The comment's author, the author of the article it was posted on and
    comment managers may delete it. The article's comment count drops by
    every published comment the deletion takes away, replies included when
    the deletion cascades.
    """

    def __init__(
        self, comment_service: CommentService, article_service: ArticleService
    ) -> None:
        self.comment_service = comment_service
        self.article_service = article_service

    async def execute(self, request: DeleteCommentRequest) -> None:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the caller may not delete the comment
        """
        principal = request.principal
        comment = await self.comment_service.get_comment(request.comment_id)

        can_delete = comment.author_id == principal.user_id
        if not can_delete:
            article = await self.article_service.get_by_id(comment.article_id)
            can_delete = article.author_id == principal.user_id or (
                principal.has_permission(Permission.COMMENT_MANAGE)
            )
        if not can_delete:
            raise NotAuthorizedError(
                "delete", "comment", request.comment_id, principal.user_id
            )

        withdrawn = await self.comment_service.delete_comment(request.comment_id)
        if withdrawn:
            await self.article_service.decrement_comment_count(
                comment.article_id, len(withdrawn)
            )
