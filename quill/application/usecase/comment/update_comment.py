"""Update comment use case."""

from pydantic import BaseModel, Field

from quill.domain.error import ContentDeletedException, NotAuthorizedError
from quill.domain.service import CommentService
from quill.domain.value import CommentId, Permission, Principal

from ..base import BaseUseCase
from .items import CommentItem, CommentItemAssembler


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: CommentId
    principal: Principal  # Authenticated caller
    content: str = Field(min_length=1, max_length=10000)


class UpdateCommentUseCase(BaseUseCase):
    """Use case for editing a comment's content."""

    def __init__(
        self, comment_service: CommentService, assembler: CommentItemAssembler
    ) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment domain service
            assembler: Builds response items with authors
        """
        self.comment_service = comment_service
        self.assembler = assembler

    async def execute(self, request: UpdateCommentRequest) -> CommentItem:
        """Execute update comment flow.

        Args:
            request: Comment ID, caller and new content

        Returns:
            Updated comment

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the caller is neither the author nor a
                comment manager
            ContentDeletedException: If the comment is deleted
        """
        principal = request.principal

        # 1. Retrieve existing comment
        comment = await self.comment_service.get_comment(request.comment_id)

        # 2. Check authorization
        if comment.author_id != principal.user_id and not principal.has_permission(
            Permission.COMMENT_MANAGE
        ):
            raise NotAuthorizedError(
                "edit", "comment", request.comment_id, principal.user_id
            )

        # 3. Check not deleted
        if comment.is_deleted:
            raise ContentDeletedException("comment", request.comment_id)

        # 4. Update via service
        updated = await self.comment_service.update_content(
            request.comment_id, request.content
        )
        if updated is None:
            # Deleted between the read and the update
            raise ContentDeletedException("comment", request.comment_id)

        return await self.assembler.item(updated)
