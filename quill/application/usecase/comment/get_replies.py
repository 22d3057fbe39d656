"""Get replies use case."""

from pydantic import BaseModel

from quill.config import PaginationSettings
from quill.domain.service import CommentService
from quill.domain.value import CommentId, ListResult

from ..base import BaseUseCase
from .items import CommentItem, CommentItemAssembler, clamp_limit


class GetRepliesRequest(BaseModel):
    """Get replies request."""

    comment_id: CommentId
    page: int = 1
    limit: int = 10


class GetRepliesUseCase(BaseUseCase):
    """Use case for paging through the direct replies of a comment."""

    def __init__(
        self,
        comment_service: CommentService,
        assembler: CommentItemAssembler,
        pagination_settings: PaginationSettings,
    ) -> None:
        self.comment_service = comment_service
        self.assembler = assembler
        self.pagination_settings = pagination_settings

    async def execute(self, request: GetRepliesRequest) -> ListResult[CommentItem]:
        """Return one page of direct replies, oldest first.

        Raises:
            NotFoundError: If the comment does not exist
            InvalidArgumentError: If page or limit is not positive
        """
        replies = await self.comment_service.get_direct_replies(
            request.comment_id,
            page=request.page,
            limit=clamp_limit(request.limit, self.pagination_settings.max_limit),
        )
        return await self.assembler.page(replies)
