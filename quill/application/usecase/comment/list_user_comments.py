"""List user comments use case."""

from pydantic import BaseModel

from quill.config import PaginationSettings
from quill.domain.service import CommentService, UserService
from quill.domain.value import ListResult, UserId

from ..base import BaseUseCase
from .items import CommentItem, CommentItemAssembler, clamp_limit


class ListUserCommentsRequest(BaseModel):
    """List user comments request."""

    user_id: UserId
    page: int = 1
    limit: int = 10


class ListUserCommentsUseCase(BaseUseCase):
    """Use case for a user's comment history, newest first."""

    def __init__(
        self,
        comment_service: CommentService,
        user_service: UserService,
        assembler: CommentItemAssembler,
        pagination_settings: PaginationSettings,
    ) -> None:
        self.comment_service = comment_service
        self.user_service = user_service
        self.assembler = assembler
        self.pagination_settings = pagination_settings

    async def execute(self, request: ListUserCommentsRequest) -> ListResult[CommentItem]:
        """Execute list user comments flow.

        Raises:
            NotFoundError: If the user does not exist
            InvalidArgumentError: If page or limit is not positive
        """
        await self.user_service.get_by_id(request.user_id)

        comments = await self.comment_service.list_by_author(
            request.user_id,
            page=request.page,
            limit=clamp_limit(request.limit, self.pagination_settings.max_limit),
        )
        return await self.assembler.page(comments)
