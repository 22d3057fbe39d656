"""Get thread use case."""

from pydantic import BaseModel

from quill.config import PaginationSettings
from quill.domain.service import CommentService
from quill.domain.value import CommentId, NestedListResult
from quill.util.listing import build_nested_list

from ..base import BaseUseCase
from .items import CommentItem, CommentItemAssembler, clamp_limit, to_item


class GetThreadRequest(BaseModel):
    """Get thread request."""

    comment_id: CommentId
    page: int = 1
    limit: int = 10


class GetThreadUseCase(BaseUseCase):
    """Use case for reading a whole discussion thread.

    Any comment of a thread can be used to open it: the response always
    carries the thread's root as the item and one page of every reply
    below the root, at any depth, as the nested list.
    """

    def __init__(
        self,
        comment_service: CommentService,
        assembler: CommentItemAssembler,
        pagination_settings: PaginationSettings,
    ) -> None:
        self.comment_service = comment_service
        self.assembler = assembler
        self.pagination_settings = pagination_settings

    async def execute(
        self, request: GetThreadRequest
    ) -> NestedListResult[CommentItem, CommentItem]:
        """Execute get thread flow.

        Raises:
            NotFoundError: If the comment does not exist
            InvalidArgumentError: If page or limit is not positive
        """
        comment = await self.comment_service.get_comment(request.comment_id)
        root = (
            comment
            if comment.is_top_level
            else await self.comment_service.get_comment(comment.root_id)
        )

        limit = clamp_limit(request.limit, self.pagination_settings.max_limit)
        descendants = await self.comment_service.get_all_descendants(
            root.id, page=request.page, limit=limit
        )

        # One author lookup for the root and the whole page
        authors = await self.assembler.authors([root, *descendants.data])
        meta = descendants.meta
        return build_nested_list(
            to_item(root, authors),
            nested_data=[to_item(c, authors) for c in descendants.data],
            nested_total=meta.total,
            nested_page=meta.page,
            nested_limit=meta.limit,
        )
