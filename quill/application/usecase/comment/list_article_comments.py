"""List article comments use case."""

from pydantic import BaseModel

from quill.config import CommentSettings, PaginationSettings
from quill.domain.service import ArticleService, CommentService
from quill.domain.value import ArticleId, ListResult

from ..base import BaseUseCase
from .items import (
    CommentItemAssembler,
    CommentItemWithReplies,
    clamp_limit,
    to_item,
)


class ListArticleCommentsRequest(BaseModel):
    """List article comments request."""

    article_id: ArticleId
    page: int = 1
    limit: int = 10


class ListArticleCommentsUseCase(BaseUseCase):
    """Use case for the comment section of an article.

    Top-level comments come newest first; each carries a preview of its
    oldest direct replies so the first screen renders without further
    requests.
    """

    def __init__(
        self,
        comment_service: CommentService,
        article_service: ArticleService,
        assembler: CommentItemAssembler,
        pagination_settings: PaginationSettings,
        comment_settings: CommentSettings,
    ) -> None:
        self.comment_service = comment_service
        self.article_service = article_service
        self.assembler = assembler
        self.pagination_settings = pagination_settings
        self.comment_settings = comment_settings

    async def execute(
        self, request: ListArticleCommentsRequest
    ) -> ListResult[CommentItemWithReplies]:
        """Execute list article comments flow.

        Raises:
            NotFoundError: If the article does not exist
            InvalidArgumentError: If page or limit is not positive
        """
        await self.article_service.get_by_id(request.article_id)

        top_level = await self.comment_service.list_top_level(
            request.article_id,
            page=request.page,
            limit=clamp_limit(request.limit, self.pagination_settings.max_limit),
        )
        previews = await self.comment_service.get_reply_previews(
            [c.id for c in top_level.data],
            size=self.comment_settings.reply_preview_size,
        )

        everyone = list(top_level.data)
        for replies in previews.values():
            everyone.extend(replies)
        authors = await self.assembler.authors(everyone)

        data = [
            to_item(
                comment,
                authors,
                CommentItemWithReplies,
                replies=[to_item(r, authors) for r in previews.get(comment.id, [])],
            )
            for comment in top_level.data
        ]
        return ListResult[CommentItemWithReplies](data=data, meta=top_level.meta)
