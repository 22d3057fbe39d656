"""Count article comments use case."""

from pydantic import BaseModel

from quill.domain.service import ArticleService, CommentService
from quill.domain.value import ArticleId
from quill.domain.value.common import WireModel

from ..base import BaseUseCase


class CountArticleCommentsRequest(BaseModel):
    """Count article comments request."""

    article_id: ArticleId


class CountArticleCommentsResponse(WireModel):
    """Count article comments response."""

    article_id: ArticleId
    count: int


class CountArticleCommentsUseCase(BaseUseCase):
    """Use case for counting the visible comments of an article."""

    def __init__(
        self, comment_service: CommentService, article_service: ArticleService
    ) -> None:
        self.comment_service = comment_service
        self.article_service = article_service

    async def execute(
        self, request: CountArticleCommentsRequest
    ) -> CountArticleCommentsResponse:
        """Count published comments, replies included.

        Raises:
            NotFoundError: If the article does not exist
        """
        await self.article_service.get_by_id(request.article_id)
        count = await self.comment_service.count_by_article(request.article_id)
        return CountArticleCommentsResponse(article_id=request.article_id, count=count)
