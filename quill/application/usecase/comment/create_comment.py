"""Create comment use case."""

from pydantic import BaseModel, Field

from quill.domain.service import ArticleService, CommentService
from quill.domain.value import ArticleId, CommentId, UserId

from ..base import BaseUseCase
from .items import CommentItem, CommentItemAssembler


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    article_id: ArticleId
    content: str = Field(min_length=1, max_length=10000)
    author_id: UserId  # User ID from authenticated user
    parent_id: CommentId | None = None  # Parent comment ID for replies


class CreateCommentUseCase(BaseUseCase):
    """Use case for commenting on an article or replying to another comment."""

    def __init__(
        self,
        comment_service: CommentService,
        article_service: ArticleService,
        assembler: CommentItemAssembler,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            article_service: Article domain service
            assembler: Builds response items with authors
        """
        self.comment_service = comment_service
        self.article_service = article_service
        self.assembler = assembler

    async def execute(self, request: CreateCommentRequest) -> CommentItem:
        """Execute create comment flow.

        Steps:
        1. Verify article exists
        2. Create comment via comment service (validates parent if replying)
        3. Update article's comment count

        Raises:
            NotFoundError: If the article or parent comment does not exist
            InvalidArgumentError: If the parent belongs to another article
        """
        await self.article_service.get_by_id(request.article_id)

        comment = await self.comment_service.create_comment(
            article_id=request.article_id,
            author_id=request.author_id,
            content=request.content,
            parent_id=request.parent_id,
        )

        await self.article_service.increment_comment_count(request.article_id)

        return await self.assembler.item(comment)
