"""Article domain service."""

import logfire

from quill.domain.error import NotFoundError
from quill.domain.model.article import Article
from quill.domain.repository import ArticleRepository
from quill.domain.value import ArticleId

from .base import Service


class ArticleService(Service):
    """Domain service for the article facts comments depend on."""

    def __init__(self, article_repository: ArticleRepository) -> None:
        """Initialize article service.

        Args:
            article_repository: Article repository
        """
        self.article_repository = article_repository

    async def get_by_id(self, article_id: ArticleId) -> Article:
        """Get an article by ID.

        Args:
            article_id: Article ID

        Returns:
            Article entity

        Raises:
            NotFoundError: If the article does not exist
        """
        with logfire.span("article_service.get_by_id", article_id=article_id):
            article = await self.article_repository.find_by_id(article_id)
            if article is None:
                logfire.warn("Article not found", article_id=article_id)
                raise NotFoundError("Article", article_id)
            return article

    async def increment_comment_count(self, article_id: ArticleId) -> None:
        """Atomically increment the article's comment count."""
        with logfire.span(
            "article_service.increment_comment_count", article_id=article_id
        ):
            await self.article_repository.increment_comment_count(article_id)

    async def decrement_comment_count(
        self, article_id: ArticleId, amount: int = 1
    ) -> None:
        """Atomically decrement the article's comment count (minimum 0)."""
        with logfire.span(
            "article_service.decrement_comment_count",
            article_id=article_id,
            amount=amount,
        ):
            await self.article_repository.decrement_comment_count(article_id, amount)
