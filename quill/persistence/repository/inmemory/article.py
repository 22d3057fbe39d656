"""In-memory article repository for testing."""

from typing import Optional

from quill.domain.model.article import Article
from quill.domain.repository.article import ArticleRepository
from quill.domain.value import ArticleId


class InMemoryArticleRepository(ArticleRepository):
    """In-memory implementation of ArticleRepository for testing."""

    def __init__(self) -> None:
        self._articles: dict[ArticleId, Article] = {}

    async def find_by_id(self, article_id: ArticleId) -> Optional[Article]:
        """Find an article by ID."""
        return self._articles.get(article_id)

    async def save(self, article: Article) -> Article:
        """Save or update an article."""
        self._articles[article.id] = article
        return article

    async def increment_comment_count(self, article_id: ArticleId) -> None:
        """Increment comment_count by 1."""
        article = self._articles.get(article_id)
        if article:
            self._articles[article_id] = article.model_copy(
                update={"comment_count": article.comment_count + 1}
            )

    async def decrement_comment_count(
        self, article_id: ArticleId, amount: int = 1
    ) -> None:
        """Decrement comment_count by ``amount`` (minimum 0)."""
        article = self._articles.get(article_id)
        if article:
            self._articles[article_id] = article.model_copy(
                update={"comment_count": max(article.comment_count - amount, 0)}
            )
