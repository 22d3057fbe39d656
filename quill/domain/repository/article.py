"""Article repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from quill.domain.model.article import Article
from quill.domain.value import ArticleId


class ArticleRepository(ABC):
    """Repository for Article entity."""

    @abstractmethod
    async def find_by_id(self, article_id: ArticleId) -> Optional[Article]:
        """Find an article by ID.

        Args:
            article_id: The article's unique identifier

        Returns:
            The article if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, article: Article) -> Article:
        """Save an article (create or update)."""
        pass

    @abstractmethod
    async def increment_comment_count(self, article_id: ArticleId) -> None:
        """Atomically increment comment_count by 1."""
        pass

    @abstractmethod
    async def decrement_comment_count(
        self, article_id: ArticleId, amount: int = 1
    ) -> None:
        """Atomically decrement comment_count by ``amount`` (minimum 0)."""
        pass
