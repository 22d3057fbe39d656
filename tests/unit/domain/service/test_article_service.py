"""Unit tests for ArticleService."""

import pytest

from quill.domain.error import NotFoundError
from quill.domain.model import Article
from quill.domain.service import ArticleService
from quill.domain.value import ArticleId, UserId
from quill.persistence.repository.inmemory import InMemoryArticleRepository


async def _service_with_article() -> ArticleService:
    article_repo = InMemoryArticleRepository()
    await article_repo.save(
        Article(id=ArticleId(1), title="Hello", author_id=UserId(1))
    )
    return ArticleService(article_repo)


class TestArticleService:
    """Tests for ArticleService."""

    @pytest.mark.asyncio
    async def test_comment_count_never_goes_negative(self):
        """Decrementing a zero count should leave it at zero."""
        # Arrange
        service = await _service_with_article()

        # Act
        await service.increment_comment_count(ArticleId(1))
        await service.decrement_comment_count(ArticleId(1))
        await service.decrement_comment_count(ArticleId(1))

        # Assert
        article = await service.get_by_id(ArticleId(1))
        assert article.comment_count == 0

    @pytest.mark.asyncio
    async def test_decrement_by_amount_stops_at_zero(self):
        """A cascade larger than the count floors it at zero."""
        # Arrange
        service = await _service_with_article()
        for _ in range(3):
            await service.increment_comment_count(ArticleId(1))

        # Act
        await service.decrement_comment_count(ArticleId(1), 2)
        after_two = (await service.get_by_id(ArticleId(1))).comment_count
        await service.decrement_comment_count(ArticleId(1), 5)
        after_five = (await service.get_by_id(ArticleId(1))).comment_count

        # Assert
        assert after_two == 1
        assert after_five == 0

    @pytest.mark.asyncio
    async def test_get_by_id_missing_raises(self):
        """Should raise NotFoundError for an unknown article."""
        service = ArticleService(InMemoryArticleRepository())

        with pytest.raises(NotFoundError, match="Article not found"):
            await service.get_by_id(ArticleId(404))
