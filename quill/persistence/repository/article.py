"""PostgreSQL implementation of Article repository."""

from typing import Optional

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from quill.domain.model import Article
from quill.domain.repository import ArticleRepository
from quill.domain.value import ArticleId
from quill.persistence.mappers import article_to_dict, row_to_article
from quill.persistence.tables import articles_table


class PostgresArticleRepository(ArticleRepository):
    """PostgreSQL implementation of ArticleRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, article_id: ArticleId) -> Optional[Article]:
        """Find an article by ID."""
        stmt = select(articles_table).where(articles_table.c.id == article_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_article(row._asdict()) if row else None

    async def save(self, article: Article) -> Article:
        """Save an article (create or update)."""
        existing = await self.find_by_id(article.id)
        article_dict = article_to_dict(article)

        if existing:
            stmt = (
                articles_table.update()
                .where(articles_table.c.id == article.id)
                .values(**article_dict)
            )
        else:
            stmt = articles_table.insert().values(**article_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return article

    async def increment_comment_count(self, article_id: ArticleId) -> None:
        """Atomically increment comment_count by 1."""
        stmt = (
            update(articles_table)
            .where(articles_table.c.id == article_id)
            .values(comment_count=articles_table.c.comment_count + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def decrement_comment_count(
        self, article_id: ArticleId, amount: int = 1
    ) -> None:
        """Atomically decrement comment_count by ``amount`` (minimum 0)."""
        stmt = (
            update(articles_table)
            .where(articles_table.c.id == article_id)
            .values(
                comment_count=func.greatest(
                    articles_table.c.comment_count - amount, 0
                )
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()
