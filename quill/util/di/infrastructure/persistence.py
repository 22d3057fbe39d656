"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from quill.config import Settings
from quill.domain.repository import (
    ArticleRepository,
    CommentLikeRepository,
    CommentRepository,
    DecorationRepository,
    UserRepository,
)
from quill.domain.transaction import CommitHooks
from quill.persistence.database import create_engine, create_session_factory
from quill.persistence.repository import (
    PostgresArticleRepository,
    PostgresCommentLikeRepository,
    PostgresCommentRepository,
    PostgresDecorationRepository,
    PostgresUserRepository,
)
from quill.util.di.base import ProviderBase
from quill.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed when the container closes."""
        engine = create_engine(settings)
        # Instrument SQLAlchemy for observability
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    def get_commit_hooks(self) -> CommitHooks:
        """Provide the callbacks to run after this request commits."""
        return CommitHooks()

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        commit_hooks: CommitHooks,
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session is committed at the end of the request if no exception
        occurred, or rolled back if an exception was raised. Row locks taken
        during the request are held until then. Commit hooks run only once
        the commit has succeeded.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
                logfire.debug("Session committed")
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise
        await commit_hooks.run()

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        """Provide User repository."""
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_article_repository(self, session: AsyncSession) -> ArticleRepository:
        """Provide Article repository."""
        return PostgresArticleRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, session: AsyncSession) -> CommentRepository:
        """Provide Comment repository."""
        return PostgresCommentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_comment_like_repository(
        self, session: AsyncSession
    ) -> CommentLikeRepository:
        """Provide CommentLike repository."""
        return PostgresCommentLikeRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_decoration_repository(
        self, session: AsyncSession
    ) -> DecorationRepository:
        """Provide Decoration repository."""
        return PostgresDecorationRepository(session)
