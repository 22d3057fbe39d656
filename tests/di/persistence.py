"""Mock persistence providers for testing."""

from collections.abc import AsyncIterator

from dishka import Scope, provide

from quill.domain.repository import (
    ArticleRepository,
    CommentLikeRepository,
    CommentRepository,
    DecorationRepository,
    UserRepository,
)
from quill.domain.transaction import CommitHooks
from quill.persistence.repository.inmemory import (
    InMemoryArticleRepository,
    InMemoryCommentLikeRepository,
    InMemoryCommentRepository,
    InMemoryDecorationRepository,
    InMemoryUserRepository,
)
from quill.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses APP scope so data written in one request is visible to the next;
    each test builds its own container, so tests stay isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()

    @provide(scope=Scope.APP)
    def get_article_repository(self) -> ArticleRepository:
        """Provide in-memory article repository."""
        return InMemoryArticleRepository()

    @provide(scope=Scope.APP)
    def get_comment_repository(self) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository()

    @provide(scope=Scope.APP)
    def get_comment_like_repository(self) -> CommentLikeRepository:
        """Provide in-memory comment like repository."""
        return InMemoryCommentLikeRepository()

    @provide(scope=Scope.APP)
    def get_decoration_repository(self) -> DecorationRepository:
        """Provide in-memory decoration repository."""
        return InMemoryDecorationRepository()

    @provide(scope=Scope.REQUEST)
    async def get_commit_hooks(self) -> AsyncIterator[CommitHooks]:
        """Provide commit hooks, run when the request scope closes.

        In-memory writes are visible at once, so the end of the request
        stands in for the commit.
        """
        commit_hooks = CommitHooks()
        yield commit_hooks
        await commit_hooks.run()
