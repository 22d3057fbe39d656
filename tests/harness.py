"""Test harness shared by unit, integration and E2E tests.

Unmocked components need their services running (PostgreSQL, Redis).
Settings are loaded from environment variables unless a test passes its
own.
"""

from dishka import AsyncContainer
import pytest_asyncio

from quill.config import Settings
from quill.domain.model import Article, User
from quill.domain.repository import ArticleRepository, UserRepository
from quill.domain.value import ArticleId, UserId
from quill.util.di import Component
from tests.di import build_test_container


def create_env_fixture(
    unmock: set[Component] | None = None, settings: Settings | None = None
):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that builds a fresh test container and yields
    a request-scoped container for service access.

    Args:
        unmock: Components to use real implementations for
        settings: Settings to use instead of the environment's

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything mocked
        unit_env = create_env_fixture()

        # Integration tests - real persistence, assumes postgres running
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_create_comment(unit_env):
            service = await unit_env.get(CommentService)
            comment = await service.create_comment(...)
            assert comment.root_id == comment.id
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock, settings=settings)

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment


async def seed_user(
    env: AsyncContainer, user_id: int, username: str | None = None
) -> User:
    """Store a user in the environment's user repository."""
    repo = await env.get(UserRepository)
    return await repo.save(
        User(id=UserId(user_id), username=username or f"user{user_id}")
    )


async def seed_article(
    env: AsyncContainer, article_id: int, author_id: int, title: str = "Article"
) -> Article:
    """Store an article (and its author) in the environment's repositories."""
    users = await env.get(UserRepository)
    if await users.find_by_id(UserId(author_id)) is None:
        await seed_user(env, author_id)

    repo = await env.get(ArticleRepository)
    return await repo.save(
        Article(id=ArticleId(article_id), title=title, author_id=UserId(author_id))
    )
