"""Unit tests for CreateCommentUseCase."""

import pytest

from quill.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from quill.domain.error import InvalidArgumentError, NotFoundError
from quill.domain.model import Decoration, UserDecoration
from quill.domain.repository import ArticleRepository, DecorationRepository
from quill.domain.value import (
    ArticleId,
    CommentId,
    DecorationId,
    DecorationType,
    UserId,
)
from tests.harness import create_env_fixture, seed_article, seed_user

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_create_comment_increments_article_count(self, unit_env):
        """Creating comment should increment the article's comment count."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        article_repo = await unit_env.get(ArticleRepository)
        await seed_article(unit_env, article_id=1, author_id=1)
        await seed_user(unit_env, 2, "alice")

        # Act
        item = await use_case.execute(
            CreateCommentRequest(
                article_id=ArticleId(1), content="Nice read", author_id=UserId(2)
            )
        )

        # Assert
        assert item.content == "Nice read"
        assert item.root_id == item.id
        assert item.author is not None
        assert item.author.username == "alice"
        article = await article_repo.find_by_id(ArticleId(1))
        assert article.comment_count == 1

    @pytest.mark.asyncio
    async def test_reply_carries_parent_and_root(self, unit_env):
        """A reply's item points at its parent and its thread root."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        await seed_article(unit_env, article_id=1, author_id=1)
        top = await use_case.execute(
            CreateCommentRequest(article_id=ArticleId(1), content="A", author_id=UserId(1))
        )
        mid = await use_case.execute(
            CreateCommentRequest(
                article_id=ArticleId(1),
                content="B",
                author_id=UserId(1),
                parent_id=top.id,
            )
        )

        # Act
        leaf = await use_case.execute(
            CreateCommentRequest(
                article_id=ArticleId(1),
                content="C",
                author_id=UserId(1),
                parent_id=mid.id,
            )
        )

        # Assert
        assert (leaf.parent_id, leaf.root_id) == (mid.id, top.id)

    @pytest.mark.asyncio
    async def test_author_carries_equipped_decorations(self, unit_env):
        """The author block lists the author's equipped decorations."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        decoration_repo = await unit_env.get(DecorationRepository)
        await seed_article(unit_env, article_id=1, author_id=1)
        await decoration_repo.save(
            Decoration(
                id=DecorationId(1),
                name="Bubble",
                type=DecorationType.COMMENT_BUBBLE,
                image_url="https://cdn.example.com/bubble.png",
            )
        )
        await decoration_repo.save_user_decoration(
            UserDecoration(user_id=UserId(1), decoration_id=DecorationId(1), is_using=True)
        )

        # Act
        item = await use_case.execute(
            CreateCommentRequest(article_id=ArticleId(1), content="hi", author_id=UserId(1))
        )

        # Assert
        decorations = item.author.equipped_decorations
        assert decorations[DecorationType.COMMENT_BUBBLE].name == "Bubble"
        dumped = item.model_dump(mode="json")
        assert "COMMENT_BUBBLE" in dumped["author"]["equippedDecorations"]

    @pytest.mark.asyncio
    async def test_missing_article_raises(self, unit_env):
        """Commenting on a missing article fails."""
        use_case = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(NotFoundError, match="Article not found"):
            await use_case.execute(
                CreateCommentRequest(
                    article_id=ArticleId(404), content="hello", author_id=UserId(1)
                )
            )

    @pytest.mark.asyncio
    async def test_missing_parent_leaves_count_untouched(self, unit_env):
        """A failed reply must not change the article's comment count."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        article_repo = await unit_env.get(ArticleRepository)
        await seed_article(unit_env, article_id=1, author_id=1)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateCommentRequest(
                    article_id=ArticleId(1),
                    content="reply",
                    author_id=UserId(1),
                    parent_id=CommentId(77),
                )
            )

        article = await article_repo.find_by_id(ArticleId(1))
        assert article.comment_count == 0

    @pytest.mark.asyncio
    async def test_parent_on_other_article_raises(self, unit_env):
        """The parent must belong to the same article."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        await seed_article(unit_env, article_id=1, author_id=1)
        await seed_article(unit_env, article_id=2, author_id=1)
        parent = await use_case.execute(
            CreateCommentRequest(article_id=ArticleId(1), content="A", author_id=UserId(1))
        )

        # Act & Assert
        with pytest.raises(InvalidArgumentError):
            await use_case.execute(
                CreateCommentRequest(
                    article_id=ArticleId(2),
                    content="B",
                    author_id=UserId(1),
                    parent_id=parent.id,
                )
            )

    def test_empty_content_is_rejected(self):
        """Content must not be empty."""
        with pytest.raises(ValueError):
            CreateCommentRequest(article_id=ArticleId(1), content="", author_id=UserId(1))
