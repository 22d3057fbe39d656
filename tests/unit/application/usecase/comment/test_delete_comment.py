"""Unit tests for DeleteCommentUseCase."""

import pytest

from quill.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    ModerateCommentRequest,
    ModerateCommentUseCase,
)
from quill.config import CommentSettings, Settings
from quill.domain.error import NotAuthorizedError, NotFoundError
from quill.domain.repository import ArticleRepository
from quill.domain.service import CommentService
from quill.domain.value import (
    ArticleId,
    CommentId,
    CommentStatus,
    Permission,
    Principal,
    UserId,
)
from tests.harness import create_env_fixture, seed_article

unit_env = create_env_fixture()

hard_delete_env = create_env_fixture(
    settings=Settings(comments=CommentSettings(deletion_policy="hard"))
)

ARTICLE_AUTHOR = Principal(user_id=UserId(1))
COMMENTER = Principal(user_id=UserId(2))
STRANGER = Principal(user_id=UserId(3))
MODERATOR = Principal(
    user_id=UserId(4), permissions=frozenset({Permission.COMMENT_MANAGE})
)


async def _comment(env):
    await seed_article(env, article_id=1, author_id=1)
    create = await env.get(CreateCommentUseCase)
    return await create.execute(
        CreateCommentRequest(article_id=ArticleId(1), content="hi", author_id=UserId(2))
    )


class TestDeleteCommentUseCase:
    """Tests for DeleteCommentUseCase."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("principal", [COMMENTER, ARTICLE_AUTHOR, MODERATOR])
    async def test_allowed_callers(self, unit_env, principal):
        """Comment author, article author and managers may delete."""
        # Arrange
        use_case = await unit_env.get(DeleteCommentUseCase)
        comment_service = await unit_env.get(CommentService)
        article_repo = await unit_env.get(ArticleRepository)
        item = await _comment(unit_env)

        # Act
        await use_case.execute(
            DeleteCommentRequest(comment_id=item.id, principal=principal)
        )

        # Assert
        comment = await comment_service.get_comment(item.id)
        assert comment.status == CommentStatus.DELETED
        article = await article_repo.find_by_id(ArticleId(1))
        assert article.comment_count == 0

    @pytest.mark.asyncio
    async def test_stranger_cannot_delete(self, unit_env):
        """Should raise NotAuthorizedError for unrelated users."""
        # Arrange
        use_case = await unit_env.get(DeleteCommentUseCase)
        comment_service = await unit_env.get(CommentService)
        item = await _comment(unit_env)

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                DeleteCommentRequest(comment_id=item.id, principal=STRANGER)
            )

        comment = await comment_service.get_comment(item.id)
        assert comment.status == CommentStatus.PUBLISHED

    @pytest.mark.asyncio
    async def test_deleting_twice_counts_once(self, unit_env):
        """The article count drops only on the first deletion."""
        # Arrange
        use_case = await unit_env.get(DeleteCommentUseCase)
        article_repo = await unit_env.get(ArticleRepository)
        item = await _comment(unit_env)
        await _comment_again(unit_env)

        # Act
        request = DeleteCommentRequest(comment_id=item.id, principal=COMMENTER)
        await use_case.execute(request)
        await use_case.execute(request)

        # Assert
        article = await article_repo.find_by_id(ArticleId(1))
        assert article.comment_count == 1

    @pytest.mark.asyncio
    async def test_missing_comment(self, unit_env):
        use_case = await unit_env.get(DeleteCommentUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                DeleteCommentRequest(comment_id=CommentId(3), principal=MODERATOR)
            )

    @pytest.mark.asyncio
    async def test_hard_delete_counts_every_removed_reply(self, hard_delete_env):
        """A cascading delete lowers the article count by the whole subtree."""
        # Arrange
        use_case = await hard_delete_env.get(DeleteCommentUseCase)
        comment_service = await hard_delete_env.get(CommentService)
        article_repo = await hard_delete_env.get(ArticleRepository)
        a = await _comment(hard_delete_env)
        b = await _reply(hard_delete_env, a.id)
        await _reply(hard_delete_env, b.id)

        # Act
        await use_case.execute(
            DeleteCommentRequest(comment_id=b.id, principal=MODERATOR)
        )

        # Assert
        article = await article_repo.find_by_id(ArticleId(1))
        assert article.comment_count == 1
        assert article.comment_count == await comment_service.count_by_article(
            ArticleId(1)
        )

    @pytest.mark.asyncio
    async def test_deleting_rejected_comment_keeps_count(self, unit_env):
        """Only published comments are counted, so none is taken away."""
        # Arrange
        use_case = await unit_env.get(DeleteCommentUseCase)
        moderate = await unit_env.get(ModerateCommentUseCase)
        article_repo = await unit_env.get(ArticleRepository)
        item = await _comment(unit_env)
        await _comment_again(unit_env)
        await moderate.execute(
            ModerateCommentRequest(
                comment_id=item.id,
                principal=MODERATOR,
                status=CommentStatus.REJECTED,
            )
        )

        # Act
        await use_case.execute(
            DeleteCommentRequest(comment_id=item.id, principal=MODERATOR)
        )

        # Assert
        article = await article_repo.find_by_id(ArticleId(1))
        assert article.comment_count == 1


async def _comment_again(env):
    create = await env.get(CreateCommentUseCase)
    return await create.execute(
        CreateCommentRequest(
            article_id=ArticleId(1), content="again", author_id=UserId(2)
        )
    )


async def _reply(env, parent_id):
    create = await env.get(CreateCommentUseCase)
    return await create.execute(
        CreateCommentRequest(
            article_id=ArticleId(1),
            content="reply",
            author_id=UserId(2),
            parent_id=parent_id,
        )
    )
