"""Unit tests for the comment read use cases."""

import pytest

from quill.application.usecase.comment import (
    CountArticleCommentsRequest,
    CountArticleCommentsUseCase,
    GetRepliesRequest,
    GetRepliesUseCase,
    GetThreadRequest,
    GetThreadUseCase,
    ListArticleCommentsRequest,
    ListArticleCommentsUseCase,
    ListUserCommentsRequest,
    ListUserCommentsUseCase,
)
from quill.domain.error import InvalidArgumentError, NotFoundError
from quill.domain.service import CommentService
from quill.domain.value import ArticleId, CommentId, CommentStatus, UserId
from tests.harness import create_env_fixture, seed_article, seed_user

unit_env = create_env_fixture()

ARTICLE = ArticleId(1)


async def _thread(env):
    """Seed an article with thread A -> B -> C and a second top-level D."""
    await seed_article(env, article_id=1, author_id=1)
    await seed_user(env, 2, "bob")
    comment_service = await env.get(CommentService)
    a = await comment_service.create_comment(ARTICLE, UserId(1), "A")
    b = await comment_service.create_comment(ARTICLE, UserId(2), "B", parent_id=a.id)
    c = await comment_service.create_comment(ARTICLE, UserId(1), "C", parent_id=b.id)
    d = await comment_service.create_comment(ARTICLE, UserId(2), "D")
    return a, b, c, d


class TestGetThreadUseCase:
    """Tests for GetThreadUseCase."""

    @pytest.mark.asyncio
    async def test_thread_from_root(self, unit_env):
        """The root is the item; every reply is in the nested list."""
        # Arrange
        use_case = await unit_env.get(GetThreadUseCase)
        a, b, c, _ = await _thread(unit_env)

        # Act
        result = await use_case.execute(GetThreadRequest(comment_id=a.id))

        # Assert
        assert result.item.id == a.id
        assert [i.id for i in result.nested_list.data] == [b.id, c.id]
        assert result.nested_list.meta.total == 2
        assert result.nested_list.data[0].author.username == "bob"

    @pytest.mark.asyncio
    async def test_thread_from_any_member(self, unit_env):
        """Opening the thread from a reply still shows it from the root."""
        use_case = await unit_env.get(GetThreadUseCase)
        a, _, c, _ = await _thread(unit_env)

        result = await use_case.execute(GetThreadRequest(comment_id=c.id))

        assert result.item.id == a.id
        assert result.nested_list.meta.total == 2

    @pytest.mark.asyncio
    async def test_limit_is_capped(self, unit_env):
        """Requested page sizes above the maximum are reduced to it."""
        use_case = await unit_env.get(GetThreadUseCase)
        a, _, _, _ = await _thread(unit_env)

        result = await use_case.execute(
            GetThreadRequest(comment_id=a.id, page=1, limit=10_000)
        )

        assert result.nested_list.meta.limit == 100

    @pytest.mark.asyncio
    async def test_zero_limit_is_rejected(self, unit_env):
        use_case = await unit_env.get(GetThreadUseCase)
        a, _, _, _ = await _thread(unit_env)

        with pytest.raises(InvalidArgumentError):
            await use_case.execute(GetThreadRequest(comment_id=a.id, limit=0))

    @pytest.mark.asyncio
    async def test_missing_comment(self, unit_env):
        use_case = await unit_env.get(GetThreadUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetThreadRequest(comment_id=CommentId(1)))


class TestGetRepliesUseCase:
    """Tests for GetRepliesUseCase."""

    @pytest.mark.asyncio
    async def test_direct_replies_only(self, unit_env):
        use_case = await unit_env.get(GetRepliesUseCase)
        a, b, _, _ = await _thread(unit_env)

        result = await use_case.execute(GetRepliesRequest(comment_id=a.id))

        assert [i.id for i in result.data] == [b.id]
        assert result.meta.total == 1
        assert result.meta.total_pages == 1


class TestListArticleCommentsUseCase:
    """Tests for ListArticleCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_top_level_with_reply_previews(self, unit_env):
        """Top-level comments come newest first, each with its first replies."""
        # Arrange
        use_case = await unit_env.get(ListArticleCommentsUseCase)
        a, b, _, d = await _thread(unit_env)

        # Act
        result = await use_case.execute(ListArticleCommentsRequest(article_id=ARTICLE))

        # Assert
        assert [i.id for i in result.data] == [d.id, a.id]
        assert result.data[0].replies == []
        assert [r.id for r in result.data[1].replies] == [b.id]
        assert result.meta.total == 2

    @pytest.mark.asyncio
    async def test_previews_skip_hidden_replies(self, unit_env):
        """Rejected replies are not previewed."""
        # Arrange
        use_case = await unit_env.get(ListArticleCommentsUseCase)
        comment_service = await unit_env.get(CommentService)
        a, b, _, _ = await _thread(unit_env)
        await comment_service.update_status(b.id, CommentStatus.REJECTED)

        # Act
        result = await use_case.execute(ListArticleCommentsRequest(article_id=ARTICLE))

        # Assert
        thread = next(i for i in result.data if i.id == a.id)
        assert thread.replies == []

    @pytest.mark.asyncio
    async def test_missing_article(self, unit_env):
        use_case = await unit_env.get(ListArticleCommentsUseCase)

        with pytest.raises(NotFoundError, match="Article not found"):
            await use_case.execute(ListArticleCommentsRequest(article_id=ArticleId(9)))


class TestListUserCommentsUseCase:
    """Tests for ListUserCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_user_comments_newest_first(self, unit_env):
        use_case = await unit_env.get(ListUserCommentsUseCase)
        _, b, _, d = await _thread(unit_env)

        result = await use_case.execute(ListUserCommentsRequest(user_id=UserId(2)))

        assert [i.id for i in result.data] == [d.id, b.id]
        assert all(i.author.id == UserId(2) for i in result.data)

    @pytest.mark.asyncio
    async def test_missing_user(self, unit_env):
        use_case = await unit_env.get(ListUserCommentsUseCase)

        with pytest.raises(NotFoundError, match="User not found"):
            await use_case.execute(ListUserCommentsRequest(user_id=UserId(42)))


class TestCountArticleCommentsUseCase:
    """Tests for CountArticleCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_counts_replies_too(self, unit_env):
        use_case = await unit_env.get(CountArticleCommentsUseCase)
        await _thread(unit_env)

        result = await use_case.execute(CountArticleCommentsRequest(article_id=ARTICLE))

        assert result.count == 4
        assert result.model_dump() == {"articleId": 1, "count": 4}
