"""Unit tests for LikeCommentUseCase and UnlikeCommentUseCase."""

import pytest

from quill.application.usecase.comment import (
    LikeCommentRequest,
    LikeCommentUseCase,
    UnlikeCommentUseCase,
)
from quill.domain.error import ConflictError
from quill.domain.service import CommentService
from quill.domain.value import ArticleId, UserId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestLikeCommentUseCase:
    """Tests for like and unlike."""

    @pytest.mark.asyncio
    async def test_like_then_unlike(self, unit_env):
        """Liking and unliking report the resulting count."""
        # Arrange
        like = await unit_env.get(LikeCommentUseCase)
        unlike = await unit_env.get(UnlikeCommentUseCase)
        comment_service = await unit_env.get(CommentService)
        comment = await comment_service.create_comment(ArticleId(1), UserId(1), "hi")
        request = LikeCommentRequest(comment_id=comment.id, user_id=UserId(5))

        # Act
        liked = await like.execute(request)
        unliked = await unlike.execute(request)

        # Assert
        assert (liked.liked, liked.likes) == (True, 1)
        assert (unliked.liked, unliked.likes) == (False, 0)
        assert liked.model_dump() == {"commentId": comment.id, "liked": True, "likes": 1}

    @pytest.mark.asyncio
    async def test_double_like_conflicts(self, unit_env):
        like = await unit_env.get(LikeCommentUseCase)
        comment_service = await unit_env.get(CommentService)
        comment = await comment_service.create_comment(ArticleId(1), UserId(1), "hi")
        request = LikeCommentRequest(comment_id=comment.id, user_id=UserId(5))
        await like.execute(request)

        with pytest.raises(ConflictError):
            await like.execute(request)
