"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, status
from pydantic import Field

from quill.application.usecase.comment import (
    CommentItem,
    CommentItemWithReplies,
    CountArticleCommentsRequest,
    CountArticleCommentsResponse,
    CountArticleCommentsUseCase,
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetRepliesRequest,
    GetRepliesUseCase,
    GetThreadRequest,
    GetThreadUseCase,
    LikeCommentRequest,
    LikeCommentResponse,
    LikeCommentUseCase,
    ListArticleCommentsRequest,
    ListArticleCommentsUseCase,
    ListUserCommentsRequest,
    ListUserCommentsUseCase,
    ModerateCommentRequest,
    ModerateCommentUseCase,
    UnlikeCommentUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from quill.config import PaginationSettings
from quill.domain.service import JWTService
from quill.domain.value import (
    ArticleId,
    CommentId,
    CommentStatus,
    ListResult,
    NestedListResult,
    Permission,
    UserId,
)
from quill.domain.value.common import WireModel
from quill.interface.api.auth import require_permission, require_principal
from quill.interface.api.envelope import Envelope, ok

router = APIRouter(prefix="/comment", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(WireModel):
    """API request for creating a comment."""

    article_id: ArticleId
    content: str = Field(min_length=1, max_length=10000)
    parent_id: CommentId | None = None  # Parent comment ID for replies


class UpdateCommentAPIRequest(WireModel):
    """API request for editing a comment."""

    content: str = Field(min_length=1, max_length=10000)


class ModerateCommentAPIRequest(WireModel):
    """API request for changing a comment's status."""

    status: CommentStatus


def _limit(limit: int | None, settings: PaginationSettings) -> int:
    return settings.default_limit if limit is None else limit


@router.post(
    "",
    response_model=Envelope[CommentItem],
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> Envelope[CommentItem]:
    """Comment on an article or reply to another comment.

    Requires the ``comment:create`` permission.

    Returns:
        Created comment
    """
    principal = require_principal(
        jwt_service, authorization, auth_token, "create comments"
    )
    require_permission(principal, Permission.COMMENT_CREATE)

    item = await create_comment_use_case.execute(
        CreateCommentRequest(
            article_id=request.article_id,
            content=request.content,
            author_id=principal.user_id,
            parent_id=request.parent_id,
        )
    )
    return ok(item, code=status.HTTP_201_CREATED)


@router.get(
    "/article/{article_id}",
    response_model=Envelope[ListResult[CommentItemWithReplies]],
)
async def list_article_comments(
    article_id: ArticleId,
    use_case: FromDishka[ListArticleCommentsUseCase],
    pagination: FromDishka[PaginationSettings],
    page: int = 1,
    limit: int | None = None,
) -> Envelope[ListResult[CommentItemWithReplies]]:
    """Top-level comments of an article, newest first, with reply previews."""
    result = await use_case.execute(
        ListArticleCommentsRequest(
            article_id=article_id, page=page, limit=_limit(limit, pagination)
        )
    )
    return ok(result)


@router.get(
    "/article/{article_id}/count",
    response_model=Envelope[CountArticleCommentsResponse],
)
async def count_article_comments(
    article_id: ArticleId,
    use_case: FromDishka[CountArticleCommentsUseCase],
) -> Envelope[CountArticleCommentsResponse]:
    """Number of published comments of an article, replies included."""
    result = await use_case.execute(CountArticleCommentsRequest(article_id=article_id))
    return ok(result)


@router.get("/user/{user_id}", response_model=Envelope[ListResult[CommentItem]])
async def list_user_comments(
    user_id: UserId,
    use_case: FromDishka[ListUserCommentsUseCase],
    pagination: FromDishka[PaginationSettings],
    page: int = 1,
    limit: int | None = None,
) -> Envelope[ListResult[CommentItem]]:
    """A user's comments, newest first."""
    result = await use_case.execute(
        ListUserCommentsRequest(
            user_id=user_id, page=page, limit=_limit(limit, pagination)
        )
    )
    return ok(result)


@router.get(
    "/{comment_id}/replies", response_model=Envelope[ListResult[CommentItem]]
)
async def get_replies(
    comment_id: CommentId,
    use_case: FromDishka[GetRepliesUseCase],
    pagination: FromDishka[PaginationSettings],
    page: int = 1,
    limit: int | None = None,
) -> Envelope[ListResult[CommentItem]]:
    """Direct replies of a comment, oldest first."""
    result = await use_case.execute(
        GetRepliesRequest(
            comment_id=comment_id, page=page, limit=_limit(limit, pagination)
        )
    )
    return ok(result)


@router.get(
    "/{comment_id}",
    response_model=Envelope[NestedListResult[CommentItem, CommentItem]],
)
async def get_thread(
    comment_id: CommentId,
    use_case: FromDishka[GetThreadUseCase],
    pagination: FromDishka[PaginationSettings],
    page: int = 1,
    limit: int | None = None,
) -> Envelope[NestedListResult[CommentItem, CommentItem]]:
    """The thread a comment belongs to.

    ``item`` is the thread's root and ``nestedList`` one page of every reply
    below it, oldest first.
    """
    result = await use_case.execute(
        GetThreadRequest(
            comment_id=comment_id, page=page, limit=_limit(limit, pagination)
        )
    )
    return ok(result)


@router.patch("/{comment_id}", response_model=Envelope[CommentItem])
async def update_comment(
    comment_id: CommentId,
    request: UpdateCommentAPIRequest,
    use_case: FromDishka[UpdateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> Envelope[CommentItem]:
    """Edit a comment's content.

    The author may edit their own comment; comment managers may edit any.
    """
    principal = require_principal(
        jwt_service, authorization, auth_token, "edit comments"
    )
    require_permission(principal, Permission.COMMENT_UPDATE)

    item = await use_case.execute(
        UpdateCommentRequest(
            comment_id=comment_id, principal=principal, content=request.content
        )
    )
    return ok(item)


@router.patch("/{comment_id}/status", response_model=Envelope[CommentItem])
async def moderate_comment(
    comment_id: CommentId,
    request: ModerateCommentAPIRequest,
    use_case: FromDishka[ModerateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> Envelope[CommentItem]:
    """Set a comment's status. Requires ``comment:manage``."""
    principal = require_principal(
        jwt_service, authorization, auth_token, "moderate comments"
    )

    item = await use_case.execute(
        ModerateCommentRequest(
            comment_id=comment_id, principal=principal, status=request.status
        )
    )
    return ok(item)


@router.delete("/{comment_id}", response_model=Envelope[None])
async def delete_comment(
    comment_id: CommentId,
    use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> Envelope[None]:
    """Delete a comment.

    Allowed for the comment's author, the article's author and comment
    managers.
    """
    principal = require_principal(
        jwt_service, authorization, auth_token, "delete comments"
    )
    require_permission(principal, Permission.COMMENT_DELETE)

    await use_case.execute(
        DeleteCommentRequest(comment_id=comment_id, principal=principal)
    )
    return ok(None)


@router.post("/{comment_id}/like", response_model=Envelope[LikeCommentResponse])
async def like_comment(
    comment_id: CommentId,
    use_case: FromDishka[LikeCommentUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> Envelope[LikeCommentResponse]:
    """Like a comment."""
    principal = require_principal(
        jwt_service, authorization, auth_token, "like comments"
    )
    result = await use_case.execute(
        LikeCommentRequest(comment_id=comment_id, user_id=principal.user_id)
    )
    return ok(result)


@router.delete("/{comment_id}/like", response_model=Envelope[LikeCommentResponse])
async def unlike_comment(
    comment_id: CommentId,
    use_case: FromDishka[UnlikeCommentUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> Envelope[LikeCommentResponse]:
    """Take back a like."""
    principal = require_principal(
        jwt_service, authorization, auth_token, "like comments"
    )
    result = await use_case.execute(
        LikeCommentRequest(comment_id=comment_id, user_id=principal.user_id)
    )
    return ok(result)
