"""Comment use cases."""

from .count_article_comments import (
    CountArticleCommentsRequest,
    CountArticleCommentsResponse,
    CountArticleCommentsUseCase,
)
from .create_comment import CreateCommentRequest, CreateCommentUseCase
from .delete_comment import DeleteCommentRequest, DeleteCommentUseCase
from .get_replies import GetRepliesRequest, GetRepliesUseCase
from .get_thread import GetThreadRequest, GetThreadUseCase
from .items import (
    CommentAuthor,
    CommentItem,
    CommentItemAssembler,
    CommentItemWithReplies,
)
from .like_comment import (
    LikeCommentRequest,
    LikeCommentResponse,
    LikeCommentUseCase,
    UnlikeCommentUseCase,
)
from .list_article_comments import (
    ListArticleCommentsRequest,
    ListArticleCommentsUseCase,
)
from .list_user_comments import ListUserCommentsRequest, ListUserCommentsUseCase
from .moderate_comment import ModerateCommentRequest, ModerateCommentUseCase
from .update_comment import UpdateCommentRequest, UpdateCommentUseCase

__all__ = [
    "CommentAuthor",
    "CommentItem",
    "CommentItemAssembler",
    "CommentItemWithReplies",
    "CountArticleCommentsRequest",
    "CountArticleCommentsResponse",
    "CountArticleCommentsUseCase",
    "CreateCommentRequest",
    "CreateCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentUseCase",
    "GetRepliesRequest",
    "GetRepliesUseCase",
    "GetThreadRequest",
    "GetThreadUseCase",
    "LikeCommentRequest",
    "LikeCommentResponse",
    "LikeCommentUseCase",
    "ListArticleCommentsRequest",
    "ListArticleCommentsUseCase",
    "ListUserCommentsRequest",
    "ListUserCommentsUseCase",
    "ModerateCommentRequest",
    "ModerateCommentUseCase",
    "UnlikeCommentUseCase",
    "UpdateCommentRequest",
    "UpdateCommentUseCase",
]
