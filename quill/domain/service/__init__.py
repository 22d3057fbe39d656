"""Domain services."""

from .article_service import ArticleService
from .base import Service
from .comment_like_service import CommentLikeService
from .comment_service import CommentService
from .decoration_service import DecorationService, EquippedDecoration
from .jwt_service import JWTService
from .user_service import UserService

__all__ = [
    "ArticleService",
    "CommentLikeService",
    "CommentService",
    "DecorationService",
    "EquippedDecoration",
    "JWTService",
    "Service",
    "UserService",
]
