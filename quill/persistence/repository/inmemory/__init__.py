"""In-memory repository implementations for testing."""

from .article import InMemoryArticleRepository
from .comment import InMemoryCommentRepository
from .comment_like import InMemoryCommentLikeRepository
from .decoration import InMemoryDecorationRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryArticleRepository",
    "InMemoryCommentRepository",
    "InMemoryCommentLikeRepository",
    "InMemoryDecorationRepository",
    "InMemoryUserRepository",
]
