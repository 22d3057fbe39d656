"""PostgreSQL repository implementations."""

from quill.persistence.repository.article import PostgresArticleRepository
from quill.persistence.repository.comment import PostgresCommentRepository
from quill.persistence.repository.comment_like import PostgresCommentLikeRepository
from quill.persistence.repository.decoration import PostgresDecorationRepository
from quill.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresArticleRepository",
    "PostgresCommentRepository",
    "PostgresCommentLikeRepository",
    "PostgresDecorationRepository",
    "PostgresUserRepository",
]
