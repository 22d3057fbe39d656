"""Repository interfaces for the Quill domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from quill.domain.repository.article import ArticleRepository
from quill.domain.repository.comment import CommentRepository
from quill.domain.repository.comment_like import CommentLikeRepository
from quill.domain.repository.decoration import DecorationRepository
from quill.domain.repository.user import UserRepository

__all__ = [
    "ArticleRepository",
    "CommentRepository",
    "CommentLikeRepository",
    "DecorationRepository",
    "UserRepository",
]
