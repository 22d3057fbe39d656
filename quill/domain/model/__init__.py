"""Domain model entities for Quill."""

from quill.domain.model.article import Article
from quill.domain.model.comment import Comment
from quill.domain.model.comment_like import CommentLike
from quill.domain.model.decoration import Decoration, UserDecoration
from quill.domain.model.user import User

__all__ = [
    "Article",
    "Comment",
    "CommentLike",
    "Decoration",
    "User",
    "UserDecoration",
]
