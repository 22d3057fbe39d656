"""Domain value objects for Quill."""

from quill.domain.value.identifiers import (
    ArticleId,
    CommentId,
    CommentLikeId,
    DecorationId,
    UserId,
)
from quill.domain.value.pagination import (
    ListResult,
    NestedList,
    NestedListResult,
    PaginationMeta,
)
from quill.domain.value.principal import Principal
from quill.domain.value.types import (
    CommentStatus,
    DecorationRarity,
    DecorationType,
    Permission,
)

__all__ = [
    # Identifiers
    "UserId",
    "ArticleId",
    "CommentId",
    "CommentLikeId",
    "DecorationId",
    # Types
    "CommentStatus",
    "DecorationType",
    "DecorationRarity",
    # Pagination
    "PaginationMeta",
    "ListResult",
    "NestedList",
    "NestedListResult",
    # Auth
    "Permission",
    "Principal",
]
