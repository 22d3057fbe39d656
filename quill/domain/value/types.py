"""Domain enumerations for Quill."""

from enum import Enum


class CommentStatus(str, Enum):
    """Publication state of a comment."""

    PUBLISHED = "PUBLISHED"
    DRAFT = "DRAFT"
    DELETED = "DELETED"
    REJECTED = "REJECTED"


class DecorationType(str, Enum):
    """Slot a decoration occupies on a user's profile."""

    AVATAR_FRAME = "AVATAR_FRAME"
    BADGE = "BADGE"
    COMMENT_BUBBLE = "COMMENT_BUBBLE"
    NAMEPLATE = "NAMEPLATE"


class DecorationRarity(str, Enum):
    """How rare a decoration is."""

    COMMON = "COMMON"
    RARE = "RARE"
    EPIC = "EPIC"
    LEGENDARY = "LEGENDARY"


class Permission:
    """Permission names carried in access tokens."""

    COMMENT_CREATE = "comment:create"
    COMMENT_UPDATE = "comment:update"
    COMMENT_DELETE = "comment:delete"
    # Edit, moderate or delete any comment
    COMMENT_MANAGE = "comment:manage"
