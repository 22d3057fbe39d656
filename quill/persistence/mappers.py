"""Mappers for converting between database rows and domain models.

Domain models are immutable Pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM mapping.
"""

from typing import Any, Dict

from quill.domain.model import (
    Article,
    Comment,
    CommentLike,
    Decoration,
    User,
    UserDecoration,
)
from quill.domain.value import (
    ArticleId,
    CommentId,
    CommentLikeId,
    CommentStatus,
    DecorationId,
    DecorationRarity,
    DecorationType,
    UserId,
)


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model."""
    return User(
        id=UserId(row["id"]),
        username=row["username"],
        nickname=row.get("nickname"),
        avatar_url=row.get("avatar_url"),
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return user.model_dump()


def row_to_article(row: Dict[str, Any]) -> Article:
    """Convert database row to Article domain model."""
    return Article(
        id=ArticleId(row["id"]),
        title=row["title"],
        author_id=UserId(row["author_id"]),
        comment_count=row["comment_count"],
        created_at=row["created_at"],
    )


def article_to_dict(article: Article) -> Dict[str, Any]:
    """Convert Article domain model to database dict."""
    return article.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(row["id"]),
        article_id=ArticleId(row["article_id"]),
        author_id=UserId(row["author_id"]),
        content=row["content"],
        parent_id=CommentId(row["parent_id"])
        if row.get("parent_id") is not None
        else None,
        root_id=CommentId(row["root_id"]),
        status=CommentStatus(row["status"]),
        likes=row["likes"],
        reply_count=row["reply_count"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = comment.model_dump()
    data["status"] = comment.status.value
    return data


def row_to_comment_like(row: Dict[str, Any]) -> CommentLike:
    """Convert database row to CommentLike domain model."""
    return CommentLike(
        id=CommentLikeId(row["id"]),
        comment_id=CommentId(row["comment_id"]),
        user_id=UserId(row["user_id"]),
        created_at=row["created_at"],
    )


def comment_like_to_dict(like: CommentLike) -> Dict[str, Any]:
    """Convert CommentLike domain model to database dict."""
    return like.model_dump()


def row_to_decoration(row: Dict[str, Any]) -> Decoration:
    """Convert database row to Decoration domain model."""
    return Decoration(
        id=DecorationId(row["id"]),
        name=row["name"],
        type=DecorationType(row["type"]),
        image_url=row["image_url"],
        rarity=DecorationRarity(row["rarity"]),
    )


def decoration_to_dict(decoration: Decoration) -> Dict[str, Any]:
    """Convert Decoration domain model to database dict."""
    data = decoration.model_dump()
    data["type"] = decoration.type.value
    data["rarity"] = decoration.rarity.value
    return data


def row_to_user_decoration(row: Dict[str, Any]) -> UserDecoration:
    """Convert database row to UserDecoration domain model."""
    return UserDecoration(
        user_id=UserId(row["user_id"]),
        decoration_id=DecorationId(row["decoration_id"]),
        is_using=row["is_using"],
        is_permanent=row["is_permanent"],
        expires_at=row.get("expires_at"),
        created_at=row["created_at"],
    )


def user_decoration_to_dict(user_decoration: UserDecoration) -> Dict[str, Any]:
    """Convert UserDecoration domain model to database dict."""
    return user_decoration.model_dump()
