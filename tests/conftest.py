"""Test configuration and fixtures."""

from datetime import datetime, timedelta

import logfire

from quill.domain.model import Comment
from quill.domain.value import ArticleId, CommentId, CommentStatus, UserId

# Keep spans local: nothing is sent and nothing is printed
logfire.configure(send_to_logfire=False, console=False)

BASE_TIME = datetime(2025, 1, 1, 12, 0, 0)


def make_comment(
    comment_id: int,
    article_id: int = 1,
    author_id: int = 1,
    parent_id: int | None = None,
    root_id: int | None = None,
    status: CommentStatus = CommentStatus.PUBLISHED,
    minutes: int = 0,
    content: str | None = None,
) -> Comment:
    """Helper function to build a comment for repository-level tests.

    Args:
        comment_id: Comment ID
        article_id: Article the comment belongs to
        author_id: Author user ID
        parent_id: Parent comment ID (None for top-level)
        root_id: Thread root (defaults to the comment itself when top-level)
        status: Comment status
        minutes: Creation time, in minutes after ``BASE_TIME``
        content: Comment text (defaults to ``"comment <id>"``)

    Returns:
        Comment domain model
    """
    if root_id is None:
        root_id = comment_id if parent_id is None else parent_id
    created_at = BASE_TIME + timedelta(minutes=minutes)
    return Comment(
        id=CommentId(comment_id),
        article_id=ArticleId(article_id),
        author_id=UserId(author_id),
        content=content or f"comment {comment_id}",
        parent_id=CommentId(parent_id) if parent_id is not None else None,
        root_id=CommentId(root_id),
        status=status,
        created_at=created_at,
        updated_at=created_at,
    )
