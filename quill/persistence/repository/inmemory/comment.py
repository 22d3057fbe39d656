"""In-memory comment repository for testing."""

from datetime import datetime
from itertools import count
from typing import Dict, List, Optional, Sequence

from quill.domain.model.comment import Comment
from quill.domain.repository.comment import CommentRepository
from quill.domain.value import ArticleId, CommentId, CommentStatus, UserId


def _thread_order(comment: Comment) -> tuple:
    return (comment.created_at, comment.id)


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}
        self._ids = count(1)

    def _select(self, published_only: bool, predicate) -> List[Comment]:
        return [
            c
            for c in self._comments.values()
            if predicate(c)
            and (not published_only or c.status == CommentStatus.PUBLISHED)
        ]

    async def next_id(self) -> CommentId:
        """Reserve the next comment ID."""
        return CommentId(next(self._ids))

    async def find_by_id(
        self, comment_id: CommentId, lock: bool = False
    ) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_children(
        self,
        parent_id: CommentId,
        limit: int,
        offset: int = 0,
        published_only: bool = True,
    ) -> List[Comment]:
        """Find direct replies of a comment."""
        comments = self._select(published_only, lambda c: c.parent_id == parent_id)
        comments.sort(key=_thread_order)
        return comments[offset : offset + limit]

    async def count_children(
        self, parent_id: CommentId, published_only: bool = True
    ) -> int:
        """Count direct replies of a comment."""
        return len(self._select(published_only, lambda c: c.parent_id == parent_id))

    async def find_children_of_many(
        self,
        parent_ids: Sequence[CommentId],
        limit_per_parent: int,
        published_only: bool = True,
    ) -> Dict[CommentId, List[Comment]]:
        """Find the first replies of several comments."""
        grouped: Dict[CommentId, List[Comment]] = {}
        for parent_id in parent_ids:
            grouped[parent_id] = await self.find_children(
                parent_id, limit=limit_per_parent, published_only=published_only
            )
        return grouped

    async def find_by_root(
        self,
        root_id: CommentId,
        limit: int,
        offset: int = 0,
        published_only: bool = True,
    ) -> List[Comment]:
        """Find every comment of a thread except the root."""
        comments = self._select(
            published_only, lambda c: c.root_id == root_id and c.id != root_id
        )
        comments.sort(key=_thread_order)
        return comments[offset : offset + limit]

    async def count_by_root(self, root_id: CommentId, published_only: bool = True) -> int:
        """Count the descendants of a thread's root."""
        return len(
            self._select(
                published_only, lambda c: c.root_id == root_id and c.id != root_id
            )
        )

    async def find_top_level_by_article(
        self,
        article_id: ArticleId,
        limit: int,
        offset: int = 0,
        published_only: bool = True,
    ) -> List[Comment]:
        """Find top-level comments of an article, newest first."""
        comments = self._select(
            published_only,
            lambda c: c.article_id == article_id and c.parent_id is None,
        )
        comments.sort(key=_thread_order, reverse=True)
        return comments[offset : offset + limit]

    async def count_top_level_by_article(
        self, article_id: ArticleId, published_only: bool = True
    ) -> int:
        """Count top-level comments of an article."""
        return len(
            self._select(
                published_only,
                lambda c: c.article_id == article_id and c.parent_id is None,
            )
        )

    async def find_by_author(
        self,
        author_id: UserId,
        limit: int,
        offset: int = 0,
        published_only: bool = True,
    ) -> List[Comment]:
        """Find comments by a specific author, newest first."""
        comments = self._select(published_only, lambda c: c.author_id == author_id)
        comments.sort(key=_thread_order, reverse=True)
        return comments[offset : offset + limit]

    async def count_by_author(
        self, author_id: UserId, published_only: bool = True
    ) -> int:
        """Count comments by a specific author."""
        return len(self._select(published_only, lambda c: c.author_id == author_id))

    async def count_by_article(
        self, article_id: ArticleId, published_only: bool = True
    ) -> int:
        """Count all comments of an article."""
        return len(self._select(published_only, lambda c: c.article_id == article_id))

    async def save(self, comment: Comment) -> Comment:
        """Save or update a comment."""
        self._comments[comment.id] = comment
        return comment

    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Replace the content of a comment that is not deleted."""
        comment = self._comments.get(comment_id)
        if comment is None or comment.is_deleted:
            return None
        updated = comment.model_copy(
            update={"content": content, "updated_at": datetime.now()}
        )
        self._comments[comment_id] = updated
        return updated

    async def update_status(
        self, comment_id: CommentId, status: CommentStatus
    ) -> Optional[Comment]:
        """Change the status of a comment."""
        comment = self._comments.get(comment_id)
        if comment is None:
            return None
        updated = comment.model_copy(
            update={"status": status, "updated_at": datetime.now()}
        )
        self._comments[comment_id] = updated
        return updated

    def _add(self, comment_id: CommentId, field: str, delta: int) -> None:
        comment = self._comments.get(comment_id)
        if comment is None:
            return
        value = getattr(comment, field) + delta
        if value < 0:
            return
        self._comments[comment_id] = comment.model_copy(update={field: value})

    async def increment_reply_count(self, comment_id: CommentId) -> None:
        """Increment reply_count by 1."""
        self._add(comment_id, "reply_count", 1)

    async def decrement_reply_count(self, comment_id: CommentId) -> None:
        """Decrement reply_count by 1 (minimum 0)."""
        self._add(comment_id, "reply_count", -1)

    async def increment_likes(self, comment_id: CommentId) -> None:
        """Increment likes by 1."""
        self._add(comment_id, "likes", 1)

    async def decrement_likes(self, comment_id: CommentId) -> None:
        """Decrement likes by 1 (minimum 0)."""
        self._add(comment_id, "likes", -1)

    async def delete(self, comment_id: CommentId) -> List[Comment]:
        """Delete a comment and every reply below it."""
        removed: List[Comment] = []
        doomed = [comment_id]
        while doomed:
            current = doomed.pop()
            comment = self._comments.pop(current, None)
            if comment is None:
                continue
            removed.append(comment)
            doomed.extend(
                c.id for c in self._comments.values() if c.parent_id == current
            )
        return removed
