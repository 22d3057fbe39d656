"""PostgreSQL implementation of Comment repository."""

from datetime import datetime
from typing import Dict, List, Optional, Sequence

from sqlalchemy import Select, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from quill.domain.model import Comment
from quill.domain.repository import CommentRepository
from quill.domain.value import ArticleId, CommentId, CommentStatus, UserId
from quill.persistence.mappers import comment_to_dict, row_to_comment
from quill.persistence.tables import comments_id_seq, comments_table

c = comments_table.c

# Thread order: oldest first, id breaks ties between equal timestamps
THREAD_ORDER = (c.created_at.asc(), c.id.asc())
NEWEST_FIRST = (c.created_at.desc(), c.id.desc())


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @staticmethod
    def _visible(stmt: Select, published_only: bool) -> Select:
        if published_only:
            return stmt.where(c.status == CommentStatus.PUBLISHED.value)
        return stmt

    async def _fetch_all(self, stmt: Select) -> List[Comment]:
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def _count(self, stmt: Select) -> int:
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def next_id(self) -> CommentId:
        """Reserve the next value of the comment id sequence."""
        result = await self.session.execute(select(comments_id_seq.next_value()))
        return CommentId(result.scalar_one())

    async def find_by_id(
        self, comment_id: CommentId, lock: bool = False
    ) -> Optional[Comment]:
        """Find a comment by ID, optionally holding FOR SHARE on the row."""
        stmt = select(comments_table).where(c.id == comment_id)
        if lock:
            stmt = stmt.with_for_update(read=True)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_children(
        self,
        parent_id: CommentId,
        limit: int,
        offset: int = 0,
        published_only: bool = True,
    ) -> List[Comment]:
        """Find direct replies of a comment."""
        stmt = select(comments_table).where(c.parent_id == parent_id)
        stmt = self._visible(stmt, published_only)
        stmt = stmt.order_by(*THREAD_ORDER).limit(limit).offset(offset)
        return await self._fetch_all(stmt)

    async def count_children(
        self, parent_id: CommentId, published_only: bool = True
    ) -> int:
        """Count direct replies of a comment."""
        stmt = select(func.count()).select_from(comments_table).where(
            c.parent_id == parent_id
        )
        return await self._count(self._visible(stmt, published_only))

    async def find_children_of_many(
        self,
        parent_ids: Sequence[CommentId],
        limit_per_parent: int,
        published_only: bool = True,
    ) -> Dict[CommentId, List[Comment]]:
        """Find the first replies of several comments in one query.

        Numbers each parent's replies with a window function and keeps the
        first ``limit_per_parent`` of every partition.
        """
        grouped: Dict[CommentId, List[Comment]] = {pid: [] for pid in parent_ids}
        if not parent_ids:
            return grouped

        position = (
            func.row_number()
            .over(partition_by=c.parent_id, order_by=THREAD_ORDER)
            .label("position")
        )
        inner = select(comments_table, position).where(c.parent_id.in_(parent_ids))
        ranked = self._visible(inner, published_only).subquery()

        stmt = (
            select(ranked)
            .where(ranked.c.position <= limit_per_parent)
            .order_by(ranked.c.parent_id, ranked.c.position)
        )
        for comment in await self._fetch_all(stmt):
            grouped[comment.parent_id].append(comment)
        return grouped

    async def find_by_root(
        self,
        root_id: CommentId,
        limit: int,
        offset: int = 0,
        published_only: bool = True,
    ) -> List[Comment]:
        """Find every comment of a thread except the root."""
        stmt = select(comments_table).where(c.root_id == root_id).where(c.id != root_id)
        stmt = self._visible(stmt, published_only)
        stmt = stmt.order_by(*THREAD_ORDER).limit(limit).offset(offset)
        return await self._fetch_all(stmt)

    async def count_by_root(self, root_id: CommentId, published_only: bool = True) -> int:
        """Count the descendants of a thread's root."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(c.root_id == root_id)
            .where(c.id != root_id)
        )
        return await self._count(self._visible(stmt, published_only))

    async def find_top_level_by_article(
        self,
        article_id: ArticleId,
        limit: int,
        offset: int = 0,
        published_only: bool = True,
    ) -> List[Comment]:
        """Find top-level comments of an article, newest first."""
        stmt = (
            select(comments_table)
            .where(c.article_id == article_id)
            .where(c.parent_id.is_(None))
        )
        stmt = self._visible(stmt, published_only)
        stmt = stmt.order_by(*NEWEST_FIRST).limit(limit).offset(offset)
        return await self._fetch_all(stmt)

    async def count_top_level_by_article(
        self, article_id: ArticleId, published_only: bool = True
    ) -> int:
        """Count top-level comments of an article."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(c.article_id == article_id)
            .where(c.parent_id.is_(None))
        )
        return await self._count(self._visible(stmt, published_only))

    async def find_by_author(
        self,
        author_id: UserId,
        limit: int,
        offset: int = 0,
        published_only: bool = True,
    ) -> List[Comment]:
        """Find comments by a specific author, newest first."""
        stmt = select(comments_table).where(c.author_id == author_id)
        stmt = self._visible(stmt, published_only)
        stmt = stmt.order_by(*NEWEST_FIRST).limit(limit).offset(offset)
        return await self._fetch_all(stmt)

    async def count_by_author(
        self, author_id: UserId, published_only: bool = True
    ) -> int:
        """Count comments by a specific author."""
        stmt = select(func.count()).select_from(comments_table).where(
            c.author_id == author_id
        )
        return await self._count(self._visible(stmt, published_only))

    async def count_by_article(
        self, article_id: ArticleId, published_only: bool = True
    ) -> int:
        """Count all comments of an article, replies included."""
        stmt = select(func.count()).select_from(comments_table).where(
            c.article_id == article_id
        )
        return await self._count(self._visible(stmt, published_only))

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        existing = await self.find_by_id(comment.id)
        comment_dict = comment_to_dict(comment)

        if existing:
            # root_id and parent_id never change after creation
            comment_dict.pop("root_id")
            comment_dict.pop("parent_id")
            stmt = (
                comments_table.update()
                .where(c.id == comment.id)
                .values(**comment_dict)
            )
        else:
            stmt = comments_table.insert().values(**comment_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return await self.find_by_id(comment.id) or comment

    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Replace the content of a comment that is not deleted."""
        stmt = (
            update(comments_table)
            .where(c.id == comment_id)
            .where(c.status != CommentStatus.DELETED.value)
            .values(content=content, updated_at=datetime.now())
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()

        if row is None:
            # Comment not found or deleted
            return None

        await self.session.flush()
        return row_to_comment(row._asdict())

    async def update_status(
        self, comment_id: CommentId, status: CommentStatus
    ) -> Optional[Comment]:
        """Change the status of a comment."""
        stmt = (
            update(comments_table)
            .where(c.id == comment_id)
            .values(status=status.value, updated_at=datetime.now())
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if row is None:
            return None

        await self.session.flush()
        return row_to_comment(row._asdict())

    async def _add(self, comment_id: CommentId, column, delta: int) -> None:
        stmt = update(comments_table).where(c.id == comment_id)
        if delta < 0:
            stmt = stmt.where(column > 0)  # Don't go below 0
        stmt = stmt.values({column: column + delta})
        await self.session.execute(stmt)
        await self.session.flush()

    async def increment_reply_count(self, comment_id: CommentId) -> None:
        """Atomically increment reply_count by 1."""
        await self._add(comment_id, c.reply_count, 1)

    async def decrement_reply_count(self, comment_id: CommentId) -> None:
        """Atomically decrement reply_count by 1 (minimum 0)."""
        await self._add(comment_id, c.reply_count, -1)

    async def increment_likes(self, comment_id: CommentId) -> None:
        """Atomically increment likes by 1."""
        await self._add(comment_id, c.likes, 1)

    async def decrement_likes(self, comment_id: CommentId) -> None:
        """Atomically decrement likes by 1 (minimum 0)."""
        await self._add(comment_id, c.likes, -1)

    async def delete(self, comment_id: CommentId) -> List[Comment]:
        """Delete a comment and every reply below it (hard delete).

        The subtree is collected by a recursive CTE and removed in the same
        statement, which returns the deleted rows.
        """
        subtree = (
            select(c.id).where(c.id == comment_id).cte("subtree", recursive=True)
        )
        replies = comments_table.alias("replies")
        subtree = subtree.union_all(
            select(replies.c.id).where(replies.c.parent_id == subtree.c.id)
        )
        stmt = (
            comments_table.delete()
            .where(c.id.in_(select(subtree.c.id)))
            .returning(*comments_table.c)
        )
        result = await self.session.execute(stmt)
        removed = [row_to_comment(row._asdict()) for row in result.fetchall()]
        await self.session.flush()
        return removed
