"""PostgreSQL implementation of CommentLike repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from quill.domain.model import CommentLike
from quill.domain.repository import CommentLikeRepository
from quill.domain.value import CommentId, CommentLikeId, UserId
from quill.persistence.mappers import comment_like_to_dict, row_to_comment_like
from quill.persistence.tables import comment_likes_id_seq, comment_likes_table


class PostgresCommentLikeRepository(CommentLikeRepository):
    """PostgreSQL implementation of CommentLikeRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def next_id(self) -> CommentLikeId:
        """Reserve the next value of the like id sequence."""
        result = await self.session.execute(select(comment_likes_id_seq.next_value()))
        return CommentLikeId(result.scalar_one())

    async def find_by_comment_and_user(
        self, comment_id: CommentId, user_id: UserId
    ) -> Optional[CommentLike]:
        """Find a user's like on a comment."""
        stmt = (
            select(comment_likes_table)
            .where(comment_likes_table.c.comment_id == comment_id)
            .where(comment_likes_table.c.user_id == user_id)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment_like(row._asdict()) if row else None

    async def save(self, like: CommentLike) -> CommentLike:
        """Insert a like.

        A savepoint scopes the insert so that a unique violation leaves the
        request transaction usable.

        Raises:
            IntegrityError: If the user already likes the comment
        """
        async with self.session.begin_nested():
            stmt = comment_likes_table.insert().values(**comment_like_to_dict(like))
            await self.session.execute(stmt)
        return like

    async def delete(self, like_id: CommentLikeId) -> None:
        """Delete a like by ID."""
        stmt = comment_likes_table.delete().where(comment_likes_table.c.id == like_id)
        await self.session.execute(stmt)
        await self.session.flush()
