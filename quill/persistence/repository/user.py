"""PostgreSQL implementation of User repository."""

from typing import List, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from quill.domain.model import User
from quill.domain.repository import UserRepository
from quill.domain.value import UserId
from quill.persistence.mappers import row_to_user, user_to_dict
from quill.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> List[User]:
        """Find several users in one query."""
        if not user_ids:
            return []

        stmt = select(users_table).where(users_table.c.id.in_(user_ids))
        result = await self.session.execute(stmt)
        return [row_to_user(row._asdict()) for row in result.fetchall()]

    async def save(self, user: User) -> User:
        """Save a user (create or update)."""
        existing = await self.find_by_id(user.id)
        user_dict = user_to_dict(user)

        if existing:
            stmt = (
                users_table.update()
                .where(users_table.c.id == user.id)
                .values(**user_dict)
            )
        else:
            stmt = users_table.insert().values(**user_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return user
