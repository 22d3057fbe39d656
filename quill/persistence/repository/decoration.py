"""PostgreSQL implementation of Decoration repository."""

from typing import List, Sequence, Tuple

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from quill.domain.model import Decoration, UserDecoration
from quill.domain.repository import DecorationRepository
from quill.domain.value import UserId
from quill.persistence.mappers import (
    decoration_to_dict,
    row_to_decoration,
    row_to_user_decoration,
    user_decoration_to_dict,
)
from quill.persistence.tables import decorations_table, user_decorations_table


class PostgresDecorationRepository(DecorationRepository):
    """PostgreSQL implementation of DecorationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def save(self, decoration: Decoration) -> Decoration:
        """Upsert a catalogue decoration."""
        values = decoration_to_dict(decoration)
        stmt = insert(decorations_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[decorations_table.c.id],
            set_={k: v for k, v in values.items() if k != "id"},
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return decoration

    async def save_user_decoration(
        self, user_decoration: UserDecoration
    ) -> UserDecoration:
        """Upsert an ownership record keyed by (user_id, decoration_id)."""
        values = user_decoration_to_dict(user_decoration)
        stmt = insert(user_decorations_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            constraint="uq_user_decoration",
            set_={
                "is_using": values["is_using"],
                "is_permanent": values["is_permanent"],
                "expires_at": values["expires_at"],
            },
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return user_decoration

    async def find_in_use_by_users(
        self, user_ids: Sequence[UserId]
    ) -> List[Tuple[UserDecoration, Decoration]]:
        """Find equipped decorations of several users with one join."""
        if not user_ids:
            return []

        ud = user_decorations_table.c
        d = decorations_table.c
        stmt = (
            select(
                ud.user_id,
                ud.decoration_id,
                ud.is_using,
                ud.is_permanent,
                ud.expires_at,
                ud.created_at,
                d.id,
                d.name,
                d.type,
                d.image_url,
                d.rarity,
            )
            .select_from(
                user_decorations_table.join(
                    decorations_table, ud.decoration_id == d.id
                )
            )
            .where(ud.user_id.in_(user_ids))
            .where(ud.is_using.is_(True))
        )
        result = await self.session.execute(stmt)

        pairs = []
        for row in result.fetchall():
            data = row._asdict()
            pairs.append((row_to_user_decoration(data), row_to_decoration(data)))
        return pairs
