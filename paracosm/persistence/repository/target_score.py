"""PostgreSQL implementation of the denormalized score repository.

Every votable table carries its own ``upvotes`` column; the target kind
selects which table a statement runs against.
"""

from typing import Optional
from uuid import UUID

from sqlalchemy import Table, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from paracosm.domain.repository import TargetScoreRepository
from paracosm.domain.value import TargetKind
from paracosm.persistence.tables import (
    community_comments_table,
    community_posts_table,
    questions_table,
)

_SCORE_TABLES: dict[TargetKind, Table] = {
    TargetKind.QUESTION: questions_table,
    TargetKind.COMMUNITY_POST: community_posts_table,
    TargetKind.COMMUNITY_COMMENT: community_comments_table,
}


class PostgresTargetScoreRepository(TargetScoreRepository):
    """PostgreSQL implementation of TargetScoreRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def get_score(self, target_kind: TargetKind, target_id: UUID) -> Optional[int]:
        """Read a target's stored score."""
        table = _SCORE_TABLES[target_kind]
        stmt = select(table.c.upvotes).where(table.c.id == target_id)
        result = await self.session.execute(stmt)
        row = result.first()
        return row[0] if row else None

    async def adjust_score(
        self, target_kind: TargetKind, target_id: UUID, delta: int
    ) -> Optional[int]:
        """Atomically add ``delta`` to a target's score.

        A single ``UPDATE ... SET upvotes = upvotes + :delta RETURNING``
        so concurrent voters never overwrite each other's changes.
        """
        table = _SCORE_TABLES[target_kind]
        stmt = (
            update(table)
            .where(table.c.id == target_id)
            .values(upvotes=table.c.upvotes + delta)
            .returning(table.c.upvotes)
        )
        result = await self.session.execute(stmt)
        row = result.first()
        await self.session.flush()
        return row[0] if row else None

    async def set_score(
        self, target_kind: TargetKind, target_id: UUID, score: int
    ) -> Optional[int]:
        """Overwrite a target's score."""
        table = _SCORE_TABLES[target_kind]
        stmt = (
            update(table)
            .where(table.c.id == target_id)
            .values(upvotes=score)
            .returning(table.c.upvotes)
        )
        result = await self.session.execute(stmt)
        row = result.first()
        await self.session.flush()
        return row[0] if row else None

    async def find_target_ids(self, target_kind: TargetKind) -> list[UUID]:
        """List the IDs of every target of one kind."""
        table = _SCORE_TABLES[target_kind]
        result = await self.session.execute(select(table.c.id))
        return [row[0] for row in result.all()]
