"""PostgreSQL implementation of Vote repository."""

from datetime import datetime
from typing import List, Optional, Sequence
from uuid import UUID

from sqlalchemy import and_, case, delete, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from paracosm.domain.model import Vote
from paracosm.domain.repository import VoteRepository
from paracosm.domain.value import TargetKind, UserId, VoteDirection
from paracosm.persistence.mappers import row_to_vote, vote_to_dict
from paracosm.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_voter_and_target(
        self,
        voter_id: UserId,
        target_kind: TargetKind,
        target_id: UUID,
    ) -> Optional[Vote]:
        """Find a voter's vote on a specific target."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.user_id == voter_id,
                votes_table.c.target_type == target_kind.value,
                votes_table.c.target_id == target_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_vote(dict(row)) if row else None

    async def find_by_voter_and_targets(
        self,
        voter_id: UserId,
        target_kind: TargetKind,
        target_ids: Sequence[UUID],
    ) -> List[Vote]:
        """Find a voter's votes on multiple targets (batch query)."""
        if not target_ids:
            return []

        stmt = select(votes_table).where(
            and_(
                votes_table.c.user_id == voter_id,
                votes_table.c.target_type == target_kind.value,
                votes_table.c.target_id.in_(target_ids),
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(dict(row)) for row in result.mappings().all()]

    async def upsert(self, vote: Vote) -> Vote:
        """Insert a vote, or change the direction of the existing one.

        Conflicts on (voter, target) keep the stored id and created_at.
        """
        vote_dict = vote_to_dict(vote)
        stmt = insert(votes_table).values(**vote_dict)
        stmt = stmt.on_conflict_do_update(
            constraint="unique_vote",
            set_={
                "vote_type": stmt.excluded.vote_type,
                "updated_at": datetime.now(),
            },
        ).returning(votes_table)

        result = await self.session.execute(stmt)
        row = result.mappings().one()
        await self.session.flush()
        return row_to_vote(dict(row))

    async def delete_by_voter_and_target(
        self,
        voter_id: UserId,
        target_kind: TargetKind,
        target_id: UUID,
    ) -> bool:
        """Delete a voter's vote on a target."""
        stmt = delete(votes_table).where(
            and_(
                votes_table.c.user_id == voter_id,
                votes_table.c.target_type == target_kind.value,
                votes_table.c.target_id == target_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def delete_by_targets(
        self, target_kind: TargetKind, target_ids: Sequence[UUID]
    ) -> int:
        """Delete every vote on the given targets."""
        if not target_ids:
            return 0

        stmt = delete(votes_table).where(
            and_(
                votes_table.c.target_type == target_kind.value,
                votes_table.c.target_id.in_(target_ids),
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]

    async def tally(self, target_kind: TargetKind, target_id: UUID) -> int:
        """Sum the ledger for a target: upvotes minus downvotes."""
        weight = case(
            (votes_table.c.vote_type == VoteDirection.UPVOTE.value, 1),
            else_=-1,
        )
        stmt = select(func.coalesce(func.sum(weight), 0)).where(
            and_(
                votes_table.c.target_type == target_kind.value,
                votes_table.c.target_id == target_id,
            )
        )
        result = await self.session.execute(stmt)
        return int(result.scalar() or 0)
