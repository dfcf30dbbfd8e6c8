"""In-memory vote repository for testing."""

from typing import Optional, Sequence
from uuid import UUID

from paracosm.domain.model.vote import Vote
from paracosm.domain.repository.vote import VoteRepository
from paracosm.domain.value import TargetKind, UserId, VoteDirection


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self) -> None:
        self._votes: dict[tuple[UserId, TargetKind, UUID], Vote] = {}

    @staticmethod
    def _key(
        voter_id: UserId, target_kind: TargetKind, target_id: UUID
    ) -> tuple[UserId, TargetKind, UUID]:
        return (voter_id, target_kind, UUID(str(target_id)))

    async def find_by_voter_and_target(
        self,
        voter_id: UserId,
        target_kind: TargetKind,
        target_id: UUID,
    ) -> Optional[Vote]:
        """Find a voter's vote on a target."""
        return self._votes.get(self._key(voter_id, target_kind, target_id))

    async def find_by_voter_and_targets(
        self,
        voter_id: UserId,
        target_kind: TargetKind,
        target_ids: Sequence[UUID],
    ) -> list[Vote]:
        """Find a voter's votes on multiple targets (batch query)."""
        if not target_ids:
            return []

        target_uuids = {UUID(str(tid)) for tid in target_ids}
        return [
            v
            for v in self._votes.values()
            if v.voter_id == voter_id
            and v.target_kind == target_kind
            and v.target_id in target_uuids
        ]

    async def upsert(self, vote: Vote) -> Vote:
        """Insert a vote, or change the direction of the existing one."""
        key = self._key(vote.voter_id, vote.target_kind, vote.target_id)
        existing = self._votes.get(key)
        if existing:
            vote = existing.model_copy(
                update={"direction": vote.direction, "updated_at": vote.updated_at}
            )
        self._votes[key] = vote
        return vote

    async def delete_by_voter_and_target(
        self,
        voter_id: UserId,
        target_kind: TargetKind,
        target_id: UUID,
    ) -> bool:
        """Delete a voter's vote on a target."""
        return (
            self._votes.pop(self._key(voter_id, target_kind, target_id), None)
            is not None
        )

    async def delete_by_targets(
        self, target_kind: TargetKind, target_ids: Sequence[UUID]
    ) -> int:
        """Delete every vote on the given targets."""
        target_uuids = {UUID(str(tid)) for tid in target_ids}
        doomed = [
            key
            for key, v in self._votes.items()
            if v.target_kind == target_kind and v.target_id in target_uuids
        ]
        for key in doomed:
            del self._votes[key]
        return len(doomed)

    async def tally(self, target_kind: TargetKind, target_id: UUID) -> int:
        """Sum the ledger for a target: upvotes minus downvotes."""
        target_uuid = UUID(str(target_id))
        return sum(
            1 if v.direction == VoteDirection.UPVOTE else -1
            for v in self._votes.values()
            if v.target_kind == target_kind and v.target_id == target_uuid
        )
