"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence
from uuid import UUID

from paracosm.domain.model.vote import Vote
from paracosm.domain.value import TargetKind, UserId


class VoteRepository(ABC):
    """Repository for the vote ledger.

    Defines the contract for vote persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_voter_and_target(
        self,
        voter_id: UserId,
        target_kind: TargetKind,
        target_id: UUID,
    ) -> Optional[Vote]:
        """Find a voter's vote on a specific target.

        Args:
            voter_id: The voter's ID
            target_kind: Kind of target
            target_id: ID of the target

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_voter_and_targets(
        self,
        voter_id: UserId,
        target_kind: TargetKind,
        target_ids: Sequence[UUID],
    ) -> List[Vote]:
        """Find a voter's votes on multiple targets (batch query).

        Args:
            voter_id: The voter's ID
            target_kind: Kind of the targets
            target_ids: IDs of the targets

        Returns:
            List of votes the voter holds on the given targets
        """
        pass

    @abstractmethod
    async def upsert(self, vote: Vote) -> Vote:
        """Insert a vote, or change the direction of the existing one.

        Uniqueness is on (voter_id, target_kind, target_id); an existing
        row keeps its id and created_at.

        Args:
            vote: The vote to record

        Returns:
            The stored vote
        """
        pass

    @abstractmethod
    async def delete_by_voter_and_target(
        self,
        voter_id: UserId,
        target_kind: TargetKind,
        target_id: UUID,
    ) -> bool:
        """Delete a voter's vote on a target.

        Args:
            voter_id: The voter's ID
            target_kind: Kind of target
            target_id: ID of the target

        Returns:
            True if a vote was deleted, False if no vote existed
        """
        pass

    @abstractmethod
    async def delete_by_targets(
        self, target_kind: TargetKind, target_ids: Sequence[UUID]
    ) -> int:
        """Delete every vote on the given targets.

        Used when targets are hard-deleted.

        Args:
            target_kind: Kind of the targets
            target_ids: IDs of the targets

        Returns:
            Number of deleted votes
        """
        pass

    @abstractmethod
    async def tally(self, target_kind: TargetKind, target_id: UUID) -> int:
        """Compute a target's score from the ledger (ups minus downs).

        Args:
            target_kind: Kind of target
            target_id: ID of the target

        Returns:
            Net score recorded in the ledger
        """
        pass
