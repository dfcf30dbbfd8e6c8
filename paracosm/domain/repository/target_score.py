"""Votable target score repository interface."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from paracosm.domain.value import TargetKind


class TargetScoreRepository(ABC):
    """Access to the denormalized ``upvotes`` score of votable records.

    Dispatches on target kind to the record collection that owns the score.
    """

    @abstractmethod
    async def get_score(self, target_kind: TargetKind, target_id: UUID) -> Optional[int]:
        """Read a target's current score.

        Args:
            target_kind: Kind of target
            target_id: ID of the target

        Returns:
            The score, or None if the target does not exist
        """
        pass

    @abstractmethod
    async def adjust_score(
        self, target_kind: TargetKind, target_id: UUID, delta: int
    ) -> Optional[int]:
        """Atomically add ``delta`` to a target's score.

        Args:
            target_kind: Kind of target
            target_id: ID of the target
            delta: Signed amount to add

        Returns:
            The score after the update, or None if the target does not exist
        """
        pass

    @abstractmethod
    async def set_score(
        self, target_kind: TargetKind, target_id: UUID, score: int
    ) -> Optional[int]:
        """Overwrite a target's score.

        Args:
            target_kind: Kind of target
            target_id: ID of the target
            score: New score

        Returns:
            The stored score, or None if the target does not exist
        """
        pass

    @abstractmethod
    async def find_target_ids(self, target_kind: TargetKind) -> list[UUID]:
        """List the IDs of every target of one kind.

        Args:
            target_kind: Kind of target

        Returns:
            Target IDs in no particular order
        """
        pass
