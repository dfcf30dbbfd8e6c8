"""Vote domain service.

Keeps the vote ledger and each target's denormalized score in step.
"""

from datetime import datetime
from typing import Sequence
from uuid import UUID, uuid4

import logfire

from paracosm.domain.error import NotFoundError
from paracosm.domain.model.vote import (
    LedgerOperation,
    Vote,
    VoteOutcome,
    plan_vote,
)
from paracosm.domain.repository import TargetScoreRepository, VoteRepository
from paracosm.domain.value import TargetKind, UserId, VoteDirection, VoteId, VoteState

from .base import Service


class VoteService(Service):
    """Domain service for vote operations."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        target_score_repository: TargetScoreRepository,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote ledger repository
            target_score_repository: Denormalized score repository
        """
        self.vote_repository = vote_repository
        self.target_score_repository = target_score_repository

    async def get_user_vote_state(
        self, voter_id: UserId, target_kind: TargetKind, target_id: UUID
    ) -> VoteState:
        """Look up a voter's current stance on a target.

        A missing ledger row is the NO_VOTE state, not an error.

        Args:
            voter_id: Voter ID
            target_kind: Kind of target
            target_id: Target ID

        Returns:
            The voter's vote state
        """
        with logfire.span(
            "vote_service.get_user_vote_state",
            voter_id=str(voter_id),
            target_kind=target_kind.value,
            target_id=str(target_id),
        ):
            vote = await self.vote_repository.find_by_voter_and_target(
                voter_id, target_kind, target_id
            )
            return vote.state if vote else VoteState.NO_VOTE

    async def get_user_vote_states(
        self,
        voter_id: UserId,
        target_kind: TargetKind,
        target_ids: Sequence[UUID],
    ) -> dict[UUID, VoteState]:
        """Look up a voter's stance on many targets of one kind.

        Args:
            voter_id: Voter ID
            target_kind: Kind of the targets
            target_ids: Target IDs

        Returns:
            Mapping of every requested target ID to the voter's state
        """
        if not target_ids:
            return {}

        # Batch query to fetch all votes at once (avoid N+1)
        votes = await self.vote_repository.find_by_voter_and_targets(
            voter_id=voter_id,
            target_kind=target_kind,
            target_ids=target_ids,
        )
        by_target = {UUID(str(vote.target_id)): vote.state for vote in votes}
        return {
            tid: by_target.get(UUID(str(tid)), VoteState.NO_VOTE) for tid in target_ids
        }

    async def cast_vote(
        self,
        voter_id: UserId,
        target_kind: TargetKind,
        target_id: UUID,
        direction: VoteDirection,
        current_score: int | None = None,
    ) -> VoteOutcome:
        """Apply one vote action and update the target's score.

        Repeating the current direction removes the vote, the opposite
        direction flips it. The score changes through a single store-side
        increment, and the value the store returns is authoritative.
        ``current_score`` is the score the caller is displaying; a mismatch
        with the stored value is logged as drift and otherwise ignored.

        Args:
            voter_id: Voter ID
            target_kind: Kind of target
            target_id: Target ID
            direction: Direction of the action
            current_score: Score the caller last saw (optional)

        Returns:
            The voter's new state and the target's new score

        Raises:
            NotFoundError: If the target does not exist
        """
        with logfire.span(
            "vote_service.cast_vote",
            voter_id=str(voter_id),
            target_kind=target_kind.value,
            target_id=str(target_id),
            direction=direction.value,
        ):
            stored_score = await self.target_score_repository.get_score(
                target_kind, target_id
            )
            if stored_score is None:
                logfire.warn(
                    "Vote on non-existent target",
                    target_kind=target_kind.value,
                    target_id=str(target_id),
                )
                raise NotFoundError(target_kind.value, str(target_id))

            if current_score is not None and current_score != stored_score:
                logfire.warn(
                    "Caller score differs from stored score",
                    target_kind=target_kind.value,
                    target_id=str(target_id),
                    caller_score=current_score,
                    stored_score=stored_score,
                )

            existing = await self.vote_repository.find_by_voter_and_target(
                voter_id, target_kind, target_id
            )
            current_state = existing.state if existing else VoteState.NO_VOTE
            plan = plan_vote(current_state, direction)

            if plan.operation == LedgerOperation.DELETE:
                await self.vote_repository.delete_by_voter_and_target(
                    voter_id, target_kind, target_id
                )
            else:
                now = datetime.now()
                await self.vote_repository.upsert(
                    Vote(
                        id=existing.id if existing else VoteId(uuid4()),
                        voter_id=voter_id,
                        target_kind=target_kind,
                        target_id=target_id,
                        direction=direction,
                        created_at=existing.created_at if existing else now,
                        updated_at=now,
                    )
                )

            new_score = await self.target_score_repository.adjust_score(
                target_kind, target_id, plan.delta
            )
            if new_score is None:
                # Target removed between the read and the write
                raise NotFoundError(target_kind.value, str(target_id))

            logfire.info(
                "Vote cast",
                voter_id=str(voter_id),
                target_kind=target_kind.value,
                target_id=str(target_id),
                previous_state=plan.previous_state.value,
                new_state=plan.new_state.value,
                operation=plan.operation.value,
                delta=plan.delta,
                score=new_score,
            )
            return VoteOutcome(state=plan.new_state, score=new_score, delta=plan.delta)

    async def get_score(self, target_kind: TargetKind, target_id: UUID) -> int:
        """Read a target's stored score.

        Raises:
            NotFoundError: If the target does not exist
        """
        score = await self.target_score_repository.get_score(target_kind, target_id)
        if score is None:
            raise NotFoundError(target_kind.value, str(target_id))
        return score

    async def reconcile_score(self, target_kind: TargetKind, target_id: UUID) -> int:
        """Recompute a target's score from the ledger and store it.

        Args:
            target_kind: Kind of target
            target_id: Target ID

        Returns:
            The reconciled score

        Raises:
            NotFoundError: If the target does not exist
        """
        with logfire.span(
            "vote_service.reconcile_score",
            target_kind=target_kind.value,
            target_id=str(target_id),
        ):
            tallied = await self.vote_repository.tally(target_kind, target_id)
            stored = await self.target_score_repository.set_score(
                target_kind, target_id, tallied
            )
            if stored is None:
                raise NotFoundError(target_kind.value, str(target_id))
            logfire.info(
                "Score reconciled",
                target_kind=target_kind.value,
                target_id=str(target_id),
                score=stored,
            )
            return stored

    async def reconcile_scores(
        self,
        target_kind: TargetKind,
        target_ids: Sequence[UUID] | None = None,
    ) -> dict[UUID, int]:
        """Reconcile many targets of one kind.

        Args:
            target_kind: Kind of the targets
            target_ids: Targets to repair; every target of the kind if None

        Returns:
            Mapping of target ID to its reconciled score. Targets that do not
            exist are skipped.
        """
        with logfire.span(
            "vote_service.reconcile_scores", target_kind=target_kind.value
        ):
            if target_ids is None:
                target_ids = await self.target_score_repository.find_target_ids(
                    target_kind
                )

            scores: dict[UUID, int] = {}
            for target_id in target_ids:
                try:
                    scores[target_id] = await self.reconcile_score(
                        target_kind, target_id
                    )
                except NotFoundError:
                    logfire.warn(
                        "Skipping missing target",
                        target_kind=target_kind.value,
                        target_id=str(target_id),
                    )
            return scores

    async def clear_votes(
        self, target_kind: TargetKind, target_ids: Sequence[UUID]
    ) -> int:
        """Remove every ledger row for targets that no longer exist.

        Args:
            target_kind: Kind of the targets
            target_ids: Target IDs

        Returns:
            Number of removed votes
        """
        if not target_ids:
            return 0
        with logfire.span(
            "vote_service.clear_votes",
            target_kind=target_kind.value,
            target_count=len(target_ids),
        ):
            removed = await self.vote_repository.delete_by_targets(
                target_kind, target_ids
            )
            logfire.info(
                "Votes cleared", target_kind=target_kind.value, removed=removed
            )
            return removed
