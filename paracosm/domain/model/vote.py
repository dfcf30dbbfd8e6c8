"""Vote entity and the vote transition table.

Each voter holds at most one live vote per target. Repeating a vote removes
it, voting the other way flips it.
"""

from datetime import datetime
from enum import Enum
from uuid import UUID

from pydantic import Field

from paracosm.domain.model.common import DomainModel
from paracosm.domain.value import TargetKind, UserId, VoteDirection, VoteId, VoteState


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One vote per voter per target (enforced by database unique constraint)
    - Polymorphic reference to the target (question, post or comment)
    """

    id: VoteId
    voter_id: UserId
    target_kind: TargetKind
    target_id: UUID
    direction: VoteDirection
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def state(self) -> VoteState:
        """Ledger state this row represents."""
        return VoteState.from_direction(self.direction)


class LedgerOperation(str, Enum):
    """Write applied to the vote ledger by a transition."""

    INSERT = "insert"
    UPDATE = "update"
    DELETE = "delete"


class VotePlan(DomainModel):
    """Outcome of applying one vote action to a voter's current state."""

    previous_state: VoteState
    new_state: VoteState
    operation: LedgerOperation
    delta: int


_SCORE_WEIGHT = {
    VoteState.NO_VOTE: 0,
    VoteState.UPVOTED: 1,
    VoteState.DOWNVOTED: -1,
}


def plan_vote(current: VoteState, direction: VoteDirection) -> VotePlan:
    """Compute the transition for one vote action.

    NoVote + up   -> Upvoted   (insert, +1)
    NoVote + down -> Downvoted (insert, -1)
    Upvoted + up  -> NoVote    (delete, -1)
    Downvoted + down -> NoVote (delete, +1)
    Upvoted + down -> Downvoted (update, -2)
    Downvoted + up -> Upvoted   (update, +2)

    Args:
        current: The voter's state before the action
        direction: Direction of the action

    Returns:
        The plan describing the new state, ledger write and score delta
    """
    requested = VoteState.from_direction(direction)

    if current == requested:
        new_state = VoteState.NO_VOTE
        operation = LedgerOperation.DELETE
    elif current == VoteState.NO_VOTE:
        new_state = requested
        operation = LedgerOperation.INSERT
    else:
        new_state = requested
        operation = LedgerOperation.UPDATE

    return VotePlan(
        previous_state=current,
        new_state=new_state,
        operation=operation,
        delta=_SCORE_WEIGHT[new_state] - _SCORE_WEIGHT[current],
    )


class VoteOutcome(DomainModel):
    """Result of casting a vote, for the caller to display."""

    state: VoteState
    score: int
    delta: int
