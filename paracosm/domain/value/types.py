"""Domain value objects for Paracosm.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum

from pydantic import field_validator

from paracosm.domain.value.common import RootValueObject


class TargetKind(str, Enum):
    """Kind of record a vote applies to.

    Each kind keeps its own denormalized ``upvotes`` score.
    """

    QUESTION = "question"
    COMMUNITY_POST = "community_post"
    COMMUNITY_COMMENT = "community_comment"


class VoteDirection(str, Enum):
    """Direction of a single vote action."""

    UPVOTE = "upvote"
    DOWNVOTE = "downvote"


class VoteState(str, Enum):
    """A voter's current stance on one target."""

    NO_VOTE = "no_vote"
    UPVOTED = "upvoted"
    DOWNVOTED = "downvoted"

    @classmethod
    def from_direction(cls, direction: "VoteDirection | None") -> "VoteState":
        """Map a stored vote direction (or its absence) to a state."""
        if direction is None:
            return cls.NO_VOTE
        if direction == VoteDirection.UPVOTE:
            return cls.UPVOTED
        return cls.DOWNVOTED

    @property
    def direction(self) -> "VoteDirection | None":
        """Direction recorded in the ledger for this state, if any."""
        if self == VoteState.UPVOTED:
            return VoteDirection.UPVOTE
        if self == VoteState.DOWNVOTED:
            return VoteDirection.DOWNVOTE
        return None


class Username(RootValueObject[str]):
    """Display name of a Paracosm user."""

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username is not blank and within length limits."""
        if not v.strip():
            raise ValueError("Username must not be blank")
        if len(v) > 50:
            raise ValueError("Username must be 1-50 characters")
        return v
