"""Domain value objects for Paracosm."""

from paracosm.domain.value.identifiers import (
    CommentId,
    CommunityPostId,
    QuestionId,
    UserId,
    VoteId,
    WorldId,
)
from paracosm.domain.value.types import (
    TargetKind,
    Username,
    VoteDirection,
    VoteState,
)

__all__ = [
    # Identifiers
    "UserId",
    "WorldId",
    "QuestionId",
    "CommunityPostId",
    "CommentId",
    "VoteId",
    # Types
    "TargetKind",
    "Username",
    "VoteDirection",
    "VoteState",
]
