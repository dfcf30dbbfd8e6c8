"""Domain model entities for Paracosm."""

from paracosm.domain.model.comment import Comment
from paracosm.domain.model.community_post import CommunityPost
from paracosm.domain.model.question import Question
from paracosm.domain.model.user import User
from paracosm.domain.model.vote import (
    LedgerOperation,
    Vote,
    VoteOutcome,
    VotePlan,
    plan_vote,
)
from paracosm.domain.model.world import World

__all__ = [
    "User",
    "World",
    "Question",
    "CommunityPost",
    "Comment",
    "Vote",
    "VotePlan",
    "VoteOutcome",
    "LedgerOperation",
    "plan_vote",
]
