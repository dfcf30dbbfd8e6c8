"""Repository interfaces for Paracosm domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from paracosm.domain.repository.comment import CommentRepository
from paracosm.domain.repository.community_post import CommunityPostRepository
from paracosm.domain.repository.target_score import TargetScoreRepository
from paracosm.domain.repository.user import UserRepository
from paracosm.domain.repository.vote import VoteRepository
from paracosm.domain.repository.world import WorldRepository

__all__ = [
    "UserRepository",
    "WorldRepository",
    "CommunityPostRepository",
    "CommentRepository",
    "VoteRepository",
    "TargetScoreRepository",
]
