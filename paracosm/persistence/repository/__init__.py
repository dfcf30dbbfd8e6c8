"""PostgreSQL repository implementations."""

from paracosm.persistence.repository.comment import PostgresCommentRepository
from paracosm.persistence.repository.community_post import (
    PostgresCommunityPostRepository,
)
from paracosm.persistence.repository.target_score import (
    PostgresTargetScoreRepository,
)
from paracosm.persistence.repository.user import PostgresUserRepository
from paracosm.persistence.repository.vote import PostgresVoteRepository
from paracosm.persistence.repository.world import PostgresWorldRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresWorldRepository",
    "PostgresCommunityPostRepository",
    "PostgresCommentRepository",
    "PostgresVoteRepository",
    "PostgresTargetScoreRepository",
]
