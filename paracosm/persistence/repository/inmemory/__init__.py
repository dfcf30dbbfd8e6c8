"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .community_post import InMemoryCommunityPostRepository
from .question import InMemoryQuestionRepository
from .target_score import InMemoryTargetScoreRepository
from .user import InMemoryUserRepository
from .vote import InMemoryVoteRepository
from .world import InMemoryWorldRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryCommunityPostRepository",
    "InMemoryQuestionRepository",
    "InMemoryTargetScoreRepository",
    "InMemoryUserRepository",
    "InMemoryVoteRepository",
    "InMemoryWorldRepository",
]
