"""In-memory score repository for testing.

Reads and writes the ``upvotes`` field of the in-memory question, post and
comment repositories so that scores stay visible through those repositories.
"""

from typing import Optional
from uuid import UUID

from paracosm.domain.repository.target_score import TargetScoreRepository
from paracosm.domain.value import (
    CommentId,
    CommunityPostId,
    QuestionId,
    TargetKind,
)

from .comment import InMemoryCommentRepository
from .community_post import InMemoryCommunityPostRepository
from .question import InMemoryQuestionRepository


class InMemoryTargetScoreRepository(TargetScoreRepository):
    """In-memory implementation of TargetScoreRepository for testing."""

    def __init__(
        self,
        question_repository: InMemoryQuestionRepository,
        community_post_repository: InMemoryCommunityPostRepository,
        comment_repository: InMemoryCommentRepository,
    ) -> None:
        self.question_repository = question_repository
        self.community_post_repository = community_post_repository
        self.comment_repository = comment_repository

    async def _find(self, target_kind: TargetKind, target_id: UUID):
        if target_kind == TargetKind.QUESTION:
            return await self.question_repository.find_by_id(QuestionId(target_id))
        if target_kind == TargetKind.COMMUNITY_POST:
            return await self.community_post_repository.find_by_id(
                CommunityPostId(target_id)
            )
        return await self.comment_repository.find_by_id(CommentId(target_id))

    async def _store(self, target_kind: TargetKind, target) -> None:
        if target_kind == TargetKind.QUESTION:
            await self.question_repository.save(target)
        elif target_kind == TargetKind.COMMUNITY_POST:
            await self.community_post_repository.save(target)
        else:
            await self.comment_repository.save(target)

    async def get_score(self, target_kind: TargetKind, target_id: UUID) -> Optional[int]:
        """Read a target's stored score."""
        target = await self._find(target_kind, target_id)
        return target.upvotes if target else None

    async def adjust_score(
        self, target_kind: TargetKind, target_id: UUID, delta: int
    ) -> Optional[int]:
        """Add ``delta`` to a target's score."""
        target = await self._find(target_kind, target_id)
        if target is None:
            return None
        return await self.set_score(target_kind, target_id, target.upvotes + delta)

    async def set_score(
        self, target_kind: TargetKind, target_id: UUID, score: int
    ) -> Optional[int]:
        """Overwrite a target's score."""
        target = await self._find(target_kind, target_id)
        if target is None:
            return None
        await self._store(target_kind, target.model_copy(update={"upvotes": score}))
        return score

    async def find_target_ids(self, target_kind: TargetKind) -> list[UUID]:
        """List the IDs of every target of one kind."""
        if target_kind == TargetKind.QUESTION:
            return list(await self.question_repository.find_ids())
        if target_kind == TargetKind.COMMUNITY_POST:
            return list(await self.community_post_repository.find_ids())
        return list(await self.comment_repository.find_ids())
