"""Cast vote use case."""

from uuid import UUID

from pydantic import BaseModel

from paracosm.application.usecase.base import BaseUseCase
from paracosm.domain.error import NotFoundError
from paracosm.domain.service import UserService, VoteService
from paracosm.domain.value import TargetKind, UserId, VoteDirection, VoteState


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    target_kind: TargetKind
    target_id: str  # UUID string
    voter_id: str  # User ID from authenticated user
    direction: VoteDirection
    current_score: int | None = None  # Score the client is displaying


class CastVoteResponse(BaseModel):
    """Cast vote response."""

    target_kind: TargetKind
    target_id: str
    state: VoteState
    score: int
    delta: int


class CastVoteUseCase(BaseUseCase[CastVoteRequest, CastVoteResponse]):
    """Use case for upvoting or downvoting a question, post or comment.

    Repeating a vote removes it; voting the other way flips it.
    """

    def __init__(self, vote_service: VoteService, user_service: UserService) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
            user_service: User service for checking the voter exists
        """
        self.vote_service = vote_service
        self.user_service = user_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Args:
            request: Cast vote request

        Returns:
            The voter's new state and the target's new score

        Raises:
            NotFoundError: If the voter or the target does not exist
            ValueError: If an ID is not a valid UUID
        """
        target_id = UUID(request.target_id)
        voter_id = UserId(UUID(request.voter_id))

        # A token can outlive its account
        if not await self.user_service.get_user_by_id(voter_id):
            raise NotFoundError("User", request.voter_id)

        outcome = await self.vote_service.cast_vote(
            voter_id=voter_id,
            target_kind=request.target_kind,
            target_id=target_id,
            direction=request.direction,
            current_score=request.current_score,
        )

        return CastVoteResponse(
            target_kind=request.target_kind,
            target_id=request.target_id,
            state=outcome.state,
            score=outcome.score,
            delta=outcome.delta,
        )
