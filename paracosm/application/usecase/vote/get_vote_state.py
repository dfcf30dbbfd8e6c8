"""Get vote state use case."""

from uuid import UUID

from pydantic import BaseModel

from paracosm.application.usecase.base import BaseUseCase
from paracosm.domain.service import JWTService, VoteService
from paracosm.domain.value import TargetKind, UserId, VoteState


class GetVoteStateRequest(BaseModel):
    """Get vote state request."""

    target_kind: TargetKind
    target_id: str  # UUID string
    auth_token: str | None = None  # JWT token (optional)


class GetVoteStateResponse(BaseModel):
    """Get vote state response."""

    target_kind: TargetKind
    target_id: str
    state: VoteState
    score: int


class GetVoteStateUseCase(
    BaseUseCase[GetVoteStateRequest, GetVoteStateResponse]
):
    """Use case for reading a target's score and the reader's vote on it."""

    def __init__(self, vote_service: VoteService, jwt_service: JWTService) -> None:
        """Initialize get vote state use case.

        Args:
            vote_service: Vote domain service
            jwt_service: JWT service for decoding auth tokens
        """
        self.vote_service = vote_service
        self.jwt_service = jwt_service

    async def execute(self, request: GetVoteStateRequest) -> GetVoteStateResponse:
        """Execute get vote state flow.

        Readers without a valid token always see ``no_vote``.

        Raises:
            NotFoundError: If the target does not exist
        """
        target_id = UUID(request.target_id)
        score = await self.vote_service.get_score(request.target_kind, target_id)

        state = VoteState.NO_VOTE
        user_id = self.jwt_service.get_user_id_from_token(request.auth_token)
        if user_id:
            state = await self.vote_service.get_user_vote_state(
                UserId(UUID(user_id)), request.target_kind, target_id
            )

        return GetVoteStateResponse(
            target_kind=request.target_kind,
            target_id=request.target_id,
            state=state,
            score=score,
        )
