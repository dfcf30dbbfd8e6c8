"""Vote routes.

Questions, community posts and community comments share one pair of
endpoints, selected by the ``target_kind`` path segment.
"""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status
from pydantic import BaseModel

from paracosm.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
    GetVoteStateRequest,
    GetVoteStateResponse,
    GetVoteStateUseCase,
)
from paracosm.domain.error import NotFoundError
from paracosm.domain.service import JWTService
from paracosm.domain.value import TargetKind, VoteDirection

router = APIRouter(prefix="/votes", tags=["votes"], route_class=DishkaRoute)


class CastVoteAPIRequest(BaseModel):
    """API request for casting a vote."""

    direction: VoteDirection
    current_score: int | None = None  # Score the client is displaying


@router.get("/{target_kind}/{target_id}", response_model=GetVoteStateResponse)
async def get_vote_state(
    target_kind: TargetKind,
    target_id: str,
    get_vote_state_use_case: FromDishka[GetVoteStateUseCase],
    auth_token: str | None = Cookie(default=None),
) -> GetVoteStateResponse:
    """Get a target's score and the reader's vote on it.

    Anonymous readers get ``no_vote``.

    Args:
        target_kind: question, community_post or community_comment
        target_id: Target UUID
        get_vote_state_use_case: Get vote state use case from DI
        auth_token: JWT token from cookie (optional)
    """
    try:
        request = GetVoteStateRequest(
            target_kind=target_kind, target_id=target_id, auth_token=auth_token
        )
        return await get_vote_state_use_case.execute(request)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.post("/{target_kind}/{target_id}", response_model=CastVoteResponse)
async def cast_vote(
    target_kind: TargetKind,
    target_id: str,
    request: CastVoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CastVoteResponse:
    """Upvote or downvote a target.

    Repeating the current vote removes it, the opposite direction flips it.
    Requires authentication.

    Args:
        target_kind: question, community_post or community_comment
        target_id: Target UUID
        request: Vote direction and the client's displayed score
        cast_vote_use_case: Cast vote use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        The voter's new state and the target's new score

    Raises:
        HTTPException: If not authenticated or the target does not exist
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to vote",
        )

    try:
        use_case_request = CastVoteRequest(
            target_kind=target_kind,
            target_id=target_id,
            voter_id=user_id,
            direction=request.direction,
            current_score=request.current_score,
        )
        return await cast_vote_use_case.execute(use_case_request)
    except NotFoundError as e:
        logfire.warn("Vote on missing target", error=str(e))
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
