"""Unit tests for CastVoteUseCase."""

from uuid import uuid4

import pytest

from paracosm.application.usecase.vote import CastVoteRequest, CastVoteUseCase
from paracosm.domain.error import NotFoundError
from paracosm.domain.repository import CommunityPostRepository, UserRepository
from paracosm.domain.value import (
    TargetKind,
    UserId,
    VoteDirection,
    VoteState,
    WorldId,
)
from tests.conftest import make_post, make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


class TestCastVoteUseCase:
    """Tests for the cast vote flow."""

    @pytest.mark.asyncio
    async def test_upvote_then_downvote_then_downvote(self, unit_env):
        """Starting from S: up gives S+1, down gives S-1, down again gives S."""
        # Arrange
        use_case = await unit_env.get(CastVoteUseCase)
        post_repo = await unit_env.get(CommunityPostRepository)
        user_repo = await unit_env.get(UserRepository)
        post = await post_repo.save(
            make_post(WorldId(uuid4()), UserId(uuid4()), upvotes=4)
        )
        voter_id = str((await user_repo.save(make_user("voter"))).id)

        def request(direction: VoteDirection) -> CastVoteRequest:
            return CastVoteRequest(
                target_kind=TargetKind.COMMUNITY_POST,
                target_id=str(post.id),
                voter_id=voter_id,
                direction=direction,
            )

        # Act
        up = await use_case.execute(request(VoteDirection.UPVOTE))
        down = await use_case.execute(request(VoteDirection.DOWNVOTE))
        undo = await use_case.execute(request(VoteDirection.DOWNVOTE))

        # Assert
        assert (up.state, up.score) == (VoteState.UPVOTED, 5)
        assert (down.state, down.score, down.delta) == (VoteState.DOWNVOTED, 3, -2)
        assert (undo.state, undo.score, undo.delta) == (VoteState.NO_VOTE, 4, 1)
        assert undo.target_id == str(post.id)
        assert undo.target_kind == TargetKind.COMMUNITY_POST

    @pytest.mark.asyncio
    async def test_missing_target(self, unit_env):
        use_case = await unit_env.get(CastVoteUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CastVoteRequest(
                    target_kind=TargetKind.QUESTION,
                    target_id=str(uuid4()),
                    voter_id=str(uuid4()),
                    direction=VoteDirection.UPVOTE,
                )
            )

    @pytest.mark.asyncio
    async def test_malformed_target_id(self, unit_env):
        use_case = await unit_env.get(CastVoteUseCase)

        with pytest.raises(ValueError):
            await use_case.execute(
                CastVoteRequest(
                    target_kind=TargetKind.QUESTION,
                    target_id="not-a-uuid",
                    voter_id=str(uuid4()),
                    direction=VoteDirection.UPVOTE,
                )
            )

    @pytest.mark.asyncio
    async def test_unknown_voter_rejected_before_ledger_write(self, unit_env):
        """A token whose account no longer exists cannot vote."""
        use_case = await unit_env.get(CastVoteUseCase)
        post_repo = await unit_env.get(CommunityPostRepository)
        post = await post_repo.save(make_post(WorldId(uuid4()), UserId(uuid4())))

        with pytest.raises(NotFoundError, match="User"):
            await use_case.execute(
                CastVoteRequest(
                    target_kind=TargetKind.COMMUNITY_POST,
                    target_id=str(post.id),
                    voter_id=str(uuid4()),
                    direction=VoteDirection.UPVOTE,
                )
            )

        assert (await post_repo.find_by_id(post.id)).upvotes == 0
