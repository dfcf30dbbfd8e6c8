"""Unit tests for DeleteCommentUseCase."""

from uuid import uuid4

import pytest

from paracosm.application.usecase.comment import (
    DeleteCommentRequest,
    DeleteCommentUseCase,
)
from paracosm.domain.error import NotAuthorizedError, NotFoundError
from paracosm.domain.repository import (
    CommentRepository,
    CommunityPostRepository,
    UserRepository,
    VoteRepository,
    WorldRepository,
)
from paracosm.domain.service import VoteService
from paracosm.domain.value import TargetKind, UserId, VoteDirection
from tests.conftest import at, make_comment, make_post, make_user, make_world
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


async def _seed(unit_env):
    """World owned by ``creator``, a post, and a small thread by ``author``."""
    user_repo = await unit_env.get(UserRepository)
    world_repo = await unit_env.get(WorldRepository)
    post_repo = await unit_env.get(CommunityPostRepository)
    comment_repo = await unit_env.get(CommentRepository)

    creator = await user_repo.save(make_user("founder"))
    author = await user_repo.save(make_user("wanderer"))
    world = await world_repo.save(make_world(creator.id))
    post = await post_repo.save(make_post(world.id, author.id))
    root = await comment_repo.save(make_comment(post.id, at(0), author_id=author.id))
    reply = await comment_repo.save(
        make_comment(post.id, at(1), parent_id=root.id)
    )
    return creator, author, post, root, reply


class TestDeleteCommentUseCase:
    """Tests for the delete comment flow."""

    @pytest.mark.asyncio
    async def test_author_deletes_thread_and_votes(self, unit_env):
        # Arrange
        use_case = await unit_env.get(DeleteCommentUseCase)
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        comment_repo = await unit_env.get(CommentRepository)
        _, author, post, root, reply = await _seed(unit_env)
        voter = UserId(uuid4())
        await vote_service.cast_vote(
            voter, TargetKind.COMMUNITY_COMMENT, reply.id, VoteDirection.UPVOTE
        )

        # Act
        response = await use_case.execute(
            DeleteCommentRequest(
                post_id=str(post.id),
                comment_id=str(root.id),
                user_id=str(author.id),
            )
        )

        # Assert
        assert set(response.removed_comment_ids) == {str(root.id), str(reply.id)}
        assert response.removed_votes == 1
        assert await comment_repo.count_by_post(post.id) == 0
        assert (
            await vote_repo.find_by_voter_and_target(
                voter, TargetKind.COMMUNITY_COMMENT, reply.id
            )
            is None
        )

    @pytest.mark.asyncio
    async def test_world_creator_may_delete(self, unit_env):
        use_case = await unit_env.get(DeleteCommentUseCase)
        creator, _, post, root, _ = await _seed(unit_env)

        response = await use_case.execute(
            DeleteCommentRequest(
                post_id=str(post.id),
                comment_id=str(root.id),
                user_id=str(creator.id),
            )
        )

        assert str(root.id) in response.removed_comment_ids

    @pytest.mark.asyncio
    async def test_other_user_refused(self, unit_env):
        use_case = await unit_env.get(DeleteCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        _, _, post, root, _ = await _seed(unit_env)

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                DeleteCommentRequest(
                    post_id=str(post.id),
                    comment_id=str(root.id),
                    user_id=str(uuid4()),
                )
            )

        assert await comment_repo.find_by_id(root.id) is not None

    @pytest.mark.asyncio
    async def test_comment_on_other_post_is_not_found(self, unit_env):
        use_case = await unit_env.get(DeleteCommentUseCase)
        _, author, _, root, _ = await _seed(unit_env)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                DeleteCommentRequest(
                    post_id=str(uuid4()),
                    comment_id=str(root.id),
                    user_id=str(author.id),
                )
            )

    @pytest.mark.asyncio
    async def test_missing_comment_is_not_found(self, unit_env):
        use_case = await unit_env.get(DeleteCommentUseCase)
        _, author, post, _, _ = await _seed(unit_env)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                DeleteCommentRequest(
                    post_id=str(post.id),
                    comment_id=str(uuid4()),
                    user_id=str(author.id),
                )
            )
