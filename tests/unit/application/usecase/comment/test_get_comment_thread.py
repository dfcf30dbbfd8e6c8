"""Unit tests for GetCommentThreadUseCase."""

from uuid import uuid4

import pytest

from paracosm.application.usecase.comment import (
    GetCommentThreadRequest,
    GetCommentThreadUseCase,
)
from paracosm.domain.error import NotFoundError
from paracosm.domain.repository import CommentRepository, CommunityPostRepository
from paracosm.domain.service import JWTService, VoteService
from paracosm.domain.value import (
    TargetKind,
    UserId,
    VoteDirection,
    VoteState,
    WorldId,
)
from tests.conftest import at, make_comment, make_post
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


async def _seed_chain(unit_env, length: int):
    """Store a post with a single reply chain ``length`` comments deep."""
    post_repo = await unit_env.get(CommunityPostRepository)
    comment_repo = await unit_env.get(CommentRepository)
    post = await post_repo.save(make_post(WorldId(uuid4()), UserId(uuid4())))
    chain = []
    parent_id = None
    for i in range(length):
        comment = await comment_repo.save(
            make_comment(post.id, at(i), parent_id=parent_id)
        )
        chain.append(comment)
        parent_id = comment.id
    return post, chain


class TestGetCommentThreadUseCase:
    """Tests for reading a nested thread."""

    @pytest.mark.asyncio
    async def test_thread_is_nested_and_ordered(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetCommentThreadUseCase)
        post_repo = await unit_env.get(CommunityPostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        post = await post_repo.save(make_post(WorldId(uuid4()), UserId(uuid4())))
        old_root = make_comment(post.id, at(0))
        new_root = make_comment(post.id, at(10))
        late_reply = make_comment(post.id, at(5), parent_id=old_root.id)
        early_reply = make_comment(post.id, at(1), parent_id=old_root.id)
        for comment in (late_reply, old_root, early_reply, new_root):
            await comment_repo.save(comment)

        # Act
        response = await use_case.execute(GetCommentThreadRequest(post_id=str(post.id)))

        # Assert
        assert response.total == 4
        assert [c.comment_id for c in response.comments] == [
            str(new_root.id),
            str(old_root.id),
        ]
        assert [r.comment_id for r in response.comments[1].replies] == [
            str(early_reply.id),
            str(late_reply.id),
        ]
        assert response.comments[1].replies[0].depth == 1

    @pytest.mark.asyncio
    async def test_presentation_limits(self, unit_env):
        """Indentation caps at three and replies stop at depth five."""
        use_case = await unit_env.get(GetCommentThreadUseCase)
        post, _ = await _seed_chain(unit_env, length=7)

        response = await use_case.execute(GetCommentThreadRequest(post_id=str(post.id)))

        items = []
        item = response.comments[0]
        while item:
            items.append(item)
            item = item.replies[0] if item.replies else None
        assert [i.depth for i in items] == [0, 1, 2, 3, 4, 5, 6]
        assert [i.indent_level for i in items] == [0, 1, 2, 3, 3, 3, 3]
        assert [i.can_reply for i in items] == [True] * 5 + [False] * 2

    @pytest.mark.asyncio
    async def test_anonymous_reader_sees_no_votes(self, unit_env):
        use_case = await unit_env.get(GetCommentThreadUseCase)
        vote_service = await unit_env.get(VoteService)
        post, chain = await _seed_chain(unit_env, length=1)
        await vote_service.cast_vote(
            UserId(uuid4()),
            TargetKind.COMMUNITY_COMMENT,
            chain[0].id,
            VoteDirection.UPVOTE,
        )

        response = await use_case.execute(GetCommentThreadRequest(post_id=str(post.id)))

        assert response.comments[0].user_vote == VoteState.NO_VOTE
        assert response.comments[0].upvotes == 1

    @pytest.mark.asyncio
    async def test_authenticated_reader_sees_own_votes(self, unit_env):
        use_case = await unit_env.get(GetCommentThreadUseCase)
        vote_service = await unit_env.get(VoteService)
        jwt_service = await unit_env.get(JWTService)
        post, chain = await _seed_chain(unit_env, length=2)
        reader = UserId(uuid4())
        await vote_service.cast_vote(
            reader,
            TargetKind.COMMUNITY_COMMENT,
            chain[1].id,
            VoteDirection.DOWNVOTE,
        )
        token = jwt_service.create_token(str(reader), "reader")

        response = await use_case.execute(
            GetCommentThreadRequest(post_id=str(post.id), auth_token=token)
        )

        root = response.comments[0]
        assert root.user_vote == VoteState.NO_VOTE
        assert root.replies[0].user_vote == VoteState.DOWNVOTED

    @pytest.mark.asyncio
    async def test_invalid_token_treated_as_anonymous(self, unit_env):
        use_case = await unit_env.get(GetCommentThreadUseCase)
        post, _ = await _seed_chain(unit_env, length=1)

        response = await use_case.execute(
            GetCommentThreadRequest(post_id=str(post.id), auth_token="garbage")
        )

        assert response.comments[0].user_vote == VoteState.NO_VOTE

    @pytest.mark.asyncio
    async def test_post_without_comments(self, unit_env):
        use_case = await unit_env.get(GetCommentThreadUseCase)
        post, _ = await _seed_chain(unit_env, length=0)

        response = await use_case.execute(GetCommentThreadRequest(post_id=str(post.id)))

        assert response.comments == []
        assert response.total == 0

    @pytest.mark.asyncio
    async def test_missing_post(self, unit_env):
        use_case = await unit_env.get(GetCommentThreadUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetCommentThreadRequest(post_id=str(uuid4())))
