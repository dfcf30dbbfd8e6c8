"""Unit tests for the score reconciliation script."""

from uuid import uuid4

import pytest
import pytest_asyncio
from dishka import Scope

from paracosm.domain.repository import CommentRepository, CommunityPostRepository
from paracosm.domain.service import VoteService
from paracosm.domain.value import TargetKind, UserId, VoteDirection, WorldId
from paracosm.persistence.repository.inmemory import InMemoryQuestionRepository
from scripts.reconcile_scores import parse_args, reconcile_scores
from tests.conftest import at, make_comment, make_post, make_question
from tests.di import build_test_container


@pytest_asyncio.fixture
async def container():
    # Stores outlive a single request so the script's scopes see seeded data
    container = build_test_container(mock_scope=Scope.APP)
    yield container
    await container.close()


class TestReconcileScores:
    """Tests for reconcile_scores."""

    @pytest.mark.asyncio
    async def test_repairs_every_kind(self, container):
        # Arrange
        question_store = await container.get(InMemoryQuestionRepository)
        post_repo = await container.get(CommunityPostRepository)
        comment_repo = await container.get(CommentRepository)
        question = await question_store.save(
            make_question(WorldId(uuid4()), UserId(uuid4()), upvotes=12)
        )
        post = await post_repo.save(
            make_post(WorldId(uuid4()), UserId(uuid4()), upvotes=-3)
        )
        comment = await comment_repo.save(
            make_comment(post.id, at(0), upvotes=7)
        )
        async with container() as request_container:
            vote_service = await request_container.get(VoteService)
            await vote_service.cast_vote(
                UserId(uuid4()), TargetKind.QUESTION, question.id, VoteDirection.UPVOTE
            )

        # Act
        results = await reconcile_scores(container, list(TargetKind))

        # Assert
        assert results == {
            TargetKind.QUESTION: {question.id: 1},
            TargetKind.COMMUNITY_POST: {post.id: 0},
            TargetKind.COMMUNITY_COMMENT: {comment.id: 0},
        }
        assert (await question_store.find_by_id(question.id)).upvotes == 1
        assert (await post_repo.find_by_id(post.id)).upvotes == 0

    @pytest.mark.asyncio
    async def test_restricted_to_given_targets(self, container):
        post_repo = await container.get(CommunityPostRepository)
        chosen = await post_repo.save(
            make_post(WorldId(uuid4()), UserId(uuid4()), upvotes=5)
        )
        other = await post_repo.save(
            make_post(WorldId(uuid4()), UserId(uuid4()), upvotes=5)
        )

        results = await reconcile_scores(
            container, [TargetKind.COMMUNITY_POST], [chosen.id]
        )

        assert results == {TargetKind.COMMUNITY_POST: {chosen.id: 0}}
        assert (await post_repo.find_by_id(other.id)).upvotes == 5


class TestParseArgs:
    def test_defaults_to_every_kind(self):
        args = parse_args([])

        assert args.kinds is None
        assert args.target_ids == []

    def test_kind_and_ids(self):
        target_id = uuid4()

        args = parse_args(["--kind", "question", str(target_id)])

        assert args.kinds == [TargetKind.QUESTION]
        assert args.target_ids == [target_id]

    def test_ids_without_single_kind_rejected(self):
        with pytest.raises(SystemExit):
            parse_args([str(uuid4())])
