"""Unit tests for row mappers."""

from uuid import uuid4

from paracosm.domain.model import Vote
from paracosm.domain.value import (
    CommunityPostId,
    TargetKind,
    UserId,
    VoteDirection,
    VoteId,
)
from paracosm.persistence.mappers import (
    comment_to_dict,
    row_to_comment,
    row_to_vote,
    vote_to_dict,
)
from tests.conftest import at, make_comment


class TestCommentMapper:
    def test_columns_renamed(self):
        parent_id = uuid4()
        comment = make_comment(
            CommunityPostId(uuid4()), at(0), parent_id=parent_id, text="Lanterns"
        )

        data = comment_to_dict(comment)

        assert data["comment_text"] == "Lanterns"
        assert data["parent_comment_id"] == parent_id
        assert "text" not in data
        assert "parent_id" not in data

    def test_row_with_string_ids(self):
        comment_id, post_id, author_id = uuid4(), uuid4(), uuid4()
        row = {
            "id": str(comment_id),
            "post_id": str(post_id),
            "author_id": str(author_id),
            "author_username": "archivist",
            "comment_text": "Lanterns",
            "parent_comment_id": None,
            "upvotes": -2,
            "created_at": at(3),
        }

        comment = row_to_comment(row)

        assert comment.id == comment_id
        assert comment.post_id == post_id
        assert comment.parent_id is None
        assert comment.text == "Lanterns"
        assert comment.upvotes == -2


class TestVoteMapper:
    def test_vote_columns(self):
        vote = Vote(
            id=VoteId(uuid4()),
            voter_id=UserId(uuid4()),
            target_kind=TargetKind.COMMUNITY_COMMENT,
            target_id=uuid4(),
            direction=VoteDirection.DOWNVOTE,
            created_at=at(0),
            updated_at=at(1),
        )

        data = vote_to_dict(vote)

        assert data["user_id"] == vote.voter_id
        assert data["target_type"] == "community_comment"
        assert data["vote_type"] == "downvote"
        assert row_to_vote(data) == vote
