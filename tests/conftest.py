"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from uuid import uuid4

import logfire

from paracosm.domain.model import Comment, CommunityPost, Question, User, World
from paracosm.domain.value import (
    CommentId,
    CommunityPostId,
    QuestionId,
    UserId,
    WorldId,
)
from paracosm.domain.value.types import Username

# Keep test output quiet: spans still run, nothing is exported
logfire.configure(send_to_logfire=False, console=False)

BASE_TIME = datetime(2026, 1, 1, 12, 0, 0)


def at(minutes: int) -> datetime:
    """Timestamp ``minutes`` after a fixed base time."""
    return BASE_TIME + timedelta(minutes=minutes)


def make_user(username: str = "worldbuilder", user_id: UserId | None = None) -> User:
    """Build a user with sensible defaults."""
    return User(id=user_id or UserId(uuid4()), username=Username(username))


def make_world(creator_id: UserId, title: str = "Aurelia") -> World:
    """Build a world owned by ``creator_id``."""
    return World(id=WorldId(uuid4()), title=title, creator_id=creator_id)


def make_post(
    world_id: WorldId, author_id: UserId, upvotes: int = 0
) -> CommunityPost:
    """Build a community post inside ``world_id``."""
    return CommunityPost(
        id=CommunityPostId(uuid4()),
        world_id=world_id,
        author_id=author_id,
        title="What do the river folk trade?",
        content="Thinking about the economy of the delta.",
        upvotes=upvotes,
    )


def make_question(world_id: WorldId, author_id: UserId, upvotes: int = 0) -> Question:
    """Build a question inside ``world_id``."""
    return Question(
        id=QuestionId(uuid4()),
        world_id=world_id,
        author_id=author_id,
        title="Who built the first lighthouse?",
        upvotes=upvotes,
    )


def make_comment(
    post_id: CommunityPostId,
    created_at: datetime,
    parent_id: CommentId | None = None,
    comment_id: CommentId | None = None,
    author_id: UserId | None = None,
    text: str = "A comment",
    upvotes: int = 0,
) -> Comment:
    """Build a comment on ``post_id``."""
    return Comment(
        id=comment_id or CommentId(uuid4()),
        post_id=post_id,
        author_id=author_id or UserId(uuid4()),
        author_username=Username("commenter"),
        text=text,
        parent_id=parent_id,
        upvotes=upvotes,
        created_at=created_at,
    )
