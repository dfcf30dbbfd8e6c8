"""Mappers for converting between database rows and domain models.

Domain models are immutable Pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM. Where a column name differs from the
model field (``comment_text`` vs ``text``), the mapper renames it.
"""

from typing import Any, Dict, Optional
from uuid import UUID

from paracosm.domain.model import (
    Comment,
    CommunityPost,
    User,
    Vote,
    World,
)
from paracosm.domain.value import (
    CommentId,
    CommunityPostId,
    TargetKind,
    UserId,
    VoteDirection,
    VoteId,
    WorldId,
)
from paracosm.domain.value.types import Username


def _uuid(value: Any) -> UUID:
    """Coerce a driver value (UUID or str) into a UUID."""
    return UUID(value) if isinstance(value, str) else value


def _optional_uuid(value: Any) -> Optional[UUID]:
    return _uuid(value) if value else None


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        username=Username(row["username"]),
        avatar_url=row.get("avatar_url"),
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return user.model_dump()


def row_to_world(row: Dict[str, Any]) -> World:
    """Convert database row to World domain model."""
    forked_from = _optional_uuid(row.get("forked_from_id"))
    return World(
        id=WorldId(_uuid(row["id"])),
        title=row["title"],
        creator_id=UserId(_uuid(row["creator_id"])),
        forked_from_id=WorldId(forked_from) if forked_from else None,
        created_at=row["created_at"],
    )


def world_to_dict(world: World) -> Dict[str, Any]:
    """Convert World domain model to database dict."""
    return world.model_dump()


def row_to_community_post(row: Dict[str, Any]) -> CommunityPost:
    """Convert database row to CommunityPost domain model."""
    return CommunityPost(
        id=CommunityPostId(_uuid(row["id"])),
        world_id=WorldId(_uuid(row["world_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        title=row["title"],
        content=row.get("content") or "",
        upvotes=row["upvotes"],
        created_at=row["created_at"],
    )


def community_post_to_dict(post: CommunityPost) -> Dict[str, Any]:
    """Convert CommunityPost domain model to database dict."""
    return post.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    parent_id = _optional_uuid(row.get("parent_comment_id"))
    return Comment(
        id=CommentId(_uuid(row["id"])),
        post_id=CommunityPostId(_uuid(row["post_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        author_username=Username(row["author_username"]),
        text=row["comment_text"],
        parent_id=CommentId(parent_id) if parent_id else None,
        upvotes=row["upvotes"],
        created_at=row["created_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = comment.model_dump()
    data["comment_text"] = data.pop("text")
    data["parent_comment_id"] = data.pop("parent_id")
    return data


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model.

    Args:
        row: Database row as dict

    Returns:
        Vote domain model
    """
    return Vote(
        id=VoteId(_uuid(row["id"])),
        voter_id=UserId(_uuid(row["user_id"])),
        target_kind=TargetKind(row["target_type"]),
        target_id=_uuid(row["target_id"]),
        direction=VoteDirection(row["vote_type"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict.

    Args:
        vote: Vote domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": vote.id,
        "user_id": vote.voter_id,
        "target_type": vote.target_kind.value,
        "target_id": vote.target_id,
        "vote_type": vote.direction.value,
        "created_at": vote.created_at,
        "updated_at": vote.updated_at,
    }
