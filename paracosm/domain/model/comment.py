"""Comment entity.

Comments are threaded replies on a community post. The store keeps them
flat (each row points at its parent); the nested view is built on read.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from paracosm.domain.model.common import DomainModel
from paracosm.domain.value import CommentId, CommunityPostId, UserId
from paracosm.domain.value.types import Username


class Comment(DomainModel):
    """Comment entity.

    Represents a comment on a community post or a reply to another comment.

    Threading is managed through:
    - parent_id: Direct parent comment (None for top-level)
    - post_id: The discussion every comment in a thread shares
    """

    id: CommentId
    post_id: CommunityPostId
    author_id: UserId
    author_username: Username
    text: str = Field(min_length=1)  # Length limit comes from CommentSettings
    parent_id: Optional[CommentId] = None
    upvotes: int = 0
    created_at: datetime = Field(default_factory=datetime.now)

    @field_validator("text")
    @classmethod
    def strip_text(cls, v: str) -> str:
        """Strip surrounding whitespace and reject blank text."""
        stripped = v.strip()
        if not stripped:
            raise ValueError("Comment text must not be blank")
        return stripped
