"""In-memory comment repository for testing."""

from typing import Optional

from paracosm.domain.model.comment import Comment
from paracosm.domain.repository.comment import CommentRepository
from paracosm.domain.value import CommentId, CommunityPostId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_ids(self) -> list[CommentId]:
        """List every stored comment ID."""
        return list(self._comments)

    async def find_by_post(self, post_id: CommunityPostId) -> list[Comment]:
        """Find all comments for a post, in insertion order."""
        return [c for c in self._comments.values() if c.post_id == post_id]

    async def save(self, comment: Comment) -> Comment:
        """Save or update a comment."""
        self._comments[comment.id] = comment
        return comment

    async def delete(self, comment_id: CommentId) -> list[CommentId]:
        """Delete a comment and its replies, mirroring the FK cascade."""
        if comment_id not in self._comments:
            return []

        removed: list[CommentId] = []
        pending = [comment_id]
        while pending:
            current = pending.pop()
            if current in removed:
                continue
            removed.append(current)
            pending.extend(
                c.id for c in self._comments.values() if c.parent_id == current
            )

        for removed_id in removed:
            self._comments.pop(removed_id, None)
        return removed

    async def count_by_post(self, post_id: CommunityPostId) -> int:
        """Count comments for a post."""
        return sum(1 for c in self._comments.values() if c.post_id == post_id)
