"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from paracosm.domain.model.comment import Comment
from paracosm.domain.value import CommentId, CommunityPostId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_post(self, post_id: CommunityPostId) -> List[Comment]:
        """Find all comments for a post.

        No ordering is guaranteed; threading and ordering happen in
        the comment tree builder.

        Args:
            post_id: The post ID

        Returns:
            Flat list of the post's comments
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> List[CommentId]:
        """Delete a comment and its whole reply subtree (hard delete).

        Args:
            comment_id: The comment ID to delete

        Returns:
            IDs of every removed comment (empty if the comment did not exist)
        """
        pass

    @abstractmethod
    async def count_by_post(self, post_id: CommunityPostId) -> int:
        """Count comments for a post.

        Args:
            post_id: The post ID

        Returns:
            Number of comments
        """
        pass
