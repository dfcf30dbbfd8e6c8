"""Community post repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from paracosm.domain.model.community_post import CommunityPost
from paracosm.domain.value import CommunityPostId


class CommunityPostRepository(ABC):
    """Repository for CommunityPost entity."""

    @abstractmethod
    async def find_by_id(self, post_id: CommunityPostId) -> Optional[CommunityPost]:
        """Find a community post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, post: CommunityPost) -> CommunityPost:
        """Save a community post (create or update).

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass
