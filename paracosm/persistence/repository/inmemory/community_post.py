"""In-memory community post repository for testing."""

from typing import Optional

from paracosm.domain.model.community_post import CommunityPost
from paracosm.domain.repository.community_post import CommunityPostRepository
from paracosm.domain.value import CommunityPostId


class InMemoryCommunityPostRepository(CommunityPostRepository):
    """In-memory implementation of CommunityPostRepository for testing."""

    def __init__(self) -> None:
        self._posts: dict[CommunityPostId, CommunityPost] = {}

    async def find_by_id(self, post_id: CommunityPostId) -> Optional[CommunityPost]:
        """Find a community post by ID."""
        return self._posts.get(post_id)

    async def find_ids(self) -> list[CommunityPostId]:
        """List every stored post ID."""
        return list(self._posts)

    async def save(self, post: CommunityPost) -> CommunityPost:
        """Save or update a community post."""
        self._posts[post.id] = post
        return post
