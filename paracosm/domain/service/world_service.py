"""World domain service.

Answers governance questions about discussions: which post a thread
belongs to and who governs the world it sits in.
"""

import logfire

from paracosm.domain.model.community_post import CommunityPost
from paracosm.domain.model.world import World
from paracosm.domain.repository import CommunityPostRepository, WorldRepository
from paracosm.domain.value import CommunityPostId, UserId, WorldId

from .base import Service


class WorldService(Service):
    """Domain service for world and community post lookups."""

    def __init__(
        self,
        world_repository: WorldRepository,
        community_post_repository: CommunityPostRepository,
    ) -> None:
        """Initialize world service.

        Args:
            world_repository: World repository
            community_post_repository: Community post repository
        """
        self.world_repository = world_repository
        self.community_post_repository = community_post_repository

    async def get_world_by_id(self, world_id: WorldId) -> World | None:
        """Get a world by ID.

        Args:
            world_id: World ID

        Returns:
            World if found, None otherwise
        """
        with logfire.span("world_service.get_world_by_id", world_id=str(world_id)):
            world = await self.world_repository.find_by_id(world_id)
            if world:
                logfire.info("World found", world_id=str(world_id), title=world.title)
            else:
                logfire.warn("World not found", world_id=str(world_id))
            return world

    async def get_community_post_by_id(
        self, post_id: CommunityPostId
    ) -> CommunityPost | None:
        """Get a community post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        with logfire.span(
            "world_service.get_community_post_by_id", post_id=str(post_id)
        ):
            post = await self.community_post_repository.find_by_id(post_id)
            if post:
                logfire.info("Community post found", post_id=str(post_id))
            else:
                logfire.warn("Community post not found", post_id=str(post_id))
            return post

    async def get_governing_user_id(self, post: CommunityPost) -> UserId | None:
        """Get the creator of the world a post belongs to.

        Args:
            post: Community post

        Returns:
            The world creator's ID, or None if the world no longer exists
        """
        world = await self.get_world_by_id(post.world_id)
        return world.creator_id if world else None
