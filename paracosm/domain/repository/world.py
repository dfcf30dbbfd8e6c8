"""World repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from paracosm.domain.model.world import World
from paracosm.domain.value import WorldId


class WorldRepository(ABC):
    """Repository for World aggregate."""

    @abstractmethod
    async def find_by_id(self, world_id: WorldId) -> Optional[World]:
        """Find a world by ID.

        Args:
            world_id: The world's unique identifier

        Returns:
            The world if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, world: World) -> World:
        """Save a world (create or update).

        Args:
            world: The world to save

        Returns:
            The saved world
        """
        pass
