"""In-memory world repository for testing."""

from typing import Optional

from paracosm.domain.model.world import World
from paracosm.domain.repository.world import WorldRepository
from paracosm.domain.value import WorldId


class InMemoryWorldRepository(WorldRepository):
    """In-memory implementation of WorldRepository for testing."""

    def __init__(self) -> None:
        self._worlds: dict[WorldId, World] = {}

    async def find_by_id(self, world_id: WorldId) -> Optional[World]:
        """Find a world by ID."""
        return self._worlds.get(world_id)

    async def save(self, world: World) -> World:
        """Save or update a world."""
        self._worlds[world.id] = world
        return world
