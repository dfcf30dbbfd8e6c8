"""PostgreSQL implementation of World repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from paracosm.domain.model import World
from paracosm.domain.repository import WorldRepository
from paracosm.domain.value import WorldId
from paracosm.persistence.mappers import row_to_world, world_to_dict
from paracosm.persistence.tables import worlds_table


class PostgresWorldRepository(WorldRepository):
    """PostgreSQL implementation of WorldRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, world_id: WorldId) -> Optional[World]:
        """Find a world by ID."""
        stmt = select(worlds_table).where(worlds_table.c.id == world_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_world(dict(row)) if row else None

    async def save(self, world: World) -> World:
        """Save a world (create or update)."""
        world_dict = world_to_dict(world)

        if await self.find_by_id(world.id):
            stmt = (
                worlds_table.update()
                .where(worlds_table.c.id == world.id)
                .values(**world_dict)
            )
        else:
            stmt = worlds_table.insert().values(**world_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return world
