"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from paracosm.domain.model import User
from paracosm.domain.repository import UserRepository
from paracosm.domain.value import UserId
from paracosm.persistence.mappers import row_to_user, user_to_dict
from paracosm.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository.

    Profiles are owned by the sign-in service; this repository mirrors the
    fields the discussion core displays.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def save(self, user: User) -> User:
        """Insert a profile, or refresh username and avatar of an existing one."""
        stmt = insert(users_table).values(**user_to_dict(user))
        stmt = stmt.on_conflict_do_update(
            index_elements=[users_table.c.id],
            set_={
                "username": stmt.excluded.username,
                "avatar_url": stmt.excluded.avatar_url,
            },
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return user
