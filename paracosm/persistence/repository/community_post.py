"""PostgreSQL implementation of CommunityPost repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from paracosm.domain.model import CommunityPost
from paracosm.domain.repository import CommunityPostRepository
from paracosm.domain.value import CommunityPostId
from paracosm.persistence.mappers import community_post_to_dict, row_to_community_post
from paracosm.persistence.tables import community_posts_table


class PostgresCommunityPostRepository(CommunityPostRepository):
    """PostgreSQL implementation of CommunityPostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, post_id: CommunityPostId) -> Optional[CommunityPost]:
        """Find a community post by ID."""
        stmt = select(community_posts_table).where(
            community_posts_table.c.id == post_id
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_community_post(dict(row)) if row else None

    async def save(self, post: CommunityPost) -> CommunityPost:
        """Save a community post (create or update)."""
        post_dict = community_post_to_dict(post)

        if await self.find_by_id(post.id):
            stmt = (
                community_posts_table.update()
                .where(community_posts_table.c.id == post.id)
                .values(**post_dict)
            )
        else:
            stmt = community_posts_table.insert().values(**post_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return post
