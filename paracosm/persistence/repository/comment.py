"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from paracosm.domain.model import Comment
from paracosm.domain.repository import CommentRepository
from paracosm.domain.value import CommentId, CommunityPostId
from paracosm.persistence.mappers import comment_to_dict, row_to_comment
from paracosm.persistence.tables import community_comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(community_comments_table).where(
            community_comments_table.c.id == comment_id
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_comment(dict(row)) if row else None

    async def find_by_post(self, post_id: CommunityPostId) -> List[Comment]:
        """Find all comments for a post as a flat list.

        Threading is done in memory by the comment tree builder.
        """
        stmt = select(community_comments_table).where(
            community_comments_table.c.post_id == post_id
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(dict(row)) for row in result.mappings().all()]

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        comment_dict = comment_to_dict(comment)

        if await self.find_by_id(comment.id):
            stmt = (
                community_comments_table.update()
                .where(community_comments_table.c.id == comment.id)
                .values(**comment_dict)
            )
        else:
            stmt = community_comments_table.insert().values(**comment_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def delete(self, comment_id: CommentId) -> List[CommentId]:
        """Delete a comment and every reply beneath it.

        The subtree IDs are collected with a recursive CTE before the delete
        so callers can clean up rows that reference them (votes). The
        foreign key cascade removes the replies themselves.
        """
        subtree = (
            select(community_comments_table.c.id)
            .where(community_comments_table.c.id == comment_id)
            .cte(name="subtree", recursive=True)
        )
        subtree = subtree.union_all(
            select(community_comments_table.c.id).where(
                community_comments_table.c.parent_comment_id == subtree.c.id
            )
        )
        result = await self.session.execute(select(subtree.c.id))
        removed = [CommentId(row[0]) for row in result.all()]

        if removed:
            stmt = community_comments_table.delete().where(
                community_comments_table.c.id.in_(removed)
            )
            await self.session.execute(stmt)
            await self.session.flush()

        return removed

    async def count_by_post(self, post_id: CommunityPostId) -> int:
        """Count comments for a post."""
        stmt = (
            select(func.count())
            .select_from(community_comments_table)
            .where(community_comments_table.c.post_id == post_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0
