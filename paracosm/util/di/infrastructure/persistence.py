"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from paracosm.config import Settings
from paracosm.domain.repository import (
    CommentRepository,
    CommunityPostRepository,
    TargetScoreRepository,
    UserRepository,
    VoteRepository,
    WorldRepository,
)
from paracosm.persistence.database import create_engine, create_session_factory
from paracosm.persistence.repository import (
    PostgresCommentRepository,
    PostgresCommunityPostRepository,
    PostgresTargetScoreRepository,
    PostgresUserRepository,
    PostgresVoteRepository,
    PostgresWorldRepository,
)
from paracosm.util.di.base import ProviderBase
from paracosm.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        """Provide database engine."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session is committed at the end of the request if no exception
        occurred, or rolled back if one was raised. A vote's ledger write and
        its score update therefore land together or not at all.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
                logfire.debug("Session committed")
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        """Provide User repository."""
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_world_repository(self, session: AsyncSession) -> WorldRepository:
        """Provide World repository."""
        return PostgresWorldRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_community_post_repository(
        self, session: AsyncSession
    ) -> CommunityPostRepository:
        """Provide CommunityPost repository."""
        return PostgresCommunityPostRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, session: AsyncSession) -> CommentRepository:
        """Provide Comment repository."""
        return PostgresCommentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(self, session: AsyncSession) -> VoteRepository:
        """Provide Vote repository."""
        return PostgresVoteRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_target_score_repository(
        self, session: AsyncSession
    ) -> TargetScoreRepository:
        """Provide the denormalized score repository."""
        return PostgresTargetScoreRepository(session)
