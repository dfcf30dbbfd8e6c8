"""Domain layer DI providers."""

from dishka import Scope, provide

from paracosm.config import AuthSettings, CommentSettings
from paracosm.domain.repository import (
    CommentRepository,
    CommunityPostRepository,
    TargetScoreRepository,
    UserRepository,
    VoteRepository,
    WorldRepository,
)
from paracosm.domain.service import (
    CommentService,
    JWTService,
    UserService,
    VoteService,
    WorldService,
)
from paracosm.util.cache import ProfileCache
from paracosm.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session
    lifecycle, so every service in a request shares one transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(
        self, user_repository: UserRepository, profile_cache: ProfileCache
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository, profile_cache=profile_cache
        )

    @provide
    def get_world_service(
        self,
        world_repository: WorldRepository,
        community_post_repository: CommunityPostRepository,
    ) -> WorldService:
        """Provide world domain service."""
        return WorldService(
            world_repository=world_repository,
            community_post_repository=community_post_repository,
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        comment_settings: CommentSettings,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            comment_settings=comment_settings,
        )

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        target_score_repository: TargetScoreRepository,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            target_score_repository=target_score_repository,
        )
