"""Application layer DI providers."""

from dishka import Scope, provide

from paracosm.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentThreadUseCase,
)
from paracosm.application.usecase.vote import CastVoteUseCase, GetVoteStateUseCase
from paracosm.config import CommentSettings
from paracosm.domain.service import (
    CommentService,
    JWTService,
    UserService,
    VoteService,
    WorldService,
)
from paracosm.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Application use cases provider - concrete, no mocks needed."""

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_comment_thread_use_case(
        self,
        comment_service: CommentService,
        world_service: WorldService,
        vote_service: VoteService,
        jwt_service: JWTService,
        comment_settings: CommentSettings,
    ) -> GetCommentThreadUseCase:
        """Provide get comment thread use case."""
        return GetCommentThreadUseCase(
            comment_service=comment_service,
            world_service=world_service,
            vote_service=vote_service,
            jwt_service=jwt_service,
            comment_settings=comment_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        world_service: WorldService,
        user_service: UserService,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            world_service=world_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self,
        comment_service: CommentService,
        world_service: WorldService,
        vote_service: VoteService,
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(
            comment_service=comment_service,
            world_service=world_service,
            vote_service=vote_service,
        )

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_vote_state_use_case(
        self, vote_service: VoteService, jwt_service: JWTService
    ) -> GetVoteStateUseCase:
        """Provide get vote state use case."""
        return GetVoteStateUseCase(vote_service=vote_service, jwt_service=jwt_service)

    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(
        self, vote_service: VoteService, user_service: UserService
    ) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_service=vote_service, user_service=user_service)
