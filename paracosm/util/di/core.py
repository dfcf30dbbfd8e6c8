"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from paracosm.config import AuthSettings, CommentSettings, Settings
from paracosm.util.cache import ProfileCache
from paracosm.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_comment_settings(self, settings: Settings) -> CommentSettings:
        """Provide comment thread settings."""
        return settings.comments

    @provide(scope=Scope.APP)
    def provide_profile_cache(self, settings: Settings) -> ProfileCache:
        """Provide the process-wide profile cache."""
        return ProfileCache(
            max_entries=settings.cache.profile_max_entries,
            ttl_seconds=settings.cache.profile_ttl_seconds,
        )
