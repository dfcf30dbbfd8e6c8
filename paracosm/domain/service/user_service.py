"""User domain service."""

import logfire

from paracosm.domain.model.user import User
from paracosm.domain.repository import UserRepository
from paracosm.domain.value import UserId
from paracosm.util.cache import ProfileCache

from .base import Service


class UserService(Service):
    """Domain service for user profile lookups."""

    def __init__(
        self, user_repository: UserRepository, profile_cache: ProfileCache
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            profile_cache: Application-wide profile cache
        """
        self.user_repository = user_repository
        self.profile_cache = profile_cache

    async def get_user_by_id(self, user_id: UserId) -> User | None:
        """Get a user by ID, consulting the profile cache first.

        Args:
            user_id: User ID

        Returns:
            User if found, None otherwise
        """
        with logfire.span("user_service.get_user_by_id", user_id=str(user_id)):
            cached = self.profile_cache.get(user_id)
            if cached is not None:
                logfire.debug("Profile cache hit", user_id=str(user_id))
                return cached

            user = await self.user_repository.find_by_id(user_id)
            if user:
                self.profile_cache.set(user_id, user)
                logfire.info("User found", user_id=str(user_id))
            else:
                logfire.warn("User not found", user_id=str(user_id))
            return user

