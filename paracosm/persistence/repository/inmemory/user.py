"""In-memory user repository for testing."""

from typing import Optional

from paracosm.domain.model.user import User
from paracosm.domain.repository.user import UserRepository
from paracosm.domain.value import UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}
        self.lookups = 0  # Counts find_by_id calls, for cache tests

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        self.lookups += 1
        return self._users.get(user_id)

    async def save(self, user: User) -> User:
        """Save or update a user."""
        self._users[user.id] = user
        return user
