"""Unit tests for UserService."""

from uuid import uuid4

import pytest

from paracosm.domain.repository import UserRepository
from paracosm.domain.service import UserService
from paracosm.domain.value import UserId
from paracosm.domain.value.types import Username
from paracosm.util.cache import ProfileCache
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


class TestGetUserById:
    """Tests for cached profile lookups."""

    @pytest.mark.asyncio
    async def test_second_lookup_served_from_cache(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        user = make_user("lorekeeper")
        await user_repo.save(user)

        # Act
        first = await user_service.get_user_by_id(user.id)
        second = await user_service.get_user_by_id(user.id)

        # Assert
        assert first == second == user
        assert user_repo.lookups == 1

    @pytest.mark.asyncio
    async def test_missing_user_is_not_cached(self, unit_env):
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        user_id = UserId(uuid4())

        assert await user_service.get_user_by_id(user_id) is None
        assert await user_service.get_user_by_id(user_id) is None
        assert user_repo.lookups == 2

    @pytest.mark.asyncio
    async def test_invalidated_profile_is_reloaded(self, unit_env):
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        profile_cache = await unit_env.get(ProfileCache)
        user = make_user("lorekeeper")
        await user_repo.save(user)
        await user_service.get_user_by_id(user.id)

        renamed = user.model_copy(update={"username": Username("loremaster")})
        await user_repo.save(renamed)
        profile_cache.invalidate(user.id)
        fetched = await user_service.get_user_by_id(user.id)

        assert str(fetched.username) == "loremaster"
        assert user_repo.lookups == 2
