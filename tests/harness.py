"""Test harness for unit and integration tests.

Settings are loaded from environment variables (configure via .env or export).
"""

import pytest_asyncio

from paracosm.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that builds a test container with the given
    components unmocked and yields a request-scoped container. Everything
    resolved from one fixture instance shares the same in-memory stores.

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything mocked, no database needed
        unit_env = create_env_fixture()

        # Integration tests - real persistence, assumes postgres running
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_cast_vote(unit_env):
            service = await unit_env.get(VoteService)
            ...
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment
