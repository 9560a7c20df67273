"""Test harness for unit, integration and E2E tests.

Settings are loaded from environment variables (configure via .env or export).
Integration runs that unmock persistence assume a migrated PostgreSQL database.
"""

import pytest_asyncio

from accounts.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a test container with specified unmocking
    - Yields request-scoped container for service access

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything mocked, no database needed
        unit_env = create_env_fixture()

        # Real bcrypt cost
        security_env = create_env_fixture(unmock={"security"})

        @pytest.mark.asyncio
        async def test_create_user(unit_env):
            use_case = await unit_env.get(CreateUserUseCase)
            user = await use_case.execute(CreateUserRequest(...))
            assert user.id is not None
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        # Open request-scoped context
        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment
