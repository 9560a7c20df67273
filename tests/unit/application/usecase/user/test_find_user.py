"""Unit tests for FindUserByIdUseCase and FindUserByEmailUseCase."""

from uuid import uuid4

import pytest

from accounts.application.error import EntityNotFoundError
from accounts.application.usecase.user import (
    FindUserByEmailUseCase,
    FindUserByIdUseCase,
)
from accounts.domain.error import ValidationError
from accounts.domain.repository import UserRepository
from accounts.domain.value import UserId
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestFindUserById:
    @pytest.mark.asyncio
    async def test_found(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        use_case = await unit_env.get(FindUserByIdUseCase)
        user = await user_repo.save(make_user())

        response = await use_case.execute(user.id)

        assert response.id == user.id
        assert response.name == "Maria Silva"
        assert response.status == "Active"

    @pytest.mark.asyncio
    async def test_not_found(self, unit_env):
        use_case = await unit_env.get(FindUserByIdUseCase)

        with pytest.raises(EntityNotFoundError) as exc_info:
            await use_case.execute(UserId(uuid4()))

        assert exc_info.value.identifier_type == "id"


class TestFindUserByEmail:
    @pytest.mark.asyncio
    async def test_found(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        use_case = await unit_env.get(FindUserByEmailUseCase)
        user = await user_repo.save(make_user())

        response = await use_case.execute("maria@example.com")

        assert response.id == user.id

    @pytest.mark.asyncio
    async def test_lookup_is_exact(self, unit_env):
        """Should not match an email stored with different case."""
        user_repo = await unit_env.get(UserRepository)
        use_case = await unit_env.get(FindUserByEmailUseCase)
        await user_repo.save(make_user())

        with pytest.raises(EntityNotFoundError) as exc_info:
            await use_case.execute("Maria@Example.com")

        assert exc_info.value.identifier_type == "email"
        assert exc_info.value.details["operation"] == "find_by_email"

    @pytest.mark.asyncio
    async def test_malformed_email_is_validation_error(self, unit_env):
        use_case = await unit_env.get(FindUserByEmailUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute("not-an-email")
