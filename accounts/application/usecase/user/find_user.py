"""Single-user lookup use cases."""

import logfire

from accounts.application import error
from accounts.application.usecase.base import BaseUseCase
from accounts.application.usecase.user.common import load_user
from accounts.application.usecase.user.response import UserResponse
from accounts.domain.repository import UserRepository
from accounts.domain.value import Email, UserId


class FindUserByIdUseCase(BaseUseCase):
    """Use case for fetching a user by id."""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, user_id: UserId) -> UserResponse:
        with logfire.span("find_user_by_id.execute", user_id=str(user_id)):
            user = await load_user(self.user_repository, user_id, "find_by_id")
            return UserResponse.from_domain(user)


class FindUserByEmailUseCase(BaseUseCase):
    """Use case for fetching a user by email.

    The email is validated first, so a malformed address is a
    ValidationError rather than a miss.
    """

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, email: str) -> UserResponse:
        with logfire.span("find_user_by_email.execute"):
            user = await self.user_repository.find_by_email(Email.of(email))
            if user is None:
                logfire.warn("User not found by email")
                raise error.entity_not_found("User", "email", email, "find_by_email")
            return UserResponse.from_domain(user)
