"""Change password use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from accounts.application import error
from accounts.application.usecase.base import BaseUseCase
from accounts.application.usecase.user.common import load_user
from accounts.application.usecase.user.response import UserResponse
from accounts.domain.repository import UserRepository
from accounts.domain.service import PasswordEncoder
from accounts.domain.value import Password, UserId


class ChangePasswordRequest(BaseModel):
    """Change password request."""

    user_id: UUID
    current_password: str = Field(repr=False)
    new_password: str = Field(repr=False)


class ChangePasswordUseCase(BaseUseCase):
    """Use case for replacing a user's password.

    The caller must prove knowledge of the current password.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_encoder: PasswordEncoder,
    ) -> None:
        self.user_repository = user_repository
        self.password_encoder = password_encoder

    async def execute(self, request: ChangePasswordRequest) -> UserResponse:
        """Execute change password flow.

        Steps:
        1. Load the user
        2. Check the current password against the stored hash
        3. Validate and hash the new password
        4. Save the user with the new hash

        Raises:
            EntityNotFoundError: If the user does not exist
            MatchingError: If the current password is wrong
            ValidationError: If the new password breaks the password policy
        """
        user_id = UserId(request.user_id)

        with logfire.span("change_password.execute", user_id=str(user_id)):
            user = await load_user(self.user_repository, user_id, "change_password")

            if not self.password_encoder.matches(
                request.current_password, user.password.value
            ):
                logfire.warn("Current password does not match", user_id=str(user_id))
                raise error.matching_error("User", "password", "change_password")

            password = self.password_encoder.encrypt(
                Password.of_raw(request.new_password)
            )
            saved_user = await self.user_repository.save(user.change_password(password))

            logfire.info("Password changed", user_id=str(user_id))
            return UserResponse.from_domain(saved_user)
