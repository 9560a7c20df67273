"""Update user use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from accounts.application import error
from accounts.application.usecase.base import BaseUseCase
from accounts.application.usecase.user.common import load_user
from accounts.application.usecase.user.response import UserResponse
from accounts.domain.repository import UserRepository
from accounts.domain.value import Email, Name, Telephone, UserId


class UpdateUserRequest(BaseModel):
    """Update user request."""

    user_id: UUID
    name: str
    email: str
    telephone: str


class UpdateUserUseCase(BaseUseCase):
    """Use case for replacing a user's name, email and telephone.

    Allowed whatever the user's status is. The user may keep their own
    email; taking another user's email is a DuplicateEmailError.
    """

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, request: UpdateUserRequest) -> UserResponse:
        """Execute update user flow.

        Raises:
            EntityNotFoundError: If the user does not exist
            DuplicateEmailError: If another user holds the new email
            ValidationError: If any field is invalid
        """
        user_id = UserId(request.user_id)

        with logfire.span("update_user.execute", user_id=str(user_id)):
            user = await load_user(self.user_repository, user_id, "update")

            name = Name.of(request.name)
            email = Email.of(request.email)
            telephone = Telephone.of(request.telephone)

            holder = await self.user_repository.find_by_email(email)
            if holder is not None and holder.id != user.id:
                logfire.warn(
                    "Email already registered to another user",
                    user_id=str(user_id),
                )
                raise error.duplicate_email(request.email)

            saved_user = await self.user_repository.save(
                user.update(name, email, telephone)
            )

            logfire.info("User updated", user_id=str(user_id))
            return UserResponse.from_domain(saved_user)
