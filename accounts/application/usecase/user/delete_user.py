"""Delete user use case."""

import logfire

from accounts.application.usecase.base import BaseUseCase
from accounts.application.usecase.user.common import load_user
from accounts.domain.repository import UserRepository
from accounts.domain.value import UserId


class DeleteUserUseCase(BaseUseCase):
    """Use case for permanently removing a user."""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, user_id: UserId) -> None:
        """Delete the user.

        Raises:
            EntityNotFoundError: If the user does not exist
        """
        with logfire.span("delete_user.execute", user_id=str(user_id)):
            await load_user(self.user_repository, user_id, "delete")
            await self.user_repository.delete(user_id)
            logfire.info("User deleted", user_id=str(user_id))
