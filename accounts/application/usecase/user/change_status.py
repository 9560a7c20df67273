"""Status transition use cases: activate, deactivate and block."""

from abc import abstractmethod

import logfire

from accounts.application.usecase.base import BaseUseCase
from accounts.application.usecase.user.common import load_user
from accounts.application.usecase.user.response import UserResponse
from accounts.domain.error import InvalidStateError
from accounts.domain.model import User
from accounts.domain.repository import UserRepository
from accounts.domain.value import UserId


class _ChangeStatusUseCase(BaseUseCase):
    """Load a user, apply one transition and save the result."""

    operation: str

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    @abstractmethod
    def transition(self, user: User) -> User:
        """Return the user moved to the target status."""

    async def execute(self, user_id: UserId) -> UserResponse:
        """Apply the transition to the user with ``user_id``.

        Raises:
            EntityNotFoundError: If the user does not exist
            InvalidStateError: If the user already has the target status
        """
        with logfire.span(f"{self.operation}_user.execute", user_id=str(user_id)):
            user = await load_user(self.user_repository, user_id, self.operation)

            try:
                changed = self.transition(user)
            except InvalidStateError:
                logfire.warn(
                    "Status transition rejected",
                    user_id=str(user_id),
                    operation=self.operation,
                    status=user.status.description,
                )
                raise

            saved_user = await self.user_repository.save(changed)

            logfire.info(
                "User status changed",
                user_id=str(user_id),
                status=saved_user.status.description,
            )
            return UserResponse.from_domain(saved_user)


class ActivateUserUseCase(_ChangeStatusUseCase):
    """Use case for moving an inactive or blocked user back to active."""

    operation = "activate"

    def transition(self, user: User) -> User:
        return user.activate()


class DeactivateUserUseCase(_ChangeStatusUseCase):
    """Use case for deactivating an active or blocked user."""

    operation = "deactivate"

    def transition(self, user: User) -> User:
        return user.deactivate()


class BlockUserUseCase(_ChangeStatusUseCase):
    """Use case for blocking an active or inactive user."""

    operation = "block"

    def transition(self, user: User) -> User:
        return user.block()
