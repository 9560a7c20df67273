"""Application layer DI providers."""

from dishka import Scope, provide

from accounts.application.usecase.user import (
    ActivateUserUseCase,
    BlockUserUseCase,
    ChangePasswordUseCase,
    CreateUserUseCase,
    DeactivateUserUseCase,
    DeleteUserUseCase,
    FindUserByEmailUseCase,
    FindUserByIdUseCase,
    FindUsersUseCase,
    UpdateUserUseCase,
)
from accounts.domain.repository import UserRepository
from accounts.domain.service import PasswordEncoder
from accounts.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed.

    Use cases are REQUEST-scoped to align with the repository/session lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_create_user_use_case(
        self, user_repository: UserRepository, password_encoder: PasswordEncoder
    ) -> CreateUserUseCase:
        """Provide create user use case."""
        return CreateUserUseCase(
            user_repository=user_repository, password_encoder=password_encoder
        )

    @provide
    def get_update_user_use_case(
        self, user_repository: UserRepository
    ) -> UpdateUserUseCase:
        """Provide update user use case."""
        return UpdateUserUseCase(user_repository=user_repository)

    @provide
    def get_change_password_use_case(
        self, user_repository: UserRepository, password_encoder: PasswordEncoder
    ) -> ChangePasswordUseCase:
        """Provide change password use case."""
        return ChangePasswordUseCase(
            user_repository=user_repository, password_encoder=password_encoder
        )

    # Status transitions
    @provide
    def get_activate_user_use_case(
        self, user_repository: UserRepository
    ) -> ActivateUserUseCase:
        return ActivateUserUseCase(user_repository=user_repository)

    @provide
    def get_deactivate_user_use_case(
        self, user_repository: UserRepository
    ) -> DeactivateUserUseCase:
        return DeactivateUserUseCase(user_repository=user_repository)

    @provide
    def get_block_user_use_case(
        self, user_repository: UserRepository
    ) -> BlockUserUseCase:
        return BlockUserUseCase(user_repository=user_repository)

    @provide
    def get_delete_user_use_case(
        self, user_repository: UserRepository
    ) -> DeleteUserUseCase:
        """Provide delete user use case."""
        return DeleteUserUseCase(user_repository=user_repository)

    # Queries
    @provide
    def get_find_user_by_id_use_case(
        self, user_repository: UserRepository
    ) -> FindUserByIdUseCase:
        return FindUserByIdUseCase(user_repository=user_repository)

    @provide
    def get_find_user_by_email_use_case(
        self, user_repository: UserRepository
    ) -> FindUserByEmailUseCase:
        return FindUserByEmailUseCase(user_repository=user_repository)

    @provide
    def get_find_users_use_case(
        self, user_repository: UserRepository
    ) -> FindUsersUseCase:
        return FindUsersUseCase(user_repository=user_repository)
