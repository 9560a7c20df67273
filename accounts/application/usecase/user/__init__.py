"""User use cases."""

from .change_password import ChangePasswordRequest, ChangePasswordUseCase
from .change_status import ActivateUserUseCase, BlockUserUseCase, DeactivateUserUseCase
from .create_user import CreateUserRequest, CreateUserUseCase
from .delete_user import DeleteUserUseCase
from .find_user import FindUserByEmailUseCase, FindUserByIdUseCase
from .find_users import FindUsersUseCase
from .response import UserPageResponse, UserResponse
from .update_user import UpdateUserRequest, UpdateUserUseCase

__all__ = [
    "ActivateUserUseCase",
    "BlockUserUseCase",
    "ChangePasswordRequest",
    "ChangePasswordUseCase",
    "CreateUserRequest",
    "CreateUserUseCase",
    "DeactivateUserUseCase",
    "DeleteUserUseCase",
    "FindUserByEmailUseCase",
    "FindUserByIdUseCase",
    "FindUsersUseCase",
    "UpdateUserRequest",
    "UpdateUserUseCase",
    "UserPageResponse",
    "UserResponse",
]
