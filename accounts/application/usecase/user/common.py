"""Helpers shared by the user use cases."""

import logfire

from accounts.application import error
from accounts.domain.model import User
from accounts.domain.repository import UserRepository
from accounts.domain.value import UserId


async def load_user(repository: UserRepository, user_id: UserId, operation: str) -> User:
    """Fetch a user or raise EntityNotFoundError naming ``operation``."""
    user = await repository.find_by_id(user_id)
    if user is None:
        logfire.warn("User not found", user_id=str(user_id), operation=operation)
        raise error.entity_not_found("User", "id", str(user_id), operation)
    return user
