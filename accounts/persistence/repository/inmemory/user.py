"""In-memory user repository for testing."""

from typing import Optional
from uuid import uuid4

from accounts.application import error
from accounts.domain.model.user import User
from accounts.domain.repository import Page, PageParameters, UserRepository
from accounts.domain.value import Email, UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing.

    Enforces email uniqueness the way the database constraint does.
    """

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by their email."""
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    async def exists_by_id(self, user_id: UserId) -> bool:
        return user_id in self._users

    async def exists_by_email(self, email: Email) -> bool:
        return await self.find_by_email(email) is not None

    async def save(self, user: User) -> User:
        """Save or update a user, assigning an id on first save."""
        holder = await self.find_by_email(user.email)
        if holder is not None and holder.id != user.id:
            raise error.duplicate_email(user.email.value)

        if user.id is None:
            user = user.with_id(UserId(uuid4()))
        self._users[user.id] = user
        return user

    async def find_all(self, parameters: PageParameters) -> Page[User]:
        """Sort every stored user in memory and slice out the page."""
        users = sorted(
            self._users.values(),
            key=lambda user: _sort_key(user, parameters.order_by),
            reverse=parameters.descending,
        )
        start = parameters.offset
        return Page.build(users[start : start + parameters.size], len(users), parameters)

    async def delete(self, user_id: UserId) -> None:
        self._users.pop(user_id, None)


def _sort_key(user: User, field: str):
    value = getattr(user, field)
    if hasattr(value, "root"):
        return value.root
    if field == "status":
        return value.value
    return value
