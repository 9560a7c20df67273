"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from accounts.domain.model.user import User
from accounts.domain.repository.pagination import Page, PageParameters
from accounts.domain.value import Email, UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the persistence layer and must enforce email
    uniqueness at the storage boundary.
    """

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (insert when it has no id, update otherwise).

        Args:
            user: The user to save

        Returns:
            The saved user, carrying its assigned id

        Raises:
            DuplicateEmailError: If another user already holds the email
        """
        pass

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by the email exactly as it was stored.

        Args:
            email: The user's email address

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def exists_by_id(self, user_id: UserId) -> bool:
        """Check whether a user with this ID exists."""
        pass

    @abstractmethod
    async def exists_by_email(self, email: Email) -> bool:
        """Check whether a user with this exact email exists."""
        pass

    @abstractmethod
    async def find_all(self, parameters: PageParameters) -> Page[User]:
        """Find one page of users.

        Args:
            parameters: Page number, page size and ordering

        Returns:
            The requested page with pagination metadata
        """
        pass

    @abstractmethod
    async def delete(self, user_id: UserId) -> None:
        """Delete a user (hard delete). Deleting a missing user is a no-op.

        Args:
            user_id: The user ID to delete
        """
        pass
