"""PostgreSQL repository implementations."""

from accounts.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
]
