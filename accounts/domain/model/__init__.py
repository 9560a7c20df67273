"""Domain model entities for user accounts."""

from accounts.domain.model.user import User

__all__ = [
    "User",
]
