"""Domain value objects for user accounts."""

from accounts.domain.value.identifiers import UserId
from accounts.domain.value.types import (
    Email,
    Name,
    Password,
    SortDirection,
    Telephone,
    UserStatus,
)

__all__ = [
    # Identifiers
    "UserId",
    # Types
    "Name",
    "Email",
    "Telephone",
    "Password",
    "UserStatus",
    "SortDirection",
]
