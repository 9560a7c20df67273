"""Repository interfaces for the accounts domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from accounts.domain.repository.pagination import Page, PageParameters
from accounts.domain.repository.user import UserRepository

__all__ = [
    "Page",
    "PageParameters",
    "UserRepository",
]
