"""Application layer errors.

Raised by use cases when a business rule that needs the repository or the
password encoder fails. They share the domain error shape (kind, message,
details) so the interface layer handles both the same way.
"""

from datetime import datetime, timezone
from typing import Any

from accounts.domain.error import DomainError, ErrorKind


class UseCaseError(DomainError):
    """Base application error."""

    pass


class EntityNotFoundError(UseCaseError):
    """A lookup by identifier found nothing."""

    kind = ErrorKind.ENTITY_NOT_FOUND

    def __init__(
        self,
        entity_name: str,
        identifier_type: str,
        identifier: str,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(
            f"{entity_name} with '{identifier_type}' '{identifier}' not found",
            details,
        )
        self.entity_name = entity_name
        self.identifier_type = identifier_type
        self.identifier = identifier


class DuplicateEmailError(UseCaseError):
    """Another user already holds the email."""

    kind = ErrorKind.DUPLICATE_EMAIL

    def __init__(self, email: str, details: dict[str, Any] | None = None):
        super().__init__(f"A user with email '{email}' address already exists.", details)
        self.email = email


class MatchingError(UseCaseError):
    """A provided secret did not match the stored one.

    Only says that the comparison failed, never why.
    """

    kind = ErrorKind.MATCHING

    def __init__(
        self,
        entity_name: str,
        field_name: str,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(
            f"'{entity_name}' failed to match the '{field_name}' field.", details
        )
        self.entity_name = entity_name
        self.field_name = field_name


def entity_not_found(
    entity_name: str, identifier_type: str, identifier: str, operation: str
) -> EntityNotFoundError:
    return EntityNotFoundError(
        entity_name,
        identifier_type,
        identifier,
        {
            "searched_at": datetime.now(timezone.utc),
            "resource_type": entity_name,
            "identifier_type": identifier_type,
            "identifier": identifier,
            "operation": operation,
        },
    )


def duplicate_email(email: str) -> DuplicateEmailError:
    return DuplicateEmailError(
        email,
        {
            "timestamp": datetime.now(timezone.utc),
            "conflict_type": "Duplicate e-mail",
            "email": email,
        },
    )


def matching_error(entity_name: str, field_name: str, operation: str) -> MatchingError:
    return MatchingError(
        entity_name,
        field_name,
        {
            "checked_at": datetime.now(timezone.utc),
            "resource_type": entity_name,
            "field_name": field_name,
            "operation": operation,
        },
    )
