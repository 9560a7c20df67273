"""Domain layer errors.

Every error carries a ``kind`` from the shared taxonomy, a human-readable
message and a map of structured details. The factory functions at the bottom
of the module are the only places that build detail maps for domain errors.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Kind of failure, used by the interface layer to pick a status code."""

    VALIDATION = "validation"
    INVALID_STATE = "invalid_state"
    ENTITY_NOT_FOUND = "entity_not_found"
    DUPLICATE_EMAIL = "duplicate_email"
    MATCHING = "matching"


class ValidationType(str, Enum):
    """Which value object check failed."""

    EMPTY_CHECK = "empty_check"
    MIN_LENGTH = "min_length"
    MAX_LENGTH = "max_length"
    PATTERN_MISMATCH = "pattern_mismatch"
    GENERIC = "generic"


class DomainError(Exception):
    """Base domain error."""

    kind: ErrorKind

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details: dict[str, Any] = dict(details) if details else {}

    def add_detail(self, key: str, value: Any) -> None:
        """Attach an extra diagnostic value."""
        self.details[key] = value

    def to_dict(self) -> dict[str, Any]:
        """Structured form of the error."""
        return {
            "kind": self.kind.value,
            "message": self.message,
            "details": dict(self.details),
        }


class ValidationError(DomainError):
    """A value object invariant was violated."""

    kind = ErrorKind.VALIDATION

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, details)
        self.field = field

    @property
    def validation_type(self) -> ValidationType | None:
        value = self.details.get("validation_type")
        return ValidationType(value) if value else None


class InvalidStateError(DomainError):
    """An entity operation was attempted from a state where it is not allowed."""

    kind = ErrorKind.INVALID_STATE

    def __init__(
        self,
        entity_name: str,
        current_state: str,
        action: str,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(
            f"It is not possible to execute '{action}' on {entity_name} "
            f"in the '{current_state}' state",
            details,
        )
        self.entity_name = entity_name
        self.current_state = current_state
        self.action = action


def _now() -> datetime:
    return datetime.now(timezone.utc)


def empty_field(field: str) -> ValidationError:
    return ValidationError(
        f"{field} cannot be empty",
        field,
        {"validation_type": ValidationType.EMPTY_CHECK.value, "timestamp": _now()},
    )


def min_length(field: str, minimum: int, actual: int) -> ValidationError:
    return ValidationError(
        f"{field} must have at least {minimum} characters",
        field,
        {
            "validation_type": ValidationType.MIN_LENGTH.value,
            "min_length": minimum,
            "actual_length": actual,
            "missing_characters": minimum - actual,
            "timestamp": _now(),
        },
    )


def max_length(field: str, maximum: int, actual: int) -> ValidationError:
    return ValidationError(
        f"{field} cannot exceed {maximum} characters",
        field,
        {
            "validation_type": ValidationType.MAX_LENGTH.value,
            "max_length": maximum,
            "actual_length": actual,
            "excess_characters": actual - maximum,
            "timestamp": _now(),
        },
    )


def invalid_pattern(field: str, pattern: str, requirement: str) -> ValidationError:
    return ValidationError(
        f"{field} does not match required pattern",
        field,
        {
            "validation_type": ValidationType.PATTERN_MISMATCH.value,
            "pattern": pattern,
            "requirement": requirement,
            "timestamp": _now(),
        },
    )


def invalid(field: str, message: str) -> ValidationError:
    return ValidationError(
        message,
        field,
        {"validation_type": ValidationType.GENERIC.value, "timestamp": _now()},
    )


def invalid_state(
    entity_name: str,
    current_state: str,
    action: str,
    entity_id: Any | None = None,
) -> InvalidStateError:
    """Build an InvalidStateError, recording the entity id when it has one."""
    details: dict[str, Any] = {"timestamp": _now()}
    if entity_id is not None:
        details["entity_id"] = str(entity_id)
    return InvalidStateError(entity_name, current_state, action, details)
