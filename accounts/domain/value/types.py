"""Domain value objects for user accounts.

Value objects are immutable and defined by their values, not identity.
Each one validates its input once, at construction, and raises a
:class:`~accounts.domain.error.ValidationError` describing the first rule
that failed.
"""

import re
from enum import Enum
from typing import Any, ClassVar

import logfire
from pydantic import field_validator

from accounts.domain import error
from accounts.domain.value.common import RootValueObject


class UserStatus(str, Enum):
    """Lifecycle status of a user account."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    BLOCKED = "blocked"

    @property
    def description(self) -> str:
        """Human-readable label."""
        return self.value.capitalize()


class SortDirection(str, Enum):
    """Sort direction for paginated listings."""

    ASC = "ASC"
    DESC = "DESC"


def _require_text(field: str, value: Any) -> str:
    """Reject missing, non-string and blank input."""
    if value is None or (isinstance(value, str) and not value.strip()):
        logfire.warn("Value object validation failed", field=field, reason="empty")
        raise error.empty_field(field)
    if not isinstance(value, str):
        logfire.warn("Value object validation failed", field=field, reason="type")
        raise error.invalid(field, f"{field} must be a string")
    return value


class Name(RootValueObject[str]):
    """Display name of a user, 5-100 characters once surrounding spaces are removed."""

    MIN_LENGTH: ClassVar[int] = 5
    MAX_LENGTH: ClassVar[int] = 100

    @field_validator("root", mode="before")
    @classmethod
    def validate_name(cls, v: Any) -> str:
        name = _require_text("name", v)
        length = len(name.strip())
        if length < cls.MIN_LENGTH:
            logfire.warn("Name too short", length=length, minimum=cls.MIN_LENGTH)
            raise error.min_length("name", cls.MIN_LENGTH, length)
        if length > cls.MAX_LENGTH:
            logfire.warn("Name too long", length=length, maximum=cls.MAX_LENGTH)
            raise error.max_length("name", cls.MAX_LENGTH, length)
        return name


class Email(RootValueObject[str]):
    """Email address.

    The format is checked on a trimmed, lower-cased copy but the value is
    stored exactly as given, so lookups and uniqueness are case-sensitive on
    the stored string.
    """

    PATTERN: ClassVar[re.Pattern[str]] = re.compile(
        r"^[A-Za-z0-9+_.-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$"
    )

    @field_validator("root", mode="before")
    @classmethod
    def validate_email(cls, v: Any) -> str:
        email = _require_text("email", v)
        normalized = email.strip().lower()
        if not cls.PATTERN.fullmatch(normalized):
            logfire.warn("Invalid email format")
            raise error.invalid_pattern(
                "email", cls.PATTERN.pattern, "Invalid email format"
            )
        return email


class Telephone(RootValueObject[str]):
    """Telephone number in the ``(DD) NNNNN-NNNN`` or ``(DD) NNNN-NNNN`` format."""

    PATTERN: ClassVar[re.Pattern[str]] = re.compile(
        r"^\(\d{2}\) \d{4,5}-\d{4}$", re.ASCII
    )

    @field_validator("root", mode="before")
    @classmethod
    def validate_telephone(cls, v: Any) -> str:
        telephone = _require_text("telephone", v)
        if not cls.PATTERN.fullmatch(telephone):
            logfire.warn("Invalid telephone format")
            raise error.invalid_pattern(
                "telephone", cls.PATTERN.pattern, "Invalid telephone format"
            )
        return telephone


class Password(RootValueObject[str]):
    """User password, either raw (as typed) or hashed.

    Use :meth:`of_raw` for passwords typed by a user; it enforces the
    strength policy. Use :meth:`of_hash` (or the plain constructor) for
    values that are already hashed; only emptiness is checked.

    The wrapped value never appears in ``str()`` or ``repr()``.
    """

    MIN_LENGTH: ClassVar[int] = 8
    MAX_LENGTH: ClassVar[int] = 50

    # (pattern, requirement) checked in order, first failure wins
    CHARACTER_RULES: ClassVar[tuple[tuple[re.Pattern[str], str], ...]] = (
        (re.compile(r"[0-9]"), "At least one digit (0-9)"),
        (re.compile(r"[A-Z]"), "At least one uppercase letter (A-Z)"),
        (re.compile(r"[a-z]"), "At least one lowercase letter (a-z)"),
        (
            re.compile(r"[!@#$%^&*(),.?\":{}|<>]"),
            'At least one special character (!@#$%^&*(),.?":{}|<>)',
        ),
    )

    @field_validator("root", mode="before")
    @classmethod
    def validate_not_empty(cls, v: Any) -> str:
        if not isinstance(v, str) or not v.strip():
            logfire.warn("Invalid hash provided: hash is missing or empty")
            raise error.invalid("password", "Hash cannot be empty")
        return v

    @classmethod
    def of_raw(cls, raw_password: Any) -> "Password":
        """Validate a user-supplied password against the strength policy."""
        password = _require_text("password", raw_password)

        length = len(password)
        if length < cls.MIN_LENGTH:
            logfire.warn("Password too short", length=length, minimum=cls.MIN_LENGTH)
            raise error.min_length("password", cls.MIN_LENGTH, length)
        if length > cls.MAX_LENGTH:
            logfire.warn("Password too long", length=length, maximum=cls.MAX_LENGTH)
            raise error.max_length("password", cls.MAX_LENGTH, length)

        for pattern, requirement in cls.CHARACTER_RULES:
            if not pattern.search(password):
                logfire.warn("Password missing character class", requirement=requirement)
                raise error.invalid_pattern("password", pattern.pattern, requirement)

        return cls(password)

    @classmethod
    def of_hash(cls, hashed_password: Any) -> "Password":
        """Wrap an already hashed password."""
        return cls(hashed_password)

    def __str__(self) -> str:
        return "********"

    def __repr__(self) -> str:
        return "Password('********')"
