"""User aggregate root.

A user moves between three statuses::

    Active  --deactivate-->  Inactive
    Active  --block------->  Blocked
    Inactive --activate--->  Active
    Inactive --block------>  Blocked
    Blocked --activate---->  Active
    Blocked --deactivate-->  Inactive

Requesting the status a user already has is an InvalidStateError.
"""

from datetime import datetime, timezone
from typing import Optional

from accounts.domain import error
from accounts.domain.model.common import DomainModel
from accounts.domain.value import (
    Email,
    Name,
    Password,
    Telephone,
    UserId,
    UserStatus,
)


class User(DomainModel):
    """User aggregate root.

    Instances are immutable: every operation returns the next state of the
    aggregate and leaves the receiver untouched. Identity is the ``id``
    assigned by the repository on first save.
    """

    id: Optional[UserId] = None
    name: Name
    email: Email
    telephone: Telephone
    password: Password
    status: UserStatus = UserStatus.ACTIVE
    created_at: datetime
    updated_at: datetime

    @classmethod
    def create(
        cls,
        name: Name,
        email: Email,
        telephone: Telephone,
        password: Password,
    ) -> "User":
        """Create a new, not yet persisted, active user."""
        now = datetime.now(timezone.utc)
        return cls(
            name=name,
            email=email,
            telephone=telephone,
            password=password,
            status=UserStatus.ACTIVE,
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def reconstruct(
        cls,
        id: UserId,
        name: Name,
        email: Email,
        telephone: Telephone,
        password: Password,
        status: UserStatus,
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        """Rebuild a user loaded from storage."""
        return cls(
            id=id,
            name=name,
            email=email,
            telephone=telephone,
            password=password,
            status=status,
            created_at=created_at,
            updated_at=updated_at,
        )

    @property
    def is_active(self) -> bool:
        return self.status == UserStatus.ACTIVE

    @property
    def is_inactive(self) -> bool:
        return self.status == UserStatus.INACTIVE

    @property
    def is_blocked(self) -> bool:
        return self.status == UserStatus.BLOCKED

    def with_id(self, user_id: UserId) -> "User":
        """Return this user bound to the id assigned by storage."""
        if self.id is not None and self.id != user_id:
            raise error.invalid_state("User", "persisted", "reassign_id", self.id)
        return self.model_copy(update={"id": user_id})

    def update(self, name: Name, email: Email, telephone: Telephone) -> "User":
        """Replace the profile fields. Allowed in every status."""
        return self._touch(name=name, email=email, telephone=telephone)

    def change_password(self, password: Password) -> "User":
        """Replace the stored password hash. Allowed in every status."""
        return self._touch(password=password)

    def activate(self) -> "User":
        if self.is_active:
            raise error.invalid_state(
                "User", self.status.description, "activate", self.id
            )
        return self._touch(status=UserStatus.ACTIVE)

    def deactivate(self) -> "User":
        if self.is_inactive:
            raise error.invalid_state(
                "User", self.status.description, "deactivate", self.id
            )
        return self._touch(status=UserStatus.INACTIVE)

    def block(self) -> "User":
        if self.is_blocked:
            raise error.invalid_state(
                "User", self.status.description, "block", self.id
            )
        return self._touch(status=UserStatus.BLOCKED)

    def _touch(self, **changes) -> "User":
        """Apply changes and move updated_at forward (never backwards)."""
        now = datetime.now(self.updated_at.tzinfo)
        changes["updated_at"] = max(now, self.updated_at)
        return self.model_copy(update=changes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id) if self.id is not None else id(self)
