"""Base class for value objects."""

from typing import Generic, TypeVar

from pydantic import ConfigDict, RootModel

T = TypeVar("T")


class RootValueObject(RootModel[T], Generic[T]):
    """Base class for value objects that wrap a single primitive value.

    RootValueObject uses Pydantic's RootModel, which means:
    - The model wraps a single value (accessed via .root or .value)
    - model_dump() returns the primitive value, not a dict
    - Equality and hashing are by value
    """

    model_config = ConfigDict(
        frozen=True,  # All value objects are immutable
    )

    @classmethod
    def of(cls, value: T):
        """Build a validated instance from a primitive value."""
        return cls(value)

    @property
    def value(self) -> T:
        """Wrapped primitive value."""
        return self.root

    def __str__(self) -> str:
        """Return string representation of the root value."""
        return str(self.root)
