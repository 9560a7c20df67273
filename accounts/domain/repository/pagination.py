"""Pagination types shared by repositories and use cases."""

import math
from typing import Callable, ClassVar, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, field_validator

from accounts.domain import error
from accounts.domain.value import SortDirection

T = TypeVar("T")
U = TypeVar("U")


class PageParameters(BaseModel):
    """Requested page, zero-based."""

    model_config = ConfigDict(frozen=True)

    MAX_SIZE: ClassVar[int] = 100
    SORTABLE_FIELDS: ClassVar[frozenset[str]] = frozenset(
        {"name", "email", "telephone", "status", "created_at", "updated_at"}
    )

    page: int = 0
    size: int = 10
    order_by: str = "name"
    direction: SortDirection = SortDirection.ASC

    @field_validator("page")
    @classmethod
    def validate_page(cls, v: int) -> int:
        if v < 0:
            raise error.invalid("page", "Page number cannot be negative")
        return v

    @field_validator("size")
    @classmethod
    def validate_size(cls, v: int) -> int:
        if v < 1 or v > cls.MAX_SIZE:
            raise error.invalid(
                "size", f"Page size must be between 1 and {cls.MAX_SIZE}"
            )
        return v

    @field_validator("order_by")
    @classmethod
    def validate_order_by(cls, v: str) -> str:
        if v not in cls.SORTABLE_FIELDS:
            raise error.invalid(
                "order_by",
                f"Cannot sort by '{v}'; expected one of "
                f"{', '.join(sorted(cls.SORTABLE_FIELDS))}",
            )
        return v

    @property
    def offset(self) -> int:
        return self.page * self.size

    @property
    def descending(self) -> bool:
        return self.direction == SortDirection.DESC


class Page(BaseModel, Generic[T]):
    """One page of results plus the metadata needed to navigate."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    items: list[T]
    total_items: int
    total_pages: int
    page_number: int
    page_size: int
    is_first: bool
    is_last: bool

    @classmethod
    def build(
        cls, items: list[T], total_items: int, parameters: PageParameters
    ) -> "Page[T]":
        """Compute navigation metadata for ``items`` taken at ``parameters``."""
        total_pages = math.ceil(total_items / parameters.size) if total_items else 0
        return cls(
            items=items,
            total_items=total_items,
            total_pages=total_pages,
            page_number=parameters.page,
            page_size=parameters.size,
            is_first=parameters.page == 0,
            is_last=parameters.page + 1 >= total_pages,
        )

    def map(self, func: Callable[[T], U]) -> "Page[U]":
        """Return the same page with every item converted by ``func``."""
        return Page(
            items=[func(item) for item in self.items],
            total_items=self.total_items,
            total_pages=self.total_pages,
            page_number=self.page_number,
            page_size=self.page_size,
            is_first=self.is_first,
            is_last=self.is_last,
        )
