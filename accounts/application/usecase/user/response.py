"""Output projections shared by the user use cases."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from accounts.domain.model import User
from accounts.domain.repository import Page


class UserResponse(BaseModel):
    """User as seen from outside the core. Never carries the password."""

    id: UUID
    name: str
    email: str
    telephone: str
    status: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            name=user.name.value,
            email=user.email.value,
            telephone=user.telephone.value,
            status=user.status.description,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class UserPageResponse(BaseModel):
    """One page of users."""

    items: list[UserResponse]
    total_items: int
    total_pages: int
    page_number: int
    page_size: int
    is_first: bool
    is_last: bool

    @classmethod
    def from_page(cls, page: Page[User]) -> "UserPageResponse":
        return cls(
            items=[UserResponse.from_domain(user) for user in page.items],
            total_items=page.total_items,
            total_pages=page.total_pages,
            page_number=page.page_number,
            page_size=page.page_size,
            is_first=page.is_first,
            is_last=page.is_last,
        )
