"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from accounts.domain.model import User
from accounts.domain.value import (
    Email,
    Name,
    Password,
    Telephone,
    UserId,
    UserStatus,
)


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User.reconstruct(
        id=UserId(UUID(row["id"]) if isinstance(row["id"], str) else row["id"]),
        name=Name(row["name"]),
        email=Email(row["email"]),
        telephone=Telephone(row["telephone"]),
        password=Password.of_hash(row["password"]),
        status=UserStatus(row["status"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    The id is left out for users that have not been stored yet so the
    database default assigns it.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = {
        "name": user.name.value,
        "email": user.email.value,
        "telephone": user.telephone.value,
        "password": user.password.value,
        "status": user.status.value,
        "created_at": user.created_at,
        "updated_at": user.updated_at,
    }
    if user.id is not None:
        data["id"] = user.id
    return data
