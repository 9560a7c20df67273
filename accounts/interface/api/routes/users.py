"""User account routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, Response, status
from pydantic import BaseModel, Field

from accounts.application.usecase.user import (
    ActivateUserUseCase,
    BlockUserUseCase,
    ChangePasswordRequest,
    ChangePasswordUseCase,
    CreateUserRequest,
    CreateUserUseCase,
    DeactivateUserUseCase,
    DeleteUserUseCase,
    FindUserByEmailUseCase,
    FindUserByIdUseCase,
    FindUsersUseCase,
    UpdateUserRequest,
    UpdateUserUseCase,
    UserPageResponse,
    UserResponse,
)
from accounts.domain.repository import PageParameters
from accounts.domain.value import SortDirection, UserId

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class UpdateUserAPIRequest(BaseModel):
    """API request for updating a user's profile."""

    name: str
    email: str
    telephone: str


class ChangePasswordAPIRequest(BaseModel):
    """API request for changing a user's password."""

    current_password: str = Field(repr=False)
    new_password: str = Field(repr=False)


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    request: CreateUserRequest,
    response: Response,
    create_user_use_case: FromDishka[CreateUserUseCase],
) -> UserResponse:
    """Register a new user.

    Example:
        POST /users
        {
            "name": "Maria Silva",
            "email": "maria@example.com",
            "telephone": "(11) 98765-4321",
            "password": "ValidPass123!"
        }

        Response (201, Location: /users/<id>):
        {
            "id": "123e4567-e89b-12d3-a456-426614174000",
            "name": "Maria Silva",
            "email": "maria@example.com",
            "telephone": "(11) 98765-4321",
            "status": "Active",
            ...
        }
    """
    user = await create_user_use_case.execute(request)
    response.headers["Location"] = f"{router.prefix}/{user.id}"
    return user


@router.get("", response_model=UserPageResponse)
async def list_users(
    find_users_use_case: FromDishka[FindUsersUseCase],
    page: int = Query(0),
    size: int = Query(10),
    order_by: str = Query("name"),
    direction: SortDirection = Query(SortDirection.ASC),
) -> UserPageResponse:
    """List users one page at a time.

    Out-of-range ``page``/``size`` values and unknown ``order_by`` fields are
    rejected with 400 by the page parameter validation.
    """
    parameters = PageParameters(
        page=page, size=size, order_by=order_by, direction=direction
    )
    return await find_users_use_case.execute(parameters)


@router.get("/search", response_model=UserResponse)
async def find_user_by_email(
    find_user_by_email_use_case: FromDishka[FindUserByEmailUseCase],
    email: str = Query(...),
) -> UserResponse:
    """Find a user by email address."""
    return await find_user_by_email_use_case.execute(email)


@router.get("/{user_id}", response_model=UserResponse)
async def find_user_by_id(
    user_id: UUID,
    find_user_by_id_use_case: FromDishka[FindUserByIdUseCase],
) -> UserResponse:
    """Get a user by id."""
    return await find_user_by_id_use_case.execute(UserId(user_id))


@router.patch("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: UUID,
    request: UpdateUserAPIRequest,
    update_user_use_case: FromDishka[UpdateUserUseCase],
) -> UserResponse:
    """Replace a user's name, email and telephone."""
    return await update_user_use_case.execute(
        UpdateUserRequest(
            user_id=user_id,
            name=request.name,
            email=request.email,
            telephone=request.telephone,
        )
    )


@router.patch("/{user_id}/change-password", response_model=UserResponse)
async def change_password(
    user_id: UUID,
    request: ChangePasswordAPIRequest,
    change_password_use_case: FromDishka[ChangePasswordUseCase],
) -> UserResponse:
    """Change a user's password after checking the current one."""
    return await change_password_use_case.execute(
        ChangePasswordRequest(
            user_id=user_id,
            current_password=request.current_password,
            new_password=request.new_password,
        )
    )


@router.patch("/{user_id}/activate", response_model=UserResponse)
async def activate_user(
    user_id: UUID,
    activate_user_use_case: FromDishka[ActivateUserUseCase],
) -> UserResponse:
    return await activate_user_use_case.execute(UserId(user_id))


@router.patch("/{user_id}/deactivate", response_model=UserResponse)
async def deactivate_user(
    user_id: UUID,
    deactivate_user_use_case: FromDishka[DeactivateUserUseCase],
) -> UserResponse:
    return await deactivate_user_use_case.execute(UserId(user_id))


@router.patch("/{user_id}/block", response_model=UserResponse)
async def block_user(
    user_id: UUID,
    block_user_use_case: FromDishka[BlockUserUseCase],
) -> UserResponse:
    return await block_user_use_case.execute(UserId(user_id))


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: UUID,
    delete_user_use_case: FromDishka[DeleteUserUseCase],
) -> Response:
    """Delete a user permanently."""
    await delete_user_use_case.execute(UserId(user_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
