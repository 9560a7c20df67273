"""Create user use case."""

import logfire
from pydantic import BaseModel, Field

from accounts.application import error
from accounts.application.usecase.base import BaseUseCase
from accounts.application.usecase.user.response import UserResponse
from accounts.domain.model import User
from accounts.domain.repository import UserRepository
from accounts.domain.service import PasswordEncoder
from accounts.domain.value import Email, Name, Password, Telephone


class CreateUserRequest(BaseModel):
    """Create user request."""

    name: str
    email: str
    telephone: str
    password: str = Field(repr=False)


class CreateUserUseCase(BaseUseCase):
    """Use case for registering a new user."""

    def __init__(
        self,
        user_repository: UserRepository,
        password_encoder: PasswordEncoder,
    ) -> None:
        """Initialize create user use case.

        Args:
            user_repository: User repository
            password_encoder: Password hashing port
        """
        self.user_repository = user_repository
        self.password_encoder = password_encoder

    async def execute(self, request: CreateUserRequest) -> UserResponse:
        """Execute create user flow.

        Steps:
        1. Validate name, email and telephone
        2. Reject an email that is already registered
        3. Validate and hash the raw password
        4. Create the User entity and save it

        Args:
            request: Create user request

        Returns:
            The created user

        Raises:
            ValidationError: If any field is invalid
            DuplicateEmailError: If the email is already registered
        """
        with logfire.span("create_user.execute"):
            name = Name.of(request.name)
            email = Email.of(request.email)
            telephone = Telephone.of(request.telephone)

            if await self.user_repository.exists_by_email(email):
                logfire.warn("Email already registered")
                raise error.duplicate_email(request.email)

            password = self.password_encoder.encrypt(Password.of_raw(request.password))

            user = User.create(name, email, telephone, password)
            saved_user = await self.user_repository.save(user)

            logfire.info("User created", user_id=str(saved_user.id))
            return UserResponse.from_domain(saved_user)
