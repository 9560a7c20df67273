"""Test configuration and fixtures."""

import logfire
import pytest

from accounts.adapter.security import BcryptPasswordEncoder
from accounts.domain.model import User
from accounts.domain.value import Email, Name, Password, Telephone

# Spans and logs stay in-process during tests
logfire.configure(send_to_logfire=False, console=False)

VALID_PASSWORD = "ValidPass123!"


def make_user(
    name: str = "Maria Silva",
    email: str = "maria@example.com",
    telephone: str = "(11) 98765-4321",
    password_hash: str = "not-a-real-hash",
) -> User:
    """Helper function to build an unsaved, active user for tests."""
    return User.create(
        Name.of(name),
        Email.of(email),
        Telephone.of(telephone),
        Password.of_hash(password_hash),
    )


@pytest.fixture
def encoder() -> BcryptPasswordEncoder:
    """bcrypt encoder at the lowest cost."""
    return BcryptPasswordEncoder(rounds=4)
