"""bcrypt implementation of the password hashing port."""

import bcrypt
import logfire

from accounts.domain.service import PasswordEncoder
from accounts.domain.value import Password

# bcrypt only looks at the first 72 bytes of its input
BCRYPT_MAX_BYTES = 72


def _encode(raw_password: str) -> bytes:
    return raw_password.encode("utf-8")[:BCRYPT_MAX_BYTES]


class BcryptPasswordEncoder(PasswordEncoder):
    """Hashes passwords with bcrypt and a fresh salt per hash."""

    def __init__(self, rounds: int = 12) -> None:
        """Initialize the encoder.

        Args:
            rounds: bcrypt cost factor (log2 of the iteration count)
        """
        self.rounds = rounds

    def encrypt(self, raw_password: Password) -> Password:
        salt = bcrypt.gensalt(rounds=self.rounds)
        hashed = bcrypt.hashpw(_encode(raw_password.value), salt)
        return Password.of_hash(hashed.decode("utf-8"))

    def matches(self, raw_password: str, hashed_password: str) -> bool:
        if not raw_password or not hashed_password:
            return False
        try:
            return bcrypt.checkpw(
                _encode(raw_password), hashed_password.encode("utf-8")
            )
        except (ValueError, TypeError):
            logfire.warn("Stored password hash could not be checked")
            return False
