"""Password hashing port."""

from abc import ABC, abstractmethod

from accounts.domain.value import Password


class PasswordEncoder(ABC):
    """Turns raw passwords into salted hashes and verifies them.

    Implementations live in the adapter layer. Hashing the same raw password
    twice is expected to give two different hashes.
    """

    @abstractmethod
    def encrypt(self, raw_password: Password) -> Password:
        """Hash a validated raw password.

        Args:
            raw_password: Password built with ``Password.of_raw``

        Returns:
            Password wrapping the hash
        """
        pass

    @abstractmethod
    def matches(self, raw_password: str, hashed_password: str) -> bool:
        """Check a raw password against a stored hash.

        Must return False, never raise, for a wrong password or a malformed hash.
        """
        pass
