"""Mock providers for testing."""

from .persistence import MockPersistenceProvider
from .security import MockSecurityProvider
from .container import build_test_container

__all__ = [
    "MockPersistenceProvider",
    "MockSecurityProvider",
    "build_test_container",
]
