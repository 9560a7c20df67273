"""Domain services and ports."""

from .password_encoder import PasswordEncoder

__all__ = [
    "PasswordEncoder",
]
