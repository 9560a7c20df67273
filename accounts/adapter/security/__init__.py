"""Security adapters."""

from .password import BcryptPasswordEncoder

__all__ = ["BcryptPasswordEncoder"]
