"""Strongly typed identifiers for account entities."""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
