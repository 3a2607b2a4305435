"""
User models for identity management.
"""

from enum import Enum
from typing import Union

from filecms.kernel.errors import InvalidRoleError
from filecms.kernel.models.base import FrozenModel


class UserRole(str, Enum):
    """User roles in the system."""
    ADMIN = "admin"
    EDITOR = "editor"
    VIEWER = "viewer"

    @classmethod
    def parse(cls, value: Union["UserRole", str]) -> "UserRole":
        """
        Coerce a stored role name (admin, editor, viewer) into a UserRole.

        Raises:
            InvalidRoleError: If the value names no known role
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                pass
        raise InvalidRoleError(value)


class Credential(FrozenModel):
    """One ledger record. Passwords are stored as given."""

    username: str
    password: str
    role: UserRole

    def to_record(self) -> str:
        return f"{self.username} {self.password} {self.role.value}"

    def __repr__(self) -> str:
        return f"<Credential {self.username} ({self.role.value})>"


class Principal(FrozenModel):
    """An authenticated identity that file operations run under."""

    username: str
    role: UserRole

    def __str__(self) -> str:
        return f"{self.username} ({self.role.value})"
