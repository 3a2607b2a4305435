"""
Audit event definitions using Pydantic.

Audit messages are plain strings on the channel; the helpers here are the
single place their wording is defined.
"""

from datetime import datetime, timezone

from pydantic import Field

from filecms.kernel.models.base import FrozenModel
from filecms.kernel.models.user import UserRole


class AuditEvent(FrozenModel):
    """A received audit message, stamped when a subscriber recorded it."""

    message: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def as_text(self) -> str:
        ts = self.timestamp.isoformat(timespec="seconds")
        return f"[{ts}] {self.message}"


# User events

def user_registered(username: str, role: UserRole) -> str:
    return f"User registered: {username} ({role.value})"


def user_logged_in(username: str, role: UserRole) -> str:
    return f"User logged in: {username} ({role.value})"


# File events

def files_listed(username: str) -> str:
    return f"User {username}: viewed list of files"


def file_viewed(username: str, filename: str) -> str:
    return f"User {username}: viewed content of file {filename}"


def file_created(username: str, filename: str) -> str:
    return f"User {username}: created file {filename}"


def file_edited(username: str, filename: str) -> str:
    return f"User {username}: edited file {filename}"


def file_deleted(username: str, filename: str) -> str:
    return f"User {username}: deleted file {filename}"
