"""
Typed errors raised by the kernel.

Every error is recoverable: callers catch FileCMSError (or a subclass) and
report it. None of them is meant to terminate the process.
"""

from typing import Optional


class FileCMSError(Exception):
    """Base class for all filecms errors."""


# Identity errors

class DuplicateUsernameError(FileCMSError):
    """Registration with a username that already exists in the ledger."""

    def __init__(self, username: str):
        super().__init__(f"Username already exists: {username}")
        self.username = username


class InvalidRoleError(FileCMSError):
    """Role value outside admin, editor, viewer."""

    def __init__(self, role: object):
        super().__init__(f"Invalid role: {role!r} (use admin, editor, or viewer)")
        self.role = role


class InvalidCredentialsError(FileCMSError):
    """No ledger record matches the given username and password."""

    def __init__(self) -> None:
        super().__init__("Invalid username or password")


class InvalidNameError(FileCMSError):
    """A username, password or filename that cannot be stored safely."""

    def __init__(self, kind: str, value: str, reason: str):
        super().__init__(f"Invalid {kind} {value!r}: {reason}")
        self.kind = kind
        self.value = value
        self.reason = reason


# Authorization errors

class InvalidOperationError(FileCMSError):
    """Operation value outside the access policy's operation set."""

    def __init__(self, operation: object):
        super().__init__(f"Invalid operation: {operation!r}")
        self.operation = operation


class PermissionDeniedError(FileCMSError):
    """The principal's role does not grant the requested operation."""

    def __init__(self, role: str, operation: str):
        super().__init__(f"Permission denied: {role} cannot {operation}")
        self.role = role
        self.operation = operation


# Index / content errors

class AlreadyManagedError(FileCMSError):
    """Filename is already present in the managed file index."""

    def __init__(self, filename: str):
        super().__init__(f"File already managed: {filename}")
        self.filename = filename


class NotManagedError(FileCMSError):
    """Filename is not present in the managed file index."""

    def __init__(self, filename: str):
        super().__init__(f"File not managed: {filename}")
        self.filename = filename


class AlreadyExistsError(FileCMSError):
    """Create requested for a file that already exists."""

    def __init__(self, filename: str):
        super().__init__(f"File already exists: {filename}")
        self.filename = filename


class NotFoundError(FileCMSError):
    """Requested file does not exist."""

    def __init__(self, filename: str):
        super().__init__(f"File does not exist: {filename}")
        self.filename = filename


class StorageFailureError(FileCMSError):
    """I/O failure in a storage layer. The OSError is chained as __cause__."""

    def __init__(self, action: str, path: object, cause: Optional[BaseException] = None):
        detail = f": {cause}" if cause else ""
        super().__init__(f"Storage failure while {action} {path}{detail}")
        self.action = action
        self.path = path
