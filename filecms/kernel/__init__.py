"""
Stable Kernel Layer

Foundational components of the access-control core:
- Identity Core (credential ledger, roles)
- Permission Core (static role -> operation table)
- Storage Core (managed file index, file contents)
- Audit channel (publish/subscribe audit messages)

Architectural Invariants:
- A filename is indexed iff its content exists
- Every successful security-relevant action publishes one audit message
- A failing audit subscriber never fails the operation that published
"""

from filecms.kernel.errors import (
    AlreadyExistsError,
    AlreadyManagedError,
    DuplicateUsernameError,
    FileCMSError,
    InvalidCredentialsError,
    InvalidNameError,
    InvalidOperationError,
    InvalidRoleError,
    NotFoundError,
    NotManagedError,
    PermissionDeniedError,
    StorageFailureError,
)
from filecms.kernel.events import AuditChannel, AuditEvent, AuditLogWriter, AuditTrail
from filecms.kernel.identity import CredentialLedger
from filecms.kernel.models import Credential, Principal, UserRole
from filecms.kernel.permissions import AccessPolicy, Operation
from filecms.kernel.storage import FileContentStore, ManagedFileIndex

__all__ = [
    # Errors
    "FileCMSError",
    "DuplicateUsernameError",
    "InvalidRoleError",
    "InvalidCredentialsError",
    "InvalidNameError",
    "InvalidOperationError",
    "PermissionDeniedError",
    "AlreadyManagedError",
    "AlreadyExistsError",
    "NotManagedError",
    "NotFoundError",
    "StorageFailureError",
    # Audit
    "AuditChannel",
    "AuditEvent",
    "AuditLogWriter",
    "AuditTrail",
    # Identity
    "CredentialLedger",
    "Credential",
    "Principal",
    "UserRole",
    # Permissions
    "AccessPolicy",
    "Operation",
    # Storage
    "FileContentStore",
    "ManagedFileIndex",
]
