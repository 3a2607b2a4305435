"""
Permission Core - RBAC access control.
"""

from filecms.kernel.permissions.permission_service import (
    ROLE_CAPABILITIES,
    AccessPolicy,
    Operation,
    check_permission,
    require_permission,
)

__all__ = [
    "ROLE_CAPABILITIES",
    "AccessPolicy",
    "Operation",
    "check_permission",
    "require_permission",
]
