"""
Access policy for RBAC over managed files.
"""

from enum import Enum
from functools import wraps
from typing import Callable, Dict, FrozenSet, List, Union

from filecms.kernel.errors import InvalidOperationError, PermissionDeniedError
from filecms.kernel.models.user import Principal, UserRole
from filecms.logging_config import bind_actor, get_logger

logger = get_logger(__name__)


class Operation(str, Enum):
    """File operations subject to the access policy, in menu order."""
    LIST_FILES = "list_files"
    VIEW_CONTENT = "view_content"
    CREATE_FILE = "create_file"
    EDIT_FILE = "edit_file"
    DELETE_FILE = "delete_file"

    @classmethod
    def parse(cls, value: Union["Operation", str]) -> "Operation":
        """
        Coerce an operation name into an Operation.

        Raises:
            InvalidOperationError: If the value names no known operation
        """
        try:
            return cls(value)
        except ValueError:
            raise InvalidOperationError(value) from None


# Static role -> capability table
ROLE_CAPABILITIES: Dict[UserRole, FrozenSet[Operation]] = {
    UserRole.ADMIN: frozenset({
        Operation.LIST_FILES,
        Operation.VIEW_CONTENT,
        Operation.CREATE_FILE,
        Operation.EDIT_FILE,
        Operation.DELETE_FILE,
    }),
    UserRole.EDITOR: frozenset({
        Operation.LIST_FILES,
        Operation.VIEW_CONTENT,
        Operation.EDIT_FILE,
    }),
    UserRole.VIEWER: frozenset({
        Operation.LIST_FILES,
        Operation.VIEW_CONTENT,
    }),
}


class AccessPolicy:
    """
    Pure lookup against the role capability table.

    Roles are data: every role goes through the same code path and only the
    table decides what it may do. No I/O, no side effects.
    """

    @classmethod
    def is_allowed(
        cls,
        role: Union[UserRole, str],
        operation: Union[Operation, str],
    ) -> bool:
        """Check whether a role may perform an operation."""
        return Operation.parse(operation) in ROLE_CAPABILITIES[UserRole.parse(role)]

    @classmethod
    def permitted_operations(cls, role: Union[UserRole, str]) -> List[Operation]:
        """Operations available to a role, in menu order."""
        allowed = ROLE_CAPABILITIES[UserRole.parse(role)]
        return [op for op in Operation if op in allowed]

    @classmethod
    def check(cls, role: Union[UserRole, str], operation: Union[Operation, str]) -> None:
        """
        Raise unless the role may perform the operation.

        Raises:
            PermissionDeniedError: If the table denies it
        """
        role = UserRole.parse(role)
        operation = Operation.parse(operation)
        if not cls.is_allowed(role, operation):
            raise PermissionDeniedError(role.value, operation.value)


def check_permission(role: Union[UserRole, str], operation: Operation) -> bool:
    """Check if a role has permission for an operation."""
    return AccessPolicy.is_allowed(role, operation)


def require_permission(operation: Operation):
    """
    Decorator for requiring a permission on a controller method.

    The wrapped method must take the acting Principal as its first argument
    after self. Denials are logged and raised before the method body runs.

    Usage:
        @require_permission(Operation.DELETE_FILE)
        def delete_file(self, principal: Principal, filename: str) -> None:
            ...
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(self, principal: Principal, *args, **kwargs):
            with bind_actor(principal.username):
                try:
                    AccessPolicy.check(principal.role, operation)
                except PermissionDeniedError:
                    logger.warning(
                        "Permission denied",
                        extra={"role": principal.role.value, "operation": operation.value},
                    )
                    raise
                return func(self, principal, *args, **kwargs)

        # Store the required operation as metadata
        wrapper._required_operation = operation
        return wrapper

    return decorator
