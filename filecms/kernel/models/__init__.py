"""
Kernel data models.
"""

from filecms.kernel.models.base import FrozenModel, check_field_token, check_filename
from filecms.kernel.models.user import Credential, Principal, UserRole

__all__ = [
    "FrozenModel",
    "check_field_token",
    "check_filename",
    "Credential",
    "Principal",
    "UserRole",
]
