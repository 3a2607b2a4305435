"""
Base model with common configuration and field utilities.
"""

from pydantic import BaseModel, ConfigDict

from filecms.kernel.errors import InvalidNameError


class FrozenModel(BaseModel):
    """Base class for immutable kernel records."""

    model_config = ConfigDict(frozen=True)


def check_field_token(kind: str, value: str) -> str:
    """
    Validate a value stored as one whitespace-delimited field.

    The ledger and the index are plain text records split on whitespace,
    so a value containing whitespace would corrupt every record after it.

    Raises:
        InvalidNameError: If the value is empty or contains whitespace
    """
    if not isinstance(value, str) or not value:
        raise InvalidNameError(kind, str(value), "must be a non-empty string")
    if any(ch.isspace() for ch in value):
        raise InvalidNameError(kind, value, "must not contain whitespace")
    return value


def check_filename(filename: str) -> str:
    """
    Validate a managed filename.

    A filename is one path component: it must stay inside the content
    directory and fit on a single index line.

    Raises:
        InvalidNameError: If the name is unusable
    """
    check_field_token("filename", filename)
    if "/" in filename or "\\" in filename or "\x00" in filename:
        raise InvalidNameError("filename", filename, "must not contain path separators")
    if filename in (".", ".."):
        raise InvalidNameError("filename", filename, "is reserved")
    return filename
