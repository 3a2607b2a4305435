"""
Credential ledger: append-only persisted usernames, passwords and roles.

Each line holds one whitespace-delimited record: ``username password role``.
Records are never updated or deleted; a username may be registered once.
Passwords are stored as given (no hashing).
"""

from pathlib import Path
from threading import Lock
from typing import Iterator, List, Optional, Union

from filecms.kernel.errors import (
    DuplicateUsernameError,
    InvalidCredentialsError,
    InvalidRoleError,
    StorageFailureError,
)
from filecms.kernel.events import event_types
from filecms.kernel.events.audit_channel import AuditChannel
from filecms.kernel.models.base import check_field_token
from filecms.kernel.models.user import Credential, Principal, UserRole
from filecms.logging_config import get_logger

logger = get_logger(__name__)


class CredentialLedger:
    """
    Service for user identity operations.

    Handles registration and authentication against the ledger file and
    publishes an audit message for each successful one.
    """

    def __init__(self, ledger_path: Union[str, Path], audit_channel: AuditChannel):
        self.ledger_path = Path(ledger_path)
        self.audit_channel = audit_channel
        self._lock = Lock()

    def exists(self, username: str) -> bool:
        """Check whether any record carries this username."""
        return any(record.username == username for record in self._iter_records())

    def register(
        self,
        username: str,
        password: str,
        role: Union[UserRole, str],
    ) -> Credential:
        """
        Register a new user.

        Args:
            username: Unique username (no whitespace)
            password: Password (no whitespace)
            role: admin, editor or viewer

        Returns:
            The stored Credential

        Raises:
            DuplicateUsernameError: If the username is already registered
            InvalidRoleError: If the role is not admin, editor or viewer
            InvalidNameError: If username or password cannot be stored
        """
        check_field_token("username", username)
        check_field_token("password", password)

        with self._lock:
            if self.exists(username):
                raise DuplicateUsernameError(username)
            credential = Credential(
                username=username,
                password=password,
                role=UserRole.parse(role),
            )
            self._append(credential)

        logger.info("User registered", extra={"username": username, "role": credential.role.value})
        self.audit_channel.publish(event_types.user_registered(username, credential.role))
        return credential

    def authenticate(self, username: str, password: str) -> UserRole:
        """
        Verify credentials and return the user's role.

        The first record matching both username and password wins.

        Raises:
            InvalidCredentialsError: If no record matches
        """
        match = self._find(username, password)
        if match is None:
            logger.info("Login failed", extra={"username": username})
            raise InvalidCredentialsError()

        self.audit_channel.publish(event_types.user_logged_in(match.username, match.role))
        return match.role

    def login(self, username: str, password: str) -> Principal:
        """Authenticate and return the principal to run file operations under."""
        role = self.authenticate(username, password)
        return Principal(username=username, role=role)

    def list_users(self) -> List[Credential]:
        return list(self._iter_records())

    def _find(self, username: str, password: str) -> Optional[Credential]:
        for record in self._iter_records():
            if record.username == username and record.password == password:
                return record
        return None

    def _iter_records(self) -> Iterator[Credential]:
        try:
            raw = self.ledger_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return
        except (OSError, UnicodeDecodeError) as exc:
            raise StorageFailureError("reading ledger", self.ledger_path, exc) from exc

        for lineno, line in enumerate(raw.splitlines(), start=1):
            fields = line.split()
            if not fields:
                continue
            if len(fields) != 3:
                logger.warning("Skipping malformed ledger line", extra={"line_number": lineno})
                continue
            try:
                role = UserRole.parse(fields[2])
            except InvalidRoleError:
                logger.warning("Skipping ledger line with unknown role", extra={"line_number": lineno})
                continue
            yield Credential(username=fields[0], password=fields[1], role=role)

    def _append(self, credential: Credential) -> None:
        try:
            self.ledger_path.parent.mkdir(parents=True, exist_ok=True)
            with self.ledger_path.open("a", encoding="utf-8") as fh:
                fh.write(credential.to_record() + "\n")
        except OSError as exc:
            raise StorageFailureError("appending to ledger", self.ledger_path, exc) from exc
