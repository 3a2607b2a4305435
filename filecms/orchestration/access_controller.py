"""
Access controller: policy-gated file operations with an audit trail.

Each call runs Requested -> PolicyChecked -> Denied | Executed, and an
executed call either succeeds (one audit message published) or fails with a
typed error (nothing published).

Index/content ordering:
- create writes content before indexing
- delete removes content before unindexing
so an interrupted call can leave orphaned content but never an index entry
without content behind it.
"""

from threading import Lock
from typing import List, Union
from weakref import WeakValueDictionary

from filecms.kernel.errors import AlreadyExistsError, NotFoundError
from filecms.kernel.events import event_types
from filecms.kernel.events.audit_channel import AuditChannel
from filecms.kernel.models.base import check_filename
from filecms.kernel.models.user import Principal
from filecms.kernel.permissions.permission_service import (
    AccessPolicy,
    Operation,
    require_permission,
)
from filecms.kernel.storage.content_store import FileContentStore
from filecms.kernel.storage.file_index import ManagedFileIndex
from filecms.logging_config import get_logger

logger = get_logger(__name__)

Content = Union[bytes, bytearray, str]


def _to_bytes(content: Content) -> bytes:
    if isinstance(content, str):
        return content.encode("utf-8")
    if isinstance(content, (bytes, bytearray)):
        return bytes(content)
    raise TypeError(f"File content must be bytes or str, not {type(content).__name__}")


class AccessController:
    """
    Single entry point for file operations.

    One code path serves every role; the access policy decides per call.
    Mutations on the same filename are serialized with a per-name lock.
    """

    def __init__(
        self,
        index: ManagedFileIndex,
        content_store: FileContentStore,
        audit_channel: AuditChannel,
    ):
        self.index = index
        self.content_store = content_store
        self.audit_channel = audit_channel
        # Entries vanish once no call holds the lock for that name
        self._file_locks: "WeakValueDictionary[str, Lock]" = WeakValueDictionary()
        self._file_locks_guard = Lock()

    def available_operations(self, principal: Principal) -> List[Operation]:
        """Operations the principal may invoke, in menu order."""
        return AccessPolicy.permitted_operations(principal.role)

    @require_permission(Operation.LIST_FILES)
    def list_files(self, principal: Principal) -> List[str]:
        """Return managed filenames in insertion order."""
        files = self.index.list()
        # Empty listings are not audited
        if files:
            self.audit_channel.publish(event_types.files_listed(principal.username))
        return files

    @require_permission(Operation.VIEW_CONTENT)
    def view_content(self, principal: Principal, filename: str) -> bytes:
        """
        Read a managed file.

        Raises:
            NotFoundError: If the file is not managed or has no content
        """
        check_filename(filename)
        if filename not in self.index:
            raise NotFoundError(filename)
        content = self.content_store.read(filename)
        self.audit_channel.publish(event_types.file_viewed(principal.username, filename))
        return content

    @require_permission(Operation.CREATE_FILE)
    def create_file(self, principal: Principal, filename: str, content: Content) -> None:
        """
        Create a new managed file.

        Raises:
            AlreadyExistsError: If the filename is already managed
        """
        check_filename(filename)
        data = _to_bytes(content)
        with self._lock_for(filename):
            if filename in self.index:
                raise AlreadyExistsError(filename)
            if self.content_store.exists(filename):
                logger.warning("Overwriting orphaned content", extra={"managed_file": filename})
            self.content_store.write(filename, data)
            self.index.add(filename)

        logger.info("File created", extra={"managed_file": filename})
        self.audit_channel.publish(event_types.file_created(principal.username, filename))

    @require_permission(Operation.EDIT_FILE)
    def edit_file(self, principal: Principal, filename: str, content: Content) -> None:
        """
        Replace the full content of a managed file.

        Raises:
            NotFoundError: If the filename is not managed (nothing is written)
        """
        check_filename(filename)
        data = _to_bytes(content)
        with self._lock_for(filename):
            if filename not in self.index:
                raise NotFoundError(filename)
            self.content_store.write(filename, data)

        logger.info("File edited", extra={"managed_file": filename})
        self.audit_channel.publish(event_types.file_edited(principal.username, filename))

    @require_permission(Operation.DELETE_FILE)
    def delete_file(self, principal: Principal, filename: str) -> None:
        """
        Delete a managed file's content and drop it from the index.

        Raises:
            NotFoundError: If the filename is not managed
        """
        check_filename(filename)
        with self._lock_for(filename):
            if filename not in self.index:
                raise NotFoundError(filename)
            try:
                self.content_store.delete(filename)
            except NotFoundError:
                # Index entry without content; drop it so the index heals
                logger.warning("Managed file had no content", extra={"managed_file": filename})
            self.index.remove(filename)

        logger.info("File deleted", extra={"managed_file": filename})
        self.audit_channel.publish(event_types.file_deleted(principal.username, filename))

    def _lock_for(self, filename: str) -> Lock:
        with self._file_locks_guard:
            lock = self._file_locks.get(filename)
            if lock is None:
                lock = self._file_locks[filename] = Lock()
            return lock
