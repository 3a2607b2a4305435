"""
Managed file index: the persisted list of filenames the system knows about.

One filename per line, in insertion order. Adds append a line; removals
rewrite the whole index through a temporary file and an atomic replace.
"""

import os
from pathlib import Path
from threading import Lock
from typing import List, Union

from filecms.kernel.errors import AlreadyManagedError, NotManagedError, StorageFailureError
from filecms.kernel.models.base import check_filename
from filecms.logging_config import get_logger

logger = get_logger(__name__)


class ManagedFileIndex:
    """Text-file backed set of managed filenames."""

    def __init__(self, index_path: Union[str, Path]):
        self.index_path = Path(index_path)
        self._lock = Lock()

    def list(self) -> List[str]:
        """
        Return managed filenames in insertion order.

        A missing index file means nothing is managed yet and yields an empty
        list; an unreadable one raises StorageFailureError.
        """
        with self._lock:
            return self._read()

    def contains(self, filename: str) -> bool:
        return filename in self.list()

    __contains__ = contains

    def add(self, filename: str) -> None:
        """
        Append a filename to the index.

        Raises:
            AlreadyManagedError: If the filename is already indexed
        """
        check_filename(filename)
        with self._lock:
            if filename in self._read():
                raise AlreadyManagedError(filename)
            try:
                self.index_path.parent.mkdir(parents=True, exist_ok=True)
                with self.index_path.open("a", encoding="utf-8") as fh:
                    fh.write(filename + "\n")
            except OSError as exc:
                raise StorageFailureError("appending to index", self.index_path, exc) from exc
        logger.debug("Indexed file", extra={"managed_file": filename})

    def remove(self, filename: str) -> None:
        """
        Drop a filename from the index.

        Raises:
            NotManagedError: If the filename is not indexed
        """
        with self._lock:
            entries = self._read()
            if filename not in entries:
                raise NotManagedError(filename)
            remaining = [entry for entry in entries if entry != filename]
            self._replace(remaining)
        logger.debug("Unindexed file", extra={"managed_file": filename})

    def _read(self) -> List[str]:
        try:
            raw = self.index_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        except (OSError, UnicodeDecodeError) as exc:
            raise StorageFailureError("reading index", self.index_path, exc) from exc
        return [line.strip() for line in raw.splitlines() if line.strip()]

    def _replace(self, entries: List[str]) -> None:
        tmp_path = self.index_path.with_name(self.index_path.name + ".tmp")
        try:
            tmp_path.write_text("".join(entry + "\n" for entry in entries), encoding="utf-8")
            os.replace(tmp_path, self.index_path)
        except OSError as exc:
            raise StorageFailureError("rewriting index", self.index_path, exc) from exc

    def __len__(self) -> int:
        return len(self.list())
