"""
Audit channel subscribers.
"""

from pathlib import Path
from threading import Lock
from typing import List, Union

from filecms.kernel.errors import StorageFailureError
from filecms.kernel.events.event_types import AuditEvent


class AuditLogWriter:
    """
    Default subscriber: appends each message and a newline to a log file.

    The file is opened in append mode per message, so the log survives a
    crash up to the last published event.
    """

    def __init__(self, log_path: Union[str, Path]):
        self.log_path = Path(log_path)
        self._lock = Lock()

    def __call__(self, message: str) -> None:
        try:
            with self._lock:
                self.log_path.parent.mkdir(parents=True, exist_ok=True)
                with self.log_path.open("a", encoding="utf-8") as fh:
                    fh.write(message + "\n")
        except OSError as exc:
            raise StorageFailureError("appending audit log", self.log_path, exc) from exc

    def read_lines(self) -> List[str]:
        """Return the logged messages, oldest first."""
        try:
            return self.log_path.read_text(encoding="utf-8").splitlines()
        except FileNotFoundError:
            return []
        except (OSError, UnicodeDecodeError) as exc:
            raise StorageFailureError("reading audit log", self.log_path, exc) from exc

    def __repr__(self) -> str:
        return f"<AuditLogWriter {self.log_path}>"


class AuditTrail:
    """In-memory subscriber keeping timestamped events in arrival order."""

    def __init__(self) -> None:
        self._events: List[AuditEvent] = []
        self._lock = Lock()

    def __call__(self, message: str) -> None:
        with self._lock:
            self._events.append(AuditEvent(message=message))

    def get_events(self) -> List[AuditEvent]:
        with self._lock:
            return list(self._events)

    @property
    def messages(self) -> List[str]:
        return [event.message for event in self.get_events()]

    def clear(self) -> None:
        with self._lock:
            self._events.clear()
