"""
Audit channel: synchronous publish/subscribe for audit messages.

Every security-relevant action is published here. Retention is up to the
subscribers; the channel itself keeps nothing.
"""

from threading import Lock
from typing import Callable, List

from filecms.logging_config import get_logger

logger = get_logger(__name__)

AuditHandler = Callable[[str], None]


class AuditChannel:
    """
    Ordered registry of audit subscribers.

    Usage:
        channel = AuditChannel()
        channel.subscribe(AuditLogWriter(path))
        channel.publish("User alice: created file a.txt")

    Handlers run in subscription order on the publishing thread. A handler
    that raises is logged and skipped; the rest still receive the message
    and the publisher never sees the exception.
    """

    def __init__(self) -> None:
        self._handlers: List[AuditHandler] = []
        self._lock = Lock()

    def subscribe(self, handler: AuditHandler) -> None:
        """Register a handler. The same handler may be registered twice."""
        with self._lock:
            self._handlers.append(handler)

    def unsubscribe(self, handler: AuditHandler) -> bool:
        """
        Remove the first registered handler equal to the given one.

        Returns:
            True if a handler was removed
        """
        with self._lock:
            for index, registered in enumerate(self._handlers):
                if registered == handler:
                    del self._handlers[index]
                    return True
        return False

    @property
    def subscribers(self) -> List[AuditHandler]:
        with self._lock:
            return list(self._handlers)

    def publish(self, message: str) -> None:
        """Deliver a message to every current subscriber, in order."""
        # Snapshot so a handler may (un)subscribe without affecting this delivery
        for handler in self.subscribers:
            try:
                handler(message)
            except Exception:
                logger.exception(
                    "Audit subscriber failed",
                    extra={"subscriber": repr(handler), "audit_message": message},
                )

    def __len__(self) -> int:
        return len(self.subscribers)
