"""
Audit infrastructure.

Provides the publish/subscribe audit channel and its subscribers.
"""

from filecms.kernel.events import event_types
from filecms.kernel.events.audit_channel import AuditChannel, AuditHandler
from filecms.kernel.events.event_types import AuditEvent
from filecms.kernel.events.subscribers import AuditLogWriter, AuditTrail

__all__ = [
    "AuditChannel",
    "AuditHandler",
    "AuditEvent",
    "AuditLogWriter",
    "AuditTrail",
    "event_types",
]
