"""
File Content Management System

Bootstrap for the access-control core. The interactive front end builds one
Application at startup and passes it to whatever needs the core.
"""

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional

from filecms.config import Settings, get_settings
from filecms.kernel.events import AuditChannel, AuditLogWriter
from filecms.kernel.identity import CredentialLedger
from filecms.kernel.storage import FileContentStore, ManagedFileIndex
from filecms.logging_config import configure_logging, get_logger
from filecms.orchestration import AccessController

logger = get_logger(__name__)


@dataclass
class Application:
    """Explicitly constructed core components, owned by the caller."""

    settings: Settings
    audit_channel: AuditChannel
    audit_log: AuditLogWriter
    ledger: CredentialLedger
    controller: AccessController

    def close(self) -> None:
        """Detach the default audit subscriber."""
        self.audit_channel.unsubscribe(self.audit_log)


def build_application(settings: Optional[Settings] = None) -> Application:
    """Construct the core with the default audit log subscriber attached."""
    settings = settings or get_settings()

    audit_channel = AuditChannel()
    audit_log = AuditLogWriter(settings.audit_log_path)
    audit_channel.subscribe(audit_log)

    ledger = CredentialLedger(settings.users_path, audit_channel)
    controller = AccessController(
        index=ManagedFileIndex(settings.index_path),
        content_store=FileContentStore(settings.content_path),
        audit_channel=audit_channel,
    )
    return Application(
        settings=settings,
        audit_channel=audit_channel,
        audit_log=audit_log,
        ledger=ledger,
        controller=controller,
    )


@contextmanager
def lifespan(settings: Optional[Settings] = None) -> Iterator[Application]:
    """
    Application lifespan handler.

    Configures logging, yields the application, and tears it down on exit.
    """
    settings = settings or get_settings()
    configure_logging(
        log_level=settings.log_level,
        environment=settings.environment,
        debug=settings.debug,
    )

    logger.info("Starting %s v%s", settings.project_name, settings.version)
    app = build_application(settings)
    try:
        yield app
    finally:
        logger.info("Shutting down...")
        app.close()
