"""
Central logging configuration for filecms.

Provides:
- Structured logging (JSON in production, human-readable in development)
- Actor correlation via contextvars (set by the access controller per operation)
- Environment-aware log levels

Operational logging here is separate from the audit channel: audit events are
the security record, log lines are diagnostics.

Usage:
    from filecms.logging_config import get_logger
    logger = get_logger(__name__)
    logger.info("File indexed", extra={"managed_file": filename})
"""

import json
import logging
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Iterator, Optional

# Context var for the acting username - set for the duration of one operation
actor_var: ContextVar[Optional[str]] = ContextVar("actor", default=None)

_RESERVED_ATTRS = (
    "name", "msg", "args", "created", "filename", "funcName",
    "levelname", "levelno", "lineno", "module", "msecs",
    "pathname", "process", "processName", "relativeCreated",
    "stack_info", "exc_info", "exc_text", "thread", "threadName",
    "message", "taskName", "actor",
)


def get_actor() -> Optional[str]:
    """Get the acting username from context, if set."""
    return actor_var.get()


@contextmanager
def bind_actor(username: str) -> Iterator[None]:
    """Attach a username to every log record emitted inside the block."""
    token = actor_var.set(username)
    try:
        yield
    finally:
        actor_var.reset(token)


class ActorFilter(logging.Filter):
    """Filter that adds the acting username to log records from context."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.actor = get_actor() or "-"  # type: ignore[attr-defined]
        return True


class JsonFormatter(logging.Formatter):
    """Format log records as JSON for production log aggregators."""

    def format(self, record: logging.LogRecord) -> str:
        log_obj: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        actor = getattr(record, "actor", None)
        if actor and actor != "-":
            log_obj["actor"] = actor

        if record.exc_info:
            log_obj["exception"] = self.formatException(record.exc_info)

        # Add extra fields (anything passed via extra= in the log call)
        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS and value is not None:
                try:
                    json.dumps(value)
                    log_obj[key] = value
                except (TypeError, ValueError):
                    log_obj[key] = str(value)

        return json.dumps(log_obj)


def _create_dev_formatter() -> logging.Formatter:
    return logging.Formatter(
        "%(asctime)s %(levelname)-5s [%(name)s] actor=%(actor)s %(message)s",
        datefmt="%H:%M:%S",
    )


def configure_logging(
    *,
    log_level: str = "INFO",
    environment: str = "development",
    debug: bool = False,
) -> None:
    """
    Configure application-wide logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        environment: 'development' or 'production'
        debug: If True, use DEBUG level regardless of log_level
    """
    level = logging.DEBUG if debug else getattr(logging, log_level.upper(), logging.INFO)

    # Ensure actor exists on all records (default before filter runs)
    old_factory = logging.getLogRecordFactory()

    def record_factory(*args: Any, **kwargs: Any) -> logging.LogRecord:
        record = old_factory(*args, **kwargs)
        if not hasattr(record, "actor"):
            setattr(record, "actor", "-")
        return record

    logging.setLogRecordFactory(record_factory)

    root = logging.getLogger()
    root.setLevel(level)

    # Remove existing handlers to avoid duplicates on reconfigure
    for h in root.handlers[:]:
        root.removeHandler(h)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.addFilter(ActorFilter())

    if environment == "production":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(_create_dev_formatter())

    root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for the given module name.

    Logs will automatically include the actor when one is bound.
    Use extra={} for additional structured fields:
        logger.info("Deleted", extra={"managed_file": name})
    """
    return logging.getLogger(name)
