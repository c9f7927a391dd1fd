"""Structured Logging — one root handler for the service and the uvicorn server.

Invariants:
    - JSON records carry timestamp (from the record itself), level, logger and message
    - Request context (user_id, error_code, path, method, status_code) surfaced when present
    - setup_logging is idempotent: repeated calls replace the service handler, never stack it
    - uvicorn's own loggers propagate to root, so server and service lines share one format

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control
    - setup_logging runs from the application startup, after uvicorn installed its
      handlers, so they can be detached here
"""

import logging
import json
from datetime import datetime, timezone


EXTRA_KEYS: tuple[str, ...] = (
    "user_id", "error_code", "path", "method", "status_code", "database",
)

TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"

SERVER_LOGGERS: tuple[str, ...] = ("uvicorn", "uvicorn.error", "uvicorn.access")

_HANDLER_NAME = "user_service"


class JSONFormatter(logging.Formatter):
    """One JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(
                record.created, timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log.update({
            key: record.__dict__[key] for key in EXTRA_KEYS
            if record.__dict__.get(key) is not None
        })
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        if record.stack_info:
            log["stack"] = self.formatStack(record.stack_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def build_formatter(fmt: str) -> logging.Formatter:
    """'json' -> JSONFormatter; anything else -> human-readable text."""
    if fmt == "json":
        return JSONFormatter()
    return logging.Formatter(TEXT_FORMAT)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install (or replace) the service handler on the root logger."""
    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(build_formatter(fmt))

    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    for name in SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers.clear()
        server_logger.propagate = True
    return handler
