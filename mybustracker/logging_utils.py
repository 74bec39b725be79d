"""Utilities for configuring structured logging for the client library."""

from __future__ import annotations

import json
import logging
import sys
import traceback
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from .config import APP_NAME, settings


_LOG_RECORD_RESERVED_KEYS = {
    "name",
    "msg",
    "args",
    "levelname",
    "levelno",
    "pathname",
    "filename",
    "module",
    "exc_info",
    "exc_text",
    "stack_info",
    "lineno",
    "funcName",
    "created",
    "msecs",
    "relativeCreated",
    "thread",
    "threadName",
    "processName",
    "process",
    "taskName",
    "message",
    "asctime",
}

_TEXT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class JsonLogFormatter(logging.Formatter):
    """Render log records as single-line JSON documents."""

    def __init__(self, service_name: str = APP_NAME) -> None:
        super().__init__()
        self.service_name = service_name

    def format(self, record: logging.LogRecord) -> str:
        return json.dumps(self.serialize_record(record), default=str)

    def serialize_record(self, record: logging.LogRecord) -> Dict[str, Any]:
        """Convert a log record into a JSON-safe payload."""
        created_at = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload: Dict[str, Any] = {
            "service": self.service_name,
            "level": record.levelname,
            "logger_name": record.name,
            "message": record.getMessage(),
            "created_at": created_at.isoformat(),
        }

        if record.exc_info:
            payload["traceback"] = "".join(traceback.format_exception(*record.exc_info))
        elif record.exc_text:
            payload["traceback"] = record.exc_text

        extra = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _LOG_RECORD_RESERVED_KEYS and not key.startswith("_")
        }
        if extra:
            sanitized: Dict[str, Any] = {}
            for key, value in extra.items():
                try:
                    json.dumps(value)
                    sanitized[key] = value
                except (TypeError, ValueError):
                    sanitized[key] = repr(value)
            payload["extra"] = sanitized

        return payload


_handler_instance: Optional[logging.Handler] = None


def configure_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> logging.Handler:
    """Attach a stream handler to the package logger.

    ``level`` and ``fmt`` default to ``LOG_LEVEL`` and ``LOG_FORMAT``. Calling
    this again replaces the previously installed handler.
    """
    global _handler_instance

    level_name = (level or settings.log_level).upper()
    resolved_level = getattr(logging, level_name, logging.INFO)
    format_name = (fmt or settings.log_format).lower()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(resolved_level)
    if format_name == "json":
        handler.setFormatter(JsonLogFormatter())
    else:
        handler.setFormatter(logging.Formatter(_TEXT_FORMAT))

    reset_logging()
    package_logger = logging.getLogger(APP_NAME)
    package_logger.setLevel(resolved_level)
    package_logger.addHandler(handler)

    _handler_instance = handler
    return handler


def reset_logging() -> None:
    """Remove the handler installed by :func:`configure_logging`, if any."""
    global _handler_instance

    if _handler_instance is None:
        return
    logging.getLogger(APP_NAME).removeHandler(_handler_instance)
    _handler_instance.close()
    _handler_instance = None
