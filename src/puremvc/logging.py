"""Structured JSON logging for the puremvc logger tree."""
from __future__ import annotations

import json
import logging
import os
from datetime import datetime, timezone

LOGGER_NAME = "puremvc"

_RESERVED = {
    "args", "created", "exc_info", "exc_text", "filename", "funcName", "levelname", "levelno",
    "lineno", "message", "module", "msecs", "msg", "name", "pathname", "process", "processName",
    "relativeCreated", "stack_info", "taskName", "thread", "threadName",
}


class JSONLogFormatter(logging.Formatter):
    """Serialize log records as structured JSON for easy filtering."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        for key, value in record.__dict__.items():
            if key.startswith("_") or key in payload or key in _RESERVED:
                continue
            payload[key] = value
        return json.dumps(payload, ensure_ascii=False, default=repr)


def configure_logging(level: str | None = None) -> logging.Logger:
    """Attach a single JSON stream handler to the ``puremvc`` logger.

    Calling it again replaces the handler installed by a previous call.
    """
    level = (level or os.environ.get("PUREMVC_LOG_LEVEL", "INFO")).upper()

    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler.formatter, JSONLogFormatter):
            logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(JSONLogFormatter())
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger
