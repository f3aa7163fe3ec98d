"""Logging setup for challengely.

Pretty single-line logs for the terminal, JSON lines when
``CHALLENGELY_LOG_FORMAT=json``.
"""

import json
import logging
import sys
from datetime import datetime, timezone

LOGGER_NAME = "challengely"


def _format_timestamp(record: logging.LogRecord) -> str:
    return datetime.fromtimestamp(record.created, timezone.utc).isoformat().replace("+00:00", "Z")


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": _format_timestamp(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


class PrettyFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        ts = _format_timestamp(record)
        line = f"{ts} {record.levelname} [{record.name}] {record.getMessage()}"
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


def configure_logging(level: str = "INFO", fmt: str = "pretty") -> None:
    """Configure the ``challengely`` logger hierarchy."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper())

    formatter: logging.Formatter
    if fmt == "json":
        formatter = JsonFormatter()
    else:
        formatter = PrettyFormatter()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    # Reconfiguring replaces handlers instead of stacking them
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.propagate = False
