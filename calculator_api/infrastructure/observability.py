"""Structured Logging — JSON formatter and setup for production observability.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (error_code, category, field, operation, path, ...) surfaced when present
    - setup_logging is idempotent: one handler per process, however often called

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control
    - setup_logging called once on startup via lifespan
"""

import json
import logging
from datetime import datetime, timezone

_EXTRA_FIELDS = (
    "error_code", "category", "field", "operation", "limit",
    "path", "method", "status_code", "host", "port",
)


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


class _CalculatorHandler(logging.StreamHandler):
    """Marker subclass so repeated setup_logging calls can find their handler."""


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Configure logging for the application."""
    for existing in list(logging.root.handlers):
        if isinstance(existing, _CalculatorHandler):
            logging.root.removeHandler(existing)

    handler = _CalculatorHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
