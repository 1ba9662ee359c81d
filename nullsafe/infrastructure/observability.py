"""Structured Logging — JSON formatter and setup for observability.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (error_code, index, variant, locale, path) surfaced when present
    - Handlers write to stderr: stdout is reserved for demo output

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control
    - setup_logging is idempotent: repeated calls (CLI + API startup) replace our handler
"""

import json
import logging
import sys
from datetime import datetime, timezone

_EXTRA_FIELDS = ("error_code", "index", "variant", "locale", "path")


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging."""

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


def setup_logging(level: str = "WARNING", fmt: str = "text") -> logging.Handler:
    """Configure root logging for the application."""
    handler = logging.StreamHandler(sys.stderr)
    handler.set_name("nullsafe")
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    for existing in list(logging.root.handlers):
        if existing.get_name() == "nullsafe":
            logging.root.removeHandler(existing)
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.WARNING))
    return handler
