"""Structured Logging — JSON formatter and setup for the CLI.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (program, check, error_code, operation) surfaced when present
    - Logs go to stderr; stdout is reserved for program output (Running / PASSED)

Design Decisions:
    - Handler bound to stderr so `run` output on stdout stays machine-checkable
    - setup_logging called once by the CLI entry point
"""

import logging
import json
import sys
from datetime import datetime, timezone

_EXTRA_FIELDS = ("program", "check", "error_code", "operation")


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
    """Configure root logging; replaces a handler installed by an earlier call."""
    handler = logging.StreamHandler(sys.stderr)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    handler.set_name("pureops")
    for existing in list(logging.root.handlers):
        if existing.get_name() == "pureops":
            logging.root.removeHandler(existing)
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.WARNING))
    return handler
