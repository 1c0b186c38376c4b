"""Structured Logging — JSON formatter and setup for buffer diagnostics.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (index, capacity, old_capacity, new_capacity, error_code) surfaced when present
    - JSON format by default, human-readable text on request

Design Decisions:
    - Growth events carry their capacities as extra fields, so JSON lines can be
      filtered on new_capacity without parsing the message
    - setup_logging is reached through services.logging_setup.configure_logging, never on import
"""

import logging
import json
from datetime import datetime, timezone

_EXTRA_FIELDS = (
    "index", "capacity", "old_capacity", "new_capacity", "error_code",
)


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


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Attach a stream handler to the root logger. Returns the handler."""
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
