"""Structured Logging — JSON formatter and one-shot logging setup.

Invariants:
    - Every record carries timestamp (from the record, UTC), level, logger, message
    - Journal extras (user_id, entry_id, error_code, operation, path) copied
      only when present; entry content never reaches a log line
    - setup_logging is idempotent: re-running the lifespan replaces the
      Daybook handler instead of stacking a second one
"""

import json
import logging
from datetime import datetime, timezone

JOURNAL_FIELDS = ("user_id", "entry_id", "error_code", "operation", "path")
TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# SQL echo and per-request access lines drown out service logs
_QUIET_LOGGERS = ("sqlalchemy.engine", "aiosqlite", "uvicorn.access")


class JSONFormatter(logging.Formatter):
    """One JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update({
            key: record.__dict__[key]
            for key in JOURNAL_FIELDS
            if record.__dict__.get(key) is not None
        })
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


class _DaybookHandler(logging.StreamHandler):
    """Marker type so setup_logging can find its own handler again."""


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the Daybook handler on the root logger."""
    root = logging.getLogger()
    for existing in [h for h in root.handlers if isinstance(h, _DaybookHandler)]:
        root.removeHandler(existing)

    handler = _DaybookHandler()
    handler.setFormatter(
        JSONFormatter() if fmt == "json" else logging.Formatter(TEXT_FORMAT),
    )
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    return handler
