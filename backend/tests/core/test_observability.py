"""Tests for structured logging — JSON shape and idempotent setup."""

import json
import logging

from daybook.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "daybook.test", logging.INFO, __file__, 1, "entry saved", None, None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_includes_journal_extras_only_when_set():
    line = json.loads(JSONFormatter().format(_record(user_id=7, entry_id=None)))
    assert line["message"] == "entry saved"
    assert line["level"] == "INFO"
    assert line["user_id"] == 7
    assert "entry_id" not in line


def test_setup_logging_does_not_stack_handlers():
    root = logging.getLogger()
    before = len(root.handlers)
    first = setup_logging("DEBUG", "text")
    second = setup_logging("INFO", "json")
    try:
        assert first not in root.handlers
        assert second in root.handlers
        assert len(root.handlers) == before + 1
        assert root.level == logging.INFO
    finally:
        root.removeHandler(second)
