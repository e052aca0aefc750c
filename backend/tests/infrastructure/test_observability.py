"""Structured Logging - tests for the JSON formatter and logging setup."""

import json
import logging

from ngo_ledger.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "ngo_ledger.test", logging.WARNING, __file__, 1, "Invoke %s failed", ("queryNGO",), None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_core_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "WARNING"
    assert log["logger"] == "ngo_ledger.test"
    assert log["message"] == "Invoke queryNGO failed"
    assert "timestamp" in log


def test_json_formatter_surfaces_invocation_extras():
    log = json.loads(JSONFormatter().format(
        _record(function_name="queryNGO", error_code="NOT_FOUND", status="error"),
    ))
    assert log["function_name"] == "queryNGO"
    assert log["error_code"] == "NOT_FOUND"
    assert log["status"] == "error"


def test_json_formatter_skips_missing_extras():
    log = json.loads(JSONFormatter().format(_record()))
    assert "error_code" not in log


def test_setup_logging_sets_level():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    try:
        setup_logging("DEBUG", "text")
        assert root.level == logging.DEBUG
        assert not isinstance(root.handlers[-1].formatter, JSONFormatter)
    finally:
        root.handlers[:] = handlers
        root.setLevel(level)
