"""Structured Logging — tests for JSONFormatter and setup_logging."""

import json
import logging
import sys
from uuid import uuid4

from contact_api.infrastructure.observability import JSONFormatter, setup_logging


def _record(msg: str = "hello", **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "contact_api.test", logging.INFO, __file__, 1, msg, None, None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_core_fields():
    payload = json.loads(JSONFormatter().format(_record()))
    assert payload["level"] == "INFO"
    assert payload["logger"] == "contact_api.test"
    assert payload["message"] == "hello"
    assert "timestamp" in payload


def test_json_formatter_surfaces_extra_fields():
    contact_id = uuid4()
    payload = json.loads(JSONFormatter().format(
        _record(contact_id=contact_id, error_code="CONTACT_NOT_FOUND", path="/contact/x"),
    ))
    assert payload["contact_id"] == str(contact_id)
    assert payload["error_code"] == "CONTACT_NOT_FOUND"
    assert payload["path"] == "/contact/x"
    assert "status_code" not in payload


def test_json_formatter_includes_exception():
    try:
        raise ValueError("bad")
    except ValueError:
        record = _record()
        record.exc_info = sys.exc_info()
    payload = json.loads(JSONFormatter().format(record))
    assert "ValueError: bad" in payload["exception"]


def test_setup_logging_replaces_previous_handler():
    previous_level = logging.root.level
    first = setup_logging("DEBUG", "json")
    second = setup_logging("WARNING", "text")
    try:
        assert first not in logging.root.handlers
        assert second in logging.root.handlers
        assert logging.root.level == logging.WARNING
        assert not isinstance(second.formatter, JSONFormatter)
    finally:
        logging.root.removeHandler(second)
        logging.root.setLevel(previous_level)
