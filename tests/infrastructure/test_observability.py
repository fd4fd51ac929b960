"""Structured Logging — JSON formatter fields and setup idempotence."""

import json
import logging

from parity_api.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra):
    record = logging.LogRecord(
        "parity_api.test", logging.WARNING, __file__, 1, "hello %s", ("world",), None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_base_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "WARNING"
    assert log["logger"] == "parity_api.test"
    assert log["message"] == "hello world"
    assert "timestamp" in log


def test_json_formatter_surfaces_known_extras_only():
    log = json.loads(JSONFormatter().format(
        _record(error_code="NOT_FOUND", identifier=7, unrelated="x"),
    ))
    assert log["error_code"] == "NOT_FOUND"
    assert log["identifier"] == 7
    assert "unrelated" not in log


def test_setup_logging_installs_single_handler():
    before = list(logging.root.handlers)
    level = logging.root.level
    try:
        setup_logging("DEBUG", "json")
        handler = setup_logging("warning", "text")
        installed = [h for h in logging.root.handlers if h not in before]
        assert installed == [handler]
        assert not isinstance(handler.formatter, JSONFormatter)
        assert logging.root.level == logging.WARNING
    finally:
        for h in list(logging.root.handlers):
            if h not in before:
                logging.root.removeHandler(h)
        logging.root.setLevel(level)
