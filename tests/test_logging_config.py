"""Tests for structured JSON logging."""

import json
import logging

from pythonjsonlogger import jsonlogger

from freedom_calculators.logging_config import CustomJsonFormatter, setup_logging


def test_formatter_adds_service_fields():
    formatter = CustomJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s")
    record = logging.LogRecord("freedom_calculators.tvm", logging.WARNING, __file__, 1,
                               "rate solver did not converge", None, None)
    record.n = 20
    payload = json.loads(formatter.format(record))
    assert payload["message"] == "rate solver did not converge"
    assert payload["level"] == "WARNING"
    assert payload["service"] == "freedom-calculators"
    assert payload["name"] == "freedom_calculators.tvm"
    assert payload["n"] == 20
    assert "timestamp" in payload


def test_setup_logging_installs_single_json_handler():
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        setup_logging("DEBUG")
        setup_logging("DEBUG")
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, jsonlogger.JsonFormatter)
        assert root.level == logging.DEBUG
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
