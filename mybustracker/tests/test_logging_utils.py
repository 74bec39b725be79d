"""Tests for structured logging helpers."""

import json
import logging
import sys

import pytest

from mybustracker.logging_utils import JsonLogFormatter, configure_logging, reset_logging


@pytest.fixture(autouse=True)
def _reset_package_logging():
    yield
    reset_logging()
    logging.getLogger("mybustracker").setLevel(logging.NOTSET)


def _record(**extra):
    record = logging.LogRecord(
        name="mybustracker.services.client",
        level=logging.WARNING,
        pathname=__file__,
        lineno=1,
        msg="%s failed",
        args=("getBusTimes",),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_serializes_record():
    payload = json.loads(JsonLogFormatter().format(_record()))

    assert payload["service"] == "mybustracker"
    assert payload["level"] == "WARNING"
    assert payload["logger_name"] == "mybustracker.services.client"
    assert payload["message"] == "getBusTimes failed"
    assert "extra" not in payload


def test_json_formatter_keeps_json_safe_extras():
    payload = JsonLogFormatter().serialize_record(_record(function="getBusTimes", status=503, transport=object()))

    assert payload["extra"]["function"] == "getBusTimes"
    assert payload["extra"]["status"] == 503
    assert payload["extra"]["transport"].startswith("<object object")


def test_json_formatter_includes_traceback():
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        record = _record()
        record.exc_info = sys.exc_info()

    payload = JsonLogFormatter().serialize_record(record)

    assert "RuntimeError: boom" in payload["traceback"]


def test_configure_logging_installs_single_handler():
    package_logger = logging.getLogger("mybustracker")

    first = configure_logging(level="debug", fmt="json")
    second = configure_logging(level="warning", fmt="text")

    assert first not in package_logger.handlers
    assert second in package_logger.handlers
    assert package_logger.level == logging.WARNING
    assert not isinstance(second.formatter, JsonLogFormatter)


def test_configure_logging_defaults_to_settings(monkeypatch):
    monkeypatch.setattr("mybustracker.config.settings.log_level", "ERROR")
    monkeypatch.setattr("mybustracker.config.settings.log_format", "json")

    handler = configure_logging()

    assert handler.level == logging.ERROR
    assert isinstance(handler.formatter, JsonLogFormatter)


def test_reset_logging_removes_handler():
    handler = configure_logging()

    reset_logging()

    assert handler not in logging.getLogger("mybustracker").handlers
