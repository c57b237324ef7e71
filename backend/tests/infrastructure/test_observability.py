"""Structured logging — JSONFormatter output."""

import json
import logging
import sys

from attendance_api.infrastructure.observability import JSONFormatter


def _record(msg="hello", exc_info=None, **extra):
    record = logging.LogRecord(
        name="attendance_api.test", level=logging.INFO, pathname=__file__,
        lineno=1, msg=msg, args=(), exc_info=exc_info,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_base_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "attendance_api.test"
    assert log["message"] == "hello"
    assert "timestamp" in log


def test_json_formatter_surfaces_known_extras():
    log = json.loads(JSONFormatter().format(
        _record(class_id=4, total_users=12, unrelated="skip"),
    ))
    assert log["class_id"] == 4
    assert log["total_users"] == 12
    assert "unrelated" not in log


def test_json_formatter_omits_none_extras():
    log = json.loads(JSONFormatter().format(_record(class_id=None)))
    assert "class_id" not in log


def test_json_formatter_includes_exception():
    try:
        raise ValueError("bad row")
    except ValueError:
        record = _record(exc_info=sys.exc_info())
    log = json.loads(JSONFormatter().format(record))
    assert "ValueError: bad row" in log["exception"]
