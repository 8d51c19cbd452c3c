# src/errorgate/tests/test_logging/test_formatters.py
import logging
import json
import sys
from errorgate.core.logging.formatters import JsonFormatter, ColorFormatter
from errorgate.exceptions.base import ViewException


def make_record(exc_info=None):
    return logging.LogRecord("errorgate", logging.ERROR, __file__, 10, "hello %s", ("tester",), exc_info)


def test_json_formatter_basic_fields():
    rec = make_record()
    rec.http_status = 404
    rec.request_id = "req-1"
    fmt = JsonFormatter(env="testing", service="svc")
    data = json.loads(fmt.format(rec))
    assert data["message"] == "hello tester"
    assert data["level"] == "ERROR"
    assert data["service"] == "svc"
    assert data["env"] == "testing"
    assert "timestamp" in data
    assert data["request_id"] == "req-1"
    assert data["http_status"] == 404
    assert "version" in data
    # standard LogRecord attributes are not repeated as extras
    assert "levelno" not in data
    assert "args" not in data


def test_json_formatter_non_serializable_extra():
    rec = make_record()

    class X:
        def __repr__(self):
            return "<X>"

    rec.obj = X()
    data = json.loads(JsonFormatter(env="dev", service="svc").format(rec))
    assert data["obj"] == "<X>"


def test_json_formatter_exception_fields():
    try:
        raise ViewException(403, "forbidden")
    except ViewException:
        rec = make_record(sys.exc_info())
    data = json.loads(JsonFormatter().format(rec))
    assert data["exc_type"] == "errorgate.exceptions.base.ViewException"
    assert "Traceback" in data["exc_info"]
    assert data["service"] == "errorgate"


def test_color_formatter_line_shape():
    rec = make_record()
    rec.request_id = "rid-9"
    line = ColorFormatter().format(rec)
    assert "ERROR" in line
    assert "rid-9" in line
    assert line.endswith("hello tester")
