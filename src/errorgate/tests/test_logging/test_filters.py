# src/errorgate/tests/test_logging/test_filters.py
import logging
from errorgate.core.logging.filters import (
    REDACTED,
    RedactFilter,
    RequestIdFilter,
    reset_request_id,
    set_request_id,
)


def make_record():
    # name, level, pathname, lineno, msg, args, exc_info
    return logging.LogRecord("test", logging.ERROR, __file__, 1, "hello %s", ("world",), None)


def test_request_id_filter_defaults_to_dash():
    rec = make_record()
    token = set_request_id(None)
    try:
        assert RequestIdFilter().filter(rec) is True
        assert rec.request_id == "-"
    finally:
        reset_request_id(token)


def test_request_id_filter_uses_contextvar():
    rec = make_record()
    token = set_request_id("abc-123")
    try:
        RequestIdFilter().filter(rec)
        assert rec.request_id == "abc-123"
    finally:
        reset_request_id(token)


def test_request_id_filter_respects_record_extra():
    rec = make_record()
    rec.request_id = "explicit"
    token = set_request_id("context-id")
    try:
        RequestIdFilter().filter(rec)
        assert rec.request_id == "explicit"
    finally:
        reset_request_id(token)


def test_redact_filter_masks_sensitive_attributes_case_insensitively():
    rec = make_record()
    rec.password = "hunter2"
    rec.Authorization = "Bearer abc"
    rec.status_code = 4005
    assert RedactFilter().filter(rec) is True
    assert rec.password == REDACTED
    assert rec.Authorization == REDACTED
    assert rec.status_code == 4005


def test_redact_filter_scrubs_nested_extras():
    rec = make_record()
    rec.payload = {"user": "bob", "token": "t-1", "nested": {"secret": "s"}}
    RedactFilter().filter(rec)
    assert rec.payload == {"user": "bob", "token": REDACTED, "nested": {"secret": REDACTED}}
    # message args are left alone
    assert rec.getMessage() == "hello world"
