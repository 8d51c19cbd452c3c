# src/errorgate/core/logging/filters.py
"""
Logging filters

- RequestIdFilter: stamps `record.request_id` from a contextvar set per request by
  RequestIDMiddleware, so formatters can reference %(request_id)s safely.
- RedactFilter: masks sensitive attributes on a record before it is formatted or
  queued. Error handlers attach extras (status codes, kinds, configured pages);
  this keeps secrets out of them if a caller ever passes one along.

Both filters return True: they annotate records, they never drop them.

We use `contextvars.ContextVar` rather than threading.local() because FastAPI runs
many requests on one thread; the value follows the request across awaits.
"""

import logging
from logging import LogRecord
import contextvars
from collections.abc import Mapping
from typing import Any

# Default is None to indicate "no request id set".
_request_id_ctx: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "request_id", default=None
)


def set_request_id(request_id: str | None):
    """
    Set the request id in the current context and return the token to allow reset.

    Returns:
        token: contextvar.Token which can be passed to reset_request_id(token)
    """
    return _request_id_ctx.set(request_id)


def reset_request_id(token):
    """
    Reset the contextvar to the previously saved token returned by set_request_id().
    """
    _request_id_ctx.reset(token)


def get_request_id() -> str | None:
    return _request_id_ctx.get()


class RequestIdFilter(logging.Filter):
    """
    Guarantee every LogRecord has a `request_id` attribute.

    Precedence:
      1. record.request_id passed explicitly via `extra`
      2. the contextvar value set by the middleware
      3. the sentinel "-"
    """

    def filter(self, record: LogRecord) -> bool:
        record.request_id = (
            getattr(record, "request_id", None) or get_request_id() or "-"
        )
        return True


REDACTED = "***REDACTED***"


class RedactFilter(logging.Filter):
    """
    Mask record attributes (and keys of dict-valued extras) whose name is sensitive.

    Matching is case-insensitive: `Authorization`, `PASSWORD` and `password` are all masked.
    """

    SENSITIVE = {"password", "secret", "token", "access_token", "refresh_token", "ssn", "authorization", "cookie"}

    def _scrub(self, value: Any, depth: int = 0) -> Any:
        # extras are usually flat; stop descending after a few levels
        if depth > 3 or not isinstance(value, Mapping):
            return value
        return {
            k: REDACTED if str(k).lower() in self.SENSITIVE else self._scrub(v, depth + 1)
            for k, v in value.items()
        }

    def filter(self, record: LogRecord) -> bool:
        for key in list(record.__dict__.keys()):
            if key.lower() in self.SENSITIVE:
                record.__dict__[key] = REDACTED
            elif isinstance(record.__dict__[key], Mapping) and key != "args":
                record.__dict__[key] = self._scrub(record.__dict__[key])
        return True
