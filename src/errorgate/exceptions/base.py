"""
Application exceptions translated at the HTTP boundary.

Two disjoint families:

- APIException: raised for programmatic (JSON) callers. Carries a StatusDescriptor,
  an optional user-facing message and an optional payload returned as `data`.
- ViewException: raised for browser callers. Carries an HTTP status code and an
  optional message; turned into a redirect to a configured error page or a
  rendered error view.

Anything else is not handled by this package and reaches the framework's default
error handling.

Finer classification uses the optional `kind` field rather than new subclasses:

    raise APIException(Status.FAIL_VALIDATION, "email is required", kind="missing_field")

Subclassing still works (the handlers match on isinstance), and the rendered error
view reports the concrete class name.
"""

from http import HTTPStatus
from typing import Any

from errorgate.core.status import Status, StatusDescriptor
from errorgate.validators.config_validators import to_http_status


class APIException(Exception):
    """
    Failure surfaced to an API caller as a StructuredResult.

    - status: StatusDescriptor describing the failure (defaults to Status.FAIL_OPERATION)
    - message: user-friendly message (safe to show to clients); None or "" means "no message"
    - data: optional payload returned to the client unchanged
    - kind: optional short discriminant (e.g. 'missing_field'); used in logs only
    """

    def __init__(self, status: StatusDescriptor | None = None, message: str | None = None,
                 data: Any = None, *, kind: str | None = None):
        self.status = status if status is not None else Status.FAIL_OPERATION
        self.message = message
        self.data = data
        self.kind = kind
        super().__init__(message or self.status.label)

    def __str__(self) -> str:
        base = self.message or self.status.label
        if self.kind:
            return f"{base} (status: {self.status.code}; kind: {self.kind})"
        return f"{base} (status: {self.status.code})"


class ViewException(Exception):
    """
    Failure surfaced to a browser caller as a redirect or a rendered error page.

    - http_status: standard HTTP status (int or HTTPStatus, 100..599)
    - message: optional message shown on the default error page
    - kind: optional short discriminant; used in logs only

    Raises:
        ValueError: if http_status is not a valid HTTP status code.
    """

    def __init__(self, http_status: int | HTTPStatus, message: str | None = None,
                 *, kind: str | None = None):
        self.http_status = to_http_status(http_status)
        self.message = message
        self.kind = kind
        super().__init__(message or f"HTTP {self.http_status}")

    def __str__(self) -> str:
        base = self.message or "No message available"
        if self.kind:
            return f"{base} (http_status: {self.http_status}; kind: {self.kind})"
        return f"{base} (http_status: {self.http_status})"


__all__ = ["APIException", "ViewException"]
