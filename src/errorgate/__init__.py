"""
errorgate: translate application exceptions into client-facing responses.

    from errorgate import APIException, Status

    raise APIException(Status.FAIL_VALIDATION, "email is required")

The FastAPI wiring lives in `errorgate.main.create_app` and
`errorgate.api.v1.error_handlers.register_exception_handlers`.
"""

from .core.status import Status, StatusDescriptor
from .exceptions import (
    APIException,
    ViewException,
    ErrorPageRegistry,
    ApiErrorHandler,
    ViewErrorHandler,
    ErrorTranslator,
)
from .schemas import StructuredResult, Redirect, Render

__all__ = [
    "Status",
    "StatusDescriptor",
    "APIException",
    "ViewException",
    "ErrorPageRegistry",
    "ApiErrorHandler",
    "ViewErrorHandler",
    "ErrorTranslator",
    "StructuredResult",
    "Redirect",
    "Render",
]
