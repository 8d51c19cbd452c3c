"""
Exception -> outcome translation.

- ApiErrorHandler: APIException -> StructuredResult (logs "<label>:<message>")
- ViewErrorHandler: ViewException -> Redirect | Render
- ErrorTranslator: picks the handler by exception family; anything else is re-raised
"""

import logging
from collections.abc import Callable
from datetime import datetime, timezone

from .base import APIException, ViewException
from .registry import ErrorPageRegistry
from errorgate.config.settings import Settings
from errorgate.core.status import StatusDescriptor
from errorgate.schemas.result import StructuredResult, Redirect, Render

logger = logging.getLogger(__name__)

DEFAULT_VIEW_NAME = "error"
NO_MESSAGE = "No message available"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)

# -----------------------
# Message helpers
# -----------------------

def compose_log_message(status: StatusDescriptor | None, message: str | None) -> str:
    """
    Build the message written to the log for an APIException.

      - "<label>:<message>" when a message was given
      - "<label>" otherwise

    A missing status or label composes as "" instead of raising.
    """
    label = (getattr(status, "label", None) or "") if status is not None else ""
    if message:
        return f"{label}:{message}"
    return label


def exception_type_name(exc: BaseException) -> str:
    """Fully-qualified name of the runtime type of `exc` (subclasses report their own)."""
    cls = type(exc)
    return f"{cls.__module__}.{cls.__qualname__}"

# -----------------------
# Handlers
# -----------------------

class ApiErrorHandler:
    """
    APIException -> StructuredResult.

    The log gets the label-prefixed message; the response carries the raw user
    message (or "") so clients only see what the raiser meant them to see.
    """

    def handle(self, exc: APIException) -> StructuredResult:
        status = exc.status
        composed = compose_log_message(status, exc.message)
        logger.error(
            "API error <== code: %s, message: %s",
            getattr(status, "code", None),
            composed,
            exc_info=exc,
            extra={"status_code": getattr(status, "code", None), "error_kind": exc.kind},
        )
        return StructuredResult(status=status, data=exc.data, message=exc.message or "")


class ViewErrorHandler:
    """
    ViewException -> Redirect | Render.

    If the registry has a page for the exception's HTTP status the caller is redirected
    there; otherwise the default error view is rendered with a four-entry model:
    exception, status, message, timestamp.
    """

    def __init__(self, registry: ErrorPageRegistry, *, view_name: str = DEFAULT_VIEW_NAME,
                 clock: Callable[[], datetime] | None = None):
        self.registry = registry
        self.view_name = view_name or DEFAULT_VIEW_NAME
        self.clock = clock or _utcnow

    def handle(self, exc: ViewException) -> Redirect | Render:
        logger.error(
            "View error <== %s",
            exc,
            exc_info=exc,
            extra={"http_status": exc.http_status, "error_kind": exc.kind},
        )

        redirect_url = self.registry.lookup(exc.http_status)
        if redirect_url:
            return Redirect(url=redirect_url)

        model = {
            "exception": exception_type_name(exc),
            "status": exc.http_status,
            "message": exc.message or NO_MESSAGE,
            "timestamp": self.clock(),
        }
        return Render(view_name=self.view_name, model=model)

# -----------------------
# Dispatch
# -----------------------

class ErrorTranslator:
    """
    Explicit type switch over the two exception families.

    Usage:
        translator = ErrorTranslator.from_settings(settings)
        outcome = translator.translate(exc)   # StructuredResult | Redirect | Render

    Exceptions outside both families are re-raised unchanged so the host framework
    applies its own default handling.
    """

    def __init__(self, api_handler: ApiErrorHandler, view_handler: ViewErrorHandler):
        self.api_handler = api_handler
        self.view_handler = view_handler

    @classmethod
    def from_settings(cls, settings: Settings, clock: Callable[[], datetime] | None = None) -> "ErrorTranslator":
        registry = ErrorPageRegistry.from_settings(settings)
        view_name = getattr(settings, "ERROR_VIEW_NAME", DEFAULT_VIEW_NAME)
        return cls(ApiErrorHandler(), ViewErrorHandler(registry, view_name=view_name, clock=clock))

    def translate(self, exc: BaseException) -> StructuredResult | Redirect | Render:
        if isinstance(exc, APIException):
            return self.api_handler.handle(exc)
        if isinstance(exc, ViewException):
            return self.view_handler.handle(exc)
        raise exc
