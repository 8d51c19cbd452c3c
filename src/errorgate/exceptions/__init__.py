# errorgate/
# │
# ├── exceptions/
# │   ├── __init__.py
# │   ├── base.py        # APIException, ViewException
# │   ├── registry.py    # ErrorPageRegistry (HTTP status -> error page URL)
# │   └── mapper.py      # ApiErrorHandler, ViewErrorHandler, ErrorTranslator

from .base import APIException, ViewException
from .registry import ErrorPageRegistry
from .mapper import ApiErrorHandler, ViewErrorHandler, ErrorTranslator, compose_log_message

__all__ = [
    "APIException",
    "ViewException",
    "ErrorPageRegistry",
    "ApiErrorHandler",
    "ViewErrorHandler",
    "ErrorTranslator",
    "compose_log_message",
]
