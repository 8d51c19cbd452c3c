# src/errorgate/core/logging/handlers.py
"""
Handler factories for logging.dictConfig.

Each function returns a handler configuration dict; builder.py decides which ones
are wired in. They are pure functions of Settings, which keeps them easy to test.

| Name            | Destination           | Levels      | Active when                       |
| --------------- | --------------------- | ----------- | --------------------------------- |
| `console`       | stderr                | LOG_LEVEL+  | always                            |
| `error_console` | stderr (JSON)         | ERROR+      | LOG_TO_STDOUT=true                |
| `file`          | LOG_DIR/app.log       | LOG_LEVEL+  | LOG_TO_STDOUT=false and LOG_DIR   |
| `error_file`    | LOG_DIR/errors.log    | ERROR+      | LOG_TO_STDOUT=false and LOG_DIR   |

Every handler runs the "request_id" and "redact" filters declared in builder.py.
"""

from errorgate.config.settings import Settings
from pathlib import Path

_FILTERS = ["request_id", "redact"]


def _formatter_name(settings: Settings) -> str:
    return "json" if settings.LOG_FORMAT == "json" else "standard"


def get_console_handler(settings: Settings) -> dict:
    return {
        "class": "logging.StreamHandler",
        "formatter": _formatter_name(settings),
        "level": settings.LOG_LEVEL,
        "filters": list(_FILTERS),
        # to force stdout instead of stderr, add:
        # "stream": "ext://sys.stdout"
    }

def get_file_handler(settings: Settings) -> dict:
    return {
        "class": "logging.handlers.RotatingFileHandler",
        "formatter": _formatter_name(settings),
        "level": settings.LOG_LEVEL,
        "filename": str(Path(settings.LOG_DIR) / "app.log"),
        "maxBytes": settings.LOG_MAX_BYTES,
        "backupCount": settings.LOG_BACKUP_COUNT,
        "encoding": "utf-8",
        "filters": list(_FILTERS),
    }

# Errors only, always JSON: the API and view error handlers log here with exc_info.
def get_error_file_handler(settings: Settings) -> dict:
    return {
        "class": "logging.handlers.RotatingFileHandler",
        "formatter": "json",
        "level": "ERROR",
        "filename": str(Path(settings.LOG_DIR) / "errors.log"),
        "maxBytes": settings.LOG_MAX_BYTES,
        "backupCount": settings.LOG_BACKUP_COUNT,
        "encoding": "utf-8",
        "filters": list(_FILTERS),
    }

def get_error_console_handler(settings: Settings) -> dict:
    return {
        "class": "logging.StreamHandler",
        "formatter": "json",
        "level": "ERROR",
        "filters": list(_FILTERS),
    }
