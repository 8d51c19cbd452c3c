# src/errorgate/core/logging/builder.py
"""
Logging builder: create and apply a dictConfig logging configuration and optionally
wire a background QueueListener so handler I/O happens off the request path.

 - make_dict_config(settings): the dictConfig mapping (formatters, filters, handlers, loggers)
 - setup_logging(settings): apply it; with LOG_USE_QUEUE, move the real handlers behind
   a QueueListener and leave only a QueueHandler on the root logger
 - stop_queue_logging(): flush and stop the listener at shutdown
 - get_queue_stats(): dropped-record diagnostics for the bounded, non-blocking mode

Queue knobs (read with getattr so duck-typed settings objects work in tests):
 - LOG_USE_QUEUE: bool
 - LOG_QUEUE_MAX_SIZE: int, 0 -> unbounded
 - LOG_QUEUE_BLOCKING: bool, only meaningful when bounded
 - LOG_QUEUE_DROP_WARNING_THRESHOLD: int, warn every N dropped records
"""

from __future__ import annotations

from pathlib import Path
import logging
import logging.config
import queue as _queue
import threading
from typing import Optional
from logging.handlers import QueueHandler, QueueListener

from errorgate.utils.logging import get_project_name
from .formatters import JsonFormatter, ColorFormatter
from .filters import RequestIdFilter, RedactFilter
from .handlers import (
    get_console_handler,
    get_file_handler,
    get_error_file_handler,
    get_error_console_handler,
)
from errorgate.config.settings import Settings

_QUEUE_LISTENER: Optional[QueueListener] = None
_QUEUE: Optional[_queue.Queue] = None

_DROPPED_LOGS_COUNT = 0
_DROPPED_LOGS_LOCK = threading.Lock()

# Drop warnings bypass the root logger: routing them through the full queue would drop them too.
_DROP_LOGGER = logging.getLogger("errorgate.logging.queue")
_DROP_LOGGER.propagate = False
if not _DROP_LOGGER.handlers:
    _DROP_LOGGER.addHandler(logging.StreamHandler())


class NonBlockingQueueHandler(QueueHandler):
    """
    QueueHandler that never blocks producers on a full bounded queue.

    A full queue drops the record and bumps a thread-safe counter; request handling
    carries on. Every `drop_warning_threshold` drops (0 disables it) a warning goes
    to a dedicated stderr logger.
    """

    def __init__(self, queue, drop_warning_threshold: int = 0):
        super().__init__(queue)
        self.drop_warning_threshold = drop_warning_threshold

    def emit(self, record: logging.LogRecord) -> None:
        global _DROPPED_LOGS_COUNT
        try:
            record = self.prepare(record)
            self.queue.put_nowait(record)
        except _queue.Full:
            with _DROPPED_LOGS_LOCK:
                _DROPPED_LOGS_COUNT += 1
                dropped = _DROPPED_LOGS_COUNT
            if self.drop_warning_threshold > 0 and dropped % self.drop_warning_threshold == 0:
                _DROP_LOGGER.warning("Dropped %d log records because queue was full", dropped)


def get_queue_stats() -> dict:
    """Return small diagnostics about queue usage (dropped logs count)."""
    with _DROPPED_LOGS_LOCK:
        return {"dropped_logs": _DROPPED_LOGS_COUNT, "queue_present": _QUEUE is not None}


def make_dict_config(settings: Settings) -> dict:
    """
    Build the dictConfig mapping using the provided settings.

    Console output is always on. File handlers replace the error console when
    LOG_TO_STDOUT is false and LOG_DIR is set.
    """
    formatters = {
        "standard": {
            # colors only in text mode; JSON mode keeps the plain formatter for "standard"
            "()": ColorFormatter if settings.LOG_FORMAT == "text" else logging.Formatter,
            "format": "%(asctime)s | %(levelname)s | %(name)s | %(request_id)s | %(message)s",
        },
        "json": {
            "()": JsonFormatter,
            "env": settings.ENV,
            "service": get_project_name(default="errorgate"),
        },
    }

    filters = {
        "request_id": {"()": RequestIdFilter},
        "redact": {"()": RedactFilter},
    }

    handlers: dict[str, dict] = {"console": get_console_handler(settings)}

    if (not settings.LOG_TO_STDOUT) and (settings.LOG_DIR):
        handlers["file"] = get_file_handler(settings)
        handlers["error_file"] = get_error_file_handler(settings)
    else:
        handlers["error_console"] = get_error_console_handler(settings)

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": formatters,
        "filters": filters,
        "handlers": handlers,
        "loggers": {
            "": {
                "handlers": list(handlers.keys()),
                "level": settings.LOG_LEVEL,
                "propagate": True,
            },
            "uvicorn.error": {
                "level": settings.LOG_LEVEL,
                "handlers": list(handlers.keys()),
                "propagate": False,
            },
            "uvicorn.access": {
                "level": "INFO",
                "handlers": ["console"],
                "propagate": False,
            },
        },
    }


def setup_logging(settings: Settings) -> None:
    """
    Initialize logging using settings and optionally switch to queue-backed logging.

    Steps:
      1. Ensure LOG_DIR exists when writing files.
      2. Apply dictConfig(make_dict_config(settings)).
      3. Add a RequestIdFilter on the root logger so %(request_id)s never KeyErrors.
      4. With LOG_USE_QUEUE: detach the real handlers, run them in a QueueListener and
         attach a (NonBlocking)QueueHandler to the root. Producer-side filters go on the
         QueueHandler so contextvars and redaction run in the request's context.
    """
    global _QUEUE_LISTENER, _QUEUE

    # a previous queue listener would keep writing with stale handlers
    stop_queue_logging()

    if (not settings.LOG_TO_STDOUT) and (settings.LOG_DIR):
        Path(settings.LOG_DIR).mkdir(parents=True, exist_ok=True)

    logging.config.dictConfig(make_dict_config(settings))
    logging.getLogger().addFilter(RequestIdFilter())

    if not getattr(settings, "LOG_USE_QUEUE", False):
        return

    max_size = getattr(settings, "LOG_QUEUE_MAX_SIZE", 0) or 0
    blocking = bool(getattr(settings, "LOG_QUEUE_BLOCKING", False))
    drop_warn_threshold = int(getattr(settings, "LOG_QUEUE_DROP_WARNING_THRESHOLD", 100))

    root_logger = logging.getLogger()
    current_handlers = list(root_logger.handlers)
    if not current_handlers:
        return

    # Remove the real handler instances from every logger so they only run in the listener.
    handlers_to_move = set(current_handlers)
    for logger_obj in list(logging.Logger.manager.loggerDict.values()):
        if isinstance(logger_obj, logging.Logger):
            for h in list(logger_obj.handlers):
                if h in handlers_to_move:
                    logger_obj.removeHandler(h)
    for h in list(root_logger.handlers):
        if h in handlers_to_move:
            root_logger.removeHandler(h)

    log_queue: _queue.Queue = _queue.Queue(max_size) if max_size > 0 else _queue.Queue()

    listener = QueueListener(log_queue, *current_handlers, respect_handler_level=True)
    listener.start()

    qh: QueueHandler
    if max_size > 0 and not blocking:
        qh = NonBlockingQueueHandler(log_queue, drop_warning_threshold=drop_warn_threshold)
    else:
        qh = QueueHandler(log_queue)
    qh.addFilter(RequestIdFilter())
    qh.addFilter(RedactFilter())
    root_logger.addHandler(qh)

    _QUEUE_LISTENER = listener
    _QUEUE = log_queue
