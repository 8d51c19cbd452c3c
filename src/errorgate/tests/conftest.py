"""
Core pytest configuration for the test suite.

Only session-wide setup lives here (logging). Domain fixtures (settings, handlers,
translator, FastAPI app/client) are in tests/test_fixtures/error_fixtures.py and are
imported at the bottom so every test module can use them without imports.
"""

from __future__ import annotations

import logging

# Quiet noisy third-party loggers before anything else configures them.
NOISY_LOGGERS = (
    "asyncio",
    "httpx",
    "httpcore",
)
for _name in NOISY_LOGGERS:
    logging.getLogger(_name).setLevel(logging.WARNING)

import pytest

from errorgate.core.logging.builder import setup_logging, stop_queue_logging
from .test_fixtures.error_fixtures import make_test_settings


@pytest.fixture(scope="session", autouse=True)
def configure_logging():
    """
    Install application logging for the whole session.

    Uses text output on stderr (no files). Tests asserting on log records use
    `caplog`, whose handler pytest attaches per test phase, after this runs.
    """
    setup_logging(make_test_settings())
    yield
    stop_queue_logging()


from .test_fixtures.error_fixtures import (  # noqa: E402
    app_settings,
    fixed_clock,
    registry,
    api_handler,
    view_handler,
    translator,
    app,
    client,
)
