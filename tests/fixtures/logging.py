"""
Logging fixtures for testing.

Provides fixtures for log capturing and resetting logger state.
"""

import logging
from collections.abc import Generator
from io import StringIO

import pytest


@pytest.fixture(autouse=True)
def reset_logging_state() -> Generator[None, None, None]:
    """
    Reset Python logging global state after each test.

    LoggingBuilder attaches a handler to the "routecli" logger and turns
    propagation off; both are undone here so tests do not leak into each other.
    """
    original_handlers = logging.root.handlers[:]
    original_level = logging.root.level

    yield

    for name in list(logging.root.manager.loggerDict.keys()):
        if name.split(".")[0] == "routecli" or name.startswith("test"):
            logger = logging.getLogger(name)
            for handler in list(logger.handlers):
                logger.removeHandler(handler)
            logger.setLevel(logging.NOTSET)
            logger.propagate = True

    logging.root.handlers = original_handlers
    logging.root.setLevel(original_level)


@pytest.fixture
def capture_logs() -> Generator[StringIO, None, None]:
    """
    Capture records from the routecli logger hierarchy.

    Yields:
        StringIO: Stream receiving "LEVEL:name:message" lines
    """
    log_stream = StringIO()
    handler = logging.StreamHandler(log_stream)
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter("%(levelname)s:%(name)s:%(message)s"))

    logger = logging.getLogger("routecli")
    original_level = logger.level
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)

    yield log_stream

    logger.removeHandler(handler)
    logger.setLevel(original_level)
    handler.close()
