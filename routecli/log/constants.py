"""
Constants for routecli logging.
"""

import logging


class LogConstants:
    """Constants for the logging system."""

    DEFAULT_FORMAT: str = "[%(asctime)s] [%(levelname).1s] %(message)s"
    NAME_SUFFIX: str = " [%(name)s]"

    DEFAULT_LEVEL: str = "warning"

    # Finer than DEBUG; every prefix tried during command lookup
    TRACE: int = 5

    LEVEL_NAMES: dict[str, int] = {
        "critical": logging.CRITICAL,
        "error": logging.ERROR,
        "warning": logging.WARNING,
        "info": logging.INFO,
        "debug": logging.DEBUG,
        "trace": 5,
    }

    RESET: str = "\x1b[0m"
