"""
Logging errors.
"""

from typing import Any

from ..exceptions import LoggingError


class InvalidLogLevelError(LoggingError):
    """Raised when a log level name or number is not recognized."""

    def __init__(self, level: Any) -> None:
        self.level = level
        super().__init__(f"Invalid log level: {level}", level=level)
