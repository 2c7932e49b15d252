"""
Fluent logger configuration.

Builds a stdlib logger with a single stream handler using LogFormatter.
Building again with the same name replaces the handler rather than adding
a second one.
"""

import logging
import sys
from typing import Any, Self, TextIO

from .constants import LogConstants
from .exceptions import InvalidLogLevelError
from .formatters import LogFormatter


def resolve_level(level: str | int) -> int:
    """
    Resolve a level name ("debug", "TRACE", ...) or number to a number.

    Raises:
        InvalidLogLevelError: Unknown name, negative number, or other type
    """
    if isinstance(level, bool):
        raise InvalidLogLevelError(level)
    if isinstance(level, int):
        if level < 0:
            raise InvalidLogLevelError(level)
        return level
    if isinstance(level, str):
        name = level.strip().lower()
        if name in LogConstants.LEVEL_NAMES:
            return LogConstants.LEVEL_NAMES[name]
        if name.isdigit():
            return int(name)
    raise InvalidLogLevelError(level)


class LoggingBuilder:
    """
    Chainable builder for routecli loggers.

    Example:
        lg = (LoggingBuilder("routecli")
            .with_level("debug")
            .with_colors(False)
            .with_stream(sys.stderr)
            .build())
    """

    def __init__(self, name: str) -> None:
        """
        Initialize the builder.

        Args:
            name: Logger name; child loggers ("name.sub") inherit the handler
        """
        self._name = name
        self._level: str | int = LogConstants.DEFAULT_LEVEL
        self._colors = True
        self._micros = False
        self._stream: TextIO | None = None

    def with_level(self, level: str | int) -> Self:
        self._level = level
        return self

    def with_colors(self, enabled: bool = True) -> Self:
        self._colors = enabled
        return self

    def with_micros(self, micros: bool = True) -> Self:
        self._micros = micros
        return self

    def with_stream(self, stream: TextIO) -> Self:
        """Write records to a stream instead of stderr."""
        self._stream = stream
        return self

    def with_config(self, config: dict[str, Any]) -> Self:
        """
        Apply several settings from a mapping.

        Recognized keys: level, colors, micros.
        """
        if "level" in config:
            self._level = config["level"]
        if "colors" in config:
            self._colors = bool(config["colors"])
        if "micros" in config:
            self._micros = bool(config["micros"])
        return self

    def build(self) -> logging.Logger:
        """
        Create or reconfigure the logger.

        Raises:
            InvalidLogLevelError: The configured level is not recognized
        """
        level = resolve_level(self._level)
        logger = logging.getLogger(self._name)
        for handler in list(logger.handlers):
            if getattr(handler, "_routecli", False):
                logger.removeHandler(handler)

        handler = logging.StreamHandler(self._stream or sys.stderr)
        handler.setFormatter(LogFormatter(colors=self._colors, micros=self._micros))
        handler._routecli = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
        logger.setLevel(level)
        logger.propagate = False
        return logger
