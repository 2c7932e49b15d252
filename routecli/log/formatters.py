"""
Log record formatting.

Records render as "[time] [L] message [logger]", where L is the first
letter of the level name. With colors enabled the level tag and message
take the level's color and the logger name is dimmed.
"""

import logging

from .colors import ColorManager
from .constants import LogConstants


class LogFormatter(logging.Formatter):
    """
    Formatter with optional ANSI colors and microsecond timestamps.

    Example:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(LogFormatter(colors=True))
    """

    def __init__(self, colors: bool = False, micros: bool = False) -> None:
        """
        Initialize the formatter.

        Args:
            colors: Wrap fields in ANSI color sequences
            micros: Append microseconds to the timestamp
        """
        super().__init__(LogConstants.DEFAULT_FORMAT + LogConstants.NAME_SUFFIX)
        self.colors = colors
        self.micros = micros

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        s = super().formatTime(record, datefmt)
        if self.micros:
            # default format already carries milliseconds
            micros = int((record.created % 1) * 1_000_000) % 1000
            s += f".{micros:03d}"
        return s

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        if not self.colors:
            return line
        return self._colorize(record, line)

    def _colorize(self, record: logging.LogRecord, line: str) -> str:
        col = ColorManager.get_color_for_level(record.levelno)
        bold = ColorManager.create_bold_color(col)
        gray = ColorManager.create_gray_level(9) + "m"
        reset = ColorManager.RESET

        stamp = f"[{self.formatTime(record)}]"
        tag = f"[{record.levelname[:1]}]"
        suffix = f" [{record.name}]"

        # Only the first line (the message head) is colored; tracebacks stay plain
        head, sep, tail = line.partition("\n")
        if head.startswith(stamp + " " + tag + " ") and head.endswith(suffix):
            message = head[len(stamp) + len(tag) + 2 : -len(suffix)]
            head = (
                f"{col}m{stamp} {bold}{tag}{reset} {bold}{message}{reset}"
                f"{gray}{suffix}{reset}"
            )
        return head + sep + tail
