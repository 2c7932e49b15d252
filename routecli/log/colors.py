"""
ANSI colors for log levels.
"""

import logging

from .constants import LogConstants


class ColorManager:
    """Maps log levels to ANSI color sequences."""

    RED = "\x1b[31"
    GREEN = "\x1b[32"
    YELLOW = "\x1b[33"
    BLUE = "\x1b[34"
    MAGENTA = "\x1b[35"
    CYAN = "\x1b[36"
    DEFAULT = "\x1b[38"

    RESET = LogConstants.RESET

    COLORS: dict[int, str] = {
        LogConstants.TRACE: "\x1b[38;5;24",
        logging.DEBUG: "\x1b[38;5;32",
        logging.INFO: CYAN,
        logging.WARNING: YELLOW,
        logging.ERROR: RED,
        logging.CRITICAL: MAGENTA,
    }

    @staticmethod
    def get_color_for_level(level: int) -> str:
        """
        Get the color sequence for a level.

        Levels between the named ones take the color of the closest named
        level below them.

        Returns:
            Unterminated escape sequence (append "m" or ";1m")
        """
        known = [lvl for lvl in ColorManager.COLORS if lvl <= level]
        if not known:
            return ColorManager.DEFAULT
        return ColorManager.COLORS[max(known)]

    @staticmethod
    def create_gray_level(level: int) -> str:
        """Gray from the 24-step 256-color ramp, clamped to 0-23."""
        level = max(0, min(level, 23))
        return f"\x1b[38;5;{232 + level}"

    @staticmethod
    def create_bold_color(base_color: str) -> str:
        return f"{base_color};1m"
