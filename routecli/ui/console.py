"""
Console wrapper for command handlers.

Handlers print their results through this console instead of calling print()
directly, so quiet mode and color detection apply uniformly. Color follows
NO_COLOR / FORCE_COLOR, then whether the stream is a terminal.
"""

from __future__ import annotations

import os
import sys
from typing import Any, TextIO

from rich.console import Console as RichConsole
from rich.status import Status
from rich.theme import Theme

ROUTECLI_THEME = {
    "info": "cyan",
    "warning": "yellow",
    "error": "red bold",
    "success": "green",
    "muted": "dim",
    "highlight": "bold magenta",
    "key": "bold blue",
    "value": "white",
}


def is_terminal(stream: TextIO | None = None) -> bool:
    """Check whether a stream (stdout by default) is attached to a terminal."""
    stream = stream or sys.stdout
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def should_use_color(stream: TextIO | None = None) -> bool:
    """Decide whether output to a stream should be colored."""
    # https://no-color.org/
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("FORCE_COLOR"):
        return True
    return is_terminal(stream)


class Console:
    """
    Themed console with quiet mode.

    Example:
        console = Console()
        console.print_success("Domain example.com created")
        console.print_error("Domain already exists")
    """

    def __init__(
        self,
        *,
        color: bool | None = None,
        quiet: bool = False,
        file: TextIO | None = None,
        width: int | None = None,
    ) -> None:
        """
        Initialize the console.

        Args:
            color: Force color on/off, or auto-detect (None)
            quiet: Suppress info and success messages
            file: Output stream (default: sys.stdout)
            width: Fixed width, or the terminal width (None)
        """
        self._quiet = quiet
        self._file = file
        if color is None:
            color = should_use_color(file)
        self._color = color
        self._rich = RichConsole(
            file=file,
            width=width,
            theme=Theme(ROUTECLI_THEME),
            color_system="auto" if color else None,
            force_terminal=color or None,
            no_color=not color,
            highlight=False,
        )

    @property
    def rich(self) -> RichConsole:
        """Underlying rich console, for tables and other renderables."""
        return self._rich

    @property
    def color(self) -> bool:
        return self._color

    @property
    def quiet(self) -> bool:
        return self._quiet

    def print(self, *args: Any, **kwargs: Any) -> None:
        """Print objects, rich markup included; silent in quiet mode."""
        if self._quiet:
            return
        self._rich.print(*args, **kwargs)

    def print_info(self, message: str) -> None:
        self.print(f"[info]{message}[/info]")

    def print_success(self, message: str) -> None:
        self.print(f"[success]{message}[/success]")

    def print_warning(self, message: str) -> None:
        """Print a warning; shown even in quiet mode."""
        self._rich.print(f"[warning]Warning:[/warning] {message}")

    def print_error(self, message: str) -> None:
        """Print an error; shown even in quiet mode."""
        self._rich.print(f"[error]Error:[/error] {message}")

    def rule(self, title: str = "") -> None:
        if self._quiet:
            return
        self._rich.rule(title)

    def status(self, message: str, *, spinner: str = "dots") -> Status:
        """
        Spinner shown while a block runs.

        Example:
            with console.status("Provisioning..."):
                provision()
        """
        return self._rich.status(message, spinner=spinner)


_console: Console | None = None


def get_console() -> Console:
    """Get or create the shared console."""
    global _console
    if _console is None:
        _console = Console()
    return _console


def reset_console() -> None:
    """Drop the shared console so the next get_console() re-detects color."""
    global _console
    _console = None
