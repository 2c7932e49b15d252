"""
Progress display for long-running commands.

A spinner when the amount of work is unknown, a bar once a total is set.
Log records written through the progress object pause the display so lines
do not interleave. Outside a terminal nothing is drawn and only the
counters and log records remain.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any

from rich.console import Console as RichConsole
from rich.progress import (
    BarColumn,
    SpinnerColumn,
    TaskID,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.progress import Progress as RichProgress
from rich.status import Status


def _is_interactive() -> bool:
    if os.environ.get("ROUTECLI_NON_INTERACTIVE", "").lower() in ("1", "true", "yes"):
        return False
    return sys.stdout.isatty()


class Progress:
    """
    Spinner or progress bar as a context manager.

    Example:
        with Progress(lg, "Importing zone files...") as progress:
            files = scan()
            progress.set_total(len(files))
            for path in files:
                load(path)
                progress.update()
    """

    def __init__(
        self,
        logger: logging.Logger,
        message: str = "Working...",
        total: int | None = None,
        spinner: str = "dots",
        console: RichConsole | None = None,
    ) -> None:
        """
        Initialize the progress display.

        Args:
            logger: Logger used by log()
            message: Text shown next to the spinner or bar
            total: Amount of work for bar mode (None starts as a spinner)
            spinner: rich spinner name
            console: Console to draw on (a stdout console by default)
        """
        self._logger = logger
        self._message = message
        self._total = total
        self._spinner = spinner
        self._completed = 0
        self._interactive = console is not None or _is_interactive()
        self._console = console
        self._status: Status | None = None
        self._bar: RichProgress | None = None
        self._task: TaskID | None = None

    def __enter__(self) -> Progress:
        if self._interactive:
            if self._console is None:
                self._console = RichConsole(file=sys.stdout)
            if self._total is None:
                self._status = self._console.status(
                    self._message, spinner=self._spinner
                )
                self._status.start()
            else:
                self._start_bar()
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        if self._status:
            self._status.stop()
            self._status = None
        if self._bar:
            self._bar.stop()
            self._bar = None
        self._task = None

    def _start_bar(self) -> None:
        self._bar = RichProgress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(bar_width=40),
            TaskProgressColumn(),
            TimeElapsedColumn(),
            console=self._console,
            transient=True,
        )
        self._bar.start()
        self._task = self._bar.add_task(
            self._message, total=self._total, completed=self._completed
        )

    def log(self, msg: str, level: int = logging.INFO, *args: Any) -> None:
        """Log a record with the display paused."""
        live = self._status or self._bar
        if live:
            live.stop()
        self._logger.log(level, msg, *args)
        if live:
            live.start()

    def update(
        self, message: str | None = None, advance: int = 1, completed: int | None = None
    ) -> None:
        """
        Advance the counter and optionally change the message.

        Args:
            message: New text to show
            advance: Units of work done since the last update
            completed: Absolute completion, overriding advance
        """
        if message:
            self._message = message
        if completed is None:
            completed = self._completed + advance
        self._completed = completed

        if self._bar and self._task is not None:
            fields: dict[str, Any] = {"completed": self._completed}
            if message:
                fields["description"] = message
            self._bar.update(self._task, **fields)
        elif self._status and message:
            self._status.update(message)

    def set_total(self, total: int) -> None:
        """Switch a spinner to a bar with the given total."""
        self._total = total
        if self._status is None and self._bar is None:
            return
        if self._status:
            self._status.stop()
            self._status = None
        if self._bar and self._task is not None:
            self._bar.update(self._task, total=total)
        else:
            self._start_bar()

    @property
    def is_interactive(self) -> bool:
        return self._interactive

    @property
    def total(self) -> int | None:
        return self._total

    @property
    def completed(self) -> int:
        return self._completed
