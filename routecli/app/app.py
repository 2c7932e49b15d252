"""
Application facade.

App ties configuration, logging, the routing table and the dispatcher
together. A program registers its commands on an App and hands control to
main(), which exits the process with the dispatch exit code.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable, Sequence
from typing import Any

from ..command.protocol import Command
from ..config import Config
from ..constants import DEFAULT_WIDTH
from ..help.renderer import HelpRenderer
from ..log import LoggingBuilder
from ..router.categories import Category
from ..router.dispatcher import Dispatcher, Outcome
from ..router.flags import GlobalFlag
from ..router.registry import HandlerDescriptor
from ..router.router import Router
from ..ui.console import should_use_color
from ..ui.output import OutputWriter

# Exit code after Ctrl-C (128 + SIGINT)
EXIT_INTERRUPTED = 130


def _output_width(value: Any) -> int:
    """Configured help width, or DEFAULT_WIDTH when unset or not a number."""
    try:
        width = int(value)
    except (TypeError, ValueError):
        return DEFAULT_WIDTH
    return width if width > 0 else DEFAULT_WIDTH


class App:
    """
    Command-line application built on a Router.

    Example:
        app = App(name="Domain Manager", version="Domain Manager v1.0.0")
        app.add_category("domain", "Domain Commands")
        app.add("domain create", CreateDomain(), aliases=["dc"])
        app.main()
    """

    def __init__(
        self,
        config: Config | None = None,
        name: str | None = None,
        version: str | None = None,
    ) -> None:
        """
        Initialize the application.

        Args:
            config: Settings (defaults plus ROUTECLI_* overrides when None)
            name: Program name; overrides app.name from config
            version: Version message; overrides app.version from config
        """
        self.config = config if config is not None else Config()
        self.name = name if name is not None else self.config.get("app.name", "")
        version_message = (
            version if version is not None else self.config.get("app.version", "")
        )
        self.router = Router(self.name or "", version_message or "")
        self.out: OutputWriter | None = None
        self.err: OutputWriter | None = None
        self.lg: logging.Logger | None = None
        self.last_outcome: Outcome | None = None

    def add(
        self,
        name: str | Sequence[str],
        handler: Command,
        aliases: Iterable[str] = (),
        value_flags: Iterable[str] = (),
    ) -> HandlerDescriptor:
        return self.router.add(name, handler, aliases, value_flags)

    def add_category(
        self,
        name: str,
        title: str = "",
        description: str = "",
        parent: str | None = None,
    ) -> Category:
        return self.router.add_category(name, title, description, parent)

    def global_flag(
        self, short: str, long: str, is_value: bool = False, description: str = ""
    ) -> GlobalFlag:
        return self.router.global_flag(short, long, is_value, description)

    def ignore(self, flag: str, is_value: bool = False) -> None:
        self.router.ignore(flag, is_value)

    def has_global(self, flag: str) -> bool:
        """Whether a global flag was given in the last run."""
        return self.router.has_global(flag)

    def get_global(self, flag: str) -> str | None:
        """Value of a global flag in the last run."""
        return self.router.get_global(flag)

    def setup_logging(self) -> logging.Logger:
        """Configure the routecli logger hierarchy from the logging section."""
        self.lg = (
            LoggingBuilder("routecli")
            .with_level(self.config.get("logging.level", "warning"))
            .with_colors(bool(self.config.get("logging.colors", True)))
            .build()
        )
        return self.lg

    def create_renderer(self) -> HelpRenderer:
        color = self.config.get("output.color")
        if color is None:
            color = should_use_color(sys.stdout)
        return HelpRenderer(
            self.router.app_name,
            width=_output_width(self.config.get("output.width")),
            color=bool(color),
        )

    def create_dispatcher(self) -> Dispatcher:
        return Dispatcher(
            self.router,
            renderer=self.create_renderer(),
            out=self.out,
            err=self.err,
            confirm_typos=bool(self.config.get("dispatch.confirm_typos", False)),
        )

    def run(self, argv: Sequence[str] | None = None) -> int:
        """
        Dispatch one invocation.

        Args:
            argv: Arguments without the program name (sys.argv[1:] when None)

        Returns:
            Exit code
        """
        if self.lg is None:
            self.setup_logging()
        argv = list(sys.argv[1:] if argv is None else argv)
        self.last_outcome = self.create_dispatcher().dispatch(argv)
        return self.last_outcome.exit_code

    def main(self, argv: Sequence[str] | None = None) -> None:
        """Run and exit the process with the resulting code."""
        try:
            code = self.run(argv)
        except KeyboardInterrupt:
            if self.lg is not None:
                self.lg.info("... interrupted by user")
            code = EXIT_INTERRUPTED
        sys.exit(code)
