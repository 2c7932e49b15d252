"""
Fluent construction of an App.

Registration errors surface from build(), so a misconfigured program fails
before it handles any input.
"""

from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Any, Self

from ..command.protocol import Command
from ..config import Config
from ..ui.output import OutputWriter
from .app import App


class AppBuilder:
    """
    Chainable builder for routecli applications.

    Example:
        app = (AppBuilder("Domain Manager")
            .with_version("Domain Manager v1.0.0")
            .category("domain", "Domain Commands", "Manage domains")
            .command("domain create", CreateDomain(), aliases=["dc"],
                     value_flags=["--ip-address"])
            .global_flag("-q", "--quiet", description="Suppress output")
            .build())
        app.main()
    """

    def __init__(self, name: str = "") -> None:
        self._name = name
        self._version: str | None = None
        self._config: Config | None = None
        self._settings: dict[str, Any] = {}
        self._categories: list[tuple[str, str, str, str | None]] = []
        self._commands: list[
            tuple[str | Sequence[str], Command, tuple[str, ...], tuple[str, ...]]
        ] = []
        self._global_flags: list[tuple[str, str, bool, str]] = []
        self._ignored: list[tuple[str, bool]] = []
        self._out: OutputWriter | None = None
        self._err: OutputWriter | None = None

    def with_version(self, message: str) -> Self:
        """Message printed for -v / --version."""
        self._version = message
        return self

    def with_config(self, config: Config | str | Path) -> Self:
        """Use a Config, or load one from a YAML path."""
        self._config = config if isinstance(config, Config) else Config(config)
        return self

    def with_setting(self, path: str, value: Any) -> Self:
        """
        Override one dotted config key, e.g. with_setting("output.width", 100).
        """
        self._settings[path] = value
        return self

    def with_output(
        self, out: OutputWriter | None = None, err: OutputWriter | None = None
    ) -> Self:
        """Send help and error text to custom writers."""
        self._out = out
        self._err = err
        return self

    def category(
        self,
        name: str,
        title: str = "",
        description: str = "",
        parent: str | None = None,
    ) -> Self:
        self._categories.append((name, title, description, parent))
        return self

    def command(
        self,
        name: str | Sequence[str],
        handler: Command,
        aliases: Iterable[str] = (),
        value_flags: Iterable[str] = (),
    ) -> Self:
        self._commands.append((name, handler, tuple(aliases), tuple(value_flags)))
        return self

    def global_flag(
        self, short: str, long: str, is_value: bool = False, description: str = ""
    ) -> Self:
        self._global_flags.append((short, long, is_value, description))
        return self

    def ignore(self, flag: str, is_value: bool = False) -> Self:
        self._ignored.append((flag, is_value))
        return self

    def _apply_settings(self, config: Config) -> None:
        for path, value in self._settings.items():
            *parents, key = path.split(".")
            node = config
            for part in parents:
                if part not in node:
                    node[part] = {}
                node = node[part]
            node[key] = value

    def build(self) -> App:
        """
        Create the App and register everything collected so far.

        Raises:
            RegistrationError: A command or category could not be registered
            ConfigError: The configuration file could not be loaded
        """
        config = self._config if self._config is not None else Config()
        self._apply_settings(config)

        app = App(config, name=self._name or None, version=self._version)
        app.out = self._out
        app.err = self._err
        for cat_name, title, description, parent in self._categories:
            app.add_category(cat_name, title, description, parent)
        for name, handler, aliases, value_flags in self._commands:
            app.add(name, handler, aliases, value_flags)
        for short, long, is_value, description in self._global_flags:
            app.global_flag(short, long, is_value, description)
        for flag, is_value in self._ignored:
            app.ignore(flag, is_value)
        return app
