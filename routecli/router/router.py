"""
Routing table for a command-line application.

The Router is built once at startup and passed to the Dispatcher. It holds
the command registry, the category tree, and the global and ignored flags.
Nothing here is a module-level singleton, so tests can build isolated
routers.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from .categories import Category, CategoryListing, CategoryTree
from .flags import GlobalFlag, GlobalFlagValues, strip_global_flags
from .matcher import Matcher
from .registry import CommandRegistry, HandlerDescriptor

if TYPE_CHECKING:
    from ..command.protocol import Command


class Router:
    """
    Registration API for commands, categories and global flags.

    Example:
        router = Router("Domain Manager")
        router.add_category("domain", "Domain Commands", "Manage domains")
        router.add("domain create", CreateDomain(), aliases=["dc"],
                   value_flags=["--ip-address"])
        router.global_flag("-q", "--quiet", False, "Suppress output")
    """

    def __init__(self, app_name: str = "", version_message: str = "") -> None:
        self.app_name = app_name
        self.version_message = version_message
        self.registry = CommandRegistry()
        self.categories = CategoryTree()
        self.matcher = Matcher(self.registry)
        self.global_flags: list[GlobalFlag] = []
        self.ignored_flags: dict[str, bool] = {}
        self.globals = GlobalFlagValues()

    def add(
        self,
        name: str | Sequence[str],
        handler: Command,
        aliases: Iterable[str] = (),
        value_flags: Iterable[str] = (),
    ) -> HandlerDescriptor:
        """Register a command; see CommandRegistry.register()."""
        return self.registry.register(name, aliases, value_flags, handler)

    def add_category(
        self,
        name: str,
        title: str = "",
        description: str = "",
        parent: str | None = None,
    ) -> Category:
        """Register a category; see CategoryTree.add_category()."""
        return self.categories.add_category(name, title, description, parent)

    def global_flag(
        self, short: str, long: str, is_value: bool = False, description: str = ""
    ) -> GlobalFlag:
        """
        Register a flag recognized at any position for every command.

        Args:
            short: Short spelling (e.g. "-c"), or "" for none
            long: Long spelling (e.g. "--config"), or "" for none
            is_value: Whether the flag consumes the following token
            description: Text shown in the help index
        """
        flag = GlobalFlag(short, long, is_value, description)
        self.global_flags.append(flag)
        return flag

    def ignore(self, flag: str, is_value: bool = False) -> None:
        """Drop a flag (and its value, if it takes one) before routing."""
        self.ignored_flags[flag] = is_value

    def strip_globals(self, tokens: Sequence[str]) -> list[str]:
        """Remove global and ignored flags, remembering the global values."""
        remaining, self.globals = strip_global_flags(
            tokens, self.global_flags, self.ignored_flags
        )
        return remaining

    def has_global(self, flag: str) -> bool:
        """Check whether a global flag was given in the current invocation."""
        return self.globals.has(flag)

    def get_global(self, flag: str) -> str | None:
        """Value of a value-bearing global flag in the current invocation."""
        return self.globals.get(flag)

    def lookup_exact(self, tokens: Sequence[str]) -> HandlerDescriptor | None:
        return self.registry.lookup_exact(tokens)

    def children_of(self, path: str | None = None) -> CategoryListing:
        """Immediate sub-categories and commands of a category, or the root."""
        return self.categories.children_of(self.registry, path)
