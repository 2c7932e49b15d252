"""
Command registration and exact lookup.

This module provides the ordered table mapping canonical command names and
aliases to handler descriptors, with longest-prefix lookup.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..constants import (
    HELP_KEYWORDS,
    MAX_ALIAS_COUNT,
    MAX_COMMAND_COUNT,
    MAX_COMMAND_NAME_LENGTH,
)
from ..log import TRACE
from .errors import CommandRegistrationError, DuplicateCommandError

if TYPE_CHECKING:
    from ..command.protocol import Command

lg = logging.getLogger(__name__)


def split_name(name: str | Sequence[str]) -> tuple[str, ...]:
    """Normalize a command name into lowercase word tokens."""
    if isinstance(name, str):
        parts: Iterable[str] = name.split()
    else:
        parts = (p for token in name for p in token.split())
    return tuple(p.lower() for p in parts)


def canonical(name: str | Sequence[str]) -> str:
    """Canonical string form of a command name."""
    return " ".join(split_name(name))


# Helper functions for CommandRegistry.register()


def _validate_name(name: str, tokens: tuple[str, ...]) -> None:
    """Validate a canonical command name or alias."""
    if not tokens:
        raise CommandRegistrationError(name, "Command must have a name")

    if len(" ".join(tokens)) > MAX_COMMAND_NAME_LENGTH:
        raise CommandRegistrationError(
            name,
            f"Command name exceeds maximum length of "
            f"{MAX_COMMAND_NAME_LENGTH} characters",
        )

    if tokens[0] in HELP_KEYWORDS:
        raise CommandRegistrationError(name, f"'{tokens[0]}' is reserved for help")

    for token in tokens:
        if token.startswith("-"):
            raise CommandRegistrationError(
                name, f"Name token '{token}' must not start with a dash"
            )


def _check_command_count_limit(commands: dict, name: str) -> None:
    """Check maximum command count limit."""
    if len(commands) >= MAX_COMMAND_COUNT:
        raise CommandRegistrationError(
            name,
            f"Cannot register command: maximum command count "
            f"({MAX_COMMAND_COUNT}) exceeded",
        )


def _collect_aliases(name: str, aliases: Iterable[str | Sequence[str]]) -> list[str]:
    """Normalize and validate an alias list, rejecting repeats within it."""
    result: list[str] = []
    for alias in aliases:
        tokens = split_name(alias)
        _validate_name(str(alias), tokens)
        key = " ".join(tokens)
        if key == name or key in result:
            raise DuplicateCommandError(key, name)
        result.append(key)

    if len(result) > MAX_ALIAS_COUNT:
        raise CommandRegistrationError(
            name,
            f"Command has {len(result)} aliases, "
            f"exceeding maximum of {MAX_ALIAS_COUNT}",
        )
    return result


@dataclass(frozen=True)
class HandlerDescriptor:
    """Registered command: handler plus its routing metadata."""

    name: str
    handler: Command
    aliases: tuple[str, ...] = ()
    value_flags: tuple[str, ...] = ()

    @property
    def tokens(self) -> tuple[str, ...]:
        """Canonical name split into word tokens."""
        return tuple(self.name.split(" "))

    @property
    def spellings(self) -> tuple[str, ...]:
        """Canonical name followed by every alias."""
        return (self.name, *self.aliases)


class CommandRegistry:
    """Ordered table of commands keyed by canonical name and alias."""

    def __init__(self) -> None:
        self._commands: dict[str, HandlerDescriptor] = {}
        self._aliases: dict[str, str] = {}
        self._max_words = 0

    def register(
        self,
        name: str | Sequence[str],
        aliases: Iterable[str | Sequence[str]] = (),
        value_flags: Iterable[str] = (),
        handler: Command | None = None,
    ) -> HandlerDescriptor:
        """
        Register a command with aliases and value flags.

        Registration is atomic: every name is checked before anything is
        inserted, so a failure leaves the registry unchanged.

        Args:
            name: Command name, as a space-separated string or token list
            aliases: Alternate names routing to the same handler
            value_flags: Flags (with dashes) that consume the following token
            handler: Command implementation

        Returns:
            The created HandlerDescriptor

        Raises:
            CommandRegistrationError: If a name is malformed or limits are exceeded
            DuplicateCommandError: If the name or an alias is already registered
        """
        tokens = split_name(name)
        display = name if isinstance(name, str) else " ".join(name)
        _validate_name(display, tokens)
        key = " ".join(tokens)
        _check_command_count_limit(self._commands, key)

        if handler is None:
            raise CommandRegistrationError(key, "Command must have a handler")

        alias_keys = _collect_aliases(key, aliases)
        for spelling in (key, *alias_keys):
            owner = self.owner_of(spelling)
            if owner is not None:
                raise DuplicateCommandError(spelling, owner)

        descriptor = HandlerDescriptor(
            name=key,
            handler=handler,
            aliases=tuple(alias_keys),
            value_flags=tuple(value_flags),
        )
        self._commands[key] = descriptor
        for alias in alias_keys:
            self._aliases[alias] = key

        self._max_words = max(
            self._max_words, *(len(s.split(" ")) for s in descriptor.spellings)
        )
        lg.debug("registered command %r aliases=%s", key, list(alias_keys))
        return descriptor

    def owner_of(self, spelling: str) -> str | None:
        """Canonical name that owns a name or alias, or None if free."""
        if spelling in self._commands:
            return spelling
        return self._aliases.get(spelling)

    def get(self, name: str) -> HandlerDescriptor | None:
        """Get a descriptor by canonical name only."""
        return self._commands.get(canonical(name))

    def resolve(self, name: str | Sequence[str]) -> HandlerDescriptor | None:
        """Get a descriptor by canonical name or alias."""
        owner = self.owner_of(canonical(name))
        return self._commands[owner] if owner is not None else None

    def lookup_prefix(
        self, tokens: Sequence[str]
    ) -> tuple[HandlerDescriptor, list[str]] | None:
        """
        Resolve the longest token prefix naming a command or alias.

        Args:
            tokens: Invocation tokens, command words first

        Returns:
            Tuple of (descriptor, tokens after the prefix), or None
        """
        words = [t.lower() for t in tokens[: self._max_words]]
        for length in range(len(words), 0, -1):
            lg.log(TRACE, "trying prefix %r", words[:length])
            descriptor = self.resolve(words[:length])
            if descriptor is not None:
                lg.debug("prefix %r resolved to %r", words[:length], descriptor.name)
                return descriptor, list(tokens[length:])
        return None

    def lookup_exact(self, tokens: Sequence[str]) -> HandlerDescriptor | None:
        """
        Resolve the descriptor named by the longest token prefix.

        Given "domain" and "domain create", ["domain", "create", "x"]
        resolves to "domain create".
        """
        found = self.lookup_prefix(tokens)
        return found[0] if found else None

    def names(self) -> list[str]:
        """List canonical names in registration order."""
        return list(self._commands.keys())

    def aliases(self) -> dict[str, str]:
        """Map every alias to its canonical name."""
        return self._aliases.copy()

    def is_registered(self, name: str) -> bool:
        """Check if a name or alias is registered."""
        return self.owner_of(canonical(name)) is not None

    def __iter__(self) -> Iterator[HandlerDescriptor]:
        return iter(self._commands.values())

    def __len__(self) -> int:
        return len(self._commands)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.is_registered(name)
