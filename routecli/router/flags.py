"""
Flag extraction for routed invocations.

Splits raw tokens into positional arguments, boolean flags and value flags.
Global flags and ignored flags are stripped from the stream before the
per-command extraction runs.

Policies:
    - A value flag repeated on the command line keeps its last value.
    - A value flag with no following token is recorded with value None.
    - Value-flag names are matched exactly, dashes included.
    - A single-dash bundle such as "-fv" expands to "-f" and "-v" unless it
      is a declared value flag.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field


def is_flag(token: str) -> bool:
    """Check whether a token is spelled like a flag (one or two leading dashes)."""
    return token.startswith("-") and token not in ("-", "--")


@dataclass
class ParsedInvocation:
    """Result of flag extraction for a single invocation."""

    args: list[str] = field(default_factory=list)
    flags: set[str] = field(default_factory=set)
    value_flags: dict[str, str | None] = field(default_factory=dict)

    def has_flag(self, flag: str) -> bool:
        """Check if a flag was given, either as a boolean or a value flag."""
        return flag in self.flags or flag in self.value_flags

    def get_flag(self, flag: str) -> str | None:
        """Get the value supplied for a value flag."""
        return self.value_flags.get(flag)


def extract_flags(
    tokens: Sequence[str], value_flag_names: Iterable[str] = ()
) -> ParsedInvocation:
    """
    Classify tokens into positionals, boolean flags and value flags.

    Args:
        tokens: Raw tokens following the command name
        value_flag_names: Flags (with dashes) that consume the next token

    Returns:
        ParsedInvocation with positional order preserved

    Example:
        >>> inv = extract_flags(["x", "--ip", "1.2.3.4", "-n"], ["--ip"])
        >>> inv.args, sorted(inv.flags), inv.value_flags
        (['x'], ['-n'], {'--ip': '1.2.3.4'})
    """
    declared = frozenset(value_flag_names)
    result = ParsedInvocation()

    pending: str | None = None
    for token in tokens:
        if pending is not None:
            result.value_flags[pending] = token
            pending = None
        elif token in declared:
            pending = token
        elif is_flag(token) and not token.startswith("--"):
            result.flags.update(f"-{c}" for c in token[1:])
        elif is_flag(token):
            result.flags.add(token)
        else:
            result.args.append(token)

    if pending is not None:
        result.value_flags[pending] = None

    return result


@dataclass(frozen=True)
class GlobalFlag:
    """A flag recognized at any position for every command."""

    short: str
    long: str
    is_value: bool = False
    description: str = ""

    @property
    def spellings(self) -> tuple[str, ...]:
        """Non-empty spellings of this flag."""
        return tuple(s for s in (self.short, self.long) if s)

    @property
    def label(self) -> str:
        """Display label used in help listings."""
        return ", ".join(self.spellings)


class GlobalFlagValues:
    """Global flags found in an invocation, keyed by every spelling."""

    def __init__(self) -> None:
        self._present: set[GlobalFlag] = set()
        self._values: dict[GlobalFlag, str | None] = {}
        self._by_spelling: dict[str, GlobalFlag] = {}

    def record(self, flag: GlobalFlag, value: str | None = None) -> None:
        """Record that a global flag was seen, with its value when it takes one."""
        self._present.add(flag)
        for spelling in flag.spellings:
            self._by_spelling[spelling] = flag
        if flag.is_value:
            self._values[flag] = value

    def has(self, spelling: str) -> bool:
        """Check whether the flag with this spelling was given."""
        return spelling in self._by_spelling

    def get(self, spelling: str) -> str | None:
        """Get the value of a value-bearing global flag."""
        flag = self._by_spelling.get(spelling)
        if flag is None:
            return None
        return self._values.get(flag)

    def __len__(self) -> int:
        return len(self._present)


def strip_global_flags(
    tokens: Sequence[str],
    global_flags: Sequence[GlobalFlag],
    ignored: Mapping[str, bool] | None = None,
) -> tuple[list[str], GlobalFlagValues]:
    """
    Remove global and ignored flags from a token stream.

    Args:
        tokens: Raw invocation tokens
        global_flags: Registered global flags
        ignored: Flags to drop silently, mapped to whether they take a value

    Returns:
        Tuple of (remaining tokens, global flag values)
    """
    ignored = ignored or {}
    by_spelling = {s: flag for flag in global_flags for s in flag.spellings}
    values = GlobalFlagValues()
    remaining: list[str] = []

    it = iter(tokens)
    for token in it:
        flag = by_spelling.get(token)
        if flag is not None:
            value = next(it, None) if flag.is_value else None
            values.record(flag, value)
        elif token in ignored:
            if ignored[token]:
                next(it, None)
        else:
            remaining.append(token)

    return remaining, values
