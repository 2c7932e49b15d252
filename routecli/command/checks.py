"""
Validation helpers for command handlers.

Handlers call these at the top of process() to turn bad input into the
user-facing errors the dispatcher knows how to report.

Example:
    def process(self, args, flags, value_flags):
        require_params(args, 2)
        validate_params(args, [FILE, IntegerRange(1, 100)])
        require_flag("--output", flags, value_flags)
"""

from __future__ import annotations

import os
from collections.abc import Collection, Mapping, Sequence
from dataclasses import dataclass
from urllib.parse import urlparse

from ..router.errors import (
    InvalidParamError,
    MissingRequiredFlagError,
    MissingRequiredParamError,
)

_TRUE_FALSE = ("true", "false", "1", "0", "yes", "no")


class Format:
    """Base validator; accepts any value."""

    def check(self, value: str) -> str | None:
        """Return an error description, or None when the value is valid."""
        return None


class _Integer(Format):
    def check(self, value: str) -> str | None:
        try:
            int(value)
        except ValueError:
            return f"Expected integer, got '{value}'"
        return None


class _Decimal(Format):
    def check(self, value: str) -> str | None:
        try:
            float(value)
        except ValueError:
            return f"Expected decimal number, got '{value}'"
        return None


class _Boolean(Format):
    def check(self, value: str) -> str | None:
        if value.lower() not in _TRUE_FALSE:
            return f"Expected boolean (true/false/yes/no/1/0), got '{value}'"
        return None


class _Email(Format):
    def check(self, value: str) -> str | None:
        local, _, domain = value.partition("@")
        if not local or "." not in domain:
            return f"Expected valid email, got '{value}'"
        return None


class _Url(Format):
    def check(self, value: str) -> str | None:
        parsed = urlparse(value)
        if not parsed.scheme or not (parsed.netloc or parsed.path):
            return f"Expected valid URL, got '{value}'"
        return None


class _File(Format):
    def check(self, value: str) -> str | None:
        if not os.path.isfile(value):
            return f"File does not exist, '{value}'"
        return None


class _Directory(Format):
    def check(self, value: str) -> str | None:
        if not os.path.isdir(value):
            return f"Directory does not exist, '{value}'"
        return None


@dataclass(frozen=True)
class StringRange(Format):
    """String length within [start, end)."""

    start: int
    end: int

    def check(self, value: str) -> str | None:
        if not self.start <= len(value) < self.end:
            return (
                f"String length must be between {self.start} and {self.end}, "
                f"got length {len(value)}"
            )
        return None


@dataclass(frozen=True)
class IntegerRange(Format):
    """Integer within [start, end)."""

    start: int
    end: int

    def check(self, value: str) -> str | None:
        try:
            number = int(value)
        except ValueError:
            return f"Expected integer, got '{value}'"
        if not self.start <= number < self.end:
            return f"Integer must be between {self.start} and {self.end}, got {number}"
        return None


@dataclass(frozen=True)
class DecimalRange(Format):
    """Decimal within [start, end)."""

    start: float
    end: float

    def check(self, value: str) -> str | None:
        try:
            number = float(value)
        except ValueError:
            return f"Expected decimal, got '{value}'"
        if not self.start <= number < self.end:
            return f"Decimal must be between {self.start} and {self.end}, got {number}"
        return None


class OneOf(Format):
    """Value must be one of the given options."""

    def __init__(self, *options: str) -> None:
        self.options = tuple(options)

    def check(self, value: str) -> str | None:
        if value not in self.options:
            return f"Expected one of ({' / '.join(self.options)}), got '{value}'"
        return None


ANY = Format()
INTEGER = _Integer()
DECIMAL = _Decimal()
BOOLEAN = _Boolean()
EMAIL = _Email()
URL = _Url()
FILE = _File()
DIRECTORY = _Directory()


def require_params(args: Sequence[str], count: int) -> None:
    """
    Ensure at least count positional arguments were given.

    Raises:
        MissingRequiredParamError: If fewer were given
    """
    if len(args) < count:
        raise MissingRequiredParamError(count, len(args))


def require_flag(
    flag: str,
    flags: Collection[str],
    value_flags: Mapping[str, str | None] | None = None,
) -> None:
    """
    Ensure a flag was given.

    A value flag recorded without a value (it was the last token) counts
    as missing.

    Raises:
        MissingRequiredFlagError: If the flag is absent
    """
    value_flags = value_flags or {}
    if flag in flags:
        return
    if value_flags.get(flag) is None:
        raise MissingRequiredFlagError(flag)


def validate_params(args: Sequence[str], formats: Sequence[Format]) -> None:
    """
    Validate positional arguments against formats, one per position.

    Raises:
        InvalidParamError: For the first missing or invalid argument
    """
    for pos, fmt in enumerate(formats):
        if pos >= len(args):
            raise InvalidParamError(pos, f"Expected parameter at position {pos}")
        error = fmt.check(args[pos])
        if error:
            raise InvalidParamError(pos, error)


def validate_flag(
    flag: str, value_flags: Mapping[str, str | None], fmt: Format
) -> str:
    """
    Validate a value flag and return its value.

    Raises:
        MissingRequiredFlagError: If the flag has no value
        InvalidParamError: If the value fails validation
    """
    value = value_flags.get(flag)
    if value is None:
        raise MissingRequiredFlagError(flag)
    error = fmt.check(value)
    if error:
        raise InvalidParamError(flag, error)
    return value
