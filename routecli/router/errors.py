"""
Error classes for the routecli.router package.

Registration errors are fatal and abort startup. Lookup failures are
recoverable and rendered as help screens. Command errors are raised by
handlers and reported to the user as a single error line.
"""

from collections.abc import Sequence
from typing import Any

from ..exceptions import RouteCliError


class RegistrationError(RouteCliError):
    """Base exception for failures while building the routing table."""

    pass


class CommandRegistrationError(RegistrationError):
    """Raised when a command name or alias is malformed."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"Failed to register command '{name}': {reason}")


class DuplicateCommandError(RegistrationError):
    """Raised when a command name or alias is already taken."""

    def __init__(self, name: str, owner: str | None = None) -> None:
        self.name = name
        self.owner = owner
        if owner and owner != name:
            super().__init__(
                f"Command name '{name}' is already registered (alias of '{owner}')"
            )
        else:
            super().__init__(f"Command name '{name}' is already registered")


class UnknownParentError(RegistrationError):
    """Raised when a category names a parent that does not exist."""

    def __init__(self, name: str, parent: str) -> None:
        self.name = name
        self.parent = parent
        super().__init__(
            f"Cannot add category '{name}': parent category '{parent}' does not exist"
        )


class DuplicateCategoryError(RegistrationError):
    """Raised when a category name repeats within the same parent."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Category '{path}' is already registered")


class LookupFailure(RouteCliError):
    """Base exception for invocations that did not resolve to a command."""

    pass


class CommandNotFoundError(LookupFailure):
    """Raised when no command matches the invocation."""

    def __init__(self, query: str) -> None:
        self.query = query
        super().__init__(f"Command not found: '{query}'")


class AmbiguousCommandError(LookupFailure):
    """Raised when the invocation only approximately matches commands."""

    def __init__(self, query: str, candidates: Sequence[str]) -> None:
        self.query = query
        self.candidates = list(candidates)
        super().__init__(
            f"No command named '{query}'; did you mean: {', '.join(self.candidates)}?"
        )


class CommandError(RouteCliError):
    """Base exception for failures reported by command handlers."""

    pass


class MissingRequiredParamError(CommandError):
    """Raised when a handler receives fewer positional args than it needs."""

    def __init__(self, required: int, given: int) -> None:
        self.required = required
        self.given = given
        super().__init__(
            f"Missing required parameters: expected at least {required}, got {given}"
        )


class MissingRequiredFlagError(CommandError):
    """Raised when a required flag was not supplied."""

    def __init__(self, flag: str) -> None:
        self.flag = flag
        super().__init__(f"Missing required flag, {flag}")


class InvalidParamError(CommandError):
    """Raised when a parameter or flag value fails validation."""

    def __init__(self, position: int | str, reason: str) -> None:
        self.position = position
        self.reason = reason
        if isinstance(position, int):
            super().__init__(f"Invalid parameter at position {position}: {reason}")
        else:
            super().__init__(f"Invalid value for {position}: {reason}")


class HandlerError(CommandError):
    """Raised when a handler fails with an exception outside this hierarchy."""

    def __init__(self, command: str, cause: Any) -> None:
        self.command = command
        self.cause = cause
        super().__init__(str(cause) or cause.__class__.__name__)
