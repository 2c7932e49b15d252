"""
Interactive prompts for command handlers.

Confirmations, free-text input, passwords and single selections built on
questionary. Prompting needs a terminal on both stdin and stdout;
ROUTECLI_YES auto-confirms and ROUTECLI_NON_INTERACTIVE forbids prompting
outright (useful in CI and scripts).
"""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Sequence

import questionary
from questionary import Style

PROMPT_STYLE = Style(
    [
        ("question", "bold"),
        ("answer", "fg:green bold"),
        ("pointer", "fg:cyan bold"),
        ("highlighted", "fg:cyan bold"),
        ("selected", "fg:green"),
    ]
)

_TRUTHY = ("1", "true", "yes")


class NonInteractiveError(Exception):
    """Raised when input is required but no terminal is available."""


class PasswordMismatchError(ValueError):
    """Raised when a new password and its confirmation never match."""


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").lower() in _TRUTHY


def is_interactive() -> bool:
    """Check whether prompting is possible."""
    if _env_flag("ROUTECLI_NON_INTERACTIVE"):
        return False
    return sys.stdin.isatty() and sys.stdout.isatty()


def confirm(
    message: str, *, default: bool = False, auto_confirm: bool | None = None
) -> bool:
    """
    Ask a yes/no question.

    Args:
        message: The question
        default: Answer used when the user just presses Enter
        auto_confirm: True answers yes without asking, None consults
            ROUTECLI_YES, False always asks

    Returns:
        True if confirmed

    Raises:
        NonInteractiveError: No terminal and auto_confirm is False
    """
    if auto_confirm is True or (auto_confirm is None and _env_flag("ROUTECLI_YES")):
        return True
    if not is_interactive():
        if auto_confirm is False:
            raise NonInteractiveError(
                f"Cannot prompt for confirmation in non-interactive mode: {message}"
            )
        return default
    result = questionary.confirm(message, default=default, style=PROMPT_STYLE).ask()
    return bool(result) if result is not None else default


def text(
    message: str,
    *,
    default: str = "",
    validate: Callable[[str], bool | str] | None = None,
) -> str:
    """
    Ask for a line of text.

    Without a terminal the default is returned if there is one.

    Raises:
        NonInteractiveError: No terminal and no default
    """
    if not is_interactive():
        if default:
            return default
        raise NonInteractiveError(
            f"Cannot prompt for text input in non-interactive mode: {message}"
        )
    result = questionary.text(
        message, default=default, validate=validate, style=PROMPT_STYLE
    ).ask()
    return str(result) if result is not None else default


def password(message: str) -> str:
    """
    Ask for a password without echoing it.

    Raises:
        NonInteractiveError: No terminal
    """
    if not is_interactive():
        raise NonInteractiveError(
            f"Cannot prompt for password in non-interactive mode: {message}"
        )
    result = questionary.password(message, style=PROMPT_STYLE).ask()
    return str(result) if result is not None else ""


def new_password(
    message: str = "Desired password:",
    confirm_message: str = "Confirm password:",
    attempts: int = 3,
) -> str:
    """
    Ask for a new password twice until both entries match.

    Args:
        message: First prompt
        confirm_message: Second prompt
        attempts: Tries before giving up

    Raises:
        NonInteractiveError: No terminal
        PasswordMismatchError: Entries differed on every attempt
    """
    for _ in range(attempts):
        first = password(message)
        if first and first == password(confirm_message):
            return first
        questionary.print("Passwords do not match. Please try again.", style="fg:red")
    raise PasswordMismatchError(f"Passwords did not match after {attempts} attempts")


def select(
    message: str,
    choices: Sequence[str] | dict[str, str],
    *,
    default: str | None = None,
) -> str:
    """
    Ask for one option out of several.

    Args:
        message: The question
        choices: Option labels, or a mapping of value to label
        default: Value preselected, and returned without a terminal

    Returns:
        The chosen value (the label itself for a plain sequence)

    Raises:
        NonInteractiveError: No terminal and no default

    Example:
        env = select("Choose environment:", ["dev", "staging", "prod"])
    """
    options = dict(choices) if isinstance(choices, dict) else {c: c for c in choices}
    if not is_interactive():
        if default is not None:
            return default
        raise NonInteractiveError(
            f"Cannot prompt for selection in non-interactive mode: {message}"
        )

    q_choices = [
        questionary.Choice(label, value=value) for value, label in options.items()
    ]
    result = questionary.select(
        message, choices=q_choices, default=default, style=PROMPT_STYLE
    ).ask()
    if result is None:
        return default if default is not None else next(iter(options))
    return str(result)
