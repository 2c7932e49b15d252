"""
Terminal I/O for command handlers.

Console output, prompts, tables and progress display built on rich and
questionary, plus the output writers the dispatcher renders into.
"""

from .console import Console, get_console, reset_console, should_use_color
from .display import array, header, send, table
from .output import BufferedOutput, OutputWriter, StreamOutput
from .progress import Progress
from .prompts import (
    NonInteractiveError,
    PasswordMismatchError,
    confirm,
    is_interactive,
    new_password,
    password,
    select,
    text,
)

__all__ = [
    "BufferedOutput",
    "Console",
    "NonInteractiveError",
    "OutputWriter",
    "PasswordMismatchError",
    "Progress",
    "StreamOutput",
    "array",
    "confirm",
    "get_console",
    "header",
    "is_interactive",
    "new_password",
    "password",
    "reset_console",
    "select",
    "send",
    "should_use_color",
    "table",
    "text",
]
