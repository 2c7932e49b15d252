"""
Command implementation interface for routecli.

Provides the Command base class, the HelpScreen it returns, and validation
helpers for handler input.
"""

from .checks import (
    ANY,
    BOOLEAN,
    DECIMAL,
    DIRECTORY,
    EMAIL,
    FILE,
    INTEGER,
    URL,
    DecimalRange,
    Format,
    IntegerRange,
    OneOf,
    StringRange,
    require_flag,
    require_params,
    validate_flag,
    validate_params,
)
from .protocol import Command
from .screen import HelpScreen

__all__ = [
    "Command",
    "HelpScreen",
    # Validation
    "Format",
    "ANY",
    "BOOLEAN",
    "DECIMAL",
    "DIRECTORY",
    "EMAIL",
    "FILE",
    "INTEGER",
    "URL",
    "DecimalRange",
    "IntegerRange",
    "OneOf",
    "StringRange",
    "require_flag",
    "require_params",
    "validate_flag",
    "validate_params",
]
