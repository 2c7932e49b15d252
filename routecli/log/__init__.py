"""
Logging for routecli applications.

Standard library logging with a fluent LoggingBuilder, a colored
LogFormatter and a TRACE level below DEBUG. Importing this package
registers the TRACE level name with the logging module.
"""

import logging

from .builder import LoggingBuilder, resolve_level
from .colors import ColorManager
from .constants import LogConstants
from .exceptions import InvalidLogLevelError
from .formatters import LogFormatter

TRACE = LogConstants.TRACE
logging.addLevelName(TRACE, "TRACE")

__all__ = [
    "TRACE",
    "ColorManager",
    "InvalidLogLevelError",
    "LogConstants",
    "LogFormatter",
    "LoggingBuilder",
    "resolve_level",
]
