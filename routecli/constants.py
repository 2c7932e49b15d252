"""
Application-wide constants, exit codes and resource limits.
"""

# Process exit codes
EXIT_OK = 0  # Command succeeded or help was displayed
EXIT_ERROR = 1  # Handler reported a failure
EXIT_NOT_FOUND = 2  # No command matched (not found or ambiguous)

# Reserved first tokens that switch the dispatcher into help mode
HELP_KEYWORDS = ("help", "-h", "--help")

# Tokens that print the version message when one is configured
VERSION_FLAGS = ("-v", "--version")

# Resource limits
MAX_COMMAND_COUNT = 5000  # Maximum number of commands in one registry
MAX_ALIAS_COUNT = 32  # Maximum number of aliases per command
MAX_COMMAND_NAME_LENGTH = 255  # Maximum length of a canonical command name

# Default width used when wrapping help output
DEFAULT_WIDTH = 80
