"""
Configuration defaults and limits.
"""

from typing import Any

from ..constants import DEFAULT_WIDTH

# Maximum config file size (1MB)
MAX_CONFIG_SIZE_BYTES = 1024 * 1024

ENV_PREFIX = "ROUTECLI_"

# Environment switches read by the prompts, not configuration keys
RESERVED_ENV = frozenset({"yes", "non_interactive"})

DEFAULTS: dict[str, Any] = {
    "app": {
        "name": "",
        "version": "",
    },
    "logging": {
        "level": "warning",
        "colors": True,
    },
    "output": {
        "width": DEFAULT_WIDTH,
        "color": None,  # None detects from the terminal
    },
    "dispatch": {
        "confirm_typos": False,
    },
}
