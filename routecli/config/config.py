"""
Application configuration.

Settings come from three layers, later ones winning: built-in defaults, an
optional YAML file, and ROUTECLI_<SECTION>_<KEY> environment variables.

    app:
      name: Domain Manager
      version: "Domain Manager v1.2.0"
    logging:
      level: info
    output:
      width: 100

ROUTECLI_LOGGING_LEVEL=debug then overrides logging.level.
"""

import copy
import os
from pathlib import Path
from typing import Any

import yaml

from ..exceptions import ConfigError
from .constants import DEFAULTS, ENV_PREFIX, MAX_CONFIG_SIZE_BYTES, RESERVED_ENV
from .dot_dict import DotDict


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep-merge override into a copy of base."""
    result = copy.deepcopy(base)
    for key, val in override.items():
        if isinstance(val, dict) and isinstance(result.get(key), dict):
            result[key] = _merge(result[key], val)
        else:
            result[key] = val
    return result


def _convert_env_value(value: str) -> bool | int | float | str | None:
    """Convert an environment string to a bool, number, None, or str."""
    lowered = value.lower()
    if lowered in ("null", "none", ""):
        return None
    if lowered in ("true", "false"):
        return lowered == "true"
    try:
        return float(value) if "." in value else int(value)
    except ValueError:
        return value


def _load_yaml(path: Path) -> dict[str, Any]:
    if not path.is_file():
        raise ConfigError("Configuration file not found", path=str(path))

    size = path.stat().st_size
    if size > MAX_CONFIG_SIZE_BYTES:
        raise ConfigError(
            f"Configuration file is {size} bytes, exceeding maximum size of "
            f"{MAX_CONFIG_SIZE_BYTES} bytes",
            path=str(path),
        )

    with open(path) as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML: {e}", path=str(path)) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError("Configuration root must be a mapping", path=str(path))
    return data


class Config(DotDict):
    """
    Layered configuration with dotted-path access.

    Example:
        config = Config("etc/domains.yaml")
        lg = LoggingBuilder("routecli").with_level(config.logging.level).build()
        width = config.get("output.width")
    """

    def __init__(
        self,
        fname: str | Path | None = None,
        enable_env_overrides: bool = True,
        env_prefix: str = ENV_PREFIX,
        defaults: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize configuration.

        Args:
            fname: YAML file to load, or None for defaults only
            enable_env_overrides: Apply ROUTECLI_* environment variables
            env_prefix: Prefix for environment variables
            defaults: Base settings (the built-in defaults when None)

        Raises:
            ConfigError: The file is missing, too large, or not valid YAML
        """
        super().__init__()
        self._env_prefix = env_prefix
        self._path = Path(fname).resolve() if fname is not None else None

        data = copy.deepcopy(DEFAULTS if defaults is None else defaults)
        if self._path is not None:
            data = _merge(data, _load_yaml(self._path))
        if enable_env_overrides:
            data = _merge(data, self.get_env_overrides())
        self.set(**data)

    @property
    def source_path(self) -> Path | None:
        """The loaded file, if any."""
        return self._path

    def get_env_overrides(self) -> dict[str, Any]:
        """
        Collect overrides from the environment as a nested dict.

        The first underscore after the prefix separates the section from
        the key, so ROUTECLI_DISPATCH_CONFIRM_TYPOS maps to
        dispatch.confirm_typos. Variables without a section and the
        prompt switches (ROUTECLI_YES, ROUTECLI_NON_INTERACTIVE) are skipped.
        """
        overrides: dict[str, Any] = {}
        for key, value in os.environ.items():
            if not key.startswith(self._env_prefix):
                continue
            name = key[len(self._env_prefix) :].lower()
            if name in RESERVED_ENV or "_" not in name:
                continue
            section, _, option = name.partition("_")
            if not section or not option:
                continue
            overrides.setdefault(section, {})[option] = _convert_env_value(value)
        return overrides
