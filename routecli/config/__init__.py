"""Layered YAML configuration for routecli applications."""

from .config import Config
from .constants import DEFAULTS, ENV_PREFIX
from .dot_dict import DotDict

__all__ = ["DEFAULTS", "ENV_PREFIX", "Config", "DotDict"]
