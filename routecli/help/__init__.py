"""Help screen rendering for routed commands."""

from .renderer import HelpRenderer

__all__ = ["HelpRenderer"]
