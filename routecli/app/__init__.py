"""Application facade and fluent builder."""

from .app import EXIT_INTERRUPTED, App
from .builder import AppBuilder

__all__ = ["EXIT_INTERRUPTED", "App", "AppBuilder"]
