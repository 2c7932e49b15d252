"""
Unified exception hierarchy for routecli.

This module provides the base exception for all routecli errors, making it
easy for applications to catch every framework failure with a single clause.
Router-specific errors live in routecli.router.errors.
"""

from typing import Any


class RouteCliError(Exception):
    """
    Base exception for all routecli errors.

    Example:
        try:
            router.add("build", BuildCommand())
        except RouteCliError as e:
            print(f"Startup failed: {e}")
    """

    def __init__(self, message: str, **context: Any) -> None:
        """
        Initialize the exception with a message and optional context.

        Args:
            message: Human-readable error message
            **context: Additional context information (stored in self.context)
        """
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        """String representation with context if available."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class ConfigError(RouteCliError):
    """
    Configuration-related errors.

    Examples:
        - Config file not found
        - Invalid YAML syntax
        - Configuration file too large
    """

    pass


class LoggingError(RouteCliError):
    """
    Logging-related errors.

    Examples:
        - Invalid log level
        - Handler configuration error
    """

    pass
