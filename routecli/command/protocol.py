"""
Command protocol interface definition.

This module provides the abstract base class every routed command
implements. The router only ever calls these two methods.
"""

from abc import ABC, abstractmethod

from .screen import HelpScreen


class Command(ABC):
    """
    Abstract base class for routed commands.

    Implementations report failures by raising, typically one of the
    routecli.router.errors.CommandError subclasses. Any other exception is
    wrapped in HandlerError and its message shown to the user verbatim.

    Example:
        class GreetCommand(Command):
            def process(self, args, flags, value_flags):
                require_params(args, 1)
                print(f"Hello, {args[0]}")

            def help(self):
                return HelpScreen("Greet", "greet <NAME>", "Say hello.")
    """

    @abstractmethod
    def process(
        self,
        args: list[str],
        flags: set[str],
        value_flags: dict[str, str | None],
    ) -> int | None:
        """
        Run the command.

        Args:
            args: Positional arguments after the command name
            flags: Boolean flags given, dashes included
            value_flags: Declared value flags mapped to their values

        Returns:
            Exit code, or None for success
        """
        pass

    @abstractmethod
    def help(self) -> HelpScreen:
        """
        Describe the command for help output.

        Returns:
            HelpScreen: Title, usage, description, params, flags and examples
        """
        pass
