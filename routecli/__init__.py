"""
routecli - routing toolkit for multi-word command-line applications.

Register commands like "domain create" with aliases and value-flags, group
them into categories for help, and let the dispatcher pick the handler,
render help, or suggest close matches for typos.

Example:
    from routecli import App, Command, HelpScreen

    class CreateDomain(Command):
        def process(self, args, flags, value_flags):
            ...

        def help(self):
            return HelpScreen("Create Domain", usage="domain create <NAME>")

    app = App(name="Domain Manager")
    app.add("domain create", CreateDomain(), aliases=["dc"])
    app.main()
"""

from .app import App, AppBuilder
from .command import Command, HelpScreen
from .config import Config
from .exceptions import ConfigError, LoggingError, RouteCliError
from .router import (
    CommandError,
    Dispatcher,
    DispatchState,
    InvalidParamError,
    MissingRequiredFlagError,
    MissingRequiredParamError,
    Outcome,
    RegistrationError,
    Router,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "App",
    "AppBuilder",
    "Command",
    "CommandError",
    "Config",
    "ConfigError",
    "Dispatcher",
    "DispatchState",
    "HelpScreen",
    "InvalidParamError",
    "LoggingError",
    "MissingRequiredFlagError",
    "MissingRequiredParamError",
    "Outcome",
    "RegistrationError",
    "RouteCliError",
    "Router",
]
