"""
Command doubles for router and dispatcher tests.

RecordingCommand remembers every invocation; FailingCommand raises a
chosen exception. build_domain_router() returns the small domain manager
routing table most tests dispatch against.
"""

from typing import Any

from routecli.command import Command, HelpScreen
from routecli.router import Router


class RecordingCommand(Command):
    """Command that records the arguments it was called with."""

    def __init__(
        self, title: str = "Test Command", description: str = "", result: Any = None
    ):
        self.title = title
        self.description = description
        self.result = result
        self.calls: list[tuple[list[str], set[str], dict[str, str | None]]] = []

    @property
    def called(self) -> bool:
        return bool(self.calls)

    @property
    def last(self) -> tuple[list[str], set[str], dict[str, str | None]]:
        return self.calls[-1]

    def process(self, args, flags, value_flags):
        self.calls.append((list(args), set(flags), dict(value_flags)))
        return self.result

    def help(self) -> HelpScreen:
        return HelpScreen(self.title, description=self.description)


class FailingCommand(Command):
    """Command whose process() raises the given exception."""

    def __init__(self, error: BaseException, title: str = "Failing Command"):
        self.error = error
        self.title = title

    def process(self, args, flags, value_flags):
        raise self.error

    def help(self) -> HelpScreen:
        return HelpScreen(self.title)


class DomainCreate(RecordingCommand):
    """The documented 'domain create' command."""

    def __init__(self):
        super().__init__(
            "Create Domain", "Creates a new domain and its nginx configuration."
        )

    def help(self) -> HelpScreen:
        return (
            HelpScreen(
                self.title,
                usage="domain create <HOST> [--ip-address <ADDR>] [--ssl]",
                description=self.description,
            )
            .add_param("HOST", "Hostname of the new domain")
            .add_flag("--ip-address", "Address to bind, defaults to all")
            .add_flag("--ssl", "Request a certificate")
            .add_example("domain create example.com --ip-address 10.0.0.5")
        )


def build_domain_router() -> Router:
    """
    Router with two categories and five commands.

        domain            Domain Commands
          create (dc)     value flag --ip-address
          delete
          list (ls)
        user              User Commands
          create
        status            root-level command
    """
    router = Router("Domain Manager", "Domain Manager v1.2.0")
    router.add_category("domain", "Domain Commands", "Manage hosted domains")
    router.add_category("user", "User Commands", "Manage user accounts")
    router.add(
        "domain create", DomainCreate(), aliases=["dc"], value_flags=["--ip-address"]
    )
    router.add("domain delete", RecordingCommand("Delete Domain", "Removes a domain."))
    router.add(
        "domain list",
        RecordingCommand("List Domains", "Lists all domains."),
        aliases=["ls"],
    )
    router.add("user create", RecordingCommand("Create User", "Adds a user account."))
    router.add("status", RecordingCommand("Status", "Shows server status."))
    return router
