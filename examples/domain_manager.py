#!/usr/bin/env python3
"""
Domain Manager: a small routecli application.

Keeps hosted domains and user accounts in a YAML file.

    ./domain_manager.py domain create example.com --ip-address 10.0.0.5 --ssl
    ./domain_manager.py dc example.org
    ./domain_manager.py domain list
    ./domain_manager.py help domain create
    ./domain_manager.py doman create example.net    # suggests 'domain create'

Set ROUTECLI_DISPATCH_CONFIRM_TYPOS=true to be asked whether a close match
should run instead.
"""

import hashlib
import ipaddress
import sys
from pathlib import Path
from typing import Any

import yaml

from routecli import App, AppBuilder, Command, CommandError, HelpScreen
from routecli.command import EMAIL, Format, require_params, validate_flag
from routecli.router import InvalidParamError
from routecli.ui import Console, Progress, array, confirm, new_password, table

DEFAULT_STORE = "domains.yaml"


class _IPAddress(Format):
    def check(self, value: str) -> str | None:
        try:
            ipaddress.ip_address(value)
        except ValueError:
            return f"Expected IP address, got '{value}'"
        return None


IP_ADDRESS = _IPAddress()


class Context:
    """State shared by the commands, bound to the app after it is built."""

    def __init__(self, default_store: str) -> None:
        self.default_store = default_store
        self.app: App | None = None

    @property
    def store_path(self) -> Path:
        assert self.app is not None
        return Path(self.app.get_global("--store") or self.default_store)

    def console(self) -> Console:
        assert self.app is not None
        return Console(quiet=self.app.has_global("--quiet"))

    def load(self) -> dict[str, Any]:
        path = self.store_path
        data: dict[str, Any] = {}
        if path.exists():
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        data.setdefault("domains", {})
        data.setdefault("users", {})
        return data

    def save(self, data: dict[str, Any]) -> None:
        with open(self.store_path, "w") as f:
            yaml.safe_dump(data, f, sort_keys=True)


class CreateDomain(Command):
    def __init__(self, ctx: Context) -> None:
        self.ctx = ctx

    def process(self, args, flags, value_flags):
        require_params(args, 1)
        host = args[0].lower()
        address = "0.0.0.0"
        if "--ip-address" in value_flags:
            address = validate_flag("--ip-address", value_flags, IP_ADDRESS)

        data = self.ctx.load()
        if host in data["domains"]:
            raise CommandError(f"Domain already exists, {host}")
        data["domains"][host] = {"ip_address": address, "ssl": "--ssl" in flags}
        self.ctx.save(data)
        self.ctx.console().print_success(f"Created domain {host} on {address}")

    def help(self):
        return (
            HelpScreen(
                "Create Domain",
                usage="domain create <HOST> [--ip-address <ADDR>] [--ssl]",
                description="Adds a hosted domain bound to an address.",
            )
            .add_param("HOST", "Hostname of the new domain")
            .add_flag("--ip-address", "Address to bind, defaults to all (0.0.0.0)")
            .add_flag("--ssl", "Serve the domain over HTTPS")
            .add_example("domain create example.com --ip-address 10.0.0.5 --ssl")
        )


class DeleteDomain(Command):
    def __init__(self, ctx: Context) -> None:
        self.ctx = ctx

    def process(self, args, flags, value_flags):
        require_params(args, 1)
        host = args[0].lower()
        data = self.ctx.load()
        if host not in data["domains"]:
            raise InvalidParamError(0, f"No domain named '{host}'")

        force = "--force" in flags
        if not confirm(f"Delete domain {host}?", auto_confirm=True if force else None):
            self.ctx.console().print_warning(f"Kept domain {host}")
            return 1

        del data["domains"][host]
        self.ctx.save(data)
        self.ctx.console().print_success(f"Deleted domain {host}")

    def help(self):
        return (
            HelpScreen(
                "Delete Domain",
                usage="domain delete <HOST> [--force]",
                description="Removes a hosted domain.",
            )
            .add_param("HOST", "Domain to remove")
            .add_flag("--force", "Do not ask for confirmation")
        )


class ListDomains(Command):
    def __init__(self, ctx: Context) -> None:
        self.ctx = ctx

    def process(self, args, flags, value_flags):
        domains = self.ctx.load()["domains"]
        console = self.ctx.console()
        if not domains:
            console.print_info("No domains.")
            return
        rows = [
            [host, info["ip_address"], "yes" if info["ssl"] else "no"]
            for host, info in sorted(domains.items())
        ]
        table(["Domain", "IP Address", "SSL"], rows, console=console)

    def help(self):
        return HelpScreen(
            "List Domains",
            usage="domain list",
            description="Lists all hosted domains.",
        )


class CreateUser(Command):
    def __init__(self, ctx: Context) -> None:
        self.ctx = ctx

    def process(self, args, flags, value_flags):
        require_params(args, 1)
        name = args[0]
        email = validate_flag("--email", value_flags, EMAIL)
        secret = value_flags.get("--password") or new_password()

        data = self.ctx.load()
        if name in data["users"]:
            raise CommandError(f"User already exists, {name}")
        data["users"][name] = {
            "email": email,
            "password_sha256": hashlib.sha256(secret.encode()).hexdigest(),
        }
        self.ctx.save(data)
        self.ctx.console().print_success(f"Created user {name}")

    def help(self):
        return (
            HelpScreen(
                "Create User",
                usage="user create <NAME> --email <EMAIL> [--password <PASSWORD>]",
                description="Adds a user account. Prompts for a password if "
                "none is given.",
            )
            .add_param("NAME", "Login name")
            .add_flag("--email", "Contact address")
            .add_flag("--password", "Initial password")
        )


class Status(Command):
    def __init__(self, ctx: Context) -> None:
        self.ctx = ctx

    def process(self, args, flags, value_flags):
        data = self.ctx.load()
        with Progress(self.ctx.app.lg, "Checking domains...") as progress:
            progress.set_total(len(data["domains"]))
            secure = 0
            for info in data["domains"].values():
                secure += bool(info["ssl"])
                progress.update()
        array(
            {
                "Store": self.ctx.store_path,
                "Domains": len(data["domains"]),
                "With SSL": secure,
                "Users": len(data["users"]),
            },
            indent=0,
            console=self.ctx.console(),
        )

    def help(self):
        return HelpScreen("Status", description="Shows a summary of the store.")


def create_application(default_store: str = DEFAULT_STORE) -> App:
    """Create the Domain Manager application."""
    ctx = Context(default_store)
    app = (
        AppBuilder("domain_manager.py")
        .with_version("Domain Manager v1.2.0")
        .category("domain", "Domain Commands", "Manage hosted domains")
        .category("user", "User Commands", "Manage user accounts")
        .command(
            "domain create",
            CreateDomain(ctx),
            aliases=["dc"],
            value_flags=["--ip-address"],
        )
        .command("domain delete", DeleteDomain(ctx))
        .command("domain list", ListDomains(ctx), aliases=["ls"])
        .command(
            "user create", CreateUser(ctx), value_flags=["--email", "--password"]
        )
        .command("status", Status(ctx))
        .global_flag("-s", "--store", True, "YAML file holding the data")
        .global_flag("-q", "--quiet", False, "Only print warnings and errors")
        .build()
    )
    ctx.app = app
    return app


def main() -> None:
    create_application().main(sys.argv[1:])


if __name__ == "__main__":
    main()
