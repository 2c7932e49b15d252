"""
E2E tests for the Domain Manager example application.

Runs complete invocations through App.run() the way a user would type
them, with the store kept in a temporary directory.

Example:
    domain_manager.py domain create example.com --ip-address 10.0.0.5 --ssl
    domain_manager.py doman create example.com    # suggestion, exit 2
"""

import importlib.util
from pathlib import Path

import pytest
import yaml

from routecli.constants import EXIT_ERROR, EXIT_NOT_FOUND, EXIT_OK
from routecli.router import DispatchState

EXAMPLE = Path(__file__).resolve().parents[2] / "examples" / "domain_manager.py"


def _load_example():
    spec = importlib.util.spec_from_file_location("domain_manager", EXAMPLE)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture(scope="module")
def example():
    return _load_example()


@pytest.fixture
def store(temp_dir) -> Path:
    return temp_dir / "domains.yaml"


@pytest.fixture
def run(example, store):
    """Run one invocation against a fresh app sharing the temp store."""

    def _run(*argv: str) -> int:
        app = example.create_application(str(store))
        code = app.run(list(argv))
        _run.outcome = app.last_outcome
        return code

    return _run


def _stored(store: Path) -> dict:
    with open(store) as f:
        return yaml.safe_load(f)


@pytest.mark.e2e
class TestDomainWorkflow:
    """Create, list and delete domains."""

    def test_create_list_delete(self, run, store, capsys):
        assert (
            run("domain", "create", "example.com", "--ip-address", "10.0.0.5", "--ssl")
            == EXIT_OK
        )
        assert run("dc", "Example.org") == EXIT_OK
        assert _stored(store)["domains"] == {
            "example.com": {"ip_address": "10.0.0.5", "ssl": True},
            "example.org": {"ip_address": "0.0.0.0", "ssl": False},
        }

        capsys.readouterr()
        assert run("ls") == EXIT_OK
        listing = capsys.readouterr().out
        assert listing.index("example.com") < listing.index("example.org")
        assert "10.0.0.5" in listing

        assert run("domain", "delete", "example.com", "--force") == EXIT_OK
        assert list(_stored(store)["domains"]) == ["example.org"]

    def test_duplicate_domain(self, run, capsys):
        run("dc", "example.com")

        assert run("dc", "example.com") == EXIT_ERROR
        assert "Error: Domain already exists, example.com" in capsys.readouterr().err

    def test_invalid_address(self, run, store, capsys):
        code = run("dc", "example.com", "--ip-address", "10.0.0.500")

        assert code == EXIT_ERROR
        assert "Expected IP address, got '10.0.0.500'" in capsys.readouterr().err
        assert not store.exists()

    def test_missing_host(self, run, capsys):
        assert run("domain", "create") == EXIT_ERROR
        assert "Missing required parameters" in capsys.readouterr().err

    def test_delete_without_terminal_keeps_domain(self, run, store, monkeypatch):
        monkeypatch.setenv("ROUTECLI_NON_INTERACTIVE", "1")
        run("dc", "example.com")

        assert run("domain", "delete", "example.com") == 1
        assert "example.com" in _stored(store)["domains"]

    def test_delete_with_env_yes(self, run, store, monkeypatch):
        monkeypatch.setenv("ROUTECLI_YES", "1")
        run("dc", "example.com")

        assert run("domain", "delete", "example.com") == EXIT_OK
        assert _stored(store)["domains"] == {}

    def test_quiet_global_flag(self, run, capsys):
        run("-q", "dc", "example.com")

        assert capsys.readouterr().out == ""


@pytest.mark.e2e
class TestUserWorkflow:
    """Create users without a terminal."""

    def test_create_user(self, run, store):
        code = run(
            "user",
            "create",
            "alice",
            "--email",
            "alice@example.com",
            "--password",
            "s3cret",
        )

        assert code == EXIT_OK
        user = _stored(store)["users"]["alice"]
        assert user["email"] == "alice@example.com"
        assert "s3cret" not in user["password_sha256"]

    def test_missing_email(self, run, capsys):
        assert run("user", "create", "alice", "--password", "x") == EXIT_ERROR
        assert "Missing required flag, --email" in capsys.readouterr().err

    def test_password_prompt_needs_terminal(self, run, capsys, monkeypatch):
        monkeypatch.setenv("ROUTECLI_NON_INTERACTIVE", "1")

        code = run("user", "create", "bob", "--email", "bob@example.com")

        assert code == EXIT_ERROR
        assert "non-interactive mode" in capsys.readouterr().err


@pytest.mark.e2e
class TestHelpWorkflow:
    """Help, version, status and typo handling."""

    def test_index(self, run, capsys):
        assert run() == EXIT_OK

        out = capsys.readouterr().out
        assert "domain_manager.py: Available Commands" in out
        assert "Manage hosted domains" in out
        assert "-s, --store <VALUE>" in out

    def test_command_help(self, run, capsys):
        assert run("help", "dc") == EXIT_OK

        out = capsys.readouterr().out
        assert "dc <HOST> [--ip-address <ADDR>] [--ssl]" in out
        assert "Serve the domain over HTTPS" in out

    def test_version(self, run, capsys):
        assert run("--version") == EXIT_OK
        assert capsys.readouterr().out == "Domain Manager v1.2.0\n"

    def test_typo_suggestion(self, run, store, capsys):
        assert run("doman", "create", "example.com") == EXIT_NOT_FOUND
        assert run.outcome.state == DispatchState.HELP_AMBIGUOUS

        out = capsys.readouterr().out
        assert "Did you mean:" in out
        assert "domain create" in out
        assert not store.exists()

    def test_confirmed_typo_runs(self, run, store, monkeypatch):
        monkeypatch.setenv("ROUTECLI_DISPATCH_CONFIRM_TYPOS", "true")
        monkeypatch.setattr("routecli.ui.prompts.confirm", lambda *a, **kw: True)

        assert run("doman", "create", "example.com") == EXIT_OK
        assert "example.com" in _stored(store)["domains"]

    def test_unknown_command(self, run, capsys):
        assert run("reboot") == EXIT_NOT_FOUND
        assert "Command not found: 'reboot'" in capsys.readouterr().out

    def test_status(self, run, store, capsys):
        run("dc", "example.com", "--ssl")
        run("user", "create", "alice", "--email", "a@example.com", "--password", "x")
        capsys.readouterr()

        assert run("status") == EXIT_OK

        out = capsys.readouterr().out
        assert "Domains" in out
        assert "With SSL" in out
        assert "domains.yaml" in out
