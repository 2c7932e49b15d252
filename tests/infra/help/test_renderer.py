"""
Tests for help/renderer.py.

Tests key functionality including:
- Command screens with usage, aliases and optional sections
- Index, category, suggestion and not-found screens
- Fixed width and byte-identical re-rendering
"""

import pytest

from routecli.command import HelpScreen
from routecli.help import HelpRenderer
from routecli.router import Router
from tests.helpers.commands import RecordingCommand


class _ShortUsage(RecordingCommand):
    def help(self) -> HelpScreen:
        return HelpScreen("List Domains", usage="list-domains [--all]")


@pytest.fixture
def renderer() -> HelpRenderer:
    return HelpRenderer("dm", width=80)


def _position(text: str, *needles: str) -> list[int]:
    return [text.index(needle) for needle in needles]


@pytest.mark.unit
class TestRenderCommand:
    """Test single command screens."""

    def test_all_sections_in_order(self, router, renderer):
        text = renderer.render_command(router.registry.get("domain create"))

        positions = _position(
            text,
            "Create Domain",
            "USAGE",
            "DESCRIPTION",
            "PARAMETERS",
            "FLAGS",
            "EXAMPLES",
        )
        assert positions == sorted(positions)
        assert "HOST" in text
        assert "Hostname of the new domain" in text
        assert "domain create example.com --ip-address 10.0.0.5" in text

    def test_alias_usage_lines(self, router, renderer):
        text = renderer.render_command(router.registry.get("domain create"))

        assert "    domain create <HOST> [--ip-address <ADDR>] [--ssl]" in text
        assert "    dc <HOST> [--ip-address <ADDR>] [--ssl]" in text

    def test_usage_defaults_to_name(self, router, renderer):
        text = renderer.render_command(router.registry.get("domain list"))

        assert "    domain list" in text
        assert "    ls" in text

    def test_aliases_listed_when_usage_lacks_name(self, renderer):
        router = Router("dm")
        descriptor = router.add("domain list", _ShortUsage(), aliases=["ls"])

        text = renderer.render_command(descriptor)

        assert "list-domains [--all]" in text
        assert "Aliases: ls" in text

    def test_empty_sections_omitted(self, router, renderer):
        text = renderer.render_command(router.registry.get("status"))

        assert "USAGE" in text
        assert "DESCRIPTION" in text
        assert "PARAMETERS" not in text
        assert "FLAGS" not in text
        assert "EXAMPLES" not in text

    def test_rendering_is_idempotent(self, router, renderer):
        descriptor = router.registry.get("domain create")

        first = renderer.render_command(descriptor)

        assert renderer.render_command(descriptor) == first

    def test_lines_fit_width(self, router):
        renderer = HelpRenderer("dm", width=40)
        descriptor = router.registry.get("domain create")

        text = renderer.render_command(descriptor)

        assert max(len(line) for line in text.splitlines()) <= 40

    def test_plain_output_has_no_escapes(self, router, renderer):
        assert "\x1b[" not in renderer.render_command(router.registry.get("status"))

    def test_color_output_has_escapes(self, router):
        renderer = HelpRenderer("dm", color=True)

        assert "\x1b[" in renderer.render_command(router.registry.get("status"))


@pytest.mark.unit
class TestRenderListings:
    """Test index, category, suggestion and not-found screens."""

    def test_index(self, router, renderer):
        text = renderer.render_index(router)

        assert "Domain Manager: Available Commands" in text
        assert "Run 'dm help <command>' to view full details." in text
        assert "CATEGORIES" in text
        assert "AVAILABLE COMMANDS" in text
        assert "Shows server status." in text
        assert "GLOBAL FLAGS" not in text

    def test_index_of_empty_router(self, renderer):
        text = renderer.render_index(Router())

        assert "Available Commands" in text
        assert "No commands are registered." in text

    def test_value_global_flag_shows_placeholder(self, router, renderer):
        router.global_flag("-c", "--config", True, "Config file")

        assert "-c, --config <VALUE>" in renderer.render_index(router)

    def test_category(self, router, renderer):
        text = renderer.render_category(router, router.categories.get("user"))

        assert "User Commands" in text
        assert "Manage user accounts" in text
        assert "user create" in text
        assert "Adds a user account." in text
        assert "domain" not in text

    def test_category_listing_order(self, router, renderer):
        text = renderer.render_category(router, router.categories.get("domain"))

        positions = _position(text, "domain create", "domain delete", "domain list")
        assert positions == sorted(positions)

    def test_suggestions(self, router, renderer):
        suggestions = router.matcher.suggest(["doman", "create"])

        text = renderer.render_suggestions("doman create", suggestions)

        assert "No command named 'doman create' exists. Did you mean:" in text
        assert "domain create" in text
        assert "Creates a new domain" in text

    def test_not_found_lists_root(self, router, renderer):
        text = renderer.render_not_found(router, "reboot")

        assert "Command not found: 'reboot'" in text
        assert "status" in text

    def test_not_found_without_query(self, router, renderer):
        assert "Command not found." in renderer.render_not_found(router, "")

    def test_hint_without_app_name(self):
        text = HelpRenderer().render_index(Router())

        assert "Run 'help <command>' to view full details." in text


@pytest.mark.unit
class TestRenderLines:
    """Test one-line screens."""

    def test_error(self, renderer):
        assert renderer.render_error("disk full") == "Error: disk full\n"

    def test_version(self, renderer):
        assert renderer.render_version("dm 1.0") == "dm 1.0\n"
