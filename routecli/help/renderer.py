"""
Help screen rendering.

Renders command help, category listings, the root index, typo suggestions
and not-found screens as text. Output is produced through a rich console
writing into a buffer with a fixed width, so rendering the same screen
twice yields identical bytes.
"""

from __future__ import annotations

from collections.abc import Sequence
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console as RichConsole
from rich.padding import Padding
from rich.table import Table
from rich.text import Text

from ..constants import DEFAULT_WIDTH

if TYPE_CHECKING:
    from ..router.categories import Category, CategoryListing
    from ..router.matcher import Suggestion
    from ..router.registry import HandlerDescriptor
    from ..router.router import Router

INDENT = 4


class HelpRenderer:
    """
    Formats help output for the dispatcher.

    Example:
        renderer = HelpRenderer("mytool", width=80)
        print(renderer.render_command(descriptor), end="")
    """

    def __init__(
        self, app_name: str = "", width: int = DEFAULT_WIDTH, color: bool = False
    ) -> None:
        """
        Initialize the renderer.

        Args:
            app_name: Program name used in hints and the index title
            width: Fixed output width
            color: Emit ANSI styles
        """
        self.app_name = app_name
        self.width = width
        self.color = color

    def _capture(self) -> RichConsole:
        return RichConsole(
            file=StringIO(),
            width=self.width,
            color_system="standard" if self.color else None,
            force_terminal=self.color,
            highlight=False,
            emoji=False,
        )

    @staticmethod
    def _text(console: RichConsole) -> str:
        output: str = console.file.getvalue()  # type: ignore[attr-defined]
        return output

    def _header(self, console: RichConsole, title: str) -> None:
        console.rule(Text(title, style="bold"), characters="-")
        console.print()

    def _section(self, console: RichConsole, name: str) -> None:
        console.print(Text(name, style="bold yellow"))
        console.print()

    def _paragraph(self, console: RichConsole, text: str) -> None:
        console.print(Padding(Text(text), (0, 0, 0, INDENT)))
        console.print()

    def _pairs(
        self, console: RichConsole, rows: Sequence[tuple[str, str]], style: str
    ) -> None:
        """Print a borderless two-column table, indented."""
        table = Table(show_header=False, box=None, padding=(0, 2), pad_edge=False)
        table.add_column(style=style, no_wrap=True)
        table.add_column()
        for key, value in rows:
            table.add_row(Text(key), Text(value))
        console.print(Padding(table, (0, 0, 0, INDENT)))
        console.print()

    def _hint(self, topic: str = "<command>") -> str:
        prog = f"{self.app_name} " if self.app_name else ""
        return f"Run '{prog}help {topic}' to view full details."

    def render_command(self, descriptor: HandlerDescriptor) -> str:
        """
        Render the full help screen for one command.

        Args:
            descriptor: Registered command

        Returns:
            Rendered help text
        """
        screen = descriptor.handler.help()
        console = self._capture()
        self._header(console, screen.title or descriptor.name)

        usage = screen.usage or descriptor.name
        lines = [usage]
        if descriptor.name in usage:
            lines += [
                usage.replace(descriptor.name, alias, 1) for alias in descriptor.aliases
            ]
        elif descriptor.aliases:
            lines.append(f"Aliases: {', '.join(descriptor.aliases)}")
        self._section(console, "USAGE")
        self._paragraph(console, "\n".join(lines))

        if screen.description:
            self._section(console, "DESCRIPTION")
            self._paragraph(console, screen.description)

        if screen.params:
            self._section(console, "PARAMETERS")
            self._pairs(console, list(screen.params.items()), "green")

        if screen.flags:
            self._section(console, "FLAGS")
            self._pairs(console, list(screen.flags.items()), "cyan")

        if screen.examples:
            self._section(console, "EXAMPLES")
            self._paragraph(console, "\n".join(screen.examples))

        return self._text(console)

    def _listing(self, console: RichConsole, listing: CategoryListing) -> None:
        if listing.categories:
            self._section(console, "CATEGORIES")
            rows = [(c.path, c.description or c.title) for c in listing.categories]
            self._pairs(console, rows, "magenta")

        if listing.commands:
            self._section(console, "AVAILABLE COMMANDS")
            rows = [(d.name, d.handler.help().summary) for d in listing.commands]
            self._pairs(console, rows, "green")

    def _global_flags(self, console: RichConsole, router: Router) -> None:
        if router.global_flags:
            self._section(console, "GLOBAL FLAGS")
            rows = [
                (f.label + (" <VALUE>" if f.is_value else ""), f.description)
                for f in router.global_flags
            ]
            self._pairs(console, rows, "cyan")

    def render_index(self, router: Router) -> str:
        """Render the root listing of categories, commands and global flags."""
        console = self._capture()
        title = "Available Commands"
        if router.app_name:
            title = f"{router.app_name}: {title}"
        self._header(console, title)
        self._paragraph(console, self._hint())

        listing = router.children_of(None)
        self._listing(console, listing)
        if not listing:
            self._paragraph(console, "No commands are registered.")
        self._global_flags(console, router)
        return self._text(console)

    def render_category(self, router: Router, category: Category) -> str:
        """
        Render a category with its immediate children.

        A category without children renders an empty listing.
        """
        console = self._capture()
        self._header(console, category.title or category.path)

        if category.description:
            self._section(console, "DESCRIPTION")
            self._paragraph(console, category.description)

        listing = router.children_of(category.path)
        self._listing(console, listing)
        if not listing:
            self._paragraph(console, "No commands in this category.")
        return self._text(console)

    def render_suggestions(self, query: str, suggestions: Sequence[Suggestion]) -> str:
        """Render near-miss candidates for a mistyped command."""
        console = self._capture()
        self._header(console, "Command Not Found")
        self._paragraph(console, f"No command named '{query}' exists. Did you mean:")
        rows = [(s.name, s.descriptor.handler.help().summary) for s in suggestions]
        self._pairs(console, rows, "green")
        self._paragraph(console, self._hint())
        return self._text(console)

    def render_not_found(self, router: Router, query: str) -> str:
        """Render the generic not-found message followed by the root listing."""
        console = self._capture()
        self._header(console, "Command Not Found")
        if query:
            self._paragraph(console, f"Command not found: '{query}'")
        else:
            self._paragraph(console, "Command not found.")
        self._listing(console, router.children_of(None))
        self._paragraph(console, self._hint())
        return self._text(console)

    def render_error(self, message: str) -> str:
        """Render a one-line error message."""
        console = self._capture()
        line = Text("Error: ", style="bold red")
        line.append(message)
        console.print(line)
        return self._text(console)

    def render_version(self, message: str) -> str:
        console = self._capture()
        console.print(Text(message))
        return self._text(console)
