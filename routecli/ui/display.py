"""
Presentation helpers for command output.

Headers, wrapped paragraphs, key/value arrays and tables, all printed
through a routecli Console so quiet mode and color detection apply.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from rich.padding import Padding
from rich.table import Table
from rich.text import Text

from .console import Console, get_console


def header(title: str, console: Console | None = None) -> None:
    """Print a section title between horizontal rules."""
    console = console or get_console()
    console.rule(title)
    console.print()


def send(text: str, indent: int = 0, console: Console | None = None) -> None:
    """Print a paragraph, word-wrapped to the console width."""
    console = console or get_console()
    console.print(Padding(Text(text), (0, 0, 0, indent)))


def array(
    rows: Mapping[str, Any] | Sequence[tuple[str, Any]],
    indent: int = 4,
    console: Console | None = None,
) -> None:
    """
    Print aligned key/value pairs.

    Example:
        array({"Domain": "example.com", "IP Address": "10.0.0.1"})
    """
    console = console or get_console()
    pairs = list(rows.items()) if isinstance(rows, Mapping) else list(rows)
    grid = Table(show_header=False, box=None, padding=(0, 2), pad_edge=False)
    grid.add_column(style="key", no_wrap=True)
    grid.add_column()
    for key, value in pairs:
        grid.add_row(Text(str(key)), Text(str(value)))
    console.print(Padding(grid, (0, 0, 0, indent)))


def table(
    columns: Sequence[str],
    rows: Sequence[Sequence[Any]],
    title: str | None = None,
    console: Console | None = None,
) -> None:
    """
    Print rows under column headings.

    Raises:
        ValueError: A row has a different number of cells than columns
    """
    console = console or get_console()
    grid = Table(title=title, header_style="bold")
    for column in columns:
        grid.add_column(column)
    for index, row in enumerate(rows):
        if len(row) != len(columns):
            raise ValueError(
                f"Row {index} has {len(row)} cells, expected {len(columns)}"
            )
        grid.add_row(*(Text(str(cell)) for cell in row))
    console.print(grid)
