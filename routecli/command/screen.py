"""
Help screen content returned by commands.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class HelpScreen:
    """
    Structured help for a single command.

    Example:
        screen = HelpScreen(
            "Create Domain",
            "domain create <HOST> [--ip-address ADDR]",
            "Creates a new domain and its nginx configuration.",
        )
        screen.add_param("HOST", "Hostname of the new domain")
        screen.add_flag("--ip-address", "Address to bind, defaults to all")
        screen.add_example("domain create example.com --ip-address 10.0.0.5")
    """

    title: str
    usage: str = ""
    description: str = ""
    params: dict[str, str] = field(default_factory=dict)
    flags: dict[str, str] = field(default_factory=dict)
    examples: list[str] = field(default_factory=list)

    def add_param(self, param: str, description: str) -> HelpScreen:
        """Document a positional parameter."""
        self.params[param] = description
        return self

    def add_flag(self, flag: str, description: str) -> HelpScreen:
        """Document a flag."""
        self.flags[flag] = description
        return self

    def add_example(self, example: str) -> HelpScreen:
        """Add a usage example."""
        self.examples.append(example)
        return self

    @property
    def summary(self) -> str:
        """One-line text for command listings."""
        text = self.description or self.title
        return text.strip().splitlines()[0] if text.strip() else ""
