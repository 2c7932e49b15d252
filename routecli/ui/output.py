"""
Output sinks for rendered screens.

The dispatcher writes already-rendered text through these writers, so tests
can capture what a user would see without patching stdout.
"""

import sys
from typing import Protocol, TextIO


class OutputWriter(Protocol):
    """Protocol for writing rendered text."""

    def write(self, text: str) -> None:
        """Write text as-is (rendered screens carry their own newlines)."""
        ...


class StreamOutput:
    """
    Writer for a text stream, stdout (or stderr when error=True) by default.

    Example:
        out = StreamOutput(sys.stderr)
        out.write("Error: something failed\\n")
    """

    def __init__(self, stream: TextIO | None = None, error: bool = False) -> None:
        self._stream = stream
        self._error = error

    @property
    def stream(self) -> TextIO:
        # sys streams are looked up on every write, they may be swapped
        if self._stream is not None:
            return self._stream
        return sys.stderr if self._error else sys.stdout

    def write(self, text: str) -> None:
        self.stream.write(text)
        self.stream.flush()


class BufferedOutput:
    """
    Writer that keeps everything in memory.

    Example:
        out = BufferedOutput()
        out.write("Line 1\\nLine 2\\n")
        assert out.lines == ["Line 1", "Line 2"]
    """

    def __init__(self) -> None:
        self._parts: list[str] = []

    def write(self, text: str) -> None:
        self._parts.append(text)

    @property
    def text(self) -> str:
        """Everything written, concatenated."""
        return "".join(self._parts)

    @property
    def lines(self) -> list[str]:
        """Written text split into lines."""
        return self.text.splitlines()

    def clear(self) -> None:
        self._parts.clear()
