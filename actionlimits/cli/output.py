"""
Output abstraction for the actionlimits CLI.

Commands write through an OutputWriter so they can be tested without
capturing stdout.
"""

import sys
from typing import Protocol, TextIO


class OutputWriter(Protocol):
    """Protocol for CLI output writing."""

    def write(self, text: str = "") -> None:
        """Write text with trailing newline."""
        ...


class ConsoleOutput:
    """
    Output writer for a stream (stdout by default).

    Example:
        out = ConsoleOutput()
        out.write("256")
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdout

    def write(self, text: str = "") -> None:
        """Write text with trailing newline."""
        print(text, file=self._stream)


class BufferedOutput:
    """
    Output writer that captures lines in memory.

    Example:
        out = BufferedOutput()
        main(["check", "256"], out=out)
        assert out.lines == ["256"]
    """

    def __init__(self) -> None:
        self._lines: list[str] = []

    def write(self, text: str = "") -> None:
        """Capture text as one or more lines."""
        self._lines.extend(text.splitlines() or [""])

    @property
    def lines(self) -> list[str]:
        """Captured lines."""
        return list(self._lines)

    @property
    def text(self) -> str:
        """Captured output as a single string."""
        return "".join(f"{line}\n" for line in self._lines)
