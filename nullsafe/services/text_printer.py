"""Text Printer — writes demo lines to a stream and remembers what it wrote.

Invariants:
    - One print_text call writes exactly one line
    - print_if_present writes nothing and raises nothing for an absent value
    - lines holds every line written, in order

Design Decisions:
    - Stream resolved at write time when none is given: pytest capsys swaps sys.stdout
"""

import sys
from typing import TextIO

from nullsafe.core.optional import Maybe


class TextPrinter:
    """Line printer for demo output."""

    def __init__(self, stream: TextIO | None = None):
        self._stream = stream
        self.lines: list[str] = []

    def print_text(self, text: str) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(f"{text}\n")
        self.lines.append(text)

    def print_if_present(self, value: Maybe) -> None:
        """Safe-call print: only when the value is present."""
        value.let(lambda v: self.print_text(str(v)))


class BufferPrinter(TextPrinter):
    """Printer that only records lines (HTTP responses, tests)."""

    def print_text(self, text: str) -> None:
        self.lines.append(text)
