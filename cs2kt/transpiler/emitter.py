"""Indentation-aware text emission."""

from contextlib import contextmanager
from typing import Iterator

from cs2kt.transpiler.constants import INDENT, NEWLINE


class IndentedEmitter:
    """Append-only text buffer with an explicit indentation depth.

    The depth is owned by the caller: write operations never change it. The
    buffer is exactly the concatenation of all writes in call order.
    """

    def __init__(self, depth: int = 0):
        self.fragments: list[str] = []
        self.depth = depth

    @property
    def depth(self) -> int:
        return self._depth

    @depth.setter
    def depth(self, value: int) -> None:
        if value < 0:
            raise ValueError(f"Indentation depth must be non-negative: {value}")
        self._depth = value

    @contextmanager
    def indented(self) -> Iterator[None]:
        """Context manager for a nested scope one level deeper."""
        self.depth += 1
        try:
            yield
        finally:
            self.depth -= 1

    def dedent(self) -> None:
        """Leave one indentation level."""
        if self.depth == 0:
            raise ValueError("Cannot dedent below depth 0")
        self.depth -= 1

    def write(self, text: str) -> None:
        """Append raw text."""
        self.fragments.append(text)

    def newline(self) -> None:
        self.write(NEWLINE)

    def indentation(self) -> str:
        return INDENT * self.depth

    def indent(self) -> None:
        """Write leading whitespace only, before an inline continuation."""
        self.indented_write("")

    def indented_write(self, text: str) -> None:
        self.write(self.indentation() + text)

    def indented_write_line(self, text: str) -> None:
        self.indented_write(text)
        self.newline()

    def getvalue(self) -> str:
        """Get the emitted text."""
        return "".join(self.fragments)
