"""Read-only line access to a document snapshot."""

import re
from collections.abc import Sequence
from typing import Protocol, runtime_checkable

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


@runtime_checkable
class LineSource(Protocol):
    """Line-indexed, read-only view of a text buffer."""

    @property
    def line_count(self) -> int: ...

    def line_text(self, index: int) -> str: ...


class TextDocument:
    """
    Immutable document snapshot backed by a tuple of lines.

    Lines are 0-indexed and never carry their line terminators.
    """

    __slots__ = ("_lines",)

    def __init__(self, lines: Sequence[str]) -> None:
        self._lines = tuple(lines)

    @classmethod
    def from_text(cls, text: str) -> "TextDocument":
        """Split raw text on any line ending."""
        return cls(_LINE_BREAK.split(text))

    @property
    def line_count(self) -> int:
        return len(self._lines)

    @property
    def lines(self) -> tuple[str, ...]:
        return self._lines

    def line_text(self, index: int) -> str:
        if index < 0 or index >= len(self._lines):
            raise IndexError(f"Line {index} out of range (0..{len(self._lines) - 1})")
        return self._lines[index]

    def text(self, line_ending: str = "\n") -> str:
        return line_ending.join(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __repr__(self) -> str:
        return f"TextDocument(line_count={len(self._lines)})"


def clamp_line(doc: LineSource, line: int) -> int:
    """Clamp a line index into the document's range (assumes a non-empty document)."""
    return max(0, min(line, doc.line_count - 1))
