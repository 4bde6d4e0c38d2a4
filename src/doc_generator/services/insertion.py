"""Insertion sinks receiving generated doc comments."""

from collections.abc import Sequence
from typing import Protocol

from doc_generator.scanning.document import TextDocument
from doc_generator.templates.snippets import render_snippet


class InsertionSink(Protocol):
    """Accepts a final line sequence and the position to insert it at."""

    def insert_snippet(self, lines: Sequence[str], line: int, column: int) -> None: ...


class BufferInsertionSink:
    """
    Applies snippets to an in-memory copy of a document.

    Placeholders are rendered to their default text before insertion, the
    way an editor would leave them if the user accepted every default.
    """

    def __init__(self, document: TextDocument) -> None:
        self._document = document
        self._insertions = 0

    @property
    def document(self) -> TextDocument:
        return self._document

    @property
    def insertions(self) -> int:
        return self._insertions

    def text(self, line_ending: str = "\n") -> str:
        return self._document.text(line_ending)

    def insert_snippet(self, lines: Sequence[str], line: int, column: int) -> None:
        snippet = render_snippet("\n".join(lines) + "\n")
        current = list(self._document.lines)

        if line >= len(current):
            # Appending past the last line: start on a fresh line.
            text = "\n".join(current)
            new_text = text + ("\n" if text else "") + snippet
        else:
            line = max(0, line)
            target = current[line]
            column = max(0, min(column, len(target)))
            before = "\n".join(current[:line] + [target[:column]])
            after = "\n".join([target[column:]] + current[line + 1:])
            new_text = before + snippet + after

        self._document = TextDocument.from_text(new_text)
        self._insertions += 1
