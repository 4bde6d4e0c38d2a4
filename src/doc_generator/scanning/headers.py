"""File-header detection for Aura helper and controller sources."""

import re
from dataclasses import dataclass

from doc_generator.scanning.comments import BLOCK_OPEN
from doc_generator.scanning.document import LineSource

_AURA_OPEN = re.compile(r"^\(\s*\{")


@dataclass(frozen=True, slots=True)
class AuraPreamble:
    """Where code starts in a file and whether it looks like an Aura helper."""

    is_aura_helper: bool
    first_code_line: int


def is_aura_open_line(text: str) -> bool:
    """Whether a line opens an Aura helper object literal: "({"."""
    return bool(_AURA_OPEN.match(text.strip()))


def aura_preamble(doc: LineSource) -> AuraPreamble:
    """
    Skip a shebang, blank lines and // comments at the top of the file.

    The file is an Aura helper when the first code line opens "({".
    """
    if doc.line_count == 0:
        return AuraPreamble(is_aura_helper=False, first_code_line=0)

    i = 1 if doc.line_text(0).startswith("#!") else 0
    while i < doc.line_count:
        text = doc.line_text(i).strip()
        if text and not text.startswith("//"):
            break
        i += 1

    if i >= doc.line_count:
        return AuraPreamble(is_aura_helper=False, first_code_line=i)
    return AuraPreamble(
        is_aura_helper=is_aura_open_line(doc.line_text(i)),
        first_code_line=i,
    )


def has_leading_doc_header(doc: LineSource, before_line: int) -> bool:
    """Whether a /** block opens before the first non-comment code line."""
    for i in range(min(before_line, doc.line_count)):
        text = doc.line_text(i).strip()
        if text.startswith(BLOCK_OPEN):
            return True
        if text and not text.startswith("//"):
            break
    return False
