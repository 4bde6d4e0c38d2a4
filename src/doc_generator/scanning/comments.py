"""Comment helpers: inline comment stripping and block-comment membership."""

import re

from doc_generator.scanning.document import LineSource

_LINE_COMMENT = re.compile(r"//.*$")

BLOCK_OPEN = "/**"
BLOCK_CLOSE = "*/"
CONTINUATION = "*"


def strip_line_comments(text: str) -> str:
    """Remove a trailing // comment from a single line."""
    return _LINE_COMMENT.sub("", text)


def is_inside_comment_block(doc: LineSource, line: int, lookback: int = 100) -> bool:
    """
    Check whether a line sits inside an unclosed doc comment block.

    The focus line counts as inside when it opens a block or continues one
    with a leading '*'. Otherwise the scan walks upward at most `lookback`
    lines: a closing marker seen first means the block is already closed,
    an opening marker seen first means we are inside it.
    """
    if line < 0 or line >= doc.line_count:
        return False

    trimmed = doc.line_text(line).strip()
    if trimmed.startswith(BLOCK_OPEN) or trimmed.startswith(CONTINUATION):
        return True

    limit = max(0, line - lookback)
    for i in range(line, limit - 1, -1):
        text = doc.line_text(i)
        if BLOCK_CLOSE in text:
            return False
        if BLOCK_OPEN in text:
            return True
    return False


def find_comment_block_end(doc: LineSource, line: int, lookahead: int = 100) -> int | None:
    """Index of the first line at or below `line` that closes a block comment."""
    limit = min(doc.line_count - 1, line + lookahead)
    for i in range(max(0, line), limit + 1):
        if BLOCK_CLOSE in doc.line_text(i):
            return i
    return None
