"""Signature reassembly and parameter-name extraction."""

from collections.abc import Mapping

from doc_generator.core import DeclarationKind
from doc_generator.grammars.base import DeclarationGrammar
from doc_generator.scanning.comments import strip_line_comments
from doc_generator.scanning.document import LineSource


def reassemble_signature(doc: LineSource, start: int, grammar: DeclarationGrammar) -> str | None:
    """
    Join comment-stripped lines from `start` until the signature closes.

    A signature is closed by the first line that ends the parameter list
    (per the grammar) once an opening parenthesis has been seen. Returns
    None when the signature window is exhausted first.

    Leading annotations are dropped so their arguments never pass for the
    parameter list.
    """
    parts: list[str] = []
    seen_open = False
    limit = min(doc.line_count - 1, start + grammar.windows.signature)

    for i in range(start, limit + 1):
        text = grammar.strip_annotations(strip_line_comments(doc.line_text(i)))
        parts.append(text)
        seen_open = seen_open or "(" in text
        if seen_open and grammar.closes_signature(text):
            return " ".join(parts)
    return None


def parameter_blob(signature: str) -> str | None:
    """Text between the first '(' and its matching ')', or None if unbalanced."""
    open_index = signature.find("(")
    if open_index == -1:
        return None

    depth = 0
    for i in range(open_index, len(signature)):
        char = signature[i]
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth == 0:
                return signature[open_index + 1:i]
    return None


def split_parameters(blob: str, nesting: Mapping[str, str]) -> list[str]:
    """
    Split a parameter list on commas that are not nested in `nesting` pairs.

    Segments are trimmed and empty segments discarded.
    """
    closers = {close: open_ for open_, close in nesting.items()}
    segments: list[str] = []
    stack: list[str] = []
    current: list[str] = []

    for char in blob:
        if char in nesting:
            stack.append(char)
        elif char in closers and stack and stack[-1] == closers[char]:
            stack.pop()
        elif char == "," and not stack:
            segments.append("".join(current))
            current = []
            continue
        current.append(char)
    segments.append("".join(current))

    return [segment.strip() for segment in segments if segment.strip()]


def extract_parameters(
    doc: LineSource,
    decl_line: int,
    kind: DeclarationKind,
    grammar: DeclarationGrammar,
) -> list[str]:
    """
    Extract parameter names for the declaration at `decl_line`.

    Only kinds that carry a signature produce names. Malformed or
    unterminated signatures yield an empty list rather than partial data.
    Order follows the signature; duplicates are kept as written.
    """
    if kind not in grammar.signature_kinds:
        return []
    if decl_line < 0 or decl_line >= doc.line_count:
        return []

    start = grammar.signature_start(doc, decl_line, kind)
    if start is None:
        return []

    first_line = grammar.strip_annotations(strip_line_comments(doc.line_text(start)))
    bare = grammar.bare_parameters(first_line)
    if bare is not None:
        return bare

    signature = reassemble_signature(doc, start, grammar)
    if signature is None:
        return []

    blob = parameter_blob(signature)
    if blob is None:
        return []

    names = (grammar.parameter_name(segment) for segment in split_parameters(blob, grammar.parameter_nesting))
    return [name for name in names if name]
