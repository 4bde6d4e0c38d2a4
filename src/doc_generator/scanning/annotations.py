"""Annotation/decorator run handling around declarations."""

from doc_generator.core import DeclarationSite
from doc_generator.grammars.base import DeclarationGrammar
from doc_generator.scanning.document import LineSource


def _is_annotation_or_blank(doc: LineSource, line: int, grammar: DeclarationGrammar) -> bool:
    return not doc.line_text(line).strip() or grammar.is_bare_annotation(doc, line)


def is_in_annotation_context(doc: LineSource, line: int, grammar: DeclarationGrammar) -> bool:
    """
    Check whether `line` is an annotation line or touches an annotation run.

    Walks up and down (each bounded by the annotation-run window, focus
    line included) over blank and annotation lines. The line counts as
    annotation context if either walk meets an annotation before it hits
    any other non-blank line. An annotation sharing its line with a
    declaration belongs to that declaration and ends both walks.
    """
    if line < 0 or line >= doc.line_count:
        return False
    if grammar.is_bare_annotation(doc, line):
        return True

    window = grammar.windows.annotation_run

    for i in range(line, max(0, line - window) - 1, -1):
        if not _is_annotation_or_blank(doc, i, grammar):
            break
        if grammar.is_bare_annotation(doc, i):
            return True

    for i in range(line, min(doc.line_count - 1, line + window) + 1):
        if not _is_annotation_or_blank(doc, i, grammar):
            break
        if grammar.is_bare_annotation(doc, i):
            return True

    return False


def skip_to_next_declaration(
    doc: LineSource, line: int, grammar: DeclarationGrammar
) -> DeclarationSite | None:
    """
    Skip blank/annotation lines from `line`, then scan strictly downward.

    Returns the first declaration found within the declaration window
    below the end of the run, or None.
    """
    i = max(0, line)
    while i < doc.line_count and _is_annotation_or_blank(doc, i, grammar):
        i += 1

    limit = min(doc.line_count - 1, i + grammar.windows.declaration)
    for candidate in range(i, limit + 1):
        kind = grammar.kind_at_line(doc, candidate)
        if kind:
            return DeclarationSite(kind=kind, line=candidate)
    return None


def find_insertion_line(doc: LineSource, decl_line: int, grammar: DeclarationGrammar) -> int:
    """
    Line above which a new comment for `decl_line` must be inserted.

    Skips blank lines directly above the declaration, then the contiguous
    annotation run above those; the result is one past the first line that
    is neither, clamped to 0.
    """
    i = min(decl_line, doc.line_count) - 1
    while i >= 0 and not doc.line_text(i).strip():
        i -= 1
    while i >= 0 and grammar.is_bare_annotation(doc, i):
        i -= 1
    return max(0, i + 1)
