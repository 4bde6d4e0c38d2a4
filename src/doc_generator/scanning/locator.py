"""Bidirectional bounded declaration search around a focus line."""

from doc_generator.core import DeclarationSite
from doc_generator.grammars.base import DeclarationGrammar
from doc_generator.logging import get_logger
from doc_generator.scanning.annotations import is_in_annotation_context, skip_to_next_declaration
from doc_generator.scanning.document import LineSource, clamp_line

logger = get_logger(__name__)


def locate(doc: LineSource, focus_line: int, grammar: DeclarationGrammar) -> DeclarationSite | None:
    """
    Find the declaration nearest to `focus_line`.

    When the focus sits on or next to an annotation run, the declaration
    below the run is tried first. Otherwise lines are scanned upward from
    the focus line (inclusive), then downward; an upward hit always wins
    so the declaration the cursor is inside beats one merely nearby below.

    Returns None when both scans exhaust the declaration window.
    """
    if doc.line_count == 0:
        return None
    focus = clamp_line(doc, focus_line)

    if is_in_annotation_context(doc, focus, grammar):
        site = skip_to_next_declaration(doc, focus, grammar)
        if site:
            logger.debug(
                "declaration_located",
                dialect=grammar.dialect.value,
                focus_line=focus,
                kind=site.kind.value,
                line=site.line,
                via="annotation_run",
            )
            return site

    window = grammar.windows.declaration
    up = max(0, focus - window)
    down = min(doc.line_count - 1, focus + window)

    for line in range(focus, up - 1, -1):
        kind = grammar.kind_at_line(doc, line)
        if kind:
            return _located(grammar, focus, DeclarationSite(kind=kind, line=line), "up")

    for line in range(focus + 1, down + 1):
        kind = grammar.kind_at_line(doc, line)
        if kind:
            return _located(grammar, focus, DeclarationSite(kind=kind, line=line), "down")

    logger.debug("declaration_not_found", dialect=grammar.dialect.value, focus_line=focus)
    return None


def _located(
    grammar: DeclarationGrammar, focus: int, site: DeclarationSite, direction: str
) -> DeclarationSite:
    logger.debug(
        "declaration_located",
        dialect=grammar.dialect.value,
        focus_line=focus,
        kind=site.kind.value,
        line=site.line,
        via=direction,
    )
    return site
