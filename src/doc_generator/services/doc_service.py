"""Doc comment generation pipeline: locate -> extract -> patch."""

from doc_generator.core import (
    DeclarationInfo,
    DeclarationKind,
    DeclarationSite,
    Dialect,
    DocPlan,
)
from doc_generator.grammars.base import DeclarationGrammar
from doc_generator.grammars.javascript import infer_variable_type
from doc_generator.logging import get_logger
from doc_generator.scanning.annotations import find_insertion_line
from doc_generator.scanning.document import LineSource, clamp_line
from doc_generator.scanning.headers import aura_preamble, has_leading_doc_header, is_aura_open_line
from doc_generator.scanning.locator import locate
from doc_generator.scanning.signature import extract_parameters
from doc_generator.services.insertion import InsertionSink
from doc_generator.templates.patch import ensure_return_tag, inject_parameters, next_tab_stop
from doc_generator.templates.store import TemplateCache

logger = get_logger(__name__)

APEX_TEMPLATE_NAMES: dict[DeclarationKind, str] = {
    DeclarationKind.CLASS: "class",
    DeclarationKind.METHOD: "method",
    DeclarationKind.CONSTRUCTOR: "method",
    DeclarationKind.PROPERTY: "property",
    DeclarationKind.ENUM_VALUE: "enumValue",
}

JS_TEMPLATE_NAMES: dict[DeclarationKind, str] = {
    DeclarationKind.FUNCTION: "functions",
    DeclarationKind.METHOD: "method",
    DeclarationKind.CLASS: "method",
    DeclarationKind.PROPERTY: "method",
    DeclarationKind.VARIABLE: "variable",
}

FILE_HEADER_TEMPLATE = "file"


class DocCommentService:
    """
    Builds documentation comments for the declaration near a cursor line.

    Every call re-scans the document snapshot from scratch. The only state
    kept between calls is the template cache.
    """

    def __init__(self, templates: TemplateCache) -> None:
        self._templates = templates

    @property
    def templates(self) -> TemplateCache:
        return self._templates

    def locate(
        self, doc: LineSource, line: int, grammar: DeclarationGrammar
    ) -> DeclarationSite | None:
        """Find the declaration nearest to `line`."""
        return locate(doc, line, grammar)

    def describe(
        self, doc: LineSource, line: int, grammar: DeclarationGrammar
    ) -> DeclarationInfo | None:
        """Locate a declaration and gather its structural facts."""
        site = locate(doc, line, grammar)
        if not site:
            return None
        return DeclarationInfo(
            site=site,
            insert_line=find_insertion_line(doc, site.line, grammar),
            enclosing_type=grammar.find_enclosing_type_name(doc, site.line),
            parameters=tuple(extract_parameters(doc, site.line, site.kind, grammar)),
        )

    def generate(
        self, doc: LineSource, line: int, grammar: DeclarationGrammar
    ) -> DocPlan | None:
        """
        Build the doc comment plan for the declaration near `line`.

        Returns None when no declaration is nearby.

        Raises:
            TemplateNotFoundError: The dialect has no template for the kind.
        """
        if doc.line_count == 0:
            return None

        if grammar.dialect is Dialect.JAVASCRIPT:
            header = self._file_header_on_open_line(doc, line, grammar)
            if header:
                return header

        site = locate(doc, line, grammar)
        if not site:
            if grammar.dialect is Dialect.JAVASCRIPT:
                header = self._file_header_at_top(doc, line, grammar)
                if header:
                    return header
            logger.info(
                "declaration_not_found",
                dialect=grammar.dialect.value,
                line=line,
            )
            return None

        if grammar.dialect is Dialect.APEX:
            plan = self._apex_plan(doc, site, grammar)
        else:
            plan = self._javascript_plan(doc, site, grammar)

        logger.info(
            "doc_plan_created",
            dialect=grammar.dialect.value,
            kind=site.kind.value,
            declaration_line=site.line,
            insert_line=plan.insert_line,
            parameter_count=len(plan.parameters),
        )
        return plan

    def apply(self, plan: DocPlan, sink: InsertionSink) -> None:
        """Hand a plan to an insertion sink; the sink's outcome is not observed."""
        sink.insert_snippet(plan.lines, plan.insert_line, plan.insert_column)

    def _apex_plan(
        self, doc: LineSource, site: DeclarationSite, grammar: DeclarationGrammar
    ) -> DocPlan:
        name = APEX_TEMPLATE_NAMES[site.kind]
        lines = list(self._templates.get(grammar.dialect, name))

        params = extract_parameters(doc, site.line, site.kind, grammar)
        if params:
            generated = [f" * @param {p} description" for p in params]
            lines = inject_parameters(lines, generated, grammar.markers)
        if site.kind is DeclarationKind.METHOD:
            lines = ensure_return_tag(lines, grammar.markers)

        return self._plan(doc, site, grammar, name, lines, params)

    def _javascript_plan(
        self, doc: LineSource, site: DeclarationSite, grammar: DeclarationGrammar
    ) -> DocPlan:
        name = JS_TEMPLATE_NAMES[site.kind]
        lines = list(self._templates.get(grammar.dialect, name))
        params: list[str] = []

        if site.kind is DeclarationKind.VARIABLE:
            type_name = infer_variable_type(doc, site.line) or "any"
            lines = [
                line.replace("{${1:any}}", f"{{{type_name}}}").replace("{any}", f"{{{type_name}}}")
                for line in lines
            ]
        elif site.kind in grammar.signature_kinds:
            params = extract_parameters(doc, site.line, site.kind, grammar)
            if params:
                first_stop = next_tab_stop(
                    [line for line in lines if not grammar.markers.param.match(line.strip())]
                )
                generated = [
                    f" * @param {{any}} {p} " + (f"${{{first_stop}:description}}" if i == 0 else "description")
                    for i, p in enumerate(params)
                ]
                lines = inject_parameters(lines, generated, grammar.markers)
            lines = ensure_return_tag(lines, grammar.markers)

        return self._plan(doc, site, grammar, name, lines, params)

    def _plan(
        self,
        doc: LineSource,
        site: DeclarationSite,
        grammar: DeclarationGrammar,
        name: str,
        lines: list[str],
        params: list[str],
    ) -> DocPlan:
        return DocPlan(
            template_name=name,
            lines=tuple(lines),
            insert_line=find_insertion_line(doc, site.line, grammar),
            kind=site.kind,
            declaration_line=site.line,
            parameters=tuple(params),
        )

    def file_header(self, doc: LineSource, grammar: DeclarationGrammar) -> DocPlan | None:
        """
        Plan a file header for an Aura helper that does not have one yet.

        Returns None for other documents, including every Apex document.
        """
        if grammar.dialect is not Dialect.JAVASCRIPT or doc.line_count == 0:
            return None
        preamble = aura_preamble(doc)
        if not preamble.is_aura_helper:
            return None
        if has_leading_doc_header(doc, preamble.first_code_line):
            return None
        return self._file_header_plan(grammar)

    def _file_header_on_open_line(
        self, doc: LineSource, line: int, grammar: DeclarationGrammar
    ) -> DocPlan | None:
        # Cursor on the Aura helper "({" line: header once, then fall through.
        open_line = clamp_line(doc, line)
        if not is_aura_open_line(doc.line_text(open_line)):
            return None
        if has_leading_doc_header(doc, open_line):
            return None
        return self._file_header_plan(grammar)

    def _file_header_at_top(
        self, doc: LineSource, line: int, grammar: DeclarationGrammar
    ) -> DocPlan | None:
        preamble = aura_preamble(doc)
        if not preamble.is_aura_helper or line > preamble.first_code_line:
            return None
        if has_leading_doc_header(doc, preamble.first_code_line):
            return None
        return self._file_header_plan(grammar)

    def _file_header_plan(self, grammar: DeclarationGrammar) -> DocPlan:
        lines = self._templates.get(grammar.dialect, FILE_HEADER_TEMPLATE)
        logger.info("file_header_planned", dialect=grammar.dialect.value)
        return DocPlan(
            template_name=FILE_HEADER_TEMPLATE,
            lines=(*lines, ""),
            insert_line=0,
            is_file_header=True,
        )
