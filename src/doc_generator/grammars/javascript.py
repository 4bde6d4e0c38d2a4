"""JavaScript/TypeScript declaration grammar (dynamic dialect)."""

import re
from collections.abc import Mapping

from doc_generator.core import DeclarationKind, Dialect, TagMarkers
from doc_generator.grammars.base import DeclarationGrammar, GrammarRule
from doc_generator.scanning.comments import strip_line_comments
from doc_generator.scanning.document import LineSource

_IDENT = r"[A-Za-z_$][\w$]*"
_CONTROL_KEYWORDS = r"(?:if|for|while|switch|catch|with|function|return)\b"
_METHOD_MODIFIERS = (
    r"(?:(?:public|private|protected|static|async|get|set|override|readonly)\s+)*"
)

# name(...) {   with optional modifiers and a TS return type
METHOD_SHORTHAND_PATTERN = re.compile(
    rf"^\s*(?!{_CONTROL_KEYWORDS}){_METHOD_MODIFIERS}"
    rf"(?!{_CONTROL_KEYWORDS}){_IDENT}\s*(?:<[^>]*>)?\s*\([^)]*\)\s*(?::\s*[^{{=]+)?\{{"
)
# name: function (...) {   as used by Aura helper object literals
OBJECT_METHOD_PATTERN = re.compile(rf"^\s*{_IDENT}\s*:\s*(?:async\s+)?function\b\s*\*?\s*\(")
FUNCTION_PATTERNS = (
    re.compile(rf"^\s*(?:export\s+(?:default\s+)?)?(?:async\s+)?function\b\s*\*?\s*{_IDENT}\s*\("),
    re.compile(
        rf"^\s*(?:export\s+)?(?:const|let|var)\s+{_IDENT}\s*(?::\s*[^=]+)?=\s*"
        rf"(?:async\s*)?(?:\(|function\b|{_IDENT}\s*=>)"
    ),
)
CLASS_PATTERN = re.compile(
    rf"^\s*(?:export\s+(?:default\s+)?)?(?:abstract\s+)?class\s+{_IDENT}"
)
PROPERTY_PATTERN = re.compile(
    rf"^\s*(?:(?:public|private|protected|static|readonly|declare)\s+)*#?{_IDENT}\s*[?!]?\s*[:=]\s*"
)
# recordId;   a class field declared without an initializer
CLASS_FIELD_PATTERN = re.compile(
    rf"^\s*(?:(?:public|private|protected|static|readonly|declare)\s+)*"
    rf"(?!(?:return|break|continue|debugger)\b)#?{_IDENT}\s*[?!]?\s*;\s*$"
)
VARIABLE_PATTERN = re.compile(rf"^\s*(?:export\s+)?(?:const|let|var)\s+{_IDENT}\s*([=:;]|$)")

CLASS_NAME_PATTERN = re.compile(rf"\bclass\s+({_IDENT})")
DECORATOR_PATTERN = re.compile(rf"^@{_IDENT}")
# @wire(getRecord, { recordId: '$recordId' }) @api ...
DECORATOR_PREFIX_PATTERN = re.compile(rf"^\s*(?:@{_IDENT}(?:\s*\([^)]*\))?\s*)+")
_SIGNATURE_CLOSE = re.compile(r"\)\s*(\{|;|=>|:|$)")
_BARE_ARROW = re.compile(
    rf"^\s*(?:export\s+)?(?:const|let|var)\s+{_IDENT}\s*(?::[^=]+)?=\s*(?:async\s+)?({_IDENT})\s*=>"
)
_DEFAULT_VALUE = re.compile(r"=.*$")
_DESTRUCTURING = re.compile(r"[{}\[\]]")
_NON_IDENTIFIER = re.compile(r"[^\w$]")

JS_MARKERS = TagMarkers(
    param=re.compile(r"^\*?\s*@param\b"),
    description=re.compile(r"^\*\s*@description\b"),
    returns=re.compile(r"^\*?\s*@returns?\b"),
    example=re.compile(r"^\*\s*@example\b"),
    return_line=" * @returns {{any}} ${{{index}:What is returned}}",
)


class JavaScriptGrammar(DeclarationGrammar):
    """
    Grammar for JavaScript and TypeScript, including LWC and Aura sources.

    No rule needs context beyond the line itself; the property rule is a
    rough heuristic and will also claim plain assignments.
    """

    @property
    def dialect(self) -> Dialect:
        return Dialect.JAVASCRIPT

    @property
    def file_extensions(self) -> frozenset[str]:
        return frozenset({".js", ".mjs", ".cjs", ".jsx", ".ts", ".tsx"})

    @property
    def declaration_kinds(self) -> frozenset[DeclarationKind]:
        return frozenset({
            DeclarationKind.CLASS,
            DeclarationKind.FUNCTION,
            DeclarationKind.METHOD,
            DeclarationKind.PROPERTY,
            DeclarationKind.VARIABLE,
        })

    @property
    def signature_kinds(self) -> frozenset[DeclarationKind]:
        return frozenset({DeclarationKind.METHOD, DeclarationKind.FUNCTION})

    @property
    def markers(self) -> TagMarkers:
        return JS_MARKERS

    @property
    def parameter_nesting(self) -> Mapping[str, str]:
        # Destructuring braces are split on purpose: "{ a, b }" yields a and b.
        # Generic commas are not: "Map<string, number>" stays one parameter.
        return {"(": ")", "<": ">"}

    def _build_rules(self) -> list[GrammarRule]:
        rules = [
            GrammarRule("method_shorthand", DeclarationKind.METHOD, pattern=METHOD_SHORTHAND_PATTERN),
            GrammarRule("object_method", DeclarationKind.METHOD, pattern=OBJECT_METHOD_PATTERN),
        ]
        rules.extend(
            GrammarRule(f"function_{i}", DeclarationKind.FUNCTION, pattern=pattern)
            for i, pattern in enumerate(FUNCTION_PATTERNS)
        )
        rules.extend([
            GrammarRule("class", DeclarationKind.CLASS, pattern=CLASS_PATTERN),
            GrammarRule("property", DeclarationKind.PROPERTY, pattern=PROPERTY_PATTERN),
            GrammarRule("class_field", DeclarationKind.PROPERTY, pattern=CLASS_FIELD_PATTERN),
            GrammarRule("variable", DeclarationKind.VARIABLE, pattern=VARIABLE_PATTERN),
        ])
        return rules

    def _type_name_pattern(self) -> re.Pattern[str]:
        return CLASS_NAME_PATTERN

    def is_annotation_line(self, text: str) -> bool:
        return bool(DECORATOR_PATTERN.match(text.strip()))

    def _annotation_prefix_pattern(self) -> re.Pattern[str]:
        return DECORATOR_PREFIX_PATTERN

    def signature_start(
        self, doc: LineSource, decl_line: int, kind: DeclarationKind
    ) -> int | None:
        if kind not in self.signature_kinds:
            return None
        return decl_line

    def bare_parameters(self, text: str) -> list[str] | None:
        # const double = x => x * 2
        match = _BARE_ARROW.match(text)
        if match:
            return [match.group(1)]
        return None

    def closes_signature(self, text: str) -> bool:
        return bool(_SIGNATURE_CLOSE.search(text))

    def parameter_name(self, segment: str) -> str:
        name = _DEFAULT_VALUE.sub("", segment)
        name = _DESTRUCTURING.sub("", name)
        name = name.split(":")[0].strip()
        return _NON_IDENTIFIER.sub("", name)


def infer_variable_type(doc: LineSource, line: int) -> str | None:
    """
    Best-effort JSDoc type for a variable declared on `line`.

    A TypeScript annotation is returned verbatim; otherwise the type is
    guessed from the initializer. Returns None when nothing can be inferred.
    """
    text = strip_line_comments(doc.line_text(line))

    annotation = re.match(rf"^\s*(?:export\s+)?(?:const|let|var)\s+{_IDENT}\s*:\s*([^=;]+)", text)
    if annotation:
        return annotation.group(1).strip()

    initializer = re.search(r"=\s*(.+?)(;|$)", text)
    if not initializer:
        return None
    rhs = initializer.group(1).strip()

    if re.match(r"^(['\"`]).*\1$", rhs):
        return "string"
    if re.match(r"^[+-]?(\d+(\.\d+)?|\.\d+)(e[+-]?\d+)?$", rhs, re.IGNORECASE):
        return "number"
    if re.match(r"^(true|false)\b", rhs):
        return "boolean"
    if re.match(r"^\[.*\]$", rhs):
        return "Array<any>"
    if re.match(r"^\{.*\}$", rhs):
        return "Object"
    if re.match(r"^(async\s+)?function\b", rhs) or re.match(
        r"^(async\s*)?\(*[\w$,\s{}\[\]]*\)*\s*=>", rhs
    ):
        return "Function"
    constructed = re.match(rf"^new\s+({_IDENT})\s*\(", rhs)
    if constructed:
        return constructed.group(1)
    return None
