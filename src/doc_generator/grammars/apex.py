"""Apex declaration grammar (typed-OO dialect)."""

import re
from collections.abc import Mapping

from doc_generator.core import DeclarationKind, Dialect, TagMarkers
from doc_generator.grammars.base import DeclarationGrammar, GrammarRule
from doc_generator.scanning.comments import strip_line_comments
from doc_generator.scanning.document import LineSource

_VISIBILITY = r"(?:public|private|protected|global)"

# Statement keywords that look like "type name(" to the method pattern
_STATEMENT_START = r"(?!\s*(?:return|new|else|throw|if|for|while|catch|switch)\b)"

ENUM_VALUE_PATTERN = re.compile(r"^\s*[A-Z0-9_]+\s*(=.+)?\s*,?\s*$")
METHOD_PATTERN = re.compile(
    rf"^{_STATEMENT_START}\s*{_VISIBILITY}?\s*(static\s+)?[\w<>\[\],\s?.]+\s+[A-Za-z_]\w*\s*\(",
    re.IGNORECASE,
)
TYPE_DECLARATION_PATTERN = re.compile(
    rf"^\s*{_VISIBILITY}?\s*"
    r"(virtual|abstract|with\s+sharing|without\s+sharing|inherited\s+sharing)?\s*"
    r"(class|interface|enum)\s+[A-Za-z_]\w*",
    re.IGNORECASE,
)
PROPERTY_PATTERN = re.compile(
    rf"^\s*{_VISIBILITY}?\s*(static\s+)?[\w<>\[\],\s?.]+\s+[A-Za-z_]\w*\s*"
    rf"\{{\s*(?:{_VISIBILITY}\s+)?(get|set)\s*[;{{]",
    re.IGNORECASE,
)
# @AuraEnabled(cacheable=true) @TestVisible ...
ANNOTATION_PREFIX_PATTERN = re.compile(r"^\s*(?:@\w+(?:\s*\([^)]*\))?\s*)+")
CLASS_NAME_PATTERN = re.compile(r"\bclass\s+([A-Za-z_]\w*)", re.IGNORECASE)
_CLASS_OR_INTERFACE = re.compile(r"\b(class|interface)\b", re.IGNORECASE)
_ENUM_HEADER = re.compile(r"\benum\s+[A-Za-z_]\w*", re.IGNORECASE)
_SIGNATURE_CLOSE = re.compile(r"\)\s*([{;]|$)")
_NON_IDENTIFIER = re.compile(r"[^A-Za-z0-9_]")

APEX_MARKERS = TagMarkers(
    param=re.compile(r"^\*\s*@param\b"),
    description=re.compile(r"^\*\s*@description\b"),
    returns=re.compile(r"^\*?\s*@return\b"),
    example=re.compile(r"^\*\s*@example\b"),
    return_line=" * @return ${{{index}:description}}",
)


def constructor_pattern(class_name: str) -> re.Pattern[str]:
    """Pattern for a constructor of `class_name` (no return type before the name)."""
    return re.compile(
        rf"^\s*{_VISIBILITY}?\s*{re.escape(class_name)}\s*\(",
        re.IGNORECASE,
    )


class ApexGrammar(DeclarationGrammar):
    """
    Grammar for Apex classes, triggers and anonymous blocks.

    Apex is case-insensitive, so every keyword pattern ignores case. The
    enum-member and constructor rules are context-gated: the first needs an
    enclosing enum block, the second an enclosing class whose name the line
    calls.
    """

    @property
    def dialect(self) -> Dialect:
        return Dialect.APEX

    @property
    def file_extensions(self) -> frozenset[str]:
        return frozenset({".cls", ".trigger", ".apex"})

    @property
    def declaration_kinds(self) -> frozenset[DeclarationKind]:
        return frozenset({
            DeclarationKind.CLASS,
            DeclarationKind.METHOD,
            DeclarationKind.CONSTRUCTOR,
            DeclarationKind.PROPERTY,
            DeclarationKind.ENUM_VALUE,
        })

    @property
    def signature_kinds(self) -> frozenset[DeclarationKind]:
        return frozenset({DeclarationKind.METHOD, DeclarationKind.CONSTRUCTOR})

    @property
    def markers(self) -> TagMarkers:
        return APEX_MARKERS

    @property
    def parameter_nesting(self) -> Mapping[str, str]:
        return {"(": ")", "<": ">", "[": "]", "{": "}"}

    def _build_rules(self) -> list[GrammarRule]:
        return [
            GrammarRule(
                "enum_value",
                DeclarationKind.ENUM_VALUE,
                pattern=ENUM_VALUE_PATTERN,
                context=lambda doc, line, _text: self.is_inside_enum_block(doc, line),
            ),
            GrammarRule(
                "constructor",
                DeclarationKind.CONSTRUCTOR,
                context=self._is_constructor_line,
            ),
            GrammarRule("method", DeclarationKind.METHOD, pattern=METHOD_PATTERN),
            GrammarRule("type", DeclarationKind.CLASS, pattern=TYPE_DECLARATION_PATTERN),
            GrammarRule("property", DeclarationKind.PROPERTY, pattern=PROPERTY_PATTERN),
        ]

    def _type_name_pattern(self) -> re.Pattern[str]:
        return CLASS_NAME_PATTERN

    def _is_constructor_line(self, doc: LineSource, line: int, text: str) -> bool:
        class_name = self.find_enclosing_type_name(doc, line)
        if not class_name:
            return False
        return bool(constructor_pattern(class_name).search(text))

    def is_inside_enum_block(self, doc: LineSource, line: int) -> bool:
        """
        Whether the nearest enclosing block above `line` is an enum.

        A class or interface keyword seen first wins, so members of an
        enum nested after a class header are only recognised when the enum
        header is the closer of the two.
        """
        limit = max(0, line - self._windows.enum_block)
        for i in range(line, limit - 1, -1):
            text = strip_line_comments(doc.line_text(i))
            if _CLASS_OR_INTERFACE.search(text):
                return False
            if _ENUM_HEADER.search(text):
                return True
        return False

    def is_annotation_line(self, text: str) -> bool:
        return text.strip().startswith("@")

    def _annotation_prefix_pattern(self) -> re.Pattern[str]:
        return ANNOTATION_PREFIX_PATTERN

    def _declaration_text(self, doc: LineSource, line: int) -> str:
        return self.strip_annotations(strip_line_comments(doc.line_text(line)))

    def signature_start(
        self, doc: LineSource, decl_line: int, kind: DeclarationKind
    ) -> int | None:
        if kind is DeclarationKind.CONSTRUCTOR:
            class_name = self.find_enclosing_type_name(doc, decl_line)
            if not class_name:
                return None
            start_pattern = constructor_pattern(class_name)
        elif kind is DeclarationKind.METHOD:
            start_pattern = METHOD_PATTERN
        else:
            return None

        window = self._windows.signature
        up = max(0, decl_line - window)
        down = min(doc.line_count - 1, decl_line + window)

        for i in range(decl_line, up - 1, -1):
            if start_pattern.search(self._declaration_text(doc, i)):
                return i
        for i in range(decl_line + 1, down + 1):
            if start_pattern.search(self._declaration_text(doc, i)):
                return i
        return None

    def closes_signature(self, text: str) -> bool:
        return bool(_SIGNATURE_CLOSE.search(text))

    def parameter_name(self, segment: str) -> str:
        # "final Map<String, Integer> counts" -> "counts"
        parts = segment.split()
        if not parts:
            return ""
        return _NON_IDENTIFIER.sub("", parts[-1])
