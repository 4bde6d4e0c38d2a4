"""Base grammar abstraction for dialect-specific declaration rules."""

import re
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from dataclasses import dataclass

from doc_generator.core import DeclarationKind, Dialect, ScanWindows, TagMarkers
from doc_generator.scanning.comments import strip_line_comments
from doc_generator.scanning.document import LineSource

# (document, line index, comment-stripped line text) -> bool
ContextPredicate = Callable[[LineSource, int, str], bool]


@dataclass(frozen=True, slots=True)
class GrammarRule:
    """
    One entry of a dialect's ordered rule table.

    A rule fires when its pattern (if any) matches the stripped line and its
    context predicate (if any) confirms the surroundings. The pattern is
    checked first since context predicates scan other lines.
    """

    name: str
    kind: DeclarationKind
    pattern: re.Pattern[str] | None = None
    context: ContextPredicate | None = None

    def matches(self, doc: LineSource, line: int, text: str) -> bool:
        if self.pattern is not None and not self.pattern.search(text):
            return False
        if self.context is not None and not self.context(doc, line, text):
            return False
        return True


class DeclarationGrammar(ABC):
    """
    Abstract base class for dialect-specific declaration grammars.

    Each implementation supplies an ordered rule table mapping a single
    comment-stripped line to a declaration kind, plus the pieces the
    scanners need: annotation detection, signature boundaries, parameter
    name normalisation and doc-tag markers. Rules are evaluated first-match
    wins; a line that matches nothing is simply not a declaration line.
    """

    def __init__(self, windows: ScanWindows | None = None) -> None:
        self._windows = windows or ScanWindows()
        self._rules = tuple(self._build_rules())

    @property
    def windows(self) -> ScanWindows:
        """Scan bounds used by this grammar and the scanners driving it."""
        return self._windows

    @property
    def rules(self) -> tuple[GrammarRule, ...]:
        """The rule table in priority order."""
        return self._rules

    @property
    @abstractmethod
    def dialect(self) -> Dialect:
        """The dialect this grammar recognises."""
        ...

    @property
    @abstractmethod
    def file_extensions(self) -> frozenset[str]:
        """File extensions this grammar can handle (e.g., {'.cls'})."""
        ...

    @property
    @abstractmethod
    def declaration_kinds(self) -> frozenset[DeclarationKind]:
        """Every kind this grammar can produce."""
        ...

    @property
    @abstractmethod
    def signature_kinds(self) -> frozenset[DeclarationKind]:
        """Kinds that carry a parameter list."""
        ...

    @property
    @abstractmethod
    def markers(self) -> TagMarkers:
        """Doc-tag line patterns for this dialect's templates."""
        ...

    @property
    @abstractmethod
    def parameter_nesting(self) -> Mapping[str, str]:
        """Bracket pairs whose commas do not separate parameters."""
        ...

    @abstractmethod
    def _build_rules(self) -> list[GrammarRule]:
        """Build the ordered rule table."""
        ...

    @abstractmethod
    def is_annotation_line(self, text: str) -> bool:
        """Whether a raw line is an annotation/decorator line."""
        ...

    @abstractmethod
    def _annotation_prefix_pattern(self) -> re.Pattern[str]:
        """Pattern matching the run of annotations that opens a line."""
        ...

    @abstractmethod
    def signature_start(
        self, doc: LineSource, decl_line: int, kind: DeclarationKind
    ) -> int | None:
        """
        Find the line holding the parameter-opening parenthesis.

        Returns None when no such line can be pinned near `decl_line`.
        """
        ...

    @abstractmethod
    def closes_signature(self, text: str) -> bool:
        """Whether a stripped line closes a signature (')' then a body/terminator token)."""
        ...

    @abstractmethod
    def parameter_name(self, segment: str) -> str:
        """Reduce one comma-separated parameter segment to its name ('' to discard)."""
        ...

    @abstractmethod
    def _type_name_pattern(self) -> re.Pattern[str]:
        """Pattern whose first group captures a class name on a line."""
        ...

    def kind_at_line(self, doc: LineSource, line: int) -> DeclarationKind | None:
        """
        Classify a single line; None means it is not a declaration line.

        Annotations opening the line are skipped, so "@AuraEnabled public
        void run() {" classifies as the method it declares.
        """
        text = self.strip_annotations(strip_line_comments(doc.line_text(line)))
        if not text.strip():
            return None
        for rule in self._rules:
            if rule.matches(doc, line, text):
                return rule.kind
        return None

    def strip_annotations(self, text: str) -> str:
        """Text left after the annotations that open the line, if any."""
        return self._annotation_prefix_pattern().sub("", text, count=1)

    def is_bare_annotation(self, doc: LineSource, line: int) -> bool:
        """Whether `line` is an annotation line that declares nothing itself."""
        return self.is_annotation_line(doc.line_text(line)) and self.kind_at_line(doc, line) is None

    def bare_parameters(self, text: str) -> list[str] | None:
        """Parameters written without parentheses on a signature line, if any."""
        return None

    def find_enclosing_type_name(self, doc: LineSource, line: int) -> str | None:
        """Name of the nearest class declared at or above `line`."""
        pattern = self._type_name_pattern()
        limit = max(0, line - self._windows.enclosing_type)
        for i in range(min(line, doc.line_count - 1), limit - 1, -1):
            match = pattern.search(strip_line_comments(doc.line_text(i)))
            if match:
                return match.group(1)
        return None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(dialect={self.dialect.value!r})"
