"""Core domain models - pure Python dataclasses with no framework dependencies."""

import re
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Self


class Dialect(StrEnum):
    """Supported source dialects."""

    APEX = "apex"
    JAVASCRIPT = "javascript"

    @classmethod
    def from_language_id(cls, language_id: str) -> Self | None:
        """Get dialect from an editor language identifier."""
        mapping = {
            "apex": cls.APEX,
            "javascript": cls.JAVASCRIPT,
            "javascriptreact": cls.JAVASCRIPT,
            "typescript": cls.JAVASCRIPT,
            "typescriptreact": cls.JAVASCRIPT,
        }
        return mapping.get(language_id.strip().lower())

    @property
    def template_folder(self) -> str:
        """Folder name of this dialect's templates in the template store."""
        return "ApexDoc" if self is Dialect.APEX else "JSDoc"


class DeclarationKind(StrEnum):
    """Kinds of declarations the grammars can recognise."""

    CLASS = "class"
    METHOD = "method"
    CONSTRUCTOR = "constructor"
    PROPERTY = "property"
    ENUM_VALUE = "enum_value"  # Apex only
    FUNCTION = "function"  # JS/TS only
    VARIABLE = "variable"  # JS/TS only


class CompletionItemKind(StrEnum):
    """Kinds of completion items offered inside doc comments."""

    KEYWORD = "keyword"
    SNIPPET = "snippet"


@dataclass(frozen=True, slots=True)
class DeclarationSite:
    """
    The line believed to start or characterize a declaration.

    Built fresh for every locator call and never mutated.
    """

    kind: DeclarationKind
    line: int  # 0-indexed

    def __post_init__(self) -> None:
        if self.line < 0:
            raise ValueError("DeclarationSite line must be >= 0")


@dataclass(frozen=True, slots=True)
class ScanWindows:
    """
    Line bounds for every bounded scan.

    The ordering annotation_run < signature < declaration is relied upon
    by the locator: annotation runs are redirected forward into the
    declaration search, and signatures are re-found near a located line.
    """

    comment_lookback: int = 100
    annotation_run: int = 10
    signature: int = 50
    declaration: int = 200
    enum_block: int = 200
    enclosing_type: int = 400


@dataclass(frozen=True, slots=True)
class TagMarkers:
    """
    Doc-tag line patterns for one dialect.

    Patterns are matched against stripped template lines.
    """

    param: re.Pattern[str]
    description: re.Pattern[str]
    returns: re.Pattern[str]
    example: re.Pattern[str]
    return_line: str  # formatted with the next free tab stop as {index}


@dataclass(frozen=True, slots=True)
class DocPlan:
    """
    A generated documentation comment and where it goes.

    Immutable value object handed to an insertion sink.
    """

    template_name: str
    lines: tuple[str, ...]
    insert_line: int
    insert_column: int = 0
    kind: DeclarationKind | None = None  # None for file headers
    declaration_line: int | None = None
    parameters: tuple[str, ...] = ()
    is_file_header: bool = False

    @property
    def snippet(self) -> str:
        """Snippet text as inserted: lines joined, newline terminated."""
        return "\n".join(self.lines) + "\n"


@dataclass(frozen=True, slots=True)
class CompletionSuggestion:
    """A suggested doc tag or inline snippet."""

    label: str
    insert_text: str
    item_kind: CompletionItemKind
    detail: str = ""
    # Columns on the focus line replaced by the item (e.g. a just-typed '@')
    replace_range: tuple[int, int] | None = None


@dataclass(frozen=True, slots=True)
class DeclarationInfo:
    """Structural facts about a located declaration."""

    site: DeclarationSite
    insert_line: int
    enclosing_type: str | None = None
    parameters: tuple[str, ...] = field(default_factory=tuple)
