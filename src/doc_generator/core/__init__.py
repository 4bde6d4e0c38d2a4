"""Core domain layer - pure Python business logic."""

from doc_generator.core.exceptions import (
    DocGeneratorError,
    InvalidTemplateError,
    TemplateNotFoundError,
)
from doc_generator.core.models import (
    CompletionItemKind,
    CompletionSuggestion,
    DeclarationInfo,
    DeclarationKind,
    DeclarationSite,
    Dialect,
    DocPlan,
    ScanWindows,
    TagMarkers,
)

__all__ = [
    "CompletionItemKind",
    "CompletionSuggestion",
    "DeclarationInfo",
    "DeclarationKind",
    "DeclarationSite",
    "Dialect",
    "DocGeneratorError",
    "DocPlan",
    "InvalidTemplateError",
    "ScanWindows",
    "TagMarkers",
    "TemplateNotFoundError",
]
