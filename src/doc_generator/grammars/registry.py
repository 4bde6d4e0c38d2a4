"""Grammar registry for managing dialect-specific grammars."""

from functools import lru_cache

from doc_generator.config import get_settings
from doc_generator.core import Dialect, ScanWindows
from doc_generator.grammars.apex import ApexGrammar
from doc_generator.grammars.base import DeclarationGrammar
from doc_generator.grammars.javascript import JavaScriptGrammar
from doc_generator.logging import get_logger

logger = get_logger(__name__)


class GrammarRegistry:
    """
    Registry of dialect-specific grammars.

    Provides lookup by dialect, editor language id or file extension.
    """

    def __init__(self) -> None:
        self._grammars: dict[Dialect, DeclarationGrammar] = {}
        self._extension_map: dict[str, Dialect] = {}

    def register(self, grammar: DeclarationGrammar) -> None:
        """Register a grammar for its dialect."""
        self._grammars[grammar.dialect] = grammar
        for ext in grammar.file_extensions:
            self._extension_map[ext] = grammar.dialect
        logger.debug(
            "grammar_registered",
            dialect=grammar.dialect.value,
            extensions=sorted(grammar.file_extensions),
        )

    def get_grammar(self, dialect: Dialect) -> DeclarationGrammar | None:
        """Get grammar for a specific dialect."""
        return self._grammars.get(dialect)

    def get_grammar_for_language(self, language_id: str) -> DeclarationGrammar | None:
        """Get grammar for an editor language id (e.g. 'typescript')."""
        dialect = Dialect.from_language_id(language_id)
        if dialect:
            return self._grammars.get(dialect)
        return None

    def get_grammar_for_file(self, file_path: str) -> DeclarationGrammar | None:
        """Get grammar based on file extension."""
        dialect = self._extension_map.get(self._get_extension(file_path))
        if dialect:
            return self._grammars.get(dialect)
        return None

    def is_supported(self, file_path: str) -> bool:
        """Check if a file can be scanned."""
        return self.get_grammar_for_file(file_path) is not None

    @property
    def supported_dialects(self) -> list[Dialect]:
        """List of all supported dialects."""
        return list(self._grammars.keys())

    @property
    def supported_extensions(self) -> list[str]:
        """List of all supported file extensions."""
        return list(self._extension_map.keys())

    def _get_extension(self, file_path: str) -> str:
        """Extract file extension from path."""
        parts = file_path.replace("\\", "/").rsplit("/", 1)[-1].split(".")
        if len(parts) >= 2:
            return f".{parts[-1].lower()}"
        return ""


def create_registry(windows: ScanWindows | None = None) -> GrammarRegistry:
    """Create a registry holding every built-in grammar."""
    registry = GrammarRegistry()

    registry.register(ApexGrammar(windows))
    registry.register(JavaScriptGrammar(windows))

    logger.info(
        "grammar_registry_initialized",
        dialects=[dialect.value for dialect in registry.supported_dialects],
    )

    return registry


@lru_cache
def get_grammar_registry() -> GrammarRegistry:
    """Get the singleton grammar registry, configured from settings."""
    return create_registry(get_settings().scan_windows)
