"""File-backed template store and read-through template cache."""

import json
from pathlib import Path

from doc_generator.core import Dialect, InvalidTemplateError, TemplateNotFoundError
from doc_generator.logging import get_logger

logger = get_logger(__name__)

BUNDLED_TEMPLATE_DIR = Path(__file__).parent / "snippets"

TemplateLines = tuple[str, ...]


class TemplateStore:
    """
    Loads template bodies from `<root>/<ApexDoc|JSDoc>/<name>.json`.

    Two JSON shapes are accepted: a bare `{"body": [...]}` object, or a
    VS Code snippet file `{"Any Name": {"body": [...]}}` whose first entry
    is used. A string body is split into lines.
    """

    def __init__(self, root: Path | None = None) -> None:
        self._root = Path(root) if root else BUNDLED_TEMPLATE_DIR

    @property
    def root(self) -> Path:
        return self._root

    def path_for(self, dialect: Dialect, name: str) -> Path:
        return self._root / dialect.template_folder / f"{name}.json"

    def load(self, dialect: Dialect, name: str) -> TemplateLines:
        """
        Load the template lines for `(dialect, name)`.

        Raises:
            TemplateNotFoundError: No template file is registered.
            InvalidTemplateError: The file is not a recognised snippet shape.
        """
        folder = dialect.template_folder
        path = self.path_for(dialect, name)
        if not path.is_file():
            raise TemplateNotFoundError(folder, name)

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise InvalidTemplateError(folder, name, str(e)) from e

        body = self._extract_body(data)
        if body is None:
            raise InvalidTemplateError(folder, name, "no body array found")

        logger.debug("template_loaded", folder=folder, name=name, line_count=len(body))
        return body

    def _extract_body(self, data: object) -> TemplateLines | None:
        if not isinstance(data, dict):
            return None

        body = data.get("body")
        if body is None and data:
            first = next(iter(data.values()))
            if isinstance(first, dict):
                body = first.get("body")

        if isinstance(body, str):
            return tuple(body.splitlines())
        if isinstance(body, list) and all(isinstance(line, str) for line in body):
            return tuple(body)
        return None


class TemplateCache:
    """
    Read-through cache of template lookups keyed by (dialect, name).

    Template bodies are immutable tuples once loaded, so entries never need
    invalidating. Failed lookups are not cached.
    """

    def __init__(self, store: TemplateStore) -> None:
        self._store = store
        self._entries: dict[tuple[Dialect, str], TemplateLines] = {}

    @property
    def store(self) -> TemplateStore:
        return self._store

    def get(self, dialect: Dialect, name: str) -> TemplateLines:
        key = (dialect, name)
        hit = self._entries.get(key)
        if hit is not None:
            return hit
        lines = self._store.load(dialect, name)
        self._entries[key] = lines
        return lines

    def __contains__(self, key: tuple[Dialect, str]) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
