"""Template storage, patching and snippet rendering."""

from doc_generator.templates.patch import ensure_return_tag, inject_parameters, next_tab_stop
from doc_generator.templates.snippets import render_snippet
from doc_generator.templates.store import (
    BUNDLED_TEMPLATE_DIR,
    TemplateCache,
    TemplateLines,
    TemplateStore,
)

__all__ = [
    "BUNDLED_TEMPLATE_DIR",
    "TemplateCache",
    "TemplateLines",
    "TemplateStore",
    "ensure_return_tag",
    "inject_parameters",
    "next_tab_stop",
    "render_snippet",
]
