"""API route modules."""

from doc_generator.api.routes.completions import router as completions_router
from doc_generator.api.routes.docs import router as docs_router
from doc_generator.api.routes.health import router as health_router

__all__ = [
    "completions_router",
    "docs_router",
    "health_router",
]
