"""FastAPI dependency injection."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends, HTTPException, status

from doc_generator.api.schemas import SourceRequest
from doc_generator.config import get_settings
from doc_generator.grammars import DeclarationGrammar, GrammarRegistry, get_grammar_registry
from doc_generator.services import CompletionService, DocCommentService
from doc_generator.templates import TemplateCache, TemplateStore


@lru_cache
def get_template_cache() -> TemplateCache:
    """Process-wide read-through template cache."""
    return TemplateCache(TemplateStore(get_settings().template_dir))


def get_doc_service(
    templates: TemplateCache = Depends(get_template_cache),
) -> DocCommentService:
    """Dependency for DocCommentService."""
    return DocCommentService(templates)


def get_completion_service() -> CompletionService:
    """Dependency for CompletionService."""
    return CompletionService()


def resolve_grammar(registry: GrammarRegistry, request: SourceRequest) -> DeclarationGrammar:
    """Pick the grammar for a request by language id, then by file extension."""
    grammar = None
    if request.language:
        grammar = registry.get_grammar_for_language(request.language)
    if grammar is None and request.file_path:
        grammar = registry.get_grammar_for_file(request.file_path)
    if grammar is None:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=(
                f"Unsupported language: {request.language or request.file_path}. "
                "Supported: Apex, JavaScript, TypeScript."
            ),
        )
    return grammar


# Type aliases for injected dependencies
Registry = Annotated[GrammarRegistry, Depends(get_grammar_registry)]
DocService = Annotated[DocCommentService, Depends(get_doc_service)]
CompletionSvc = Annotated[CompletionService, Depends(get_completion_service)]
