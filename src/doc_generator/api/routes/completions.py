"""Doc-tag completion endpoint."""

from fastapi import APIRouter

from doc_generator.api.dependencies import CompletionSvc, Registry, resolve_grammar
from doc_generator.api.schemas import CompletionItemResponse, CompletionRequest, CompletionResponse, ErrorResponse
from doc_generator.scanning.document import TextDocument
from doc_generator.services.completion_service import TRIGGER_CHARACTERS

router = APIRouter(tags=["completions"])


@router.post(
    "/completions",
    response_model=CompletionResponse,
    responses={422: {"model": ErrorResponse}},
)
def complete(
    request: CompletionRequest,
    registry: Registry,
    completion_service: CompletionSvc,
) -> CompletionResponse:
    """
    Suggest doc tags at a cursor position.

    Suggestions are only produced inside a /** ... */ block.
    """
    grammar = resolve_grammar(registry, request)
    document = TextDocument.from_text(request.text)

    suggestions = completion_service.suggest(document, request.line, request.character, grammar)

    return CompletionResponse(
        dialect=grammar.dialect.value,
        trigger_characters=list(TRIGGER_CHARACTERS[grammar.dialect]),
        items=[
            CompletionItemResponse(
                label=s.label,
                insert_text=s.insert_text,
                kind=s.item_kind.value,
                detail=s.detail,
                replace_start=s.replace_range[0] if s.replace_range else None,
                replace_end=s.replace_range[1] if s.replace_range else None,
            )
            for s in suggestions
        ],
    )
