"""Declaration lookup and doc comment generation endpoints."""

from fastapi import APIRouter, HTTPException, status

from doc_generator.api.dependencies import DocService, Registry, resolve_grammar
from doc_generator.api.schemas import (
    DeclarationResponse,
    DocPlanResponse,
    DocumentRequest,
    ErrorResponse,
    LocateResponse,
    SourceRequest,
)
from doc_generator.core import DocGeneratorError, DocPlan
from doc_generator.grammars import DeclarationGrammar
from doc_generator.logging import get_logger
from doc_generator.scanning.document import TextDocument
from doc_generator.services import BufferInsertionSink, DocCommentService

logger = get_logger(__name__)

router = APIRouter(tags=["docs"])


@router.post(
    "/declarations/locate",
    response_model=LocateResponse,
    responses={422: {"model": ErrorResponse}},
)
def locate_declaration(
    request: DocumentRequest,
    registry: Registry,
    doc_service: DocService,
) -> LocateResponse:
    """
    Find the declaration nearest to a cursor line.

    Returns the declaration kind and line, the enclosing type, parameter
    names and the line a doc comment would be inserted at. `declaration`
    is null when nothing is nearby.
    """
    grammar = resolve_grammar(registry, request)
    document = TextDocument.from_text(request.text)

    info = doc_service.describe(document, request.line, grammar)
    if info is None:
        return LocateResponse(dialect=grammar.dialect.value)

    return LocateResponse(
        dialect=grammar.dialect.value,
        declaration=DeclarationResponse(
            kind=info.site.kind.value,
            line=info.site.line,
            insert_line=info.insert_line,
            enclosing_type=info.enclosing_type,
            parameters=list(info.parameters),
        ),
    )


@router.post(
    "/docs/generate",
    response_model=DocPlanResponse,
    responses={
        404: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
def generate_doc(
    request: DocumentRequest,
    registry: Registry,
    doc_service: DocService,
) -> DocPlanResponse:
    """
    Generate a doc comment for the declaration near a cursor line.

    The response carries the snippet (with tab-stop placeholders) and the
    document text after inserting it with every placeholder defaulted.
    """
    grammar = resolve_grammar(registry, request)
    document = TextDocument.from_text(request.text)

    try:
        plan = doc_service.generate(document, request.line, grammar)
    except DocGeneratorError as e:
        logger.error("doc_generation_failed", dialect=grammar.dialect.value, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e),
        )

    if plan is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No declaration detected near line {request.line}",
        )

    return _plan_response(grammar, document, plan, doc_service)


@router.post(
    "/docs/file-header",
    response_model=DocPlanResponse,
    responses={
        404: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
def generate_file_header(
    request: SourceRequest,
    registry: Registry,
    doc_service: DocService,
) -> DocPlanResponse:
    """
    Generate a JSDoc file header for an Aura helper or controller.

    Answers 404 when the document is not an Aura helper or already starts
    with a doc comment.
    """
    grammar = resolve_grammar(registry, request)
    document = TextDocument.from_text(request.text)

    try:
        plan = doc_service.file_header(document, grammar)
    except DocGeneratorError as e:
        logger.error("file_header_failed", dialect=grammar.dialect.value, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e),
        )

    if plan is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="File header already exists or this is not an Aura helper file",
        )

    return _plan_response(grammar, document, plan, doc_service)


def _plan_response(
    grammar: DeclarationGrammar,
    document: TextDocument,
    plan: DocPlan,
    doc_service: DocCommentService,
) -> DocPlanResponse:
    sink = BufferInsertionSink(document)
    doc_service.apply(plan, sink)

    return DocPlanResponse(
        dialect=grammar.dialect.value,
        template_name=plan.template_name,
        kind=plan.kind.value if plan.kind else None,
        declaration_line=plan.declaration_line,
        parameters=list(plan.parameters),
        insert_line=plan.insert_line,
        insert_column=plan.insert_column,
        is_file_header=plan.is_file_header,
        lines=list(plan.lines),
        snippet=plan.snippet,
        rendered_text=sink.text(),
    )
