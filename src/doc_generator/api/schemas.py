"""Pydantic schemas for API request/response models."""

from pydantic import BaseModel, Field, model_validator


# ============== Request Schemas ==============


class SourceRequest(BaseModel):
    """A document snapshot and its dialect hint."""

    text: str = Field(
        ...,
        description="Full text of the source document",
    )
    language: str | None = Field(
        None,
        description="Editor language id (apex, javascript, typescript, ...)",
        examples=["apex"],
    )
    file_path: str | None = Field(
        None,
        description="File path used to pick the dialect when no language is given",
        examples=["force-app/main/default/classes/AccountService.cls"],
    )

    @model_validator(mode="after")
    def require_language_or_path(self) -> "SourceRequest":
        if not self.language and not self.file_path:
            raise ValueError("either language or file_path is required")
        return self


class DocumentRequest(SourceRequest):
    """A document snapshot and a cursor line."""

    line: int = Field(
        ...,
        ge=0,
        description="0-indexed cursor line",
    )


class CompletionRequest(DocumentRequest):
    """Cursor position inside a doc comment."""

    character: int = Field(
        0,
        ge=0,
        description="0-indexed cursor column",
    )


# ============== Response Schemas ==============


class DeclarationResponse(BaseModel):
    """A located declaration and its structural facts."""

    kind: str
    line: int
    insert_line: int
    enclosing_type: str | None = None
    parameters: list[str] = []


class LocateResponse(BaseModel):
    """Result of a declaration lookup; declaration is null when none is nearby."""

    dialect: str
    declaration: DeclarationResponse | None = None


class DocPlanResponse(BaseModel):
    """A generated doc comment, where it goes, and the document after insertion."""

    dialect: str
    template_name: str
    kind: str | None = None
    declaration_line: int | None = None
    parameters: list[str] = []
    insert_line: int
    insert_column: int
    is_file_header: bool = False
    lines: list[str]
    snippet: str
    rendered_text: str


class CompletionItemResponse(BaseModel):
    """One completion suggestion."""

    label: str
    insert_text: str
    kind: str
    detail: str
    replace_start: int | None = None
    replace_end: int | None = None


class CompletionResponse(BaseModel):
    """Completion suggestions; empty outside doc comment blocks."""

    dialect: str
    trigger_characters: list[str]
    items: list[CompletionItemResponse]


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    dialects: list[str]


class ErrorResponse(BaseModel):
    """Error response."""

    detail: str
