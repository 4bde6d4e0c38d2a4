"""Service layer - doc generation, completions and insertion sinks."""

from doc_generator.services.completion_service import CompletionService
from doc_generator.services.doc_service import DocCommentService
from doc_generator.services.insertion import BufferInsertionSink, InsertionSink

__all__ = [
    "BufferInsertionSink",
    "CompletionService",
    "DocCommentService",
    "InsertionSink",
]
