"""Line-oriented declaration grammars, one per source dialect."""

from doc_generator.grammars.apex import ApexGrammar
from doc_generator.grammars.base import DeclarationGrammar, GrammarRule
from doc_generator.grammars.javascript import JavaScriptGrammar, infer_variable_type
from doc_generator.grammars.registry import (
    GrammarRegistry,
    create_registry,
    get_grammar_registry,
)

__all__ = [
    "ApexGrammar",
    "DeclarationGrammar",
    "GrammarRegistry",
    "GrammarRule",
    "JavaScriptGrammar",
    "create_registry",
    "get_grammar_registry",
    "infer_variable_type",
]
