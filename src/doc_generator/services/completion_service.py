"""Doc-tag completion suggestions inside doc comment blocks."""

from doc_generator.core import CompletionItemKind, CompletionSuggestion, DeclarationKind, Dialect
from doc_generator.grammars.base import DeclarationGrammar
from doc_generator.scanning.comments import find_comment_block_end, is_inside_comment_block
from doc_generator.scanning.document import LineSource
from doc_generator.scanning.locator import locate

APEX_COMMON_TAGS = (
    "@description",
    "@example",
    "@author",
    "@date",
    "@group",
    "@group-content",
    "@see",
)
APEX_KIND_TAGS: dict[DeclarationKind, tuple[str, ...]] = {
    DeclarationKind.METHOD: ("@param", "@return", "@throws"),
    DeclarationKind.CONSTRUCTOR: ("@param", "@return", "@throws"),
}
APEX_INLINE_SNIPPETS = (
    ("<<TypeName>>", "<<${1:TypeName}>>"),
    ("{@link TypeName}", "{@link ${1:TypeName}}"),
)

JS_COMMON_TAGS = ("@description", "@deprecated", "@see")
_JS_CALLABLE_TAGS = ("@param", "@returns", "@throws", "@example", "@async")
_JS_VALUE_TAGS = ("@type", "@private", "@public", "@readonly")
JS_KIND_TAGS: dict[DeclarationKind, tuple[str, ...]] = {
    DeclarationKind.FUNCTION: _JS_CALLABLE_TAGS,
    DeclarationKind.METHOD: _JS_CALLABLE_TAGS,
    DeclarationKind.VARIABLE: _JS_VALUE_TAGS,
    DeclarationKind.PROPERTY: _JS_VALUE_TAGS,
}
JS_INLINE_SNIPPETS = (
    ("{@link TypeOrURL}", "{@link ${1:TypeOrURL}}"),
    ("{@linkcode TypeOrURL}", "{@linkcode ${1:TypeOrURL}}"),
)

# Trigger characters an editor should register for each dialect
TRIGGER_CHARACTERS: dict[Dialect, tuple[str, ...]] = {
    Dialect.APEX: ("@", "{", "<"),
    Dialect.JAVASCRIPT: ("@", "{"),
}


class CompletionService:
    """Suggests doc tags for the declaration a doc comment is being written for."""

    def suggest(
        self,
        doc: LineSource,
        line: int,
        character: int,
        grammar: DeclarationGrammar,
    ) -> list[CompletionSuggestion]:
        """
        Suggest tags at (line, character).

        Nothing is suggested outside a doc comment block. Common tags come
        first, then tags specific to the located declaration kind, then the
        inline-reference snippets.
        """
        if not is_inside_comment_block(doc, line, grammar.windows.comment_lookback):
            return []

        site = locate(doc, self._declaration_focus(doc, line, grammar), grammar)
        replace_range = self._at_sign_range(doc, line, character)

        if grammar.dialect is Dialect.APEX:
            kind = site.kind if site else DeclarationKind.CLASS
            common, by_kind, inline = APEX_COMMON_TAGS, APEX_KIND_TAGS, APEX_INLINE_SNIPPETS
            detail = "ApexDoc tag"
        else:
            kind = site.kind if site else DeclarationKind.FUNCTION
            common, by_kind, inline = JS_COMMON_TAGS, JS_KIND_TAGS, JS_INLINE_SNIPPETS
            detail = "JSDoc tag"

        suggestions = [
            self._tag(tag, detail, replace_range)
            for tag in (*common, *by_kind.get(kind, ()))
        ]
        suggestions.extend(
            CompletionSuggestion(
                label=label,
                insert_text=snippet,
                item_kind=CompletionItemKind.SNIPPET,
                detail="Inline reference",
            )
            for label, snippet in inline
        )
        return suggestions

    def _declaration_focus(self, doc: LineSource, line: int, grammar: DeclarationGrammar) -> int:
        # First code line below the comment block being written
        block_end = find_comment_block_end(doc, line, grammar.windows.comment_lookback)
        if block_end is None:
            return line
        focus = block_end + 1
        while focus < doc.line_count and not doc.line_text(focus).strip():
            focus += 1
        return focus if focus < doc.line_count else line

    def _tag(
        self, label: str, detail: str, replace_range: tuple[int, int] | None
    ) -> CompletionSuggestion:
        return CompletionSuggestion(
            label=label,
            insert_text=label + " ",
            item_kind=CompletionItemKind.KEYWORD,
            detail=detail,
            replace_range=replace_range,
        )

    def _at_sign_range(self, doc: LineSource, line: int, character: int) -> tuple[int, int] | None:
        # Overwrite a just-typed '@' so accepting "@param" does not give "@@param".
        if character <= 0 or line >= doc.line_count:
            return None
        text = doc.line_text(line)
        if character <= len(text) and text[character - 1] == "@":
            return (character - 1, character)
        return None
