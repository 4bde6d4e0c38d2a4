"""Tests for the buffer insertion sink."""

from doc_generator.scanning.document import TextDocument
from doc_generator.services import BufferInsertionSink


class TestBufferInsertionSink:
    def test_inserts_above_line(self):
        sink = BufferInsertionSink(TextDocument.from_text("a\nb"))
        sink.insert_snippet(["/**", " * ${1:text}", " */"], 1, 0)
        assert sink.text() == "a\n/**\n * text\n */\nb"
        assert sink.insertions == 1

    def test_inserts_at_column(self):
        sink = BufferInsertionSink(TextDocument.from_text("abc"))
        sink.insert_snippet(["X"], 0, 1)
        assert sink.text() == "aX\nbc"

    def test_column_is_clamped(self):
        sink = BufferInsertionSink(TextDocument.from_text("ab"))
        sink.insert_snippet(["X"], 0, 99)
        assert sink.text() == "abX\n"

    def test_appends_past_end(self):
        sink = BufferInsertionSink(TextDocument.from_text("a"))
        sink.insert_snippet(["X"], 5, 0)
        assert sink.text() == "a\nX\n"

    def test_empty_document(self):
        sink = BufferInsertionSink(TextDocument([]))
        sink.insert_snippet(["/**", " */"], 0, 0)
        assert sink.document.lines == ("/**", " */", "")

    def test_original_document_is_untouched(self):
        original = TextDocument.from_text("a")
        sink = BufferInsertionSink(original)
        sink.insert_snippet(["X"], 0, 0)
        assert original.lines == ("a",)
        assert sink.document.lines == ("X", "a")
