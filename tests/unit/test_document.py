"""Tests for document snapshots."""

import pytest

from doc_generator.scanning.document import LineSource, TextDocument, clamp_line


class TestTextDocument:
    def test_splits_on_any_line_ending(self):
        doc = TextDocument.from_text("a\r\nb\rc\nd")
        assert doc.lines == ("a", "b", "c", "d")
        assert doc.line_count == 4

    def test_trailing_newline_yields_empty_last_line(self):
        doc = TextDocument.from_text("a\n")
        assert doc.lines == ("a", "")

    def test_line_text_out_of_range(self):
        doc = TextDocument.from_text("only")
        with pytest.raises(IndexError):
            doc.line_text(1)

    def test_text_round_trip(self):
        text = "one\ntwo\n"
        assert TextDocument.from_text(text).text() == text

    def test_satisfies_line_source(self):
        assert isinstance(TextDocument(["x"]), LineSource)


def test_clamp_line():
    doc = TextDocument(["a", "b", "c"])
    assert clamp_line(doc, -5) == 0
    assert clamp_line(doc, 1) == 1
    assert clamp_line(doc, 99) == 2
