"""Tests for the doc comment generation pipeline."""

import json
from pathlib import Path

import pytest

from doc_generator.core import DeclarationKind, TemplateNotFoundError
from doc_generator.grammars import ApexGrammar, JavaScriptGrammar
from doc_generator.scanning.document import TextDocument
from doc_generator.services import BufferInsertionSink, DocCommentService
from doc_generator.templates import TemplateCache, TemplateStore


class TestApexGeneration:
    @pytest.fixture
    def doc(self, sample_apex_code: str) -> TextDocument:
        return TextDocument.from_text(sample_apex_code)

    def test_method(self, doc_service: DocCommentService, apex: ApexGrammar, doc: TextDocument):
        plan = doc_service.generate(doc, 14, apex)

        assert plan is not None
        assert plan.template_name == "method"
        assert plan.kind == DeclarationKind.METHOD
        assert plan.declaration_line == 14
        assert plan.parameters == ("query", "limits")
        assert plan.insert_line == 13
        assert plan.lines == (
            "/**",
            " * @description ${1:What this method does}",
            " * @param query description",
            " * @param limits description",
            " * @return ${4:description}",
            " * @example",
            " * ${5:example}",
            " */",
        )

    def test_annotation_focus_documents_method_below(
        self, doc_service: DocCommentService, apex: ApexGrammar, doc: TextDocument
    ):
        plan = doc_service.generate(doc, 13, apex)
        assert plan is not None
        assert plan.declaration_line == 14
        assert plan.insert_line == 13

    def test_class(self, doc_service: DocCommentService, apex: ApexGrammar, doc: TextDocument):
        plan = doc_service.generate(doc, 0, apex)
        assert plan is not None
        assert plan.template_name == "class"
        assert plan.insert_line == 0
        assert plan.lines == doc_service.templates.get(apex.dialect, "class")

    def test_property(self, doc_service: DocCommentService, apex: ApexGrammar, doc: TextDocument):
        plan = doc_service.generate(doc, 7, apex)
        assert plan is not None
        assert plan.template_name == "property"
        # Blank lines directly above the declaration are skipped
        assert plan.insert_line == 6

    def test_enum_value(self, doc_service: DocCommentService, apex: ApexGrammar, doc: TextDocument):
        plan = doc_service.generate(doc, 2, apex)
        assert plan is not None
        assert plan.template_name == "enumValue"
        assert plan.kind == DeclarationKind.ENUM_VALUE
        assert plan.insert_line == 2

    def test_constructor_uses_method_template(
        self, doc_service: DocCommentService, apex: ApexGrammar, doc: TextDocument
    ):
        plan = doc_service.generate(doc, 10, apex)
        assert plan is not None
        assert plan.template_name == "method"
        assert plan.kind == DeclarationKind.CONSTRUCTOR
        assert plan.parameters == ("name",)
        assert " * @param name description" in plan.lines

    def test_nothing_nearby(self, doc_service: DocCommentService, apex: ApexGrammar):
        assert doc_service.generate(TextDocument.from_text("Integer x = 1;"), 0, apex) is None

    def test_empty_document(self, doc_service: DocCommentService, apex: ApexGrammar):
        assert doc_service.generate(TextDocument([]), 0, apex) is None

    def test_missing_template(self, tmp_path: Path, apex: ApexGrammar, doc: TextDocument):
        service = DocCommentService(TemplateCache(TemplateStore(tmp_path)))
        with pytest.raises(TemplateNotFoundError):
            service.generate(doc, 14, apex)

    def test_describe(self, doc_service: DocCommentService, apex: ApexGrammar, doc: TextDocument):
        info = doc_service.describe(doc, 20, apex)
        assert info is not None
        assert info.site.kind == DeclarationKind.METHOD
        assert info.site.line == 19
        assert info.insert_line == 18
        assert info.enclosing_type == "AccountService"
        assert info.parameters == ("record", "allOrNone")


class TestApexReturnTag:
    @pytest.fixture
    def service(self, tmp_path: Path) -> DocCommentService:
        folder = tmp_path / "ApexDoc"
        folder.mkdir()
        (folder / "method.json").write_text(
            json.dumps({"body": ["/**", " * @description ${1:desc}", " */"]})
        )
        return DocCommentService(TemplateCache(TemplateStore(tmp_path)))

    def test_method_gets_return(self, service: DocCommentService, apex: ApexGrammar):
        doc = TextDocument.from_text("public class Foo {\n    public Integer size(String a) {")
        plan = service.generate(doc, 1, apex)
        assert plan is not None
        assert plan.lines == (
            "/**",
            " * @description ${1:desc}",
            " * @param a description",
            " * @return ${2:description}",
            " */",
        )

    def test_constructor_gets_no_return(self, service: DocCommentService, apex: ApexGrammar):
        doc = TextDocument.from_text("public class Foo {\n    public Foo(String a) {")
        plan = service.generate(doc, 1, apex)
        assert plan is not None
        assert plan.lines == (
            "/**",
            " * @description ${1:desc}",
            " * @param a description",
            " */",
        )


class TestJavaScriptGeneration:
    @pytest.fixture
    def doc(self, sample_lwc_code: str) -> TextDocument:
        return TextDocument.from_text(sample_lwc_code)

    def test_method(self, doc_service: DocCommentService, js: JavaScriptGrammar, doc: TextDocument):
        plan = doc_service.generate(doc, 6, js)
        assert plan is not None
        assert plan.template_name == "method"
        assert plan.parameters == ("salutation", "loud")
        assert plan.lines == (
            "/**",
            " * @description ${1:What this does}",
            " * @param {any} salutation ${2:description}",
            " * @param {any} loud description",
            " * @returns {any} ${3:What is returned}",
            " */",
        )

    def test_function(self, doc_service: DocCommentService, js: JavaScriptGrammar, doc: TextDocument):
        plan = doc_service.generate(doc, 11, js)
        assert plan is not None
        assert plan.template_name == "functions"
        assert plan.lines == (
            "/**",
            " * @description ${1:What this function does}",
            " * @param {any} a ${2:description}",
            " * @param {any} b description",
            " * @returns {any} ${3:What is returned}",
            " * @example",
            " * // usage",
            " */",
        )

    def test_function_without_parameters_keeps_placeholder(
        self, doc_service: DocCommentService, js: JavaScriptGrammar
    ):
        plan = doc_service.generate(TextDocument.from_text("function run() {\n}"), 0, js)
        assert plan is not None
        assert plan.parameters == ()
        assert " * @param {any} paramName description" in plan.lines
        assert " * @returns {any} ${2:What is returned}" in plan.lines

    def test_variable_type_is_inferred(
        self, doc_service: DocCommentService, js: JavaScriptGrammar, doc: TextDocument
    ):
        plan = doc_service.generate(doc, 16, js)
        assert plan is not None
        assert plan.template_name == "variable"
        assert " * @type {string}" in plan.lines

    def test_unknown_variable_type_is_any(self, doc_service: DocCommentService, js: JavaScriptGrammar):
        plan = doc_service.generate(TextDocument.from_text("let pending;"), 0, js)
        assert plan is not None
        assert " * @type {any}" in plan.lines

    def test_class_and_property_use_method_template(
        self, doc_service: DocCommentService, js: JavaScriptGrammar, doc: TextDocument
    ):
        class_plan = doc_service.generate(doc, 2, js)
        property_plan = doc_service.generate(doc, 3, js)
        assert class_plan is not None and property_plan is not None
        assert class_plan.template_name == property_plan.template_name == "method"
        assert property_plan.kind == DeclarationKind.PROPERTY
        assert property_plan.insert_line == 3


class TestAuraFileHeader:
    def test_on_open_line(self, doc_service: DocCommentService, js: JavaScriptGrammar, sample_aura_helper: str):
        plan = doc_service.generate(TextDocument.from_text(sample_aura_helper), 1, js)
        assert plan is not None
        assert plan.is_file_header
        assert plan.template_name == "file"
        assert plan.insert_line == 0
        assert plan.kind is None
        assert plan.lines[-1] == ""

    def test_declaration_below_wins_at_top(
        self, doc_service: DocCommentService, js: JavaScriptGrammar, sample_aura_helper: str
    ):
        plan = doc_service.generate(TextDocument.from_text(sample_aura_helper), 0, js)
        assert plan is not None
        assert plan.kind == DeclarationKind.METHOD
        assert plan.parameters == ("component", "helper")

    def test_at_top_when_nothing_located(self, doc_service: DocCommentService, js: JavaScriptGrammar):
        plan = doc_service.generate(TextDocument.from_text("// helper\n({\n})"), 0, js)
        assert plan is not None
        assert plan.is_file_header

    def test_existing_header_is_not_repeated(self, doc_service: DocCommentService, js: JavaScriptGrammar):
        doc = TextDocument.from_text("/**\n * @file helper\n */\n({\n})")
        assert doc_service.generate(doc, 3, js) is None

    def test_standalone_header(self, doc_service: DocCommentService, js: JavaScriptGrammar, sample_aura_helper: str):
        plan = doc_service.file_header(TextDocument.from_text(sample_aura_helper), js)
        assert plan is not None
        assert plan.is_file_header

    def test_standalone_header_outside_aura(
        self, doc_service: DocCommentService, js: JavaScriptGrammar, apex: ApexGrammar, sample_lwc_code: str
    ):
        doc = TextDocument.from_text(sample_lwc_code)
        assert doc_service.file_header(doc, js) is None
        assert doc_service.file_header(TextDocument.from_text("({\n})"), apex) is None


class TestApply:
    def test_renders_into_buffer(self, doc_service: DocCommentService, apex: ApexGrammar):
        doc = TextDocument.from_text("public class Foo {\n    public void run(String mode) {\n    }\n}")
        plan = doc_service.generate(doc, 1, apex)
        assert plan is not None

        sink = BufferInsertionSink(doc)
        doc_service.apply(plan, sink)

        assert sink.insertions == 1
        assert sink.text() == (
            "public class Foo {\n"
            "/**\n"
            " * @description What this method does\n"
            " * @param mode description\n"
            " * @return description\n"
            " * @example\n"
            " * example\n"
            " */\n"
            "    public void run(String mode) {\n"
            "    }\n"
            "}"
        )
