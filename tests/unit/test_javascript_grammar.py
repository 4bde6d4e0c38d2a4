"""Tests for the JavaScript/TypeScript grammar."""

import pytest

from doc_generator.core import DeclarationKind, Dialect
from doc_generator.grammars import JavaScriptGrammar, infer_variable_type
from doc_generator.scanning.document import TextDocument


def kind_of(grammar: JavaScriptGrammar, line: str) -> DeclarationKind | None:
    return grammar.kind_at_line(TextDocument([line]), 0)


class TestJavaScriptGrammar:
    def test_dialect(self, js: JavaScriptGrammar):
        assert js.dialect == Dialect.JAVASCRIPT

    def test_file_extensions(self, js: JavaScriptGrammar):
        assert {".js", ".ts", ".tsx"} <= js.file_extensions

    @pytest.mark.parametrize(
        "line",
        [
            "    connectedCallback() {",
            "    async handleClick(event) {",
            "    static create(options) {",
            "    private render(items: Item[]): string {",
            "    get value() {",
            "    loadAccounts: function (component, helper) {",
            "    save: async function(record) {",
        ],
    )
    def test_methods(self, js: JavaScriptGrammar, line: str):
        assert kind_of(js, line) == DeclarationKind.METHOD

    @pytest.mark.parametrize(
        "line",
        [
            "function add(a, b) {",
            "export function add(a, b) {",
            "export default async function load() {",
            "const add = (a, b) => a + b;",
            "export const load = async () => {",
            "let handler = function (event) {",
            "const double = x => x * 2;",
        ],
    )
    def test_functions(self, js: JavaScriptGrammar, line: str):
        assert kind_of(js, line) == DeclarationKind.FUNCTION

    @pytest.mark.parametrize(
        "line",
        [
            "class Greeter {",
            "export default class Greeter extends LightningElement {",
            "export abstract class Shape {",
        ],
    )
    def test_classes(self, js: JavaScriptGrammar, line: str):
        assert kind_of(js, line) == DeclarationKind.CLASS

    @pytest.mark.parametrize(
        "line",
        [
            "    recordId = '';",
            "    private count: number = 0;",
            "    #secret = 42;",
        ],
    )
    def test_properties(self, js: JavaScriptGrammar, line: str):
        assert kind_of(js, line) == DeclarationKind.PROPERTY

    @pytest.mark.parametrize(
        "line",
        [
            "const label = 'Hello';",
            "export let count;",
            "var items = [];",
        ],
    )
    def test_variables(self, js: JavaScriptGrammar, line: str):
        assert kind_of(js, line) == DeclarationKind.VARIABLE

    @pytest.mark.parametrize(
        "line",
        [
            "    if (ready) {",
            "    for (const item of items) {",
            "    while (running) {",
            "    } catch (error) {",
            "    switch (kind) {",
            "    return compute(x);",
            "    return;",
            "    break;",
            "    console.log(value);",
            "import { LightningElement } from 'lwc';",
        ],
    )
    def test_statements_are_not_declarations(self, js: JavaScriptGrammar, line: str):
        assert kind_of(js, line) is None

    def test_decorators_are_annotations(self, js: JavaScriptGrammar):
        assert js.is_annotation_line("    @api")
        assert js.is_annotation_line("    @wire(getRecord, { recordId: '$recordId' })")
        assert not js.is_annotation_line("    recordId;")

    @pytest.mark.parametrize(
        "line",
        ["    @api recordId;", "    @track items = [];", "    recordId;", "    #count?;"],
    )
    def test_class_fields(self, js: JavaScriptGrammar, line: str):
        assert kind_of(js, line) == DeclarationKind.PROPERTY

    def test_decorator_alone_declares_nothing(self, js: JavaScriptGrammar):
        assert kind_of(js, "    @api") is None
        assert kind_of(js, "    @wire(getRecord, { recordId: '$recordId' })") is None

    def test_enclosing_class(self, js: JavaScriptGrammar, sample_lwc_code: str):
        doc = TextDocument.from_text(sample_lwc_code)
        assert js.find_enclosing_type_name(doc, 6) == "Greeter"


class TestJavaScriptParameterName:
    @pytest.mark.parametrize(
        ("segment", "expected"),
        [
            ("a", "a"),
            ("b = 2", "b"),
            ("name: string", "name"),
            ("{ loud = false }", "loud"),
            ("...rest", "rest"),
            ("$el", "$el"),
        ],
    )
    def test_parameter_name(self, js: JavaScriptGrammar, segment: str, expected: str):
        assert js.parameter_name(segment) == expected

    def test_bare_arrow_parameter(self, js: JavaScriptGrammar):
        assert js.bare_parameters("const double = x => x * 2;") == ["x"]
        assert js.bare_parameters("const add = (a, b) => a + b;") is None
        assert js.bare_parameters("function run(cb = done => done(), b) {") is None
        assert js.bare_parameters("export const save = async record => record;") == ["record"]


class TestInferVariableType:
    @pytest.mark.parametrize(
        ("line", "expected"),
        [
            ("const label = 'Hello';", "string"),
            ('const label = "Hello";', "string"),
            ("const count = 42;", "number"),
            ("const ratio = -0.5", "number"),
            ("let ready = true;", "boolean"),
            ("const items = [1, 2];", "Array<any>"),
            ("const options = { a: 1 };", "Object"),
            ("const run = () => go();", "Function"),
            ("const run = function () {};", "Function"),
            ("const when = new Date();", "Date"),
            ("const total: number = compute();", "number"),
            ("const value = compute();", None),
            ("let pending;", None),
        ],
    )
    def test_infer(self, line: str, expected: str | None):
        assert infer_variable_type(TextDocument([line]), 0) == expected
