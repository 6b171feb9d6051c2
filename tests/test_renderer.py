from __future__ import annotations

from snipsmith.core.config import GeneratorConfig, Language
from snipsmith.core.renderer import (
    CodegenResult,
    render_attributes,
    render_node,
    render_section,
    render_snippet,
)
from snipsmith.core.snippets import Snippet


def _snippet(**overrides: object) -> Snippet:
    payload: dict[str, object] = {
        "tagName": "Button",
        "propTypes": {"onClick": "function", "disabled": "boolean"},
        "sections": {},
    }
    payload.update(overrides)
    return Snippet.model_validate(payload)


def test_suppressed_attribute_is_dropped_on_single_line() -> None:
    node = {"label": "@text", "disabled": "@isDisabled"}
    params = {"@text": "Go", "@isDisabled": None}

    assert render_node(node, _snippet(), params) == '<Button label="Go" />'


def test_attribute_types_select_quotes_or_braces() -> None:
    node = {"label": "Go", "disabled": "true", "onClick": "handleClick"}

    assert render_attributes(node, _snippet(), {}) == [
        'label="Go"',
        "disabled={true}",
        "onClick={handleClick}",
    ]


def test_wildcard_prop_type_applies_to_undeclared_attributes() -> None:
    snippet = _snippet(propTypes={"label": "string", "*": "expression"})
    node = {"label": "Go", "count": "3"}

    assert render_node(node, snippet, {}) == '<Button label="Go" count={3} />'


def test_four_attributes_render_one_per_line() -> None:
    node = {"a": "1", "b": "2", "c": "3", "onClick": "handler"}

    assert render_node(node, _snippet(), {}) == (
        "<Button\n"
        '  a="1"\n'
        '  b="2"\n'
        '  c="3"\n'
        "  onClick={handler}\n"
        "/>"
    )


def test_children_on_single_line() -> None:
    node = {"label": "@text", "children": "Click me"}

    assert render_node(node, _snippet(), {"@text": "Go"}) == '<Button label="Go">Click me</Button>'


def test_children_in_multi_line_layout() -> None:
    node = {"a": "1", "b": "2", "c": "3", "children": "@text"}

    assert render_node(node, _snippet(), {"@text": "Go"}) == (
        "<Button\n"
        '  a="1"\n'
        '  b="2"\n'
        '  c="3"\n'
        ">\n"
        "  Go\n"
        "</Button>"
    )


def test_suppressed_children_self_close() -> None:
    node = {"label": "x", "children": "@text"}

    assert render_node(node, _snippet(), {"@text": None}) == '<Button label="x" />'


def test_empty_children_self_close() -> None:
    assert render_node({"children": "@text"}, _snippet(), {"@text": ""}) == "<Button />"


def test_layout_counts_declared_attributes() -> None:
    node = {"a": "@hidden", "b": "@hidden", "c": "1", "d": "2"}

    assert render_node(node, _snippet(), {"@hidden": None}) == '<Button\n  c="1"\n  d="2"\n/>'


def test_layout_follows_configuration() -> None:
    config = GeneratorConfig(max_single_line_attributes=1, indent="\t")
    node = {"a": "1", "b": "2"}

    assert render_node(node, _snippet(), {}, config=config) == '<Button\n\ta="1"\n\tb="2"\n/>'


def test_render_section_joins_list_nodes() -> None:
    snippet = _snippet(sections={"Sizes": [{"size": "small"}, {"size": "large"}]})

    assert render_section(snippet.sections["Sizes"], snippet, {}) == (
        '<Button size="small" />\n<Button size="large" />'
    )


def test_render_snippet_keeps_section_order() -> None:
    snippet = _snippet(
        sections={
            "Default": {"label": "@label"},
            "Sizes": [{"size": "small"}, {"size": "large"}],
            "Disabled": {"disabled": "true", "children": "@label"},
        }
    )

    results = render_snippet(snippet, {"@label": "Go"}, "Button")

    assert [result.title for result in results] == [
        "Button: Default",
        "Button: Sizes",
        "Button: Disabled",
    ]
    assert {result.language for result in results} == {Language.JAVASCRIPT}
    assert results[0].code == '<Button label="Go" />'
    assert results[2].code == "<Button disabled={true}>Go</Button>"


def test_render_snippet_uses_configured_language() -> None:
    snippet = _snippet(sections={"Default": {"label": "Go"}})

    results = render_snippet(
        snippet, {}, "Button", config=GeneratorConfig(language=Language.TYPESCRIPT)
    )

    assert results[0].language is Language.TYPESCRIPT


def test_codegen_result_as_dict() -> None:
    result = CodegenResult(language=Language.PLAINTEXT, code="x", title="t")

    assert result.as_dict() == {"language": "PLAINTEXT", "code": "x", "title": "t"}
