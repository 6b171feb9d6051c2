from __future__ import annotations

import asyncio
from collections.abc import Mapping
from typing import Any

import pytest

from snipsmith.core.config import GeneratorConfig, Language
from snipsmith.core.generator import (
    NO_SNIPPETS_MESSAGE,
    SELECT_COMPONENT_MESSAGE,
    SnippetGenerator,
    generate,
)
from snipsmith.core.nodes import (
    ComponentProperty,
    DefinitionsSource,
    PropertySource,
    SceneNode,
    ValuesSource,
)
from snipsmith.core.snippets import SnippetRepository


REPOSITORY = SnippetRepository.from_mapping(
    {
        "Button": {
            "tagName": "Button",
            "propTypes": {"iconSize": "number"},
            "sections": {
                "Default": {"variant": "@variant", "children": "@label"},
                "With icon": {
                    "variant": "@variant",
                    "icon": "@icon",
                    "iconSize": "@size=large?24:16",
                    "size": "@size",
                },
            },
        }
    }
)

COMPONENT_SET = SceneNode(id="1:1", type="COMPONENT_SET", name="Button")
VARIANT = SceneNode(id="1:2", type="COMPONENT", name="Size=Large", parent=COMPONENT_SET)
INSTANCE = SceneNode(id="2:1", type="INSTANCE", name="Button")
ICON = SceneNode(id="3:1", type="COMPONENT", name="icon/star")


class _Host:
    def __init__(self, sources: Mapping[str, PropertySource]) -> None:
        self.sources = dict(sources)
        self.requested: list[str] = []

    async def get_node_by_id(self, node_id: str) -> SceneNode | None:
        return {ICON.id: ICON}.get(node_id)

    def property_source(self, node: SceneNode) -> PropertySource:
        self.requested.append(node.id)
        return self.sources[node.id]


class _RecordingEmitter:
    debug_enabled = False

    def __init__(self) -> None:
        self.events: list[tuple[str, dict[str, Any]]] = []
        self.warnings: list[str] = []

    def warning(self, message: str, exc: BaseException | None = None) -> None:
        self.warnings.append(message)

    def error(self, message: str, exc: BaseException | None = None) -> None:
        raise AssertionError(message)

    def event(self, name: str, payload: Mapping[str, Any]) -> None:
        self.events.append((name, dict(payload)))


def _host() -> _Host:
    return _Host(
        {
            "1:1": DefinitionsSource(
                {
                    "Label#1:0": ComponentProperty("TEXT", "Continue"),
                    "Icon#1:1": ComponentProperty("BOOLEAN", True),
                    "Icon#1:2": ComponentProperty("INSTANCE_SWAP", "3:1"),
                    "Variant": ComponentProperty("VARIANT", "Primary Solid"),
                    "Size": ComponentProperty("VARIANT", "Medium"),
                }
            ),
            "2:1": ValuesSource(
                {
                    "Label#1:0": ComponentProperty("TEXT", "Pay now"),
                    "Icon#1:1": ComponentProperty("BOOLEAN", False),
                    "Icon#1:2": ComponentProperty("INSTANCE_SWAP", "3:1"),
                    "Variant": ComponentProperty("VARIANT", "Ghost"),
                    "Size": ComponentProperty("VARIANT", "Large"),
                }
            ),
        }
    )


def test_variant_renders_component_set_defaults() -> None:
    generator = SnippetGenerator(REPOSITORY, _host())

    results = generator.generate_sync(VARIANT)

    assert [result.as_dict() for result in results] == [
        {
            "language": "JAVASCRIPT",
            "code": '<Button variant="primarySolid">Continue</Button>',
            "title": "Button: Default",
        },
        {
            "language": "JAVASCRIPT",
            "code": (
                "<Button\n"
                '  variant="primarySolid"\n'
                '  icon="IconStar"\n'
                "  iconSize={16}\n"
                '  size="medium"\n'
                "/>"
            ),
            "title": "Button: With icon",
        },
    ]


def test_instance_hides_toggled_off_swap() -> None:
    results = SnippetGenerator(REPOSITORY, _host()).generate_sync(INSTANCE)

    assert results[0].code == '<Button variant="ghost">Pay now</Button>'
    assert results[1].code == (
        '<Button\n  variant="ghost"\n  iconSize={24}\n  size="large"\n/>'
    )


@pytest.mark.parametrize("node_type", ["FRAME", "TEXT", "GROUP"])
def test_non_component_selection_degrades(node_type: str) -> None:
    host = _host()
    node = SceneNode(id="9:1", type=node_type, name="Button")

    results = SnippetGenerator(REPOSITORY, host).generate_sync(node)

    assert len(results) == 1
    assert results[0].language is Language.PLAINTEXT
    assert results[0].code == SELECT_COMPONENT_MESSAGE
    assert results[0].title == "Component Snippets"
    assert host.requested == []


def test_unknown_component_degrades_without_reading_properties() -> None:
    host = _host()
    emitter = _RecordingEmitter()
    node = SceneNode(id="5:1", type="INSTANCE", name="Tooltip")

    results = SnippetGenerator(REPOSITORY, host, emitter=emitter).generate_sync(node)

    assert [result.code for result in results] == [NO_SNIPPETS_MESSAGE]
    assert results[0].language is Language.PLAINTEXT
    assert host.requested == []
    assert emitter.events == [("snippet_missing", {"component": "Tooltip"})]


def test_resolution_event_is_emitted() -> None:
    emitter = _RecordingEmitter()

    SnippetGenerator(REPOSITORY, _host(), emitter=emitter).generate_sync(INSTANCE)

    assert emitter.events == [
        ("snippet_resolved", {"component": "Button", "sections": 2, "parameters": 4})
    ]
    assert emitter.warnings == []


def test_fallback_title_and_language_follow_config() -> None:
    config = GeneratorConfig(fallback_title="Snippets", language=Language.TYPESCRIPT)
    generator = SnippetGenerator(REPOSITORY, _host(), config=config)

    missing = generator.generate_sync(SceneNode(id="9:2", type="FRAME", name="x"))
    found = generator.generate_sync(INSTANCE)

    assert missing[0].title == "Snippets"
    assert {result.language for result in found} == {Language.TYPESCRIPT}


def test_module_level_generate_with_concurrent_lookups() -> None:
    config = GeneratorConfig(concurrent_swap_lookups=True)

    results = asyncio.run(generate(VARIANT, REPOSITORY, _host(), config=config))

    assert [result.title for result in results] == ["Button: Default", "Button: With icon"]
    assert 'icon="IconStar"' in results[1].code
