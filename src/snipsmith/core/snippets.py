"""Pydantic models and repository for component snippet templates.

A snippet file maps component names to templates::

    {
      "Button": {
        "tagName": "Button",
        "propTypes": {"onClick": "function", "*": "string"},
        "sections": {
          "Default": {"label": "@label", "children": "@text"},
          "Sizes": [{"size": "small"}, {"size": "large"}]
        }
      }
    }

``name`` and ``props`` are accepted as aliases of ``tagName`` and
``sections``.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
import json
from pathlib import Path
from types import MappingProxyType
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator
import yaml

from .exceptions import SnippetRepositoryError
from .naming import normalize_component_name
from .nodes import SceneNode


CHILDREN_ATTRIBUTE = "children"
WILDCARD_PROP_TYPE = "*"
STRING_PROP_TYPE = "string"

TemplateNode = dict[str, str]


class OneNode(BaseModel):
    """Section rendering a single template node."""

    model_config = ConfigDict(frozen=True)

    node: TemplateNode

    @property
    def nodes(self) -> tuple[TemplateNode, ...]:
        return (self.node,)


class NodeList(BaseModel):
    """Section rendering an ordered list of template nodes."""

    model_config = ConfigDict(frozen=True)

    nodes: tuple[TemplateNode, ...]


Section = OneNode | NodeList


def _coerce_node(raw: Any, where: str) -> TemplateNode:
    if not isinstance(raw, Mapping):
        raise ValueError(f"{where} must be a mapping of attribute names to strings.")
    node: dict[str, str] = {}
    for attribute, value in raw.items():
        if isinstance(value, bool):
            value = "true" if value else "false"
        elif isinstance(value, int | float):
            value = str(value)
        if not isinstance(value, str):
            raise ValueError(f"{where}: attribute '{attribute}' must be a string.")
        node[str(attribute)] = value
    return node


class Snippet(BaseModel):
    """Template used to render one component."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    tag_name: str = Field(validation_alias=AliasChoices("tagName", "tag_name", "name"))
    prop_types: dict[str, str] = Field(
        default_factory=dict, validation_alias=AliasChoices("propTypes", "prop_types")
    )
    sections: dict[str, Section] = Field(
        default_factory=dict, validation_alias=AliasChoices("sections", "props")
    )

    @field_validator("prop_types", mode="before")
    @classmethod
    def _coerce_prop_types(cls, value: Any) -> dict[str, str]:
        if value is None:
            return {}
        if not isinstance(value, Mapping):
            raise ValueError("propTypes must be a mapping.")
        # Untyped entries fall through to the wildcard.
        return {str(key): str(kind) for key, kind in value.items() if kind not in (None, "")}

    @field_validator("sections", mode="before")
    @classmethod
    def _build_sections(cls, value: Any) -> dict[str, Section]:
        if value is None:
            return {}
        if not isinstance(value, Mapping):
            raise ValueError("sections must be a mapping of titles to template nodes.")
        sections: dict[str, Section] = {}
        for title, raw in value.items():
            if isinstance(raw, OneNode | NodeList):
                sections[str(title)] = raw
            elif isinstance(raw, list):
                sections[str(title)] = NodeList(
                    nodes=tuple(
                        _coerce_node(item, f"section '{title}' item {index}")
                        for index, item in enumerate(raw)
                    )
                )
            else:
                sections[str(title)] = OneNode(node=_coerce_node(raw, f"section '{title}'"))
        return sections

    def prop_type(self, attribute: str) -> str:
        """Return the rendering type declared for ``attribute``."""
        return (
            self.prop_types.get(attribute)
            or self.prop_types.get(WILDCARD_PROP_TYPE)
            or STRING_PROP_TYPE
        )


class SnippetRepository:
    """Immutable mapping from normalised component names to snippets."""

    def __init__(self, snippets: Mapping[str, Snippet] | None = None) -> None:
        self._snippets: Mapping[str, Snippet] = MappingProxyType(dict(snippets or {}))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> SnippetRepository:
        """Validate raw snippet data as parsed from JSON or YAML."""
        if not isinstance(data, Mapping):
            raise SnippetRepositoryError("Snippet data must be a mapping of component names.")
        snippets: dict[str, Snippet] = {}
        for name, payload in data.items():
            try:
                snippets[str(name)] = Snippet.model_validate(payload)
            except ValidationError as exc:
                raise SnippetRepositoryError(f"Invalid snippet '{name}': {exc}") from exc
        return cls(snippets)

    @classmethod
    def from_path(cls, path: Path | str) -> SnippetRepository:
        """Load a repository from a ``.json``, ``.yml`` or ``.yaml`` file."""
        source = Path(path)
        try:
            text = source.read_text(encoding="utf-8")
        except OSError as exc:
            raise SnippetRepositoryError(f"Unable to read snippets from '{source}'.") from exc
        try:
            if source.suffix.lower() in {".yml", ".yaml"}:
                data = yaml.safe_load(text) or {}
            else:
                data = json.loads(text)
        except (yaml.YAMLError, json.JSONDecodeError) as exc:
            raise SnippetRepositoryError(f"Unable to parse snippets file '{source}'.") from exc
        return cls.from_mapping(data)

    def get(self, name: str) -> Snippet | None:
        return self._snippets.get(name)

    def names(self) -> list[str]:
        return list(self._snippets)

    def __contains__(self, name: object) -> bool:
        return name in self._snippets

    def __iter__(self) -> Iterator[str]:
        return iter(self._snippets)

    def __len__(self) -> int:
        return len(self._snippets)


def lookup_name(node: SceneNode) -> str:
    """Return the repository key for ``node``.

    Variants inside a component set are looked up by the set's name.
    """
    raw = node.parent.name if node.in_component_set and node.parent is not None else node.name
    return normalize_component_name(raw)


__all__ = [
    "CHILDREN_ATTRIBUTE",
    "STRING_PROP_TYPE",
    "WILDCARD_PROP_TYPE",
    "NodeList",
    "OneNode",
    "Section",
    "Snippet",
    "SnippetRepository",
    "TemplateNode",
    "lookup_name",
]
