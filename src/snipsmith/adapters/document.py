"""Design host backed by an exported document (JSON or YAML).

The export lists nodes either flat, with ``parent`` ids, or nested under
``children``::

    nodes:
      - id: "1:1"
        type: COMPONENT_SET
        name: Button
        componentPropertyDefinitions:
          "Label#1:0": {type: TEXT, defaultValue: Go}
        children:
          - {id: "1:2", type: COMPONENT, name: "Size=Large"}
      - id: "2:1"
        type: INSTANCE
        name: Button
        componentProperties:
          "Label#1:0": {type: TEXT, value: Buy}
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
import json
import logging
from pathlib import Path
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError
import yaml

from snipsmith.core.exceptions import DocumentError
from snipsmith.core.nodes import (
    ComponentProperty,
    DefinitionsSource,
    NodeType,
    PropertySource,
    SceneNode,
    ValuesSource,
)


logger = logging.getLogger(__name__)


class PropertyPayload(BaseModel):
    """Raw property definition or value as exported by the design tool."""

    model_config = ConfigDict(extra="ignore")

    type: str
    value: str | bool | None = Field(
        default=None, validation_alias=AliasChoices("value", "defaultValue")
    )


class NodePayload(BaseModel):
    """Raw node entry of a document export."""

    model_config = ConfigDict(extra="ignore")

    id: str
    type: str
    name: str = ""
    parent: str | None = None
    definitions: dict[str, PropertyPayload] | None = Field(
        default=None, validation_alias="componentPropertyDefinitions"
    )
    properties: dict[str, PropertyPayload] | None = Field(
        default=None, validation_alias="componentProperties"
    )
    children: list[NodePayload] = Field(default_factory=list)


NodePayload.model_rebuild()


class DocumentModel(BaseModel):
    """Top-level document export."""

    model_config = ConfigDict(extra="ignore")

    nodes: list[NodePayload] = Field(default_factory=list)


def _flatten(
    payloads: list[NodePayload], parent: str | None = None
) -> Iterator[tuple[NodePayload, str | None]]:
    for payload in payloads:
        yield payload, payload.parent or parent
        yield from _flatten(payload.children, payload.id)


def _properties(entries: Mapping[str, PropertyPayload] | None) -> dict[str, ComponentProperty]:
    return {
        name: ComponentProperty(type=entry.type, value=entry.value)
        for name, entry in (entries or {}).items()
    }


class DocumentHost:
    """In-memory :class:`~snipsmith.core.nodes.DesignHost` implementation."""

    def __init__(self, document: DocumentModel) -> None:
        self._payloads: dict[str, NodePayload] = {}
        self._parents: dict[str, str | None] = {}
        for payload, parent in _flatten(document.nodes):
            if payload.id in self._payloads:
                raise DocumentError(f"Duplicate node id '{payload.id}' in document.")
            self._payloads[payload.id] = payload
            self._parents[payload.id] = parent

        self._nodes: dict[str, SceneNode] = {}
        for node_id in self._payloads:
            self._build(node_id, ())

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> DocumentHost:
        try:
            document = DocumentModel.model_validate(data)
        except ValidationError as exc:
            raise DocumentError(f"Invalid design document: {exc}") from exc
        return cls(document)

    @classmethod
    def from_path(cls, path: Path | str) -> DocumentHost:
        """Load a document export from a ``.json``, ``.yml`` or ``.yaml`` file."""
        source = Path(path)
        try:
            text = source.read_text(encoding="utf-8")
        except OSError as exc:
            raise DocumentError(f"Unable to read design document '{source}'.") from exc
        try:
            if source.suffix.lower() in {".yml", ".yaml"}:
                data = yaml.safe_load(text) or {}
            else:
                data = json.loads(text)
        except (yaml.YAMLError, json.JSONDecodeError) as exc:
            raise DocumentError(f"Unable to parse design document '{source}'.") from exc
        if not isinstance(data, Mapping):
            raise DocumentError(f"Design document '{source}' must contain a mapping.")
        return cls.from_mapping(data)

    def _build(self, node_id: str, stack: tuple[str, ...]) -> SceneNode:
        cached = self._nodes.get(node_id)
        if cached is not None:
            return cached
        if node_id in stack:
            raise DocumentError(f"Parent cycle detected at node '{node_id}'.")
        payload = self._payloads[node_id]
        parent_id = self._parents[node_id]
        parent = None
        if parent_id is not None:
            if parent_id not in self._payloads:
                raise DocumentError(f"Node '{node_id}' references unknown parent '{parent_id}'.")
            parent = self._build(parent_id, (*stack, node_id))
        node = SceneNode(id=payload.id, type=payload.type, name=payload.name, parent=parent)
        self._nodes[node_id] = node
        return node

    async def get_node_by_id(self, node_id: str) -> SceneNode | None:
        return self._nodes.get(node_id)

    def node(self, node_id: str) -> SceneNode:
        """Return the node with ``node_id`` or raise :class:`DocumentError`."""
        try:
            return self._nodes[node_id]
        except KeyError as exc:
            raise DocumentError(f"Node '{node_id}' does not exist in the document.") from exc

    def find_by_name(self, name: str) -> list[SceneNode]:
        """Return the nodes whose name matches ``name`` exactly, in document order."""
        return [node for node in self.nodes() if node.name == name]

    def nodes(self) -> list[SceneNode]:
        """Return every node in document order."""
        return [self._nodes[node_id] for node_id in self._payloads]

    def property_source(self, node: SceneNode) -> PropertySource:
        payload = self._payloads.get(node.id)
        if payload is None:
            logger.debug("Node %s is not part of the document; no properties", node.id)
            return ValuesSource() if node.type == NodeType.INSTANCE else DefinitionsSource()
        if node.type == NodeType.INSTANCE:
            return ValuesSource(_properties(payload.properties))
        return DefinitionsSource(_properties(payload.definitions))


__all__ = ["DocumentHost", "DocumentModel", "NodePayload", "PropertyPayload"]
