"""Read-only view of the host design tool's node model."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol, runtime_checkable


class NodeType(str, Enum):
    """Node kinds the generator distinguishes."""

    COMPONENT = "COMPONENT"
    COMPONENT_SET = "COMPONENT_SET"
    INSTANCE = "INSTANCE"


COMPONENT_NODE_TYPES = frozenset(kind.value for kind in NodeType)


class PropertyType(str, Enum):
    """Component property kinds understood by the parameter extractor."""

    TEXT = "TEXT"
    BOOLEAN = "BOOLEAN"
    VARIANT = "VARIANT"
    INSTANCE_SWAP = "INSTANCE_SWAP"


PropertyRawValue = str | bool


@dataclass(frozen=True, slots=True)
class ComponentProperty:
    """One configurable property entry, either a default or a live value."""

    type: str
    value: PropertyRawValue | None = None


@dataclass(frozen=True, slots=True)
class DefinitionsSource:
    """Property defaults declared by a component or component set."""

    definitions: Mapping[str, ComponentProperty] = field(default_factory=dict)

    def entries(self) -> Iterator[tuple[str, ComponentProperty]]:
        yield from self.definitions.items()


@dataclass(frozen=True, slots=True)
class ValuesSource:
    """Property values set on a placed instance."""

    values: Mapping[str, ComponentProperty] = field(default_factory=dict)

    def entries(self) -> Iterator[tuple[str, ComponentProperty]]:
        yield from self.values.items()


PropertySource = DefinitionsSource | ValuesSource


@dataclass(frozen=True, slots=True)
class SceneNode:
    """Minimal node reference exposed by the host."""

    id: str
    type: str
    name: str
    parent: SceneNode | None = field(default=None, compare=False)

    @property
    def is_component(self) -> bool:
        """Return True for components, component sets and instances."""
        return self.type in COMPONENT_NODE_TYPES

    @property
    def in_component_set(self) -> bool:
        """Return True when the node is a variant belonging to a component set."""
        return (
            self.type == NodeType.COMPONENT
            and self.parent is not None
            and self.parent.type == NodeType.COMPONENT_SET
        )


@runtime_checkable
class DesignHost(Protocol):
    """Collaborator giving access to the host document."""

    async def get_node_by_id(self, node_id: str) -> SceneNode | None: ...

    def property_source(self, node: SceneNode) -> PropertySource: ...


__all__ = [
    "COMPONENT_NODE_TYPES",
    "ComponentProperty",
    "DefinitionsSource",
    "DesignHost",
    "NodeType",
    "PropertyRawValue",
    "PropertySource",
    "PropertyType",
    "SceneNode",
    "ValuesSource",
]
