"""Extraction of placeholder parameters from a component node."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
import logging

from .diagnostics import DiagnosticEmitter, NullEmitter
from .naming import normalize_component_name, normalize_property_name, normalize_variant_option
from .nodes import DesignHost, PropertyType, SceneNode


logger = logging.getLogger(__name__)

PLACEHOLDER_PREFIX = "@"

ParameterMap = dict[str, str | None]
"""Placeholder key to substituted value; ``None`` marks a suppressed parameter."""


@dataclass(slots=True)
class PropertyFacets:
    """Values collected for one normalised property key, per property kind."""

    text: str | None = None
    boolean: bool | None = None
    variant: str | None = None
    instance_swap: str | None = None

    def resolve(self) -> str | None:
        """Collapse the facets into a single parameter value.

        TEXT, VARIANT and INSTANCE_SWAP are inspected in that order and the last
        one present wins. A false boolean hides whichever of them is set.
        """
        visible = self.boolean is None or self.boolean
        value: str | bool | None = None
        for candidate in (self.text, _variant_value(self.variant), self.instance_swap):
            if candidate is None:
                continue
            if not visible:
                return None
            value = candidate
        if value is None and self.boolean is not None:
            value = self.boolean
        return _stringify(value)


def _variant_value(option: str | None) -> str | None:
    return None if option is None else normalize_variant_option(option)


def _stringify(value: str | bool | None) -> str:
    if not value:
        return ""
    if isinstance(value, bool):
        return "true"
    return str(value)


def resolve_property_target(node: SceneNode) -> SceneNode:
    """Return the node whose properties describe ``node``.

    Variants read their defaults from the owning component set.
    """
    if node.in_component_set and node.parent is not None:
        return node.parent
    return node


async def _resolve_swap_name(host: DesignHost, node_id: str) -> str | None:
    found = await host.get_node_by_id(node_id)
    if found is None:
        return None
    return normalize_component_name(found.name)


async def extract_parameters(
    node: SceneNode,
    host: DesignHost,
    *,
    concurrent: bool = False,
    emitter: DiagnosticEmitter | None = None,
) -> ParameterMap:
    """Build the placeholder parameter map for ``node``.

    Instance swap targets are looked up through ``host``; lookups run one after
    the other unless ``concurrent`` is set.
    """
    emitter = emitter or NullEmitter()
    target = resolve_property_target(node)
    source = host.property_source(target)

    facets: dict[str, PropertyFacets] = {}
    swaps: list[tuple[str, str, str]] = []

    for property_name, entry in source.entries():
        value = entry.value
        if value is None:
            continue
        key = normalize_property_name(property_name)
        if isinstance(value, bool):
            facets.setdefault(key, PropertyFacets()).boolean = value
        elif entry.type == PropertyType.TEXT:
            facets.setdefault(key, PropertyFacets()).text = value
        elif entry.type == PropertyType.VARIANT:
            facets.setdefault(key, PropertyFacets()).variant = value
        elif entry.type == PropertyType.INSTANCE_SWAP:
            facets.setdefault(key, PropertyFacets())
            swaps.append((key, property_name, value))
        else:
            logger.debug("Skipping property '%s' of unsupported type %s", property_name, entry.type)

    if concurrent:
        names = await asyncio.gather(*(_resolve_swap_name(host, node_id) for _, _, node_id in swaps))
    else:
        names = [await _resolve_swap_name(host, node_id) for _, _, node_id in swaps]

    for (key, property_name, node_id), name in zip(swaps, names):
        if name is None:
            emitter.warning(
                f"Instance swap target '{node_id}' of property '{property_name}' was not found."
            )
            name = ""
        facets[key].instance_swap = name

    return {f"{PLACEHOLDER_PREFIX}{key}": record.resolve() for key, record in facets.items()}


__all__ = [
    "PLACEHOLDER_PREFIX",
    "ParameterMap",
    "PropertyFacets",
    "extract_parameters",
    "resolve_property_target",
]
