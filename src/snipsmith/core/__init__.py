"""Core snippet generation primitives."""

from __future__ import annotations

from .config import GeneratorConfig, Language, load_config
from .diagnostics import DiagnosticEmitter, LoggingEmitter, NullEmitter
from .exceptions import ConfigError, DocumentError, SnippetError, SnippetRepositoryError
from .generator import NO_SNIPPETS_MESSAGE, SELECT_COMPONENT_MESSAGE, SnippetGenerator, generate
from .naming import normalize_component_name, normalize_property_name, normalize_variant_option
from .nodes import (
    ComponentProperty,
    DefinitionsSource,
    DesignHost,
    NodeType,
    PropertySource,
    PropertyType,
    SceneNode,
    ValuesSource,
)
from .parameters import ParameterMap, extract_parameters
from .renderer import CodegenResult, render_node, render_snippet
from .snippets import NodeList, OneNode, Snippet, SnippetRepository, lookup_name
from .substitution import substitute


__all__ = [
    "NO_SNIPPETS_MESSAGE",
    "SELECT_COMPONENT_MESSAGE",
    "CodegenResult",
    "ComponentProperty",
    "ConfigError",
    "DefinitionsSource",
    "DesignHost",
    "DiagnosticEmitter",
    "DocumentError",
    "GeneratorConfig",
    "Language",
    "LoggingEmitter",
    "NodeList",
    "NodeType",
    "NullEmitter",
    "OneNode",
    "ParameterMap",
    "PropertySource",
    "PropertyType",
    "SceneNode",
    "Snippet",
    "SnippetError",
    "SnippetGenerator",
    "SnippetRepository",
    "SnippetRepositoryError",
    "ValuesSource",
    "extract_parameters",
    "generate",
    "load_config",
    "lookup_name",
    "normalize_component_name",
    "normalize_property_name",
    "normalize_variant_option",
    "render_node",
    "render_snippet",
    "substitute",
]
