"""Primary public API for snipsmith."""

from __future__ import annotations

from snipsmith.adapters import DocumentHost
from snipsmith.core import (
    NO_SNIPPETS_MESSAGE,
    SELECT_COMPONENT_MESSAGE,
    CodegenResult,
    ComponentProperty,
    ConfigError,
    DefinitionsSource,
    DesignHost,
    DiagnosticEmitter,
    DocumentError,
    GeneratorConfig,
    Language,
    LoggingEmitter,
    NodeList,
    NodeType,
    NullEmitter,
    OneNode,
    ParameterMap,
    PropertySource,
    PropertyType,
    SceneNode,
    Snippet,
    SnippetError,
    SnippetGenerator,
    SnippetRepository,
    SnippetRepositoryError,
    ValuesSource,
    extract_parameters,
    generate,
    load_config,
    lookup_name,
    normalize_component_name,
    normalize_property_name,
    normalize_variant_option,
    render_node,
    render_snippet,
    substitute,
)
from snipsmith.version import get_version


__version__ = get_version()

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
    "DocumentHost",
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
    "__version__",
    "extract_parameters",
    "generate",
    "get_version",
    "load_config",
    "lookup_name",
    "normalize_component_name",
    "normalize_property_name",
    "normalize_variant_option",
    "render_node",
    "render_snippet",
    "substitute",
]
