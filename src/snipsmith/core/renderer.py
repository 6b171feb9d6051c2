"""Render substituted snippet templates into JSX-like source text."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from .config import GeneratorConfig, Language
from .snippets import CHILDREN_ATTRIBUTE, STRING_PROP_TYPE, Section, Snippet, TemplateNode
from .substitution import substitute


@dataclass(frozen=True, slots=True)
class CodegenResult:
    """One labelled code block handed back to the host."""

    language: Language
    code: str
    title: str

    def as_dict(self) -> dict[str, str]:
        return {"language": self.language.value, "code": self.code, "title": self.title}


def render_attributes(
    node: TemplateNode,
    snippet: Snippet,
    params: Mapping[str, str | None],
) -> list[str]:
    """Return ``name=value`` pairs for every attribute that survives substitution."""
    rendered: list[str] = []
    for name, raw in node.items():
        if name == CHILDREN_ATTRIBUTE:
            continue
        value = substitute(raw, params)
        if value is None:
            continue
        if snippet.prop_type(name) == STRING_PROP_TYPE:
            rendered.append(f'{name}="{value}"')
        else:
            rendered.append(f"{name}={{{value}}}")
    return rendered


def render_node(
    node: TemplateNode,
    snippet: Snippet,
    params: Mapping[str, str | None],
    *,
    config: GeneratorConfig | None = None,
) -> str:
    """Render one template node as a tag."""
    config = config or GeneratorConfig()
    tag = snippet.tag_name
    children = None
    if CHILDREN_ATTRIBUTE in node:
        children = substitute(node[CHILDREN_ATTRIBUTE], params)
    attributes = render_attributes(node, snippet, params)

    if len(node) <= config.max_single_line_attributes:
        opening = " ".join([f"<{tag}", *attributes])
        if children:
            return f"{opening}>{children}</{tag}>"
        return f"{opening} />"

    indent = config.indent
    lines = [f"<{tag}", *(f"{indent}{attribute}" for attribute in attributes)]
    if children:
        lines.extend([">", f"{indent}{children}", f"</{tag}>"])
    else:
        lines.append("/>")
    return "\n".join(lines)


def render_section(
    section: Section,
    snippet: Snippet,
    params: Mapping[str, str | None],
    *,
    config: GeneratorConfig | None = None,
) -> str:
    """Render every node of a section, one per line group."""
    return "\n".join(render_node(node, snippet, params, config=config) for node in section.nodes)


def render_snippet(
    snippet: Snippet,
    params: Mapping[str, str | None],
    display_name: str,
    *,
    config: GeneratorConfig | None = None,
) -> list[CodegenResult]:
    """Render each section of ``snippet`` into its own code block."""
    config = config or GeneratorConfig()
    return [
        CodegenResult(
            language=config.language,
            code=render_section(section, snippet, params, config=config),
            title=f"{display_name}: {title}",
        )
        for title, section in snippet.sections.items()
    ]


__all__ = [
    "CodegenResult",
    "render_attributes",
    "render_node",
    "render_section",
    "render_snippet",
]
