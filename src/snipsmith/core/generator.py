"""Entry point turning a selected node into generated code blocks."""

from __future__ import annotations

import asyncio
import logging

from .config import GeneratorConfig, Language
from .diagnostics import DiagnosticEmitter, NullEmitter
from .nodes import DesignHost, SceneNode
from .parameters import extract_parameters
from .renderer import CodegenResult, render_snippet
from .snippets import SnippetRepository, lookup_name


logger = logging.getLogger(__name__)

SELECT_COMPONENT_MESSAGE = "Select a component"
NO_SNIPPETS_MESSAGE = "No snippets found"


class SnippetGenerator:
    """Generate code snippets for nodes of a design document."""

    def __init__(
        self,
        repository: SnippetRepository,
        host: DesignHost,
        *,
        config: GeneratorConfig | None = None,
        emitter: DiagnosticEmitter | None = None,
    ) -> None:
        self.repository = repository
        self.host = host
        self.config = config or GeneratorConfig()
        self.emitter = emitter or NullEmitter()

    def _message(self, text: str) -> list[CodegenResult]:
        return [
            CodegenResult(
                language=Language.PLAINTEXT, code=text, title=self.config.fallback_title
            )
        ]

    async def generate(self, node: SceneNode) -> list[CodegenResult]:
        """Return the code blocks for ``node``.

        Selections that are not components and components without a snippet
        yield a single plaintext block instead of raising.
        """
        if not node.is_component:
            logger.debug("Node %s of type %s is not a component", node.id, node.type)
            return self._message(SELECT_COMPONENT_MESSAGE)

        name = lookup_name(node)
        snippet = self.repository.get(name)
        if snippet is None:
            self.emitter.event("snippet_missing", {"component": name})
            return self._message(NO_SNIPPETS_MESSAGE)

        params = await extract_parameters(
            node,
            self.host,
            concurrent=self.config.concurrent_swap_lookups,
            emitter=self.emitter,
        )
        self.emitter.event(
            "snippet_resolved",
            {"component": name, "sections": len(snippet.sections), "parameters": len(params)},
        )
        return render_snippet(snippet, params, name, config=self.config)

    def generate_sync(self, node: SceneNode) -> list[CodegenResult]:
        """Blocking variant of :meth:`generate`."""
        return asyncio.run(self.generate(node))


async def generate(
    node: SceneNode,
    repository: SnippetRepository,
    host: DesignHost,
    *,
    config: GeneratorConfig | None = None,
    emitter: DiagnosticEmitter | None = None,
) -> list[CodegenResult]:
    """Convenience wrapper around :meth:`SnippetGenerator.generate`."""
    generator = SnippetGenerator(repository, host, config=config, emitter=emitter)
    return await generator.generate(node)


__all__ = [
    "NO_SNIPPETS_MESSAGE",
    "SELECT_COMPONENT_MESSAGE",
    "SnippetGenerator",
    "generate",
]
