"""Implementation of the ``snipsmith generate`` command."""

from __future__ import annotations

import typer

from snipsmith.adapters.document import DocumentHost
from snipsmith.core.config import GeneratorConfig, load_config
from snipsmith.core.exceptions import DocumentError, SnippetError, summarize_exception
from snipsmith.core.generator import SnippetGenerator
from snipsmith.core.nodes import SceneNode
from snipsmith.core.snippets import SnippetRepository

from .._options import (
    ConcurrentOption,
    ConfigOption,
    DebugOption,
    DocumentArgument,
    JsonOption,
    NodeIdOption,
    NodeNameOption,
    SnippetsOption,
    VerboseOption,
)
from ..diagnostics import CliEmitter
from ..presenter import present_results
from ..state import debug_enabled, emit_error, set_cli_state


def _select_node(host: DocumentHost, node_id: str | None, node_name: str | None) -> SceneNode:
    if node_id is not None:
        return host.node(node_id)
    if node_name is not None:
        matches = host.find_by_name(node_name)
        if not matches:
            raise DocumentError(f"No node named '{node_name}' in the document.")
        return matches[0]
    raise DocumentError("Select a node with --node or --name.")


def generate(
    document: DocumentArgument,
    snippets: SnippetsOption,
    node_id: NodeIdOption = None,
    node_name: NodeNameOption = None,
    config_path: ConfigOption = None,
    as_json: JsonOption = False,
    concurrent: ConcurrentOption = None,
    verbose: VerboseOption = 0,
    debug: DebugOption = False,
) -> None:
    """Generate component snippets for a node of a design document."""
    state = set_cli_state(verbosity=verbose, debug=debug)

    try:
        config = load_config(config_path) if config_path is not None else GeneratorConfig()
        if concurrent is not None:
            config = config.model_copy(update={"concurrent_swap_lookups": concurrent})
        repository = SnippetRepository.from_path(snippets)
        host = DocumentHost.from_path(document)
        node = _select_node(host, node_id, node_name)
    except SnippetError as exc:
        if debug_enabled():
            raise
        emit_error(summarize_exception(exc), exception=exc)
        raise typer.Exit(code=1) from exc

    generator = SnippetGenerator(repository, host, config=config, emitter=CliEmitter(state))
    results = generator.generate_sync(node)
    present_results(state, results, as_json=as_json)


__all__ = ["generate"]
