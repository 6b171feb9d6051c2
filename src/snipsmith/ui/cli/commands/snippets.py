"""Implementation of the ``snipsmith snippets`` command."""

from __future__ import annotations

import typer

from snipsmith.core.exceptions import SnippetRepositoryError, summarize_exception
from snipsmith.core.snippets import SnippetRepository

from .._options import SnippetsArgument
from ..presenter import present_repository
from ..state import emit_error, get_cli_state


def list_snippets(snippets: SnippetsArgument) -> None:
    """List the components described by a snippet repository."""
    state = get_cli_state()
    try:
        repository = SnippetRepository.from_path(snippets)
    except SnippetRepositoryError as exc:
        emit_error(summarize_exception(exc), exception=exc)
        raise typer.Exit(code=1) from exc
    present_repository(state, repository)


__all__ = ["list_snippets"]
