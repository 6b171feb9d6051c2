"""Rich-aware presenters for generated snippets."""

from __future__ import annotations

from collections.abc import Sequence
import json

import typer

from snipsmith.core.config import Language
from snipsmith.core.renderer import CodegenResult
from snipsmith.core.snippets import SnippetRepository

from .state import CLIState


_SYNTAX_LEXERS = {
    Language.JAVASCRIPT: "jsx",
    Language.TYPESCRIPT: "tsx",
    Language.PLAINTEXT: "text",
}


def _lexer_for(language: Language) -> str:
    return _SYNTAX_LEXERS.get(language, language.value.lower())


def present_results(
    state: CLIState,
    results: Sequence[CodegenResult],
    *,
    as_json: bool = False,
) -> None:
    """Print generated blocks as JSON, Rich panels, or plain text."""
    if as_json:
        typer.echo(json.dumps([result.as_dict() for result in results], indent=2))
        return

    console = state.console
    if not console.is_terminal:
        for index, result in enumerate(results):
            if index:
                typer.echo("")
            typer.echo(f"// {result.title}")
            typer.echo(result.code)
        return

    from rich.panel import Panel
    from rich.syntax import Syntax

    for result in results:
        body = Syntax(result.code, _lexer_for(result.language), word_wrap=True)
        console.print(Panel(body, title=result.title, title_align="left"))


def present_repository(state: CLIState, repository: SnippetRepository) -> None:
    """Print the components and section titles held by ``repository``."""
    console = state.console
    if not console.is_terminal:
        if not len(repository):
            typer.echo("No snippets found.")
            return
        for name in repository:
            snippet = repository.get(name)
            sections = ", ".join(snippet.sections) if snippet else ""
            typer.echo(f"{name}: {sections or '-'}")
        return

    from rich import box
    from rich.table import Table

    table = Table(
        title="Available Snippets",
        box=box.SQUARE,
        show_edge=True,
        header_style="bold cyan",
    )
    table.add_column("Component", style="magenta")
    table.add_column("Tag", style="green")
    table.add_column("Sections")
    if not len(repository):
        table.add_row("-", "-", "No snippets found")
    for name in repository:
        snippet = repository.get(name)
        if snippet is None:
            continue
        table.add_row(name, snippet.tag_name, ", ".join(snippet.sections) or "-")
    console.print(table)


__all__ = ["present_repository", "present_results"]
