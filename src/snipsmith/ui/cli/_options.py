"""Shared Typer option definitions for CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer


INPUTS_PANEL = "Input Handling"
OUTPUT_PANEL = "Output"
DIAGNOSTICS_PANEL = "Diagnostics"

DocumentArgument = Annotated[
    Path,
    typer.Argument(
        metavar="DOCUMENT",
        help="Design document export (.json, .yml or .yaml) holding the component nodes.",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        resolve_path=True,
    ),
]

SnippetsArgument = Annotated[
    Path,
    typer.Argument(
        metavar="SNIPPETS",
        help="Snippet repository (.json, .yml or .yaml) keyed by component name.",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        resolve_path=True,
    ),
]

SnippetsOption = Annotated[
    Path,
    typer.Option(
        "--snippets",
        "-s",
        help="Snippet repository (.json, .yml or .yaml) keyed by component name.",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        resolve_path=True,
        rich_help_panel=INPUTS_PANEL,
    ),
]

NodeIdOption = Annotated[
    str | None,
    typer.Option(
        "--node",
        "-n",
        help="Identifier of the selected node.",
        rich_help_panel=INPUTS_PANEL,
    ),
]

NodeNameOption = Annotated[
    str | None,
    typer.Option(
        "--name",
        help="Select the first node carrying this exact name instead of an identifier.",
        rich_help_panel=INPUTS_PANEL,
    ),
]

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help="Generator configuration file (.yml, .yaml or .json).",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        resolve_path=True,
        rich_help_panel=INPUTS_PANEL,
    ),
]

JsonOption = Annotated[
    bool,
    typer.Option(
        "--json",
        help="Print the generated blocks as a JSON list of {language, code, title}.",
        rich_help_panel=OUTPUT_PANEL,
    ),
]

ConcurrentOption = Annotated[
    bool | None,
    typer.Option(
        "--concurrent/--sequential",
        help="Resolve instance swap targets concurrently (defaults to the configuration).",
        rich_help_panel=OUTPUT_PANEL,
        show_default=False,
    ),
]

VerboseOption = Annotated[
    int,
    typer.Option(
        "--verbose",
        "-v",
        count=True,
        help="Increase CLI verbosity. Combine multiple times for additional diagnostics.",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]

DebugOption = Annotated[
    bool,
    typer.Option(
        "--debug",
        help="Show full tracebacks when an unexpected error occurs.",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]
