"""CLI command implementations exposed via `snipsmith.ui.cli`."""

from __future__ import annotations

from .generate import generate
from .snippets import list_snippets


__all__ = ["generate", "list_snippets"]
