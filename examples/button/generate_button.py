"""Generate the Button snippets for the example document."""

from __future__ import annotations

from pathlib import Path
import sys

from snipsmith import DocumentHost, SnippetGenerator, SnippetRepository


HERE = Path(__file__).parent


def build_generator() -> tuple[SnippetGenerator, DocumentHost]:
    """Load the example repository and document into a generator."""
    repository = SnippetRepository.from_path(HERE / "snippets.example.json")
    host = DocumentHost.from_path(HERE / "document.example.yml")
    return SnippetGenerator(repository, host), host


__all__ = ["build_generator"]


if __name__ == "__main__":
    generator, host = build_generator()
    node_id = sys.argv[1] if len(sys.argv) > 1 else "1:1"
    for result in generator.generate_sync(host.node(node_id)):
        sys.stdout.write(f"// {result.title}\n{result.code}\n\n")
