"""Configuration models used by the snippet generator.

GeneratorConfig

`max_single_line_attributes` (`int`)
: Template nodes declaring at most this many attributes (``children``
  included) are laid out on a single line.

`indent` (`str`)
: Indentation prefix applied to attributes and children in multi-line layout.

`language` (`Language`)
: Language tag attached to every generated code block.

`fallback_title` (`str`)
: Title of the single plaintext block returned when no snippet can be
  rendered.

`concurrent_swap_lookups` (`bool`)
: Resolve instance swap targets concurrently instead of one after the other.
"""

from __future__ import annotations

from enum import Enum
import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError
import yaml

from .exceptions import ConfigError


class Language(str, Enum):
    """Language tags understood by the host code panel."""

    BASH = "BASH"
    CPP = "CPP"
    CSS = "CSS"
    GO = "GO"
    GRAPHQL = "GRAPHQL"
    HTML = "HTML"
    JAVASCRIPT = "JAVASCRIPT"
    JSON = "JSON"
    KOTLIN = "KOTLIN"
    PLAINTEXT = "PLAINTEXT"
    PYTHON = "PYTHON"
    RUBY = "RUBY"
    RUST = "RUST"
    SQL = "SQL"
    SWIFT = "SWIFT"
    TYPESCRIPT = "TYPESCRIPT"


class GeneratorConfig(BaseModel):
    """Settings controlling layout and output of generated snippets."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    max_single_line_attributes: int = Field(default=3, ge=0)
    indent: str = "  "
    language: Language = Language.JAVASCRIPT
    fallback_title: str = "Component Snippets"
    concurrent_swap_lookups: bool = False


def load_config(path: Path | str) -> GeneratorConfig:
    """Read a :class:`GeneratorConfig` from a YAML or JSON file."""
    source = Path(path)
    try:
        text = source.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Unable to read configuration '{source}'.") from exc
    try:
        if source.suffix.lower() == ".json":
            data = json.loads(text)
        else:
            data = yaml.safe_load(text) or {}
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        raise ConfigError(f"Unable to parse configuration '{source}'.") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration '{source}' must contain a mapping.")
    try:
        return GeneratorConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration '{source}': {exc}") from exc


__all__ = ["GeneratorConfig", "Language", "load_config"]
