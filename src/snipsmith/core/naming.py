"""Normalisation helpers turning design-tool names into code identifiers.

Component names become PascalCase lookup keys into the snippet repository,
property names become camelCase placeholder keys, and variant option names are
rewritten following the convention their own punctuation suggests
(kebab-case, snake_case or camelCase).
"""

from __future__ import annotations

import re


NUMERIC_GUARD = "N"

_SEPARATOR_RE = re.compile(r"[^a-zA-Z0-9]+")
_QUALIFIER_RE = re.compile(r"#[^#]+$")
_LEADING_DIGITS_RE = re.compile(r"^[0-9]+")
_VARIANT_STRIP_RE = re.compile(r"[^a-zA-Z0-9\-_ ]")
_SPACES_RE = re.compile(r" +")


def _capitalize(fragment: str) -> str:
    return fragment[:1].upper() + fragment[1:]


def _downcase(fragment: str) -> str:
    return fragment[:1].lower() + fragment[1:]


def _numeric_guard(name: str) -> str:
    if name[:1].isascii() and name[:1].isdigit():
        return f"{NUMERIC_GUARD}{name}"
    return name


def normalize_component_name(raw: str) -> str:
    """Return the PascalCase identifier used to look up a component snippet.

    >>> normalize_component_name("my_button 2")
    'MyButton2'
    >>> normalize_component_name("3d card")
    'N3dCard'
    """
    name = _numeric_guard(raw)
    return "".join(_capitalize(fragment) for fragment in _SEPARATOR_RE.split(name))


def normalize_property_name(raw: str) -> str:
    """Return the camelCase placeholder name for a component property.

    Design tools append a ``#<id>`` qualifier to property keys; only the last
    one is dropped.
    """
    name = _QUALIFIER_RE.sub("", raw)
    name = _LEADING_DIGITS_RE.sub("", normalize_component_name(name))
    return _downcase(name)


def normalize_variant_option(raw: str | None, default: str = "") -> str:
    """Rewrite a variant option following the convention its punctuation implies."""
    if raw is None:
        return default
    clean = _VARIANT_STRIP_RE.sub("", raw)
    if "-" in clean:
        return _SPACES_RE.sub("-", clean).lower()
    if "_" in clean:
        return _SPACES_RE.sub("_", clean).lower()
    if " " in clean or re.match(r"[A-Z]", clean):
        fragments = _SPACES_RE.split(clean)
        head, tail = fragments[0], fragments[1:]
        return head.lower() + "".join(
            fragment[:1].upper() + fragment[1:].lower() for fragment in tail
        )
    return clean


__all__ = [
    "NUMERIC_GUARD",
    "normalize_component_name",
    "normalize_property_name",
    "normalize_variant_option",
]
