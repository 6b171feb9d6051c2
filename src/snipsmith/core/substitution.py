"""Placeholder substitution for snippet template strings.

The grammar is intentionally tiny: ``@key`` placeholders replaced by parameter
values, and a single whole-string conditional ``A=B?C:D`` evaluated after
substitution. A placeholder bound to a suppressed parameter suppresses the
whole string, and so does a conditional branch spelled ``undefined``.
"""

from __future__ import annotations

from collections.abc import Mapping
from functools import lru_cache
import logging
import re


logger = logging.getLogger(__name__)

SUPPRESS_KEYWORD = "undefined"

# The left operand may be empty on purpose: a false boolean parameter
# substitutes to "" and must still pick the false branch.
_TERNARY_RE = re.compile(r"(.*)=(.+)\?(.+):(.+)")
_PLACEHOLDER_RE = re.compile(r"@[A-Za-z_][A-Za-z0-9_]*")


@lru_cache(maxsize=64)
def _keys_pattern(keys: tuple[str, ...]) -> re.Pattern[str]:
    # Longest first so that ``@size`` never matches inside ``@sizeLarge``.
    ordered = sorted(keys, key=len, reverse=True)
    return re.compile("|".join(re.escape(key) for key in ordered))


def find_placeholders(raw: str) -> list[str]:
    """Return the ``@identifier`` tokens appearing in ``raw``, in order."""
    return _PLACEHOLDER_RE.findall(raw)


def evaluate_ternary(value: str) -> str | None:
    """Evaluate ``A=B?C:D`` when ``value`` has that shape, else return ``value``."""
    match = _TERNARY_RE.fullmatch(value)
    if match is None:
        return value
    left, right, truthy, falsy = match.groups()
    chosen = truthy if left == right else falsy
    return None if chosen == SUPPRESS_KEYWORD else chosen


def substitute(raw: str, params: Mapping[str, str | None]) -> str | None:
    """Substitute parameters into ``raw``.

    Returns ``None`` when the string must not be emitted.
    """
    keys = tuple(key for key in params if key)
    if keys:
        pattern = _keys_pattern(keys)
        used = {match.group(0) for match in pattern.finditer(raw)}
        if any(params[key] is None for key in used):
            return None
        value = pattern.sub(lambda match: params[match.group(0)] or "", raw)
    else:
        value = raw

    if logger.isEnabledFor(logging.DEBUG):
        unresolved = [token for token in find_placeholders(value) if token not in params]
        if unresolved:
            logger.debug("Unresolved placeholders %s in %r", ", ".join(unresolved), raw)

    return evaluate_ternary(value)


__all__ = [
    "SUPPRESS_KEYWORD",
    "evaluate_ternary",
    "find_placeholders",
    "substitute",
]
