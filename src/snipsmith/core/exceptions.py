"""Custom exception hierarchy for the snippet generator."""

from __future__ import annotations


class SnippetError(RuntimeError):
    """Base exception for snippet generation failures."""


class SnippetRepositoryError(SnippetError):
    """Raised when a snippet repository cannot be read or validated."""


class DocumentError(SnippetError):
    """Raised when a design document export has an unexpected shape."""


class ConfigError(SnippetError):
    """Raised when a generator configuration file is invalid."""


def exception_messages(exc: BaseException) -> list[str]:
    """Return the collected message chain for an exception and its causes."""
    messages: list[str] = []
    visited: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in visited:
        visited.add(id(current))
        text = str(current).strip()
        if text:
            first_line = text.splitlines()[0].strip()
            if first_line:
                messages.append(first_line)
        current = current.__cause__ or current.__context__
    return messages


def summarize_exception(exc: BaseException) -> str:
    """Return the outermost message, followed by the root cause when it adds detail."""
    messages = exception_messages(exc)
    if not messages:
        return type(exc).__name__
    head, cause = messages[0], messages[-1]
    if cause in head:
        return head
    return f"{head} ({cause})"


__all__ = [
    "ConfigError",
    "DocumentError",
    "SnippetError",
    "SnippetRepositoryError",
    "exception_messages",
    "summarize_exception",
]
