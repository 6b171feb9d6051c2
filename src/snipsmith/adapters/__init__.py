"""Host adapters feeding design documents into the generator."""

from __future__ import annotations

from .document import DocumentHost, DocumentModel


__all__ = ["DocumentHost", "DocumentModel"]
