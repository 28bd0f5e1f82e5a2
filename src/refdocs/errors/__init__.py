"""Error handling — exception hierarchy and source error classification."""

from refdocs.errors.classify import classify_source_error, to_source_error
from refdocs.errors.exceptions import (
    CatalogError,
    RefDocsError,
    SourceError,
    UnknownDocumentError,
)

__all__ = [
    "RefDocsError",
    "SourceError",
    "UnknownDocumentError",
    "CatalogError",
    "classify_source_error",
    "to_source_error",
]
