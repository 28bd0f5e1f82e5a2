"""refdocs — cached best-practice reference documents served over MCP."""

from refdocs.cache import CacheStats, ContentCache
from refdocs.catalog import DocumentCatalog
from refdocs.errors import RefDocsError, SourceError, UnknownDocumentError
from refdocs.service import RefDocs
from refdocs.sources import DocumentSource, FileSystemSource
from refdocs.types import CachedDocument, DocumentSpec, ErrorKind

__all__ = [
    "RefDocs",
    "ContentCache",
    "CacheStats",
    "CachedDocument",
    "DocumentCatalog",
    "DocumentSpec",
    "DocumentSource",
    "FileSystemSource",
    "ErrorKind",
    "RefDocsError",
    "SourceError",
    "UnknownDocumentError",
]
