"""Document sources — where cached documents are read from."""

from refdocs.sources.base import DocumentSource
from refdocs.sources.filesystem import BUILTIN_RESOURCES_DIR, FileSystemSource

__all__ = ["DocumentSource", "FileSystemSource", "BUILTIN_RESOURCES_DIR"]
