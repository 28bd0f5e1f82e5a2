"""Document catalog — builtin and user-supplied document specs."""

from refdocs.catalog.registry import BUILTIN_CATALOG, DocumentCatalog

__all__ = ["DocumentCatalog", "BUILTIN_CATALOG"]
