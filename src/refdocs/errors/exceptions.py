"""Custom exception hierarchy for refdocs."""

from __future__ import annotations

from typing import Any

from refdocs.types import ErrorKind


class RefDocsError(Exception):
    """Base exception for all refdocs errors."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        super().__init__(message)
        self.message = message


class SourceError(RefDocsError):
    """A document source could not serve a key.

    `kind` tells the cache what to do: NOT_FOUND and TRANSIENT_IO are served
    the fallback document, CANCELLED is re-raised as cancellation.
    """

    def __init__(
        self,
        message: str = "",
        kind: ErrorKind = ErrorKind.TRANSIENT_IO,
        key: str | None = None,
        original: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.key = key
        self.original = original


class UnknownDocumentError(RefDocsError, KeyError):
    """Requested document name is not in the catalog."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Document '{name}' not found in catalog")
        self.name = name

    def __str__(self) -> str:
        return self.message


class CatalogError(RefDocsError):
    """A catalog file is malformed."""

    def __init__(self, message: str = "", path: str | None = None) -> None:
        super().__init__(message)
        self.path = path
