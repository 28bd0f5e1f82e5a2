"""Map raw source exceptions onto the ErrorKind taxonomy."""

from __future__ import annotations

import asyncio

from refdocs.errors.exceptions import SourceError
from refdocs.types import ErrorKind


def classify_source_error(exc: BaseException) -> ErrorKind | None:
    """Return the ErrorKind for an exception, or None if it isn't a source failure."""
    if isinstance(exc, SourceError):
        return exc.kind
    if isinstance(exc, asyncio.CancelledError):
        return ErrorKind.CANCELLED
    if isinstance(exc, (FileNotFoundError, NotADirectoryError)):
        return ErrorKind.NOT_FOUND
    # PermissionError and IsADirectoryError are OSError subclasses
    if isinstance(exc, (OSError, NotImplementedError, UnicodeDecodeError)):
        return ErrorKind.TRANSIENT_IO
    return None


def to_source_error(exc: BaseException, key: str | None = None) -> SourceError:
    """Wrap a classified exception in a SourceError.

    Unclassified exceptions are returned as-is by the caller's `raise`, so
    this raises TypeError for them rather than inventing a kind.
    """
    if isinstance(exc, SourceError):
        return exc
    kind = classify_source_error(exc)
    if kind is None:
        raise TypeError(f"Not a source failure: {type(exc).__name__}") from exc
    return SourceError(str(exc) or type(exc).__name__, kind=kind, key=key, original=exc)
