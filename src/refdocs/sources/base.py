"""Document source protocol consumed by the content cache."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class DocumentSource(Protocol):
    """A readable store keyed by path/identifier.

    Every method may raise SourceError; the `kind` distinguishes a missing
    key from an I/O or access failure. Cancellation propagates unchanged.
    """

    async def exists(self, key: str) -> bool: ...

    async def get_version(self, key: str) -> Any:
        """Return a comparable last-modified token for `key`."""
        ...

    async def read_all(self, key: str) -> str | bytes: ...
