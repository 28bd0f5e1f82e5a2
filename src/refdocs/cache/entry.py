"""Per-document cache slot."""

from __future__ import annotations

import asyncio

from refdocs.errors.exceptions import SourceError
from refdocs.types import CachedDocument


class CacheEntry:
    """One slot per document key: the current snapshot plus its refresh lock.

    `snapshot` is replaced wholesale and only while `lock` is held. Readers
    outside the lock take one reference to it and work from that.

    `attempts` counts finished (not cancelled) refreshes. `last_content` and
    `last_error` hold the outcome of the most recent one, so callers that
    queued behind a refresh reuse its result instead of repeating it.
    """

    __slots__ = ("key", "lock", "snapshot", "attempts", "last_content", "last_error")

    def __init__(self, key: str) -> None:
        self.key = key
        self.lock = asyncio.Lock()
        self.snapshot: CachedDocument | None = None
        self.attempts = 0
        self.last_content: str | None = None
        self.last_error: SourceError | None = None

    def __repr__(self) -> str:
        loaded = self.snapshot is not None
        return f"CacheEntry(key={self.key!r}, loaded={loaded}, locked={self.lock.locked()})"
