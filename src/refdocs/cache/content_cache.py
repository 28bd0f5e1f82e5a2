"""Read-through document cache — one slot per document, single-flight refresh."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable, Iterable
from typing import Any

from refdocs.cache.entry import CacheEntry
from refdocs.cache.stats import CacheStats
from refdocs.config.defaults import DEFAULT_TTL_SECONDS
from refdocs.errors.classify import classify_source_error, to_source_error
from refdocs.errors.exceptions import SourceError, UnknownDocumentError
from refdocs.sources.base import DocumentSource
from refdocs.types import CachedDocument, DocumentSpec, ErrorKind

logger = logging.getLogger(__name__)


class ContentCache:
    """Serves the freshest known body for each registered document.

    A cached body is served while it is younger than the TTL and the source
    still reports the version it was loaded at. Otherwise one caller per key
    refreshes under that key's lock while the others wait. Source failures
    degrade to the document's fallback text, which is never cached;
    cancellation always propagates.
    """

    def __init__(
        self,
        source: DocumentSource,
        documents: Iterable[DocumentSpec] = (),
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self._source = source
        self._ttl = ttl_seconds
        self._clock = clock or time.monotonic
        self._documents: dict[str, DocumentSpec] = {}
        self._entries: dict[str, CacheEntry] = {}
        self._stats = CacheStats()
        for document in documents:
            self.register(document)

    @property
    def ttl_seconds(self) -> float:
        return self._ttl

    def register(self, document: DocumentSpec) -> None:
        self._documents[document.name] = document

    def has(self, key: str) -> bool:
        return key in self._documents

    def peek(self, key: str) -> CachedDocument | None:
        """Return the current snapshot for `key` without touching the source."""
        entry = self._entries.get(key)
        return entry.snapshot if entry else None

    async def get(self, key: str) -> str:
        """Return the document body for `key`, or its fallback if the source fails."""
        document = self._document(key)
        entry = self._entry(key)

        snapshot = entry.snapshot
        if snapshot is not None and await self._is_fresh(document, snapshot):
            logger.debug("Serving cached %s content from %s", key, document.source_key)
            self._stats.hits += 1
            return snapshot.content

        seen = entry.attempts
        try:
            async with entry.lock:
                # Another caller may have refreshed while we waited
                snapshot = entry.snapshot
                if snapshot is not None and await self._is_fresh(document, snapshot):
                    logger.debug("Serving cached %s content from %s", key, document.source_key)
                    self._stats.hits += 1
                    return snapshot.content
                if entry.attempts == seen:
                    self._stats.misses += 1
                    return await self._refresh(document, entry)
                failed, content = entry.last_error, entry.last_content
        except Exception as exc:
            if classify_source_error(exc) is None:
                raise
            return self._fallback(document, to_source_error(exc, document.source_key))

        # A refresh finished while we queued; share its outcome
        if failed is not None:
            return self._fallback(document, failed, shared=True)
        logger.debug("Serving %s content from the refresh we queued behind", key)
        self._stats.hits += 1
        return content

    def stats(self) -> CacheStats:
        return self._stats.model_copy(
            update={"entries": sum(1 for e in self._entries.values() if e.snapshot is not None)}
        )

    def __len__(self) -> int:
        return len(self._entries)

    def _document(self, key: str) -> DocumentSpec:
        document = self._documents.get(key)
        if document is None:
            raise UnknownDocumentError(key)
        return document

    def _entry(self, key: str) -> CacheEntry:
        entry = self._entries.get(key)
        if entry is None:
            entry = self._entries.setdefault(key, CacheEntry(key))
        return entry

    async def _is_fresh(self, document: DocumentSpec, snapshot: CachedDocument) -> bool:
        now = self._clock()
        if now >= snapshot.expires_at:
            return False
        try:
            version = await self._source.get_version(document.source_key)
        except Exception as exc:
            kind = classify_source_error(exc)
            if kind is None:
                raise
            if kind is ErrorKind.CANCELLED:
                raise asyncio.CancelledError() from exc
            # Unreadable version means refresh, never "unchanged"
            logger.debug("Version probe for %s failed (%s); refreshing", document.name, exc)
            return False
        return snapshot.is_valid(now, version)

    async def _refresh(self, document: DocumentSpec, entry: CacheEntry) -> str:
        try:
            content = await self._load(document, entry)
        except Exception as exc:
            kind = classify_source_error(exc)
            if kind is not None and kind is not ErrorKind.CANCELLED:
                entry.last_content = None
                entry.last_error = to_source_error(exc, document.source_key)
                entry.attempts += 1
            raise
        entry.last_content = content
        entry.last_error = None
        entry.attempts += 1
        return content

    async def _load(self, document: DocumentSpec, entry: CacheEntry) -> str:
        key = document.source_key
        if not await self._source.exists(key):
            raise SourceError(f"Document source missing: {key}", kind=ErrorKind.NOT_FOUND, key=key)

        logger.debug("Loading %s content from %s", document.name, key)
        version = await self._source.get_version(key)
        content = _decode(await self._source.read_all(key), key)
        self._stats.refreshes += 1

        current = entry.snapshot
        if current is not None and _is_older(version, current.source_version):
            logger.debug(
                "Discarding %s read at version %r; cache already holds %r",
                document.name,
                version,
                current.source_version,
            )
            self._stats.stale_discards += 1
            return current.content

        entry.snapshot = CachedDocument(
            content=content,
            source_version=version,
            expires_at=self._clock() + self._ttl,
        )
        return content

    def _fallback(self, document: DocumentSpec, error: SourceError, shared: bool = False) -> str:
        match error.kind:
            case ErrorKind.CANCELLED:
                raise asyncio.CancelledError() from error
            case _ if shared:
                logger.debug("Refresh of %s failed while queued (%s); serving fallback", document.name, error)
            case ErrorKind.NOT_FOUND:
                logger.warning(
                    "%s source not found at %s; serving fallback", document.name, document.source_key
                )
            case ErrorKind.TRANSIENT_IO:
                logger.error("Failed to load %s content; serving fallback: %s", document.name, error)
        self._stats.fallbacks += 1
        return document.fallback


def _decode(raw: str | bytes, key: str) -> str:
    if isinstance(raw, str):
        return raw
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise to_source_error(exc, key) from exc


def _is_older(version: Any, cached_version: Any) -> bool:
    try:
        return version < cached_version
    except TypeError:
        return False
