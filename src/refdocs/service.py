"""Top-level entry point: RefDocs wires catalog, source and cache together."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

from refdocs.cache.content_cache import ContentCache
from refdocs.cache.stats import CacheStats
from refdocs.catalog.registry import DocumentCatalog
from refdocs.config.hierarchy import load_config_hierarchy
from refdocs.sources.base import DocumentSource
from refdocs.sources.filesystem import FileSystemSource
from refdocs.types import DocumentInfo

logger = logging.getLogger(__name__)


class RefDocs:
    """Reference document service, created once at start-up.

    Holds no external resources, so there is nothing to close; the cache
    lives as long as the instance does.
    """

    def __init__(
        self,
        config: dict[str, Any] | None = None,
        source: DocumentSource | None = None,
        catalog: DocumentCatalog | None = None,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self._config = config if config is not None else load_config_hierarchy()

        if catalog is None:
            user_catalog = self._config.get("catalog")
            catalog = DocumentCatalog(user_files=[Path(user_catalog)] if user_catalog else None)
        self._catalog = catalog

        if source is None:
            source = FileSystemSource(
                root=self._config.get("resources_dir"),
                encoding=self._config.get("encoding", "utf-8"),
            )
        self._source = source

        self._cache = ContentCache(
            source=self._source,
            documents=self._catalog.all_specs(),
            ttl_seconds=float(self._config["ttl_seconds"]),
            clock=clock,
        )

    @property
    def catalog(self) -> DocumentCatalog:
        return self._catalog

    @property
    def cache(self) -> ContentCache:
        return self._cache

    @property
    def config(self) -> dict[str, Any]:
        return dict(self._config)

    async def get_async(self, name: str) -> str:
        """Return the named document's text (or its fallback)."""
        spec = self._catalog.get(name)
        logger.info("Serving %s via tool %s", name, spec.resolved_tool_name)
        return await self._cache.get(name)

    def get(self, name: str) -> str:
        """Synchronous wrapper around get_async."""
        return asyncio.run(self.get_async(name))

    def list_documents(self) -> list[DocumentInfo]:
        return [
            info.model_copy(update={"cached": self._cache.peek(info.name) is not None})
            for info in self._catalog.list_documents()
        ]

    def stats(self) -> CacheStats:
        return self._cache.stats()
