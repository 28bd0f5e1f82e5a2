"""Cache subsystem — single-slot, TTL- and version-bounded document cache."""

from refdocs.cache.content_cache import ContentCache
from refdocs.cache.entry import CacheEntry
from refdocs.cache.stats import CacheStats

__all__ = ["ContentCache", "CacheEntry", "CacheStats"]
