"""Local persistence for the catalog cache."""

from exo_explorer.platform.io.cache import (
    CACHE_KEY,
    CACHE_META_KEY,
    CACHE_VERSION,
    CacheMeta,
    CatalogCache,
    FileKeyValueStore,
    KeyValueStore,
    MemoryKeyValueStore,
    format_age,
)

__all__ = [
    "CACHE_KEY",
    "CACHE_META_KEY",
    "CACHE_VERSION",
    "CacheMeta",
    "CatalogCache",
    "FileKeyValueStore",
    "KeyValueStore",
    "MemoryKeyValueStore",
    "format_age",
]
