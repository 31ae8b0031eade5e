"""The served catalog: in-memory store plus the built-in fallback dataset."""

from exo_explorer.catalogs.builtin import (
    DEFAULT_PROCEDURAL_COUNT,
    PROCEDURAL_SEED,
    build_builtin_catalog,
    generate_procedural_planets,
)
from exo_explorer.catalogs.curated import CURATED_COUNT, CURATED_SOURCE, curated_planets
from exo_explorer.catalogs.store import (
    CatalogChangedEvent,
    CatalogStats,
    CatalogStore,
    SearchFilters,
    sort_records,
)

__all__ = [
    "CURATED_COUNT",
    "CURATED_SOURCE",
    "CatalogChangedEvent",
    "CatalogStats",
    "CatalogStore",
    "DEFAULT_PROCEDURAL_COUNT",
    "PROCEDURAL_SEED",
    "SearchFilters",
    "build_builtin_catalog",
    "curated_planets",
    "generate_procedural_planets",
    "sort_records",
]
