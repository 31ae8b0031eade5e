"""Catalog loading: the staleness-aware pipeline and store bootstrap.

Key Functions
-------------
CatalogPipeline.load_planets : method
    Fresh cache, live fetch, stale cache, built-in fallback.
initialize_catalog : function
    Run a load, enrich the winner, and swap it into a CatalogStore.
"""

from exo_explorer.pipeline.bootstrap import BUILTIN_SOURCE, BootstrapResult, initialize_catalog
from exo_explorer.pipeline.loader import (
    SOURCE_BUILTIN_FALLBACK,
    SOURCE_FRESH_CACHE,
    SOURCE_LIVE,
    CatalogPipeline,
    PipelineResult,
    ScheduledRefresh,
    stale_source,
)

__all__ = [
    "BUILTIN_SOURCE",
    "BootstrapResult",
    "CatalogPipeline",
    "PipelineResult",
    "SOURCE_BUILTIN_FALLBACK",
    "SOURCE_FRESH_CACHE",
    "SOURCE_LIVE",
    "ScheduledRefresh",
    "initialize_catalog",
    "stale_source",
]
