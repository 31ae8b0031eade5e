"""Wire a pipeline load into a `CatalogStore`."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from exo_explorer.catalogs.builtin import build_builtin_catalog
from exo_explorer.catalogs.store import CatalogStore
from exo_explorer.domain.planet import PlanetRecord
from exo_explorer.domain.progress import LoadPhase, ProgressCallback, emit_progress
from exo_explorer.pipeline.loader import CatalogPipeline, PipelineResult, ScheduledRefresh
from exo_explorer.science.enrich import enrich_catalog
from exo_explorer.validation.cleaner import log_validation_report

logger = logging.getLogger(__name__)

BUILTIN_SOURCE = "built-in"


@dataclass
class BootstrapResult:
    """What `initialize_catalog` put into the store.

    Attributes:
        load: Raw pipeline outcome (records may be None for the built-in path)
        source: Source tag swapped into the store
        count: Number of records served
        refresh: Pending background refresh when the data came from cache
    """

    load: PipelineResult
    source: str
    count: int
    refresh: ScheduledRefresh | None = None


def initialize_catalog(
    store: CatalogStore,
    pipeline: CatalogPipeline,
    *,
    on_progress: ProgressCallback | None = None,
    offline: bool = False,
    schedule_refresh: bool = True,
    start_refresh: bool = False,
    builtin_factory: Callable[[], list[PlanetRecord]] = build_builtin_catalog,
) -> BootstrapResult:
    """Load the catalog, enrich it and swap it into `store`.

    When the data came from the cache and `schedule_refresh` is set, a
    `ScheduledRefresh` is returned whose completion swaps the refreshed
    records into the same store. It is only armed if `start_refresh` is true.
    """
    load = pipeline.load_offline(on_progress) if offline else pipeline.load_planets(on_progress)

    if not load.records:
        records = builtin_factory()
        source = BUILTIN_SOURCE
        fetched_at = None
    else:
        records = enrich_catalog(load.records)
        source = load.source
        fetched_at = load.fetched_at

    store.replace(records, source=source, fetched_at=fetched_at, report=load.report)
    log_validation_report(load.report)
    emit_progress(
        on_progress,
        LoadPhase.READY,
        f"{len(records)} planets ready ({source})",
        count=len(records),
        error=load.error,
    )

    refresh = None
    if schedule_refresh and load.from_cache and not offline:

        def swap_refreshed(result: PipelineResult) -> None:
            if not result.records:
                return
            store.replace(
                enrich_catalog(result.records),
                source=result.source,
                fetched_at=result.fetched_at,
                report=result.report,
            )

        refresh = pipeline.schedule_background_refresh(on_complete=swap_refreshed)
        if start_refresh:
            refresh.start()

    return BootstrapResult(load=load, source=source, count=len(records), refresh=refresh)
