"""Staleness-aware catalog loading.

`CatalogPipeline.load_planets` walks four strategies in order and returns the
first that succeeds:

1. fresh cache (no network)
2. live fetch -> map -> validate/clean -> summary stats -> cache write
3. usable-but-stale cache, carrying the fetch error
4. built-in fallback sentinel (`records=None`); the caller supplies the data

Remote and payload failures never escape `load_planets`; the `source` tag and
`error` message are the only signals of a degraded load.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from exo_explorer.config import PipelineConfig
from exo_explorer.domain.planet import PlanetRecord
from exo_explorer.domain.progress import LoadPhase, ProgressCallback, emit_progress
from exo_explorer.platform.catalogs.exoplanet_archive import (
    ExoplanetArchiveClient,
    RemotePayloadError,
)
from exo_explorer.platform.catalogs.field_mapper import map_records
from exo_explorer.platform.io.cache import CacheMeta, CatalogCache
from exo_explorer.validation.cleaner import (
    ValidationReport,
    compute_validation_summary,
    validate_and_clean,
)

logger = logging.getLogger(__name__)

SOURCE_FRESH_CACHE = "cache (fresh)"
SOURCE_LIVE = "NASA Exoplanet Archive (live)"
SOURCE_BUILTIN_FALLBACK = "built-in fallback"


def stale_source(age: str) -> str:
    return f"cache (stale, {age} old)"


@dataclass
class PipelineResult:
    """Outcome of a catalog load.

    Attributes:
        records: Cleaned records, or None when the caller must use its
            built-in dataset
        report: Validation report of the fetch that produced the records
        source: Human-readable origin tag
        fetched_at: Unix timestamp of that fetch, when known
        from_cache: Whether the records came from the persistent cache
        error: Message of the fetch failure that forced a fallback
    """

    records: list[PlanetRecord] | None
    report: ValidationReport | None
    source: str
    fetched_at: float | None = None
    from_cache: bool = False
    error: str | None = None

    @property
    def is_builtin_fallback(self) -> bool:
        return not self.records

    def to_dict(self) -> dict[str, Any]:
        """Summary without the record payload."""
        return {
            "source": self.source,
            "count": len(self.records) if self.records is not None else None,
            "fetched_at": self.fetched_at,
            "from_cache": self.from_cache,
            "error": self.error,
            "report": self.report.model_dump() if self.report is not None else None,
        }


class CatalogPipeline:
    """Orchestrates remote client, cleaning, and cache for one catalog."""

    def __init__(
        self,
        client: ExoplanetArchiveClient,
        cache: CatalogCache,
        *,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self.client = client
        self.cache = cache
        self.clock = clock or cache.clock

    @classmethod
    def from_config(cls, config: PipelineConfig) -> CatalogPipeline:
        client = ExoplanetArchiveClient(endpoint=config.tap_endpoint, timeout=config.timeout_seconds)
        return cls(client, CatalogCache.from_config(config))

    @property
    def config(self) -> PipelineConfig:
        return self.cache.config

    def fetch_and_clean(self, on_progress: ProgressCallback | None = None) -> PipelineResult:
        """Fetch, map, validate and cache a new snapshot.

        Raises:
            TAPQueryError: When the remote query fails
            RemotePayloadError: When the archive yields no usable planets
            FieldMappingError: When the payload contains non-object rows
        """
        raw = self.client.fetch_remote_data(on_progress=on_progress)
        if not raw:
            raise RemotePayloadError("Archive returned no planet rows")

        emit_progress(on_progress, LoadPhase.MAPPING, "Mapping fields...", count=len(raw))
        mapped = map_records(raw)

        emit_progress(on_progress, LoadPhase.VALIDATING, "Validating data...", count=len(mapped))
        cleaned, report = validate_and_clean(mapped)
        if not cleaned:
            raise RemotePayloadError(f"No valid planets among {len(raw)} archive rows")
        report = compute_validation_summary(cleaned, report)

        fetched_at = self.clock()
        meta = CacheMeta(fetched_at=fetched_at, record_count=len(cleaned), report=report)
        if self.cache.write(cleaned, meta) is None:
            logger.warning("Fetched catalog could not be cached; continuing uncached")

        return PipelineResult(
            records=cleaned,
            report=report,
            source=SOURCE_LIVE,
            fetched_at=fetched_at,
            from_cache=False,
        )

    def _fresh_cache(self, on_progress: ProgressCallback | None) -> PipelineResult | None:
        if not self.cache.is_fresh():
            return None
        cached = self.cache.read()
        if not cached:
            return None
        meta = self.cache.read_meta()
        emit_progress(
            on_progress,
            LoadPhase.CACHE_HIT,
            f"Loaded {len(cached)} planets from cache",
            count=len(cached),
        )
        logger.info(f"Serving {len(cached)} records from fresh cache")
        return PipelineResult(
            records=cached,
            report=meta.report if meta is not None else None,
            source=SOURCE_FRESH_CACHE,
            fetched_at=meta.fetched_at if meta is not None else None,
            from_cache=True,
        )

    def _stale_cache(
        self, on_progress: ProgressCallback | None, error: str | None
    ) -> PipelineResult | None:
        if not self.cache.is_usable():
            return None
        cached = self.cache.read()
        if not cached:
            return None
        meta = self.cache.read_meta()
        if meta is None:
            return None
        age = self.cache.format_age(meta.fetched_at)
        emit_progress(
            on_progress,
            LoadPhase.FALLBACK_CACHE,
            f"Using cached data ({age} old)",
            count=len(cached),
            error=error,
        )
        logger.warning(f"Serving {len(cached)} records from stale cache ({age} old)")
        return PipelineResult(
            records=cached,
            report=meta.report,
            source=stale_source(age),
            fetched_at=meta.fetched_at,
            from_cache=True,
            error=error,
        )

    def _builtin_fallback(
        self, on_progress: ProgressCallback | None, error: str | None
    ) -> PipelineResult:
        emit_progress(
            on_progress, LoadPhase.FALLBACK_BUILTIN, "Using built-in catalog", error=error
        )
        logger.warning("No usable cache; deferring to built-in catalog")
        return PipelineResult(
            records=None,
            report=None,
            source=SOURCE_BUILTIN_FALLBACK,
            from_cache=False,
            error=error,
        )

    def load_planets(self, on_progress: ProgressCallback | None = None) -> PipelineResult:
        """Load the catalog: fresh cache, live fetch, stale cache, then built-in.

        Args:
            on_progress: Optional observer; its failures are logged and ignored

        Returns:
            PipelineResult; never raises for remote or payload failures
        """
        fresh = self._fresh_cache(on_progress)
        if fresh is not None:
            return fresh

        try:
            result = self.fetch_and_clean(on_progress)
        except Exception as e:
            error = str(e)
            logger.warning(f"Live fetch failed: {error}")
        else:
            count = len(result.records or [])
            emit_progress(
                on_progress, LoadPhase.COMPLETE, f"Loaded {count} confirmed exoplanets", count=count
            )
            logger.info(f"Loaded {count} records from the archive")
            return result

        stale = self._stale_cache(on_progress, error)
        if stale is not None:
            return stale
        return self._builtin_fallback(on_progress, error)

    def load_offline(self, on_progress: ProgressCallback | None = None) -> PipelineResult:
        """Same cascade as `load_planets` without the live fetch."""
        fresh = self._fresh_cache(on_progress)
        if fresh is not None:
            return fresh
        stale = self._stale_cache(on_progress, None)
        if stale is not None:
            return stale
        return self._builtin_fallback(on_progress, None)

    def background_refresh(
        self, on_complete: Callable[[PipelineResult], None] | None = None
    ) -> PipelineResult | None:
        """Re-fetch into the cache unless it is already fresh.

        Failures (including in `on_complete`) are logged and swallowed.

        Returns:
            The refreshed result, or None when skipped or failed
        """
        if self.cache.is_fresh():
            logger.debug("Cache is fresh; skipping background refresh")
            return None
        try:
            result = self.fetch_and_clean()
        except Exception as e:
            logger.warning(f"Background refresh failed: {e}")
            return None

        logger.info(f"Background refresh fetched {len(result.records or [])} records")
        if on_complete is not None:
            try:
                on_complete(result)
            except Exception as e:
                logger.warning(f"Background refresh callback failed: {e}")
        return result

    def schedule_background_refresh(
        self,
        delay: float | None = None,
        on_complete: Callable[[PipelineResult], None] | None = None,
        *,
        timer_factory: Callable[..., Any] = threading.Timer,
    ) -> ScheduledRefresh:
        """Build a cancellable delayed refresh; call `.start()` to arm it."""
        if delay is None:
            delay = self.config.background_refresh_delay_seconds
        return ScheduledRefresh(self, delay, on_complete, timer_factory=timer_factory)


class ScheduledRefresh:
    """One-shot delayed `background_refresh`.

    The timer comes from `timer_factory(delay, fn)` (defaults to
    `threading.Timer`), so tests can substitute a manual timer and call
    `run_now()` instead of waiting.
    """

    def __init__(
        self,
        pipeline: CatalogPipeline,
        delay: float,
        on_complete: Callable[[PipelineResult], None] | None = None,
        *,
        timer_factory: Callable[..., Any] = threading.Timer,
    ) -> None:
        self.pipeline = pipeline
        self.delay = delay
        self.on_complete = on_complete
        self._timer_factory = timer_factory
        self._timer: Any = None
        self._lock = threading.Lock()
        self._cancelled = False
        self._ran = False
        self.result: PipelineResult | None = None

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def done(self) -> bool:
        return self._ran

    @property
    def started(self) -> bool:
        return self._timer is not None

    def start(self) -> ScheduledRefresh:
        with self._lock:
            if self._cancelled or self._ran or self._timer is not None:
                return self
            timer = self._timer_factory(self.delay, self._run)
            if isinstance(timer, threading.Thread):
                timer.daemon = True
            self._timer = timer
        logger.debug(f"Background refresh scheduled in {self.delay:.1f}s")
        timer.start()
        return self

    def cancel(self) -> None:
        with self._lock:
            self._cancelled = True
            timer = self._timer
        if timer is not None:
            timer.cancel()

    def run_now(self) -> PipelineResult | None:
        """Run the refresh synchronously, pre-empting the timer."""
        with self._lock:
            timer = self._timer
        if timer is not None:
            timer.cancel()
        return self._run()

    def _run(self) -> PipelineResult | None:
        with self._lock:
            if self._cancelled or self._ran:
                return None
            self._ran = True
        self.result = self.pipeline.background_refresh(self.on_complete)
        return self.result
