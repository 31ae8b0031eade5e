"""In-memory catalog store with atomic swaps and query helpers.

The store holds an immutable snapshot of enriched `PlanetRecord`s. The
pipeline bootstrap is its only writer; everything else reads. A swap replaces
the snapshot reference under a lock, so a reader that grabbed `records` keeps
a consistent tuple even while a background refresh lands.

Usage:
    store = CatalogStore()
    unsubscribe = store.subscribe(lambda event: print(event.count))
    store.replace(records, source="NASA Exoplanet Archive (live)")
    matches = store.search("trappist", SearchFilters(min_habitability=0.5))
"""

from __future__ import annotations

import logging
import threading
from collections import Counter
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from exo_explorer.domain.planet import PlanetRecord, attribute_for_key
from exo_explorer.platform.io.cache import CatalogCache
from exo_explorer.validation.cleaner import ValidationReport

logger = logging.getLogger(__name__)

HIGH_SCORE_THRESHOLD = 0.7

_HZ_BANDS = ("conservative", "optimistic")
_SORT_DIRECTIONS = ("asc", "desc")

# Attributes holding a plain number or string; derived objects such as
# hz_status or coords have no ordering.
SORTABLE_ATTRIBUTES = frozenset(
    {
        "id",
        "name",
        "system",
        "distance",
        "radius",
        "mass",
        "period",
        "semi_major_axis",
        "eq_temp",
        "eccentricity",
        "inclination",
        "star_type",
        "star_temp",
        "star_mass",
        "star_lum",
        "star_lum_log",
        "ra",
        "dec",
        "v_mag",
        "k_mag",
        "discovered",
        "discovery_method",
        "discovery_facility",
        "discovery_ref",
        "source",
        "type",
        "habitability",
    }
)


def resolve_sort_attribute(sort_by: str) -> str | None:
    """Map a sort key to its attribute; None means the global ESI score.

    Raises:
        ValueError: If the key is unknown or names a non-scalar field
    """
    if sort_by == "esi":
        return None
    try:
        attr = attribute_for_key(sort_by)
    except KeyError:
        attr = None
    if attr not in SORTABLE_ATTRIBUTES:
        raise ValueError(f"Unknown sort field: {sort_by!r}")
    return attr


@dataclass(frozen=True)
class CatalogChangedEvent:
    """Broadcast to subscribers after every swap.

    Attributes:
        count: Number of records in the new snapshot
        source: Source tag of the new snapshot
        fetched_at: Fetch timestamp (Unix seconds) when known
        version: Monotonic swap counter, starting at 1
    """

    count: int
    source: str
    fetched_at: float | None
    version: int


@dataclass(frozen=True)
class _Snapshot:
    records: tuple[PlanetRecord, ...]
    source: str | None
    fetched_at: float | None
    report: ValidationReport | None
    version: int


@dataclass(frozen=True)
class SearchFilters:
    """Optional filters for `CatalogStore.search`; all set filters must match.

    Range bounds are inclusive. Records missing the filtered value never match
    a range filter. `sort_by` accepts a scalar attribute name (`eq_temp`) or
    its serialized key (`eqTemp`); `"esi"` sorts by the global ESI score.
    """

    type: str | None = None
    min_habitability: float | None = None
    max_habitability: float | None = None
    min_distance: float | None = None
    max_distance: float | None = None
    min_temp: float | None = None
    max_temp: float | None = None
    min_radius: float | None = None
    max_radius: float | None = None
    discovered_after: int | None = None
    discovered_before: int | None = None
    star_type: str | None = None
    discovery_method: str | None = None
    in_hz: str | None = None
    min_esi: float | None = None
    sort_by: str = "name"
    sort_dir: str = "asc"

    def __post_init__(self) -> None:
        if self.in_hz is not None and self.in_hz not in _HZ_BANDS:
            raise ValueError(f"in_hz must be one of {_HZ_BANDS}, got {self.in_hz!r}")
        if self.sort_dir not in _SORT_DIRECTIONS:
            raise ValueError(f"sort_dir must be one of {_SORT_DIRECTIONS}, got {self.sort_dir!r}")
        resolve_sort_attribute(self.sort_by)


@dataclass(frozen=True)
class CatalogStats:
    """Aggregate view of the current snapshot."""

    total: int
    types: dict[str, int]
    star_types: dict[str, int]
    methods: dict[str, int]
    avg_habitability: float
    high_habitability_count: int
    in_habitable_zone: int
    high_esi_count: int
    nearest_planet: PlanetRecord | None
    most_habitable: PlanetRecord | None
    data_source: str | None
    last_updated: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        def summary(p: PlanetRecord | None) -> dict[str, Any] | None:
            if p is None:
                return None
            return {
                "name": p.name,
                "distance": p.distance,
                "habitability": p.habitability,
                "type": p.type,
            }

        return {
            "total": self.total,
            "types": dict(self.types),
            "starTypes": dict(self.star_types),
            "methods": dict(self.methods),
            "avgHabitability": self.avg_habitability,
            "highHabitabilityCount": self.high_habitability_count,
            "inHabitableZone": self.in_habitable_zone,
            "highEsiCount": self.high_esi_count,
            "nearestPlanet": summary(self.nearest_planet),
            "mostHabitable": summary(self.most_habitable),
            "dataSource": self.data_source,
            "lastUpdated": self.last_updated,
        }


def _esi_global(p: PlanetRecord) -> float:
    esi = p.esi
    if esi is None:
        return 0.0
    value = getattr(esi, "global_", None)
    return value if value is not None else 0.0


def _in_range(value: float | None, low: float | None, high: float | None) -> bool:
    if low is None and high is None:
        return True
    if value is None:
        return False
    if low is not None and value < low:
        return False
    return high is None or value <= high


def _matches_query(p: PlanetRecord, needle: str) -> bool:
    constellation = getattr(p.constellation, "name", None)
    for text in (p.name, p.system, p.type, p.discovery_method, constellation):
        if text and needle in text.lower():
            return True
    return False


def _matches_filters(p: PlanetRecord, f: SearchFilters) -> bool:
    if f.type and p.type != f.type:
        return False
    checks = (
        (p.habitability, f.min_habitability, f.max_habitability),
        (p.distance, f.min_distance, f.max_distance),
        (p.eq_temp, f.min_temp, f.max_temp),
        (p.radius, f.min_radius, f.max_radius),
        (p.discovered, f.discovered_after, f.discovered_before),
    )
    if not all(_in_range(value, low, high) for value, low, high in checks):
        return False
    if f.star_type and not (p.star_type or "").startswith(f.star_type):
        return False
    if f.discovery_method and p.discovery_method != f.discovery_method:
        return False
    if f.in_hz is not None:
        status = p.hz_status
        if status is None or not getattr(status, f.in_hz, False):
            return False
    return f.min_esi is None or _esi_global(p) >= f.min_esi


def _sort_value(p: PlanetRecord, attr: str | None) -> Any:
    value = _esi_global(p) if attr is None else getattr(p, attr)
    if isinstance(value, str):
        return value.lower()
    return value


def sort_records(
    records: Iterable[PlanetRecord], sort_by: str = "name", sort_dir: str = "asc"
) -> list[PlanetRecord]:
    """Stable sort; records missing the sort value go last in both directions."""
    attr = resolve_sort_attribute(sort_by)
    keyed = [(_sort_value(p, attr), p) for p in records]
    present = [item for item in keyed if item[0] is not None]
    missing = [p for value, p in keyed if value is None]
    present.sort(key=lambda item: item[0], reverse=sort_dir == "desc")
    return [p for _, p in present] + missing


class CatalogStore:
    """Holds the live catalog and notifies listeners when it changes."""

    def __init__(self, *, cache: CatalogCache | None = None) -> None:
        self._lock = threading.Lock()
        self._snapshot = _Snapshot(records=(), source=None, fetched_at=None, report=None, version=0)
        self._ready = threading.Event()
        self._subscribers: list[Callable[[CatalogChangedEvent], None]] = []
        self._ready_callbacks: list[Callable[[CatalogStore], None]] = []
        self.cache = cache

    # -- writer ---------------------------------------------------------

    def replace(
        self,
        records: Iterable[PlanetRecord],
        *,
        source: str,
        fetched_at: float | None = None,
        report: ValidationReport | None = None,
    ) -> CatalogChangedEvent:
        """Swap in a new snapshot and notify subscribers.

        The first swap also marks the store ready and drains the
        `when_ready` queue.
        """
        frozen = tuple(records)
        with self._lock:
            version = self._snapshot.version + 1
            self._snapshot = _Snapshot(
                records=frozen,
                source=source,
                fetched_at=fetched_at,
                report=report,
                version=version,
            )
            subscribers = list(self._subscribers)
            first_ready = not self._ready.is_set()
            self._ready.set()
            ready_callbacks = self._ready_callbacks
            self._ready_callbacks = []

        event = CatalogChangedEvent(
            count=len(frozen), source=source, fetched_at=fetched_at, version=version
        )
        logger.info(f"Catalog swapped: {len(frozen)} records from {source} (v{version})")

        if first_ready:
            for callback in ready_callbacks:
                self._invoke(callback, self)
        for subscriber in subscribers:
            self._invoke(subscriber, event)
        return event

    @staticmethod
    def _invoke(callback: Callable[[Any], None], arg: Any) -> None:
        try:
            callback(arg)
        except Exception as e:
            logger.warning(f"Catalog listener {callback!r} failed: {e}")

    # -- notification ---------------------------------------------------

    def subscribe(self, callback: Callable[[CatalogChangedEvent], None]) -> Callable[[], None]:
        """Register for change events; returns a function that unsubscribes."""
        with self._lock:
            self._subscribers.append(callback)

        def unsubscribe() -> None:
            with self._lock:
                if callback in self._subscribers:
                    self._subscribers.remove(callback)

        return unsubscribe

    def when_ready(self, callback: Callable[[CatalogStore], None]) -> None:
        """Call `callback(store)` once the first snapshot exists.

        Late registrations (store already ready) run immediately.
        """
        with self._lock:
            if not self._ready.is_set():
                self._ready_callbacks.append(callback)
                return
        self._invoke(callback, self)

    def wait_ready(self, timeout: float | None = None) -> bool:
        return self._ready.wait(timeout)

    @property
    def is_ready(self) -> bool:
        return self._ready.is_set()

    # -- readers --------------------------------------------------------

    @property
    def records(self) -> tuple[PlanetRecord, ...]:
        return self._snapshot.records

    @property
    def source(self) -> str | None:
        return self._snapshot.source

    @property
    def fetched_at(self) -> float | None:
        return self._snapshot.fetched_at

    @property
    def report(self) -> ValidationReport | None:
        return self._snapshot.report

    @property
    def version(self) -> int:
        return self._snapshot.version

    def __len__(self) -> int:
        return len(self._snapshot.records)

    def search(self, query: str = "", filters: SearchFilters | None = None) -> list[PlanetRecord]:
        """Text match plus AND-composed filters, stably sorted.

        Args:
            query: Case-insensitive substring matched against name, system,
                type, discovery method and constellation name
            filters: Optional `SearchFilters`; defaults sort by name ascending

        Returns:
            Matching records in sort order
        """
        f = filters or SearchFilters()
        results: Iterable[PlanetRecord] = self.records
        needle = query.strip().lower()
        if needle:
            results = [p for p in results if _matches_query(p, needle)]
        results = [p for p in results if _matches_filters(p, f)]
        return sort_records(results, f.sort_by, f.sort_dir)

    def get_by_name(self, name: str) -> PlanetRecord | None:
        for p in self.records:
            if p.name == name:
                return p
        return None

    def get_system_planets(self, system_name: str) -> list[PlanetRecord]:
        return [p for p in self.records if p.system == system_name]

    def get_stats(self) -> CatalogStats:
        records = self.records
        types = Counter(p.type or "Unknown" for p in records)
        star_types = Counter((p.star_type or "?")[0] for p in records)
        methods = Counter(p.discovery_method for p in records if p.discovery_method)

        habitabilities = [p.habitability or 0.0 for p in records]
        avg = sum(habitabilities) / len(habitabilities) if habitabilities else 0.0

        with_distance = [p for p in records if p.distance is not None and p.distance > 0]
        nearest = min(with_distance, key=lambda p: p.distance, default=None)
        most_habitable = max(records, key=lambda p: p.habitability or 0.0, default=None)

        return CatalogStats(
            total=len(records),
            types=dict(types),
            star_types=dict(star_types),
            methods=dict(methods),
            avg_habitability=round(avg, 2),
            high_habitability_count=sum(h >= HIGH_SCORE_THRESHOLD for h in habitabilities),
            in_habitable_zone=sum(
                1 for p in records if p.hz_status is not None and p.hz_status.optimistic
            ),
            high_esi_count=sum(1 for p in records if _esi_global(p) >= HIGH_SCORE_THRESHOLD),
            nearest_planet=nearest,
            most_habitable=most_habitable,
            data_source=self.source,
            last_updated=self.cache.last_updated() if self.cache is not None else None,
        )
