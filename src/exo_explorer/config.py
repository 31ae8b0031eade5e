"""Pipeline configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path

from platformdirs import user_cache_dir

TAP_ENDPOINT = "https://exoplanetarchive.ipac.caltech.edu/TAP/sync"

HOUR_SECONDS = 60.0 * 60.0
DAY_SECONDS = 24.0 * HOUR_SECONDS


def default_cache_dir() -> Path:
    """Choose a default on-disk cache directory.

    Preference order:
    1) `EXO_EXPLORER_CACHE_DIR` (explicit override)
    2) OS-appropriate user cache directory (via platformdirs)
    """
    explicit = os.getenv("EXO_EXPLORER_CACHE_DIR")
    if explicit:
        return Path(explicit).expanduser()
    return Path(user_cache_dir("exo-explorer"))


@dataclass(frozen=True)
class PipelineConfig:
    """
    Configuration for the catalog data pipeline.

    Frozen so a single load (and its background refresh) sees one consistent
    set of thresholds.

    Attributes
    ----------
    tap_endpoint : str
        NASA Exoplanet Archive TAP sync endpoint.
    timeout_seconds : float
        Hard cap on the bulk query, including response download.
    fresh_max_age_seconds : float
        Cache younger than this is served without touching the network (24h).
    usable_max_age_seconds : float
        Cache younger than this may back a failed fetch (7 days).
    cache_max_bytes : int
        Serialized record payload above this size is truncated before storing.
    cache_truncate_fraction : float
        Fraction of records kept when the payload is over budget.
    cache_dir : Path | None
        Directory for the file-backed cache. None means `default_cache_dir()`.
    background_refresh_delay_seconds : float
        Delay callers use when scheduling a refresh after a cache-backed load.
    """

    tap_endpoint: str = TAP_ENDPOINT
    timeout_seconds: float = 30.0
    fresh_max_age_seconds: float = DAY_SECONDS
    usable_max_age_seconds: float = 7 * DAY_SECONDS
    cache_max_bytes: int = int(4.5 * 1024 * 1024)
    cache_truncate_fraction: float = 0.8
    cache_dir: Path | None = None
    background_refresh_delay_seconds: float = 5.0

    def __post_init__(self) -> None:
        if self.timeout_seconds <= 0:
            raise ValueError(f"timeout_seconds must be positive, got {self.timeout_seconds}")
        if self.fresh_max_age_seconds > self.usable_max_age_seconds:
            raise ValueError("fresh_max_age_seconds cannot exceed usable_max_age_seconds")
        if not 0.0 < self.cache_truncate_fraction <= 1.0:
            raise ValueError(
                f"cache_truncate_fraction must be in (0, 1], got {self.cache_truncate_fraction}"
            )

    def resolved_cache_dir(self) -> Path:
        return self.cache_dir if self.cache_dir is not None else default_cache_dir()

    def with_overrides(self, **changes: object) -> PipelineConfig:
        return replace(self, **changes)  # type: ignore[arg-type]

    @classmethod
    def from_env(cls) -> PipelineConfig:
        """Build a config from `EXO_EXPLORER_*` environment variables."""
        kwargs: dict[str, object] = {}
        endpoint = os.getenv("EXO_EXPLORER_TAP_ENDPOINT")
        if endpoint:
            kwargs["tap_endpoint"] = endpoint.strip()
        timeout = _env_float("EXO_EXPLORER_TIMEOUT")
        if timeout is not None:
            kwargs["timeout_seconds"] = timeout
        fresh_hours = _env_float("EXO_EXPLORER_FRESH_HOURS")
        if fresh_hours is not None:
            kwargs["fresh_max_age_seconds"] = fresh_hours * HOUR_SECONDS
        usable_days = _env_float("EXO_EXPLORER_USABLE_DAYS")
        if usable_days is not None:
            kwargs["usable_max_age_seconds"] = usable_days * DAY_SECONDS
        cache_dir = os.getenv("EXO_EXPLORER_CACHE_DIR")
        if cache_dir:
            kwargs["cache_dir"] = Path(cache_dir).expanduser()
        return cls(**kwargs)  # type: ignore[arg-type]


def _env_float(name: str) -> float | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {raw!r}") from exc
