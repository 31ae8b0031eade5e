"""Persistent catalog cache with staleness semantics.

Two entries live in a simple string key/value store: the serialized cleaned
record array and its metadata. The cache is a best-effort acceleration layer,
not a source of truth: every storage or parse failure is logged and treated as
a miss, and concurrent writers are not coordinated (last write wins).
"""

from __future__ import annotations

import json
import logging
import os
import re
import time
from collections.abc import Callable, Sequence
from datetime import datetime, timezone
from pathlib import Path
from threading import Lock
from typing import Any, ClassVar, Protocol

from pydantic import BaseModel, ConfigDict

from exo_explorer.config import PipelineConfig
from exo_explorer.domain.planet import PlanetRecord
from exo_explorer.validation.cleaner import ValidationReport

logger = logging.getLogger(__name__)

CACHE_KEY = "exoplanet_nasa_cache"
CACHE_META_KEY = "exoplanet_nasa_cache_meta"
# Bumping this invalidates every existing cache
CACHE_VERSION = 2

_SAFE_KEY = re.compile(r"^[A-Za-z0-9_.-]+$")


def _best_effort_chmod(path: Path, mode: int) -> None:
    try:
        os.chmod(path, mode)
    except OSError:
        return


class KeyValueStore(Protocol):
    """Minimal string key/value persistence used by `CatalogCache`."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...


class FileKeyValueStore:
    """One UTF-8 file per key under `cache_dir`, written atomically."""

    def __init__(self, cache_dir: str | Path) -> None:
        self.cache_dir = Path(cache_dir)
        self._lock = Lock()

    def _path(self, key: str) -> Path:
        if not _SAFE_KEY.match(key):
            raise ValueError(f"Invalid cache key: {key!r}")
        return self.cache_dir / f"{key}.json"

    def get(self, key: str) -> str | None:
        path = self._path(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None

    def set(self, key: str, value: str) -> None:
        path = self._path(key)
        with self._lock:
            self.cache_dir.mkdir(parents=True, exist_ok=True)
            _best_effort_chmod(self.cache_dir, 0o700)
            tmp = path.with_suffix(path.suffix + ".tmp")
            tmp.write_text(value, encoding="utf-8")
            tmp.replace(path)

    def remove(self, key: str) -> None:
        with self._lock:
            try:
                self._path(key).unlink()
            except FileNotFoundError:
                pass


class MemoryKeyValueStore:
    """In-process store, optionally with a byte quota that mimics a full disk."""

    def __init__(self, quota_bytes: int | None = None) -> None:
        self.quota_bytes = quota_bytes
        self._data: dict[str, str] = {}
        self._lock = Lock()

    def get(self, key: str) -> str | None:
        with self._lock:
            return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            if self.quota_bytes is not None:
                used = sum(len(v) for k, v in self._data.items() if k != key)
                if used + len(value) > self.quota_bytes:
                    raise OSError(f"Storage quota exceeded writing {key!r}")
            self._data[key] = value

    def remove(self, key: str) -> None:
        with self._lock:
            self._data.pop(key, None)

    def keys(self) -> list[str]:
        with self._lock:
            return sorted(self._data)


class CacheMeta(BaseModel):
    """Metadata stored alongside the cached record array.

    Attributes:
        version: Cache schema version; entries with another version are ignored
        fetched_at: Unix timestamp (seconds) of the fetch that produced the data
        record_count: Records produced by that fetch
        cached_count: Records actually stored (smaller when truncated)
        report: Validation report of the fetch
        truncated: Whether the array was cut down to fit the size budget
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    version: int = CACHE_VERSION
    fetched_at: float
    record_count: int = 0
    cached_count: int | None = None
    report: ValidationReport | None = None
    truncated: bool = False


def format_age(age_seconds: float) -> str:
    """Human-readable age: "less than 1 hour", "N hour(s)", or "N day(s)"."""
    hours = int(age_seconds // 3600)
    if hours < 1:
        return "less than 1 hour"
    if hours < 24:
        return f"{hours} hour{'s' if hours > 1 else ''}"
    days = hours // 24
    return f"{days} day{'s' if days > 1 else ''}"


class CatalogCache:
    """Last-known-good cleaned catalog plus metadata.

    Freshness windows come from `PipelineConfig`: a fresh cache is served
    without touching the network, a usable one only backs a failed fetch.
    """

    def __init__(
        self,
        store: KeyValueStore,
        *,
        config: PipelineConfig | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.store = store
        self.config = config or PipelineConfig()
        self.clock = clock

    @classmethod
    def from_config(cls, config: PipelineConfig) -> CatalogCache:
        return cls(FileKeyValueStore(config.resolved_cache_dir()), config=config)

    def read_meta(self) -> CacheMeta | None:
        try:
            raw = self.store.get(CACHE_META_KEY)
            if not raw:
                return None
            return CacheMeta.model_validate_json(raw)
        except Exception as e:
            logger.warning(f"Ignoring unreadable cache metadata: {e}")
            return None

    def _current_meta(self) -> CacheMeta | None:
        meta = self.read_meta()
        if meta is None or meta.version != CACHE_VERSION:
            return None
        return meta

    def age_seconds(self) -> float | None:
        meta = self.read_meta()
        if meta is None:
            return None
        return self.clock() - meta.fetched_at

    def is_fresh(self) -> bool:
        meta = self._current_meta()
        if meta is None:
            return False
        return self.clock() - meta.fetched_at < self.config.fresh_max_age_seconds

    def is_usable(self) -> bool:
        meta = self._current_meta()
        if meta is None:
            return False
        return self.clock() - meta.fetched_at < self.config.usable_max_age_seconds

    def read(self) -> list[PlanetRecord] | None:
        """Deserialize the cached records, or None on a miss or any error."""
        try:
            raw = self.store.get(CACHE_KEY)
            if not raw:
                return None
            payload = json.loads(raw)
            if not isinstance(payload, list):
                logger.warning(f"Ignoring cache payload of type {type(payload).__name__}")
                return None
            # A single malformed record invalidates the whole snapshot
            return [PlanetRecord.from_dict(item) for item in payload]
        except Exception as e:
            logger.warning(f"Ignoring unreadable cache payload: {e}")
            return None

    def write(self, records: Sequence[PlanetRecord], meta: CacheMeta) -> CacheMeta | None:
        """Persist records and metadata.

        When the serialized payload exceeds the size budget the record list is
        truncated once to `cache_truncate_fraction` of its length.

        Returns:
            The metadata actually stored, or None if persisting failed
        """
        try:
            data = [r.to_dict(include_derived=False) for r in records]
            text = json.dumps(data)
            truncated = False
            if len(text) > self.config.cache_max_bytes:
                keep = int(len(data) * self.config.cache_truncate_fraction)
                logger.warning(
                    f"Cache payload {len(text)} bytes over budget; keeping {keep}/{len(data)} records"
                )
                data = data[:keep]
                text = json.dumps(data)
                truncated = True
            self.store.set(CACHE_KEY, text)
            stored = meta.model_copy(update={"truncated": truncated, "cached_count": len(data)})
            self.store.set(CACHE_META_KEY, stored.model_dump_json())
        except Exception as e:
            logger.warning(f"Could not write cache: {e}")
            return None
        return stored

    def clear(self) -> None:
        for key in (CACHE_KEY, CACHE_META_KEY):
            try:
                self.store.remove(key)
            except Exception as e:
                logger.warning(f"Could not remove cache entry {key}: {e}")

    def format_age(self, timestamp: float) -> str:
        return format_age(self.clock() - timestamp)

    def last_updated(self) -> dict[str, Any] | None:
        """Summary of the cached snapshot for status displays."""
        meta = self.read_meta()
        if meta is None:
            return None
        formatted = datetime.fromtimestamp(meta.fetched_at, tz=timezone.utc).strftime(
            "%Y-%m-%d %H:%M:%S UTC"
        )
        return {
            "timestamp": meta.fetched_at,
            "formatted": formatted,
            "age": self.format_age(meta.fetched_at),
            "record_count": meta.record_count or meta.cached_count or 0,
        }
