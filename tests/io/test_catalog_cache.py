"""Tests for CatalogCache staleness, truncation, and failure containment."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from exo_explorer.platform.io.cache import (
    CACHE_KEY,
    CACHE_META_KEY,
    CACHE_VERSION,
    CacheMeta,
    CatalogCache,
    FileKeyValueStore,
    MemoryKeyValueStore,
    format_age,
)

MINUTE = 60.0
HOUR = 60 * MINUTE
DAY = 24 * HOUR


def _seed(cache: CatalogCache, planets, *, age: float, version: int = CACHE_VERSION) -> None:
    meta = CacheMeta(version=version, fetched_at=cache.clock() - age, record_count=len(planets))
    assert cache.write(planets, meta) is not None


class TestStaleness:
    @pytest.mark.parametrize(
        ("age", "fresh", "usable"),
        [
            (23 * HOUR + 59 * MINUTE, True, True),
            (24 * HOUR + 1 * MINUTE, False, True),
            (3 * DAY, False, True),
            (7 * DAY + 1 * HOUR, False, False),
        ],
    )
    def test_boundaries(self, memory_cache, planet_factory, age, fresh, usable) -> None:
        _seed(memory_cache, [planet_factory()], age=age)
        assert memory_cache.is_fresh() is fresh
        assert memory_cache.is_usable() is usable

    def test_version_mismatch_invalidates(self, memory_cache, planet_factory) -> None:
        _seed(memory_cache, [planet_factory()], age=MINUTE, version=CACHE_VERSION - 1)
        assert not memory_cache.is_fresh()
        assert not memory_cache.is_usable()

    def test_empty_cache(self, memory_cache) -> None:
        assert memory_cache.read() is None
        assert memory_cache.read_meta() is None
        assert memory_cache.age_seconds() is None
        assert not memory_cache.is_fresh()
        assert memory_cache.last_updated() is None

    def test_clock_advance_ages_entry(self, memory_cache, planet_factory, clock) -> None:
        _seed(memory_cache, [planet_factory()], age=0)
        assert memory_cache.is_fresh()
        clock.advance(25 * HOUR)
        assert not memory_cache.is_fresh()
        assert memory_cache.age_seconds() == pytest.approx(25 * HOUR)


class TestReadWrite:
    def test_round_trip_drops_derived_fields(self, memory_cache, planet_factory) -> None:
        planet = planet_factory(ra=10.0, dec=20.0)
        planet.habitability = 0.9
        _seed(memory_cache, [planet], age=0)
        (restored,) = memory_cache.read()
        assert restored.name == planet.name
        assert restored.ra == 10.0
        assert restored.habitability is None

    def test_meta_carries_report(self, memory_cache, planet_factory) -> None:
        from exo_explorer.validation.cleaner import validate_and_clean

        cleaned, report = validate_and_clean([planet_factory()])
        memory_cache.write(cleaned, CacheMeta(fetched_at=memory_cache.clock(), report=report))
        assert memory_cache.read_meta().report == report

    def test_truncates_once_when_over_budget(self, clock, config, planet_factory) -> None:
        planets = [planet_factory(f"P{i} b") for i in range(20)]
        single = len(json.dumps([planets[0].to_dict(include_derived=False)]))
        cache = CatalogCache(
            MemoryKeyValueStore(),
            config=config.with_overrides(cache_max_bytes=single * 10),
            clock=clock,
        )
        stored = cache.write(planets, CacheMeta(fetched_at=clock(), record_count=20))
        assert stored.truncated is True
        assert stored.cached_count == 16
        assert stored.record_count == 20
        assert len(cache.read()) == 16
        assert cache.read_meta().truncated is True

    def test_within_budget_not_truncated(self, memory_cache, planet_factory) -> None:
        stored = memory_cache.write(
            [planet_factory()], CacheMeta(fetched_at=memory_cache.clock(), record_count=1)
        )
        assert stored.truncated is False
        assert stored.cached_count == 1

    def test_quota_failure_is_contained(self, clock, config, planet_factory) -> None:
        cache = CatalogCache(MemoryKeyValueStore(quota_bytes=16), config=config, clock=clock)
        assert cache.write([planet_factory()], CacheMeta(fetched_at=clock())) is None
        assert cache.read() is None

    def test_corrupted_payload_is_a_miss(self, memory_cache, planet_factory) -> None:
        _seed(memory_cache, [planet_factory()], age=0)
        memory_cache.store.set(CACHE_KEY, "{not json")
        assert memory_cache.read() is None

    def test_non_list_payload_is_a_miss(self, memory_cache, planet_factory) -> None:
        _seed(memory_cache, [planet_factory()], age=0)
        memory_cache.store.set(CACHE_KEY, json.dumps({"planets": []}))
        assert memory_cache.read() is None

    @pytest.mark.parametrize(
        ("key", "value"),
        [
            ("radius", "abc"),
            ("eqTemp", True),
            ("discovered", 2020.5),
            ("name", 5),
            ("controversial", "yes"),
            ("starLum", [1.0]),
        ],
    )
    def test_mistyped_record_is_a_miss(self, memory_cache, planet_factory, key, value) -> None:
        _seed(memory_cache, [planet_factory("Good b"), planet_factory("Bad c")], age=0)
        payload = json.loads(memory_cache.store.get(CACHE_KEY))
        payload[1][key] = value
        memory_cache.store.set(CACHE_KEY, json.dumps(payload))
        assert memory_cache.read() is None

    def test_non_object_record_is_a_miss(self, memory_cache, planet_factory) -> None:
        _seed(memory_cache, [planet_factory()], age=0)
        memory_cache.store.set(CACHE_KEY, json.dumps(["Test b"]))
        assert memory_cache.read() is None

    def test_corrupted_meta_is_a_miss(self, memory_cache, planet_factory) -> None:
        _seed(memory_cache, [planet_factory()], age=0)
        memory_cache.store.set(CACHE_META_KEY, "[]")
        assert memory_cache.read_meta() is None
        assert not memory_cache.is_fresh()

    def test_meta_ignores_unknown_keys(self, memory_cache) -> None:
        memory_cache.store.set(
            CACHE_META_KEY,
            json.dumps({"version": CACHE_VERSION, "fetched_at": 1.0, "future_field": True}),
        )
        assert memory_cache.read_meta().fetched_at == 1.0

    def test_clear_removes_both_entries(self, memory_cache, planet_factory) -> None:
        _seed(memory_cache, [planet_factory()], age=0)
        memory_cache.clear()
        assert memory_cache.store.keys() == []
        assert memory_cache.read() is None

    def test_last_updated(self, memory_cache, planet_factory) -> None:
        _seed(memory_cache, [planet_factory(), planet_factory("Other b")], age=3 * DAY)
        info = memory_cache.last_updated()
        assert info["age"] == "3 days"
        assert info["record_count"] == 2
        assert info["formatted"].endswith(" UTC")


class TestFileKeyValueStore:
    def test_round_trip(self, tmp_path: Path) -> None:
        store = FileKeyValueStore(tmp_path / "cache")
        assert store.get("k") is None
        store.set("k", "value")
        assert store.get("k") == "value"
        assert sorted(p.name for p in (tmp_path / "cache").iterdir()) == ["k.json"]

    def test_remove_missing_is_noop(self, tmp_path: Path) -> None:
        store = FileKeyValueStore(tmp_path)
        store.remove("absent")
        store.set("k", "v")
        store.remove("k")
        assert store.get("k") is None

    def test_rejects_unsafe_keys(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError):
            FileKeyValueStore(tmp_path).set("../escape", "x")

    def test_backs_catalog_cache(self, tmp_path: Path, clock, config, planet_factory) -> None:
        cache = CatalogCache(FileKeyValueStore(tmp_path), config=config, clock=clock)
        _seed(cache, [planet_factory()], age=HOUR)
        reopened = CatalogCache(FileKeyValueStore(tmp_path), config=config, clock=clock)
        assert reopened.is_fresh()
        assert [p.name for p in reopened.read()] == ["Test b"]


@pytest.mark.parametrize(
    ("seconds", "text"),
    [
        (30 * MINUTE, "less than 1 hour"),
        (HOUR, "1 hour"),
        (5 * HOUR + 59 * MINUTE, "5 hours"),
        (DAY, "1 day"),
        (3 * DAY + 2 * HOUR, "3 days"),
    ],
)
def test_format_age(seconds: float, text: str) -> None:
    assert format_age(seconds) == text


def test_last_updated_timestamp_format(memory_cache) -> None:
    memory_cache.store.set(CACHE_META_KEY, CacheMeta(fetched_at=0.0).model_dump_json())
    assert memory_cache.last_updated()["formatted"] == "1970-01-01 00:00:00 UTC"
