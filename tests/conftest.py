"""Shared fixtures: offline archive rows, fake clients, manual clocks."""

from __future__ import annotations

from typing import Any

import pytest

from exo_explorer.config import PipelineConfig
from exo_explorer.domain.planet import PlanetRecord
from exo_explorer.platform.catalogs.exoplanet_archive import RemoteNetworkError
from exo_explorer.platform.io.cache import CatalogCache, MemoryKeyValueStore

NOW = 1_700_000_000.0


class ManualClock:
    """Callable clock whose time only moves when told to."""

    def __init__(self, start: float = NOW) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeArchiveClient:
    """Stands in for ExoplanetArchiveClient; returns rows or raises."""

    def __init__(self, rows: list[dict[str, Any]] | None = None, error: Exception | None = None):
        self.rows = rows or []
        self.error = error
        self.calls = 0

    def fetch_remote_data(self, on_progress=None) -> list[dict[str, Any]]:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return list(self.rows)


def archive_row(name: str = "Test b", **overrides: Any) -> dict[str, Any]:
    row: dict[str, Any] = {
        "pl_name": name,
        "hostname": name.rsplit(" ", 1)[0],
        "sy_dist": 10.0,
        "pl_rade": 1.0,
        "pl_bmasse": 1.0,
        "pl_orbper": 365.25,
        "pl_orbsmax": 1.0,
        "pl_eqt": 255,
        "st_spectype": "G2 V",
        "st_teff": 5780,
        "st_mass": 1.0,
        "st_lum": 0.0,
        "disc_year": 2020,
        "discoverymethod": "Transit",
        "disc_facility": "Kepler",
        "ra": 285.0,
        "dec": 40.0,
        "sy_vmag": 11.2,
        "sy_kmag": 9.8,
        "pl_orbeccen": 0.01,
        "pl_orbincl": 89.9,
        "disc_refname": "Test et al. 2020",
        "pl_controv_flag": 0,
        "default_flag": 1,
    }
    row.update(overrides)
    return row


def make_planet(name: str = "Test b", **overrides: Any) -> PlanetRecord:
    fields: dict[str, Any] = {
        "system": name.rsplit(" ", 1)[0],
        "distance": 32.6,
        "radius": 1.0,
        "mass": 1.0,
        "period": 365.25,
        "semi_major_axis": 1.0,
        "eq_temp": 255,
        "star_type": "G2V",
        "star_temp": 5780,
        "star_mass": 1.0,
        "star_lum": 1.0,
        "discovered": 2020,
        "discovery_method": "Transit",
    }
    fields.update(overrides)
    return PlanetRecord(name=name, **fields)


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()


@pytest.fixture
def config() -> PipelineConfig:
    return PipelineConfig()


@pytest.fixture
def memory_cache(clock: ManualClock, config: PipelineConfig) -> CatalogCache:
    return CatalogCache(MemoryKeyValueStore(), config=config, clock=clock)


@pytest.fixture
def failing_client() -> FakeArchiveClient:
    return FakeArchiveClient(error=RemoteNetworkError("TAP query failed: connection refused"))


@pytest.fixture
def planet_factory():
    return make_planet


@pytest.fixture
def row_factory():
    return archive_row


@pytest.fixture
def client_factory():
    return FakeArchiveClient
