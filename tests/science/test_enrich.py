"""Tests for the single-pass science enrichment."""

from __future__ import annotations

from exo_explorer.science.enrich import enrich_catalog, enrich_planet


def test_enrich_populates_derived_fields(planet_factory) -> None:
    planet = enrich_planet(planet_factory(ra=285.0, dec=40.0, v_mag=11.2))
    assert planet.type == "Rocky Terrestrial"
    assert planet.habitability == 1.0
    assert planet.hz_status.label == "In Conservative HZ"
    assert planet.esi.global_ >= 0.99
    assert planet.coords.ra.startswith("19h 00m")
    assert planet.constellation.name == "Lyra"
    assert planet.observability is not None
    assert planet.magnitude_guidance.label == "Medium Telescope"
    assert planet.discovery_method_info.name == "Transit"
    assert planet.atmosphere


def test_enrich_is_idempotent(planet_factory) -> None:
    planet = enrich_planet(planet_factory(ra=10.0, dec=-5.0, v_mag=8.0))
    before = planet.to_dict()
    assert enrich_planet(planet).to_dict() == before


def test_missing_coordinates_leave_observer_fields_empty(planet_factory) -> None:
    planet = enrich_planet(planet_factory(ra=None, dec=12.0))
    assert planet.coords is None
    assert planet.constellation is None
    assert planet.observability is None


def test_missing_magnitude(planet_factory) -> None:
    assert enrich_planet(planet_factory(v_mag=None)).magnitude_guidance is None


def test_reenrich_clears_stale_fields(planet_factory) -> None:
    planet = enrich_planet(planet_factory(ra=10.0, dec=5.0, v_mag=3.0))
    planet.ra = None
    planet.v_mag = None
    enrich_planet(planet)
    assert planet.coords is None
    assert planet.magnitude_guidance is None


def test_enrich_catalog_copies_and_assigns_ids(planet_factory) -> None:
    source = [planet_factory("A b"), planet_factory("B c")]
    enriched = enrich_catalog(source)
    assert [p.id for p in enriched] == [0, 1]
    assert all(p.type is not None for p in enriched)
    assert source[0].id is None
    assert source[0].type is None
