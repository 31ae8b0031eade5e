"""Tests for planet classification, habitability and atmospheres."""

from __future__ import annotations

import pytest

from exo_explorer.science.classification import (
    PlanetType,
    calculate_habitability,
    classify_planet,
    describe_star_type,
    generate_atmosphere,
    name_seed,
    seeded_random,
)


@pytest.mark.parametrize(
    ("radius", "eq_temp", "expected"),
    [
        (1.0, 2000, PlanetType.LAVA_WORLD),
        (11.0, 1200, PlanetType.HOT_JUPITER),
        (11.0, 600, PlanetType.WARM_JUPITER),
        (11.0, 100, PlanetType.COLD_JUPITER),
        (4.0, 900, PlanetType.HOT_NEPTUNE),
        (4.0, 300, PlanetType.WARM_NEPTUNE),
        (4.0, 100, PlanetType.ICE_GIANT),
        (2.0, 300, PlanetType.WATER_WORLD),
        (2.0, 600, PlanetType.SUPER_EARTH),
        (0.4, 300, PlanetType.SUB_EARTH),
        (1.0, 700, PlanetType.LAVA_WORLD),
        (1.0, 100, PlanetType.DESERT_WORLD),
        (1.0, 255, PlanetType.ROCKY_TERRESTRIAL),
    ],
)
def test_classify_planet(radius, eq_temp, expected) -> None:
    assert classify_planet(radius, None, eq_temp) is expected


def test_classify_defaults_missing_inputs() -> None:
    # radius defaults to 1
    assert classify_planet(None, None, None) is PlanetType.ROCKY_TERRESTRIAL


@pytest.mark.parametrize(
    ("radius", "expected"),
    [
        (12.0, PlanetType.COLD_JUPITER),
        (4.0, PlanetType.ICE_GIANT),
        (2.0, PlanetType.SUPER_EARTH),
        (1.0, PlanetType.ROCKY_TERRESTRIAL),
        (0.3, PlanetType.SUB_EARTH),
    ],
)
def test_classify_without_temperature_uses_radius_tier(radius, expected) -> None:
    assert classify_planet(radius, None, None) is expected


def test_seeded_random_is_deterministic() -> None:
    first = seeded_random(42)
    assert first() == pytest.approx(1083814273 / 0xFFFFFFFF)
    a, b = seeded_random(7), seeded_random(7)
    assert [a() for _ in range(5)] == [b() for _ in range(5)]


def test_name_seed_is_stable() -> None:
    assert name_seed("TRAPPIST-1 e") == name_seed("TRAPPIST-1 e")
    assert name_seed("TRAPPIST-1 e") != name_seed("TRAPPIST-1 f")


class TestAtmosphere:
    def test_hot_jupiter_gases(self) -> None:
        gases = [g["gas"] for g in generate_atmosphere(PlanetType.HOT_JUPITER, 1500, 1)]
        assert gases == ["H₂", "He", "CH₄"]

    def test_temperate_rocky_recipe(self) -> None:
        gases = [g["gas"] for g in generate_atmosphere("Rocky Terrestrial", 255, 1)]
        assert gases == ["N₂", "CO₂", "H₂O", "O₂"]

    def test_unknown_type_falls_back_to_rocky(self) -> None:
        gases = [g["gas"] for g in generate_atmosphere("Bogus", 1000, 1)]
        assert gases == ["CO₂", "N₂", "SO₂"]

    @pytest.mark.parametrize("ptype", list(PlanetType))
    def test_percentages_normalized(self, ptype: PlanetType) -> None:
        atmosphere = generate_atmosphere(ptype, 300, name_seed("X b"))
        assert sum(g["percentage"] for g in atmosphere) == pytest.approx(100.0, abs=0.3)
        assert all(g["percentage"] >= 0 for g in atmosphere)

    def test_same_seed_same_composition(self) -> None:
        assert generate_atmosphere("Super-Earth", 400, 99) == generate_atmosphere("Super-Earth", 400, 99)


class TestHabitability:
    def test_earth_analog_scores_one(self, planet_factory) -> None:
        assert calculate_habitability(planet_factory()) == pytest.approx(1.0)

    def test_hot_jupiter_scores_low(self, planet_factory) -> None:
        planet = planet_factory(
            radius=11.0, mass=300.0, eq_temp=1500, star_type="M3V", semi_major_axis=0.05
        )
        assert calculate_habitability(planet) == pytest.approx(0.11)

    def test_missing_everything_within_bounds(self, planet_factory) -> None:
        planet = planet_factory(
            radius=None, mass=None, eq_temp=None, star_type=None, semi_major_axis=None
        )
        score = calculate_habitability(planet)
        assert 0.0 <= score <= 1.0
        assert score == pytest.approx(0.16)


def test_describe_star_type() -> None:
    assert describe_star_type("g2v") == "G-type Yellow Dwarf"
    assert describe_star_type("M5.5 V") == "M-type Red Dwarf"
    assert describe_star_type("") is None
    assert describe_star_type("Y0") is None
