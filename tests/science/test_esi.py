"""Tests for the Earth Similarity Index."""

from __future__ import annotations

import itertools

import pytest

from exo_explorer.science.esi import (
    INSUFFICIENT_DATA_NOTE,
    MASS_ESTIMATED_NOTE,
    calculate_esi,
    esi_component,
)


def test_earth_twin(planet_factory) -> None:
    result = calculate_esi(planet_factory(radius=1.0, mass=1.0, eq_temp=255))
    assert result.global_ >= 0.99
    assert result.interior == pytest.approx(1.0)
    assert result.surface == pytest.approx(1.0)
    assert result.confidence == "high"
    assert result.note is None


@pytest.mark.parametrize(
    ("radius", "mass", "eq_temp"),
    list(itertools.product([0.3, 1.0, 2.5, 11.0], [None, 0.1, 1.0, 300.0], [40, 255, 1500])),
)
def test_scores_within_unit_interval(planet_factory, radius, mass, eq_temp) -> None:
    result = calculate_esi(planet_factory(radius=radius, mass=mass, eq_temp=eq_temp))
    assert 0.0 <= result.global_ <= 1.0
    for value in (result.interior, result.surface, *result.components.values()):
        assert value is None or 0.0 <= value <= 1.0


def test_rounded_to_three_decimals(planet_factory) -> None:
    result = calculate_esi(planet_factory(radius=1.3, mass=2.1, eq_temp=280))
    assert result.global_ == round(result.global_, 3)
    assert result.interior == round(result.interior, 3)


@pytest.mark.parametrize(
    "overrides",
    [{"radius": None}, {"eq_temp": None}, {"radius": 0.0}, {"radius": -1.0}, {"eq_temp": -5}],
)
def test_insufficient_data(planet_factory, overrides) -> None:
    result = calculate_esi(planet_factory(**overrides))
    assert result.global_ == 0.0
    assert result.note == INSUFFICIENT_DATA_NOTE
    assert result.interior is None


def test_missing_mass_is_estimated(planet_factory) -> None:
    result = calculate_esi(planet_factory(mass=None))
    assert result.note == MASS_ESTIMATED_NOTE
    assert result.confidence == "moderate"
    assert result.components.density is not None


def test_estimated_temperature_lowers_confidence(planet_factory) -> None:
    result = calculate_esi(planet_factory(eq_temp_estimated=True))
    assert result.confidence == "moderate"


def test_component_rejects_non_positive() -> None:
    assert esi_component(None, 1.0, 0.57) is None
    assert esi_component(0.0, 1.0, 0.57) is None
    assert esi_component(1.0, 1.0, 0.57) == 1.0


def test_to_dict_uses_global_key(planet_factory) -> None:
    data = calculate_esi(planet_factory()).to_dict()
    assert "global" in data
    assert set(data["components"]) == {"radius", "density", "escapeVelocity", "surfaceTemp"}
