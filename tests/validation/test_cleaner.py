"""Tests for validate_and_clean and the validation summary."""

from __future__ import annotations

import logging

import pytest

from exo_explorer.domain.planet import PlanetRecord
from exo_explorer.validation.cleaner import (
    DEFAULT_EQ_TEMP_K,
    DuplicateName,
    compute_validation_summary,
    estimate_eq_temp,
    estimate_mass_from_radius,
    log_validation_report,
    validate_and_clean,
)

REQUIRED = ("radius", "mass", "eq_temp", "period", "semi_major_axis")


def _bare(name: str, **fields) -> PlanetRecord:
    return PlanetRecord(name=name, system=name.rsplit(" ", 1)[0], **fields)


class TestValidateAndClean:
    def test_clean_record_passes_unmodified(self, planet_factory) -> None:
        planet = planet_factory()
        cleaned, report = validate_and_clean([planet])
        assert cleaned[0].to_dict() == planet.to_dict()
        assert cleaned[0] is not planet
        assert report.total_input == report.total_output == report.passed == 1
        assert report.bad_values == []
        assert report.duplicates == []

    def test_deduplicates_first_wins(self, planet_factory) -> None:
        first = planet_factory("Dup b", radius=1.5)
        second = planet_factory("Dup b", radius=9.0)
        cleaned, report = validate_and_clean([first, second, planet_factory("Other b")])
        assert [p.name for p in cleaned] == ["Dup b", "Other b"]
        assert cleaned[0].radius == 1.5
        assert report.duplicates == [DuplicateName(name="Dup b", count=2)]
        assert report.cleaned == 1

    def test_accounting_invariant(self, planet_factory) -> None:
        records = [planet_factory("A b"), planet_factory("A b"), planet_factory("A b"), _bare("B b")]
        cleaned, report = validate_and_clean(records)
        assert report.total_output + report.cleaned <= report.total_input
        assert report.total_output == len(cleaned) == 2
        assert report.duplicates[0].count == 3

    def test_required_fields_are_filled(self) -> None:
        cleaned, report = validate_and_clean([_bare("Sparse b"), _bare("Big b", radius=6.0)])
        for p in cleaned:
            for field in REQUIRED:
                assert getattr(p, field) is not None
        sparse, big = cleaned
        assert sparse.radius == 1.0
        assert sparse.mass == pytest.approx(1.0)
        assert sparse.eq_temp == DEFAULT_EQ_TEMP_K
        assert sparse.eq_temp_estimated is True
        assert sparse.distance == 0.0
        assert big.mass == pytest.approx(30.0)
        assert report.null_fields["radius"] == 1
        assert report.null_fields["eqTemp"] == 2

    def test_input_is_not_mutated(self) -> None:
        original = _bare("Sparse b")
        validate_and_clean([original])
        assert original.radius is None
        assert original.eq_temp_estimated is False

    def test_out_of_range_values_are_flagged_not_dropped(self, planet_factory) -> None:
        records = [
            planet_factory("Huge b", radius=150.0),
            planet_factory("Negative b", mass=-1.0),
            planet_factory("Nowhere b", distance=0.0),
            planet_factory("Frozen b", eq_temp=1),
        ]
        cleaned, report = validate_and_clean(records)
        assert len(cleaned) == 4
        flagged = {(b.name, b.field) for b in report.bad_values}
        assert flagged == {
            ("Huge b", "radius"),
            ("Negative b", "mass"),
            ("Nowhere b", "distance"),
            ("Frozen b", "eqTemp"),
        }

    def test_counts_controversial(self, planet_factory) -> None:
        _, report = validate_and_clean([planet_factory(controversial=True)])
        assert report.controversial == 1

    def test_empty_input(self) -> None:
        cleaned, report = validate_and_clean([])
        assert cleaned == []
        assert report.total_input == 0


class TestEstimates:
    def test_mass_from_radius(self) -> None:
        assert estimate_mass_from_radius(2.0) == pytest.approx(2.0**2.5)
        assert estimate_mass_from_radius(10.0) == 50.0

    def test_eq_temp_from_star(self) -> None:
        assert estimate_eq_temp(1.0, 1.0) == 278
        assert estimate_eq_temp(16.0, 4.0) == 278
        assert estimate_eq_temp(None, 1.0) == DEFAULT_EQ_TEMP_K
        assert estimate_eq_temp(1.0, 0.0) == DEFAULT_EQ_TEMP_K

    def test_estimated_temperature_used_when_star_known(self) -> None:
        cleaned, _ = validate_and_clean([_bare("Warm b", star_lum=1.0, semi_major_axis=1.0)])
        assert cleaned[0].eq_temp == 278
        assert cleaned[0].eq_temp_estimated is True


class TestSummary:
    def test_medians_and_methods(self, planet_factory) -> None:
        records = [
            planet_factory("A b", radius=1.0, mass=2.0, eq_temp=200, distance=10.0,
                           discovered=2001, discovery_method="Transit"),
            planet_factory("B b", radius=2.0, mass=4.0, eq_temp=300, distance=20.0,
                           discovered=2010, discovery_method="Radial Velocity"),
            planet_factory("C b", radius=3.0, mass=6.0, eq_temp=401, distance=30.0,
                           discovered=2020, discovery_method="Transit"),
        ]
        cleaned, report = validate_and_clean(records)
        stats = compute_validation_summary(cleaned, report).stats
        assert stats.median_radius == "2.00"
        assert stats.median_mass == "4.00"
        assert stats.median_temp == "300"
        assert stats.median_dist == "20.0"
        assert stats.discovery_methods == ["Radial Velocity", "Transit"]
        assert (stats.year_range.min, stats.year_range.max) == (2001, 2020)

    def test_estimated_temperatures_excluded(self) -> None:
        cleaned, report = validate_and_clean([_bare("Sparse b")])
        stats = compute_validation_summary(cleaned, report).stats
        assert stats.median_temp == "N/A"
        assert stats.year_range is None

    def test_summary_does_not_mutate_report(self, planet_factory) -> None:
        cleaned, report = validate_and_clean([planet_factory()])
        compute_validation_summary(cleaned, report)
        assert report.stats is None


def test_log_validation_report(caplog, planet_factory) -> None:
    cleaned, report = validate_and_clean(
        [planet_factory("Dup b"), planet_factory("Dup b"), planet_factory("Huge b", radius=500.0)]
    )
    report = compute_validation_summary(cleaned, report)
    with caplog.at_level(logging.INFO, logger="exo_explorer.validation.cleaner"):
        log_validation_report(report)
        log_validation_report(None)
    assert "input=3 output=2" in caplog.text
    assert "Huge b" in caplog.text
    assert "Dup b" in caplog.text
