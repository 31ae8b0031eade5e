"""Tests for archive row -> PlanetRecord mapping."""

from __future__ import annotations

import math

import pytest

from exo_explorer.errors import FieldMappingError
from exo_explorer.platform.catalogs.field_mapper import (
    ARCHIVE_SOURCE,
    PARSEC_TO_LY,
    derive_system_name,
    map_record,
    map_records,
    round_half_up,
)


class TestMapRecord:
    def test_reference_row(self, row_factory) -> None:
        record = map_record(row_factory())
        assert record.name == "Test b"
        assert record.system == "Test"
        assert record.distance == pytest.approx(32.6156)
        assert record.star_lum == pytest.approx(1.0)
        assert record.star_lum_log == 0.0
        assert record.eq_temp == 255
        assert record.star_temp == 5780
        assert record.discovered == 2020
        assert record.source == ARCHIVE_SOURCE
        assert record.nasa_raw is True
        assert record.controversial is False

    def test_missing_fields_become_none(self) -> None:
        record = map_record({"pl_name": "Lonely b"})
        assert record.distance is None
        assert record.radius is None
        assert record.star_lum is None
        assert record.discovered is None
        assert record.system == "Lonely"

    def test_log_luminosity_is_linearized(self, row_factory) -> None:
        record = map_record(row_factory(st_lum=-1.0))
        assert record.star_lum == pytest.approx(0.1)

    def test_parsec_conversion(self, row_factory) -> None:
        record = map_record(row_factory(sy_dist=1.0))
        assert record.distance == pytest.approx(PARSEC_TO_LY)

    def test_temperatures_round_half_up(self, row_factory) -> None:
        record = map_record(row_factory(pl_eqt=254.5, st_teff=5779.5))
        assert record.eq_temp == 255
        assert record.star_temp == 5780

    def test_controversy_flag(self, row_factory) -> None:
        assert map_record(row_factory(pl_controv_flag=1)).controversial is True
        assert map_record(row_factory(pl_controv_flag=None)).controversial is False

    @pytest.mark.parametrize("value", ["", "nan", None, "NaN", float("nan"), float("inf")])
    def test_blank_and_non_finite_numbers(self, row_factory, value) -> None:
        assert map_record(row_factory(pl_rade=value)).radius is None

    def test_numeric_strings(self, row_factory) -> None:
        record = map_record(row_factory(pl_rade="2.5", disc_year="2014"))
        assert record.radius == 2.5
        assert record.discovered == 2014

    def test_missing_name(self) -> None:
        record = map_record({})
        assert record.name == "Unknown"
        assert record.system == "Unknown"

    def test_non_mapping_row_fails_fast(self) -> None:
        with pytest.raises(FieldMappingError) as exc_info:
            map_records([{"pl_name": "ok b"}, ["not", "a", "row"]])
        assert exc_info.value.row_index == 1


@pytest.mark.parametrize(
    ("name", "system"),
    [
        ("Kepler-22 b", "Kepler-22"),
        ("TRAPPIST-1 h", "TRAPPIST-1"),
        ("HD 209458 B", "HD 209458"),
        ("PSR B1257+12 j", "PSR B1257+12 j"),
        ("51 Peg", "51 Peg"),
    ],
)
def test_derive_system_name(name: str, system: str) -> None:
    assert derive_system_name(name) == system


def test_round_half_up() -> None:
    assert round_half_up(2.5) == 3
    assert round_half_up(-2.5) == -2
    assert round_half_up(254.49) == 254
    assert isinstance(round_half_up(math.pi), int)
