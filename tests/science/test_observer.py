"""Tests for observer utilities."""

from __future__ import annotations

import pytest

from exo_explorer.science.observer import (
    CONSTELLATIONS,
    MAGNITUDE_BANDS,
    UNKNOWN_CONSTELLATION,
    format_ra_dec,
    get_constellation,
    get_magnitude_guidance,
    get_observability,
)


class TestFormatRaDec:
    def test_origin(self) -> None:
        coords = format_ra_dec(0.0, 0.0)
        assert coords.ra == "00h 00m 00.0s"
        assert coords.dec == "+00° 00′ 00″"

    def test_sirius(self) -> None:
        coords = format_ra_dec(101.2875, -16.7161)
        assert coords.ra == "06h 45m 09.0s"
        assert coords.dec == "-16° 42′ 58″"
        assert coords.ra_hours == pytest.approx(6.7525)

    def test_missing(self) -> None:
        assert format_ra_dec(None, 10.0) is None


class TestConstellation:
    def test_table_size(self) -> None:
        assert len(CONSTELLATIONS) == 35

    def test_betelgeuse_in_orion(self) -> None:
        assert get_constellation(88.79, 7.41).name == "Orion"

    def test_region_wrapping_zero_hours(self) -> None:
        assert get_constellation(7.5, 30.0).abbreviation == "And"
        assert get_constellation(350.0, 40.0).abbreviation == "And"

    def test_first_match_wins(self) -> None:
        # Vega sits where the Hercules and Lyra boxes overlap
        assert get_constellation(279.23, 38.78).name == "Hercules"

    def test_unknown(self) -> None:
        assert get_constellation(0.0, -89.0) == UNKNOWN_CONSTELLATION

    def test_missing(self) -> None:
        assert get_constellation(None, None) is None


class TestObservability:
    def test_best_month_and_season(self) -> None:
        obs = get_observability(90.0, 10.0)
        assert obs.best_month == "December"
        assert obs.best_month_index == 11
        assert (obs.season_start, obs.season_end) == ("Oct", "Feb")
        assert obs.season_label == "Oct–Feb"

    def test_distance_wraps_around_24h(self) -> None:
        assert get_observability(3.0, 0.0).best_month == "September"

    @pytest.mark.parametrize(
        ("dec", "hemisphere"),
        [
            (70.0, "Northern hemisphere only"),
            (30.0, "Best from Northern hemisphere"),
            (0.0, "Visible from both hemispheres"),
            (-30.0, "Best from Southern hemisphere"),
            (-75.0, "Southern hemisphere only"),
        ],
    )
    def test_hemisphere(self, dec: float, hemisphere: str) -> None:
        assert get_observability(90.0, dec).hemisphere == hemisphere

    def test_circumpolar(self) -> None:
        north = get_observability(0.0, 55.0)
        south = get_observability(0.0, -55.0)
        assert north.circumpolar_north and not north.circumpolar_south
        assert south.circumpolar_south and south.note
        assert get_observability(0.0, 50.0).circumpolar_north is False

    def test_missing_ra(self) -> None:
        assert get_observability(None, 10.0) is None


class TestMagnitudeGuidance:
    @pytest.mark.parametrize(
        ("vmag", "label"),
        [
            (-1.5, "Very Bright"),
            (0.0, "Bright"),
            (5.5, "Dim"),
            (9.0, "Small Telescope"),
            (20.0, "Professional Only"),
        ],
    )
    def test_bands(self, vmag: float, label: str) -> None:
        guidance = get_magnitude_guidance(vmag)
        assert guidance.label == label
        assert guidance.confidence == "high"
        assert guidance.magnitude == vmag

    def test_unknown(self) -> None:
        guidance = get_magnitude_guidance(None)
        assert guidance.label == "Unknown"
        assert guidance.confidence == "low"

    def test_nine_bands(self) -> None:
        assert len(MAGNITUDE_BANDS) == 9
