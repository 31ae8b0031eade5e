"""Map raw Exoplanet Archive rows onto `PlanetRecord`.

Swapping the remote schema only requires changing this module. Mapping is
total over mappings: absent or unparseable fields become None, never errors.
"""

from __future__ import annotations

import math
import re
from collections.abc import Iterable, Mapping
from typing import Any

from exo_explorer.domain.planet import PlanetRecord
from exo_explorer.errors import FieldMappingError

PARSEC_TO_LY = 3.26156
ARCHIVE_SOURCE = "NASA Exoplanet Archive"

_PLANET_LETTER_SUFFIX = re.compile(r"\s[b-i]$", re.IGNORECASE)


def _parse_float(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        out = float(value)
    else:
        text = str(value).strip()
        if not text or text.lower() in {"nan", "none", "null", "--", "n/a", "na"}:
            return None
        try:
            out = float(text)
        except ValueError:
            return None
    return out if math.isfinite(out) else None


def _parse_int(value: Any) -> int | None:
    out = _parse_float(value)
    return int(out) if out is not None else None


def _parse_text(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (-2.5 -> -2, 2.5 -> 3)."""
    return int(math.floor(value + 0.5))


def derive_system_name(planet_name: str | None) -> str | None:
    """Strip a trailing single-letter planet designator ("Kepler-22 b" -> "Kepler-22")."""
    if not planet_name:
        return None
    return _PLANET_LETTER_SUFFIX.sub("", planet_name) or None


def map_record(raw: Mapping[str, Any], *, row_index: int | None = None) -> PlanetRecord:
    """Translate one archive row into the internal planet schema.

    Args:
        raw: Row keyed by archive column names (`pl_name`, `sy_dist`, ...)
        row_index: Position in the response, used only in error messages

    Returns:
        A PlanetRecord with distance in light-years and linear luminosity

    Raises:
        FieldMappingError: If `raw` is not a mapping
    """
    if not isinstance(raw, Mapping):
        raise FieldMappingError(
            f"Expected a mapping of archive columns, got {type(raw).__name__}",
            row_index=row_index,
        )

    name = _parse_text(raw.get("pl_name"))
    sy_dist = _parse_float(raw.get("sy_dist"))
    star_lum_log = _parse_float(raw.get("st_lum"))  # log10(L/Lsun)
    eq_temp = _parse_float(raw.get("pl_eqt"))
    star_temp = _parse_float(raw.get("st_teff"))

    star_lum: float | None = None
    if star_lum_log is not None:
        try:
            star_lum = 10.0**star_lum_log
        except OverflowError:
            star_lum = None

    return PlanetRecord(
        name=name or "Unknown",
        system=_parse_text(raw.get("hostname")) or derive_system_name(name) or "Unknown",
        distance=sy_dist * PARSEC_TO_LY if sy_dist is not None else None,
        radius=_parse_float(raw.get("pl_rade")),
        mass=_parse_float(raw.get("pl_bmasse")),
        period=_parse_float(raw.get("pl_orbper")),
        semi_major_axis=_parse_float(raw.get("pl_orbsmax")),
        eq_temp=round_half_up(eq_temp) if eq_temp is not None else None,
        eccentricity=_parse_float(raw.get("pl_orbeccen")),
        inclination=_parse_float(raw.get("pl_orbincl")),
        star_type=_parse_text(raw.get("st_spectype")),
        star_temp=round_half_up(star_temp) if star_temp is not None else None,
        star_mass=_parse_float(raw.get("st_mass")),
        star_lum=star_lum,
        star_lum_log=star_lum_log,
        discovered=_parse_int(raw.get("disc_year")),
        discovery_method=_parse_text(raw.get("discoverymethod")),
        discovery_facility=_parse_text(raw.get("disc_facility")),
        discovery_ref=_parse_text(raw.get("disc_refname")),
        ra=_parse_float(raw.get("ra")),
        dec=_parse_float(raw.get("dec")),
        v_mag=_parse_float(raw.get("sy_vmag")),
        k_mag=_parse_float(raw.get("sy_kmag")),
        controversial=_parse_int(raw.get("pl_controv_flag")) == 1,
        source=ARCHIVE_SOURCE,
        nasa_raw=True,
    )


def map_records(rows: Iterable[Mapping[str, Any]]) -> list[PlanetRecord]:
    return [map_record(row, row_index=i) for i, row in enumerate(rows)]
