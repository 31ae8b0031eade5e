"""Data-quality checks and cleaning for mapped archive records.

This is the one place where real-world archive data is normalized into
records the rest of the system can assume are well-formed:

1. Deduplicate by name (first occurrence wins).
2. Tally missing values per tracked field.
3. Flag physically implausible values (records are kept, not dropped).
4. Fill the fields the catalog consumers require with model-based defaults.
5. Count what happened into a `ValidationReport`.

Input records are never mutated; every cleaned record is a copy.
"""

from __future__ import annotations

import logging
import math
from collections import Counter
from collections.abc import Sequence
from typing import ClassVar

import numpy as np
from pydantic import BaseModel, ConfigDict, Field

from exo_explorer.domain.planet import PlanetRecord
from exo_explorer.platform.catalogs.field_mapper import round_half_up

logger = logging.getLogger(__name__)

# Serialized key -> attribute for the fields whose absence is tallied
TRACKED_FIELDS: dict[str, str] = {
    "distance": "distance",
    "radius": "radius",
    "mass": "mass",
    "eqTemp": "eq_temp",
    "period": "period",
    "semiMajorAxis": "semi_major_axis",
}

# Plausibility ranges
MAX_RADIUS_EARTH = 100.0
MAX_MASS_EARTH = 100000.0
MIN_EQ_TEMP_K = 2.0
MAX_EQ_TEMP_K = 10000.0

DEFAULT_RADIUS_EARTH = 1.0
DEFAULT_EQ_TEMP_K = 300
EQ_TEMP_SCALE_K = 278.0  # Earth-like equilibrium temperature at 1 AU around a 1 Lsun star


class BadValue(BaseModel):
    """An out-of-range value found on a retained record."""

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="forbid")

    name: str
    field: str
    value: float


class DuplicateName(BaseModel):
    """A planet name seen more than once in the input."""

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="forbid")

    name: str
    count: int


class YearRange(BaseModel):
    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="forbid")

    min: int
    max: int


class ValidationStats(BaseModel):
    """Summary statistics over a cleaned dataset.

    Medians are formatted strings ("N/A" when no qualifying values exist):
    radius and mass to 2 decimals, temperature to 0, distance to 1.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="forbid")

    median_radius: str = "N/A"
    median_mass: str = "N/A"
    median_temp: str = "N/A"
    median_dist: str = "N/A"
    discovery_methods: list[str] = Field(default_factory=list)
    year_range: YearRange | None = None


class ValidationReport(BaseModel):
    """Structured quality report accompanying each cleaned dataset.

    Attributes:
        total_input: Records received
        total_output: Records in the cleaned set
        null_fields: Missing-value counts per tracked field, before defaults
        bad_values: Out-of-range values (flagged, never filtered)
        duplicates: Every name seen more than once, with its total count
        controversial: Retained records carrying the archive controversy flag
        cleaned: Records dropped as duplicates
        passed: Records that made it into the cleaned set
        stats: Summary statistics, attached by `compute_validation_summary`
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="forbid")

    total_input: int = 0
    total_output: int = 0
    null_fields: dict[str, int] = Field(
        default_factory=lambda: {key: 0 for key in TRACKED_FIELDS}
    )
    bad_values: list[BadValue] = Field(default_factory=list)
    duplicates: list[DuplicateName] = Field(default_factory=list)
    controversial: int = 0
    cleaned: int = 0
    passed: int = 0
    stats: ValidationStats | None = None


def estimate_mass_from_radius(radius: float) -> float:
    """Rough mass-radius scaling: linear above 4 Earth radii, R^2.5 below."""
    if radius > 4:
        return radius * 5
    return radius**2.5


def estimate_eq_temp(star_lum: float | None, semi_major_axis: float | None) -> int:
    """Equilibrium temperature from stellar luminosity and orbit, else 300 K."""
    if star_lum is not None and star_lum >= 0 and semi_major_axis is not None and semi_major_axis > 0:
        return round_half_up(EQ_TEMP_SCALE_K * star_lum**0.25 / math.sqrt(semi_major_axis))
    return DEFAULT_EQ_TEMP_K


def _range_violations(p: PlanetRecord) -> list[BadValue]:
    bad: list[BadValue] = []
    if p.radius is not None and (p.radius <= 0 or p.radius > MAX_RADIUS_EARTH):
        bad.append(BadValue(name=p.name, field="radius", value=p.radius))
    if p.mass is not None and (p.mass <= 0 or p.mass > MAX_MASS_EARTH):
        bad.append(BadValue(name=p.name, field="mass", value=p.mass))
    if p.distance is not None and p.distance <= 0:
        bad.append(BadValue(name=p.name, field="distance", value=p.distance))
    if p.eq_temp is not None and (p.eq_temp < MIN_EQ_TEMP_K or p.eq_temp > MAX_EQ_TEMP_K):
        bad.append(BadValue(name=p.name, field="eqTemp", value=p.eq_temp))
    return bad


def _fill_defaults(p: PlanetRecord) -> None:
    if p.distance is None:
        p.distance = 0.0
    if p.radius is None:
        p.radius = DEFAULT_RADIUS_EARTH
    if p.mass is None:
        p.mass = estimate_mass_from_radius(p.radius)
    if p.eq_temp is None:
        p.eq_temp = estimate_eq_temp(p.star_lum, p.semi_major_axis)
        p.eq_temp_estimated = True
    if p.period is None:
        p.period = 0.0
    if p.semi_major_axis is None:
        p.semi_major_axis = 0.0


def validate_and_clean(
    records: Sequence[PlanetRecord],
) -> tuple[list[PlanetRecord], ValidationReport]:
    """Deduplicate, flag, and default-fill mapped records.

    Args:
        records: Mapped records in archive order

    Returns:
        Tuple of (cleaned copies, report). `report.stats` is None; attach it
        with `compute_validation_summary`.
    """
    name_counts = Counter(r.name for r in records)
    duplicates = [
        DuplicateName(name=name, count=count) for name, count in name_counts.items() if count > 1
    ]

    null_fields = {key: 0 for key in TRACKED_FIELDS}
    bad_values: list[BadValue] = []
    cleaned: list[PlanetRecord] = []
    seen: set[str] = set()
    dropped = 0
    controversial = 0

    for record in records:
        if record.name in seen:
            dropped += 1
            continue
        seen.add(record.name)

        p = record.copy()
        for key, attr in TRACKED_FIELDS.items():
            if getattr(p, attr) is None:
                null_fields[key] += 1
        if p.controversial:
            controversial += 1

        violations = _range_violations(p)
        if violations:
            logger.debug(f"Flagged {p.name}: {[v.field for v in violations]}")
            bad_values.extend(violations)

        _fill_defaults(p)
        cleaned.append(p)

    report = ValidationReport(
        total_input=len(records),
        total_output=len(cleaned),
        null_fields=null_fields,
        bad_values=bad_values,
        duplicates=duplicates,
        controversial=controversial,
        cleaned=dropped,
        passed=len(cleaned),
    )
    return cleaned, report


def _format_median(values: list[float], decimals: int) -> str:
    if not values:
        return "N/A"
    return f"{float(np.median(np.asarray(values, dtype=float))):.{decimals}f}"


def compute_validation_summary(
    records: Sequence[PlanetRecord], report: ValidationReport
) -> ValidationReport:
    """Return a copy of `report` with its summary `stats` block attached.

    Medians only consider strictly positive values; the temperature median
    also excludes estimated temperatures.
    """
    radii = [r.radius for r in records if r.radius is not None and r.radius > 0]
    masses = [r.mass for r in records if r.mass is not None and r.mass > 0]
    temps = [
        r.eq_temp
        for r in records
        if r.eq_temp is not None and r.eq_temp > 0 and not r.eq_temp_estimated
    ]
    dists = [r.distance for r in records if r.distance is not None and r.distance > 0]
    years = [r.discovered for r in records if r.discovered]
    methods = sorted({r.discovery_method for r in records if r.discovery_method})

    stats = ValidationStats(
        median_radius=_format_median(radii, 2),
        median_mass=_format_median(masses, 2),
        median_temp=_format_median(temps, 0),
        median_dist=_format_median(dists, 1),
        discovery_methods=methods,
        year_range=YearRange(min=min(years), max=max(years)) if years else None,
    )
    return report.model_copy(update={"stats": stats})


def log_validation_report(report: ValidationReport | None, *, limit: int = 10) -> None:
    """Emit a human-readable summary of a validation report through logging."""
    if report is None:
        return
    logger.info(
        f"Validation report: input={report.total_input} output={report.total_output} "
        f"deduped={report.cleaned} controversial={report.controversial}"
    )
    logger.info(f"Null fields: {report.null_fields}")
    if report.bad_values:
        shown = [v.model_dump() for v in report.bad_values[:limit]]
        logger.warning(f"Bad values ({len(report.bad_values)} total): {shown}")
    if report.duplicates:
        shown = [d.model_dump() for d in report.duplicates[:limit]]
        logger.warning(f"Duplicate names ({len(report.duplicates)} total): {shown}")
    if report.stats is not None:
        logger.info(f"Core stats: {report.stats.model_dump()}")
