"""Observer utilities: coordinates, constellation, viewing season, magnitude guidance.

The constellation table is a coarse set of rectangular RA/Dec regions, not the
IAU boundary polygons; it is good enough to say roughly where to look.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
MONTH_ABBR = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

# Approximate solar RA (hours) in the middle of each month
SUN_RA_BY_MONTH = (19.5, 21.5, 23.5, 1.5, 3.5, 5.5, 7.5, 9.5, 11.5, 13.5, 15.5, 17.5)

CIRCUMPOLAR_DEC_DEG = 50.0
MAGNITUDE_NOTE = (
    "Magnitude refers to the host star system brightness, not the planet itself. "
    "Exoplanets are not directly visible in amateur telescopes."
)


@dataclass(frozen=True)
class ConstellationRegion:
    name: str
    abbreviation: str
    ra_min: float  # hours
    ra_max: float  # hours; smaller than ra_min when the region wraps 0h
    dec_min: float
    dec_max: float

    def contains(self, ra_hours: float, dec_deg: float) -> bool:
        if self.ra_min > self.ra_max:
            ra_match = ra_hours >= self.ra_min or ra_hours <= self.ra_max
        else:
            ra_match = self.ra_min <= ra_hours <= self.ra_max
        return ra_match and self.dec_min <= dec_deg <= self.dec_max


# First match wins, so order matters where regions overlap
CONSTELLATIONS: tuple[ConstellationRegion, ...] = (
    ConstellationRegion("Andromeda", "And", 22.8, 2.4, 21, 53),
    ConstellationRegion("Aquarius", "Aqr", 20.6, 23.8, -25, 3),
    ConstellationRegion("Aquila", "Aql", 18.8, 20.6, -12, 18),
    ConstellationRegion("Aries", "Ari", 1.5, 3.5, 10, 31),
    ConstellationRegion("Boötes", "Boo", 13.5, 15.8, 7, 55),
    ConstellationRegion("Cancer", "Cnc", 7.9, 9.3, 7, 33),
    ConstellationRegion("Canis Major", "CMa", 6.0, 7.5, -33, -11),
    ConstellationRegion("Capricornus", "Cap", 20.0, 21.8, -28, -8),
    ConstellationRegion("Cassiopeia", "Cas", 22.5, 3.5, 46, 77),
    ConstellationRegion("Centaurus", "Cen", 11.0, 15.0, -64, -30),
    ConstellationRegion("Cetus", "Cet", 23.5, 3.3, -25, 10),
    ConstellationRegion("Cygnus", "Cyg", 19.1, 21.8, 28, 61),
    ConstellationRegion("Draco", "Dra", 9.4, 20.5, 48, 86),
    ConstellationRegion("Eridanus", "Eri", 1.4, 5.1, -58, 0),
    ConstellationRegion("Gemini", "Gem", 5.9, 8.1, 10, 35),
    ConstellationRegion("Hercules", "Her", 16.0, 18.8, 14, 51),
    ConstellationRegion("Hydra", "Hya", 8.1, 15.0, -35, 7),
    ConstellationRegion("Leo", "Leo", 9.3, 12.0, -6, 33),
    ConstellationRegion("Libra", "Lib", 14.2, 16.0, -30, 0),
    ConstellationRegion("Lyra", "Lyr", 18.1, 19.4, 25, 48),
    ConstellationRegion("Ophiuchus", "Oph", 16.0, 18.0, -30, 14),
    ConstellationRegion("Orion", "Ori", 4.5, 6.4, -11, 23),
    ConstellationRegion("Pegasus", "Peg", 21.1, 0.2, 2, 36),
    ConstellationRegion("Perseus", "Per", 1.4, 4.5, 31, 59),
    ConstellationRegion("Pisces", "Psc", 22.5, 2.0, -6, 34),
    ConstellationRegion("Sagittarius", "Sgr", 17.7, 20.4, -45, -12),
    ConstellationRegion("Scorpius", "Sco", 15.8, 17.8, -45, -8),
    ConstellationRegion("Taurus", "Tau", 3.3, 6.0, 0, 31),
    ConstellationRegion("Ursa Major", "UMa", 8.0, 14.5, 29, 73),
    ConstellationRegion("Ursa Minor", "UMi", 0.0, 24.0, 66, 90),
    ConstellationRegion("Virgo", "Vir", 11.6, 15.0, -22, 14),
    ConstellationRegion("Vela", "Vel", 8.0, 11.0, -56, -37),
    ConstellationRegion("Puppis", "Pup", 6.0, 8.5, -50, -11),
    ConstellationRegion("Carina", "Car", 6.0, 11.3, -75, -51),
    ConstellationRegion("Crux", "Cru", 11.9, 12.6, -64, -56),
)

# (exclusive upper bound, label, guidance), brightest first
MAGNITUDE_BANDS: tuple[tuple[float, str, str], ...] = (
    (0.0, "Very Bright", "Easily visible to the naked eye, among the brightest stars in the sky."),
    (2.0, "Bright", "Visible to the naked eye from most locations, even with some light pollution."),
    (4.0, "Moderate", "Naked-eye visible from suburban skies. Easy target for any binoculars."),
    (6.0, "Dim", "Near the naked-eye limit. Requires dark skies or binoculars (7×50 or larger)."),
    (8.0, "Binocular", "Not naked-eye visible. Requires binoculars or a small telescope (60mm+)."),
    (10.0, "Small Telescope", "Requires a small telescope (80-150mm aperture) under good conditions."),
    (13.0, "Medium Telescope", "Requires a medium telescope (150-250mm) and steady skies."),
    (16.0, "Large Telescope", "Requires a large amateur telescope (300mm+) or astrophotography."),
    (math.inf, "Professional Only", "Too faint for most amateur equipment. Requires observatory-class instruments."),
)


@dataclass(frozen=True)
class Coordinates:
    ra: str
    dec: str
    ra_hours: float
    dec_deg: float

    def to_dict(self) -> dict[str, Any]:
        return {"ra": self.ra, "dec": self.dec, "raHours": self.ra_hours, "decDeg": self.dec_deg}


@dataclass(frozen=True)
class Constellation:
    name: str
    abbreviation: str

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "abbreviation": self.abbreviation}


UNKNOWN_CONSTELLATION = Constellation(name="Unknown", abbreviation="---")


@dataclass(frozen=True)
class Observability:
    best_month: str
    best_month_abbr: str
    best_month_index: int
    season_start: str
    season_end: str
    hemisphere: str
    circumpolar_north: bool
    circumpolar_south: bool
    note: str | None = None

    @property
    def season_label(self) -> str:
        return f"{self.season_start}–{self.season_end}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "bestMonth": self.best_month,
            "bestMonthAbbr": self.best_month_abbr,
            "bestMonthIndex": self.best_month_index,
            "seasonStart": self.season_start,
            "seasonEnd": self.season_end,
            "seasonLabel": self.season_label,
            "hemisphere": self.hemisphere,
            "circumpolarNorth": self.circumpolar_north,
            "circumpolarSouth": self.circumpolar_south,
            "note": self.note,
        }


@dataclass(frozen=True)
class MagnitudeGuidance:
    label: str
    guidance: str
    confidence: str
    magnitude: float | None = None
    note: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "label": self.label,
            "guidance": self.guidance,
            "magnitude": self.magnitude,
            "confidence": self.confidence,
            "note": self.note,
        }


def _split_sexagesimal(value: float) -> tuple[int, int, float]:
    whole = math.floor(value)
    minutes_rem = (value - whole) * 60
    minutes = math.floor(minutes_rem)
    return whole, minutes, (minutes_rem - minutes) * 60


def format_ra_dec(ra_deg: float | None, dec_deg: float | None) -> Coordinates | None:
    """Format RA/Dec degrees as "HHh MMm SS.Ss" and "+DD° MM′ SS″"."""
    if ra_deg is None or dec_deg is None:
        return None
    ra_h = ra_deg / 15.0
    ra_hours, ra_min, ra_sec = _split_sexagesimal(ra_h)
    dec_sign = "+" if dec_deg >= 0 else "-"
    dec_d, dec_min, dec_sec = _split_sexagesimal(abs(dec_deg))
    return Coordinates(
        ra=f"{ra_hours:02d}h {ra_min:02d}m {ra_sec:04.1f}s",
        dec=f"{dec_sign}{dec_d:02d}° {dec_min:02d}′ {dec_sec:02.0f}″",
        ra_hours=ra_h,
        dec_deg=dec_deg,
    )


def get_constellation(ra_deg: float | None, dec_deg: float | None) -> Constellation | None:
    """Coarse constellation lookup; first matching region wins."""
    if ra_deg is None or dec_deg is None:
        return None
    ra_h = ra_deg / 15.0
    for region in CONSTELLATIONS:
        if region.contains(ra_h, dec_deg):
            return Constellation(name=region.name, abbreviation=region.abbreviation)
    return UNKNOWN_CONSTELLATION


def _circular_hours(a: float, b: float) -> float:
    diff = abs(a - b) % 24.0
    return min(diff, 24.0 - diff)


def _hemisphere(dec_deg: float | None) -> str:
    if dec_deg is None:
        return "Unknown"
    if dec_deg > 60:
        return "Northern hemisphere only"
    if dec_deg > 20:
        return "Best from Northern hemisphere"
    if dec_deg > -20:
        return "Visible from both hemispheres"
    if dec_deg > -60:
        return "Best from Southern hemisphere"
    return "Southern hemisphere only"


def get_observability(ra_deg: float | None, dec_deg: float | None) -> Observability | None:
    """Best viewing month: the month whose solar RA is ~12h from the target's."""
    if ra_deg is None:
        return None
    ra_h = ra_deg / 15.0

    best_month = 0
    best_diff = math.inf
    for month, sun_ra in enumerate(SUN_RA_BY_MONTH):
        diff = _circular_hours(ra_h, sun_ra + 12.0)
        if diff < best_diff:
            best_diff = diff
            best_month = month

    season_start = (best_month - 2) % 12
    season_end = (best_month + 2) % 12
    circumpolar_north = dec_deg is not None and dec_deg > CIRCUMPOLAR_DEC_DEG
    circumpolar_south = dec_deg is not None and dec_deg < -CIRCUMPOLAR_DEC_DEG
    note = None
    if circumpolar_north:
        note = "Circumpolar from far-northern latitudes (always visible)."
    elif circumpolar_south:
        note = "Circumpolar from far-southern latitudes (always visible)."

    return Observability(
        best_month=MONTH_NAMES[best_month],
        best_month_abbr=MONTH_ABBR[best_month],
        best_month_index=best_month,
        season_start=MONTH_ABBR[season_start],
        season_end=MONTH_ABBR[season_end],
        hemisphere=_hemisphere(dec_deg),
        circumpolar_north=circumpolar_north,
        circumpolar_south=circumpolar_south,
        note=note,
    )


def get_magnitude_guidance(v_mag: float | None) -> MagnitudeGuidance:
    """Map an apparent V magnitude to the equipment needed to see the host star."""
    if v_mag is None:
        return MagnitudeGuidance(
            label="Unknown", guidance="No magnitude data available.", confidence="low"
        )
    for upper, label, guidance in MAGNITUDE_BANDS:
        if v_mag < upper:
            break
    return MagnitudeGuidance(
        label=label,
        guidance=guidance,
        confidence="high",
        magnitude=v_mag,
        note=MAGNITUDE_NOTE,
    )
