"""Habitable-zone boundaries from the Kopparapu et al. (2013, 2014) stellar-flux model.

Each boundary's effective stellar flux is a quartic polynomial in
T* = T_eff - 5780 K; the orbital distance follows from
distance = sqrt(L / S_eff) with L in solar luminosities.

References:
    - Kopparapu et al. 2013, ApJ 765, 131 (2013ApJ...765..131K)
    - Kopparapu et al. 2014, ApJL 787, L29 (2014ApJ...787L..29K)
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

MODEL_TEFF_MIN_K = 2600.0
MODEL_TEFF_MAX_K = 7200.0
SOLAR_TEFF_K = 5780.0

HZ_REFERENCE = "Kopparapu et al. (2013, 2014)"
HZ_CAVEAT = (
    "Being in the HZ does not guarantee habitability. Atmosphere, magnetic field, "
    "tidal locking, and many other factors affect surface conditions."
)


@dataclass(frozen=True)
class FluxCoefficients:
    """S_eff = s0 + a*T + b*T^2 + c*T^3 + d*T^4 with T = T_eff - 5780."""

    s0: float
    a: float
    b: float
    c: float
    d: float

    def effective_flux(self, t_star: float) -> float:
        return (
            self.s0
            + self.a * t_star
            + self.b * t_star**2
            + self.c * t_star**3
            + self.d * t_star**4
        )


HZ_COEFFICIENTS: dict[str, FluxCoefficients] = {
    # Optimistic inner edge
    "recent_venus": FluxCoefficients(1.7763, 1.4335e-4, 3.3954e-9, -7.6364e-12, -1.1950e-15),
    # Conservative inner edge
    "runaway_greenhouse": FluxCoefficients(1.0385, 1.2456e-4, 1.4612e-8, -7.6345e-12, -1.7511e-15),
    # Conservative outer edge
    "maximum_greenhouse": FluxCoefficients(0.3507, 5.9578e-5, 1.6707e-9, -3.0058e-12, -5.1925e-16),
    # Optimistic outer edge
    "early_mars": FluxCoefficients(0.3207, 5.4471e-5, 1.5275e-9, -2.1709e-12, -3.8282e-16),
}


@dataclass(frozen=True)
class HabitableZone:
    """HZ boundaries in AU for one host star.

    Attributes:
        conservative_inner: Runaway-greenhouse limit
        conservative_outer: Maximum-greenhouse limit
        optimistic_inner: Recent-Venus limit
        optimistic_outer: Early-Mars limit
        model_valid: Whether T_eff was inside the model's calibrated range
        model_note: Extrapolation warning when it was not
    """

    conservative_inner: float
    conservative_outer: float
    optimistic_inner: float
    optimistic_outer: float
    model_valid: bool
    model_note: str | None = None
    reference: str = HZ_REFERENCE

    def to_dict(self) -> dict[str, Any]:
        return {
            "conservativeInner": self.conservative_inner,
            "conservativeOuter": self.conservative_outer,
            "optimisticInner": self.optimistic_inner,
            "optimisticOuter": self.optimistic_outer,
            "modelValid": self.model_valid,
            "modelNote": self.model_note,
            "reference": self.reference,
        }


@dataclass(frozen=True)
class HZStatus:
    """Where a planet's orbit sits relative to its star's habitable zone."""

    conservative: bool
    optimistic: bool
    label: str
    confidence: str
    hz: HabitableZone | None = None
    caveat: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "conservative": self.conservative,
            "optimistic": self.optimistic,
            "label": self.label,
            "hz": self.hz.to_dict() if self.hz is not None else None,
            "confidence": self.confidence,
            "caveat": self.caveat,
        }


UNKNOWN_HZ_STATUS = HZStatus(conservative=False, optimistic=False, label="Unknown", confidence="low")


def _format_teff(teff: float) -> str:
    return f"{teff:g}" if not float(teff).is_integer() else str(int(teff))


def calculate_habitable_zone(star_teff: float | None, star_lum: float | None) -> HabitableZone | None:
    """Compute HZ boundaries for a star.

    Args:
        star_teff: Stellar effective temperature in K
        star_lum: Stellar luminosity in solar units (linear)

    Returns:
        HabitableZone, or None when either input is missing, zero, or the
        luminosity is not positive. Temperatures outside 2600-7200 K are
        clamped to the range and the result is flagged as extrapolated.
    """
    if not star_teff or not star_lum or star_lum <= 0:
        return None

    t_clamped = max(MODEL_TEFF_MIN_K, min(MODEL_TEFF_MAX_K, float(star_teff)))
    t_star = t_clamped - SOLAR_TEFF_K

    def distance_au(name: str) -> float:
        return math.sqrt(star_lum / HZ_COEFFICIENTS[name].effective_flux(t_star))

    model_valid = MODEL_TEFF_MIN_K <= star_teff <= MODEL_TEFF_MAX_K
    model_note = None
    if not model_valid:
        model_note = (
            f"Star T_eff ({_format_teff(star_teff)}K) outside model range (2600-7200K); "
            "boundaries are extrapolated."
        )

    return HabitableZone(
        conservative_inner=distance_au("runaway_greenhouse"),
        conservative_outer=distance_au("maximum_greenhouse"),
        optimistic_inner=distance_au("recent_venus"),
        optimistic_outer=distance_au("early_mars"),
        model_valid=model_valid,
        model_note=model_note,
    )


def get_hz_status(planet: Any) -> HZStatus:
    """Classify a planet's orbit against its star's HZ.

    `planet` needs `star_temp`, `star_lum` and `semi_major_axis` attributes.
    The conservative band is checked first, then the optimistic band; outside
    both, the planet is too hot if it orbits inside the optimistic inner edge.
    """
    hz = calculate_habitable_zone(planet.star_temp, planet.star_lum)
    a = planet.semi_major_axis
    if hz is None or not a or a <= 0:
        return UNKNOWN_HZ_STATUS

    in_conservative = hz.conservative_inner <= a <= hz.conservative_outer
    in_optimistic = hz.optimistic_inner <= a <= hz.optimistic_outer

    if in_conservative:
        label = "In Conservative HZ"
    elif in_optimistic:
        label = "In Optimistic HZ"
    elif a < hz.optimistic_inner:
        label = "Too Hot (inside HZ)"
    else:
        label = "Too Cold (outside HZ)"

    return HZStatus(
        conservative=in_conservative,
        optimistic=in_optimistic,
        label=label,
        confidence="high" if hz.model_valid else "moderate",
        hz=hz,
        caveat=HZ_CAVEAT,
    )
