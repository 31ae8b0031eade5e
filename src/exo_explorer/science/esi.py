"""Earth Similarity Index (Schulze-Makuch et al. 2011).

ESI = prod_i (1 - |x_i - x_E| / (x_i + x_E)) ** w_i, combined as a geometric
mean over whichever components are computable.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

ESI_REFERENCE = "Schulze-Makuch et al. (2011)"

# Earth reference values: R_earth, K, g/cm^3, km/s
EARTH = {
    "radius": 1.0,
    "mass": 1.0,
    "eq_temp": 255.0,
    "density": 5.51,
    "escape_velocity": 11.186,
}

ESI_WEIGHTS = {
    "radius": 0.57,
    "density": 1.07,
    "escape_velocity": 0.70,
    "surface_temp": 5.58,
}

INSUFFICIENT_DATA_NOTE = "Insufficient data to compute ESI."
MASS_ESTIMATED_NOTE = "Mass estimated from radius using M-R relation."


@dataclass(frozen=True)
class ESIComponents:
    radius: float | None = None
    density: float | None = None
    escape_velocity: float | None = None
    surface_temp: float | None = None

    def values(self) -> list[float]:
        return [
            v
            for v in (self.radius, self.density, self.escape_velocity, self.surface_temp)
            if v is not None
        ]

    def to_dict(self) -> dict[str, float | None]:
        return {
            "radius": self.radius,
            "density": self.density,
            "escapeVelocity": self.escape_velocity,
            "surfaceTemp": self.surface_temp,
        }


@dataclass(frozen=True)
class ESIResult:
    """ESI scores, all rounded to 3 decimals and within [0, 1].

    Attributes:
        global_: Geometric mean of the available components (0 when uncomputable)
        interior: sqrt(radius * density) component product
        surface: sqrt(escape velocity * temperature) component product
        components: Per-component similarity scores
        confidence: "high" only with a known mass and a measured temperature
    """

    global_: float
    interior: float | None
    surface: float | None
    components: ESIComponents = field(default_factory=ESIComponents)
    confidence: str = "low"
    reference: str | None = None
    note: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "global": self.global_,
            "interior": self.interior,
            "surface": self.surface,
            "components": self.components.to_dict(),
            "confidence": self.confidence,
            "reference": self.reference,
            "note": self.note,
        }


def esi_component(value: float | None, earth_value: float, weight: float) -> float | None:
    """Weighted similarity of one quantity to Earth's; None for missing or non-positive input."""
    if value is None or value <= 0:
        return None
    ratio = abs(value - earth_value) / (value + earth_value)
    return (1.0 - ratio) ** weight


def _round3(value: float) -> float:
    return math.floor(value * 1000 + 0.5) / 1000


def calculate_esi(planet: Any) -> ESIResult:
    """Compute the ESI from `radius`, `mass`, `eq_temp` and `eq_temp_estimated`.

    Density and escape velocity are scaled from Earth using mass/radius**3 and
    sqrt(mass/radius). A missing mass is estimated as radius**2.5.
    """
    radius = planet.radius
    eq_temp = planet.eq_temp
    if not radius or not eq_temp or radius <= 0 or eq_temp <= 0:
        return ESIResult(global_=0.0, interior=None, surface=None, note=INSUFFICIENT_DATA_NOTE)

    mass = planet.mass or radius**2.5
    density = (mass / radius**3) * EARTH["density"]
    escape_velocity = math.sqrt(mass / radius) * EARTH["escape_velocity"] if mass > 0 else None

    components = ESIComponents(
        radius=esi_component(radius, EARTH["radius"], ESI_WEIGHTS["radius"]),
        density=esi_component(density, EARTH["density"], ESI_WEIGHTS["density"]),
        escape_velocity=esi_component(
            escape_velocity, EARTH["escape_velocity"], ESI_WEIGHTS["escape_velocity"]
        ),
        surface_temp=esi_component(eq_temp, EARTH["eq_temp"], ESI_WEIGHTS["surface_temp"]),
    )

    interior = None
    if components.radius is not None and components.density is not None:
        interior = math.sqrt(components.radius * components.density)
    surface = None
    if components.escape_velocity is not None and components.surface_temp is not None:
        surface = math.sqrt(components.escape_velocity * components.surface_temp)

    valid = components.values()
    global_score = math.prod(valid) ** (1.0 / len(valid)) if valid else 0.0

    has_measured_temp = planet.eq_temp is not None and not getattr(planet, "eq_temp_estimated", False)
    return ESIResult(
        global_=_round3(global_score),
        interior=_round3(interior) if interior is not None else None,
        surface=_round3(surface) if surface is not None else None,
        components=components,
        confidence="high" if planet.mass is not None and has_measured_temp else "moderate",
        reference=ESI_REFERENCE,
        note=MASS_ESTIMATED_NOTE if planet.mass is None else None,
    )
