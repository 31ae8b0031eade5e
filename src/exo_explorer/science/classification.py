"""Planet classification, habitability scoring, and illustrative atmospheres.

These are coarse heuristics for a browsable catalog, not physical models.
Atmospheres are drawn from a pseudo-random generator seeded by the planet's
name so the same planet always gets the same composition.
"""

from __future__ import annotations

import math
import zlib
from collections.abc import Callable
from enum import Enum
from typing import Any


class PlanetType(str, Enum):
    HOT_JUPITER = "Hot Jupiter"
    WARM_JUPITER = "Warm Jupiter"
    COLD_JUPITER = "Cold Jupiter"
    HOT_NEPTUNE = "Hot Neptune"
    WARM_NEPTUNE = "Warm Neptune"
    SUPER_EARTH = "Super-Earth"
    ROCKY_TERRESTRIAL = "Rocky Terrestrial"
    SUB_EARTH = "Sub-Earth"
    LAVA_WORLD = "Lava World"
    ICE_GIANT = "Ice Giant"
    WATER_WORLD = "Water World"
    DESERT_WORLD = "Desert World"
    GAS_DWARF = "Gas Dwarf"


STAR_TYPES: dict[str, str] = {
    "O": "O-type Blue Supergiant",
    "B": "B-type Blue Giant",
    "A": "A-type White Star",
    "F": "F-type Yellow-White",
    "G": "G-type Yellow Dwarf",
    "K": "K-type Orange Dwarf",
    "M": "M-type Red Dwarf",
    "L": "L-type Brown Dwarf",
}


def seeded_random(seed: int) -> Callable[[], float]:
    """Deterministic LCG returning floats in [0, 1]."""
    state = seed & 0xFFFFFFFF

    def next_value() -> float:
        nonlocal state
        state = (state * 1664525 + 1013904223) & 0xFFFFFFFF
        return state / 0xFFFFFFFF

    return next_value


def name_seed(name: str) -> int:
    """Stable 32-bit seed for a planet name (independent of PYTHONHASHSEED)."""
    return zlib.crc32(name.encode("utf-8"))


def describe_star_type(spectral_type: str | None) -> str | None:
    if not spectral_type:
        return None
    return STAR_TYPES.get(spectral_type[0].upper())


def classify_planet(radius: float | None, mass: float | None, eq_temp: float | None) -> PlanetType:
    """Bucket a planet by radius first, then equilibrium temperature.

    Missing radius is treated as 1 Earth radius. Without a temperature every
    temperature test fails, so the radius tier's cool default applies
    (Cold Jupiter, Ice Giant, Super-Earth, Rocky Terrestrial).
    """
    r = radius or 1.0
    if eq_temp is None:
        if r > 8:
            return PlanetType.COLD_JUPITER
        if r > 3.5:
            return PlanetType.ICE_GIANT
        if r > 1.6:
            return PlanetType.SUPER_EARTH
        if r < 0.5:
            return PlanetType.SUB_EARTH
        return PlanetType.ROCKY_TERRESTRIAL
    t = eq_temp

    if t > 1500 and r < 2:
        return PlanetType.LAVA_WORLD
    if r > 8:
        if t > 1000:
            return PlanetType.HOT_JUPITER
        if t > 400:
            return PlanetType.WARM_JUPITER
        return PlanetType.COLD_JUPITER
    if r > 3.5:
        if t > 800:
            return PlanetType.HOT_NEPTUNE
        if t > 200:
            return PlanetType.WARM_NEPTUNE
        return PlanetType.ICE_GIANT
    if r > 1.6:
        if 200 < t <= 500:
            return PlanetType.WATER_WORLD
        return PlanetType.SUPER_EARTH
    if r < 0.5:
        return PlanetType.SUB_EARTH
    if t > 600:
        return PlanetType.LAVA_WORLD
    if t < 180:
        return PlanetType.DESERT_WORLD
    return PlanetType.ROCKY_TERRESTRIAL


# gas -> (base %, random spread %)
_ATMOSPHERE_RECIPES: dict[str, tuple[tuple[str, float, float], ...]] = {
    "jovian": (("H₂", 75, 15), ("He", 10, 10), ("CH₄", 0, 3)),
    "cold_jovian": (("H₂", 80, 10), ("He", 8, 8), ("NH₃", 0, 2)),
    "neptunian": (("H₂", 50, 20), ("He", 15, 15), ("H₂O", 5, 10)),
    "lava": (("SiO₂", 40, 20), ("Na", 10, 15), ("SO₂", 5, 10)),
    "water": (("H₂O", 40, 30), ("N₂", 15, 20), ("CO₂", 5, 10)),
    "ice_giant": (("H₂", 60, 15), ("He", 10, 15), ("CH₄", 5, 8)),
    "temperate_rocky": (("N₂", 50, 30), ("CO₂", 10, 30), ("H₂O", 5, 20), ("O₂", 0, 8)),
    "rocky": (("CO₂", 60, 25), ("N₂", 5, 15), ("SO₂", 0, 5)),
}

_RECIPE_BY_TYPE: dict[PlanetType, str] = {
    PlanetType.HOT_JUPITER: "jovian",
    PlanetType.WARM_JUPITER: "jovian",
    PlanetType.COLD_JUPITER: "cold_jovian",
    PlanetType.HOT_NEPTUNE: "neptunian",
    PlanetType.WARM_NEPTUNE: "neptunian",
    PlanetType.LAVA_WORLD: "lava",
    PlanetType.WATER_WORLD: "water",
    PlanetType.ICE_GIANT: "ice_giant",
}


def generate_atmosphere(
    planet_type: PlanetType | str, eq_temp: float | None, seed: int
) -> list[dict[str, Any]]:
    """Illustrative atmosphere composition, percentages normalized to ~100.

    Args:
        planet_type: Classification from `classify_planet`
        eq_temp: Equilibrium temperature in K; picks the rocky recipe
        seed: Seed for the composition draw (see `name_seed`)

    Returns:
        List of {"gas", "percentage"} dicts, percentages rounded to 0.1
    """
    try:
        ptype = PlanetType(planet_type)
    except ValueError:
        ptype = PlanetType.ROCKY_TERRESTRIAL
    recipe = _RECIPE_BY_TYPE.get(ptype)
    if recipe is None:
        temperate = eq_temp is not None and 200 < eq_temp < 350
        recipe = "temperate_rocky" if temperate else "rocky"

    rng = seeded_random(seed)
    draws = [(gas, base + rng() * spread) for gas, base, spread in _ATMOSPHERE_RECIPES[recipe]]
    total = sum(pct for _, pct in draws)
    return [
        {"gas": gas, "percentage": math.floor(pct / total * 1000 + 0.5) / 10}
        for gas, pct in draws
    ]


def calculate_habitability(planet: Any) -> float:
    """Heuristic 0-1 habitability score from temperature, size, mass, star and orbit."""
    t = planet.eq_temp or 0
    r = planet.radius or 0
    m = planet.mass or 0
    score = 0.0

    # Temperature: ideal 200-310 K
    if 200 <= t <= 310:
        score += 0.35
    elif 150 <= t <= 400:
        score += 0.15
    else:
        score += 0.02

    # Size: Earth-like
    if 0.5 <= r <= 2.0:
        score += 0.25
    elif 0.3 <= r <= 3.0:
        score += 0.1
    else:
        score += 0.01

    if m > 0:
        if 0.3 <= m <= 5.0:
            score += 0.15
        elif 0.1 <= m <= 10.0:
            score += 0.05
    else:
        score += 0.05

    if planet.star_type:
        s = planet.star_type[0]
        if s in ("G", "K"):
            score += 0.15
        elif s in ("F", "M"):
            score += 0.08
        else:
            score += 0.02
    else:
        score += 0.05

    # Orbit: proximity to a temperate separation
    a = planet.semi_major_axis
    if a:
        if 0.5 <= a <= 2.0:
            score += 0.1
        elif 0.1 <= a <= 5.0:
            score += 0.04
    else:
        score += 0.03

    return max(0.0, min(math.floor(score * 100 + 0.5) / 100, 1.0))
