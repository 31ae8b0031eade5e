"""Built-in fallback catalog: curated real planets plus deterministic synthetic systems.

Used when neither the archive nor a usable cache is available. The synthetic
part only needs to be plausible and reproducible; it is seeded with a fixed
value so every process builds the identical catalog.
"""

from __future__ import annotations

import logging
import math

from exo_explorer.catalogs.curated import CURATED_COUNT, curated_planets
from exo_explorer.domain.planet import PlanetRecord
from exo_explorer.science.classification import seeded_random
from exo_explorer.science.enrich import enrich_planet

logger = logging.getLogger(__name__)

PROCEDURAL_SEED = 42
DEFAULT_PROCEDURAL_COUNT = 4900
PROCEDURAL_SOURCE = "Procedural"
MIN_EQ_TEMP_K = 3  # CMB floor

STAR_PREFIXES = (
    "HD", "GJ", "HIP", "TYC", "2MASS", "Kepler", "TOI", "K2", "CoRoT", "WASP",
    "HAT-P", "HATS", "XO", "TrES", "OGLE", "KIC", "EPIC", "LP", "Wolf", "Ross",
    "Barnard", "LHS", "GQ", "BD+", "CD-", "UCAC4", "WISE", "SDSS", "USNO", "WDS",
)
GREEK = (
    "Alpha", "Beta", "Gamma", "Delta", "Epsilon", "Zeta", "Eta", "Theta", "Iota",
    "Kappa", "Lambda", "Mu", "Nu", "Xi", "Omicron", "Pi", "Rho", "Sigma", "Tau",
    "Upsilon", "Phi", "Chi", "Psi", "Omega",
)
CONSTELLATION_GENITIVES = (
    "Centauri", "Cygni", "Draconis", "Eridani", "Bootis", "Pegasi", "Virginis",
    "Aquilae", "Leonis", "Ophiuchi", "Sagittarii", "Lyrae", "Scorpii", "Ursae Majoris",
    "Cassiopeiae", "Orionis", "Andromedae", "Persei", "Geminorum", "Tauri", "Cancri",
    "Librae", "Capricorni", "Piscium", "Aquarii", "Arietis", "Pavonis", "Tucanae",
    "Gruis", "Vela", "Puppis", "Carinae", "Crucis", "Lupi", "Muscae",
)
PLANET_LETTERS = ("b", "c", "d", "e", "f", "g", "h", "i")

# (class, temp range K, mass range Msun, luminosity range Lsun, weight)
STAR_CLASSES: tuple[tuple[str, tuple[float, float], tuple[float, float], tuple[float, float], float], ...] = (
    ("O", (30000, 50000), (16, 90), (30000, 1000000), 0.001),
    ("B", (10000, 30000), (2.1, 16), (25, 30000), 0.01),
    ("A", (7500, 10000), (1.4, 2.1), (5, 25), 0.03),
    ("F", (6000, 7500), (1.04, 1.4), (1.5, 5), 0.08),
    ("G", (5200, 6000), (0.8, 1.04), (0.6, 1.5), 0.12),
    ("K", (3700, 5200), (0.45, 0.8), (0.08, 0.6), 0.25),
    ("M", (2400, 3700), (0.08, 0.45), (0.0001, 0.08), 0.51),
)


def _round_to(value: float, decimals: int) -> float:
    scale = 10**decimals
    return math.floor(value * scale + 0.5) / scale


def _pick(rng, options: tuple[str, ...]) -> str:
    return options[math.floor(rng() * len(options))]


def _generate_systems(rng, count: int) -> list[dict]:
    systems = []
    for _ in range(math.ceil(count * 0.6)):
        roll = rng()
        cumulative = 0.0
        star_class = STAR_CLASSES[-1]
        for candidate in STAR_CLASSES:
            cumulative += candidate[4]
            if roll < cumulative:
                star_class = candidate
                break
        letter, temp, mass, lum, _weight = star_class

        star_temp = temp[0] + rng() * (temp[1] - temp[0])
        star_mass = mass[0] + rng() * (mass[1] - mass[0])
        star_lum = lum[0] + rng() * (lum[1] - lum[0])

        if rng() < 0.4:
            name = f"{_pick(rng, STAR_PREFIXES)} {math.floor(rng() * 99999) + 1}"
        elif rng() < 0.5:
            name = f"{_pick(rng, GREEK)} {_pick(rng, CONSTELLATION_GENITIVES)}"
        else:
            name = f"{_pick(rng, STAR_PREFIXES)}-{math.floor(rng() * 9999) + 1}"

        distance = 4 + rng() * rng() * 25000  # skewed toward nearer systems
        num_planets = 1 + math.floor(rng() * rng() * 7)
        subclass = math.floor(rng() * 10)
        if rng() < 0.9:
            lum_class = "V"
        else:
            lum_class = "IV" if rng() < 0.7 else "III"

        systems.append(
            {
                "name": name,
                "star_type": f"{letter}{subclass}{lum_class}",
                "star_temp": math.floor(star_temp + 0.5),
                "star_mass": _round_to(star_mass, 3),
                "star_lum": _round_to(star_lum, 5),
                "distance": _round_to(distance, 1),
                "num_planets": num_planets,
                "discovered": 1995 + math.floor(rng() * 31),
            }
        )
    return systems


def _sample_radius_mass(rng) -> tuple[float, float]:
    size_roll = rng()
    if size_roll < 0.35:
        radius = 0.3 + rng() * 1.7
    elif size_roll < 0.55:
        radius = 2.0 + rng() * 2.5
    elif size_roll < 0.75:
        radius = 4.5 + rng() * 4.0
    else:
        radius = 8.5 + rng() * 14.5

    if radius < 1.5:
        mass = radius**3.7 * (0.7 + rng() * 0.6)
    elif radius < 4:
        mass = radius**2.5 * (0.8 + rng() * 0.4)
    else:
        mass = radius**1.5 * (3 + rng() * 10)
    return _round_to(radius, 2), _round_to(mass, 2)


def generate_procedural_planets(count: int, start_id: int = 0) -> list[PlanetRecord]:
    """Deterministic synthetic planets grouped into multi-planet systems.

    Args:
        count: Number of planets to produce
        start_id: Id assigned to the first planet

    Returns:
        Unenriched records; periods follow Kepler's third law and equilibrium
        temperatures scale with stellar luminosity and orbital distance.
    """
    rng = seeded_random(PROCEDURAL_SEED)
    systems = _generate_systems(rng, count)

    planets: list[PlanetRecord] = []
    for system in systems:
        if len(planets) >= count:
            break
        for p in range(system["num_planets"]):
            if len(planets) >= count:
                break
            # Log-uniform base axis from 0.01 to ~30 AU, pushed outward per planet
            axis = 0.01 * 10 ** (rng() * 3.5) * (1 + p * 0.5)
            period_days = math.sqrt(axis**3 / system["star_mass"]) * 365.25
            eq_temp = math.floor(278 * system["star_lum"] ** 0.25 / math.sqrt(axis) + 0.5)
            radius, mass = _sample_radius_mass(rng)

            planets.append(
                PlanetRecord(
                    id=start_id + len(planets),
                    name=f"{system['name']} {PLANET_LETTERS[p % len(PLANET_LETTERS)]}",
                    system=system["name"],
                    distance=system["distance"],
                    radius=radius,
                    mass=mass,
                    period=_round_to(period_days, 2),
                    semi_major_axis=_round_to(axis, 4),
                    eq_temp=max(MIN_EQ_TEMP_K, eq_temp),
                    star_type=system["star_type"],
                    star_temp=system["star_temp"],
                    star_mass=system["star_mass"],
                    star_lum=system["star_lum"],
                    discovered=system["discovered"] + math.floor(rng() * 5),
                    source=PROCEDURAL_SOURCE,
                )
            )
    return planets


def build_builtin_catalog(procedural_count: int = DEFAULT_PROCEDURAL_COUNT) -> list[PlanetRecord]:
    """Curated planets followed by synthetic ones, all enriched, ids by position."""
    curated = curated_planets()
    for i, planet in enumerate(curated):
        planet.id = i
    procedural = generate_procedural_planets(procedural_count, start_id=CURATED_COUNT)
    catalog = [enrich_planet(p) for p in (*curated, *procedural)]
    logger.info(
        f"Built-in catalog: {len(curated)} curated + {len(procedural)} procedural planets"
    )
    return catalog
