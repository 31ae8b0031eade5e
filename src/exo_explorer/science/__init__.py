"""Derived science computed for every catalog record.

Pure functions: habitable-zone boundaries, Earth Similarity Index, observer
metadata, discovery-method reference data, and classification heuristics.
"""

from exo_explorer.science.classification import (
    STAR_TYPES,
    PlanetType,
    calculate_habitability,
    classify_planet,
    describe_star_type,
    generate_atmosphere,
    name_seed,
    seeded_random,
)
from exo_explorer.science.discovery_methods import (
    DISCOVERY_METHODS,
    METHOD_ALIASES,
    DiscoveryMethodInfo,
    get_discovery_method_info,
)
from exo_explorer.science.enrich import enrich_catalog, enrich_planet
from exo_explorer.science.esi import EARTH, ESI_WEIGHTS, ESIComponents, ESIResult, calculate_esi
from exo_explorer.science.glossary import GLOSSARY, lookup_term
from exo_explorer.science.habitable_zone import (
    HZ_COEFFICIENTS,
    HabitableZone,
    HZStatus,
    calculate_habitable_zone,
    get_hz_status,
)
from exo_explorer.science.observer import (
    CONSTELLATIONS,
    Constellation,
    Coordinates,
    MagnitudeGuidance,
    Observability,
    format_ra_dec,
    get_constellation,
    get_magnitude_guidance,
    get_observability,
)

__all__ = [
    "CONSTELLATIONS",
    "DISCOVERY_METHODS",
    "EARTH",
    "ESI_WEIGHTS",
    "GLOSSARY",
    "HZ_COEFFICIENTS",
    "METHOD_ALIASES",
    "STAR_TYPES",
    "Constellation",
    "Coordinates",
    "DiscoveryMethodInfo",
    "ESIComponents",
    "ESIResult",
    "HZStatus",
    "HabitableZone",
    "MagnitudeGuidance",
    "Observability",
    "PlanetType",
    "calculate_esi",
    "calculate_habitability",
    "calculate_habitable_zone",
    "classify_planet",
    "describe_star_type",
    "enrich_catalog",
    "enrich_planet",
    "format_ra_dec",
    "generate_atmosphere",
    "get_constellation",
    "get_discovery_method_info",
    "get_hz_status",
    "get_magnitude_guidance",
    "get_observability",
    "lookup_term",
    "name_seed",
    "seeded_random",
]
