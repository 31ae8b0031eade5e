"""Attach every derived science field to a planet record in one pass."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from exo_explorer.domain.planet import PlanetRecord
from exo_explorer.science.classification import (
    calculate_habitability,
    classify_planet,
    generate_atmosphere,
    name_seed,
)
from exo_explorer.science.discovery_methods import get_discovery_method_info
from exo_explorer.science.esi import calculate_esi
from exo_explorer.science.habitable_zone import get_hz_status
from exo_explorer.science.observer import (
    format_ra_dec,
    get_constellation,
    get_magnitude_guidance,
    get_observability,
)

logger = logging.getLogger(__name__)


def enrich_planet(record: PlanetRecord) -> PlanetRecord:
    """Compute the derived block of `record` in place and return it.

    Every derived field is recomputed from the base fields only, and fields
    whose inputs are absent are reset to None, so calling this twice yields
    the same record.
    """
    planet_type = classify_planet(record.radius, record.mass, record.eq_temp)
    record.type = planet_type.value
    record.atmosphere = generate_atmosphere(planet_type, record.eq_temp, name_seed(record.name))
    record.habitability = calculate_habitability(record)
    record.hz_status = get_hz_status(record)
    record.esi = calculate_esi(record)

    has_coords = record.ra is not None and record.dec is not None
    record.coords = format_ra_dec(record.ra, record.dec) if has_coords else None
    record.constellation = get_constellation(record.ra, record.dec) if has_coords else None
    record.observability = get_observability(record.ra, record.dec) if has_coords else None

    record.magnitude_guidance = (
        get_magnitude_guidance(record.v_mag) if record.v_mag is not None else None
    )
    record.discovery_method_info = get_discovery_method_info(record.discovery_method)
    return record


def enrich_catalog(records: Iterable[PlanetRecord]) -> list[PlanetRecord]:
    """Enrich independent copies of `records`, assigning ids by position."""
    enriched: list[PlanetRecord] = []
    for i, record in enumerate(records):
        planet = record.copy()
        planet.id = i
        enriched.append(enrich_planet(planet))
    logger.debug(f"Enriched {len(enriched)} records")
    return enriched
