"""Beginner-friendly definitions for terms shown alongside catalog records."""

from __future__ import annotations

GLOSSARY: dict[str, str] = {
    "Right Ascension": (
        "The celestial equivalent of longitude. Measured in hours, minutes, and seconds "
        "(0h to 24h), it tells you where to point your telescope east-west along the sky's equator."
    ),
    "Declination": (
        "The celestial equivalent of latitude. Measured in degrees (-90° to +90°), it tells you "
        "how far above or below the celestial equator an object is."
    ),
    "Apparent Magnitude": (
        "How bright a star appears from Earth. Lower numbers = brighter. The brightest stars are "
        "magnitude 0 or negative; the faintest naked-eye stars are about magnitude 6."
    ),
    "Habitable Zone": (
        "The range of distances from a star where liquid water could exist on a planet's surface, "
        "not too hot and not too cold. Sometimes called the \"Goldilocks zone.\" Being in the HZ "
        "does not guarantee habitability."
    ),
    "Conservative HZ": (
        "The narrower, more cautious estimate of the habitable zone. Uses the \"runaway "
        "greenhouse\" inner edge (Venus-like) and \"maximum greenhouse\" outer edge (early "
        "Mars-like). Based on Kopparapu et al. (2013)."
    ),
    "Optimistic HZ": (
        "The wider estimate that includes regions where habitability is less certain. Uses the "
        "\"recent Venus\" inner edge and \"early Mars\" outer edge, based on the idea that Venus "
        "and Mars may once have had surface water."
    ),
    "ESI": (
        "Earth Similarity Index: a number from 0 to 1 that measures how physically similar a "
        "planet is to Earth. Based on radius, density, escape velocity, and surface temperature. "
        "ESI = 1.0 would be an exact Earth twin."
    ),
    "Equilibrium Temperature": (
        "The theoretical temperature a planet would have if it absorbed and re-radiated all "
        "incoming starlight uniformly, with no atmosphere. Real surface temperatures depend "
        "heavily on atmospheric greenhouse effects."
    ),
    "Semi-Major Axis": (
        "Half the longest diameter of an elliptical orbit. For nearly circular orbits, it's "
        "approximately the average distance from the planet to its star. Measured in AU "
        "(1 AU = Earth-Sun distance)."
    ),
    "Orbital Period": (
        "The time it takes a planet to complete one full orbit around its star. Earth's orbital "
        "period is 365.25 days (1 year)."
    ),
    "Transit": (
        "When a planet passes directly between its star and the observer, causing a tiny dip in "
        "the star's brightness. This is how most exoplanets have been discovered."
    ),
    "Radial Velocity": (
        "The component of a star's velocity toward or away from Earth. Measured via Doppler "
        "shifts in the star's spectrum. A wobble in radial velocity reveals an orbiting planet."
    ),
    "Light-Year": (
        "The distance light travels in one year, about 9.46 trillion kilometers (5.88 trillion "
        "miles). It's a measure of distance, not time."
    ),
    "Stellar Spectral Type": (
        "A classification of stars by their surface temperature and color. From hottest to "
        "coolest: O, B, A, F, G (Sun), K, M. Each letter has subclasses (0-9) and luminosity "
        "classes (I-V)."
    ),
    "Eccentricity": (
        "How elongated an orbit is. 0 = perfect circle, close to 1 = very elliptical. Earth's "
        "eccentricity is 0.017 (nearly circular)."
    ),
    "Constellation": (
        "One of 88 internationally recognized regions of the sky. Named mostly after mythological "
        "figures, they serve as a coordinate system for locating objects."
    ),
}


def lookup_term(term: str) -> str | None:
    """Case-insensitive glossary lookup."""
    wanted = term.strip().lower()
    for key, definition in GLOSSARY.items():
        if key.lower() == wanted:
            return definition
    return None
