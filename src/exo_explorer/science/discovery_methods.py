"""Discovery-method reference table with archive-spelling aliases."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class DiscoveryMethodInfo:
    id: str
    name: str
    short_desc: str
    full_desc: str
    physics: str
    strengths: tuple[str, ...]
    limitations: tuple[str, ...]
    missions: tuple[str, ...]
    animation_type: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "shortDesc": self.short_desc,
            "fullDesc": self.full_desc,
            "physics": self.physics,
            "strengths": list(self.strengths),
            "limitations": list(self.limitations),
            "missions": list(self.missions),
            "animationType": self.animation_type,
        }


DISCOVERY_METHODS: dict[str, DiscoveryMethodInfo] = {
    "Transit": DiscoveryMethodInfo(
        id="transit",
        name="Transit",
        short_desc="Planet passes in front of its star, causing a tiny dip in brightness.",
        full_desc=(
            "When a planet's orbit is aligned so it crosses between its star and Earth, it blocks "
            "a small fraction of starlight. By measuring the depth and duration of these periodic "
            "dips, astronomers can determine the planet's size (radius) and orbital period. Transit "
            "observations can also reveal atmospheric composition through transmission spectroscopy."
        ),
        physics=(
            "The fractional brightness dip equals (R_planet/R_star)². A Jupiter-sized planet blocks "
            "~1% of a Sun-like star; an Earth-sized planet blocks ~0.01%."
        ),
        strengths=(
            "Measures planet radius directly",
            "Enables atmospheric characterization",
            "Can detect multiple planets in a system",
            "Most prolific method (>75% of discoveries)",
        ),
        limitations=(
            "Requires precise orbital alignment (~0.5% chance for Earth-like)",
            "Biased toward short-period planets",
            "Cannot measure mass alone",
        ),
        missions=("Kepler", "K2", "TESS", "CoRoT", "CHEOPS", "PLATO (future)"),
        animation_type="transit",
    ),
    "Radial Velocity": DiscoveryMethodInfo(
        id="radialVelocity",
        name="Radial Velocity",
        short_desc="Star wobbles due to planet's gravity, shifting its light spectrum.",
        full_desc=(
            "A planet and its star orbit their common center of mass. The star's tiny wobble causes "
            "periodic Doppler shifts in its spectrum, blue-shifted when moving toward us and "
            "red-shifted when moving away. This \"radial velocity\" method measures the planet's "
            "minimum mass and orbital period with high precision."
        ),
        physics=(
            "The amplitude of the velocity shift depends on the planet's mass, orbital distance, and "
            "inclination. Jupiter causes the Sun to wobble at ~12.5 m/s; Earth causes only ~0.09 m/s."
        ),
        strengths=(
            "Measures planet mass (minimum)",
            "Works for a wide range of orbital periods",
            "First method to detect exoplanets (51 Peg b, 1995)",
            "Complements transit method",
        ),
        limitations=(
            "Only measures minimum mass (m·sin(i))",
            "Difficult for small/distant planets",
            "Stellar activity can mimic signals",
        ),
        missions=("HARPS", "ESPRESSO", "HIRES/Keck", "CARMENES", "MAROON-X"),
        animation_type="radialVelocity",
    ),
    "Direct Imaging": DiscoveryMethodInfo(
        id="directImaging",
        name="Direct Imaging",
        short_desc="Planet is photographed directly, separated from its star's glare.",
        full_desc=(
            "Using advanced optics (coronagraphs) and image processing to block the star's "
            "overwhelming light, astronomers can sometimes photograph planets directly. This works "
            "best for young, massive, self-luminous planets far from their stars. Direct imaging "
            "reveals the planet's actual appearance and enables spectroscopy of its atmosphere."
        ),
        physics=(
            "Stars outshine planets by factors of 10⁶ (infrared) to 10¹⁰ (visible). Coronagraphs and "
            "adaptive optics suppress starlight to reveal the planet's thermal emission or reflected light."
        ),
        strengths=(
            "Provides actual image of the planet",
            "Enables direct spectroscopy",
            "Works for wide-orbit planets",
        ),
        limitations=(
            "Only works for young, massive, distant planets",
            "Requires extreme contrast (10⁸-10¹⁰)",
            "Current tech limited to gas giants",
        ),
        missions=("GPI", "SPHERE/VLT", "JWST", "Subaru/SCExAO", "Roman (future)", "HWO (concept)"),
        animation_type="directImaging",
    ),
    "Microlensing": DiscoveryMethodInfo(
        id="microlensing",
        name="Gravitational Microlensing",
        short_desc="Planet's gravity bends and magnifies light from a background star.",
        full_desc=(
            "When a star with a planet passes in front of a more distant background star, "
            "gravitational lensing magnifies the background star's light. The planet causes a brief "
            "spike or anomaly in the magnification curve. This method is unique in being sensitive "
            "to distant, cool, low-mass planets, including free-floating planets."
        ),
        physics=(
            "General relativity predicts that mass bends spacetime, deflecting light. A "
            "planetary-mass lens creates a detectable perturbation lasting hours to days atop a "
            "stellar lensing event lasting weeks."
        ),
        strengths=(
            "Sensitive to Earth-mass planets at AU-scale orbits",
            "Can detect free-floating planets",
            "No host star brightness requirement",
        ),
        limitations=(
            "Events are one-time, non-repeating",
            "Planet distance is poorly constrained",
            "Requires continuous monitoring of dense starfields",
        ),
        missions=("OGLE", "MOA", "KMTNet", "Roman (future)"),
        animation_type="microlensing",
    ),
    "Timing": DiscoveryMethodInfo(
        id="timing",
        name="Timing Variations",
        short_desc="Periodic changes in signals from pulsars or eclipses reveal hidden planets.",
        full_desc=(
            "Pulsars emit extremely regular radio pulses. A planet orbiting a pulsar causes tiny "
            "timing variations as the pulsar wobbles. Similarly, eclipsing binary stars show timing "
            "changes from third-body perturbations. The first exoplanets ever confirmed "
            "(PSR B1257+12, 1992) were found by pulsar timing."
        ),
        physics=(
            "Pulsar timing can detect timing residuals as small as microseconds, corresponding to "
            "planets as small as the Moon. Transit timing variations (TTVs) in multi-planet systems "
            "reveal planet masses and eccentricities through gravitational perturbations."
        ),
        strengths=(
            "Extremely precise",
            "Can detect very small planets",
            "First confirmed exoplanet method",
        ),
        limitations=(
            "Only works for pulsars or eclipsing binaries",
            "Pulsar planets are rare/exotic",
            "Complex orbital analysis required",
        ),
        missions=("Arecibo (historical)", "Parkes", "Kepler (TTV)"),
        animation_type="timing",
    ),
    "Astrometry": DiscoveryMethodInfo(
        id="astrometry",
        name="Astrometry",
        short_desc="Precisely measuring a star's position reveals its wobble from orbiting planets.",
        full_desc=(
            "Astrometry measures the exact position of a star on the sky over time. A planet causes "
            "the star to trace a tiny ellipse. This is conceptually simple but extremely challenging "
            "in practice, since the wobble is typically measured in microarcseconds. Gaia is expected "
            "to discover thousands of planets this way."
        ),
        physics=(
            "A Jupiter at 5 AU causes the Sun to wobble by about 500 µas as seen from 10 pc. An "
            "Earth would produce only ~0.3 µas. Gaia achieves ~20 µas precision for bright stars."
        ),
        strengths=(
            "Gives true mass (not minimum)",
            "Measures all orbital elements",
            "Complementary to radial velocity",
        ),
        limitations=(
            "Requires extreme positional precision",
            "Long observation baselines needed",
            "Best for nearby, massive planets",
        ),
        missions=("Gaia", "Hipparcos (attempted)", "VLTI/GRAVITY"),
        animation_type="astrometry",
    ),
    "Transit Timing Variations": DiscoveryMethodInfo(
        id="ttv",
        name="Transit Timing Variations",
        short_desc="Gravitational tugs from additional planets cause transit times to vary.",
        full_desc=(
            "In a multi-planet system, mutual gravitational interactions cause planets to speed up "
            "or slow down, shifting their transit times by minutes to hours. By analyzing these "
            "Transit Timing Variations (TTVs), astronomers can infer the masses and orbital "
            "properties of non-transiting planets."
        ),
        physics=(
            "Planets near mean-motion resonances (e.g., 2:1 period ratios) show the largest TTVs. "
            "The amplitude depends on the perturber's mass and the proximity to resonance."
        ),
        strengths=(
            "Can detect non-transiting planets",
            "Provides mass measurements",
            "Powerful for resonant systems",
        ),
        limitations=(
            "Requires multi-planet systems",
            "Analysis is model-dependent",
            "Works best near resonances",
        ),
        missions=("Kepler", "TESS"),
        animation_type="timing",
    ),
    "Imaging": DiscoveryMethodInfo(
        id="imaging",
        name="Direct Imaging",
        short_desc="Planet photographed directly by blocking the star's light.",
        full_desc=(
            "Same as Direct Imaging: the planet is observed directly using coronagraphic or "
            "high-contrast imaging techniques."
        ),
        physics="See Direct Imaging.",
        strengths=("Direct observation of planet light",),
        limitations=("Limited to young, massive, wide-orbit planets",),
        missions=("GPI", "SPHERE", "JWST"),
        animation_type="directImaging",
    ),
    "Eclipse Timing Variations": DiscoveryMethodInfo(
        id="etv",
        name="Eclipse Timing Variations",
        short_desc="Changes in eclipse times of binary stars reveal orbiting planets.",
        full_desc=(
            "Similar to transit timing variations, but applied to eclipsing binary stars. A planet "
            "orbiting the binary system causes the eclipse times to shift periodically."
        ),
        physics=(
            "The light-travel time effect and gravitational perturbations from the planet shift "
            "the observed eclipse times."
        ),
        strengths=("Can detect circumbinary planets",),
        limitations=("Complex systems, ambiguous interpretations",),
        missions=("Kepler", "TESS"),
        animation_type="timing",
    ),
    "Pulsar Timing": DiscoveryMethodInfo(
        id="pulsarTiming",
        name="Pulsar Timing",
        short_desc="Ultra-precise timing of pulsar radio pulses reveals planetary companions.",
        full_desc=(
            "The first exoplanets ever confirmed were found around pulsar PSR B1257+12 in 1992. "
            "Pulsars act as incredibly precise clocks, and planetary companions cause measurable "
            "timing residuals."
        ),
        physics=(
            "Pulsar timing residuals in the microsecond range correspond to light-travel-time "
            "delays from the pulsar's wobble."
        ),
        strengths=("Ultra-high precision", "Historical significance"),
        limitations=("Only pulsar hosts", "Exotic environments"),
        missions=("Arecibo", "Green Bank Telescope"),
        animation_type="timing",
    ),
    "Orbital Brightness Modulation": DiscoveryMethodInfo(
        id="obm",
        name="Orbital Brightness Modulation",
        short_desc="Detects planets from their changing reflected/thermal light as they orbit.",
        full_desc=(
            "As a planet orbits its star, the combined light of the system changes due to "
            "reflected light from the planet and its thermal emission. This method detects planets "
            "without requiring transits."
        ),
        physics=(
            "The variation is proportional to the planet's albedo and size, and follows the "
            "orbital period."
        ),
        strengths=("Does not require transits",),
        limitations=("Only works for hot, close-in planets",),
        missions=("Kepler", "TESS"),
        animation_type="transit",
    ),
    "Disk Kinematics": DiscoveryMethodInfo(
        id="diskKinematics",
        name="Disk Kinematics",
        short_desc="Velocity patterns in protoplanetary disks reveal embedded planets.",
        full_desc=(
            "ALMA observations of protoplanetary disks can detect velocity perturbations caused by "
            "forming planets. The planet's gravity creates characteristic \"kinks\" in the disk's "
            "rotation pattern."
        ),
        physics=(
            "Planets carve gaps in disks and create pressure bumps that alter the local Keplerian "
            "velocity field."
        ),
        strengths=("Observes planet formation in action",),
        limitations=("Only for young systems with disks",),
        missions=("ALMA",),
        animation_type="directImaging",
    ),
}

# Archive spelling -> canonical key in DISCOVERY_METHODS
METHOD_ALIASES: dict[str, str] = {
    "Transit": "Transit",
    "Radial Velocity": "Radial Velocity",
    "Direct Imaging": "Direct Imaging",
    "Microlensing": "Microlensing",
    "Imaging": "Direct Imaging",
    "Astrometry": "Astrometry",
    "Transit Timing Variations": "Transit Timing Variations",
    "Eclipse Timing Variations": "Eclipse Timing Variations",
    "Pulsar Timing": "Pulsar Timing",
    "Pulsation Timing Variations": "Timing",
    "Orbital Brightness Modulation": "Orbital Brightness Modulation",
    "Disk Kinematics": "Disk Kinematics",
}


def get_discovery_method_info(method_name: str | None) -> DiscoveryMethodInfo | None:
    """Look up a method after normalizing archive spellings; None when unknown."""
    if not method_name:
        return None
    normalized = METHOD_ALIASES.get(method_name, method_name)
    return DISCOVERY_METHODS.get(normalized) or DISCOVERY_METHODS.get(method_name)
