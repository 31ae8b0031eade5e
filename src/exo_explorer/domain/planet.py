"""Planet record model shared by the pipeline, science, and catalog layers."""

from __future__ import annotations

import copy
import math
from dataclasses import dataclass, field, fields
from typing import Any

# Attribute name -> serialized key. Serialized keys follow the archive-facing
# camelCase schema consumed by the rendering/UI collaborators.
_BASE_KEYS: dict[str, str] = {
    "id": "id",
    "name": "name",
    "system": "system",
    "distance": "distance",
    "radius": "radius",
    "mass": "mass",
    "period": "period",
    "semi_major_axis": "semiMajorAxis",
    "eq_temp": "eqTemp",
    "eccentricity": "eccentricity",
    "inclination": "inclination",
    "star_type": "starType",
    "star_temp": "starTemp",
    "star_mass": "starMass",
    "star_lum": "starLum",
    "star_lum_log": "starLumLog",
    "ra": "ra",
    "dec": "dec",
    "v_mag": "vMag",
    "k_mag": "kMag",
    "discovered": "discovered",
    "discovery_method": "discoveryMethod",
    "discovery_facility": "discoveryFacility",
    "discovery_ref": "discoveryRef",
    "source": "source",
    "controversial": "controversial",
    "nasa_raw": "nasaRaw",
    "curated": "curated",
    "eq_temp_estimated": "eqTempEstimated",
}

_DERIVED_KEYS: dict[str, str] = {
    "type": "type",
    "atmosphere": "atmosphere",
    "habitability": "habitability",
    "hz_status": "hzStatus",
    "esi": "esi",
    "coords": "coords",
    "constellation": "constellation",
    "observability": "observability",
    "magnitude_guidance": "magnitudeGuidance",
    "discovery_method_info": "discoveryMethodInfo",
}

_KEY_TO_ATTR: dict[str, str] = {key: attr for attr, key in _BASE_KEYS.items()}

# Expected JSON types for base fields read back by `from_dict`
_INT_ATTRS = frozenset({"id", "discovered"})
_TEXT_ATTRS = frozenset(
    {"name", "system", "star_type", "discovery_method", "discovery_facility", "discovery_ref", "source"}
)
_FLAG_ATTRS = frozenset({"controversial", "nasa_raw", "curated", "eq_temp_estimated"})


def _check_field_type(attr: str, value: Any) -> None:
    """Raise ValueError when a serialized base field has the wrong JSON type."""
    if value is None:
        return
    if attr in _FLAG_ATTRS:
        ok = isinstance(value, bool)
    elif attr in _TEXT_ATTRS:
        ok = isinstance(value, str)
    elif attr in _INT_ATTRS:
        ok = isinstance(value, int) and not isinstance(value, bool)
    else:
        ok = (
            isinstance(value, (int, float))
            and not isinstance(value, bool)
            and math.isfinite(value)
        )
    if not ok:
        raise ValueError(f"Field {attr!r} has invalid value {value!r}")


def _serialize(value: Any) -> Any:
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    if isinstance(value, list):
        return [_serialize(v) for v in value]
    if isinstance(value, dict):
        return {k: _serialize(v) for k, v in value.items()}
    return value


@dataclass
class PlanetRecord:
    """One confirmed or synthetic exoplanet.

    Units: distance in light-years, radius/mass in Earth units, period in days,
    semi-major axis in AU, temperatures in Kelvin, star mass/luminosity in solar
    units (luminosity linear; the archive's log value is kept in star_lum_log),
    ra/dec in degrees.

    The derived block (type through discovery_method_info) is only ever written
    by `exo_explorer.science.enrich.enrich_planet`.
    """

    name: str
    system: str
    distance: float | None = None
    radius: float | None = None
    mass: float | None = None
    period: float | None = None
    semi_major_axis: float | None = None
    eq_temp: float | None = None
    eccentricity: float | None = None
    inclination: float | None = None

    star_type: str | None = None
    star_temp: float | None = None
    star_mass: float | None = None
    star_lum: float | None = None
    star_lum_log: float | None = None

    ra: float | None = None
    dec: float | None = None
    v_mag: float | None = None
    k_mag: float | None = None

    discovered: int | None = None
    discovery_method: str | None = None
    discovery_facility: str | None = None
    discovery_ref: str | None = None

    source: str | None = None
    controversial: bool = False
    nasa_raw: bool = False
    curated: bool = False
    eq_temp_estimated: bool = False
    id: int | None = None

    # Derived
    type: str | None = None
    atmosphere: list[dict[str, Any]] = field(default_factory=list)
    habitability: float | None = None
    hz_status: Any = None
    esi: Any = None
    coords: Any = None
    constellation: Any = None
    observability: Any = None
    magnitude_guidance: Any = None
    discovery_method_info: Any = None

    def copy(self) -> PlanetRecord:
        return copy.deepcopy(self)

    def to_dict(self, *, include_derived: bool = True) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        out: dict[str, Any] = {key: getattr(self, attr) for attr, key in _BASE_KEYS.items()}
        if include_derived:
            for attr, key in _DERIVED_KEYS.items():
                out[key] = _serialize(getattr(self, attr))
        return out

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PlanetRecord:
        """Create from a serialized dictionary.

        Accepts either camelCase keys or attribute names. Derived and unknown
        keys are ignored; derived fields are recomputed by enrichment.

        Raises:
            ValueError: If `data` is not a mapping or a base field has the
                wrong type (numbers must be finite, flags must be booleans)
        """
        if not isinstance(data, dict):
            raise ValueError(f"Expected a record object, got {type(data).__name__}")
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            attr = _KEY_TO_ATTR.get(key, key)
            if attr in _BASE_KEYS and attr in known:
                _check_field_type(attr, value)
                kwargs[attr] = value
        kwargs.setdefault("name", "Unknown")
        kwargs.setdefault("system", "Unknown")
        for flag in ("controversial", "nasa_raw", "curated", "eq_temp_estimated"):
            if kwargs.get(flag) is None:
                kwargs.pop(flag, None)
        return cls(**kwargs)


def records_to_dicts(
    records: list[PlanetRecord], *, include_derived: bool = True
) -> list[dict[str, Any]]:
    return [r.to_dict(include_derived=include_derived) for r in records]


def attribute_for_key(key: str) -> str:
    """Resolve a serialized key ("eqTemp") or attribute name ("eq_temp") to the attribute name."""
    if key in _BASE_KEYS or key in _DERIVED_KEYS:
        return key
    if key in _KEY_TO_ATTR:
        return _KEY_TO_ATTR[key]
    for attr, serialized in _DERIVED_KEYS.items():
        if serialized == key:
            return attr
    raise KeyError(key)
