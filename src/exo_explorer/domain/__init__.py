"""Domain models for exo-explorer.

This package is domain-only. It intentionally excludes platform-layer concepts
like HTTP clients, cache stores, and CLI wiring.
"""

from exo_explorer.domain.planet import PlanetRecord, attribute_for_key, records_to_dicts
from exo_explorer.domain.progress import (
    LoadPhase,
    ProgressCallback,
    ProgressEvent,
    emit_progress,
)

__all__ = [
    "LoadPhase",
    "PlanetRecord",
    "attribute_for_key",
    "ProgressCallback",
    "ProgressEvent",
    "emit_progress",
    "records_to_dicts",
]
