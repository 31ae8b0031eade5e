"""Progress reporting types for catalog loads."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol

logger = logging.getLogger(__name__)


class LoadPhase(Enum):
    """Named transitions of a catalog load."""

    FETCHING = "fetching"
    PARSING = "parsing"
    MAPPING = "mapping"
    VALIDATING = "validating"
    COMPLETE = "complete"
    CACHE_HIT = "cache-hit"
    FALLBACK_CACHE = "fallback-cache"
    FALLBACK_BUILTIN = "fallback-builtin"
    READY = "ready"


@dataclass(frozen=True)
class ProgressEvent:
    """Progress information emitted while a catalog load runs.

    Attributes:
        phase: Phase that was just entered
        message: Human-readable status message
        count: Number of records involved, when known
        error: Error message carried by fallback phases
    """

    phase: LoadPhase
    message: str
    count: int | None = None
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result: dict[str, Any] = {"phase": self.phase.value, "message": self.message}
        if self.count is not None:
            result["count"] = self.count
        if self.error is not None:
            result["error"] = self.error
        return result


class ProgressCallback(Protocol):
    """Protocol for progress callback functions.

    Callbacks are observational only; whatever they do (or raise) must not
    change how a load proceeds.
    """

    def __call__(self, event: ProgressEvent) -> None:
        """Handle progress update.

        Args:
            event: Current progress information
        """
        ...


def emit_progress(
    callback: ProgressCallback | None,
    phase: LoadPhase,
    message: str,
    *,
    count: int | None = None,
    error: str | None = None,
) -> None:
    """Invoke an optional progress callback, containing any failure it raises."""
    if callback is None:
        return
    event = ProgressEvent(phase=phase, message=message, count=count, error=error)
    try:
        callback(event)
    except Exception as e:
        logger.warning(f"Progress callback failed during {phase.value}: {e}")
