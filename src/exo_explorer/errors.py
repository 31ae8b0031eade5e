"""Local error taxonomy for exo-explorer.

The pipeline never lets remote or storage failures escape to callers; they are
folded into tagged results instead. We keep a small, stable error enum/envelope
so that the tag carried on a degraded result can be translated into whatever
status indicator the consumer shows.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ErrorType(str, Enum):
    REMOTE_TIMEOUT = "REMOTE_TIMEOUT"
    REMOTE_HTTP = "REMOTE_HTTP"
    REMOTE_NETWORK = "REMOTE_NETWORK"
    REMOTE_PAYLOAD = "REMOTE_PAYLOAD"
    CACHE_MISS = "CACHE_MISS"
    INVALID_DATA = "INVALID_DATA"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class ErrorEnvelope(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    type: ErrorType
    message: str
    context: dict[str, Any] = Field(default_factory=dict)


def make_error(error_type: ErrorType, message: str, **context: Any) -> ErrorEnvelope:
    return ErrorEnvelope(type=error_type, message=message, context=dict(context))


def envelope_for_exception(exc: BaseException) -> ErrorEnvelope:
    """Wrap an arbitrary exception, preferring its own envelope when it has one."""
    to_envelope = getattr(exc, "to_envelope", None)
    if callable(to_envelope):
        envelope = to_envelope()
        if isinstance(envelope, ErrorEnvelope):
            return envelope
    return make_error(ErrorType.INTERNAL_ERROR, str(exc), exception=type(exc).__name__)


class FieldMappingError(ValueError):
    """Raised when a raw archive row cannot be mapped at all.

    Missing or null columns are never an error; this only fires when the row
    itself is not a mapping (e.g. the payload shape changed upstream).

    Attributes:
        row_index: Position of the offending row in the payload, when known.
    """

    def __init__(self, message: str, row_index: int | None = None) -> None:
        self.row_index = row_index
        if row_index is not None:
            message = f"{message} (row {row_index})"
        super().__init__(message)
