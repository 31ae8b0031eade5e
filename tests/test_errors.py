"""Tests for the error taxonomy."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from exo_explorer.errors import (
    ErrorEnvelope,
    ErrorType,
    FieldMappingError,
    envelope_for_exception,
    make_error,
)
from exo_explorer.platform.catalogs.exoplanet_archive import (
    RemoteHTTPError,
    RemoteTimeoutError,
    TAPQueryError,
)


class TestMakeError:
    def test_builds_envelope_with_context(self) -> None:
        env = make_error(ErrorType.CACHE_MISS, "nothing cached", key="exoplanet_nasa_cache")
        assert env.type is ErrorType.CACHE_MISS
        assert env.message == "nothing cached"
        assert env.context == {"key": "exoplanet_nasa_cache"}

    def test_envelope_is_frozen(self) -> None:
        env = make_error(ErrorType.INVALID_DATA, "bad")
        with pytest.raises(ValidationError):
            env.message = "changed"  # type: ignore[misc]


class TestEnvelopeForException:
    def test_uses_exception_envelope(self) -> None:
        env = envelope_for_exception(RemoteHTTPError(503, "Service Unavailable"))
        assert env.type is ErrorType.REMOTE_HTTP
        assert env.context["status_code"] == 503

    def test_timeout_envelope(self) -> None:
        env = envelope_for_exception(RemoteTimeoutError(30.0))
        assert env.type is ErrorType.REMOTE_TIMEOUT
        assert "timed out" in env.message

    def test_generic_exception_is_internal(self) -> None:
        env = envelope_for_exception(RuntimeError("boom"))
        assert isinstance(env, ErrorEnvelope)
        assert env.type is ErrorType.INTERNAL_ERROR
        assert env.context["exception"] == "RuntimeError"


class TestFieldMappingError:
    def test_is_value_error(self) -> None:
        assert issubclass(FieldMappingError, ValueError)

    def test_row_index_in_message(self) -> None:
        exc = FieldMappingError("not a mapping", row_index=7)
        assert exc.row_index == 7
        assert "row 7" in str(exc)

    def test_remote_errors_share_base(self) -> None:
        assert issubclass(RemoteTimeoutError, TAPQueryError)
        assert issubclass(RemoteHTTPError, TAPQueryError)
