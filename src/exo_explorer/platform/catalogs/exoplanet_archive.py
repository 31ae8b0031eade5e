"""NASA Exoplanet Archive TAP service client for the bulk confirmed-planet table.

This module issues a single read-only bulk query against the Planetary Systems
Composite Parameters table (one canonical solution per planet) and returns the
raw JSON rows. Mapping rows onto `PlanetRecord` lives in `field_mapper`.

Usage:
    >>> from exo_explorer.platform.catalogs.exoplanet_archive import ExoplanetArchiveClient
    >>> client = ExoplanetArchiveClient()
    >>> rows = client.fetch_remote_data()
    >>> rows[0]["pl_name"]
    '11 Com b'

Technical Notes:
    - NASA Exoplanet Archive TAP endpoint: https://exoplanetarchive.ipac.caltech.edu/TAP/sync
    - Queries `pscomppars` filtered to `default_flag = 1`, ordered by name
    - A hard 30s cap covers connection, server time and body download
    - No retries here; retry and fallback policy belongs to the pipeline
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import requests

from exo_explorer.config import TAP_ENDPOINT
from exo_explorer.domain.progress import LoadPhase, ProgressCallback, emit_progress
from exo_explorer.errors import ErrorEnvelope, ErrorType, make_error
from exo_explorer.network.timeout import (
    ARCHIVE_CONNECT_TIMEOUT,
    ARCHIVE_QUERY_TIMEOUT,
    DeadlineExceeded,
    request_deadline,
)

logger = logging.getLogger(__name__)

# Fixed projection requested from pscomppars
ARCHIVE_COLUMNS: tuple[str, ...] = (
    "pl_name",  # planet name
    "hostname",  # host star name
    "sy_dist",  # distance (pc)
    "pl_rade",  # planet radius (Earth radii)
    "pl_bmasse",  # planet mass (Earth masses)
    "pl_orbper",  # orbital period (days)
    "pl_orbsmax",  # semi-major axis (AU)
    "pl_eqt",  # equilibrium temperature (K)
    "st_spectype",  # stellar spectral type
    "st_teff",  # stellar effective temperature (K)
    "st_mass",  # stellar mass (solar)
    "st_lum",  # stellar luminosity (log10 solar)
    "disc_year",
    "discoverymethod",
    "disc_facility",
    "ra",  # deg
    "dec",  # deg
    "sy_vmag",
    "sy_kmag",
    "pl_orbeccen",
    "pl_orbincl",  # deg
    "disc_refname",
    "pl_controv_flag",
    "soltype",
    "default_flag",
)

ADQL_QUERY = (
    f"SELECT {','.join(ARCHIVE_COLUMNS)} FROM pscomppars WHERE default_flag = 1 ORDER BY pl_name"
)


class ExoplanetArchiveError(Exception):
    """Base exception for Exoplanet Archive errors."""

    error_type: ErrorType = ErrorType.INTERNAL_ERROR

    def to_envelope(self) -> ErrorEnvelope:
        return make_error(self.error_type, str(self))


class TAPQueryError(ExoplanetArchiveError):
    """Error during TAP query execution."""

    pass


class RemoteTimeoutError(TAPQueryError):
    """The query did not complete within its hard timeout."""

    error_type = ErrorType.REMOTE_TIMEOUT

    def __init__(self, timeout_seconds: float) -> None:
        self.timeout_seconds = timeout_seconds
        super().__init__(f"NASA API request timed out ({timeout_seconds:.0f}s)")

    def to_envelope(self) -> ErrorEnvelope:
        return make_error(self.error_type, str(self), timeout_seconds=self.timeout_seconds)


class RemoteHTTPError(TAPQueryError):
    """The archive answered with a non-2xx status."""

    error_type = ErrorType.REMOTE_HTTP

    def __init__(self, status_code: int, reason: str | None = None) -> None:
        self.status_code = int(status_code)
        self.reason = reason or ""
        super().__init__(f"NASA API returned {self.status_code}: {self.reason}".rstrip(": "))

    def to_envelope(self) -> ErrorEnvelope:
        return make_error(self.error_type, str(self), status_code=self.status_code)


class RemoteNetworkError(TAPQueryError):
    """DNS failure, refused connection, TLS error, or similar transport failure."""

    error_type = ErrorType.REMOTE_NETWORK


class RemotePayloadError(TAPQueryError):
    """The response body was not the expected JSON row list."""

    error_type = ErrorType.REMOTE_PAYLOAD


@dataclass
class ExoplanetArchiveClient:
    """Client for the NASA Exoplanet Archive TAP bulk query.

    Attributes:
        endpoint: TAP sync endpoint URL
        timeout: Hard cap in seconds for the whole request
        session: Reused HTTP session
    """

    endpoint: str = TAP_ENDPOINT
    timeout: float = ARCHIVE_QUERY_TIMEOUT
    session: requests.Session = field(default_factory=requests.Session)

    def _request_params(self) -> dict[str, str]:
        return {"query": ADQL_QUERY, "format": "json"}

    def _execute_tap_query(self) -> Any:
        """Execute the bulk query and return the decoded JSON body.

        Raises:
            RemoteTimeoutError: If the request exceeds `timeout`
            RemoteHTTPError: On a non-2xx response
            RemoteNetworkError: On transport-level failures
            RemotePayloadError: If the body is not JSON
        """
        socket_timeout = (min(ARCHIVE_CONNECT_TIMEOUT, self.timeout), self.timeout)
        try:
            with request_deadline(self.timeout, label="NASA Exoplanet Archive query"):
                response = self.session.get(
                    self.endpoint,
                    params=self._request_params(),
                    headers={"Accept": "application/json"},
                    timeout=socket_timeout,
                )
                if not response.ok:
                    raise RemoteHTTPError(response.status_code, response.reason)
                return response.json()
        except DeadlineExceeded as e:
            raise RemoteTimeoutError(self.timeout) from e
        except requests.exceptions.Timeout as e:
            raise RemoteTimeoutError(self.timeout) from e
        except requests.exceptions.RequestException as e:
            # JSON decode errors subclass RequestException in recent requests releases
            if isinstance(e, ValueError):
                raise RemotePayloadError(f"Failed to parse TAP response: {e}") from e
            raise RemoteNetworkError(f"TAP query failed: {e}") from e
        except ValueError as e:
            raise RemotePayloadError(f"Failed to parse TAP response: {e}") from e

    def fetch_remote_data(self, on_progress: ProgressCallback | None = None) -> list[dict[str, Any]]:
        """Fetch every default-solution row from pscomppars.

        Args:
            on_progress: Optional observer for `fetching`/`parsing` transitions

        Returns:
            List of raw rows keyed by archive column name

        Raises:
            TAPQueryError: Subclass describing the failure
        """
        emit_progress(on_progress, LoadPhase.FETCHING, "Querying NASA Exoplanet Archive...")
        logger.info(f"Querying {self.endpoint} (timeout={self.timeout:.0f}s)")

        data = self._execute_tap_query()

        # Handle both bare-list and wrapped response formats
        if isinstance(data, dict) and isinstance(data.get("data"), list):
            rows = list(data["data"])
        elif isinstance(data, list):
            rows = data
        else:
            raise RemotePayloadError(
                f"Unexpected TAP response shape: {type(data).__name__}"
            )

        emit_progress(
            on_progress,
            LoadPhase.PARSING,
            f"Received {len(rows)} records from NASA...",
            count=len(rows),
        )
        logger.info(f"Received {len(rows)} rows from Exoplanet Archive")
        return rows


# Module-level singleton for convenience
_client: ExoplanetArchiveClient | None = None


def get_client() -> ExoplanetArchiveClient:
    """Get the module-level ExoplanetArchiveClient singleton."""
    global _client
    if _client is None:
        _client = ExoplanetArchiveClient()
    return _client


def fetch_remote_data(on_progress: ProgressCallback | None = None) -> list[dict[str, Any]]:
    """Convenience function to run the bulk query using the singleton client."""
    return get_client().fetch_remote_data(on_progress=on_progress)
