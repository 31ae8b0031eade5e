"""Remote catalog access (platform-facing).

Canonical home for the NASA Exoplanet Archive client and the mapping of its
rows onto the internal planet schema.
"""

from __future__ import annotations

from exo_explorer.platform.catalogs.exoplanet_archive import (
    ADQL_QUERY,
    ARCHIVE_COLUMNS,
    ExoplanetArchiveClient,
    ExoplanetArchiveError,
    RemoteHTTPError,
    RemoteNetworkError,
    RemotePayloadError,
    RemoteTimeoutError,
    TAPQueryError,
    fetch_remote_data,
    get_client,
)
from exo_explorer.platform.catalogs.field_mapper import (
    PARSEC_TO_LY,
    derive_system_name,
    map_record,
    map_records,
)

__all__ = [
    "ADQL_QUERY",
    "ARCHIVE_COLUMNS",
    "ExoplanetArchiveClient",
    "ExoplanetArchiveError",
    "PARSEC_TO_LY",
    "RemoteHTTPError",
    "RemoteNetworkError",
    "RemotePayloadError",
    "RemoteTimeoutError",
    "TAPQueryError",
    "derive_system_name",
    "fetch_remote_data",
    "get_client",
    "map_record",
    "map_records",
]
