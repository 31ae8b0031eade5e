"""Network helpers shared by remote catalog clients."""

from __future__ import annotations

from exo_explorer.network.timeout import (
    ARCHIVE_CONNECT_TIMEOUT,
    ARCHIVE_QUERY_TIMEOUT,
    DeadlineExceeded,
    deadlines_available,
    request_deadline,
)

__all__ = [
    "ARCHIVE_CONNECT_TIMEOUT",
    "ARCHIVE_QUERY_TIMEOUT",
    "DeadlineExceeded",
    "deadlines_available",
    "request_deadline",
]
