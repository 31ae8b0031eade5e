"""exo-explorer: exoplanet catalog pipeline and derived-science toolkit.

The package turns the NASA Exoplanet Archive's confirmed-planet table into a
clean, enriched, searchable catalog with cache-backed fallback when the
archive is unreachable.
"""

from __future__ import annotations

__version__ = "0.3.0"

__all__ = ["__version__"]
