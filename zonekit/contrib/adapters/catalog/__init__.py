"""Contributed catalog adapters for zonekit."""

__all__ = []

# pytz catalog adapter (optional)
try:
    from zonekit.contrib.adapters.catalog.pytz import PytzCatalogAdapter

    __all__.append("PytzCatalogAdapter")
except ImportError:
    PytzCatalogAdapter = None  # type: ignore[assignment, misc]
