"""Catalog adapters."""

from zonekit.adapters.catalog.memory import InMemoryCatalogAdapter
from zonekit.adapters.catalog.zoneinfo import ZoneInfoCatalogAdapter

__all__ = [
    "InMemoryCatalogAdapter",
    "ZoneInfoCatalogAdapter",
]
