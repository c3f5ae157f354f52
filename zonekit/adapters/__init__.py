"""Adapter pattern implementations for the timezone database."""

from zonekit.adapters.base import CatalogAdapter

__all__ = [
    "CatalogAdapter",
]
