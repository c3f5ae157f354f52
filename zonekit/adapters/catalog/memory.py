"""In-memory catalog adapter for testing."""

from collections.abc import Mapping
from datetime import datetime

from zonekit.adapters.base import CatalogAdapter
from zonekit.core.common.exceptions import OffsetResolutionError


class InMemoryCatalogAdapter(CatalogAdapter):
    """
    Fixed catalog with fixed offsets (for testing and deterministic output).

    Identifiers are listed in mapping order. An offset of ``None`` makes
    ``resolve_offset`` fail for that identifier, simulating corrupt zone data.

    Example:
        >>> adapter = InMemoryCatalogAdapter({"UTC": 0, "Asia/Kolkata": 19800})
        >>> adapter.list_identifiers()
        ['UTC', 'Asia/Kolkata']
        >>> adapter.resolve_offset("Asia/Kolkata", datetime.now(UTC))
        19800
    """

    def __init__(self, offsets: Mapping[str, int | None] | None = None) -> None:
        self._offsets: dict[str, int | None] = dict(offsets or {})

    def list_identifiers(self) -> list[str]:
        """List identifiers in insertion order."""
        return list(self._offsets)

    def resolve_offset(self, identifier: str, instant: datetime) -> int:
        """Return the configured offset."""
        if identifier not in self._offsets:
            raise OffsetResolutionError(f"Unknown timezone '{identifier}'")

        offset = self._offsets[identifier]
        if offset is None:
            raise OffsetResolutionError(f"No offset data for '{identifier}'")
        return offset
