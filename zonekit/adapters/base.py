"""Abstract base classes for adapters."""

from abc import ABC, abstractmethod
from datetime import datetime


class CatalogAdapter(ABC):
    """Timezone database adapter abstract class."""

    @abstractmethod
    def list_identifiers(self) -> list[str]:
        """
        List every timezone identifier known to the database.

        ┌──────────────────────────────────────────────────────────────┐
        │                   IMPLEMENTATION CONTRACT                     │
        ├──────────────────────────────────────────────────────────────┤
        │ WHO IMPLEMENTS: Catalog adapter developer                    │
        │ WHO CALLS:      zonekit Core (TimezoneCatalog)               │
        │ WHEN CALLED:    Every query unless the catalog is cached     │
        ├──────────────────────────────────────────────────────────────┤
        │ ORDERING: the returned order IS the catalog order.           │
        │  Core never re-sorts it; grouped options and search results  │
        │  inherit it. Return a stable order across calls.             │
        └──────────────────────────────────────────────────────────────┘

        Returns:
            Ordered list of IANA identifiers (e.g. "America/New_York", "UTC")

        Raises:
            CatalogError: If the database cannot be read
        """
        pass

    @abstractmethod
    def resolve_offset(self, identifier: str, instant: datetime) -> int:
        """
        Resolve the UTC offset of an identifier at an instant.

        ┌──────────────────────────────────────────────────────────────┐
        │                   IMPLEMENTATION CONTRACT                     │
        ├──────────────────────────────────────────────────────────────┤
        │ WHO IMPLEMENTS: Catalog adapter developer                    │
        │ WHO CALLS:      zonekit Core (OffsetEngine)                  │
        │ WHEN CALLED:    get_offset() and every offset-labelled list  │
        ├──────────────────────────────────────────────────────────────┤
        │ RESPONSIBILITY SPLIT:                                        │
        │                                                              │
        │ zonekit Core (caller):                                       │
        │  ✓ Checks the identifier is in list_identifiers()           │
        │  ✓ Supplies the instant (always "now", timezone-aware UTC)  │
        │  ✓ Turns failures into a "no value" result                  │
        │                                                              │
        │ Catalog Adapter (implementer):                               │
        │  ✓ Loads zone rules for the identifier                      │
        │  ✓ Returns offset in whole seconds (DST applied)            │
        │  ✓ Raises on failure instead of returning a sentinel        │
        └──────────────────────────────────────────────────────────────┘

        Args:
            identifier: IANA identifier present in list_identifiers()
            instant: Timezone-aware evaluation instant

        Returns:
            Signed offset from UTC in seconds (e.g. -18000 for UTC-05:00)

        Raises:
            OffsetResolutionError: If the offset cannot be resolved
        """
        pass
