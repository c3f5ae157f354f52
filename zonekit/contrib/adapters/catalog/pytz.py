"""Catalog adapter backed by the tz database bundled with pytz."""

from datetime import datetime

import pytz

from zonekit.adapters.base import CatalogAdapter
from zonekit.core.common.exceptions import OffsetResolutionError


class PytzCatalogAdapter(CatalogAdapter):
    """
    Timezone database adapter using ``pytz``.

    Useful where the host tz database is missing or outdated: pytz ships
    its own copy of the IANA database, versioned with the package.

    Example:
        >>> adapter = PytzCatalogAdapter()
        >>> "Europe/Paris" in adapter.list_identifiers()
        True
    """

    def __init__(self, common_only: bool = True) -> None:
        """
        Initialize pytz catalog adapter.

        Args:
            common_only: List ``pytz.common_timezones`` (True) or
                ``pytz.all_timezones`` (False), which also carries renamed
                zones such as Asia/Calcutta; both keep a few legacy links
                like US/Eastern
        """
        self.common_only = common_only

    def list_identifiers(self) -> list[str]:
        """List identifiers in pytz order (already sorted)."""
        if self.common_only:
            return list(pytz.common_timezones)
        return list(pytz.all_timezones)

    def resolve_offset(self, identifier: str, instant: datetime) -> int:
        """Resolve offset via pytz rules."""
        try:
            tz = pytz.timezone(identifier)
        except pytz.UnknownTimeZoneError as e:
            raise OffsetResolutionError(f"Unknown timezone '{identifier}'") from e

        offset = instant.astimezone(tz).utcoffset()
        if offset is None:
            raise OffsetResolutionError(f"Timezone '{identifier}' has no UTC offset")
        return int(offset.total_seconds())
