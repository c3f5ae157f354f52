"""UTC offset resolution and formatting."""

import logging
from collections.abc import Callable
from datetime import datetime
from zoneinfo import ZoneInfoNotFoundError

from zonekit.core.catalog import TimezoneCatalog
from zonekit.core.common.exceptions import CatalogError
from zonekit.utils.logging import ContextLogger, component_logger
from zonekit.utils.time import utc_now

# Failures that mean "no offset available" rather than a bug
_RESOLUTION_ERRORS: tuple[type[Exception], ...] = (
    CatalogError,
    ZoneInfoNotFoundError,
    OSError,
    ValueError,
)


def format_offset(offset: int) -> str:
    """
    Format an offset in seconds as ``±HH:MM``.

    Zero is formatted with a plus sign. Leftover seconds are truncated.

    Example:
        >>> format_offset(-18000)
        '-05:00'
        >>> format_offset(19800)
        '+05:30'
        >>> format_offset(0)
        '+00:00'
    """
    sign = "+" if offset >= 0 else "-"
    hours, remainder = divmod(abs(offset), 3600)
    minutes = remainder // 60
    return f"{sign}{hours:02d}:{minutes:02d}"


class OffsetEngine:
    """
    Resolves current UTC offsets for catalog identifiers.

    Offsets are evaluated at the instant returned by ``clock`` on every
    call, so results change when a zone crosses a DST transition.
    """

    def __init__(
        self,
        catalog: TimezoneCatalog,
        clock: Callable[[], datetime] | None = None,
        logger: ContextLogger | logging.Logger | None = None,
    ) -> None:
        self.catalog = catalog
        self.clock = clock or utc_now
        self.logger = component_logger(self.__class__.__name__, logger)

    def get_offset(self, timezone: str, validate: bool = True) -> int | None:
        """
        Get current UTC offset for timezone.

        Args:
            timezone: Timezone identifier
            validate: Check catalog membership first; pass False only for
                identifiers just read from the catalog

        Returns:
            Offset in seconds, or None if the identifier is unknown or its
            offset cannot be resolved
        """
        try:
            if validate and not self.catalog.exists(timezone):
                return None
            return self.catalog.adapter.resolve_offset(timezone, self.clock())
        except _RESOLUTION_ERRORS as e:
            self.logger.warning("Offset resolution failed", timezone=timezone, error=e)
            return None

    def get_offset_string(self, timezone: str, validate: bool = True) -> str:
        """
        Get formatted UTC offset string.

        Args:
            timezone: Timezone identifier
            validate: Check catalog membership first

        Returns:
            Formatted offset (e.g. "+05:30", "-08:00"), or "" if unavailable
        """
        offset = self.get_offset(timezone, validate=validate)
        if offset is None:
            return ""
        return format_offset(offset)
