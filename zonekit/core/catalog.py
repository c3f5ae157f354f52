"""Catalog accessor over a timezone database adapter."""

import logging
import threading

from zonekit.adapters.base import CatalogAdapter
from zonekit.utils.logging import ContextLogger, component_logger


class TimezoneCatalog:
    """
    Ordered view of every identifier the adapter knows.

    With ``cache=True`` the identifier list is read once and kept as an
    immutable snapshot until ``refresh()``; otherwise every call reads the
    adapter.
    """

    def __init__(
        self,
        catalog_adapter: CatalogAdapter,
        cache: bool = False,
        verbose: bool = False,
        logger: ContextLogger | logging.Logger | None = None,
    ) -> None:
        self.adapter = catalog_adapter
        self.cache = cache
        self.verbose = verbose
        self.logger = component_logger(self.__class__.__name__, logger)

        self._snapshot: tuple[str, ...] | None = None
        self._snapshot_lock = threading.Lock()

    def _identifiers(self) -> tuple[str, ...]:
        if not self.cache:
            return tuple(self.adapter.list_identifiers())

        snapshot = self._snapshot
        if snapshot is not None:
            return snapshot

        with self._snapshot_lock:
            if self._snapshot is None:
                self._snapshot = tuple(self.adapter.list_identifiers())
                if self.verbose:
                    self.logger.debug("Catalog snapshot built", count=len(self._snapshot))
            return self._snapshot

    def all(self) -> list[str]:
        """
        Get all timezone identifiers.

        Returns:
            Identifiers in adapter order (never re-sorted)
        """
        return list(self._identifiers())

    def exists(self, timezone: str) -> bool:
        """
        Check if timezone identifier exists (exact, case-sensitive).

        Args:
            timezone: Timezone identifier to check

        Returns:
            True if valid timezone
        """
        return timezone in self._identifiers()

    def sanitize(self, timezone: str) -> str | None:
        """
        Validate and sanitize timezone identifier.

        Surrounding whitespace is stripped; no other correction is attempted.

        Args:
            timezone: Timezone identifier to validate

        Returns:
            Sanitized timezone, or None if invalid
        """
        timezone = timezone.strip()
        return timezone if self.exists(timezone) else None

    def refresh(self) -> None:
        """Drop the cached snapshot; the next call re-reads the adapter."""
        with self._snapshot_lock:
            self._snapshot = None
