"""Catalog adapter backed by the standard library zoneinfo module."""

import os
from datetime import datetime
from importlib import resources
from zoneinfo import TZPATH, available_timezones

from zonekit.adapters.base import CatalogAdapter
from zonekit.core.common.exceptions import (
    CatalogError,
    InvalidTimezoneError,
    OffsetResolutionError,
)
from zonekit.utils.time import get_timezone

# Table of one canonical zone per country region; aliases such as
# Asia/Calcutta or US/Eastern are links and never appear in it.
ZONE_TABLE = "zone.tab"

# Region groups used when no zone table can be found
CANONICAL_REGIONS = frozenset(
    {
        "Africa",
        "America",
        "Antarctica",
        "Arctic",
        "Asia",
        "Atlantic",
        "Australia",
        "Europe",
        "Indian",
        "Pacific",
    }
)


def is_canonical(identifier: str) -> bool:
    """Return True for UTC and identifiers under a canonical region group."""
    if identifier == "UTC":
        return True
    region, sep, _ = identifier.partition("/")
    return bool(sep) and region in CANONICAL_REGIONS


def parse_zone_table(text: str) -> frozenset[str]:
    """
    Extract zone identifiers from ``zone.tab`` content.

    Each non-comment line is ``code<TAB>coordinates<TAB>identifier[<TAB>comment]``.
    """
    identifiers = set()
    for line in text.splitlines():
        if not line or line.startswith("#"):
            continue
        fields = line.split("\t")
        if len(fields) >= 3:
            identifiers.add(fields[2].strip())
    return frozenset(identifiers)


def read_zone_table() -> str | None:
    """
    Read ``zone.tab`` from the same places zoneinfo loads zones from.

    The host ``TZPATH`` is searched first, then the ``tzdata`` package.

    Returns:
        File content, or None if no zone table is installed
    """
    for root in TZPATH:
        path = os.path.join(root, ZONE_TABLE)
        if os.path.isfile(path):
            with open(path, encoding="utf-8") as f:
                return f.read()

    try:
        return resources.files("tzdata.zoneinfo").joinpath(ZONE_TABLE).read_text(encoding="utf-8")
    except (ModuleNotFoundError, FileNotFoundError):
        return None


class ZoneInfoCatalogAdapter(CatalogAdapter):
    """
    Timezone database adapter using ``zoneinfo``.

    Zone data comes from the host tz database, or from the ``tzdata``
    package where the host has none (Windows, slim containers).

    By default only canonical zones are listed: the identifiers named in
    ``zone.tab`` plus ``UTC``. Backward-compatibility links (Asia/Calcutta,
    Europe/Kiev, US/Eastern, Etc/GMT+5, ...) are left out.

    ``available_timezones()`` walks the whole tz directory and returns an
    unordered set, so the sorted listing is read once and reused until
    ``clear_cache()``.

    Example:
        >>> adapter = ZoneInfoCatalogAdapter()
        >>> "America/New_York" in adapter.list_identifiers()
        True
        >>> "Asia/Calcutta" in adapter.list_identifiers()
        False
    """

    def __init__(self, include_legacy: bool = False) -> None:
        """
        Initialize zoneinfo catalog adapter.

        Args:
            include_legacy: Also list backward-compatibility identifiers
                (Etc/GMT+5, US/Eastern, Asia/Calcutta, ...)
        """
        self.include_legacy = include_legacy
        self._identifiers: tuple[str, ...] | None = None

    def _load(self) -> tuple[str, ...]:
        try:
            keys = available_timezones()
            table = None if self.include_legacy else read_zone_table()
        except OSError as e:
            raise CatalogError(f"Unable to read timezone database: {e}") from e

        if not self.include_legacy:
            if table is not None:
                canonical = parse_zone_table(table) | {"UTC"}
                keys = keys & canonical
            else:
                keys = {key for key in keys if is_canonical(key)}
        return tuple(sorted(keys))

    def list_identifiers(self) -> list[str]:
        """List identifiers, sorted."""
        identifiers = self._identifiers
        if identifiers is None:
            identifiers = self._identifiers = self._load()
        return list(identifiers)

    def clear_cache(self) -> None:
        """Drop the cached listing; the next call re-reads the tz database."""
        self._identifiers = None

    def resolve_offset(self, identifier: str, instant: datetime) -> int:
        """Resolve offset via ZoneInfo rules."""
        try:
            tz = get_timezone(identifier)
        except InvalidTimezoneError as e:
            raise OffsetResolutionError(f"Cannot resolve offset for '{identifier}'") from e

        offset = instant.astimezone(tz).utcoffset()
        if offset is None:
            raise OffsetResolutionError(f"Timezone '{identifier}' has no UTC offset")
        return int(offset.total_seconds())
