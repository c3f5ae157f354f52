"""Timezones service facade."""

import logging
from collections.abc import Callable
from datetime import datetime

from zonekit.adapters.base import CatalogAdapter
from zonekit.adapters.catalog.zoneinfo import ZoneInfoCatalogAdapter
from zonekit.core.catalog import TimezoneCatalog
from zonekit.core.common.exceptions import ConfigurationError
from zonekit.core.common.types import DEFAULT_EMPTY_LABEL, GroupedOptions, TimezoneOption
from zonekit.core.offsets import OffsetEngine, format_offset
from zonekit.core.options import OptionListBuilder
from zonekit.core.parser import get_city, get_label, get_region
from zonekit.core.regions import RegionIndex
from zonekit.core.search import TimezoneSearch
from zonekit.utils.logging import ContextLogger, component_logger


class Timezones:
    """
    Stateless timezone query and formatting service.

    Composes the catalog accessor, offset engine, region index, search and
    option-list builder over one injected catalog adapter.

    Example:
        >>> timezones = Timezones()
        >>> timezones.sanitize(" America/New_York ")
        'America/New_York'
        >>> timezones.get_offset_string("Asia/Kolkata")
        '+05:30'
        >>> timezones.get_region_options(include_empty=True)[0]
        TimezoneOption(value='', label='— Select —')
    """

    def __init__(
        self,
        catalog_adapter: CatalogAdapter | None = None,
        cache_catalog: bool = False,
        empty_label: str = DEFAULT_EMPTY_LABEL,
        clock: Callable[[], datetime] | None = None,
        verbose: bool = False,
        logger: ContextLogger | logging.Logger | None = None,
    ) -> None:
        """
        Initialize timezones service.

        Args:
            catalog_adapter: Timezone database adapter (default: ZoneInfoCatalogAdapter)
            cache_catalog: Read the identifier list once and reuse it
            empty_label: Default label for the leading empty option
            clock: Returns the evaluation instant for offsets (default: utc_now)
            verbose: Enable verbose logging (default: False)
            logger: Custom logger (uses default if None)

        Raises:
            ConfigurationError: If parameters are invalid
        """
        if catalog_adapter is None:
            catalog_adapter = ZoneInfoCatalogAdapter()
        if not isinstance(catalog_adapter, CatalogAdapter):
            raise ConfigurationError(
                f"catalog_adapter must be a CatalogAdapter, got {type(catalog_adapter).__name__}"
            )
        if clock is not None and not callable(clock):
            raise ConfigurationError("clock must be callable and return a timezone-aware datetime")
        if not isinstance(empty_label, str):
            raise ConfigurationError(
                f"empty_label must be a string, got {type(empty_label).__name__}"
            )

        self.verbose = verbose
        self.logger = component_logger(self.__class__.__name__, logger)

        self.catalog = TimezoneCatalog(
            catalog_adapter, cache=cache_catalog, verbose=verbose, logger=self.logger
        )
        self.offsets = OffsetEngine(self.catalog, clock=clock, logger=self.logger)
        self.regions = RegionIndex(self.catalog)
        self.searcher = TimezoneSearch(self.catalog)
        self.options = OptionListBuilder(
            self.catalog, self.offsets, self.regions, empty_label=empty_label
        )

    # Catalog

    def all(self) -> list[str]:
        """Get all timezone identifiers, in catalog order."""
        return self.catalog.all()

    def exists(self, timezone: str) -> bool:
        """Check if timezone identifier exists."""
        return self.catalog.exists(timezone)

    def sanitize(self, timezone: str) -> str | None:
        """Validate and sanitize timezone identifier (None if invalid)."""
        return self.catalog.sanitize(timezone)

    def refresh(self) -> None:
        """Drop the cached catalog snapshot, if any."""
        self.catalog.refresh()

    # Parsing

    @staticmethod
    def get_label(timezone: str) -> str:
        """Get formatted timezone label ("America/New York")."""
        return get_label(timezone)

    @staticmethod
    def get_region(timezone: str) -> str:
        """Get timezone region ("America")."""
        return get_region(timezone)

    @staticmethod
    def get_city(timezone: str) -> str:
        """Get timezone city/location ("New York")."""
        return get_city(timezone)

    # Offsets

    def get_offset(self, timezone: str) -> int | None:
        """Get current UTC offset in seconds (None if unavailable)."""
        return self.offsets.get_offset(timezone)

    def get_offset_string(self, timezone: str) -> str:
        """Get formatted UTC offset string ("" if unavailable)."""
        return self.offsets.get_offset_string(timezone)

    @staticmethod
    def format_offset(offset: int) -> str:
        """Format an offset in seconds as ±HH:MM."""
        return format_offset(offset)

    # Regions and search

    def get_regions(self) -> list[str]:
        """Get all available regions, sorted."""
        return self.regions.get_regions()

    def get_by_region(self, region: str) -> list[str]:
        """Get timezones by region, in catalog order."""
        return self.regions.get_by_region(region)

    def search(self, term: str, limit: int = 0) -> list[str]:
        """Search timezones by partial match (0 = unlimited)."""
        return self.searcher.search(term, limit)

    # Options

    def get_options(
        self,
        as_key_value: bool = False,
        include_empty: bool = False,
        empty_label: str | None = None,
    ) -> dict[str, str] | list[TimezoneOption]:
        """Get timezones formatted for select/dropdown options."""
        return self.options.get_options(as_key_value, include_empty, empty_label)

    def get_options_with_offset(
        self, include_empty: bool = False, empty_label: str | None = None
    ) -> list[TimezoneOption]:
        """Get timezones with UTC offset in label."""
        return self.options.get_options_with_offset(include_empty, empty_label)

    def get_grouped_options(self) -> GroupedOptions:
        """Get grouped timezone options (by region)."""
        return self.options.get_grouped_options()

    def get_grouped_options_with_offset(self) -> GroupedOptions:
        """Get grouped timezone options with UTC offset in labels."""
        return self.options.get_grouped_options_with_offset()

    def get_region_options(
        self, include_empty: bool = False, empty_label: str | None = None
    ) -> list[TimezoneOption]:
        """Get region options."""
        return self.options.get_region_options(include_empty, empty_label)
