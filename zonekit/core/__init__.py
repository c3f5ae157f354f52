"""Core timezone query components."""

from zonekit.core.catalog import TimezoneCatalog
from zonekit.core.common import (
    DEFAULT_EMPTY_LABEL,
    CatalogError,
    ConfigurationError,
    GroupedOptions,
    InvalidTimezoneError,
    OffsetResolutionError,
    OptionData,
    TimezoneOption,
    ZonekitError,
)
from zonekit.core.offsets import OffsetEngine, format_offset
from zonekit.core.options import OptionListBuilder
from zonekit.core.parser import get_city, get_label, get_region
from zonekit.core.regions import RegionIndex
from zonekit.core.search import TimezoneSearch
from zonekit.core.timezones import Timezones

__all__ = [
    # Common Types
    "DEFAULT_EMPTY_LABEL",
    "GroupedOptions",
    "OptionData",
    "TimezoneOption",
    # Exceptions
    "ZonekitError",
    "ConfigurationError",
    "InvalidTimezoneError",
    "CatalogError",
    "OffsetResolutionError",
    # Parsing
    "get_region",
    "get_city",
    "get_label",
    # Components
    "TimezoneCatalog",
    "OffsetEngine",
    "format_offset",
    "RegionIndex",
    "TimezoneSearch",
    "OptionListBuilder",
    # Service
    "Timezones",
]
