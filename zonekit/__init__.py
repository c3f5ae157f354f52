"""
zonekit - IANA timezone catalog queries and dropdown options

Usage:
    from zonekit import Timezones

    timezones = Timezones()  # zoneinfo-backed catalog

    # Lookups
    timezones.exists("America/New_York")        # True
    timezones.sanitize(" Europe/Paris ")         # "Europe/Paris"
    timezones.sanitize("Mars/Olympus_Mons")      # None

    # Parsing
    timezones.get_region("America/New_York")     # "America"
    timezones.get_city("America/New_York")       # "New York"
    timezones.get_label("America/New_York")      # "America/New York"

    # Offsets (as of now)
    timezones.get_offset("Asia/Kolkata")         # 19800
    timezones.get_offset_string("Asia/Kolkata")  # "+05:30"

    # Regions and search
    timezones.get_regions()                      # ["Africa", "America", ...]
    timezones.get_by_region("Europe")
    timezones.search("york", limit=5)

    # Dropdown options
    timezones.get_options(as_key_value=True, include_empty=True)
    timezones.get_options_with_offset()          # "(UTC-05:00) America/New York"
    timezones.get_grouped_options_with_offset()  # {"America": [...], ...}
    timezones.get_region_options(include_empty=True)

    # Deterministic catalog for tests
    from zonekit import InMemoryCatalogAdapter

    timezones = Timezones(
        catalog_adapter=InMemoryCatalogAdapter({"UTC": 0, "Asia/Kolkata": 19800})
    )
"""

from zonekit.core import (
    DEFAULT_EMPTY_LABEL,
    CatalogError,
    ConfigurationError,
    InvalidTimezoneError,
    OffsetResolutionError,
    TimezoneOption,
    Timezones,
    ZonekitError,
    format_offset,
)
from zonekit.adapters import CatalogAdapter
from zonekit.adapters.catalog import InMemoryCatalogAdapter, ZoneInfoCatalogAdapter

__all__ = [
    # Core
    "Timezones",
    "TimezoneOption",
    "DEFAULT_EMPTY_LABEL",
    "format_offset",
    # Exceptions
    "ZonekitError",
    "ConfigurationError",
    "InvalidTimezoneError",
    "CatalogError",
    "OffsetResolutionError",
    # Catalog Adapters
    "CatalogAdapter",
    "InMemoryCatalogAdapter",
    "ZoneInfoCatalogAdapter",
]
