"""Common components shared across core modules."""

from zonekit.core.common.exceptions import (
    CatalogError,
    ConfigurationError,
    InvalidTimezoneError,
    OffsetResolutionError,
    ZonekitError,
)
from zonekit.core.common.types import (
    DEFAULT_EMPTY_LABEL,
    GroupedOptions,
    OptionData,
    TimezoneOption,
)

__all__ = [
    # Types
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
]
