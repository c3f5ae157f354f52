"""Custom exceptions for zonekit.

Public query operations never raise these for bad input: unknown
identifiers and unresolvable offsets are reported as ``None``/empty
results. The hierarchy exists for adapter authors and for
configuration mistakes.
"""


class ZonekitError(Exception):
    """Base exception for zonekit errors."""

    pass


class ConfigurationError(ZonekitError, ValueError):
    """
    Invalid constructor argument.

    Common causes:
        - catalog_adapter is not a CatalogAdapter instance
        - clock is not callable
        - empty_label is not a string

    Solution: fix the argument passed to Timezones(...) or the component.
    """

    pass


class InvalidTimezoneError(ZonekitError, ValueError):
    """
    Timezone name could not be loaded.

    Common causes:
        - Typo in the identifier ("America/NewYork")
        - tz database missing on the host (install the ``tzdata`` package)
    """

    pass


class CatalogError(ZonekitError):
    """
    Catalog adapter could not serve a request.

    Note: adapters raise this (or a subclass); the offset engine turns it
    into a "no value" result.
    """

    pass


class OffsetResolutionError(CatalogError):
    """
    UTC offset could not be resolved for an identifier.

    Common causes:
        - Corrupt or unavailable zone data for the identifier
        - Identifier unknown to the adapter's tz database
    """

    pass
