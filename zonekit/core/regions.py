"""Region index derived from the catalog."""

from zonekit.core.catalog import TimezoneCatalog
from zonekit.core.parser import get_region


class RegionIndex:
    """Distinct regions and region-filtered identifier subsets."""

    def __init__(self, catalog: TimezoneCatalog) -> None:
        self.catalog = catalog

    def get_regions(self) -> list[str]:
        """
        Get all available regions.

        Returns:
            Unique region names, sorted ascending
        """
        return sorted({get_region(timezone) for timezone in self.catalog.all()})

    def get_by_region(self, region: str) -> list[str]:
        """
        Get timezones by region (exact, case-sensitive match).

        Args:
            region: Region name (e.g., "America", "Europe")

        Returns:
            Identifiers in the region, in catalog order; [] for unknown regions
        """
        return [timezone for timezone in self.catalog.all() if get_region(timezone) == region]
