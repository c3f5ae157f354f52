"""Option-list assembly for select/dropdown UIs."""

from zonekit.core.catalog import TimezoneCatalog
from zonekit.core.common.types import DEFAULT_EMPTY_LABEL, GroupedOptions, TimezoneOption
from zonekit.core.offsets import OffsetEngine
from zonekit.core.parser import get_city, get_label, get_region
from zonekit.core.regions import RegionIndex


def _with_offset(offset: str, label: str) -> str:
    """Prefix label with "(UTC±HH:MM) " when an offset is available."""
    return f"(UTC{offset}) {label}" if offset else label


class OptionListBuilder:
    """
    Builds presentation structures from the catalog.

    Every list walks the catalog in its own order; only region options are
    sorted. Options are produced fresh on each call.
    """

    def __init__(
        self,
        catalog: TimezoneCatalog,
        offsets: OffsetEngine,
        regions: RegionIndex,
        empty_label: str = DEFAULT_EMPTY_LABEL,
    ) -> None:
        self.catalog = catalog
        self.offsets = offsets
        self.regions = regions
        self.empty_label = empty_label

    def _empty_option(self, empty_label: str | None) -> TimezoneOption:
        label = self.empty_label if empty_label is None else empty_label
        return TimezoneOption(value="", label=label)

    def get_options(
        self,
        as_key_value: bool = False,
        include_empty: bool = False,
        empty_label: str | None = None,
    ) -> dict[str, str] | list[TimezoneOption]:
        """
        Get timezones formatted for select/dropdown options.

        Args:
            as_key_value: If True, return {timezone: label}; otherwise a list
                of TimezoneOption(value, label)
            include_empty: Prepend an empty option (value "")
            empty_label: Label for the empty option (default: builder's)

        Returns:
            Options in catalog order, labels with underscores as spaces
        """
        options: list[TimezoneOption] = []
        if include_empty:
            options.append(self._empty_option(empty_label))

        options.extend(
            TimezoneOption(value=timezone, label=get_label(timezone))
            for timezone in self.catalog.all()
        )

        if as_key_value:
            return {option.value: option.label for option in options}
        return options

    def get_options_with_offset(
        self,
        include_empty: bool = False,
        empty_label: str | None = None,
    ) -> list[TimezoneOption]:
        """
        Get timezones with UTC offset in label, e.g. "(UTC+05:30) Asia/Kolkata".

        Identifiers whose offset cannot be resolved keep the plain label.

        Args:
            include_empty: Prepend an empty option (value "")
            empty_label: Label for the empty option (default: builder's)

        Returns:
            Options in catalog order
        """
        options: list[TimezoneOption] = []
        if include_empty:
            options.append(self._empty_option(empty_label))

        for timezone in self.catalog.all():
            offset = self.offsets.get_offset_string(timezone, validate=False)
            options.append(
                TimezoneOption(value=timezone, label=_with_offset(offset, get_label(timezone)))
            )
        return options

    def get_grouped_options(self) -> GroupedOptions:
        """
        Get timezone options grouped by region, labelled by city.

        Returns:
            {region: [TimezoneOption]}, groups in first-seen catalog order
        """
        grouped: GroupedOptions = {}
        for timezone in self.catalog.all():
            grouped.setdefault(get_region(timezone), []).append(
                TimezoneOption(value=timezone, label=get_city(timezone))
            )
        return grouped

    def get_grouped_options_with_offset(self) -> GroupedOptions:
        """
        Get grouped timezone options with UTC offset in city labels.

        Returns:
            {region: [TimezoneOption]}, groups in first-seen catalog order
        """
        grouped: GroupedOptions = {}
        for timezone in self.catalog.all():
            offset = self.offsets.get_offset_string(timezone, validate=False)
            grouped.setdefault(get_region(timezone), []).append(
                TimezoneOption(value=timezone, label=_with_offset(offset, get_city(timezone)))
            )
        return grouped

    def get_region_options(
        self,
        include_empty: bool = False,
        empty_label: str | None = None,
    ) -> list[TimezoneOption]:
        """
        Get region options (value and label are both the region name).

        Args:
            include_empty: Prepend an empty option (value "")
            empty_label: Label for the empty option (default: builder's)

        Returns:
            Options for sorted regions
        """
        options: list[TimezoneOption] = []
        if include_empty:
            options.append(self._empty_option(empty_label))

        options.extend(
            TimezoneOption(value=region, label=region) for region in self.regions.get_regions()
        )
        return options
