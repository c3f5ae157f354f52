"""Common type definitions for zonekit."""

from dataclasses import dataclass
from typing import TypedDict

DEFAULT_EMPTY_LABEL = "— Select —"


class OptionData(TypedDict):
    """Plain-dict shape of an option entry (JSON/template friendly)."""

    value: str
    label: str


@dataclass(frozen=True)
class TimezoneOption:
    """Single dropdown entry: submitted value and displayed label."""

    value: str
    label: str

    def to_dict(self) -> OptionData:
        return {"value": self.value, "label": self.label}


# Region -> options within that region, insertion ordered
GroupedOptions = dict[str, list[TimezoneOption]]
