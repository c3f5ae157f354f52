"""zonekit Quick Start Example."""

import json

from zonekit import InMemoryCatalogAdapter, Timezones
from zonekit.utils import setup_logger


def main():
    """Main function to demonstrate zonekit usage."""
    print("=== zonekit Quick Start ===\n")

    # 1. Create service over the host tz database
    print("1. Creating service...")
    timezones = Timezones(cache_catalog=True)
    print(f"   ✓ {len(timezones.all())} identifiers, {len(timezones.get_regions())} regions\n")

    # 2. Validate user input
    print("2. Validating input...")
    for raw in [" America/New_York ", "america/new_york", "Mars/Olympus_Mons"]:
        print(f"   {raw!r:24} -> {timezones.sanitize(raw)!r}")
    print()

    # 3. Offsets as of now
    print("3. Current offsets...")
    for timezone in ["America/New_York", "Asia/Kolkata", "Asia/Kathmandu", "UTC"]:
        print(f"   {timezone:20} {timezones.get_offset_string(timezone)}")
    print()

    # 4. Search
    print("4. Searching 'america' (limit 5)...")
    for timezone in timezones.search("america", limit=5):
        print(f"   - {timezones.get_label(timezone)}")
    print()

    # 5. Dropdown options
    print("5. Grouped options with offsets (Europe, first 3)...")
    grouped = timezones.get_grouped_options_with_offset()
    for option in grouped["Europe"][:3]:
        print(f"   <option value={option.value!r}>{option.label}</option>")
    print()

    # 6. Deterministic catalog (tests, snapshots)
    print("6. Fixed catalog as JSON...")
    fixed = Timezones(
        catalog_adapter=InMemoryCatalogAdapter({"UTC": 0, "Asia/Kolkata": 19800}),
        logger=setup_logger("zonekit.example"),
    )
    options = fixed.get_options_with_offset(include_empty=True)
    print(json.dumps([option.to_dict() for option in options], ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
