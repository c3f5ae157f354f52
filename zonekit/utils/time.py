"""Time utilities for zonekit."""

from datetime import datetime
from zoneinfo import ZoneInfo

from zonekit.core.common.exceptions import InvalidTimezoneError


def utc_now() -> datetime:
    """
    Get current UTC time (timezone-aware).

    Returns:
        Current UTC datetime
    """
    return datetime.now(ZoneInfo("UTC"))


def get_timezone(tz_name: str) -> ZoneInfo:
    """
    Get timezone object from IANA timezone name.

    Args:
        tz_name: IANA timezone name (e.g., "Asia/Seoul", "America/New_York")

    Returns:
        Timezone object

    Raises:
        InvalidTimezoneError: Invalid timezone name
    """
    try:
        return ZoneInfo(tz_name)
    except Exception as e:
        raise InvalidTimezoneError(f"Invalid timezone '{tz_name}': {e}") from e
