"""Common test fixtures and utilities."""

from datetime import UTC, datetime

import pytest

from zonekit import InMemoryCatalogAdapter, Timezones

# Deliberately not alphabetical: catalog order must be preserved as-is.
SAMPLE_OFFSETS: dict[str, int | None] = {
    "UTC": 0,
    "America/New_York": -18000,
    "Europe/London": 0,
    "America/Argentina/Buenos_Aires": -10800,
    "Asia/Kolkata": 19800,
    "Europe/Paris": 3600,
    "Asia/Kathmandu": 20700,
    "America/St_Johns": -12600,
    "Antarctica/Troll": None,  # offset resolution fails
}

WINTER = datetime(2024, 1, 15, 12, 0, 0, tzinfo=UTC)
SUMMER = datetime(2024, 7, 15, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def sample_offsets():
    """Identifier -> offset mapping used by the in-memory catalog."""
    return dict(SAMPLE_OFFSETS)


@pytest.fixture
def memory_adapter(sample_offsets):
    """Create an in-memory catalog adapter with the sample catalog."""
    return InMemoryCatalogAdapter(sample_offsets)


@pytest.fixture
def timezones(memory_adapter):
    """Create a Timezones service over the sample catalog."""
    return Timezones(catalog_adapter=memory_adapter, clock=lambda: WINTER)


@pytest.fixture
def winter():
    """Instant in northern-hemisphere standard time."""
    return WINTER


@pytest.fixture
def summer():
    """Instant in northern-hemisphere daylight saving time."""
    return SUMMER
