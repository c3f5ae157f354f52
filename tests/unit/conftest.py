"""Shared fixtures for unit tests."""

from unittest.mock import Mock

import pytest

from zonekit.core.catalog import TimezoneCatalog
from zonekit.core.offsets import OffsetEngine
from zonekit.core.regions import RegionIndex
from zonekit.utils.logging import ContextLogger


@pytest.fixture
def catalog(memory_adapter):
    """Create an uncached catalog over the sample adapter."""
    return TimezoneCatalog(memory_adapter)


@pytest.fixture
def mock_logger():
    """Create a mock context logger that keeps itself when given context."""
    logger = Mock(spec=ContextLogger)
    logger.warning = Mock()
    logger.debug = Mock()
    logger.with_context = Mock(return_value=logger)
    return logger


@pytest.fixture
def offsets(catalog):
    """Create an offset engine over the sample catalog."""
    return OffsetEngine(catalog)


@pytest.fixture
def regions(catalog):
    """Create a region index over the sample catalog."""
    return RegionIndex(catalog)
