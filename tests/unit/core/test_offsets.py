"""Unit tests for offset resolution and formatting."""

import logging
from datetime import UTC, datetime
from unittest.mock import Mock
from zoneinfo import ZoneInfoNotFoundError

import pytest

from zonekit.adapters.base import CatalogAdapter
from zonekit.core.catalog import TimezoneCatalog
from zonekit.core.common.exceptions import CatalogError, OffsetResolutionError
from zonekit.core.offsets import OffsetEngine, format_offset


class TestFormatOffset:
    """Test format_offset."""

    @pytest.mark.parametrize(
        "offset, expected",
        [
            (-18000, "-05:00"),
            (19800, "+05:30"),
            (0, "+00:00"),
            (20700, "+05:45"),
            (-12600, "-03:30"),
            (50400, "+14:00"),
            (-43200, "-12:00"),
        ],
    )
    def test_format(self, offset, expected):
        assert format_offset(offset) == expected

    def test_leftover_seconds_are_truncated(self):
        """LMT-style offsets drop the seconds part."""
        assert format_offset(-17762) == "-04:56"
        assert format_offset(17762) == "+04:56"

    def test_negative_sub_hour_offset_keeps_sign(self):
        assert format_offset(-1800) == "-00:30"


class TestGetOffset:
    """Test OffsetEngine.get_offset."""

    def test_known_identifier(self, offsets):
        assert offsets.get_offset("Asia/Kolkata") == 19800
        assert offsets.get_offset("America/New_York") == -18000

    def test_zero_offset_is_not_none(self, offsets):
        assert offsets.get_offset("UTC") == 0
        assert offsets.get_offset("UTC") is not None

    def test_unknown_identifier_returns_none(self, offsets):
        assert offsets.get_offset("Invalid/Zone") is None

    def test_unknown_identifier_skips_adapter(self):
        adapter = Mock(spec=CatalogAdapter)
        adapter.list_identifiers = Mock(return_value=["UTC"])
        engine = OffsetEngine(TimezoneCatalog(adapter))

        assert engine.get_offset("Invalid/Zone") is None
        adapter.resolve_offset.assert_not_called()

    def test_skip_validation_for_listed_identifiers(self):
        adapter = Mock(spec=CatalogAdapter)
        adapter.list_identifiers = Mock(return_value=["UTC"])
        adapter.resolve_offset = Mock(return_value=0)
        engine = OffsetEngine(TimezoneCatalog(adapter))

        assert engine.get_offset("UTC", validate=False) == 0
        adapter.list_identifiers.assert_not_called()

    def test_resolution_failure_returns_none(self, offsets):
        assert offsets.get_offset("Antarctica/Troll") is None

    def test_resolution_failure_logs_warning(self, catalog, mock_logger):
        engine = OffsetEngine(catalog, logger=mock_logger)

        engine.get_offset("Antarctica/Troll")

        mock_logger.warning.assert_called_once()
        args, kwargs = mock_logger.warning.call_args
        assert args == ("Offset resolution failed",)
        assert kwargs["timezone"] == "Antarctica/Troll"
        assert isinstance(kwargs["error"], OffsetResolutionError)

    def test_resolution_failure_reaches_logging(self, catalog, caplog):
        engine = OffsetEngine(catalog)

        with caplog.at_level(logging.WARNING, logger="zonekit"):
            engine.get_offset("Antarctica/Troll")

        assert any("Offset resolution failed" in r.getMessage() for r in caplog.records)
        contexts = [getattr(record, "context", "") for record in caplog.records]
        assert any("timezone=Antarctica/Troll" in context for context in contexts)

    @pytest.mark.parametrize(
        "error",
        [
            CatalogError("database unavailable"),
            ZoneInfoNotFoundError("No time zone found"),
            OSError("permission denied"),
            ValueError("bad key"),
        ],
    )
    def test_platform_failures_are_downgraded(self, error):
        adapter = Mock(spec=CatalogAdapter)
        adapter.list_identifiers = Mock(return_value=["Europe/Paris"])
        adapter.resolve_offset = Mock(side_effect=error)
        engine = OffsetEngine(TimezoneCatalog(adapter))

        assert engine.get_offset("Europe/Paris") is None

    def test_unreadable_catalog_returns_none(self):
        adapter = Mock(spec=CatalogAdapter)
        adapter.list_identifiers = Mock(side_effect=CatalogError("tz database unavailable"))
        engine = OffsetEngine(TimezoneCatalog(adapter))

        assert engine.get_offset("Europe/Paris") is None
        adapter.resolve_offset.assert_not_called()

    def test_unreadable_catalog_logs_warning(self, mock_logger):
        adapter = Mock(spec=CatalogAdapter)
        adapter.list_identifiers = Mock(side_effect=CatalogError("tz database unavailable"))
        engine = OffsetEngine(TimezoneCatalog(adapter), logger=mock_logger)

        engine.get_offset("Europe/Paris")

        mock_logger.warning.assert_called_once()
        _, kwargs = mock_logger.warning.call_args
        assert kwargs["timezone"] == "Europe/Paris"
        assert isinstance(kwargs["error"], CatalogError)

    def test_programming_errors_propagate(self):
        adapter = Mock(spec=CatalogAdapter)
        adapter.list_identifiers = Mock(return_value=["Europe/Paris"])
        adapter.resolve_offset = Mock(side_effect=RuntimeError("bug"))
        engine = OffsetEngine(TimezoneCatalog(adapter))

        with pytest.raises(RuntimeError):
            engine.get_offset("Europe/Paris")

    def test_clock_supplies_instant(self):
        instant = datetime(2024, 7, 1, 0, 0, 0, tzinfo=UTC)
        adapter = Mock(spec=CatalogAdapter)
        adapter.list_identifiers = Mock(return_value=["Europe/Paris"])
        adapter.resolve_offset = Mock(return_value=7200)
        engine = OffsetEngine(TimezoneCatalog(adapter), clock=lambda: instant)

        assert engine.get_offset("Europe/Paris") == 7200
        adapter.resolve_offset.assert_called_once_with("Europe/Paris", instant)

    def test_clock_is_read_on_every_call(self):
        clock = Mock(return_value=datetime(2024, 1, 1, tzinfo=UTC))
        adapter = Mock(spec=CatalogAdapter)
        adapter.list_identifiers = Mock(return_value=["UTC"])
        adapter.resolve_offset = Mock(return_value=0)
        engine = OffsetEngine(TimezoneCatalog(adapter), clock=clock)

        engine.get_offset("UTC")
        engine.get_offset("UTC")

        assert clock.call_count == 2


class TestGetOffsetString:
    """Test OffsetEngine.get_offset_string."""

    def test_negative_offset(self, offsets):
        assert offsets.get_offset_string("America/New_York") == "-05:00"

    def test_half_hour_offset(self, offsets):
        assert offsets.get_offset_string("Asia/Kolkata") == "+05:30"

    def test_zero_offset(self, offsets):
        assert offsets.get_offset_string("UTC") == "+00:00"

    def test_invalid_identifier_is_empty(self, offsets):
        assert offsets.get_offset_string("Invalid/Zone") == ""

    def test_unresolvable_identifier_is_empty(self, offsets):
        assert offsets.get_offset_string("Antarctica/Troll") == ""

    def test_unreadable_catalog_is_empty(self):
        adapter = Mock(spec=CatalogAdapter)
        adapter.list_identifiers = Mock(side_effect=OSError("tz directory missing"))
        engine = OffsetEngine(TimezoneCatalog(adapter))

        assert engine.get_offset_string("Europe/Paris") == ""
