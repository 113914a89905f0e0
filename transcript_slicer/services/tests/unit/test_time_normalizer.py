"""Unit tests for time expression parsing.

Run with: uv run pytest transcript_slicer/services/tests/unit/test_time_normalizer.py -v
"""

import pytest

from transcript_slicer.services.segmentation import (
    format_timestamp,
    normalize_time,
    parse_time,
)


@pytest.mark.unit
class TestNormalizeTime:
    """Test normalize_time conversions."""

    def test_minutes_seconds(self):
        assert normalize_time("1:30") == 90

    def test_hours_minutes_seconds(self):
        assert normalize_time("1:02:03") == 3723

    def test_number_passes_through(self):
        assert normalize_time(45) == 45
        assert normalize_time(12.5) == 12.5

    def test_negative_number_passes_through(self):
        """No bounds check on numeric input."""
        assert normalize_time(-10) == -10

    def test_bogus_string_is_zero(self):
        assert normalize_time("bogus") == 0

    def test_single_component_string_is_zero(self):
        """A bare number in a string is not a clock expression."""
        assert normalize_time("45") == 0

    def test_too_many_components_is_zero(self):
        assert normalize_time("1:2:3:4") == 0

    def test_non_numeric_component_is_zero(self):
        assert normalize_time("aa:30") == 0

    def test_empty_string_is_zero(self):
        assert normalize_time("") == 0

    def test_fractional_seconds(self):
        assert normalize_time("0:01.5") == 1.5

    def test_whitespace_around_components(self):
        assert normalize_time(" 2 : 05 ") == 125

    def test_padded_components(self):
        assert normalize_time("00:30:00") == 1800


@pytest.mark.unit
class TestParseTime:
    """Test the strict parser that reports malformed input."""

    def test_valid_clock_string(self):
        assert parse_time("30:00") == 1800

    def test_malformed_returns_none(self):
        assert parse_time("bogus") is None
        assert parse_time("1:2:3:4") is None

    def test_non_finite_returns_none(self):
        assert parse_time("inf:00") is None
        assert parse_time("nan:00") is None

    def test_bool_is_not_a_number(self):
        assert parse_time(True) is None

    def test_zero_is_distinguishable_from_malformed(self):
        assert parse_time("0:00") == 0
        assert parse_time("0:00") is not None


@pytest.mark.unit
class TestFormatTimestamp:
    """Test timestamp formatting."""

    def test_under_a_minute(self):
        assert format_timestamp(5) == "0:05"

    def test_minutes(self):
        assert format_timestamp(90) == "1:30"

    def test_hours(self):
        assert format_timestamp(3723) == "1:02:03"

    def test_fraction_is_floored(self):
        assert format_timestamp(59.9) == "0:59"
