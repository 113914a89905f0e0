"""Unit tests for the segment filter pipeline.

Tests for filters.py - ordered, composable selection stages

Run with: uv run pytest transcript_slicer/services/tests/unit/test_segment_filters.py -v
"""

import logging

import pytest

from transcript_slicer.services.segmentation import (
    FILTER_STAGES,
    CaptionSegment,
    SelectionCriteria,
    filter_segments,
    total_duration,
)
from transcript_slicer.services.tests.fakes import make_segments


def starts(segments: list[CaptionSegment]) -> list[float]:
    return [seg.start for seg in segments]


@pytest.mark.unit
class TestTotalDuration:
    """Test total_duration helper."""

    def test_empty_is_zero(self):
        assert total_duration([]) == 0

    def test_uses_latest_end_not_last_segment(self):
        segments = [
            CaptionSegment("long", 0.0, 50.0),
            CaptionSegment("short", 10.0, 5.0),
        ]
        assert total_duration(segments) == 50.0

    def test_evenly_spaced(self, ten_minute_segments):
        assert total_duration(ten_minute_segments) == 600.0


@pytest.mark.unit
class TestFilterIdentityAndEmpty:
    """Edge cases with no criteria or no input."""

    def test_no_criteria_returns_all(self, ten_minute_segments):
        result = filter_segments(ten_minute_segments, SelectionCriteria())
        assert result == ten_minute_segments

    def test_no_criteria_returns_new_list(self, ten_minute_segments):
        result = filter_segments(ten_minute_segments, SelectionCriteria())
        assert result is not ten_minute_segments

    def test_empty_input_returns_empty(self):
        criteria = SelectionCriteria(
            start_time="1:00", end_time="2:00", last_minutes=5, first_minutes=1,
            start_index=0, end_index=3, max_segments=2,
        )
        assert filter_segments([], criteria) == []

    def test_input_is_not_mutated(self, ten_minute_segments):
        original = list(ten_minute_segments)
        filter_segments(ten_minute_segments, SelectionCriteria(max_segments=2, last_minutes=3))
        assert ten_minute_segments == original


@pytest.mark.unit
class TestAbsoluteWindow:
    """Test startTime/endTime filtering."""

    def test_window_is_inclusive_on_both_ends(self, ten_minute_segments):
        result = filter_segments(
            ten_minute_segments, SelectionCriteria(start_time=120, end_time=240)
        )
        assert starts(result) == [120, 180, 240]

    def test_clock_strings(self, ten_minute_segments):
        result = filter_segments(
            ten_minute_segments, SelectionCriteria(start_time="2:00", end_time="0:04:00")
        )
        assert starts(result) == [120, 180, 240]

    def test_missing_end_defaults_to_total_duration(self, ten_minute_segments):
        result = filter_segments(ten_minute_segments, SelectionCriteria(start_time=420))
        assert starts(result) == [420, 480, 540]

    def test_missing_start_defaults_to_zero(self, ten_minute_segments):
        result = filter_segments(ten_minute_segments, SelectionCriteria(end_time=60))
        assert starts(result) == [0, 60]

    def test_inclusion_decided_by_start_only(self):
        """A segment running past end_time is kept whole, not clipped."""
        segments = [
            CaptionSegment("a", 0.0, 100.0),
            CaptionSegment("b", 50.0, 100.0),
            CaptionSegment("c", 101.0, 1.0),
        ]
        result = filter_segments(segments, SelectionCriteria(start_time=10, end_time=100))
        assert result == [segments[1]]
        assert result[0].duration == 100.0

    def test_inverted_bounds_yield_empty(self, ten_minute_segments):
        result = filter_segments(
            ten_minute_segments, SelectionCriteria(start_time=400, end_time=100)
        )
        assert result == []

    def test_malformed_start_is_treated_as_zero(self, ten_minute_segments, caplog):
        with caplog.at_level(logging.WARNING):
            result = filter_segments(
                ten_minute_segments, SelectionCriteria(start_time="bogus", end_time="1:00")
            )

        assert starts(result) == [0, 60]
        assert "bogus" in caplog.text

    def test_window_beyond_content_yields_empty(self, ten_minute_segments):
        result = filter_segments(ten_minute_segments, SelectionCriteria(start_time=9000))
        assert result == []


@pytest.mark.unit
class TestRelativeWindows:
    """Test lastMinutes / firstMinutes filtering."""

    def test_last_three_minutes(self, ten_minute_segments):
        result = filter_segments(ten_minute_segments, SelectionCriteria(last_minutes=3))
        assert starts(result) == [420, 480, 540]

    def test_last_minutes_longer_than_video_admits_all(self, ten_minute_segments):
        """Negative lower bound keeps every segment."""
        result = filter_segments(ten_minute_segments, SelectionCriteria(last_minutes=100))
        assert result == ten_minute_segments

    def test_last_zero_minutes_is_applied(self, ten_minute_segments):
        """Zero is a supplied value, not an omitted one."""
        result = filter_segments(ten_minute_segments, SelectionCriteria(last_minutes=0))
        assert result == []

    def test_first_two_minutes(self, ten_minute_segments):
        result = filter_segments(ten_minute_segments, SelectionCriteria(first_minutes=2))
        assert starts(result) == [0, 60, 120]

    def test_fractional_minutes(self, ten_minute_segments):
        result = filter_segments(ten_minute_segments, SelectionCriteria(first_minutes=1.5))
        assert starts(result) == [0, 60]

    def test_last_minutes_narrows_absolute_window(self, ten_minute_segments):
        """lastMinutes is measured against the full video but applied to the window."""
        criteria = SelectionCriteria(start_time=0, end_time="5:00", last_minutes=6)
        result = filter_segments(ten_minute_segments, criteria)
        assert starts(result) == [240, 300]

    def test_first_and_last_minutes_intersect(self, ten_minute_segments):
        criteria = SelectionCriteria(last_minutes=5, first_minutes=7)
        result = filter_segments(ten_minute_segments, criteria)
        assert starts(result) == [300, 360, 420]

    def test_disjoint_first_and_last_yield_empty(self, ten_minute_segments):
        criteria = SelectionCriteria(last_minutes=1, first_minutes=1)
        assert filter_segments(ten_minute_segments, criteria) == []


@pytest.mark.unit
class TestIndexWindow:
    """Test startIndex/endIndex slicing."""

    def test_end_index_is_inclusive(self, ten_minute_segments):
        result = filter_segments(
            ten_minute_segments, SelectionCriteria(start_index=2, end_index=4)
        )
        assert starts(result) == [120, 180, 240]

    def test_start_index_only(self, ten_minute_segments):
        result = filter_segments(ten_minute_segments, SelectionCriteria(start_index=8))
        assert starts(result) == [480, 540]

    def test_end_index_only(self, ten_minute_segments):
        result = filter_segments(ten_minute_segments, SelectionCriteria(end_index=1))
        assert starts(result) == [0, 60]

    def test_start_index_past_end_yields_empty(self, ten_minute_segments):
        result = filter_segments(ten_minute_segments, SelectionCriteria(start_index=50))
        assert result == []

    def test_end_index_past_end_is_clamped(self, ten_minute_segments):
        result = filter_segments(
            ten_minute_segments, SelectionCriteria(start_index=7, end_index=500)
        )
        assert starts(result) == [420, 480, 540]

    def test_inverted_indexes_yield_empty(self, ten_minute_segments):
        result = filter_segments(
            ten_minute_segments, SelectionCriteria(start_index=5, end_index=2)
        )
        assert result == []

    def test_index_applies_to_time_narrowed_set(self, ten_minute_segments):
        """Index 1 means the second segment of the window, not of the video."""
        criteria = SelectionCriteria(start_time=120, start_index=1, end_index=2)
        result = filter_segments(ten_minute_segments, criteria)
        assert starts(result) == [180, 240]


@pytest.mark.unit
class TestMaxSegments:
    """Test the final count cap."""

    @pytest.mark.parametrize("limit", [0, 1, 3, 10, 25])
    def test_returns_prefix(self, ten_minute_segments, limit):
        result = filter_segments(ten_minute_segments, SelectionCriteria(max_segments=limit))
        assert result == ten_minute_segments[: min(limit, len(ten_minute_segments))]

    def test_negative_cap_is_zero(self, ten_minute_segments):
        result = filter_segments(ten_minute_segments, SelectionCriteria(max_segments=-3))
        assert result == []

    def test_cap_applies_after_index_window(self, ten_minute_segments):
        criteria = SelectionCriteria(start_index=4, max_segments=2)
        result = filter_segments(ten_minute_segments, criteria)
        assert starts(result) == [240, 300]


@pytest.mark.unit
class TestScenarios:
    """End-to-end selections on realistic transcripts."""

    def test_half_hour_window_then_first_ten(self, two_hour_segments):
        criteria = SelectionCriteria(
            start_time="30:00", end_time="60:00", start_index=0, end_index=9
        )
        result = filter_segments(two_hour_segments, criteria)

        assert len(result) == 10
        assert result[0].start == 1800
        assert result[-1].start == 1890
        assert all(1800 <= seg.start <= 3600 for seg in result)

    def test_first_five_minutes_capped(self, dense_segments):
        criteria = SelectionCriteria(first_minutes=5, max_segments=3)
        result = filter_segments(dense_segments, criteria)

        assert len(result) == 3
        assert all(seg.start <= 300 for seg in result)
        assert result == dense_segments[:3]

    def test_paging_through_last_half_hour(self, two_hour_segments):
        """Consecutive index pages over a time window tile it exactly."""
        window = filter_segments(two_hour_segments, SelectionCriteria(last_minutes=30))
        pages = [
            filter_segments(
                two_hour_segments,
                SelectionCriteria(last_minutes=30, start_index=i, max_segments=50),
            )
            for i in range(0, len(window), 50)
        ]

        assert [seg for page in pages for seg in page] == window

    def test_result_preserves_order_without_duplicates(self, two_hour_segments):
        criteria = SelectionCriteria(first_minutes=90, last_minutes=60, start_index=5)
        result = filter_segments(two_hour_segments, criteria)

        assert starts(result) == sorted(starts(result))
        assert len(set(result)) == len(result)


@pytest.mark.unit
class TestStageOrder:
    """The pipeline order is fixed."""

    def test_stage_order(self):
        assert [stage.__name__ for stage in FILTER_STAGES] == [
            "filter_absolute_window",
            "filter_last_minutes",
            "filter_first_minutes",
            "filter_index_window",
            "filter_max_segments",
        ]

    def test_input_order_is_kept(self):
        segments = [CaptionSegment("late", 30.0, 1.0)] + make_segments(3, spacing=10.0)
        result = filter_segments(segments, SelectionCriteria(first_minutes=1))
        assert result == segments
