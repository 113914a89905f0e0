"""Ordered filter pipeline for narrowing a caption sequence.

Stages run in a fixed order and each one narrows the output of the
previous stage, never the original list:

    absolute window -> last N minutes -> first N minutes
        -> index window -> max segments

This lets a caller stack a coarse time window with a positional slice
("segments 100-400 of the last 30 minutes") to page through long videos.
Index ranges are the reliable paging mechanism for multi-hour content
because caption density varies wildly between time windows.
"""

import logging
from typing import Callable

from .models import CaptionSegment, SelectionCriteria
from .time_normalizer import normalize_time, parse_time

logger = logging.getLogger(__name__)

FilterStage = Callable[[list[CaptionSegment], SelectionCriteria, float], list[CaptionSegment]]


def total_duration(segments: list[CaptionSegment]) -> float:
    """End of the latest segment, or 0 for an empty sequence."""
    if not segments:
        return 0.0
    return max(seg.end for seg in segments)


def _resolve_bound(expr, fallback: float) -> float:
    """Normalize a window bound, warning when a malformed string is coerced."""
    if expr is None:
        return fallback
    if parse_time(expr) is None:
        logger.warning(f"Unparseable time expression {expr!r}, treating as 0")
    return normalize_time(expr)


def filter_absolute_window(
    segments: list[CaptionSegment], criteria: SelectionCriteria, total: float
) -> list[CaptionSegment]:
    """Keep segments whose start lies in [start_time, end_time], inclusive."""
    if criteria.start_time is None and criteria.end_time is None:
        return segments

    start = _resolve_bound(criteria.start_time, 0.0)
    end = _resolve_bound(criteria.end_time, total)
    return [seg for seg in segments if start <= seg.start <= end]


def filter_last_minutes(
    segments: list[CaptionSegment], criteria: SelectionCriteria, total: float
) -> list[CaptionSegment]:
    """Keep segments starting within the last N minutes of the full transcript."""
    if criteria.last_minutes is None:
        return segments

    # May be negative, which admits everything
    bound = total - criteria.last_minutes * 60
    return [seg for seg in segments if seg.start >= bound]


def filter_first_minutes(
    segments: list[CaptionSegment], criteria: SelectionCriteria, total: float
) -> list[CaptionSegment]:
    """Keep segments starting within the first N minutes."""
    if criteria.first_minutes is None:
        return segments

    bound = criteria.first_minutes * 60
    return [seg for seg in segments if seg.start <= bound]


def filter_index_window(
    segments: list[CaptionSegment], criteria: SelectionCriteria, total: float
) -> list[CaptionSegment]:
    """Slice by position; end_index is inclusive."""
    if criteria.start_index is None and criteria.end_index is None:
        return segments

    start = criteria.start_index if criteria.start_index is not None else 0
    end = criteria.end_index + 1 if criteria.end_index is not None else len(segments)
    return segments[start:end]


def filter_max_segments(
    segments: list[CaptionSegment], criteria: SelectionCriteria, total: float
) -> list[CaptionSegment]:
    """Truncate to the first max_segments entries."""
    if criteria.max_segments is None:
        return segments

    limit = max(0, criteria.max_segments)
    if len(segments) > limit:
        return segments[:limit]
    return segments


FILTER_STAGES: tuple[FilterStage, ...] = (
    filter_absolute_window,
    filter_last_minutes,
    filter_first_minutes,
    filter_index_window,
    filter_max_segments,
)


def filter_segments(
    segments: list[CaptionSegment],
    criteria: SelectionCriteria,
) -> list[CaptionSegment]:
    """Apply every filter stage in order.

    Args:
        segments: Full caption sequence, sorted by start
        criteria: Selection criteria (any subset may be set)

    Returns:
        New list holding an ordered sub-sequence of ``segments``. Empty input
        or inverted bounds yield an empty list; this never raises.
    """
    if not segments:
        return []

    total = total_duration(segments)
    current = list(segments)
    for stage in FILTER_STAGES:
        current = stage(current, criteria, total)
    return current
