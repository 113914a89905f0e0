"""Transcript segmentation entry point.

Runs the filter pipeline and the summarizer over an in-memory caption
sequence. Pure and synchronous: no I/O, no shared state, safe to call
concurrently.
"""

import logging
from typing import Iterable, Optional

from .filters import filter_segments
from .models import CaptionSegment, FilterResult, SelectionCriteria
from .summarizer import summarize

logger = logging.getLogger(__name__)


def segment_transcript(
    segments: Iterable[CaptionSegment],
    criteria: Optional[SelectionCriteria] = None,
) -> FilterResult:
    """Select a sub-range of a transcript and describe it.

    Args:
        segments: Caption segments sorted by start (never re-sorted here)
        criteria: Selection criteria; None selects everything

    Returns:
        FilterResult with the kept segments and their summary

    Example:
        >>> result = segment_transcript(segments, SelectionCriteria(last_minutes=30))
        >>> result.summary.segment_count
        412
    """
    original = list(segments)
    criteria = criteria or SelectionCriteria()

    kept = filter_segments(original, criteria)
    summary = summarize(original, kept, criteria)

    logger.debug(f"Kept {summary.segment_count} of {summary.total_segments} segments")
    return FilterResult(segments=kept, summary=summary)
