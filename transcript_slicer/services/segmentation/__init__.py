"""Transcript segmentation engine.

Narrows a timed caption sequence with composable selection criteria so
callers with a limited context window can page through long transcripts.

Example:
    >>> from transcript_slicer.services.segmentation import (
    ...     CaptionSegment, SelectionCriteria, segment_transcript,
    ... )
    >>> segments = [CaptionSegment("hello", 0.0, 2.5), CaptionSegment("world", 2.5, 2.0)]
    >>> result = segment_transcript(segments, SelectionCriteria(max_segments=1))
    >>> [s.text for s in result.segments]
    ['hello']
"""

from .engine import segment_transcript
from .filters import FILTER_STAGES, filter_segments, total_duration
from .models import (
    CaptionSegment,
    FilterResult,
    SelectionCriteria,
    TimeExpression,
    TranscriptSummary,
)
from .summarizer import span_duration, summarize
from .time_normalizer import format_timestamp, normalize_time, parse_time

__all__ = [
    "CaptionSegment",
    "FilterResult",
    "SelectionCriteria",
    "TimeExpression",
    "TranscriptSummary",
    "FILTER_STAGES",
    "filter_segments",
    "total_duration",
    "span_duration",
    "summarize",
    "segment_transcript",
    "format_timestamp",
    "normalize_time",
    "parse_time",
]
