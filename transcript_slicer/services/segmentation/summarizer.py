"""Summary statistics for a filtered transcript."""

from .filters import total_duration
from .models import CaptionSegment, SelectionCriteria, TranscriptSummary


def span_duration(segments: list[CaptionSegment]) -> float:
    """Wall-clock span from the first start to the last end.

    Gaps between sparse captions count towards the span.
    """
    if not segments:
        return 0.0
    return max(seg.end for seg in segments) - min(seg.start for seg in segments)


def summarize(
    original: list[CaptionSegment],
    filtered: list[CaptionSegment],
    criteria: SelectionCriteria,
) -> TranscriptSummary:
    """Describe what the filter pipeline kept.

    Args:
        original: Full caption sequence
        filtered: Output of the filter pipeline
        criteria: Criteria as supplied by the caller

    Returns:
        TranscriptSummary with counts, durations and the criteria echo
    """
    return TranscriptSummary(
        segment_count=len(filtered),
        total_segments=len(original),
        total_duration=total_duration(original),
        filtered_duration=span_duration(filtered),
        applied_filters=criteria.to_dict(),
    )
