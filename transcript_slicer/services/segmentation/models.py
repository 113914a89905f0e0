"""Data models for transcript segmentation.

These models describe timed caption segments, the selection criteria
used to narrow a transcript, and the result handed back to callers.
"""

from dataclasses import dataclass, field
from typing import Any, Optional, Union

TimeExpression = Union[str, int, float]


@dataclass(frozen=True)
class CaptionSegment:
    """One timed cue of transcript text.

    Attributes:
        text: Spoken content for this interval
        start: Offset from content start in seconds
        duration: Length of the cue in seconds
    """

    text: str
    start: float
    duration: float

    @property
    def end(self) -> float:
        """End offset in seconds."""
        return self.start + self.duration

    @classmethod
    def from_dict(cls, data: dict) -> "CaptionSegment":
        """Build from a {"text", "start", "duration"} dict."""
        return cls(
            text=data["text"],
            start=float(data["start"]),
            duration=float(data.get("duration", 0)),
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization.

        ``offset`` is the start in whole milliseconds.
        """
        return {
            "text": self.text,
            "start": self.start,
            "duration": self.duration,
            "offset": round(self.start * 1000),
        }


@dataclass(frozen=True)
class SelectionCriteria:
    """Optional, combinable filters for narrowing a transcript.

    Every field defaults to None (not supplied). Filters compose in a fixed
    order; see ``filters.FILTER_STAGES``.

    Attributes:
        start_time: Absolute window start (seconds or "MM:SS"/"HH:MM:SS")
        end_time: Absolute window end (seconds or clock string)
        last_minutes: Keep the last N minutes of the full transcript
        first_minutes: Keep the first N minutes
        start_index: Zero-based start of the positional window
        end_index: Zero-based, inclusive end of the positional window
        max_segments: Cap on the number of segments returned
    """

    start_time: Optional[TimeExpression] = None
    end_time: Optional[TimeExpression] = None
    last_minutes: Optional[float] = None
    first_minutes: Optional[float] = None
    start_index: Optional[int] = None
    end_index: Optional[int] = None
    max_segments: Optional[int] = None

    @classmethod
    def from_params(cls, params: dict[str, Any]) -> "SelectionCriteria":
        """Build from camelCase tool/query parameters.

        Unknown keys are ignored. Index and count values are coerced to int
        since JSON callers often send them as numbers like 100.0.
        """

        def _int(key: str) -> Optional[int]:
            value = params.get(key)
            if value is None or (isinstance(value, int) and not isinstance(value, bool)):
                return value
            return int(value)

        def _float(key: str) -> Optional[float]:
            value = params.get(key)
            if value is None or (isinstance(value, (int, float)) and not isinstance(value, bool)):
                return value
            return float(value)

        return cls(
            start_time=params.get("startTime"),
            end_time=params.get("endTime"),
            last_minutes=_float("lastMinutes"),
            first_minutes=_float("firstMinutes"),
            start_index=_int("startIndex"),
            end_index=_int("endIndex"),
            max_segments=_int("maxSegments"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Echo every criterion as supplied, None for omitted ones."""
        return {
            "startTime": self.start_time,
            "endTime": self.end_time,
            "lastMinutes": self.last_minutes,
            "firstMinutes": self.first_minutes,
            "maxSegments": self.max_segments,
            "startIndex": self.start_index,
            "endIndex": self.end_index,
        }

    def is_empty(self) -> bool:
        """True when no criterion was supplied."""
        return all(value is None for value in self.to_dict().values())


@dataclass
class TranscriptSummary:
    """Descriptive statistics for a filtered transcript.

    Attributes:
        segment_count: Number of segments kept
        total_segments: Number of segments in the full transcript
        total_duration: End of the latest segment in the full transcript
        filtered_duration: Span from first kept start to last kept end
        applied_filters: Echo of the criteria the caller supplied
    """

    segment_count: int = 0
    total_segments: int = 0
    total_duration: float = 0.0
    filtered_duration: float = 0.0
    applied_filters: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "segmentCount": self.segment_count,
            "totalSegments": self.total_segments,
            "totalDuration": self.total_duration,
            "filteredDuration": self.filtered_duration,
            "appliedFilters": dict(self.applied_filters),
        }


@dataclass
class FilterResult:
    """Kept segments plus the summary describing them."""

    segments: list[CaptionSegment] = field(default_factory=list)
    summary: TranscriptSummary = field(default_factory=TranscriptSummary)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "segments": [s.to_dict() for s in self.segments],
            "summary": self.summary.to_dict(),
        }
