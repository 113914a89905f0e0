"""Request and response models for the API.

Wire format uses camelCase keys (``videoId``, ``segmentCount``) to match
the MCP tool surface; Python attributes stay snake_case.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serializing field names as camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SegmentOut(CamelModel):
    """A caption segment as returned to callers."""

    text: str
    start: float = Field(description="Start offset in seconds")
    duration: float = Field(description="Duration in seconds")
    offset: int = Field(description="Start offset in milliseconds")


class TranscriptMetadata(CamelModel):
    """Summary of what a selection kept."""

    segment_count: int
    total_segments: int
    total_duration: float
    filtered_duration: float = Field(
        description="Span from the first kept start to the last kept end, in seconds"
    )
    applied_filters: dict[str, Any]
    source: str


class TimestampedMetadata(TranscriptMetadata):
    """Metadata for the timestamped view."""

    format: str = "timestamped"


class TranscriptResponse(CamelModel):
    """Response from GET /transcripts/{video_id}."""

    video_id: str
    language: str
    transcript: list[SegmentOut]
    metadata: TranscriptMetadata


class SearchMatch(SegmentOut):
    """A segment matching a transcript search."""

    index: int = Field(description="Position in the full transcript, usable as startIndex")
    timestamp: str


class SearchResponse(CamelModel):
    """Response from GET /transcripts/{video_id}/search."""

    video_id: str
    query: str
    language: str
    matches: list[SearchMatch]
    total_matches: int
    metadata: TranscriptMetadata


class TimestampedSegment(CamelModel):
    """A caption segment with a human-readable timestamp."""

    timestamp: str
    text: str
    start_time_seconds: float
    duration_seconds: float
    start_time_ms: int
    duration_ms: int


class TimestampedTranscriptResponse(CamelModel):
    """Response from GET /transcripts/{video_id}/timestamped."""

    video_id: str
    language: str
    timestamped_transcript: list[TimestampedSegment]
    metadata: TimestampedMetadata


class HealthCheckResponse(BaseModel):
    """Health check response."""

    status: str
    service: str
    version: str
    timestamp: str
    checks: Optional[dict[str, Any]] = None
