"""Test doubles for the caption source."""

from typing import Optional

from transcript_slicer.services.segmentation import CaptionSegment


def make_segments(
    count: int,
    spacing: float = 60.0,
    duration: Optional[float] = None,
    offset: float = 0.0,
) -> list[CaptionSegment]:
    """Evenly spaced segments named "segment 0", "segment 1", ..."""
    return [
        CaptionSegment(
            text=f"segment {i}",
            start=offset + i * spacing,
            duration=spacing if duration is None else duration,
        )
        for i in range(count)
    ]


class FakeCaptionSource:
    """In-memory caption source that records every fetch."""

    def __init__(
        self,
        segments: Optional[list[CaptionSegment]] = None,
        default_language: str = "en",
        error: Optional[Exception] = None,
    ):
        self.segments = segments if segments is not None else make_segments(10)
        self.default_language = default_language
        self.error = error
        self.calls: list[tuple[str, Optional[str]]] = []

    def fetch_segments(self, video_id: str, language: Optional[str] = None) -> list[CaptionSegment]:
        self.calls.append((video_id, language))
        if self.error:
            raise self.error
        return list(self.segments)
