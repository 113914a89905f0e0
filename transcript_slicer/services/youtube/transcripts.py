"""Transcript retrieval, slicing and search for YouTube videos.

Combines the caption source with the segmentation engine and shapes the
result into the JSON documents returned by the MCP tools and HTTP API.
Provider failures surface as TranscriptError before the engine runs.
"""

import logging
from typing import Any, Optional, Protocol

from transcript_slicer.services.segmentation import (
    CaptionSegment,
    FilterResult,
    SelectionCriteria,
    format_timestamp,
    segment_transcript,
)

from .transcript_service import SOURCE_NAME, YouTubeTranscriptService
from .utils import resolve_video_id

logger = logging.getLogger(__name__)


class CaptionSource(Protocol):
    """Anything that can supply caption segments for a video."""

    default_language: str

    def fetch_segments(
        self, video_id: str, language: Optional[str] = None
    ) -> list[CaptionSegment]: ...


class TranscriptService:
    """Fetches transcripts and returns caller-sized slices of them.

    Example:
        >>> service = TranscriptService()
        >>> result = service.get_transcript(
        ...     "dQw4w9WgXcQ", criteria=SelectionCriteria(start_index=0, max_segments=300)
        ... )
        >>> result["metadata"]["segmentCount"]
        300
    """

    def __init__(self, source: Optional[CaptionSource] = None):
        self.source = source or YouTubeTranscriptService()

    def _fetch(self, video_id: str, language: Optional[str]) -> tuple[str, str, list[CaptionSegment]]:
        video_id = resolve_video_id(video_id)
        language = language or self.source.default_language
        segments = self.source.fetch_segments(video_id, language)
        return video_id, language, segments

    def _select(
        self,
        video_id: str,
        language: Optional[str],
        criteria: Optional[SelectionCriteria],
    ) -> tuple[str, str, FilterResult]:
        video_id, language, segments = self._fetch(video_id, language)
        result = segment_transcript(segments, criteria)
        logger.info(
            f"Selected {result.summary.segment_count}/{result.summary.total_segments} "
            f"segments for {video_id}"
        )
        return video_id, language, result

    def get_transcript(
        self,
        video_id: str,
        language: Optional[str] = None,
        criteria: Optional[SelectionCriteria] = None,
    ) -> dict[str, Any]:
        """Get a (possibly sliced) transcript.

        Args:
            video_id: YouTube video ID or URL
            language: Transcript language (default: configured language)
            criteria: Selection criteria (default: whole transcript)

        Returns:
            {"videoId", "language", "transcript": [...], "metadata": {...}}

        Raises:
            ValueError: If no video ID can be resolved
            TranscriptUnavailableError: No captions for video/language
            TranscriptFetchError: Caption provider failure
        """
        video_id, language, result = self._select(video_id, language, criteria)
        data = result.to_dict()
        return {
            "videoId": video_id,
            "language": language,
            "transcript": data["segments"],
            "metadata": {**data["summary"], "source": SOURCE_NAME},
        }

    def search_transcript(
        self,
        video_id: str,
        query: str,
        language: Optional[str] = None,
    ) -> dict[str, Any]:
        """Find segments whose text contains ``query`` (case-insensitive).

        Raises:
            ValueError: If the query is blank or no video ID can be resolved
        """
        if not query or not query.strip():
            raise ValueError("query is required")

        video_id, language, segments = self._fetch(video_id, language)
        result = segment_transcript(segments)

        needle = query.lower()
        matches = [
            {**seg.to_dict(), "index": i, "timestamp": format_timestamp(seg.start)}
            for i, seg in enumerate(segments)
            if needle in seg.text.lower()
        ]

        return {
            "videoId": video_id,
            "query": query,
            "language": language,
            "matches": matches,
            "totalMatches": len(matches),
            "metadata": {**result.summary.to_dict(), "source": SOURCE_NAME},
        }

    def get_timestamped_transcript(
        self,
        video_id: str,
        language: Optional[str] = None,
        criteria: Optional[SelectionCriteria] = None,
    ) -> dict[str, Any]:
        """Like get_transcript, with human-readable timestamps per segment."""
        video_id, language, result = self._select(video_id, language, criteria)

        timestamped = [
            {
                "timestamp": format_timestamp(seg.start),
                "text": seg.text,
                "startTimeSeconds": seg.start,
                "durationSeconds": seg.duration,
                "startTimeMs": round(seg.start * 1000),
                "durationMs": round(seg.duration * 1000),
            }
            for seg in result.segments
        ]

        return {
            "videoId": video_id,
            "language": language,
            "timestampedTranscript": timestamped,
            "metadata": {
                **result.summary.to_dict(),
                "source": SOURCE_NAME,
                "format": "timestamped",
            },
        }


_default_service: Optional[TranscriptService] = None


def get_transcript_service() -> TranscriptService:
    """Get or create the shared TranscriptService."""
    global _default_service
    if _default_service is None:
        _default_service = TranscriptService()
    return _default_service
