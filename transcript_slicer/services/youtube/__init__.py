"""YouTube caption retrieval.

Example:
    >>> from transcript_slicer.services.youtube import get_transcript_service
    >>> from transcript_slicer.services.segmentation import SelectionCriteria
    >>>
    >>> service = get_transcript_service()
    >>> result = service.get_transcript("dQw4w9WgXcQ", criteria=SelectionCriteria(last_minutes=1))
"""

from .errors import TranscriptError, TranscriptFetchError, TranscriptUnavailableError
from .transcript_service import YouTubeTranscriptService, get_default_service
from .transcripts import CaptionSource, TranscriptService, get_transcript_service
from .utils import extract_video_id, resolve_video_id

__all__ = [
    "CaptionSource",
    "TranscriptError",
    "TranscriptFetchError",
    "TranscriptUnavailableError",
    "TranscriptService",
    "YouTubeTranscriptService",
    "extract_video_id",
    "get_default_service",
    "get_transcript_service",
    "resolve_video_id",
]
