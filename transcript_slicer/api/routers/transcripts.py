"""Transcript endpoints.

Endpoints are plain ``def`` so FastAPI runs the blocking caption fetch
in its threadpool.
"""

import logging
from typing import Optional, Union

from fastapi import APIRouter, Depends, HTTPException, Query

from transcript_slicer.api.models import (
    SearchResponse,
    TimestampedTranscriptResponse,
    TranscriptResponse,
)
from transcript_slicer.services.segmentation import SelectionCriteria
from transcript_slicer.services.youtube import (
    TranscriptFetchError,
    TranscriptUnavailableError,
    get_transcript_service,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/transcripts", tags=["transcripts"])


def parse_time_param(value: Optional[str]) -> Optional[Union[float, str]]:
    """Query strings arrive as text; plain numbers mean seconds."""
    if value is None:
        return None
    try:
        return float(value)
    except ValueError:
        return value


def selection_criteria(
    start_time: Optional[str] = Query(None, alias="startTime", description="Seconds or MM:SS / HH:MM:SS"),
    end_time: Optional[str] = Query(None, alias="endTime", description="Seconds or MM:SS / HH:MM:SS"),
    last_minutes: Optional[float] = Query(None, alias="lastMinutes"),
    first_minutes: Optional[float] = Query(None, alias="firstMinutes"),
    max_segments: Optional[int] = Query(None, alias="maxSegments", ge=0),
    start_index: Optional[int] = Query(None, alias="startIndex"),
    end_index: Optional[int] = Query(None, alias="endIndex"),
) -> SelectionCriteria:
    """Collect selection query parameters into SelectionCriteria."""
    return SelectionCriteria(
        start_time=parse_time_param(start_time),
        end_time=parse_time_param(end_time),
        last_minutes=last_minutes,
        first_minutes=first_minutes,
        start_index=start_index,
        end_index=end_index,
        max_segments=max_segments,
    )


def _raise_http(e: Exception) -> None:
    """Map service errors onto HTTP status codes."""
    if isinstance(e, TranscriptUnavailableError):
        raise HTTPException(status_code=404, detail=str(e))
    if isinstance(e, TranscriptFetchError):
        raise HTTPException(status_code=502, detail=str(e))
    if isinstance(e, ValueError):
        raise HTTPException(status_code=400, detail=str(e))
    raise HTTPException(status_code=500, detail=f"Transcript request failed: {str(e)}")


@router.get("/{video_id}", response_model=TranscriptResponse)
def get_transcript(
    video_id: str,
    language: Optional[str] = None,
    criteria: SelectionCriteria = Depends(selection_criteria),
):
    """Get a transcript, optionally narrowed by time, index and count."""
    try:
        return get_transcript_service().get_transcript(
            video_id, language=language, criteria=criteria
        )
    except Exception as e:
        logger.warning(f"Transcript request for {video_id} failed: {e}")
        _raise_http(e)


@router.get("/{video_id}/search", response_model=SearchResponse)
def search_transcript(
    video_id: str,
    q: str = Query(..., min_length=1, description="Text to search for"),
    language: Optional[str] = None,
):
    """Find segments containing ``q`` (case-insensitive)."""
    try:
        return get_transcript_service().search_transcript(video_id, q, language=language)
    except Exception as e:
        logger.warning(f"Transcript search for {video_id} failed: {e}")
        _raise_http(e)


@router.get("/{video_id}/timestamped", response_model=TimestampedTranscriptResponse)
def get_timestamped_transcript(
    video_id: str,
    language: Optional[str] = None,
    criteria: SelectionCriteria = Depends(selection_criteria),
):
    """Get a selection with human-readable timestamps."""
    try:
        return get_transcript_service().get_timestamped_transcript(
            video_id, language=language, criteria=criteria
        )
    except Exception as e:
        logger.warning(f"Timestamped transcript for {video_id} failed: {e}")
        _raise_http(e)
