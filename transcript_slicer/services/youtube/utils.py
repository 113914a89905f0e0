"""YouTube helpers for turning user input into video IDs."""

import re

_VIDEO_ID_RE = re.compile(r"^[0-9A-Za-z_-]{11}$")
_URL_HINT_RE = re.compile(r"[/?=]")


def extract_video_id(url: str) -> str:
    """Extract video ID from YouTube URL.

    Supports formats:
    - https://youtube.com/watch?v=VIDEO_ID
    - https://youtu.be/VIDEO_ID
    - https://www.youtube.com/embed/VIDEO_ID
    - https://www.youtube.com/watch?v=VIDEO_ID&other=params

    Args:
        url: YouTube video URL

    Returns:
        11-character video ID

    Raises:
        ValueError: If video ID cannot be extracted from URL

    Example:
        >>> extract_video_id("https://youtube.com/watch?v=dQw4w9WgXcQ")
        'dQw4w9WgXcQ'
    """
    patterns = [
        r'(?:v=|\/)([0-9A-Za-z_-]{11}).*',
        r'youtu\.be\/([0-9A-Za-z_-]{11})',
    ]

    for pattern in patterns:
        match = re.search(pattern, url)
        if match:
            return match.group(1)

    raise ValueError(f"Could not extract video ID from URL: {url}")


def resolve_video_id(value: str) -> str:
    """Accept either a bare video ID or a YouTube URL.

    Raises:
        ValueError: If the value is empty or no ID can be found
    """
    value = (value or "").strip()
    if not value:
        raise ValueError("videoId is required")
    if _VIDEO_ID_RE.match(value) or not _URL_HINT_RE.search(value):
        # Not URL-shaped: let the caption provider judge the ID
        return value
    return extract_video_id(value)
