"""Conversion between time expressions and seconds.

Accepted expressions are plain numbers (already seconds) and clock
strings: "MM:SS" or "HH:MM:SS". Components may be fractional.
"""

import math
from typing import Optional

from .models import TimeExpression


def parse_time(expr: TimeExpression) -> Optional[float]:
    """Parse a time expression, returning None when it is malformed.

    Example:
        >>> parse_time("1:02:03")
        3723.0
        >>> parse_time("bogus") is None
        True
    """
    if isinstance(expr, bool):
        return None
    if isinstance(expr, (int, float)):
        return expr

    parts = str(expr).split(":")
    try:
        values = [float(part.strip()) for part in parts]
    except ValueError:
        return None
    if not all(math.isfinite(value) for value in values):
        return None

    if len(values) == 2:
        minutes, seconds = values
        return minutes * 60 + seconds
    if len(values) == 3:
        hours, minutes, seconds = values
        return hours * 3600 + minutes * 60 + seconds
    return None


def normalize_time(expr: TimeExpression) -> float:
    """Convert a time expression to seconds.

    Numbers pass through unchanged. Malformed strings (wrong number of
    components, non-numeric components) become 0, the start of the content.
    Use ``parse_time`` to detect them instead.

    Example:
        >>> normalize_time("1:30")
        90.0
        >>> normalize_time(45)
        45
    """
    seconds = parse_time(expr)
    if seconds is None:
        return 0.0
    return seconds


def format_timestamp(seconds: float) -> str:
    """Format seconds as M:SS or H:MM:SS."""
    hours = int(seconds // 3600)
    minutes = int((seconds % 3600) // 60)
    secs = int(seconds % 60)

    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"
