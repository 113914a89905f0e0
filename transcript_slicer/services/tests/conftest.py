"""Shared pytest fixtures for services tests."""

import pytest

from transcript_slicer.services.segmentation import CaptionSegment

from .fakes import FakeCaptionSource, make_segments


@pytest.fixture
def ten_minute_segments() -> list[CaptionSegment]:
    """10 segments, one per minute: starts 0, 60, ..., 540; total 600s."""
    return make_segments(10, spacing=60.0)


@pytest.fixture
def two_hour_segments() -> list[CaptionSegment]:
    """720 ten-second segments covering 0-7200s."""
    return make_segments(720, spacing=10.0)


@pytest.fixture
def dense_segments() -> list[CaptionSegment]:
    """400 segments every 1.5s: 200+ in the first five minutes."""
    return make_segments(400, spacing=1.5)


@pytest.fixture
def fake_source(ten_minute_segments) -> FakeCaptionSource:
    """Caption source serving the ten minute transcript."""
    return FakeCaptionSource(ten_minute_segments)
