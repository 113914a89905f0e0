"""Errors raised by the caption source and transcript service."""


class TranscriptError(Exception):
    """Base class for transcript retrieval errors."""

    def __init__(self, message: str, video_id: str = "", language: str = ""):
        super().__init__(message)
        self.video_id = video_id
        self.language = language


class TranscriptUnavailableError(TranscriptError):
    """No captions exist for the requested video and language."""


class TranscriptFetchError(TranscriptError):
    """The caption provider failed (network, parsing, rate limiting)."""
