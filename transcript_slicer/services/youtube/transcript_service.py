"""YouTube caption source with proxy support.

This service wraps youtube-transcript-api with:
- Automatic proxy configuration (Webshare)
- A default transcript language resolved once from configuration
- Conversion of provider snippets into CaptionSegment objects
- Provider failures mapped to TranscriptError subclasses

Configuration keys:
- WEBSHARE_PROXY_USERNAME: Webshare proxy username
- WEBSHARE_PROXY_PASSWORD: Webshare proxy password
- YOUTUBE_TRANSCRIPT_USE_PROXY: Set to "false" to disable proxy (default: true)
- YOUTUBE_TRANSCRIPT_LANG: Default transcript language (default: en)
"""

import logging
from typing import Optional

from youtube_transcript_api import YouTubeTranscriptApi
from youtube_transcript_api.proxies import WebshareProxyConfig
from youtube_transcript_api._errors import (
    CouldNotRetrieveTranscript,
    NoTranscriptFound,
    TranscriptsDisabled,
    VideoUnavailable,
)

from transcript_slicer.lib.config_manager import config
from transcript_slicer.services.segmentation import CaptionSegment

from .errors import TranscriptFetchError, TranscriptUnavailableError

logger = logging.getLogger(__name__)

SOURCE_NAME = "youtube-transcript-api"


def _clean_text(text: str) -> str:
    """Collapse caption line breaks and surrounding whitespace."""
    return " ".join(text.split())


class YouTubeTranscriptService:
    """Fetches timed captions for YouTube videos.

    Falls back to a direct connection if proxy credentials are not set.

    Example:
        >>> service = YouTubeTranscriptService()
        >>> segments = service.fetch_segments("dQw4w9WgXcQ")
        >>> segments[0].start
        1.36
    """

    def __init__(
        self,
        proxy_username: Optional[str] = None,
        proxy_password: Optional[str] = None,
        use_proxy: Optional[bool] = None,
        default_language: Optional[str] = None,
    ):
        """Initialize the caption source.

        Args:
            proxy_username: Webshare proxy username (default: from config)
            proxy_password: Webshare proxy password (default: from config)
            use_proxy: Whether to use proxy (default: YOUTUBE_TRANSCRIPT_USE_PROXY)
            default_language: Language used when a fetch names none
                (default: YOUTUBE_TRANSCRIPT_LANG)
        """
        self.proxy_username = proxy_username or config.get("WEBSHARE_PROXY_USERNAME") or None
        self.proxy_password = proxy_password or config.get("WEBSHARE_PROXY_PASSWORD") or None

        if use_proxy is None:
            use_proxy = bool(config.get("YOUTUBE_TRANSCRIPT_USE_PROXY"))
        self.use_proxy = use_proxy

        self.default_language = default_language or config.get("YOUTUBE_TRANSCRIPT_LANG") or "en"

        self.proxy_config = None
        if self.use_proxy and self.proxy_username and self.proxy_password:
            self.proxy_config = WebshareProxyConfig(
                proxy_username=self.proxy_username,
                proxy_password=self.proxy_password,
            )
            self._proxy_configured = True
        else:
            self._proxy_configured = False

    def _create_api(self) -> YouTubeTranscriptApi:
        """Create API instance with or without proxy config."""
        if self._proxy_configured:
            return YouTubeTranscriptApi(proxy_config=self.proxy_config)
        return YouTubeTranscriptApi()

    def fetch_segments(
        self, video_id: str, language: Optional[str] = None
    ) -> list[CaptionSegment]:
        """Fetch timed captions for a YouTube video.

        Args:
            video_id: YouTube video ID (11 characters)
            language: Transcript language (default: the configured language)

        Returns:
            Caption segments in provider order (sorted by start)

        Raises:
            TranscriptUnavailableError: Transcripts disabled, none in the
                requested language, video unavailable, or zero captions
            TranscriptFetchError: Any other provider failure
        """
        language = language or self.default_language
        logger.info(f"Fetching transcript for {video_id} ({language})")

        try:
            fetched = self._create_api().fetch(video_id, languages=[language])
        except TranscriptsDisabled as e:
            raise TranscriptUnavailableError(
                f"Transcripts are disabled for video {video_id}", video_id, language
            ) from e
        except NoTranscriptFound as e:
            raise TranscriptUnavailableError(
                f"No transcript found for video {video_id} in language {language}",
                video_id,
                language,
            ) from e
        except VideoUnavailable as e:
            raise TranscriptUnavailableError(
                f"Video {video_id} is unavailable", video_id, language
            ) from e
        except CouldNotRetrieveTranscript as e:
            raise TranscriptFetchError(
                f"Failed to get transcript: {e}", video_id, language
            ) from e
        except Exception as e:
            logger.exception(f"Transcript fetch failed for {video_id}")
            raise TranscriptFetchError(
                f"Failed to get transcript: {e}", video_id, language
            ) from e

        segments = []
        for snippet in fetched.snippets:
            text = _clean_text(snippet.text)
            if not text:
                continue
            segments.append(
                CaptionSegment(
                    text=text,
                    start=float(snippet.start),
                    duration=float(snippet.duration),
                )
            )

        if not segments:
            raise TranscriptUnavailableError(
                f"No transcript found for video {video_id} in language {language}",
                video_id,
                language,
            )

        logger.debug(f"Fetched {len(segments)} segments for {video_id}")
        return segments

    def is_proxy_configured(self) -> bool:
        """Check if proxy is configured and enabled."""
        return self._proxy_configured

    def get_proxy_info(self) -> dict[str, str]:
        """Get proxy configuration info (without password).

        Returns:
            Dictionary with proxy info for debugging
        """
        return {
            "use_proxy": str(self.use_proxy),
            "proxy_configured": str(self._proxy_configured),
            "proxy_username": self.proxy_username if self._proxy_configured else "not configured",
            "proxy_host": "p.webshare.io:80" if self._proxy_configured else "not configured",
        }


# Singleton instance for convenience
_default_service: Optional[YouTubeTranscriptService] = None


def get_default_service() -> YouTubeTranscriptService:
    """Get or create the default YouTubeTranscriptService instance.

    Configured from the environment on first use.
    """
    global _default_service
    if _default_service is None:
        _default_service = YouTubeTranscriptService()
    return _default_service
