"""Default configuration values for the transcript slicer.

All hardcoded defaults live here. The service is fully functional
with these defaults; the proxy is only used when credentials are set.

Config hierarchy: .env → environment → these defaults
"""

from typing import Any

# =============================================================================
# Configuration Defaults
# =============================================================================

DEFAULTS: dict[str, Any] = {
    # -------------------------------------------------------------------------
    # Caption Source
    # -------------------------------------------------------------------------
    "YOUTUBE_TRANSCRIPT_LANG": "en",
    "YOUTUBE_TRANSCRIPT_USE_PROXY": True,

    # -------------------------------------------------------------------------
    # Proxy Settings (optional)
    # -------------------------------------------------------------------------
    "WEBSHARE_PROXY_USERNAME": "",
    "WEBSHARE_PROXY_PASSWORD": "",

    # -------------------------------------------------------------------------
    # HTTP API
    # -------------------------------------------------------------------------
    "API_HOST": "127.0.0.1",
    "API_PORT": 3002,

    # -------------------------------------------------------------------------
    # Logging
    # -------------------------------------------------------------------------
    "SERVICE_NAME": "transcript-slicer",
    "LOG_LEVEL": "INFO",
}


# =============================================================================
# Sensitive Keys (masked when listing config)
# =============================================================================

SENSITIVE_KEYS = {
    "WEBSHARE_PROXY_PASSWORD",
}


def get_default(key: str) -> Any:
    """Get the default value for a config key.

    Args:
        key: Configuration key name

    Returns:
        Default value, or None if key not found
    """
    return DEFAULTS.get(key)


def is_sensitive(key: str) -> bool:
    """Check if a config key contains sensitive data."""
    return key in SENSITIVE_KEYS
