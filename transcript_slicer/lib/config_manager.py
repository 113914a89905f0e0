"""Configuration manager with hierarchy: .env → environment → defaults.

Usage:
    from transcript_slicer.lib.config_manager import config

    language = config.get("YOUTUBE_TRANSCRIPT_LANG")
    port = config.get("API_PORT")  # coerced to int

Values are resolved at the system boundary (service construction, server
startup) and passed down explicitly. Core logic never reads config.
"""

import logging
import os
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

from transcript_slicer.lib.defaults import DEFAULTS, get_default, is_sensitive

logger = logging.getLogger(__name__)


def _find_git_root(start_path: Optional[Path] = None) -> Path:
    """Walk up directory tree to find .git/ folder."""
    current = start_path or Path.cwd()
    current = current.resolve()

    while current != current.parent:
        if (current / ".git").exists():
            return current
        current = current.parent

    raise FileNotFoundError("No .git directory found in any parent directory")


def _coerce_type(value: str, default: Any) -> Any:
    """Coerce string value to match the type of the default.

    Args:
        value: String value from env
        default: Default value (determines target type)

    Returns:
        Value coerced to appropriate type
    """
    if default is None:
        return value

    if isinstance(default, bool):
        return value.lower() in ("true", "1", "yes", "on")
    if isinstance(default, int):
        try:
            return int(value)
        except ValueError:
            return default
    if isinstance(default, float):
        try:
            return float(value)
        except ValueError:
            return default
    return value


class ConfigManager:
    """Manages configuration with .env → environment → defaults hierarchy.

    The manager loads .env from the git root (or the working directory when
    not inside a repository) on initialization.
    """

    def __init__(self, load_env: bool = True):
        self._env_loaded = False
        if load_env:
            self._load_env()

    def _load_env(self) -> None:
        """Load .env file from git root, falling back to the cwd."""
        if self._env_loaded:
            return

        try:
            env_path = _find_git_root() / ".env"
        except FileNotFoundError:
            env_path = Path.cwd() / ".env"

        if env_path.exists():
            # Real environment variables win over the file
            load_dotenv(dotenv_path=env_path, override=False)
            logger.debug(f"Loaded .env from {env_path}")
        else:
            logger.debug(f"No .env file found at {env_path}")

        self._env_loaded = True

    def get(self, key: str, default: Any = None) -> Any:
        """Get config value.

        Args:
            key: Configuration key
            default: Override default (uses DEFAULTS if not provided)

        Returns:
            Configuration value, coerced to the type of its default
        """
        env_value = os.getenv(key)
        if env_value is not None:
            default_val = default if default is not None else get_default(key)
            return _coerce_type(env_value, default_val)

        if default is not None:
            return default
        return get_default(key)

    def get_all(self, mask_sensitive: bool = True) -> dict[str, Any]:
        """Get all known configuration values.

        Args:
            mask_sensitive: Replace non-empty sensitive values with "***"

        Returns:
            Dictionary of all config keys and their resolved values
        """
        result = {}
        for key in DEFAULTS:
            value = self.get(key)
            if mask_sensitive and is_sensitive(key) and value:
                value = "***"
            result[key] = value
        return result


# Global config instance
config = ConfigManager()
