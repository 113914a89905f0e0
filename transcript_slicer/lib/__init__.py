"""Shared configuration and logging helpers."""

from .config_manager import ConfigManager, config
from .logging_config import (
    correlation_id_var,
    log_with_context,
    setup_logging,
)

__all__ = [
    "ConfigManager",
    "config",
    "correlation_id_var",
    "log_with_context",
    "setup_logging",
]
