"""Application configuration helpers."""

from __future__ import annotations

from .env import env_int, optional_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .logging import configure_logging
from .storage import ExportConfig, FeedConfig, get_export_config, get_feed_config
from .view import ViewConfig, get_view_config

__all__ = [
    "ConfigurationError",
    "ExportConfig",
    "FeedConfig",
    "MissingConfigurationError",
    "ViewConfig",
    "configure_logging",
    "env_int",
    "get_export_config",
    "get_feed_config",
    "get_view_config",
    "optional_env_var",
    "require_env_vars",
]
