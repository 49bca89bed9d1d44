"""Core utilities for whichx."""

from whichx.common.config import DEFAULT_SEARCH_PATH, AppConfig, SearchConfig
from whichx.common.errors import ConfigurationError, SearchPathError, WhichxError
from whichx.common.logging import setup_logging, setup_logging_from_config

__all__ = [
    "DEFAULT_SEARCH_PATH",
    "AppConfig",
    "SearchConfig",
    "WhichxError",
    "ConfigurationError",
    "SearchPathError",
    "setup_logging",
    "setup_logging_from_config",
]
