"""Locate executable programs in a colon-delimited search path."""

__version__ = "0.1.0"

# Re-export the lookup API for convenience
from whichx.common import (
    DEFAULT_SEARCH_PATH,
    AppConfig,
    ConfigurationError,
    SearchConfig,
    SearchPathError,
    WhichxError,
    setup_logging,
    setup_logging_from_config,
)
from whichx.reporter import Reporter
from whichx.resolver import ResolveOptions, Resolver, is_executable, join_candidate, resolve
from whichx.search_path import SearchPath, split_search_path

__all__ = [
    "__version__",
    "DEFAULT_SEARCH_PATH",
    "AppConfig",
    "ConfigurationError",
    "SearchConfig",
    "SearchPathError",
    "WhichxError",
    "setup_logging",
    "setup_logging_from_config",
    "Reporter",
    "ResolveOptions",
    "Resolver",
    "is_executable",
    "join_candidate",
    "resolve",
    "SearchPath",
    "split_search_path",
]
