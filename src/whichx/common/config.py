"""Configuration management for whichx."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from dotenv import dotenv_values

from whichx.common.errors import ConfigurationError

# Used when PATH is unset or empty.
DEFAULT_SEARCH_PATH = "/usr/bin:/bin"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchConfig:
    """Search path configuration."""

    path: str
    is_default: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> SearchConfig:
        """Load the search path from the environment.

        Expected variables:
            PATH: colon-delimited list of directories

        Returns:
            SearchConfig instance, falling back to DEFAULT_SEARCH_PATH
            when PATH is unset or empty
        """
        if environ is None:
            environ = os.environ
        path = environ.get("PATH")
        if not path:
            return cls(path=DEFAULT_SEARCH_PATH, is_default=True)
        return cls(path=path)


class AppConfig:
    """Main application configuration loader."""

    def __init__(
        self,
        env_file: Path | None = None,
        load_env: bool = True,
        environ: Mapping[str, str] | None = None,
    ):
        """Initialize configuration from environment.

        Only WHICHX_* settings are read from dotenv files, and they never
        override the process environment. PATH always comes from the
        process environment.

        Args:
            env_file: Optional path to a dotenv file. If not provided,
                     looks for .whichx.env in current directory or ~/.whichx.env
            load_env: Whether to load from dotenv files (default True). Set False in tests.
            environ: Environment mapping to read (default: os.environ)
        """
        if environ is None:
            environ = os.environ

        settings: dict[str, str] = {}
        if load_env:
            settings.update(self._read_env_file(env_file))
        settings.update({key: value for key, value in environ.items() if key.startswith("WHICHX_")})

        self.search = SearchConfig.from_env(environ)
        self.log_level = (settings.get("WHICHX_LOG_LEVEL") or "WARNING").upper()
        log_file = settings.get("WHICHX_LOG_FILE")
        self.log_file = Path(log_file) if log_file else None

    @staticmethod
    def _read_env_file(env_file: Path | None) -> dict[str, str]:
        candidates = [env_file] if env_file else [Path(".whichx.env"), Path.home() / ".whichx.env"]
        for candidate in candidates:
            if candidate.exists():
                values = dotenv_values(candidate)
                logger.debug(f"Loaded settings from {candidate}")
                return {key: value for key, value in values.items() if key.startswith("WHICHX_") and value}
        return {}

    def validate(self) -> dict[str, str]:
        """Validate configuration.

        Returns:
            Dict of field names to error messages (empty if valid)
        """
        errors = {}
        if self.log_level not in LOG_LEVELS:
            errors["log_level"] = f"WHICHX_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {self.log_level!r}"
        return errors

    def require_valid(self) -> None:
        """Require the configuration to be valid.

        Raises:
            ConfigurationError: If any setting is invalid

        Example:
            >>> config = AppConfig(load_env=False)
            >>> config.require_valid()
        """
        errors = self.validate()
        if errors:
            raise ConfigurationError(
                "Configuration validation failed:\n  - "
                + "\n  - ".join(f"{field}: {message}" for field, message in errors.items())
            )
