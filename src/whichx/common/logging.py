"""Logging utilities for whichx."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from whichx.common.config import AppConfig


def setup_logging(
    name: str,
    level: str | int = "WARNING",
    log_file: Path | None = None,
    console: bool = True,
) -> logging.Logger:
    """Setup standardized logging configuration.

    Console output goes to stderr, stdout is reserved for resolved paths.

    Args:
        name: Logger name (usually __name__)
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL) or logging constant
        log_file: Optional file path to write logs
        console: Whether to also log to console (default: True)

    Returns:
        Configured logger instance

    Example:
        >>> logger = setup_logging("whichx", level="DEBUG")
        >>> logger.debug("Resolving ls")
    """
    logger = logging.getLogger(name)
    if isinstance(level, str):
        logger.setLevel(getattr(logging, level.upper()))
    else:
        logger.setLevel(level)

    # Prevent duplicate handlers
    if logger.handlers:
        return logger

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def setup_logging_from_config(config: AppConfig, name: str = "whichx") -> logging.Logger:
    """Configure the package logger from WHICHX_LOG_LEVEL and WHICHX_LOG_FILE.

    With a log file configured nothing is logged to the console, so stderr
    carries only lookup diagnostics.
    """
    return setup_logging(
        name,
        level=config.log_level,
        log_file=config.log_file,
        console=config.log_file is None,
    )
