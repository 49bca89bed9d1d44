"""Custom exceptions for whichx."""


class WhichxError(Exception):
    """Base exception for all whichx errors."""

    pass


class ConfigurationError(WhichxError):
    """Raised when configuration is invalid or missing."""

    pass


class SearchPathError(WhichxError):
    """Raised when the search path entries could not be built."""

    pass
