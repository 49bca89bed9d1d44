"""Tests for common.errors module."""

import pytest

from whichx.common.errors import ConfigurationError, SearchPathError, WhichxError


class TestExceptionHierarchy:
    """Test custom exception hierarchy."""

    def test_base_exception(self):
        """Test WhichxError base exception."""
        error = WhichxError("Test error")
        assert str(error) == "Test error"
        assert isinstance(error, Exception)

    def test_configuration_error(self):
        """Test ConfigurationError inherits from base."""
        error = ConfigurationError("Config error")
        assert str(error) == "Config error"
        assert isinstance(error, WhichxError)

    def test_search_path_error(self):
        """Test SearchPathError inherits from base."""
        error = SearchPathError("error allocating path entries")
        assert str(error) == "error allocating path entries"
        assert isinstance(error, WhichxError)

    def test_exception_raising(self):
        """Test exceptions can be raised and caught through the base class."""
        with pytest.raises(WhichxError) as exc_info:
            raise SearchPathError("no memory")
        assert str(exc_info.value) == "no memory"
