"""Tests for search path parsing."""

import pytest

from whichx.common.errors import SearchPathError
from whichx.search_path import SearchPath, split_search_path


class TestSplitSearchPath:
    """Test split_search_path."""

    def test_simple(self):
        """Test a well-formed search path."""
        search_path = split_search_path("/usr/bin:/bin")
        assert search_path.entries == ("/usr/bin", "/bin")
        assert search_path.source == "/usr/bin:/bin"

    def test_order_preserved(self):
        """Test entries keep their order."""
        search_path = split_search_path("/c:/a:/b")
        assert list(search_path) == ["/c", "/a", "/b"]

    @pytest.mark.parametrize(
        "path",
        ["/bin", "/usr/bin:/bin", ":/bin", "/bin:", "/usr/bin::/bin", "::", "", "a:b:c:d:e"],
    )
    def test_entry_count(self, path):
        """Test there is always one more entry than separators."""
        assert len(split_search_path(path)) == path.count(":") + 1

    def test_empty_components_are_literal(self):
        """Test empty components are kept as empty strings, not mapped to '.'."""
        search_path = split_search_path(":/usr/bin::/bin:")
        assert search_path.entries == ("", "/usr/bin", "", "/bin", "")

    def test_no_escaping(self):
        """Test a backslash does not escape the separator."""
        assert split_search_path(r"/odd\:dir").entries == ("/odd\\", "dir")

    def test_allocation_failure(self):
        """Test allocation failure is signalled with SearchPathError."""

        class Exhausted(str):
            def split(self, sep=None, maxsplit=-1):
                raise MemoryError

        with pytest.raises(SearchPathError, match="error allocating path entries"):
            split_search_path(Exhausted("/usr/bin:/bin"))


class TestSearchPath:
    """Test the SearchPath value."""

    def test_immutable(self):
        """Test entries cannot be reassigned."""
        search_path = split_search_path("/bin")
        with pytest.raises(AttributeError):
            search_path.entries = ("/tmp",)

    def test_empty(self):
        """Test the degraded empty search path."""
        search_path = SearchPath.empty("/usr/bin:/bin")
        assert len(search_path) == 0
        assert not search_path
        assert search_path.source == "/usr/bin:/bin"
