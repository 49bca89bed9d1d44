"""Search path parsing.

Splits a colon-delimited search path string (usually ``$PATH``) into an
ordered, immutable sequence of directory strings. The separator cannot be
escaped; empty components are kept as empty strings.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from whichx.common.errors import SearchPathError

PATH_SEPARATOR = ":"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchPath:
    """Ordered directories parsed from a search path string."""

    source: str
    entries: tuple[str, ...]

    def __iter__(self):
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __bool__(self) -> bool:
        return bool(self.entries)

    @classmethod
    def empty(cls, source: str = "") -> SearchPath:
        """SearchPath with no entries, every lookup against it fails."""
        return cls(source=source, entries=())


def split_search_path(path: str) -> SearchPath:
    """Split a search path string into directory entries.

    Args:
        path: Colon-delimited directories, e.g. "/usr/bin:/bin"

    Returns:
        SearchPath with ``path.count(":") + 1`` entries

    Raises:
        SearchPathError: If the entries could not be allocated
    """
    try:
        entries = tuple(path.split(PATH_SEPARATOR))
    except MemoryError as err:
        raise SearchPathError("error allocating path entries") from err

    logger.debug(f"Parsed {len(entries)} search path entries from {path!r}")
    return SearchPath(source=path, entries=entries)
