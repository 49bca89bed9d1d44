"""Resolve program names to executable paths.

A query containing ``/`` is tested as a literal path and the search path is
never consulted. Any other query is joined with each search path directory
in order and every candidate is tested for execute permission.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from whichx.reporter import Reporter
from whichx.search_path import SearchPath

SEP = "/"

# access(2) checks the real ids; prefer the effective ones where supported.
_EFFECTIVE_IDS = os.access in os.supports_effective_ids

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolveOptions:
    """Flags controlling a lookup."""

    search_all: bool = False
    show_prefix: bool = False
    quiet: bool = False


def join_candidate(directory: str, name: str) -> str:
    """Join a directory and a name with exactly one separator.

    An empty directory yields ``/<name>``.
    """
    if directory.endswith(SEP):
        return f"{directory}{name}"
    return f"{directory}{SEP}{name}"


def is_executable(path: str) -> bool:
    """Check that path exists and the current user may execute it."""
    try:
        return os.access(path, os.X_OK, effective_ids=_EFFECTIVE_IDS)
    except (OSError, ValueError):
        return False


class Resolver:
    """Resolves queries against a single search path."""

    def __init__(self, search_path: SearchPath, reporter: Reporter, options: ResolveOptions | None = None):
        self.search_path = search_path
        self.reporter = reporter
        self.options = options or ResolveOptions()

    def resolve(self, query: str) -> bool:
        """Look up one query, reporting every candidate found.

        Returns:
            True if at least one executable candidate was found
        """
        if SEP in query:
            return self._resolve_literal(query)
        return self._resolve_search(query)

    def candidates(self, query: str) -> list[str]:
        """All paths that would be tested for query, in order."""
        if SEP in query:
            return [query]
        return [join_candidate(directory, query) for directory in self.search_path]

    def _resolve_literal(self, query: str) -> bool:
        directory, _, name = query.rpartition(SEP)
        found = self._try(query, name)
        if not found:
            self.reporter.not_found(name, directory, self.options.quiet)
        return found

    def _resolve_search(self, query: str) -> bool:
        found = False
        for directory in self.search_path:
            if self._try(join_candidate(directory, query), query):
                found = True
                if not self.options.search_all:
                    return True
        if not found:
            self.reporter.not_found(query, self.search_path.source, self.options.quiet)
        return found

    def _try(self, candidate: str, name: str) -> bool:
        found = is_executable(candidate)
        logger.debug(f"{candidate}: {'found' if found else 'not executable'}")
        if found:
            self.reporter.report(candidate, name, self.options.show_prefix, self.options.quiet)
        return found


def resolve(
    query: str,
    search_path: SearchPath,
    search_all: bool = False,
    show_prefix: bool = False,
    quiet: bool = False,
    reporter: Reporter | None = None,
) -> bool:
    """Resolve a single query.

    Example:
        >>> resolve("ls", SearchPath("/usr/bin:/bin", ("/usr/bin", "/bin")), quiet=True)
        True
    """
    options = ResolveOptions(search_all=search_all, show_prefix=show_prefix, quiet=quiet)
    return Resolver(search_path, reporter or Reporter("whichx"), options).resolve(query)
