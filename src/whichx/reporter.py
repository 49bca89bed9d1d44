"""Output for resolved paths and lookup diagnostics."""

from __future__ import annotations

import click


def _write(line: str, err: bool = False) -> None:
    # color=True keeps escape sequences; paths are printed byte for byte.
    click.echo(line, err=err, color=True)


class Reporter:
    """Writes found candidates to stdout and diagnostics to stderr.

    Args:
        prog_name: Program name used to prefix diagnostics
    """

    def __init__(self, prog_name: str):
        self.prog_name = prog_name

    def report(self, candidate_path: str, query_name: str, show_prefix: bool = False, quiet: bool = False) -> None:
        """Print one found candidate, optionally prefixed with the queried name."""
        if quiet:
            return
        if show_prefix:
            _write(f"{query_name}: {candidate_path}")
        else:
            _write(candidate_path)

    def not_found(self, name: str, where: str, quiet: bool = False) -> None:
        """Print the diagnostic for a query with no executable candidate."""
        if quiet:
            return
        self.error(f"no {name} in ({where})")

    def error(self, message: str) -> None:
        _write(f"{self.prog_name}: {message}", err=True)
