"""Command-line interface for whichx.

Exit status:
    0  every program was resolved
    1  some, but not all, programs were resolved
    2  no program was resolved, or the command line was invalid
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntEnum

import click

from whichx.common.config import AppConfig
from whichx.common.errors import ConfigurationError, SearchPathError
from whichx.common.logging import setup_logging_from_config
from whichx.reporter import Reporter
from whichx.resolver import ResolveOptions, Resolver
from whichx.search_path import SearchPath, split_search_path


class ExitStatus(IntEnum):
    SUCCESS = 0
    NOT_ALL = 1
    NONE = 2


@dataclass
class RunResult:
    """Counts of attempted and failed lookups for one run."""

    attempts: int = 0
    errors: int = 0

    def record(self, found: bool) -> None:
        self.attempts += 1
        if not found:
            self.errors += 1

    @property
    def exit_status(self) -> ExitStatus:
        if self.errors == self.attempts:
            return ExitStatus.NONE
        if self.errors:
            return ExitStatus.NOT_ALL
        return ExitStatus.SUCCESS


def run(
    queries: Iterable[str],
    search_path_string: str,
    reporter: Reporter,
    options: ResolveOptions | None = None,
) -> RunResult:
    """Resolve every query against one search path.

    The search path is parsed once. If parsing fails the error is reported
    and every lookup runs against an empty search path.

    Args:
        queries: Program names or paths, in command-line order
        search_path_string: Colon-delimited directories
        reporter: Destination for results and diagnostics
        options: Lookup flags shared by all queries

    Returns:
        RunResult with one attempt per query
    """
    try:
        search_path = split_search_path(search_path_string)
    except SearchPathError as err:
        reporter.error(str(err))
        search_path = SearchPath.empty(search_path_string)

    resolver = Resolver(search_path, reporter, options)
    result = RunResult()
    for query in queries:
        result.record(resolver.resolve(query))
    return result


@click.command(
    name="whichx",
    options_metavar="[-aps] [--]",
    context_settings={"help_option_names": []},
)
@click.option("-a", "search_all", is_flag=True, help="Print every match in the search path, not just the first")
@click.option("-p", "show_prefix", is_flag=True, help='Prefix each printed path with "<name>: "')
@click.option("-s", "quiet", is_flag=True, help="Print nothing, report through the exit status only")
@click.argument("programs", nargs=-1, required=True, metavar="PROGRAM...")
@click.pass_context
def cli(ctx, search_all, show_prefix, quiet, programs):
    """
    Locate executable programs in PATH.

    Each PROGRAM containing a "/" is checked as given; any other name is
    looked up in every directory of PATH, in order. PATH falls back to
    /usr/bin:/bin when unset or empty.

    Examples:
        # Where does ls come from?
        whichx ls

        # Every sh in PATH, prefixed with its name
        whichx -ap sh

        # Scripted existence check
        whichx -s git && echo "git available"
    """
    reporter = Reporter(ctx.info_name or "whichx")

    config = AppConfig()
    try:
        config.require_valid()
    except ConfigurationError as err:
        reporter.error(str(err))
        ctx.exit(ExitStatus.NONE)

    logger = setup_logging_from_config(config)
    logger.debug(f"Search path: {config.search.path}{' (default)' if config.search.is_default else ''}")

    options = ResolveOptions(search_all=search_all, show_prefix=show_prefix, quiet=quiet)
    result = run(programs, config.search.path, reporter, options)

    logger.debug(f"{result.attempts - result.errors}/{result.attempts} resolved")
    ctx.exit(int(result.exit_status))


def main() -> None:
    cli(prog_name="whichx")
