"""The ``find`` command: stream files whose path matches a pattern.

Commands:
    fsfind find PATTERN DIR
    fsfind find -F "a+b" DIR --recursive --max-depth 4
    fsfind find "\\.py$" DIR -r --name-only --count --stats

Exit codes follow grep: 0 when something matched, 1 when nothing did,
2 on a fatal error (bad pattern, unreadable root, invalid settings).
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from fsfind.configuration.settings import DEFAULT_CONFIG_PATH, resolve_settings
from fsfind.errors import FsfindError, format_error_for_cli
from fsfind.matching import MatchMode, PatternMatcher
from fsfind.search import MatchTarget, SearchResults, search_paths

logger = logging.getLogger(__name__)

console = Console(stderr=True)

EXIT_MATCHED = 0
EXIT_NO_MATCH = 1
EXIT_ERROR = 2


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )


_STAT_LABELS = {
    "files_seen": "Files seen",
    "dirs_opened": "Directories opened",
    "symlinks_skipped": "Symlinks skipped",
    "boundary_dirs_skipped": "Directories beyond max depth",
    "errors": "Errors",
}


def _render_stats(results: SearchResults) -> Table:
    table = Table(title="Search statistics")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")
    table.add_row("Files checked", f"{results.files_checked:,}")
    table.add_row("Matches", f"{results.matches:,}")
    for name, value in results.stats.as_dict().items():
        table.add_row(_STAT_LABELS.get(name, name), f"{value:,}")
    table.add_row("Elapsed", f"{results.elapsed:.3f}s")
    return table


def find_files(
    pattern: str = typer.Argument(..., help="Pattern to search for"),
    directory: Path = typer.Argument(..., help="Directory to search"),
    fixed_strings: bool = typer.Option(
        False, "--fixed-strings", "-F", help="Treat the pattern as literal text"
    ),
    recursive: bool = typer.Option(False, "--recursive", "-r", help="Search subdirectories"),
    max_depth: Optional[int] = typer.Option(
        None, "--max-depth", min=1, help="Maximum number of directory levels to open"
    ),
    name_only: bool = typer.Option(
        False, "--name-only", help="Match against file names instead of full paths"
    ),
    debug: bool = typer.Option(False, "--debug", help="Report skipped entries and directories"),
    count: bool = typer.Option(False, "--count", "-c", help="Print only the number of matches"),
    show_stats: bool = typer.Option(False, "--stats", help="Print search statistics to stderr"),
    config_path: Path = typer.Option(DEFAULT_CONFIG_PATH, help="Path to config file"),
) -> None:
    """Print files under DIRECTORY whose path matches PATTERN."""

    _configure_logging(debug)
    overrides = {
        "recurse": True if recursive else None,
        "max_depth": max_depth,
        "debug_logging": True if debug else None,
        "match_mode": MatchMode.LITERAL if fixed_strings else None,
        "target": MatchTarget.NAME if name_only else None,
    }

    try:
        settings = resolve_settings(config_path, overrides=overrides).search
        matcher = PatternMatcher.compile(pattern, settings.match_mode)
        results = search_paths(
            directory,
            matcher,
            settings.walker_config(),
            target=settings.target,
        )
    except FsfindError as exc:
        logger.debug("Search aborted before traversal", exc_info=exc)
        console.print(format_error_for_cli(exc), style="bold red", markup=False, highlight=False)
        raise typer.Exit(code=EXIT_ERROR)

    with results:
        for path in results:
            if not count:
                typer.echo(path)

    if count:
        typer.echo(results.matches)
    if show_stats:
        console.print(_render_stats(results))

    raise typer.Exit(code=EXIT_MATCHED if results.matches else EXIT_NO_MATCH)
