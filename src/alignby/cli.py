"""Click CLI for alignby — align marked source lines in place."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from alignby.config.hierarchy import load_settings
from alignby.errors.exceptions import AlignByError
from alignby.types import FileOutcome

console = Console()
error_console = Console(stderr=True)


def _resolve_level(verbosity: int, default_level: str = "WARNING") -> int:
    """Pick a log level: -v flags win over the configured level."""
    if verbosity == 1:
        return logging.INFO
    if verbosity >= 2:
        return logging.DEBUG
    level = logging.getLevelName(default_level.upper())
    return level if isinstance(level, int) else logging.WARNING


def _setup_logging(verbosity: int, default_level: str = "WARNING") -> None:
    """Configure logging based on verbosity level."""
    logging.basicConfig(
        level=_resolve_level(verbosity, default_level),
        format="%(message)s",
        handlers=[RichHandler(console=error_console, show_time=False, show_path=False)],
        force=True,
    )


@click.group()
@click.version_option(package_name="alignby")
def cli() -> None:
    """alignby — align source lines on delimiters named in `align_by` comments."""


@cli.command()
@click.argument("paths", nargs=-1, type=click.Path(exists=True))
@click.option("--check", is_flag=True, default=False, help="Report files that would change; write nothing.")
@click.option("--squeeze", is_flag=True, default=False, help="Collapse stale padding before aligning.")
@click.option("--workers", type=int, default=None, help="Concurrent file workers.")
@click.option("--max-file-size", type=int, default=None, help="Skip files larger than this many bytes.")
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug).")
def run(
    paths: tuple[str, ...],
    check: bool,
    squeeze: bool,
    workers: int | None,
    max_file_size: int | None,
    verbose: int,
) -> None:
    """Align files under PATHS (default: the discovered project root)."""
    from alignby.workspace.discovery import find_project_root
    from alignby.workspace.runner import align_paths

    _setup_logging(verbose)

    try:
        settings = load_settings(
            squeeze=squeeze or None,
            max_workers=workers,
            max_file_size=max_file_size,
        )
    except AlignByError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)

    logging.getLogger().setLevel(_resolve_level(verbose, settings.log_level))

    targets = [Path(p) for p in paths] or [find_project_root(markers=settings.root_markers)]

    summary = align_paths(
        targets,
        squeeze=settings.squeeze,
        dry_run=check,
        max_workers=settings.max_workers,
        max_file_size=settings.max_file_size,
    )

    if check:
        for result in summary.results:
            if result.outcome == FileOutcome.ALIGNED:
                console.print(f"[yellow]Would align[/yellow] {result.path}")

    console.print(f"Aligning finished, {summary.describe()}")

    if check and summary.aligned:
        sys.exit(1)


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
def scan(file: str) -> None:
    """List the alignment groups found in FILE."""
    from alignby.engine.scanner import scan as scan_lines
    from alignby.engine.text import split_lines
    from alignby.workspace.runner import read_source

    try:
        lines, _ = split_lines(read_source(Path(file)))
    except AlignByError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)

    groups = scan_lines(lines)
    if not groups:
        console.print("[yellow]No alignment groups found.[/yellow]")
        return

    table = Table(title="Alignment Groups", caption=file, show_header=True)
    table.add_column("Directive line", style="cyan")
    table.add_column("Lines")
    table.add_column("Delimiters")
    table.add_column("Sort")

    for group in groups:
        table.add_row(
            str(group.start),
            f"{group.start + 1}-{group.end}",
            " ".join(group.directive.delimiters),
            "yes" if group.directive.sort else "no",
        )

    console.print(table)


def main() -> None:
    """Entry point for the CLI."""
    cli()
