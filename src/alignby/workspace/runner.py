"""Read, align and write back files, collecting a run summary."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable
from pathlib import Path

from alignby.concurrency.pool import ConcurrencyPool
from alignby.config.defaults import DEFAULT_MAX_FILE_SIZE, DEFAULT_MAX_WORKERS
from alignby.engine.scanner import align, scan
from alignby.engine.text import join_lines, split_lines
from alignby.errors.exceptions import FileAlignError
from alignby.types import FileOutcome, FileResult, RunSummary
from alignby.workspace.discovery import iter_files

logger = logging.getLogger(__name__)


def read_source(path: Path) -> str:
    """Read ``path`` as UTF-8 without newline translation."""
    try:
        with open(path, encoding="utf-8", newline="") as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise FileAlignError(
            f"{path} is not valid UTF-8", path=path, reason="decode_error", original=e
        ) from e
    except OSError as e:
        raise FileAlignError(f"Failed to read {path}: {e}", path=path, original=e) from e


def write_source(path: Path, content: str) -> None:
    try:
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(content)
    except OSError as e:
        raise FileAlignError(
            f"Failed to write aligned content to file at path {path}: {e}",
            path=path,
            original=e,
        ) from e


def align_file(path: Path, squeeze: bool = False, dry_run: bool = False) -> FileResult:
    """Align one file in place.

    In dry-run mode nothing is written, but the outcome still reports
    whether the file would change.
    """
    try:
        original = read_source(path)
        lines, endings = split_lines(original)
        groups = scan(lines)
        aligned = join_lines(align(lines, squeeze=squeeze), endings)

        if aligned == original:
            return FileResult(path=path, outcome=FileOutcome.UNCHANGED, groups=len(groups))

        if not dry_run:
            write_source(path, aligned)
        logger.info("%s %s", "Would align" if dry_run else "Aligned", path)
        return FileResult(path=path, outcome=FileOutcome.ALIGNED, groups=len(groups))
    except FileAlignError as e:
        logger.warning("%s", e.message)
        return FileResult(path=path, outcome=FileOutcome.FAILED, error=e.message)


def collect_files(paths: Iterable[str | Path], max_file_size: int = DEFAULT_MAX_FILE_SIZE) -> list[Path]:
    """Expand files and directories into an ordered file list.

    Each underlying file appears once, however many paths lead to it, so no two
    workers ever touch the same file.
    """
    seen: set[Path] = set()
    files: list[Path] = []
    for root in paths:
        for file in iter_files(root, max_file_size):
            real = file.resolve()
            if real not in seen:
                seen.add(real)
                files.append(file)
    return files


def align_paths(
    paths: Iterable[str | Path],
    *,
    squeeze: bool = False,
    dry_run: bool = False,
    max_workers: int = DEFAULT_MAX_WORKERS,
    max_file_size: int = DEFAULT_MAX_FILE_SIZE,
) -> RunSummary:
    """Align every eligible file under ``paths`` and summarise the outcome."""
    files = collect_files(paths, max_file_size)
    logger.info("Aligning %d file(s) with %d worker(s)", len(files), max_workers)

    pool = ConcurrencyPool(max_workers=max_workers)
    results = asyncio.run(
        pool.process_batch(align_file, files, squeeze=squeeze, dry_run=dry_run)
    )
    return RunSummary(results=results)
