"""Find the project root and enumerate the files to align."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from alignby.config.defaults import DEFAULT_MAX_FILE_SIZE, DEFAULT_ROOT_MARKERS

logger = logging.getLogger(__name__)

_SKIPPED_DIRS = frozenset({".git"})


def find_project_root(start: str | Path | None = None, markers: Iterable[str] | None = None) -> Path:
    """Walk upward from ``start`` to the first directory holding a root marker.

    Falls back to ``start`` itself when no marker is found.
    """
    start = Path(start) if start is not None else Path.cwd()
    start = start.resolve()
    if start.is_file():
        start = start.parent
    markers = list(markers) if markers is not None else DEFAULT_ROOT_MARKERS

    for candidate in [start, *start.parents]:
        for marker in markers:
            if (candidate / marker).exists():
                logger.debug("Project root %s (found %s)", candidate, marker)
                return candidate

    logger.info("No project marker found above %s, using it as root", start)
    return start


def iter_files(path: str | Path, max_file_size: int = DEFAULT_MAX_FILE_SIZE) -> Iterator[Path]:
    """Yield every file under ``path`` that is eligible for alignment.

    Files over ``max_file_size`` bytes are skipped. Directories named in a
    ``.gitignore`` as ``/name`` are not descended into, nor is ``.git`` or
    any symlinked directory.
    """
    path = Path(path)
    try:
        is_file = path.is_file()
        size = path.stat().st_size if is_file else 0
    except OSError as e:
        logger.warning("Failed to get metadata of path %s: %s", path, e)
        return

    if is_file:
        if size > max_file_size:
            logger.warning("Skipping file %s because it is over %d bytes in size.", path, max_file_size)
            return
        yield path
        return

    if path.name in _SKIPPED_DIRS or not path.is_dir():
        return

    try:
        entries = sorted(path.iterdir())
    except OSError as e:
        logger.warning("Failed to read contents of path %s: %s", path, e)
        return

    ignored = read_ignored_dirs(path / ".gitignore")
    for entry in entries:
        if entry.name in ignored:
            logger.debug("Ignoring %s (listed in .gitignore)", entry)
            continue
        if entry.is_symlink() and entry.is_dir():
            logger.debug("Not following directory symlink %s", entry)
            continue
        yield from iter_files(entry, max_file_size)


def read_ignored_dirs(gitignore: Path) -> set[str]:
    """Return the top-level names anchored with a leading slash in ``gitignore``.

    Only simple ``/name`` entries are honoured; nested paths and globs are not.
    """
    if not gitignore.is_file():
        return set()
    try:
        content = gitignore.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Failed to read content of `.gitignore` at path %s: %s", gitignore, e)
        return set()

    ignored: set[str] = set()
    for line in content.splitlines():
        line = line.strip()
        if len(line) > 1 and line.startswith("/"):
            name = line[1:].rstrip("/")
            if name and "/" not in name:
                ignored.add(name)
    return ignored
