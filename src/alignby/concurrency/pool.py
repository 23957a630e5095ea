"""Bounded async pool for aligning many files at once."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

from alignby.types import FileOutcome, FileResult

logger = logging.getLogger(__name__)


class ConcurrencyPool:
    """Async dispatcher that runs a blocking per-file function in worker threads.

    At most ``max_workers`` files are in flight. Files share no state, so a
    failure in one is turned into a failed result without touching the rest.
    """

    def __init__(self, max_workers: int = 8) -> None:
        self._max_workers = max_workers

    @property
    def max_workers(self) -> int:
        return self._max_workers

    async def process_batch(
        self,
        process_fn: Callable[..., FileResult],
        file_paths: list[Path],
        **kwargs: Any,
    ) -> list[FileResult]:
        """Process a batch of files concurrently.

        Args:
            process_fn: Blocking callable(path, **kwargs) -> FileResult.
            file_paths: Files to process.
            **kwargs: Additional args passed to process_fn.

        Returns list of FileResult (one per file, in input order).
        """
        semaphore = asyncio.Semaphore(self._max_workers)

        async def worker(path: Path) -> FileResult:
            async with semaphore:
                return await asyncio.to_thread(process_fn, path, **kwargs)

        tasks = [worker(p) for p in file_paths]
        results = await asyncio.gather(*tasks, return_exceptions=True)

        final: list[FileResult] = []
        for path, result in zip(file_paths, results, strict=True):
            if isinstance(result, Exception):
                logger.error("File %s failed: %s", path, result)
                final.append(
                    FileResult(path=path, outcome=FileOutcome.FAILED, error=str(result))
                )
            else:
                final.append(result)

        return final
