"""Custom exception hierarchy for alignby.

The alignment engine itself never raises; these cover the file and
configuration layers around it.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any


class AlignByError(Exception):
    """Base exception for all alignby errors."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        super().__init__(message)
        self.message = message


class FileAlignError(AlignByError):
    """Error isolated to a single file — other files continue.

    Examples: undecodable (non UTF-8) content, permission denied, disk full.
    """

    def __init__(
        self,
        message: str = "",
        path: str | Path | None = None,
        reason: str = "io_error",
        original: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.path = Path(path) if path is not None else None
        self.reason = reason
        self.original = original


class ConfigError(AlignByError):
    """Invalid configuration — fail fast."""

    def __init__(self, message: str = "", key: str | None = None) -> None:
        super().__init__(message)
        self.key = key
