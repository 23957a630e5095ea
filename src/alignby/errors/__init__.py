"""Error handling — exceptions raised around the alignment engine."""

from alignby.errors.exceptions import (
    AlignByError,
    ConfigError,
    FileAlignError,
)

__all__ = [
    "AlignByError",
    "FileAlignError",
    "ConfigError",
]
