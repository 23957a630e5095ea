"""alignby — align source lines on delimiters marked by `align_by` comments."""

from alignby.engine import align, align_text, scan
from alignby.errors.exceptions import (
    AlignByError,
    ConfigError,
    FileAlignError,
)
from alignby.types import (
    AlignDirective,
    FileOutcome,
    FileResult,
    Group,
    RunSummary,
    StopDirective,
)

__all__ = [
    "align",
    "align_text",
    "scan",
    "AlignDirective",
    "StopDirective",
    "Group",
    "FileOutcome",
    "FileResult",
    "RunSummary",
    "AlignByError",
    "FileAlignError",
    "ConfigError",
]
