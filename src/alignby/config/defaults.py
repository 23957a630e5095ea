"""Package-level default configuration values."""

from __future__ import annotations

from typing import Any

# Default file handling
DEFAULT_MAX_FILE_SIZE = 1 << 20
DEFAULT_ROOT_MARKERS = ["pyproject.toml", "setup.cfg", "setup.py", "Cargo.toml", ".git"]

# Default alignment behaviour
DEFAULT_SQUEEZE = False

# Default concurrency settings
DEFAULT_MAX_WORKERS = 8

# Log level
DEFAULT_LOG_LEVEL = "WARNING"


def get_defaults() -> dict[str, Any]:
    """Return all defaults as a flat dictionary for merging."""
    return {
        "max_file_size": DEFAULT_MAX_FILE_SIZE,
        "root_markers": list(DEFAULT_ROOT_MARKERS),
        "squeeze": DEFAULT_SQUEEZE,
        "max_workers": DEFAULT_MAX_WORKERS,
        "log_level": DEFAULT_LOG_LEVEL,
    }
