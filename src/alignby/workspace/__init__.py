"""Workspace — root discovery, file enumeration and the per-file runner."""

from alignby.workspace.discovery import find_project_root, iter_files
from alignby.workspace.runner import align_file, align_paths

__all__ = ["find_project_root", "iter_files", "align_file", "align_paths"]
