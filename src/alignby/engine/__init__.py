"""Alignment engine — directive scanning and column padding."""

from alignby.engine.columns import align_group
from alignby.engine.directives import parse_directive
from alignby.engine.scanner import ScanState, align, scan
from alignby.engine.text import align_text

__all__ = [
    "align",
    "align_text",
    "align_group",
    "parse_directive",
    "scan",
    "ScanState",
]
