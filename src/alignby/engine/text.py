"""Whole-file text adapter around the line-based engine."""

from __future__ import annotations

import re

from alignby.engine.scanner import align

_LINE_RE = re.compile(r"([^\r\n]*)(\r\n|\n|\r|$)")


def split_lines(text: str) -> tuple[list[str], list[str]]:
    """Split ``text`` into bare lines and their terminators, by position.

    The last terminator is empty when the text has no trailing newline.
    """
    lines: list[str] = []
    endings: list[str] = []
    pos = 0
    while pos < len(text):
        match = _LINE_RE.match(text, pos)
        lines.append(match.group(1))
        endings.append(match.group(2))
        pos = match.end()
    return lines, endings


def join_lines(lines: list[str], endings: list[str]) -> str:
    return "".join(line + ending for line, ending in zip(lines, endings, strict=True))


def align_text(text: str, *, squeeze: bool = False) -> str:
    """Align a whole file's contents, keeping its line endings intact."""
    lines, endings = split_lines(text)
    return join_lines(align(lines, squeeze=squeeze), endings)
