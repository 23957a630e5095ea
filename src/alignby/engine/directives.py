"""Recognise `align_by` marker directives inside a line of text."""

from __future__ import annotations

import re

from alignby.types import AlignDirective, Directive, StopDirective

STOP_MARKER = "align_by stop"
ALIGN_MARKER = "align_by"

# `\"` is an escaped quote; any other backslash is literal.
_ALIGN_RE = re.compile(r'align_by( sort)? "((?:\\"|\\(?!")|[^"\\])*)"')


def parse_directive(line: str) -> Directive | None:
    """Return the directive carried by ``line``, or None for ordinary text.

    Stop wins over an align marker on the same line. An align marker whose
    quote never closes, or whose delimiter list is empty, is not a directive.
    Only the first `align_by` on the line is considered.
    """
    if STOP_MARKER in line:
        return StopDirective()

    start = line.find(ALIGN_MARKER)
    if start < 0:
        return None

    match = _ALIGN_RE.match(line, start)
    if match is None:
        return None

    delimiters = split_delimiters(match.group(2))
    if not delimiters:
        return None

    return AlignDirective(delimiters=delimiters, sort=match.group(1) is not None)


def split_delimiters(spec: str) -> tuple[str, ...]:
    """Split quoted directive content into delimiter tokens, unescaping `\\"`."""
    return tuple(token.replace('\\"', '"') for token in spec.split())
