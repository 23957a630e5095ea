"""Column alignment of a single group of lines."""

from __future__ import annotations

import re
from collections.abc import Sequence

from rich.cells import cell_len

_INNER_WHITESPACE = re.compile(r"\s+")


def squeeze_whitespace(line: str) -> str:
    """Collapse whitespace runs after the leading indentation to one space."""
    body = line.lstrip()
    indent = line[: len(line) - len(body)]
    return indent + _INNER_WHITESPACE.sub(" ", body)


def split_columns(line: str, delimiters: Sequence[str]) -> list[tuple[str, str | None]]:
    """Break ``line`` into ``(segment, delimiter)`` pairs, one per delimiter.

    Each delimiter is searched for in what is left after the previous match and
    only its first occurrence counts. A delimiter that is missing yields
    ``("", None)`` and the search for the next one continues from the same
    place. The final pair holds the unconsumed tail with a None delimiter.
    """
    columns: list[tuple[str, str | None]] = []
    rest = line
    for delimiter in delimiters:
        segment, found, tail = rest.partition(delimiter)
        if found:
            columns.append((segment, delimiter))
            rest = tail
        else:
            columns.append(("", None))
    columns.append((rest, None))
    return columns


def align_group(
    lines: Sequence[str],
    delimiters: Sequence[str],
    sort: bool = False,
    squeeze: bool = False,
) -> list[str]:
    """Pad ``lines`` so every delimiter sits in the same column.

    The first column is left-justified; later columns are right-justified
    against the delimiter that precedes them. Widths are terminal cells.
    Sorting, when requested, is applied to the already padded lines.
    """
    if squeeze:
        lines = [squeeze_whitespace(line) for line in lines]
    rows = [split_columns(line, delimiters) for line in lines]

    for col in range(len(delimiters)):
        matched = [row for row in rows if row[col][1] is not None]
        if not matched:
            continue
        width = max(cell_len(row[col][0]) for row in matched)
        for row in matched:
            segment, delimiter = row[col]
            padding = " " * (width - cell_len(segment))
            if _follows_match(row, col):
                row[col] = (padding + segment, delimiter)
            else:
                row[col] = (segment + padding, delimiter)

    aligned = [_join(row) for row in rows]
    if sort:
        aligned.sort()
    return aligned


def _follows_match(row: list[tuple[str, str | None]], col: int) -> bool:
    """True when an earlier delimiter was matched on this row."""
    return any(delimiter is not None for _, delimiter in row[:col])


def _join(row: list[tuple[str, str | None]]) -> str:
    return "".join(segment + (delimiter or "") for segment, delimiter in row)
