"""Walk a file's lines, find directives, and realign the groups they open."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from alignby.engine.columns import align_group
from alignby.engine.directives import parse_directive
from alignby.types import AlignDirective, Group, StopDirective

logger = logging.getLogger(__name__)


@dataclass
class ScanState:
    """Per-file scanning state threaded through the line loop."""

    active: AlignDirective | None = None
    group: Group | None = None
    stopped: bool = False
    groups: list[Group] = field(default_factory=list)

    def open(self, directive: AlignDirective, start: int) -> None:
        self.active = directive
        self.group = Group(directive=directive, start=start)

    def close(self) -> None:
        if self.group is not None and self.group.size:
            self.groups.append(self.group)
        self.active = None
        self.group = None


def _step(state: ScanState, index: int, line: str) -> None:
    """Advance ``state`` past ``line``."""
    directive = parse_directive(line)

    if state.active is not None:
        if directive is None and state.active.leading in line:
            state.group.size += 1
            return
        state.close()

    if isinstance(directive, StopDirective):
        state.stopped = True
    elif isinstance(directive, AlignDirective):
        state.open(directive, index + 1)


def scan(lines: Sequence[str]) -> list[Group]:
    """Return the non-empty groups found in ``lines`` without rewriting them."""
    state = ScanState()
    for index, line in enumerate(lines):
        _step(state, index, line)
        if state.stopped:
            break
    state.close()
    return state.groups


def align(lines: Sequence[str], *, squeeze: bool = False) -> list[str]:
    """Realign every directive group in ``lines``.

    Never fails and never changes the number of lines; text outside groups,
    and everything from an `align_by stop` marker on, is returned untouched.
    """
    result = list(lines)
    for group in scan(lines):
        directive = group.directive
        result[group.start : group.end] = align_group(
            result[group.start : group.end],
            directive.delimiters,
            sort=directive.sort,
            squeeze=squeeze,
        )
        logger.debug(
            "Aligned %d line(s) at line %d on %r",
            group.size,
            group.start + 1,
            " ".join(directive.delimiters),
        )
    return result
