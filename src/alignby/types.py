"""Shared Pydantic models for alignby."""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path

from pydantic import BaseModel, Field

# ── Enums ──


class DirectiveKind(StrEnum):
    STOP = "stop"
    ALIGN = "align"


class FileOutcome(StrEnum):
    ALIGNED = "aligned"
    UNCHANGED = "unchanged"
    FAILED = "failed"


# ── Directives ──


class StopDirective(BaseModel):
    """`align_by stop`: everything from this line on is left alone."""

    kind: DirectiveKind = DirectiveKind.STOP
    model_config = {"frozen": True}


class AlignDirective(BaseModel):
    """`align_by [sort] "<delimiters>"`."""

    kind: DirectiveKind = DirectiveKind.ALIGN
    delimiters: tuple[str, ...]
    sort: bool = False
    model_config = {"frozen": True}

    @property
    def leading(self) -> str:
        """The delimiter that decides group membership."""
        return self.delimiters[0]


Directive = StopDirective | AlignDirective


class Group(BaseModel):
    """A run of lines collected under one align directive.

    ``start`` is the 0-based index of the first grouped line; the directive
    itself sits on the line before it.
    """

    directive: AlignDirective
    start: int
    size: int = 0

    @property
    def end(self) -> int:
        return self.start + self.size


# ── Runtime models ──


class FileResult(BaseModel):
    path: Path
    outcome: FileOutcome
    groups: int = 0
    error: str | None = None


class RunSummary(BaseModel):
    results: list[FileResult] = Field(default_factory=list)

    def count(self, outcome: FileOutcome) -> int:
        return sum(1 for r in self.results if r.outcome == outcome)

    @property
    def failed(self) -> int:
        return self.count(FileOutcome.FAILED)

    @property
    def unchanged(self) -> int:
        return self.count(FileOutcome.UNCHANGED)

    @property
    def aligned(self) -> int:
        return self.count(FileOutcome.ALIGNED)

    def describe(self) -> str:
        """One-line human summary of the run."""
        return f"{self.failed} failed, {self.unchanged} unchanged, {self.aligned} aligned."
