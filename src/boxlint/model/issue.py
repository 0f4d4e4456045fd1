"""Issue model: typed layout findings produced by the detectors."""

from __future__ import annotations

import builtins
import dataclasses
import re
from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Severity assigned by a detector when the issue is created."""

    CRITICAL = "critical"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        """Sort key: critical first."""
        return _SEVERITY_RANK[self]

    @classmethod
    def parse(cls, value: str | Severity) -> Severity:
        if isinstance(value, Severity):
            return value
        return cls(str(value).strip().lower())


_SEVERITY_RANK = {Severity.CRITICAL: 0, Severity.MEDIUM: 1, Severity.LOW: 2}


@dataclass(frozen=True)
class SourceRange:
    """A span in the source text. Lines are 1-based, columns 0-based."""

    start_line: int
    start_col: int
    end_line: int
    end_col: int


@dataclass(frozen=True)
class Issue:
    """A detected responsive-layout risk.

    Attributes:
        kind: Fixed label naming the pattern, e.g. "Fixed width".
        severity: Assigned by the detector; never recomputed.
        explanation: What is wrong.
        viewport_impact: How the problem shows up across viewports.
        suggestion: How to fix it.
        selector: The rule selector the issue belongs to.
        property: The offending property, when a single declaration is at fault.
        value: The raw value of that declaration.
        line_number: Set by the line mapper (or the text fallback).
        range: Highlight span, set together with ``line_number``.
    """

    kind: str
    severity: Severity
    explanation: str
    viewport_impact: str
    suggestion: str
    selector: str = ""
    property: str | None = None
    value: str | None = None
    line_number: int | None = None
    range: SourceRange | None = None

    # The "property" and "range" fields shadow the builtins in this class body.
    @builtins.property
    def code(self) -> str:
        """Kebab-case identifier derived from the kind, e.g. ``fixed-width``."""
        return re.sub(r"\s+", "-", self.kind.strip().lower())

    @builtins.property
    def is_positioned(self) -> bool:
        return self.line_number is not None

    def with_position(self, line_number: int, range: SourceRange) -> Issue:
        """Return a copy carrying a source position."""
        return dataclasses.replace(self, line_number=line_number, range=range)

    def __str__(self) -> str:
        location = f"L{self.line_number} " if self.line_number is not None else ""
        return f"{location}{self.severity.value.upper()} {self.kind} [{self.selector}]"
