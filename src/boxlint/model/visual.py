"""Diagram model: the diagram-ready issue projection and the rendered output."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from boxlint.model.issue import Severity


class IssueType(Enum):
    """The twelve diagram types."""

    FIXED_DIMENSIONS = "fixed-dimensions"
    VIEWPORT_OVERFLOW = "viewport-overflow"
    FLEX_FRAGILITY = "flex-fragility"
    GRID_RIGIDITY = "grid-rigidity"
    FIXED_SPACING = "fixed-spacing"
    MEDIA_INSTABILITY = "media-instability"
    OVERFLOW_MASKING = "overflow-masking"
    BREAKPOINT_EXCEEDED = "breakpoint-exceeded"
    ABSOLUTE_RIGIDITY = "absolute-rigidity"
    BOX_INCONSISTENCY = "box-inconsistency"
    OVERFLOW_HORIZONTAL = "overflow-horizontal"
    NOWRAP_FIXED = "nowrap-fixed"


class Category(Enum):
    """Coarse grouping used by presentation layers for filtering."""

    FLEX = "flex"
    GRID = "grid"
    OVERFLOW = "overflow"
    OTHER = "other"


@dataclass(frozen=True)
class VisualizerIssue:
    """The reduced projection of an Issue that diagram generators consume."""

    type: str
    severity: Severity
    line: int
    selector: str
    property: str
    value: str
    suggestion: str = ""
    category: Category = Category.OTHER


@dataclass(frozen=True)
class Visualization:
    """A rendered diagram."""

    ascii: str
    width: int
    height: int
    generation_time_ms: float = 0.0

    @property
    def lines(self) -> list[str]:
        return self.ascii.split("\n")
