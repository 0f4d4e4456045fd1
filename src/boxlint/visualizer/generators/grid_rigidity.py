"""Fixed grid tracks versus auto-fit tracks that reflow."""

from __future__ import annotations

from boxlint.model.visual import IssueType, VisualizerIssue
from boxlint.visualizer.generators.base import BaseGenerator, box_bottom, box_top
from boxlint.visualizer.palette import Chars

CONTAINER = 18
TRACK = 5
MIN_TRACKS = 4
MAX_TRACKS = 6


def track_count(value: str) -> int:
    """Number of tracks named in *value*, kept within the drawable range."""
    return max(MIN_TRACKS, min(len(value.split()), MAX_TRACKS))


def _track() -> str:
    return Chars.SOLID * TRACK + " "


class GridRigidityGenerator(BaseGenerator):
    issue_type = IssueType.GRID_RIGIDITY
    title = "Grid Rigidity"

    def render_before(self, issue: VisualizerIssue) -> list[str]:
        fitted = CONTAINER // (TRACK + 1)
        row = Chars.V_LINE + _track() * fitted + Chars.RIGHT
        return [f"{track_count(issue.value)} fixed tracks", box_top(CONTAINER), row, row, box_bottom(CONTAINER)]

    def render_after(self, issue: VisualizerIssue) -> list[str]:
        per_row = CONTAINER // (TRACK + 1)
        total = track_count(issue.value)
        rows = []
        while total > 0:
            count = min(per_row, total)
            rows.append(Chars.V_LINE + (_track() * count).ljust(CONTAINER) + Chars.V_LINE)
            total -= count
        return ["auto-fit, minmax()", box_top(CONTAINER), *rows, box_bottom(CONTAINER)]
