"""content-box sizing growing past the declared width."""

from __future__ import annotations

from boxlint.model.visual import IssueType, VisualizerIssue
from boxlint.visualizer.generators.base import BaseGenerator, box_bottom, box_top
from boxlint.visualizer.palette import Chars

DECLARED = 12
PADDING = 2


class BoxInconsistencyGenerator(BaseGenerator):
    issue_type = IssueType.BOX_INCONSISTENCY
    title = "Box Inconsistency"

    def render_before(self, issue: VisualizerIssue) -> list[str]:
        grown = DECLARED + 2 * PADDING
        row = Chars.V_LINE + Chars.LIGHT * PADDING + Chars.SOLID * DECLARED + Chars.LIGHT * PADDING + Chars.RIGHT
        return [f"content-box: {grown} cols", box_top(grown), row, box_bottom(grown)]

    def render_after(self, issue: VisualizerIssue) -> list[str]:
        inner = DECLARED - 2 * PADDING
        row = Chars.V_LINE + Chars.LIGHT * PADDING + Chars.SOLID * inner + Chars.LIGHT * PADDING + Chars.V_LINE
        return [f"border-box: {DECLARED} cols", box_top(DECLARED), row, box_bottom(DECLARED)]
