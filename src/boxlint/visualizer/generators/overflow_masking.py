"""overflow-x: hidden on body clipping content instead of fixing it."""

from __future__ import annotations

from boxlint.model.visual import IssueType, VisualizerIssue
from boxlint.visualizer.generators.base import BaseGenerator, box_bottom, box_top
from boxlint.visualizer.palette import Chars

WIDTH = 14


class OverflowMaskingGenerator(BaseGenerator):
    issue_type = IssueType.OVERFLOW_MASKING
    title = "Overflow Masking"

    def render_before(self, issue: VisualizerIssue) -> list[str]:
        return [
            "body {",
            box_top(WIDTH),
            Chars.V_LINE + Chars.SOLID * WIDTH + Chars.V_LINE,
            Chars.V_LINE + Chars.LIGHT * WIDTH + Chars.ELLIPSIS + " hidden",
            box_bottom(WIDTH),
        ]

    def render_after(self, issue: VisualizerIssue) -> list[str]:
        solid = Chars.V_LINE + Chars.SOLID * WIDTH + Chars.V_LINE
        return ["body {", box_top(WIDTH), solid, solid, box_bottom(WIDTH)]
