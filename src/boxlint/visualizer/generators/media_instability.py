"""Layout that changes abruptly at a breakpoint."""

from __future__ import annotations

from boxlint.model.visual import IssueType, VisualizerIssue
from boxlint.visualizer.generators.base import BaseGenerator, box_bottom, box_top
from boxlint.visualizer.palette import Chars

WIDTH = 18


class MediaInstabilityGenerator(BaseGenerator):
    issue_type = IssueType.MEDIA_INSTABILITY
    title = "Media Instability"

    def render_before(self, issue: VisualizerIssue) -> list[str]:
        return [
            "Mobile 375px",
            box_top(WIDTH),
            Chars.V_LINE + Chars.SOLID * (WIDTH - 4) + Chars.MEDIUM * 2 + Chars.RIGHT + " breaks",
            Chars.V_LINE + Chars.LIGHT * WIDTH + Chars.V_LINE,
            box_bottom(WIDTH),
        ]

    def render_after(self, issue: VisualizerIssue) -> list[str]:
        return [
            "Mobile 375px",
            box_top(WIDTH),
            Chars.V_LINE + Chars.SOLID * WIDTH + Chars.V_LINE + " stable",
            Chars.V_LINE + Chars.SOLID * WIDTH + Chars.V_LINE,
            box_bottom(WIDTH),
        ]
