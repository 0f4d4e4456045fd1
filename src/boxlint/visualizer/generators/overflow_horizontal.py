"""Horizontal scrolling caused by an over-wide element."""

from __future__ import annotations

from boxlint.model.visual import IssueType, VisualizerIssue
from boxlint.visualizer.generators.base import BaseGenerator, box_bottom, box_top
from boxlint.visualizer.generators.fixed_dimensions import overflow_bar
from boxlint.visualizer.layout import parse_length
from boxlint.visualizer.palette import Chars

SCALE = 20
VIEWPORT_PX = 375
DEFAULT_PX = 500


class OverflowHorizontalGenerator(BaseGenerator):
    issue_type = IssueType.OVERFLOW_HORIZONTAL
    title = "Overflow Horizontal"

    def render_before(self, issue: VisualizerIssue) -> list[str]:
        width = VIEWPORT_PX // SCALE
        element_px = parse_length(issue.value) or DEFAULT_PX
        scrollbar = Chars.V_LINE + Chars.MEDIUM * (width // 2) + Chars.LIGHT * (width - width // 2) + Chars.V_LINE
        return [
            "scrolls sideways",
            box_top(width),
            overflow_bar(element_px, VIEWPORT_PX, width),
            scrollbar,
            box_bottom(width),
        ]

    def render_after(self, issue: VisualizerIssue) -> list[str]:
        width = VIEWPORT_PX // SCALE
        return [
            "no scrollbar",
            box_top(width),
            Chars.V_LINE + Chars.SOLID * width + Chars.V_LINE,
            box_bottom(width),
        ]
