"""Viewport-relative width overflowing a mobile screen."""

from __future__ import annotations

from boxlint.model.visual import IssueType, VisualizerIssue
from boxlint.visualizer.generators.base import BaseGenerator, box_bottom, box_top
from boxlint.visualizer.generators.fixed_dimensions import overflow_bar
from boxlint.visualizer.layout import parse_length
from boxlint.visualizer.palette import Chars

SCALE = 25
MOBILE_PX = 375
DEFAULT_PX = 1920


class ViewportOverflowGenerator(BaseGenerator):
    issue_type = IssueType.VIEWPORT_OVERFLOW
    title = "Viewport Overflow"

    def render_before(self, issue: VisualizerIssue) -> list[str]:
        width = MOBILE_PX // SCALE
        element_px = parse_length(issue.value) or DEFAULT_PX
        bar = overflow_bar(element_px, MOBILE_PX, width)
        return [f"Mobile {MOBILE_PX}px", box_top(width), bar, box_bottom(width)]

    def render_after(self, issue: VisualizerIssue) -> list[str]:
        width = MOBILE_PX // SCALE
        return [
            f"Mobile {MOBILE_PX}px",
            box_top(width),
            Chars.V_LINE + Chars.SOLID * width + Chars.V_LINE,
            box_bottom(width),
        ]
