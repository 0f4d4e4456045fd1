"""A fixed width wider than the media query it lives in."""

from __future__ import annotations

from boxlint.model.visual import IssueType, VisualizerIssue
from boxlint.visualizer.generators.base import BaseGenerator, box_bottom, box_top
from boxlint.visualizer.generators.fixed_dimensions import overflow_bar
from boxlint.visualizer.layout import parse_length
from boxlint.visualizer.palette import Chars

SCALE = 64
BREAKPOINT_PX = 768
DEFAULT_PX = 900
FLUID_WIDTH = 16


class BreakpointExceededGenerator(BaseGenerator):
    issue_type = IssueType.BREAKPOINT_EXCEEDED
    title = "Breakpoint Exceeded"

    def render_before(self, issue: VisualizerIssue) -> list[str]:
        width = BREAKPOINT_PX // SCALE
        element_px = parse_length(issue.value) or DEFAULT_PX
        return [
            f"@media (max: {BREAKPOINT_PX}px)",
            box_top(width),
            overflow_bar(max(element_px, BREAKPOINT_PX + SCALE), BREAKPOINT_PX, width),
            box_bottom(width),
        ]

    def render_after(self, issue: VisualizerIssue) -> list[str]:
        return [
            "max-width: 100%",
            box_top(FLUID_WIDTH),
            Chars.V_LINE + Chars.SOLID * FLUID_WIDTH + Chars.V_LINE,
            box_bottom(FLUID_WIDTH),
        ]
