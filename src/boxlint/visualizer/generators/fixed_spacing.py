"""Pixel padding eating into a narrow container."""

from __future__ import annotations

from boxlint.model.visual import IssueType, VisualizerIssue
from boxlint.visualizer.generators.base import BaseGenerator, box_bottom, box_top
from boxlint.visualizer.layout import parse_length, scale_to_chars
from boxlint.visualizer.palette import Chars

CONTAINER = 18
MAX_PADDING = 4
FLUID_PADDING = 2
DEFAULT_PX = 40  # drawn at MAX_PADDING


def _padded(padding: int) -> list[str]:
    band = Chars.V_LINE + Chars.LIGHT * CONTAINER + Chars.V_LINE
    inner = CONTAINER - 2 * padding
    content = (
        Chars.V_LINE + Chars.LIGHT * padding + Chars.SOLID * inner + Chars.LIGHT * padding + Chars.V_LINE
    )
    return [box_top(CONTAINER), band, content, content, band, box_bottom(CONTAINER)]


class FixedSpacingGenerator(BaseGenerator):
    issue_type = IssueType.FIXED_SPACING
    title = "Fixed Spacing"

    def render_before(self, issue: VisualizerIssue) -> list[str]:
        px = parse_length(issue.value) or DEFAULT_PX
        padding = min(scale_to_chars(px, MAX_PADDING, DEFAULT_PX), MAX_PADDING)
        return ["same padding, any size", *_padded(padding)]

    def render_after(self, issue: VisualizerIssue) -> list[str]:
        return ["padding scales down", *_padded(FLUID_PADDING)]
