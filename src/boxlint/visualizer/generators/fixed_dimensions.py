"""Fixed width/height: a pixel box pushing past a narrow viewport."""

from __future__ import annotations

from boxlint.model.visual import IssueType, VisualizerIssue
from boxlint.visualizer.generators.base import BaseGenerator, box_bottom, box_top
from boxlint.visualizer.layout import calculate_proportions, parse_length
from boxlint.visualizer.palette import Chars

SCALE = 20  # px per character
VIEWPORT_PX = 400
DEFAULT_PX = 600
MAX_SPILL = 3


def overflow_bar(element_px: float, container_px: float, chars: int) -> str:
    """One row of an element drawn against a container *chars* columns wide.

    An element wider than the container spills past the right border.
    """
    dims = calculate_proportions(element_px, container_px, chars)
    if not dims.overflow:
        return Chars.V_LINE + Chars.SOLID * dims.width + " " * (chars - dims.width) + Chars.V_LINE
    spill = min(dims.excess, MAX_SPILL)
    return Chars.V_LINE + Chars.SOLID * dims.width + Chars.MEDIUM * spill + Chars.RIGHT


class FixedDimensionsGenerator(BaseGenerator):
    issue_type = IssueType.FIXED_DIMENSIONS
    title = "Fixed Dimensions"

    def render_before(self, issue: VisualizerIssue) -> list[str]:
        width = VIEWPORT_PX // SCALE
        element_px = parse_length(issue.value) or DEFAULT_PX
        bar = overflow_bar(element_px, VIEWPORT_PX, width)
        return [f"viewport {VIEWPORT_PX}px", box_top(width), bar, bar, box_bottom(width)]

    def render_after(self, issue: VisualizerIssue) -> list[str]:
        width = VIEWPORT_PX // SCALE
        bar = Chars.V_LINE + Chars.SOLID * width + Chars.V_LINE
        return ["fits any viewport", box_top(width), bar, bar, box_bottom(width)]
