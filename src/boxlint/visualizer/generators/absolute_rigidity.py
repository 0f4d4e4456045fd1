"""Absolutely positioned element pinned at a pixel offset."""

from __future__ import annotations

from boxlint.model.visual import IssueType, VisualizerIssue
from boxlint.visualizer.generators.base import BaseGenerator, box_bottom, box_top
from boxlint.visualizer.palette import Chars

CONTAINER = 18
ELEMENT = 6


def _placed(offset: int) -> str:
    row = " " * offset + Chars.SOLID * ELEMENT
    if len(row) > CONTAINER:
        return Chars.V_LINE + row[:CONTAINER] + Chars.RIGHT
    return Chars.V_LINE + row.ljust(CONTAINER) + Chars.V_LINE


class AbsoluteRigidityGenerator(BaseGenerator):
    issue_type = IssueType.ABSOLUTE_RIGIDITY
    title = "Absolute Rigidity"

    def render_before(self, issue: VisualizerIssue) -> list[str]:
        row = _placed(14)
        return ["left at fixed px", box_top(CONTAINER), row, row, box_bottom(CONTAINER)]

    def render_after(self, issue: VisualizerIssue) -> list[str]:
        row = _placed(6)
        return ["relative offset", box_top(CONTAINER), row, row, box_bottom(CONTAINER)]
