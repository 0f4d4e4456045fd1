"""Rigid flex row versus a wrapping one."""

from __future__ import annotations

from boxlint.model.visual import IssueType, VisualizerIssue
from boxlint.visualizer.generators.base import BaseGenerator, box_bottom, box_top
from boxlint.visualizer.palette import Chars

CONTAINER = 18
ITEM = 6
ITEMS = 4


def _item(width: int) -> str:
    return Chars.SOLID * (width - 1) + " "


class FlexFragilityGenerator(BaseGenerator):
    issue_type = IssueType.FLEX_FRAGILITY
    title = "Flex Fragility"

    def render_before(self, issue: VisualizerIssue) -> list[str]:
        fitted = CONTAINER // ITEM
        row = Chars.V_LINE + _item(ITEM) * fitted + Chars.MEDIUM * 2 + Chars.RIGHT
        return ["nowrap, fixed basis", box_top(CONTAINER), row, box_bottom(CONTAINER)]

    def render_after(self, issue: VisualizerIssue) -> list[str]:
        per_row = CONTAINER // ITEM
        rows = []
        remaining = ITEMS
        while remaining > 0:
            count = min(per_row, remaining)
            rows.append(Chars.V_LINE + (_item(ITEM) * count).ljust(CONTAINER) + Chars.V_LINE)
            remaining -= count
        return ["wraps onto new rows", box_top(CONTAINER), *rows, box_bottom(CONTAINER)]
