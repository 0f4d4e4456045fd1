"""white-space: nowrap inside a fixed-width box."""

from __future__ import annotations

import textwrap

from boxlint.model.visual import IssueType, VisualizerIssue
from boxlint.visualizer.generators.base import BaseGenerator, box_bottom, box_top
from boxlint.visualizer.palette import Chars

WIDTH = 16
SAMPLE = "Long text content here"


class NowrapFixedGenerator(BaseGenerator):
    issue_type = IssueType.NOWRAP_FIXED
    title = "Nowrap Fixed"

    def render_before(self, issue: VisualizerIssue) -> list[str]:
        clipped = SAMPLE[: WIDTH - 1] + Chars.ELLIPSIS
        return ["single line", box_top(WIDTH), Chars.V_LINE + clipped + Chars.RIGHT, box_bottom(WIDTH)]

    def render_after(self, issue: VisualizerIssue) -> list[str]:
        rows = [Chars.V_LINE + line.ljust(WIDTH) + Chars.V_LINE for line in textwrap.wrap(SAMPLE, WIDTH)]
        return ["wraps naturally", box_top(WIDTH), *rows, box_bottom(WIDTH)]
