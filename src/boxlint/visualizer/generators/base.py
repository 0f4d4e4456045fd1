"""BaseGenerator: shared frame, comparison, and footer rendering.

Every diagram has the same skeleton::

    ┌──────────────────────────────────────────────────────────┐
    │ FIXED DIMENSIONS • ✖ • L42                               │
    │──────────────────────────────────────────────────────────│
    │  BEFORE                    → AFTER                       │
    │  ...problem drawing...       ...fixed drawing...         │
    │  ✖ width: 600px              ✓ max-width: 100%           │
    └──────────────────────────────────────────────────────────┘

Subclasses supply only the two drawings.
"""

from __future__ import annotations

from boxlint.model.visual import IssueType, Visualization, VisualizerIssue
from boxlint.visualizer.cache import TemplateCache, cache_key
from boxlint.visualizer.palette import Chars, Glyphs, severity_glyph
from boxlint.visualizer.text import pad, truncate, visual_length

MAX_WIDTH = 60
MAX_HEIGHT = 20
INNER_WIDTH = MAX_WIDTH - 2
COLUMN_WIDTH = INNER_WIDTH // 2

# header (3) + label row + measurements (up to 2) + footer
_FIXED_ROWS = 7
MAX_CONTENT_ROWS = MAX_HEIGHT - _FIXED_ROWS

DEFAULT_SUGGESTION = "Use responsive units"


def box_top(width: int) -> str:
    return Chars.TOP_LEFT + Chars.H_LINE * width + Chars.TOP_RIGHT


def box_bottom(width: int) -> str:
    return Chars.BOTTOM_LEFT + Chars.H_LINE * width + Chars.BOTTOM_RIGHT


def box_row(content: str, width: int) -> str:
    return Chars.V_LINE + pad(content, width) + Chars.V_LINE


def framed(rows: list[str], width: int) -> list[str]:
    """Wrap *rows* in a box *width* columns wide (excluding borders)."""
    return [box_top(width), *(box_row(r, width) for r in rows), box_bottom(width)]


class BaseGenerator:
    """Renders one diagram type.

    Subclasses set ``issue_type`` and ``title`` and implement
    ``render_before``/``render_after``. The before/after drawings depend only
    on ``type:severity:value`` and are memoized in the optional cache; the
    header and measurement rows are rendered on every call since they carry
    the line number and suggestion.
    """

    issue_type: IssueType
    title: str = ""

    def __init__(self, cache: TemplateCache | None = None) -> None:
        self.cache = cache

    def supports(self, issue_type: str | IssueType) -> bool:
        if isinstance(issue_type, IssueType):
            return issue_type is self.issue_type
        return issue_type == self.issue_type.value

    def render_before(self, issue: VisualizerIssue) -> list[str]:
        raise NotImplementedError

    def render_after(self, issue: VisualizerIssue) -> list[str]:
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Assembly
    # ------------------------------------------------------------------

    def generate(self, issue: VisualizerIssue) -> Visualization:
        if self.cache is not None:
            before, after = self.cache.get_or_create(
                cache_key(issue), lambda: self._render_body(issue)
            )
        else:
            before, after = self._render_body(issue)

        lines = [
            *self.render_header(issue),
            *self.render_comparison(before, after),
            *self.render_measurements(issue),
            self.render_footer(),
        ]
        lines = self.clamp(lines)
        return Visualization(
            ascii="\n".join(lines),
            width=max(visual_length(line) for line in lines),
            height=len(lines),
        )

    def _render_body(self, issue: VisualizerIssue) -> tuple[tuple[str, ...], tuple[str, ...]]:
        return tuple(self.render_before(issue)), tuple(self.render_after(issue))

    def render_header(self, issue: VisualizerIssue) -> list[str]:
        glyph = severity_glyph(issue.severity)
        suffix = f" {Chars.DOT} {glyph} {Chars.DOT} L{issue.line}"
        # The title gives way first so the line token stays whole.
        title_budget = INNER_WIDTH - 1 - visual_length(suffix)
        if title_budget >= 2:
            heading = " " + truncate(self.title.upper(), title_budget) + suffix
        else:
            heading = truncate(f" L{issue.line}", INNER_WIDTH)
        return [
            box_top(INNER_WIDTH),
            box_row(heading, INNER_WIDTH),
            Chars.V_LINE + Chars.H_LINE * INNER_WIDTH + Chars.V_LINE,
        ]

    def render_comparison(self, before: tuple[str, ...], after: tuple[str, ...]) -> list[str]:
        """Side-by-side rows: a label row, then the two drawings."""
        label = pad("  BEFORE", COLUMN_WIDTH - 1) + Glyphs.ARROW + pad(" AFTER", COLUMN_WIDTH)
        rows = [Chars.V_LINE + label + Chars.V_LINE]
        height = min(max(len(before), len(after)), MAX_CONTENT_ROWS)
        for i in range(height):
            left = before[i] if i < len(before) else ""
            right = after[i] if i < len(after) else ""
            rows.append(self._split_row("  " + left, " " + right))
        return rows

    def render_measurements(self, issue: VisualizerIssue) -> list[str]:
        """The problem declaration and the suggested fix.

        Both share one row when each fits its column; otherwise each gets a
        full-width row.
        """
        problem = f"{Glyphs.PROBLEM} {issue.property}: {issue.value}"
        solution = f"{Glyphs.SOLUTION} {issue.suggestion or DEFAULT_SUGGESTION}"
        left = "  " + problem
        right = " " + solution
        if visual_length(left) <= COLUMN_WIDTH and visual_length(right) <= COLUMN_WIDTH:
            return [self._split_row(left, right)]
        return [
            box_row(" " + problem, INNER_WIDTH),
            box_row(" " + solution, INNER_WIDTH),
        ]

    def render_footer(self) -> str:
        return box_bottom(INNER_WIDTH)

    def clamp(self, lines: list[str]) -> list[str]:
        """Enforce the maximum diagram size, keeping the footer."""
        lines = [pad(line, MAX_WIDTH) if visual_length(line) > MAX_WIDTH else line for line in lines]
        if len(lines) > MAX_HEIGHT:
            lines = lines[: MAX_HEIGHT - 1] + [lines[-1]]
        return lines

    @staticmethod
    def _split_row(left: str, right: str) -> str:
        return Chars.V_LINE + pad(left, COLUMN_WIDTH) + pad(right, COLUMN_WIDTH) + Chars.V_LINE
