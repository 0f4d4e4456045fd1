"""Maps issues back to source positions.

The parser discards positions, so each issue is located by re-scanning the
source text: the first line containing the selector anchors the search,
and the offending value is looked for between there and the end of the
block. Duplicate selectors always resolve to their first occurrence.
"""

from __future__ import annotations

import re

from boxlint.model.issue import Issue, SourceRange

# Lines scanned past the anchor when no closing brace is found.
BLOCK_SCAN_LIMIT = 10

_UNIT_RE = re.compile(r"\b\d+(?:\.\d+)?\s*px\b", re.IGNORECASE)


def _property_pattern(prop: str) -> re.Pattern[str]:
    return re.compile(
        rf"(?<![\w-]){re.escape(prop)}\s*:\s*[^;]*\b\d+(?:\.\d+)?\s*px\b",
        re.IGNORECASE,
    )


def _anchor_line(lines: list[str], selector: str) -> int:
    for index, line in enumerate(lines):
        if selector in line:
            return index
    return 0


def _block_end(lines: list[str], start: int) -> int:
    for index in range(start, len(lines)):
        if "}" in lines[index]:
            return index
    return max(0, min(len(lines) - 1, start + BLOCK_SCAN_LIMIT))


def locate(issue: Issue, lines: list[str]) -> tuple[int, SourceRange]:
    """Find the 1-based line and highlight range for *issue* in *lines*."""
    anchor = _anchor_line(lines, issue.selector) if issue.selector else 0
    end = _block_end(lines, anchor)
    pattern = _property_pattern(issue.property) if issue.property else _UNIT_RE

    for index in range(anchor, end + 1):
        line = lines[index] if index < len(lines) else ""
        match = pattern.search(line)
        if match is None:
            continue
        unit = _UNIT_RE.search(match.group(0))
        if unit is not None:
            start_col = match.start() + unit.start()
            end_col = match.start() + unit.end()
        else:
            start_col, end_col = match.start(), match.end()
        return index + 1, SourceRange(index + 1, start_col, index + 1, end_col)

    line = lines[anchor] if anchor < len(lines) else ""
    return anchor + 1, SourceRange(anchor + 1, 0, anchor + 1, max(1, len(line)))


def map_to_lines(issues: list[Issue], source: str) -> list[Issue]:
    """Return copies of *issues* carrying line numbers and ranges."""
    lines = source.split("\n")
    positioned: list[Issue] = []
    for issue in issues:
        line_number, span = locate(issue, lines)
        positioned.append(issue.with_position(line_number, span))
    return positioned
