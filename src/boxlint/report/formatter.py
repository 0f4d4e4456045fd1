"""Markdown rendering of a single issue, e.g. for editor hovers."""

from __future__ import annotations

import re

from boxlint.model.issue import Issue
from boxlint.visualizer.palette import severity_glyph

SEPARATOR = "\n\n---\n\n"

_UNIT_RE = re.compile(
    r"""
    \b\d+(?:\.\d+)?\s*(?:px|rem|vw)\b   # a number with its unit
    | \b(?:px|rem|vw)\b                 # or a bare unit name
    """,
    re.IGNORECASE | re.VERBOSE,
)


def highlight_units(text: str) -> str:
    """Wrap every CSS length (``600px``, ``1.5rem``, ``vw``) in backticks."""
    if not text:
        return text
    return _UNIT_RE.sub(lambda m: f"`{m.group(0)}`", text)


def format_issue(issue: Issue) -> str:
    title = f"{severity_glyph(issue.severity)} **{issue.severity.value.upper()}** {issue.kind}"
    sections = [
        title,
        f"**Explanation**\n{highlight_units(issue.explanation)}",
        f"**Viewport Impact**\n{highlight_units(issue.viewport_impact)}",
        f"**Suggestion**\n{highlight_units(issue.suggestion)}",
    ]
    return SEPARATOR.join(sections)
