"""Line-by-line fallback for stylesheet dialects the parser cannot brace-match.

Indentation-based or mixin-heavy sources (Sass, Less) are scanned one line at
a time for fixed ``width``/``height`` declarations. No other detector runs in
this mode, and issues carry their position directly.
"""

from __future__ import annotations

import re

from boxlint.config import AnalysisConfig
from boxlint.detection import kinds
from boxlint.detection.kinds import make_issue
from boxlint.detection.thresholds import ThresholdKind, should_report
from boxlint.model.issue import Issue, SourceRange

_WIDTH_RE = re.compile(r"width:\s*(\d+(?:\.\d+)?)px", re.IGNORECASE)
_HEIGHT_RE = re.compile(r"height:\s*(\d+(?:\.\d+)?)px", re.IGNORECASE)
_UNIT_RE = re.compile(r"\d+(?:\.\d+)?\s*px", re.IGNORECASE)

_CHECKS = (
    (_WIDTH_RE, kinds.FIXED_WIDTH, "width", ThresholdKind.WIDTH),
    (_HEIGHT_RE, kinds.FIXED_HEIGHT, "height", ThresholdKind.HEIGHT),
)


def detect_from_text(source: str, config: AnalysisConfig) -> list[Issue]:
    """Scan each line for fixed pixel widths and heights."""
    issues: list[Issue] = []
    for index, line in enumerate(source.split("\n")):
        for pattern, kind, prop, threshold_kind in _CHECKS:
            match = pattern.search(line)
            if match is None:
                continue
            if not should_report(config, threshold_kind, float(match.group(1))):
                continue
            unit = _UNIT_RE.search(match.group(0))
            start = match.start() + unit.start()  # type: ignore[union-attr]
            end = match.start() + unit.end()  # type: ignore[union-attr]
            line_number = index + 1
            issue = make_issue(kind, "", property=prop, value=match.group(0))
            issues.append(
                issue.with_position(
                    line_number, SourceRange(line_number, start, line_number, end)
                )
            )
    return issues
