"""Presentation helpers: issue classification, Markdown, and run statistics."""

from boxlint.report.classifier import (
    KIND_TO_TYPE,
    category_for_type,
    classify_issue_kind,
    to_visualizer_issue,
)
from boxlint.report.formatter import format_issue, highlight_units
from boxlint.report.stats import StatsItem, StatsReport, build_stats

__all__ = [
    "KIND_TO_TYPE",
    "StatsItem",
    "StatsReport",
    "build_stats",
    "category_for_type",
    "classify_issue_kind",
    "format_issue",
    "highlight_units",
    "to_visualizer_issue",
]
