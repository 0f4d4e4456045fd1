"""Aggregate view of an analysis run: counts plus per-issue rows."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Any

from boxlint.model.issue import Issue, Severity
from boxlint.model.visual import Category
from boxlint.report.classifier import classify_issue_kind, to_visualizer_issue
from boxlint.visualizer.registry import Visualizer


@dataclass(frozen=True)
class StatsItem:
    index: int
    title: str
    severity: Severity
    line: int | None
    category: Category
    explanation: str
    viewport_impact: str
    suggestion: str
    visualization: str | None = None


@dataclass(frozen=True)
class StatsReport:
    """Severity and category counts with one row per issue."""

    counts: dict[Severity, int]
    category_counts: dict[Category, int]
    items: list[StatsItem] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.items)

    def to_dict(self) -> dict[str, Any]:
        return {
            "counts": {s.value: n for s, n in self.counts.items()},
            "category_counts": {c.value: n for c, n in self.category_counts.items()},
            "items": [
                {
                    "index": item.index,
                    "title": item.title,
                    "severity": item.severity.value,
                    "line": item.line,
                    "category": item.category.value,
                    "explanation": item.explanation,
                    "viewport_impact": item.viewport_impact,
                    "suggestion": item.suggestion,
                    "visualization": item.visualization,
                }
                for item in self.items
            ],
        }


def build_stats(issues: list[Issue], visualizer: Visualizer | None = None) -> StatsReport:
    """Summarize *issues*; diagrams are attached only when a visualizer is given."""
    severities = Counter(issue.severity for issue in issues)
    categories = Counter(classify_issue_kind(issue.kind) for issue in issues)

    items = []
    for idx, issue in enumerate(issues):
        visualization = None
        if visualizer is not None:
            projected = to_visualizer_issue(issue)
            if projected is not None:
                visualization = visualizer.generate(projected).ascii
        items.append(
            StatsItem(
                index=idx,
                title=issue.kind,
                severity=issue.severity,
                line=issue.line_number,
                category=classify_issue_kind(issue.kind),
                explanation=issue.explanation,
                viewport_impact=issue.viewport_impact,
                suggestion=issue.suggestion,
                visualization=visualization,
            )
        )

    return StatsReport(
        counts={s: severities.get(s, 0) for s in Severity},
        category_counts={c: categories.get(c, 0) for c in Category},
        items=items,
    )
