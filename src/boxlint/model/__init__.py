"""boxlint model layer -- public type re-exports."""

from boxlint.model.issue import Issue, Severity, SourceRange
from boxlint.model.rule import AtRule, ParsedDocument, ParsedRule
from boxlint.model.visual import Category, IssueType, Visualization, VisualizerIssue

__all__ = [
    # parsed stylesheet
    "AtRule",
    "ParsedRule",
    "ParsedDocument",
    # issues
    "Severity",
    "SourceRange",
    "Issue",
    # diagrams
    "IssueType",
    "Category",
    "VisualizerIssue",
    "Visualization",
]
