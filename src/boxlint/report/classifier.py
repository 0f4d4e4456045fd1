"""Maps detector issues onto diagram types and filter categories."""

from __future__ import annotations

from boxlint.detection import kinds
from boxlint.model.issue import Issue
from boxlint.model.visual import Category, IssueType, VisualizerIssue

KIND_TO_TYPE: dict[str, IssueType | None] = {
    kinds.FIXED_WIDTH: IssueType.FIXED_DIMENSIONS,
    kinds.FIXED_HEIGHT: IssueType.FIXED_DIMENSIONS,
    kinds.FIXED_BOX_DIMENSIONS: IssueType.FIXED_DIMENSIONS,
    kinds.FIXED_MIN_DIMENSION: IssueType.FIXED_DIMENSIONS,
    kinds.VIEWPORT_WIDTH_OVERFLOW: IssueType.VIEWPORT_OVERFLOW,
    kinds.HORIZONTAL_OVERFLOW_RISK: IssueType.OVERFLOW_HORIZONTAL,
    kinds.CUMULATIVE_HORIZONTAL_OVERFLOW: IssueType.OVERFLOW_HORIZONTAL,
    kinds.NOWRAP_FIXED_WIDTH: IssueType.NOWRAP_FIXED,
    kinds.NONWRAPPING_FLEX_BASIS: IssueType.FLEX_FRAGILITY,
    kinds.FLEX_WITHOUT_WRAP: IssueType.FLEX_FRAGILITY,
    kinds.RIGID_FLEX_ITEM: IssueType.FLEX_FRAGILITY,
    kinds.RIGID_GRID_TRACKS: IssueType.GRID_RIGIDITY,
    kinds.FIXED_PIXEL_SPACING: IssueType.FIXED_SPACING,
    kinds.MEDIA_QUERY_INSTABILITY: IssueType.MEDIA_INSTABILITY,
    kinds.BODY_OVERFLOW_MASKING: IssueType.OVERFLOW_MASKING,
    kinds.WIDTH_EXCEEDS_BREAKPOINT: IssueType.BREAKPOINT_EXCEEDED,
    kinds.ABSOLUTE_RIGIDITY: IssueType.ABSOLUTE_RIGIDITY,
    kinds.MIXED_BOX_SIZING: IssueType.BOX_INCONSISTENCY,
    kinds.IMPORTANT_LAYOUT: None,
}

DEFAULT_PROPERTY = "width"
DEFAULT_VALUE = "600px"
DEFAULT_SUGGESTION = "Use responsive units"
DEFAULT_SELECTOR = "element"


def category_for_type(issue_type: IssueType | str) -> Category:
    """Filter category for a diagram type."""
    name = issue_type.value if isinstance(issue_type, IssueType) else str(issue_type)
    if "flex" in name:
        return Category.FLEX
    if "grid" in name:
        return Category.GRID
    if "overflow" in name:
        return Category.OVERFLOW
    return Category.OTHER


def classify_issue_kind(kind: str | None) -> Category:
    """Filter category for an issue kind label."""
    if not kind or not isinstance(kind, str):
        return Category.OTHER
    name = kind.lower()
    if "flex" in name or "basis" in name:
        return Category.FLEX
    if "grid" in name:
        return Category.GRID
    if "overflow" in name or "viewport" in name or "100vw" in name:
        return Category.OVERFLOW
    return Category.OTHER


def to_visualizer_issue(issue: Issue) -> VisualizerIssue | None:
    """Project *issue* for diagram generation; None when its kind has no diagram."""
    issue_type = KIND_TO_TYPE.get(issue.kind)
    if issue_type is None:
        return None
    return VisualizerIssue(
        type=issue_type.value,
        severity=issue.severity,
        line=issue.line_number or 0,
        selector=issue.selector or DEFAULT_SELECTOR,
        property=issue.property or DEFAULT_PROPERTY,
        value=issue.value or DEFAULT_VALUE,
        suggestion=issue.suggestion or DEFAULT_SUGGESTION,
        category=category_for_type(issue_type),
    )
