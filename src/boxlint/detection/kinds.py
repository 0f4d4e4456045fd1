"""Issue kinds: the fixed labels detectors emit and their standard wording."""

from __future__ import annotations

from dataclasses import dataclass

from boxlint.model.issue import Issue, Severity

FIXED_WIDTH = "Fixed width"
FIXED_HEIGHT = "Fixed height"
FIXED_BOX_DIMENSIONS = "Fixed box dimensions"
FIXED_MIN_DIMENSION = "Fixed minimum dimension"
MIXED_BOX_SIZING = "Mixed box-sizing"
HORIZONTAL_OVERFLOW_RISK = "Horizontal overflow risk"
CUMULATIVE_HORIZONTAL_OVERFLOW = "Cumulative horizontal overflow"
NOWRAP_FIXED_WIDTH = "No-wrap fixed width"
MEDIA_QUERY_INSTABILITY = "Media query instability"
BODY_OVERFLOW_MASKING = "Body overflow masking"
VIEWPORT_WIDTH_OVERFLOW = "Viewport width overflow"
WIDTH_EXCEEDS_BREAKPOINT = "Fixed width exceeds breakpoint"
NONWRAPPING_FLEX_BASIS = "Non-wrapping fixed flex basis"
FLEX_WITHOUT_WRAP = "Flex container without wrap"
RIGID_FLEX_ITEM = "Rigid flex item"
RIGID_GRID_TRACKS = "Rigid grid tracks"
ABSOLUTE_RIGIDITY = "Absolute positioning rigidity"
IMPORTANT_LAYOUT = "Layout property with !important"
FIXED_PIXEL_SPACING = "Fixed pixel spacing"


@dataclass(frozen=True)
class IssueTemplate:
    """Severity and wording shared by every issue of one kind."""

    severity: Severity
    explanation: str
    viewport_impact: str
    suggestion: str


# Media query instability has two sources with different wording; the
# media-conflict wording is the default.
_MEDIA_WIDTH_TEMPLATE = IssueTemplate(
    Severity.MEDIUM,
    "Fixed px width changes across base and media queries",
    "Layout width fluctuates unpredictably",
    "Use fluid widths or harmonize breakpoint widths",
)

TEMPLATES: dict[str, IssueTemplate] = {
    FIXED_WIDTH: IssueTemplate(
        Severity.MEDIUM,
        "Fixed pixel width reduces responsiveness",
        "Constrained layout on smaller viewports",
        "Use relative units or max-width",
    ),
    FIXED_HEIGHT: IssueTemplate(
        Severity.MEDIUM,
        "Fixed pixel height can cause overflow",
        "Vertical clipping on shorter viewports",
        "Use min-height or auto with constraints",
    ),
    FIXED_BOX_DIMENSIONS: IssueTemplate(
        Severity.CRITICAL,
        "Fixed width and height create rigid boxes",
        "Breaks responsive scaling across devices",
        "Prefer fluid dimensions with min/max constraints",
    ),
    FIXED_MIN_DIMENSION: IssueTemplate(
        Severity.MEDIUM,
        "Rigid minimum size blocks content reflow",
        "Triggers overflow below threshold viewports",
        "Use percentages or clamp with responsive units",
    ),
    MIXED_BOX_SIZING: IssueTemplate(
        Severity.MEDIUM,
        "Mixed box-sizing leads to inconsistent sizing calculations",
        "Inconsistent widths across components",
        "Standardize on border-box for layout consistency",
    ),
    HORIZONTAL_OVERFLOW_RISK: IssueTemplate(
        Severity.MEDIUM,
        "Visible overflow with fixed width can exceed viewport",
        "Horizontal scrollbars on small screens",
        "Set overflow-x hidden or use max-width",
    ),
    CUMULATIVE_HORIZONTAL_OVERFLOW: IssueTemplate(
        Severity.MEDIUM,
        "Fixed width with fixed paddings can exceed viewport",
        "Content clipped or scrolls horizontally",
        "Use responsive paddings and width constraints",
    ),
    NOWRAP_FIXED_WIDTH: IssueTemplate(
        Severity.LOW,
        "No wrapping with fixed width increases overflow risk",
        "Text overflows on narrow screens",
        "Allow wrapping or make width responsive",
    ),
    MEDIA_QUERY_INSTABILITY: IssueTemplate(
        Severity.MEDIUM,
        "Property values diverge between base and breakpoints",
        "Layout shifts unpredictably across viewports",
        "Unify values or constrain ranges to avoid divergence",
    ),
    BODY_OVERFLOW_MASKING: IssueTemplate(
        Severity.MEDIUM,
        "Hiding horizontal overflow can mask structural leaks",
        "Content clipped without visible scrollbars",
        "Prefer fixing causes; avoid global overflow-x: hidden",
    ),
    VIEWPORT_WIDTH_OVERFLOW: IssueTemplate(
        Severity.MEDIUM,
        "100vw includes scrollbar width causing overflow",
        "Horizontal scroll or clipped edges on desktops",
        "Use 100% or calc(100vw - var(scrollbar))",
    ),
    WIDTH_EXCEEDS_BREAKPOINT: IssueTemplate(
        Severity.CRITICAL,
        "Width in px inside max-width media exceeds the breakpoint",
        "Guaranteed overflow below breakpoint",
        "Use fluid width or cap with max-width <= breakpoint",
    ),
    NONWRAPPING_FLEX_BASIS: IssueTemplate(
        Severity.CRITICAL,
        "No wrap with fixed basis causes overflow and rigidity",
        "Items overflow container on small screens",
        "Enable wrapping or use responsive flex-basis",
    ),
    FLEX_WITHOUT_WRAP: IssueTemplate(
        Severity.MEDIUM,
        "Flex containers default to nowrap, risking overflow",
        "Children overflow on narrow screens",
        "Set flex-wrap: wrap when widths are rigid",
    ),
    RIGID_FLEX_ITEM: IssueTemplate(
        Severity.MEDIUM,
        "No growth or shrink with fixed basis reduces flexibility",
        "Poor reflow under varying viewport widths",
        "Allow shrink or use relative basis",
    ),
    RIGID_GRID_TRACKS: IssueTemplate(
        Severity.MEDIUM,
        "Fixed pixel tracks reduce grid adaptability",
        "Grid fails to reflow on narrow or wide screens",
        "Use fr units or minmax with responsive bounds",
    ),
    ABSOLUTE_RIGIDITY: IssueTemplate(
        Severity.MEDIUM,
        "Absolute positions with fixed pixels reduce adaptability",
        "Elements misalign under viewport changes",
        "Prefer relative offsets or responsive units",
    ),
    IMPORTANT_LAYOUT: IssueTemplate(
        Severity.LOW,
        "Important flags on layout hinder responsive overrides",
        "Difficult to adapt across breakpoints",
        "Remove !important and use specificity or cascade",
    ),
    FIXED_PIXEL_SPACING: IssueTemplate(
        Severity.LOW,
        "Fixed spacing can break scaling",
        "Compressed or expanded layout across devices",
        "Use responsive units or clamp",
    ),
}

ALL_KINDS: tuple[str, ...] = tuple(TEMPLATES)


def make_issue(
    kind: str,
    selector: str,
    *,
    property: str | None = None,
    value: str | None = None,
    template: IssueTemplate | None = None,
) -> Issue:
    """Build an Issue of *kind* using its standard severity and wording."""
    tpl = template or TEMPLATES[kind]
    return Issue(
        kind=kind,
        severity=tpl.severity,
        explanation=tpl.explanation,
        viewport_impact=tpl.viewport_impact,
        suggestion=tpl.suggestion,
        selector=selector,
        property=property,
        value=value,
    )


def media_width_issue(selector: str, value: str) -> Issue:
    """Media query instability raised by diverging fixed widths."""
    return make_issue(
        MEDIA_QUERY_INSTABILITY,
        selector,
        property="width",
        value=value,
        template=_MEDIA_WIDTH_TEMPLATE,
    )
