"""Layout detectors.

Each detector is a pure function taking the parsed document, the raw source
text and the analysis config, and returning a list of Issue objects. Detectors
never depend on each other's output and may run in any order.
"""

from __future__ import annotations

import math
import re
from typing import Callable, Iterator

from boxlint.config import AnalysisConfig, Mode
from boxlint.detection import kinds
from boxlint.detection.kinds import make_issue, media_width_issue
from boxlint.detection.thresholds import ThresholdKind, should_report
from boxlint.model.issue import Issue
from boxlint.model.rule import ParsedDocument, ParsedRule

Detector = Callable[[ParsedDocument, str, AnalysisConfig], list[Issue]]


# ---------------------------------------------------------------------------
# Value patterns
# ---------------------------------------------------------------------------

# An integer pixel token such as "500px".
_FIXED_PX_RE = re.compile(r"\b\d+px\b", re.IGNORECASE)
# The numeric part of a pixel length, decimals allowed.
_PX_NUMBER_RE = re.compile(r"(\d+(?:\.\d+)?)px", re.IGNORECASE)
# flex shorthand that neither grows nor shrinks: "0 0 200px"
_RIGID_FLEX_SHORTHAND_RE = re.compile(r"\b0\s+0\s+(\d+(?:\.\d+)?)px\b", re.IGNORECASE)
_INTEGER_PX_RE = re.compile(r"(\d+)\s*px", re.IGNORECASE)
_VW_100_RE = re.compile(r"\b100vw\b", re.IGNORECASE)
_IMPORTANT_RE = re.compile(r"!important", re.IGNORECASE)
_LAYOUT_PROPERTY_RE = re.compile(
    r"^(width|height|margin|padding|left|right|top|bottom|flex|grid)", re.IGNORECASE
)
_SPACING_PROPERTY_RE = re.compile(r"^(margin|padding|gap)$", re.IGNORECASE)

_HORIZONTAL_BOX_PROPS = ("margin-left", "margin-right", "padding-left", "padding-right")
_GRID_TRACK_PROPS = ("grid-template-columns", "grid-template-rows", "grid-auto-columns")
_OFFSET_PROPS = ("left", "right", "top", "bottom", "width")


def has_fixed_px(value: str | None) -> bool:
    """True when *value* contains an integer pixel token."""
    return bool(value) and _FIXED_PX_RE.search(value) is not None  # type: ignore[arg-type]


def px_number(value: str | None) -> float:
    """First pixel number in *value*, or NaN when there is none."""
    if not value:
        return math.nan
    match = _PX_NUMBER_RE.search(value)
    return float(match.group(1)) if match else math.nan


def px_numbers(value: str | None) -> list[float]:
    """Every pixel number in *value*, in order."""
    if not value:
        return []
    return [float(m.group(1)) for m in _PX_NUMBER_RE.finditer(value)]


def _integer_px(value: str | None) -> int | None:
    if not value:
        return None
    match = _INTEGER_PX_RE.search(value)
    return int(match.group(1)) if match else None


def _active_rules(document: ParsedDocument, config: AnalysisConfig) -> Iterator[ParsedRule]:
    """Rules whose selector is not matched by the ignore list."""
    for rule in document.rules:
        if not config.matches_ignored(rule.selector):
            yield rule


# ---------------------------------------------------------------------------
# Dimension detectors
# ---------------------------------------------------------------------------


def detect_fixed_dimensions(
    document: ParsedDocument, source: str, config: AnalysisConfig
) -> list[Issue]:
    """Fixed px width/height, the rigid width+height combination, and fixed minimums."""
    issues: list[Issue] = []
    for rule in _active_rules(document, config):
        width = rule.get("width")
        height = rule.get("height")
        fixed_w = has_fixed_px(width)
        fixed_h = has_fixed_px(height)

        if fixed_w and should_report(config, ThresholdKind.WIDTH, px_number(width)):
            issues.append(
                make_issue(kinds.FIXED_WIDTH, rule.selector, property="width", value=width)
            )
        if fixed_h and should_report(config, ThresholdKind.HEIGHT, px_number(height)):
            issues.append(
                make_issue(kinds.FIXED_HEIGHT, rule.selector, property="height", value=height)
            )
        # The compound issue is not threshold-gated.
        if fixed_w and fixed_h:
            issues.append(
                make_issue(
                    kinds.FIXED_BOX_DIMENSIONS, rule.selector, property="width", value=width
                )
            )

        for prop in ("min-width", "min-height"):
            value = rule.get(prop)
            if has_fixed_px(value):
                issues.append(
                    make_issue(kinds.FIXED_MIN_DIMENSION, rule.selector, property=prop, value=value)
                )
                break  # one issue per rule
    return issues


def detect_box_model(
    document: ParsedDocument, source: str, config: AnalysisConfig
) -> list[Issue]:
    """Document-level: border-box and content-box both in use."""
    border_box = 0
    content_box = 0
    for rule in document.rules:
        sizing = rule.get("box-sizing")
        if not sizing:
            continue
        lowered = sizing.lower()
        if "border-box" in lowered:
            border_box += 1
        if "content-box" in lowered:
            content_box += 1
    if border_box and content_box:
        return [
            make_issue(
                kinds.MIXED_BOX_SIZING, "*", property="box-sizing", value="content-box"
            )
        ]
    return []


# ---------------------------------------------------------------------------
# Overflow detectors
# ---------------------------------------------------------------------------


def detect_overflow_horizontal(
    document: ParsedDocument, source: str, config: AnalysisConfig
) -> list[Issue]:
    """Visible overflow, stacked fixed side spacing, or nowrap next to a fixed width."""
    issues: list[Issue] = []
    for rule in _active_rules(document, config):
        width = rule.get("width")
        min_width = rule.get("min-width")
        fixed_w = has_fixed_px(width)
        fixed_any_w = fixed_w or has_fixed_px(min_width)
        culprit_prop, culprit_value = ("width", width) if fixed_w else ("min-width", min_width)

        overflow_x = rule.get("overflow-x")
        if overflow_x and "visible" in overflow_x.lower() and fixed_any_w:
            issues.append(
                make_issue(
                    kinds.HORIZONTAL_OVERFLOW_RISK,
                    rule.selector,
                    property=culprit_prop,
                    value=culprit_value,
                )
            )

        fixed_sides = sum(1 for p in _HORIZONTAL_BOX_PROPS if has_fixed_px(rule.get(p)))
        if fixed_sides >= 2 and fixed_w:
            issues.append(
                make_issue(
                    kinds.CUMULATIVE_HORIZONTAL_OVERFLOW,
                    rule.selector,
                    property="width",
                    value=width,
                )
            )

        white_space = rule.get("white-space")
        if white_space and "nowrap" in white_space.lower() and fixed_any_w:
            issues.append(
                make_issue(
                    kinds.NOWRAP_FIXED_WIDTH,
                    rule.selector,
                    property=culprit_prop,
                    value=culprit_value,
                )
            )
    return issues


def detect_overflow_mask_body(
    document: ParsedDocument, source: str, config: AnalysisConfig
) -> list[Issue]:
    """``overflow-x: hidden`` on exactly ``body``."""
    issues: list[Issue] = []
    for rule in _active_rules(document, config):
        if rule.selector.strip().lower() != "body":
            continue
        overflow_x = rule.get("overflow-x")
        if overflow_x and "hidden" in overflow_x.lower():
            issues.append(
                make_issue(
                    kinds.BODY_OVERFLOW_MASKING,
                    rule.selector,
                    property="overflow-x",
                    value=overflow_x,
                )
            )
    return issues


def detect_vw_width_risk(
    document: ParsedDocument, source: str, config: AnalysisConfig
) -> list[Issue]:
    """``width: 100vw``, which includes the scrollbar."""
    issues: list[Issue] = []
    for rule in _active_rules(document, config):
        width = rule.get("width")
        if width and _VW_100_RE.search(width):
            issues.append(
                make_issue(
                    kinds.VIEWPORT_WIDTH_OVERFLOW, rule.selector, property="width", value=width
                )
            )
    return issues


# ---------------------------------------------------------------------------
# Media query detectors
# ---------------------------------------------------------------------------


def detect_media_conflicts(
    document: ParsedDocument, source: str, config: AnalysisConfig
) -> list[Issue]:
    """One issue per selector whose blocks disagree on any property value.

    Only the first conflicting property (in first-declared order) is
    reported for each selector.
    """
    by_selector: dict[str, list[ParsedRule]] = {}
    for rule in document.rules:
        by_selector.setdefault(rule.selector, []).append(rule)

    issues: list[Issue] = []
    for selector, blocks in by_selector.items():
        values_by_prop: dict[str, list[str]] = {}
        for block in blocks:
            for prop, value in block.declarations.items():
                values_by_prop.setdefault(prop, []).append(value)
        for prop, values in values_by_prop.items():
            if len(set(values)) > 1:
                issues.append(
                    make_issue(
                        kinds.MEDIA_QUERY_INSTABILITY,
                        selector,
                        property=prop,
                        value=values[-1],
                    )
                )
                break
    return issues


def detect_breakpoint_fixed_width(
    document: ParsedDocument, source: str, config: AnalysisConfig
) -> list[Issue]:
    """Fixed px width inside a media block that is wider than the breakpoint."""
    issues: list[Issue] = []
    for rule in _active_rules(document, config):
        if not rule.in_media:
            continue
        breakpoint = _integer_px(rule.at_rule.condition)  # type: ignore[union-attr]
        if breakpoint is None:
            continue
        width = rule.get("width")
        match = _PX_NUMBER_RE.search(width) if width else None
        if match is None:
            continue
        if int(float(match.group(1))) > breakpoint:
            issues.append(
                make_issue(
                    kinds.WIDTH_EXCEEDS_BREAKPOINT, rule.selector, property="width", value=width
                )
            )
    return issues


def detect_media_width_instability(
    document: ParsedDocument, source: str, config: AnalysisConfig
) -> list[Issue]:
    """A selector's fixed px width differs between base CSS and a media block."""
    base_widths = {
        rule.selector: rule.get("width")
        for rule in document.base_rules()
        if rule.get("width") and not config.matches_ignored(rule.selector)
    }
    media_widths: dict[str, list[str]] = {}
    for rule in document.media_rules():
        width = rule.get("width")
        if width and not config.matches_ignored(rule.selector):
            media_widths.setdefault(rule.selector, []).append(width)

    issues: list[Issue] = []
    for selector, widths in media_widths.items():
        base_px = _integer_px(base_widths.get(selector))
        if base_px is None:
            continue
        for width in widths:
            media_px = _integer_px(width)
            if media_px is not None and media_px != base_px:
                issues.append(media_width_issue(selector, width))
                break
    return issues


# ---------------------------------------------------------------------------
# Flex / grid detectors
# ---------------------------------------------------------------------------


def detect_flex_fragility(
    document: ParsedDocument, source: str, config: AnalysisConfig
) -> list[Issue]:
    """Non-wrapping fixed bases, containers without flex-wrap, and rigid items."""
    issues: list[Issue] = []
    for rule in _active_rules(document, config):
        display = rule.get("display")
        if not (display and "flex" in display.lower()):
            continue

        wrap = rule.get("flex-wrap")
        basis = rule.get("flex-basis")
        shorthand = rule.get("flex")
        fixed_basis = has_fixed_px(basis)
        rigid_shorthand = (
            _RIGID_FLEX_SHORTHAND_RE.search(shorthand) if shorthand else None
        )

        if wrap and "nowrap" in wrap.lower() and (fixed_basis or rigid_shorthand):
            if fixed_basis:
                prop, value, number = "flex-basis", basis, px_number(basis)
            else:
                prop, value = "flex", shorthand
                number = float(rigid_shorthand.group(1))  # type: ignore[union-attr]
            if should_report(config, ThresholdKind.FLEX_BASIS, number):
                issues.append(
                    make_issue(
                        kinds.NONWRAPPING_FLEX_BASIS, rule.selector, property=prop, value=value
                    )
                )

        if wrap is None:
            issues.append(
                make_issue(kinds.FLEX_WITHOUT_WRAP, rule.selector, property="display", value=display)
            )

        if (
            rule.get("flex-grow") == "0"
            and rule.get("flex-shrink") == "0"
            and fixed_basis
            and should_report(config, ThresholdKind.FLEX_BASIS, px_number(basis))
        ):
            issues.append(
                make_issue(kinds.RIGID_FLEX_ITEM, rule.selector, property="flex-basis", value=basis)
            )
    return issues


def detect_grid_rigidity(
    document: ParsedDocument, source: str, config: AnalysisConfig
) -> list[Issue]:
    """Pixel grid tracks; pragmatic mode requires one track above the threshold."""
    issues: list[Issue] = []
    for rule in _active_rules(document, config):
        display = rule.get("display")
        if not (display and "grid" in display.lower()):
            continue

        fixed_props = [p for p in _GRID_TRACK_PROPS if has_fixed_px(rule.get(p))]
        if not fixed_props:
            continue

        if config.mode is Mode.PRAGMATIC:
            numbers = [n for p in _GRID_TRACK_PROPS for n in px_numbers(rule.get(p))]
            if not any(should_report(config, ThresholdKind.GRID_TRACK, n) for n in numbers):
                continue

        prop = fixed_props[0]
        issues.append(
            make_issue(kinds.RIGID_GRID_TRACKS, rule.selector, property=prop, value=rule.get(prop))
        )
    return issues


# ---------------------------------------------------------------------------
# Positioning and anti-pattern detectors
# ---------------------------------------------------------------------------


def detect_absolute_containment(
    document: ParsedDocument, source: str, config: AnalysisConfig
) -> list[Issue]:
    """Absolutely positioned rules with pixel offsets or width."""
    issues: list[Issue] = []
    for rule in _active_rules(document, config):
        position = rule.get("position")
        if not (position and "absolute" in position.lower()):
            continue
        for prop in _OFFSET_PROPS:
            value = rule.get(prop)
            if has_fixed_px(value):
                issues.append(
                    make_issue(kinds.ABSOLUTE_RIGIDITY, rule.selector, property=prop, value=value)
                )
                break
    return issues


def detect_anti_patterns(
    document: ParsedDocument, source: str, config: AnalysisConfig
) -> list[Issue]:
    """``!important`` on layout properties and fixed pixel margin/padding/gap."""
    issues: list[Issue] = []
    for rule in _active_rules(document, config):
        for prop, value in rule.declarations.items():
            if _IMPORTANT_RE.search(value) and _LAYOUT_PROPERTY_RE.match(prop):
                issues.append(
                    make_issue(kinds.IMPORTANT_LAYOUT, rule.selector, property=prop, value=value)
                )
            if (
                _SPACING_PROPERTY_RE.match(prop)
                and has_fixed_px(value)
                and should_report(config, ThresholdKind.SPACING, px_number(value))
            ):
                issues.append(
                    make_issue(kinds.FIXED_PIXEL_SPACING, rule.selector, property=prop, value=value)
                )
    return issues


# ---------------------------------------------------------------------------
# Detector registry
# ---------------------------------------------------------------------------

ALL_DETECTORS: list[Detector] = [
    detect_fixed_dimensions,
    detect_box_model,
    detect_overflow_horizontal,
    detect_media_conflicts,
    detect_overflow_mask_body,
    detect_vw_width_risk,
    detect_breakpoint_fixed_width,
    detect_media_width_instability,
    detect_flex_fragility,
    detect_grid_rigidity,
    detect_absolute_containment,
    detect_anti_patterns,
]
