"""Tests for the individual layout detectors."""

from boxlint.config import AnalysisConfig, Mode
from boxlint.detection import detectors as d
from boxlint.detection import kinds
from boxlint.model.issue import Severity
from boxlint.parser import parse_css

STRICT = AnalysisConfig()
PRAGMATIC = AnalysisConfig(mode=Mode.PRAGMATIC)


def _run(detector, source: str, config: AnalysisConfig = STRICT):
    return detector(parse_css(source), source, config)


def _kinds(issues) -> list[str]:
    return [i.kind for i in issues]


# ---------------------------------------------------------------------------
# Value helpers
# ---------------------------------------------------------------------------


class TestValueHelpers:
    def test_has_fixed_px(self) -> None:
        assert d.has_fixed_px("500px")
        assert d.has_fixed_px("calc(100% - 20px)")
        assert not d.has_fixed_px("50%")
        assert not d.has_fixed_px(None)

    def test_px_number(self) -> None:
        assert d.px_number("12.5px auto") == 12.5
        assert d.px_number("auto") != d.px_number("auto")  # NaN

    def test_px_numbers(self) -> None:
        assert d.px_numbers("200px 1fr 300px") == [200.0, 300.0]


# ---------------------------------------------------------------------------
# Fixed dimensions
# ---------------------------------------------------------------------------


class TestFixedDimensions:
    def test_width_and_height(self) -> None:
        issues = _run(d.detect_fixed_dimensions, ".card { width: 500px; height: 300px; }")
        assert _kinds(issues) == [
            kinds.FIXED_WIDTH,
            kinds.FIXED_HEIGHT,
            kinds.FIXED_BOX_DIMENSIONS,
        ]
        assert [i.severity for i in issues] == [
            Severity.MEDIUM,
            Severity.MEDIUM,
            Severity.CRITICAL,
        ]
        assert all(i.selector == ".card" for i in issues)

    def test_property_and_value_attached(self) -> None:
        issue = _run(d.detect_fixed_dimensions, ".a { width: 500px; }")[0]
        assert issue.property == "width"
        assert issue.value == "500px"

    def test_pragmatic_below_threshold(self) -> None:
        assert _run(d.detect_fixed_dimensions, ".box{width:200px;}", PRAGMATIC) == []

    def test_pragmatic_above_threshold(self) -> None:
        issues = _run(d.detect_fixed_dimensions, ".box{width:321px;}", PRAGMATIC)
        assert _kinds(issues) == [kinds.FIXED_WIDTH]

    def test_box_issue_not_threshold_gated(self) -> None:
        issues = _run(d.detect_fixed_dimensions, ".a { width: 100px; height: 100px; }", PRAGMATIC)
        assert _kinds(issues) == [kinds.FIXED_BOX_DIMENSIONS]

    def test_relative_units_ignored(self) -> None:
        assert _run(d.detect_fixed_dimensions, ".a { width: 50%; height: 10rem; }") == []

    def test_one_minimum_issue_per_rule(self) -> None:
        issues = _run(d.detect_fixed_dimensions, ".a { min-width: 300px; min-height: 200px; }")
        assert _kinds(issues) == [kinds.FIXED_MIN_DIMENSION]
        assert issues[0].property == "min-width"

    def test_ignored_selector(self) -> None:
        config = AnalysisConfig(ignore_selectors=(".legacy",))
        assert _run(d.detect_fixed_dimensions, ".legacy-card { width: 500px; }", config) == []


# ---------------------------------------------------------------------------
# Box model
# ---------------------------------------------------------------------------


class TestBoxModel:
    def test_mixed_sizing(self) -> None:
        issues = _run(
            d.detect_box_model,
            ".a { box-sizing: border-box; } .b { box-sizing: content-box; }",
        )
        assert len(issues) == 1
        assert issues[0].selector == "*"
        assert issues[0].property == "box-sizing"

    def test_consistent_sizing(self) -> None:
        assert _run(d.detect_box_model, ".a { box-sizing: border-box; }") == []

    def test_ignore_list_not_applied(self) -> None:
        config = AnalysisConfig(ignore_selectors=(".legacy",))
        source = ".legacy { box-sizing: content-box; } .x { box-sizing: border-box; }"
        assert len(_run(d.detect_box_model, source, config)) == 1


# ---------------------------------------------------------------------------
# Overflow
# ---------------------------------------------------------------------------


class TestOverflowHorizontal:
    def test_visible_overflow_with_fixed_width(self) -> None:
        issues = _run(d.detect_overflow_horizontal, ".a { width: 400px; overflow-x: visible; }")
        assert _kinds(issues) == [kinds.HORIZONTAL_OVERFLOW_RISK]

    def test_cumulative_side_spacing(self) -> None:
        issues = _run(
            d.detect_overflow_horizontal,
            ".a { width: 400px; padding-left: 10px; margin-right: 5px; }",
        )
        assert _kinds(issues) == [kinds.CUMULATIVE_HORIZONTAL_OVERFLOW]

    def test_single_side_not_enough(self) -> None:
        assert _run(d.detect_overflow_horizontal, ".a { width: 400px; padding-left: 10px; }") == []

    def test_nowrap_with_min_width(self) -> None:
        issues = _run(d.detect_overflow_horizontal, ".a { min-width: 300px; white-space: nowrap; }")
        assert _kinds(issues) == [kinds.NOWRAP_FIXED_WIDTH]
        assert issues[0].property == "min-width"
        assert issues[0].severity is Severity.LOW


class TestOverflowMaskBody:
    def test_body(self) -> None:
        issues = _run(d.detect_overflow_mask_body, "body { overflow-x: hidden; }")
        assert len(issues) == 1
        assert issues[0].severity is Severity.MEDIUM

    def test_other_selector(self) -> None:
        assert _run(d.detect_overflow_mask_body, "div { overflow-x: hidden; }") == []

    def test_selector_must_be_exact(self) -> None:
        assert _run(d.detect_overflow_mask_body, "body.home { overflow-x: hidden; }") == []


class TestVwWidth:
    def test_full_viewport_width(self) -> None:
        issues = _run(d.detect_vw_width_risk, ".hero { width: 100vw; }")
        assert _kinds(issues) == [kinds.VIEWPORT_WIDTH_OVERFLOW]

    def test_partial_viewport_width(self) -> None:
        assert _run(d.detect_vw_width_risk, ".hero { width: 50vw; }") == []


# ---------------------------------------------------------------------------
# Media queries
# ---------------------------------------------------------------------------


class TestMediaConflicts:
    def test_first_conflicting_property_only(self) -> None:
        source = (
            ".a { color: red; width: 10px; }"
            "@media (max-width: 500px) { .a { color: blue; width: 20px; } }"
        )
        issues = _run(d.detect_media_conflicts, source)
        assert len(issues) == 1
        assert issues[0].property == "color"
        assert issues[0].value == "blue"

    def test_identical_values(self) -> None:
        source = ".a { color: red; } @media print { .a { color: red; } }"
        assert _run(d.detect_media_conflicts, source) == []


class TestBreakpointFixedWidth:
    def test_width_exceeds_breakpoint(self) -> None:
        issues = _run(
            d.detect_breakpoint_fixed_width,
            "@media (max-width: 768px) { .content { width: 900px; } }",
        )
        assert len(issues) == 1
        assert issues[0].kind == kinds.WIDTH_EXCEEDS_BREAKPOINT
        assert issues[0].severity is Severity.CRITICAL
        assert issues[0].selector == ".content"

    def test_width_within_breakpoint(self) -> None:
        source = "@media (max-width: 768px) { .content { width: 500px; } }"
        assert _run(d.detect_breakpoint_fixed_width, source) == []

    def test_condition_without_pixels(self) -> None:
        source = "@media (orientation: portrait) { .content { width: 900px; } }"
        assert _run(d.detect_breakpoint_fixed_width, source) == []

    def test_base_rules_skipped(self) -> None:
        assert _run(d.detect_breakpoint_fixed_width, ".content { width: 9000px; }") == []


class TestMediaWidthInstability:
    def test_width_differs(self) -> None:
        source = ".a { width: 500px; } @media (max-width: 1000px) { .a { width: 300px; } }"
        issues = _run(d.detect_media_width_instability, source)
        assert len(issues) == 1
        assert issues[0].kind == kinds.MEDIA_QUERY_INSTABILITY
        assert issues[0].value == "300px"
        assert issues[0].explanation == "Fixed px width changes across base and media queries"

    def test_same_width(self) -> None:
        source = ".a { width: 500px; } @media (max-width: 1000px) { .a { width: 500px; } }"
        assert _run(d.detect_media_width_instability, source) == []

    def test_no_base_width(self) -> None:
        source = "@media (max-width: 1000px) { .a { width: 300px; } }"
        assert _run(d.detect_media_width_instability, source) == []


# ---------------------------------------------------------------------------
# Flex / grid
# ---------------------------------------------------------------------------


class TestFlexFragility:
    def test_nowrap_with_fixed_basis(self) -> None:
        issues = _run(
            d.detect_flex_fragility,
            ".row { display: flex; flex-wrap: nowrap; flex-basis: 200px; }",
        )
        assert _kinds(issues) == [kinds.NONWRAPPING_FLEX_BASIS]
        assert issues[0].severity is Severity.CRITICAL

    def test_nowrap_with_rigid_shorthand(self) -> None:
        issues = _run(
            d.detect_flex_fragility,
            ".row { display: flex; flex-wrap: nowrap; flex: 0 0 180px; }",
        )
        assert _kinds(issues) == [kinds.NONWRAPPING_FLEX_BASIS]
        assert issues[0].property == "flex"

    def test_nowrap_basis_below_pragmatic_threshold(self) -> None:
        source = ".row { display: flex; flex-wrap: nowrap; flex-basis: 200px; }"
        assert _run(d.detect_flex_fragility, source, PRAGMATIC) == []

    def test_missing_wrap(self) -> None:
        issues = _run(d.detect_flex_fragility, ".row { display: flex; }")
        assert _kinds(issues) == [kinds.FLEX_WITHOUT_WRAP]
        assert issues[0].property == "display"
        assert issues[0].value == "flex"

    def test_rigid_item(self) -> None:
        issues = _run(
            d.detect_flex_fragility,
            ".item { display: flex; flex-wrap: wrap; flex-grow: 0; flex-shrink: 0; flex-basis: 250px; }",
        )
        assert _kinds(issues) == [kinds.RIGID_FLEX_ITEM]

    def test_not_flex(self) -> None:
        assert _run(d.detect_flex_fragility, ".a { display: block; flex-basis: 200px; }") == []


class TestGridRigidity:
    SOURCE = ".g { display: grid; grid-template-columns: 200px 200px 200px; }"

    def test_fixed_tracks(self) -> None:
        issues = _run(d.detect_grid_rigidity, self.SOURCE)
        assert _kinds(issues) == [kinds.RIGID_GRID_TRACKS]
        assert issues[0].property == "grid-template-columns"

    def test_pragmatic_needs_track_above_threshold(self) -> None:
        assert _run(d.detect_grid_rigidity, self.SOURCE, PRAGMATIC) == []
        wide = ".g { display: grid; grid-template-columns: 1fr 400px; }"
        assert len(_run(d.detect_grid_rigidity, wide, PRAGMATIC)) == 1

    def test_fractional_tracks(self) -> None:
        assert _run(d.detect_grid_rigidity, ".g { display: grid; grid-template-columns: 1fr 1fr; }") == []


# ---------------------------------------------------------------------------
# Positioning and anti-patterns
# ---------------------------------------------------------------------------


class TestAbsoluteContainment:
    def test_first_fixed_offset_reported(self) -> None:
        issues = _run(
            d.detect_absolute_containment,
            ".tip { position: absolute; top: 20px; left: 10px; }",
        )
        assert len(issues) == 1
        assert issues[0].property == "left"
        assert issues[0].value == "10px"

    def test_relative_position(self) -> None:
        assert _run(d.detect_absolute_containment, ".tip { position: relative; left: 10px; }") == []


class TestAntiPatterns:
    def test_important_layout_and_spacing(self) -> None:
        issues = _run(d.detect_anti_patterns, ".a { width: 50% !important; margin: 32px; }")
        assert _kinds(issues) == [kinds.IMPORTANT_LAYOUT, kinds.FIXED_PIXEL_SPACING]

    def test_important_on_non_layout_property(self) -> None:
        assert _run(d.detect_anti_patterns, ".a { color: red !important; }") == []

    def test_spacing_threshold(self) -> None:
        assert len(_run(d.detect_anti_patterns, ".a { gap: 32px; }", PRAGMATIC)) == 1
        assert _run(d.detect_anti_patterns, ".a { gap: 16px; }", PRAGMATIC) == []

    def test_longhand_spacing_not_reported(self) -> None:
        assert _run(d.detect_anti_patterns, ".a { margin-left: 40px; }") == []


class TestRegistry:
    def test_all_detectors_listed(self) -> None:
        assert len(d.ALL_DETECTORS) == 12
        assert len(set(d.ALL_DETECTORS)) == 12
