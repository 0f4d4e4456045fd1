"""Tests for the analysis entry point and the text fallback."""

import logging
import random
from collections import Counter

import pytest

from boxlint.config import AnalysisConfig, Mode
from boxlint.detection import analyze, detect_from_text, detect_issues
from boxlint.detection import ALL_DETECTORS, kinds
from boxlint.detection.detectors import detect_overflow_mask_body
from boxlint.errors import UnsupportedLanguageError
from boxlint.model.issue import SourceRange

CARD = ".card { width: 500px; height: 300px; }"


# ---------------------------------------------------------------------------
# Text fallback
# ---------------------------------------------------------------------------


class TestTextFallback:
    SOURCE = ".a\n  width: 400px\n  height: 20px"

    def test_width_and_height_lines(self) -> None:
        issues = detect_from_text(self.SOURCE, AnalysisConfig())
        assert [i.kind for i in issues] == [kinds.FIXED_WIDTH, kinds.FIXED_HEIGHT]
        assert [i.line_number for i in issues] == [2, 3]
        assert issues[0].range == SourceRange(2, 9, 2, 14)
        assert issues[0].value == "width: 400px"
        assert issues[0].selector == ""

    def test_threshold_applies(self) -> None:
        issues = detect_from_text(self.SOURCE, AnalysisConfig(mode=Mode.PRAGMATIC))
        assert [i.kind for i in issues] == [kinds.FIXED_WIDTH]

    def test_nothing_found(self) -> None:
        assert detect_from_text("a\n  color: red", AnalysisConfig()) == []


# ---------------------------------------------------------------------------
# analyze
# ---------------------------------------------------------------------------


class TestAnalyze:
    def test_css_issues_are_positioned(self) -> None:
        issues = analyze(CARD)
        assert {i.kind for i in issues} >= {
            kinds.FIXED_WIDTH,
            kinds.FIXED_HEIGHT,
            kinds.FIXED_BOX_DIMENSIONS,
        }
        assert all(i.line_number == 1 for i in issues)

    def test_deterministic(self) -> None:
        assert analyze(CARD) == analyze(CARD)

    def test_language_case_insensitive(self) -> None:
        assert analyze(CARD, "SCSS") == analyze(CARD, "css")

    def test_unsupported_language(self) -> None:
        with pytest.raises(UnsupportedLanguageError) as exc_info:
            analyze(CARD, "stylus")
        assert exc_info.value.language == "stylus"
        assert isinstance(exc_info.value, ValueError)

    def test_less_uses_text_fallback(self) -> None:
        source = ".a {\n  width: 500px;\n  display: flex;\n}"
        issues = analyze(source, "less")
        assert [i.kind for i in issues] == [kinds.FIXED_WIDTH]
        assert issues[0].line_number == 2

    def test_max_problems(self) -> None:
        issues = analyze(CARD, config=AnalysisConfig(max_problems=1))
        assert len(issues) == 1

    def test_custom_detectors(self) -> None:
        source = "body { overflow-x: hidden; width: 900px; }"
        issues = analyze(source, detectors=[detect_overflow_mask_body])
        assert [i.kind for i in issues] == [kinds.BODY_OVERFLOW_MASKING]

    def test_empty_source(self) -> None:
        assert analyze("") == []

    def test_debug_logging(self, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="boxlint.engine"):
            detect_issues(CARD, AnalysisConfig())
        assert "detect_fixed_dimensions: 3 issue(s)" in caplog.text


# ---------------------------------------------------------------------------
# Detector ordering
# ---------------------------------------------------------------------------

MIXED = """
body { overflow-x: hidden; }
.card { width: 500px; height: 300px; padding: 32px; box-sizing: content-box; }
.hero { width: 100vw; white-space: nowrap; }
.row { display: flex; }
.grid { display: grid; grid-template-columns: 200px 200px 200px; }
.badge { position: absolute; left: 400px; }
@media (max-width: 768px) {
  .card { width: 900px; }
  .row { flex-direction: column; }
}
"""


class TestDetectorOrder:
    def test_reversed_detectors_find_the_same_issues(self) -> None:
        config = AnalysisConfig()
        expected = Counter(detect_issues(MIXED, config))
        assert expected
        assert Counter(detect_issues(MIXED, config, list(reversed(ALL_DETECTORS)))) == expected

    @pytest.mark.parametrize("seed", [0, 1, 7])
    def test_shuffled_detectors_find_the_same_issues(self, seed: int) -> None:
        config = AnalysisConfig()
        detectors = list(ALL_DETECTORS)
        random.Random(seed).shuffle(detectors)
        assert Counter(detect_issues(MIXED, config, detectors)) == Counter(
            detect_issues(MIXED, config)
        )
