"""Layout detection: threshold policy, detectors, line mapping, and analysis."""

from boxlint.detection.detectors import ALL_DETECTORS, Detector
from boxlint.detection.engine import SUPPORTED_LANGUAGES, analyze, detect_issues
from boxlint.detection.line_mapper import map_to_lines
from boxlint.detection.text_fallback import detect_from_text
from boxlint.detection.thresholds import ThresholdKind, should_report

__all__ = [
    "analyze",
    "detect_issues",
    "detect_from_text",
    "map_to_lines",
    "should_report",
    "ThresholdKind",
    "ALL_DETECTORS",
    "Detector",
    "SUPPORTED_LANGUAGES",
]
