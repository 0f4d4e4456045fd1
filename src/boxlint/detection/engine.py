"""Analysis entry point: parse, detect, and position issues."""

from __future__ import annotations

import logging

from boxlint.config import AnalysisConfig
from boxlint.detection.detectors import ALL_DETECTORS, Detector
from boxlint.detection.line_mapper import map_to_lines
from boxlint.detection.text_fallback import detect_from_text
from boxlint.errors import UnsupportedLanguageError
from boxlint.model.issue import Issue
from boxlint.parser.css import parse_css

log = logging.getLogger("boxlint.engine")

STRUCTURAL_LANGUAGES = frozenset({"css", "scss"})
TEXT_FALLBACK_LANGUAGES = frozenset({"less", "sass"})
SUPPORTED_LANGUAGES = STRUCTURAL_LANGUAGES | TEXT_FALLBACK_LANGUAGES


def detect_issues(
    source: str,
    config: AnalysisConfig,
    detectors: list[Detector] | None = None,
) -> list[Issue]:
    """Parse *source* and run every detector; issues are not yet positioned."""
    document = parse_css(source)
    log.debug(
        "Parsed %d rule(s), %d media condition(s)",
        len(document.rules),
        len(document.media_conditions()),
    )
    issues: list[Issue] = []
    for detector in detectors if detectors is not None else ALL_DETECTORS:
        found = detector(document, source, config)
        if found:
            log.debug("%s: %d issue(s)", detector.__name__, len(found))
        issues.extend(found)
    return issues


def analyze(
    source: str,
    language: str = "css",
    config: AnalysisConfig | None = None,
    *,
    detectors: list[Detector] | None = None,
) -> list[Issue]:
    """Analyze stylesheet text and return positioned issues.

    ``css`` and ``scss`` are parsed structurally and checked by every
    detector; ``less`` and ``sass`` use the line-based fallback. The result is
    capped at ``config.max_problems``.

    Raises:
        UnsupportedLanguageError: if *language* is not a known variant.
    """
    config = config or AnalysisConfig()
    variant = language.strip().lower()
    if variant not in SUPPORTED_LANGUAGES:
        raise UnsupportedLanguageError(language)

    log.debug(
        "Analyzing %d chars as %s (mode=%s)", len(source), variant, config.mode.value
    )
    if variant in TEXT_FALLBACK_LANGUAGES:
        issues = detect_from_text(source, config)
    else:
        issues = map_to_lines(detect_issues(source, config, detectors), source)

    if len(issues) > config.max_problems:
        log.debug("Truncating %d issues to %d", len(issues), config.max_problems)
        issues = issues[: max(0, config.max_problems)]
    return issues
