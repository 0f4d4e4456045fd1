"""Threshold policy: decides whether a borderline fixed value is reported.

Every detector that emits a threshold-sensitive issue goes through
:func:`should_report`.
"""

from __future__ import annotations

import math
from enum import Enum

from boxlint.config import AnalysisConfig, Mode


class ThresholdKind(Enum):
    WIDTH = "width"
    HEIGHT = "height"
    SPACING = "spacing"
    FLEX_BASIS = "flex-basis"
    GRID_TRACK = "grid-track"


def threshold_for(config: AnalysisConfig, kind: ThresholdKind | str) -> float | None:
    """Return the configured pixel threshold for *kind*, or None if unknown.

    Width, flex-basis and grid tracks share the width threshold.
    """
    try:
        kind = ThresholdKind(kind)
    except ValueError:
        return None
    if kind in (ThresholdKind.WIDTH, ThresholdKind.FLEX_BASIS, ThresholdKind.GRID_TRACK):
        return config.fixed_width_threshold_px
    if kind is ThresholdKind.HEIGHT:
        return config.fixed_height_threshold_px
    return config.fixed_spacing_threshold_px


def should_report(
    config: AnalysisConfig, kind: ThresholdKind | str, value: float | None
) -> bool:
    """Decide whether a fixed value of the given kind is worth reporting.

    - strict mode reports everything, including unparseable values.
    - pragmatic mode reports values strictly greater than the threshold.
      Non-finite or missing values are reported (fail open), as are kinds
      without a threshold.
    """
    if config.mode is Mode.STRICT:
        return True
    if value is None or not math.isfinite(value):
        return True
    threshold = threshold_for(config, kind)
    if threshold is None:
        return True
    return value > threshold
