"""Converts CSS lengths to pixel estimates and pixels to character counts."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

# Reference sizes for relative units.
VIEWPORT_PX = 1920
CONTAINER_PX = 1200

# Upper bound on any value-driven repeat count in a diagram.
MAX_REPEAT = 60

_LENGTH_RE = re.compile(r"(\d+(?:\.\d+)?)\s*(px|vw|%)", re.IGNORECASE)


@dataclass(frozen=True)
class ScaledDimensions:
    """An element scaled onto a container of fixed character width."""

    width: int  # drawn inside the container, never more than its width
    excess: int  # characters past the container edge
    scale: float

    @property
    def overflow(self) -> bool:
        return self.excess > 0


def parse_length(value: str | None) -> float | None:
    """Pixel estimate for the first px/vw/% length in *value*.

    ``vw`` is resolved against a 1920px viewport and ``%`` against a 1200px
    container. Returns None when no supported length is present.
    """
    if not value or not isinstance(value, str):
        return None
    match = _LENGTH_RE.search(value)
    if match is None:
        return None
    number = float(match.group(1))
    unit = match.group(2).lower()
    if unit == "vw":
        return number / 100 * VIEWPORT_PX
    if unit == "%":
        return number / 100 * CONTAINER_PX
    return number


def clamp_count(count: float, limit: int = MAX_REPEAT) -> int:
    """Turn a computed character count into a safe repeat count."""
    if not math.isfinite(count):
        return limit if count > 0 else 0
    return max(0, min(int(count), limit))


def scale_to_chars(pixels: float, max_chars: int, max_pixels: float) -> int:
    """Scale *pixels* relative to *max_pixels* onto *max_chars* columns."""
    if max_pixels <= 0:
        return 0
    return clamp_count(pixels / max_pixels * max_chars)


def calculate_proportions(
    element_px: float, container_px: float, max_chars: int
) -> ScaledDimensions:
    """Scale an element against its container, measuring any overflow."""
    scale = max_chars / container_px if container_px > 0 else 0.0
    scaled = clamp_count(element_px * scale, limit=max_chars + MAX_REPEAT)
    return ScaledDimensions(
        width=min(scaled, max_chars),
        excess=max(0, scaled - max_chars),
        scale=scale,
    )
