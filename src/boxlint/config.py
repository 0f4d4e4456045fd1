"""Analysis configuration supplied by the caller for each analysis pass."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Mode(Enum):
    """Analysis strictness."""

    STRICT = "strict"
    PRAGMATIC = "pragmatic"

    @classmethod
    def parse(cls, value: str | Mode) -> Mode:
        """Accept a Mode or a case-insensitive mode name."""
        if isinstance(value, Mode):
            return value
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise ValueError(
                f"Unknown mode {value!r}; expected one of: "
                + ", ".join(m.value for m in cls)
            ) from None


@dataclass(frozen=True)
class AnalysisConfig:
    """Read-only settings for a single analysis call."""

    mode: Mode = Mode.STRICT
    fixed_width_threshold_px: float = 320
    fixed_height_threshold_px: float = 320
    fixed_spacing_threshold_px: float = 24
    ignore_selectors: tuple[str, ...] = field(default_factory=tuple)
    max_problems: int = 100

    def __post_init__(self) -> None:
        object.__setattr__(self, "mode", Mode.parse(self.mode))
        patterns = tuple(
            p.strip().lower()
            for p in self.ignore_selectors
            if isinstance(p, str) and p.strip()
        )
        object.__setattr__(self, "ignore_selectors", patterns)

    def matches_ignored(self, selector: str) -> bool:
        """True when *selector* contains any ignore pattern (case-insensitive)."""
        if not self.ignore_selectors:
            return False
        lowered = selector.lower()
        return any(p in lowered for p in self.ignore_selectors)
