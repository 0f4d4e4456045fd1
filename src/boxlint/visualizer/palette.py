"""Character palette shared by every diagram.

Diagrams may contain printable ASCII plus the characters defined here and
nothing else.
"""

from __future__ import annotations

from boxlint.model.issue import Severity


class Chars:
    """Box-drawing and content characters."""

    # content
    SOLID = "█"
    MEDIUM = "▓"
    LIGHT = "░"

    # borders
    H_LINE = "─"
    V_LINE = "│"
    TOP_LEFT = "┌"
    TOP_RIGHT = "┐"
    BOTTOM_LEFT = "└"
    BOTTOM_RIGHT = "┘"

    # indicators
    DOWN = "▼"
    RIGHT = "►"
    LEFT = "◄"
    ELLIPSIS = "…"
    DOT = "•"


class Glyphs:
    """Severity and status markers."""

    CRITICAL = "✖"
    MEDIUM = "⚠"
    LOW = "ⓘ"

    PROBLEM = "✖"
    SOLUTION = "✓"
    ARROW = "→"


def _members(cls: type) -> frozenset[str]:
    return frozenset(v for k, v in vars(cls).items() if k.isupper())


PALETTE: frozenset[str] = _members(Chars) | _members(Glyphs)

_SEVERITY_GLYPHS = {
    Severity.CRITICAL: Glyphs.CRITICAL,
    Severity.MEDIUM: Glyphs.MEDIUM,
    Severity.LOW: Glyphs.LOW,
}


def severity_glyph(severity: Severity | str) -> str:
    """Glyph for *severity*; unknown values get the low-severity glyph."""
    try:
        return _SEVERITY_GLYPHS[Severity.parse(severity)]
    except ValueError:
        return Glyphs.LOW


def is_palette_text(text: str) -> bool:
    """True when every non-ASCII character of *text* belongs to the palette."""
    return all(ch.isascii() or ch in PALETTE for ch in text)
