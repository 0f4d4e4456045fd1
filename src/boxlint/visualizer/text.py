"""Text measurement, padding, and truncation for fixed-width diagrams.

Some glyphs render two columns wide in terminals and editors, so every width
here is a visual width rather than ``len()``.
"""

from __future__ import annotations

from boxlint.visualizer.palette import Chars

_VARIATION_SELECTOR = "\ufe0f"

# Code point ranges rendered double-width.
_WIDE_RANGES = (
    (0x1F300, 0x1F9FF),  # pictographs, emoticons
    (0x2600, 0x26FF),  # miscellaneous symbols
    (0x2700, 0x27BF),  # dingbats
    (0x2139, 0x2139),  # information source
    (0x2194, 0x21AA),  # arrows
)


def is_wide(char: str) -> bool:
    """True when *char* occupies two columns."""
    if not char:
        return False
    code = ord(char[0])
    return any(lo <= code <= hi for lo, hi in _WIDE_RANGES)


def char_width(char: str) -> int:
    if char == _VARIATION_SELECTOR:
        return 0
    return 2 if is_wide(char) else 1


def visual_length(text: str) -> int:
    """Number of columns *text* occupies."""
    return sum(char_width(ch) for ch in text)


def truncate(text: str, max_length: int) -> str:
    """Shorten *text* to *max_length* columns, ending with an ellipsis."""
    if visual_length(text) <= max_length:
        return text
    if max_length <= 0:
        return ""
    budget = max_length - 1
    kept: list[str] = []
    used = 0
    for ch in text:
        width = char_width(ch)
        if used + width > budget:
            break
        kept.append(ch)
        used += width
    return "".join(kept) + Chars.ELLIPSIS


def pad(text: str, width: int, align: str = "left") -> str:
    """Pad *text* to exactly *width* columns, truncating if it is too long."""
    length = visual_length(text)
    if length >= width:
        text = truncate(text, width)
        length = visual_length(text)
    padding = max(0, width - length)
    if align == "center":
        left = padding // 2
        return " " * left + text + " " * (padding - left)
    if align == "right":
        return " " * padding + text
    return text + " " * padding
