"""ASCII before/after diagrams for detected issues."""

from boxlint.visualizer.cache import TemplateCache, cache_key
from boxlint.visualizer.layout import calculate_proportions, parse_length, scale_to_chars
from boxlint.visualizer.palette import PALETTE, Chars, Glyphs, is_palette_text, severity_glyph
from boxlint.visualizer.registry import (
    GeneratorRegistry,
    Visualizer,
    coerce_issue,
    create_default_registry,
    error_diagram,
    unavailable_diagram,
)
from boxlint.visualizer.text import pad, truncate, visual_length

__all__ = [
    "Chars",
    "Glyphs",
    "PALETTE",
    "GeneratorRegistry",
    "TemplateCache",
    "Visualizer",
    "cache_key",
    "calculate_proportions",
    "coerce_issue",
    "create_default_registry",
    "error_diagram",
    "is_palette_text",
    "pad",
    "parse_length",
    "scale_to_chars",
    "severity_glyph",
    "truncate",
    "unavailable_diagram",
    "visual_length",
]
