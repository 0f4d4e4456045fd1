"""Lightweight CSS parser with @media grouping.

This is not a CSS grammar. It extracts ``selector { declarations }`` pairs
and remembers which ``@media`` block each rule came from, which is all the
layout detectors need. It never raises on malformed input:

    .card { width: 500px; }
    @media (max-width: 768px) {
        .card { width: 100%; }
    }
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from boxlint.model.rule import AtRule, ParsedDocument, ParsedRule

__all__ = [
    "MediaBlock",
    "extract_media_blocks",
    "parse_css",
    "parse_declarations",
    "split_media",
    "strip_comments",
]

_COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)

# Matches a flat rule: selector { declarations }
_RULE_RE = re.compile(
    r"""
    (?P<selector>[^{]+)     # everything before the opening brace
    \{                       # opening brace
    (?P<body>[^}]*)          # declarations, no nested blocks
    \}                       # closing brace
    """,
    re.VERBOSE,
)

_MEDIA_KEYWORD = "@media"


@dataclass(frozen=True)
class MediaBlock:
    """A top-level ``@media`` block located by brace matching.

    ``start``/``end`` delimit the full block text (``@media`` through the
    matching ``}``) in the comment-stripped source.
    """

    condition: str
    body: str
    start: int
    end: int


def strip_comments(source: str) -> str:
    """Remove ``/* ... */`` comments, including ones spanning lines."""
    return _COMMENT_RE.sub("", source)


def parse_declarations(block: str) -> dict[str, str]:
    """Parse the inside of a rule block into ``{property: value}``.

    Property names are lower-cased. Fragments without a colon are ignored and
    the last occurrence of a repeated property wins.
    """
    declarations: dict[str, str] = {}
    for fragment in block.split(";"):
        fragment = fragment.strip()
        if not fragment:
            continue
        name, sep, value = fragment.partition(":")
        if not sep:
            continue
        declarations[name.strip().lower()] = value.strip()
    return declarations


def extract_media_blocks(source: str) -> list[MediaBlock]:
    """Locate every top-level ``@media`` block in *source*.

    The block extends from the first ``{`` after the at-rule header to the
    brace that brings the depth back to zero. An unterminated block runs to
    the end of the input.
    """
    blocks: list[MediaBlock] = []
    pos = 0
    while pos < len(source):
        start = source.find(_MEDIA_KEYWORD, pos)
        if start == -1:
            break
        head_start = start + len(_MEDIA_KEYWORD)
        brace_open = source.find("{", head_start)
        if brace_open == -1:
            break

        depth = 1
        cursor = brace_open + 1
        while cursor < len(source) and depth > 0:
            char = source[cursor]
            if char == "{":
                depth += 1
            elif char == "}":
                depth -= 1
            cursor += 1

        body_end = cursor - 1 if depth == 0 else cursor
        blocks.append(
            MediaBlock(
                condition=source[head_start:brace_open].strip(),
                body=source[brace_open + 1 : body_end],
                start=start,
                end=cursor,
            )
        )
        pos = cursor
    return blocks


def split_media(source: str) -> tuple[str, list[MediaBlock]]:
    """Split comment-free *source* into base text and its media blocks."""
    blocks = extract_media_blocks(source)
    pieces: list[str] = []
    last = 0
    for block in blocks:
        pieces.append(source[last : block.start])
        last = block.end
    pieces.append(source[last:])
    return "".join(pieces), blocks


def _extract_rules(text: str, at_rule: AtRule | None) -> list[ParsedRule]:
    return [
        ParsedRule(
            selector=match.group("selector").strip(),
            declarations=parse_declarations(match.group("body")),
            at_rule=at_rule,
        )
        for match in _RULE_RE.finditer(text)
    ]


def parse_css(source: str) -> ParsedDocument:
    """Parse stylesheet text into a ParsedDocument.

    Base rules come first in source order, followed by the rules of each
    media block in block order. Rules with an empty declaration block are
    kept so that "missing property" checks can see them.
    """
    base_text, blocks = split_media(strip_comments(source))
    rules = _extract_rules(base_text, None)
    for block in blocks:
        rules.extend(
            _extract_rules(block.body, AtRule(type="media", condition=block.condition))
        )
    return ParsedDocument(rules=tuple(rules))
