"""Tests for the CSS parser and media-block extraction."""

import pytest

from boxlint.model.rule import AtRule, ParsedRule
from boxlint.parser import (
    extract_media_blocks,
    parse_css,
    parse_declarations,
    split_media,
    strip_comments,
)


# ---------------------------------------------------------------------------
# parse_declarations
# ---------------------------------------------------------------------------


class TestParseDeclarations:
    def test_simple_block(self) -> None:
        assert parse_declarations(" width: 10px; color: red ") == {
            "width": "10px",
            "color": "red",
        }

    def test_property_names_lowercased(self) -> None:
        assert parse_declarations("Width: 10px") == {"width": "10px"}

    def test_last_occurrence_wins(self) -> None:
        assert parse_declarations("width: 10px; width: 20px") == {"width": "20px"}

    def test_fragments_without_colon_ignored(self) -> None:
        assert parse_declarations("junk; color: red;;") == {"color": "red"}

    def test_value_keeps_later_colons(self) -> None:
        decls = parse_declarations("background: url(http://example.com/a.png)")
        assert decls["background"] == "url(http://example.com/a.png)"

    def test_empty_block(self) -> None:
        assert parse_declarations("   ") == {}


# ---------------------------------------------------------------------------
# Comments and media blocks
# ---------------------------------------------------------------------------


class TestStripComments:
    def test_multiline_comment_removed(self) -> None:
        source = "/* .x {\n width: 1px } */.y { color: red }"
        assert strip_comments(source) == ".y { color: red }"

    def test_commented_rule_not_parsed(self) -> None:
        doc = parse_css("/* .x { width: 500px; } */ .y { color: red; }")
        assert [r.selector for r in doc.rules] == [".y"]


class TestExtractMediaBlocks:
    def test_single_block(self) -> None:
        source = "@media (max-width: 600px) { .a { width: 100%; } }"
        blocks = extract_media_blocks(source)
        assert len(blocks) == 1
        assert blocks[0].condition == "(max-width: 600px)"
        assert ".a { width: 100%; }" in blocks[0].body
        assert blocks[0].start == 0
        assert blocks[0].end == len(source)

    def test_nested_rules_are_brace_matched(self) -> None:
        source = "@media print { .a { x: 1; } .b { y: 2; } } .c { z: 3; }"
        base, blocks = split_media(source)
        assert len(blocks) == 1
        assert ".b { y: 2; }" in blocks[0].body
        assert ".c { z: 3; }" in base
        assert ".a" not in base

    def test_multiple_blocks(self) -> None:
        source = (
            "@media (max-width: 600px) { .a { x: 1; } }\n"
            "@media (min-width: 1200px) { .b { y: 2; } }"
        )
        conditions = [b.condition for b in extract_media_blocks(source)]
        assert conditions == ["(max-width: 600px)", "(min-width: 1200px)"]

    def test_unterminated_block_runs_to_end(self) -> None:
        source = "@media (max-width: 500px) { .a { width: 600px; }"
        blocks = extract_media_blocks(source)
        assert len(blocks) == 1
        assert blocks[0].end == len(source)
        assert ".a { width: 600px; }" in blocks[0].body

    def test_no_media(self) -> None:
        assert extract_media_blocks(".a { x: 1; }") == []


# ---------------------------------------------------------------------------
# parse_css
# ---------------------------------------------------------------------------


class TestParseCss:
    def test_base_then_media_rules(self) -> None:
        doc = parse_css(
            "@media (max-width: 768px) { .card { width: 100%; } }\n"
            ".card { width: 500px; }"
        )
        assert len(doc.rules) == 2
        base, media = doc.rules
        assert base == ParsedRule(".card", {"width": "500px"})
        assert media.at_rule == AtRule("media", "(max-width: 768px)")
        assert media.in_media
        assert not base.in_media

    def test_selector_list_kept_verbatim(self) -> None:
        doc = parse_css("h1, h2 { margin: 0; }")
        assert doc.rules[0].selector == "h1, h2"

    def test_empty_rule_kept(self) -> None:
        doc = parse_css(".empty {}")
        assert len(doc.rules) == 1
        assert dict(doc.rules[0].declarations) == {}

    def test_media_conditions_distinct(self) -> None:
        doc = parse_css(
            "@media (max-width: 600px) { .a { x: 1; } .b { y: 2; } }"
            "@media (max-width: 600px) { .c { z: 3; } }"
        )
        assert doc.media_conditions() == ["(max-width: 600px)"]
        assert len(doc.media_rules()) == 3
        assert doc.base_rules() == []

    def test_garbage_does_not_raise(self) -> None:
        doc = parse_css("}}} {{ @media { ;;; : }")
        assert isinstance(doc.rules, tuple)

    def test_declarations_are_read_only(self) -> None:
        rule = parse_css(".a { width: 1px; }").rules[0]
        with pytest.raises(TypeError):
            rule.declarations["width"] = "2px"  # type: ignore[index]

    def test_get_missing_property(self) -> None:
        rule = parse_css(".a { width: 1px; }").rules[0]
        assert rule.get("width") == "1px"
        assert rule.get("height") is None


class TestReparse:
    @pytest.mark.parametrize(
        "source",
        [
            ".card { width: 500px; height: 300px; }",
            "body { overflow-x: hidden; }\n"
            "@media (max-width: 768px) { .card { width: 100%; } .nav { display: flex; } }\n"
            ".grid { grid-template-columns: 200px 200px; }",
            "/* header */ .a { padding: 32px; }\n"
            "@media screen and (min-width: 40em) {\n  .a { padding: 8px; }\n}\n"
            "@media print { .b { width: 10cm; } }",
        ],
    )
    def test_rebuilt_source_parses_the_same(self, source: str) -> None:
        base, blocks = split_media(strip_comments(source))
        rebuilt = base + "".join(f"@media {b.condition} {{{b.body}}}" for b in blocks)
        assert parse_css(rebuilt) == parse_css(source)
