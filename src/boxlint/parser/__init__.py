from boxlint.parser.css import (
    MediaBlock,
    extract_media_blocks,
    parse_css,
    parse_declarations,
    split_media,
    strip_comments,
)

__all__ = [
    "parse_css",
    "parse_declarations",
    "strip_comments",
    "extract_media_blocks",
    "split_media",
    "MediaBlock",
]
