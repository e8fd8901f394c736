"""Paragraph-candidate segmentation and block classification."""

from __future__ import annotations

import re

from mdmermaid.syntax.types import BlockKind

_BLANK_LINE_RE = re.compile(r"\n\s*\n")
_LEADING_TAG_RE = re.compile(r"^<([a-z][a-z0-9]*)(?=[\s>/])")

_BLOCK_TAGS: dict[str, BlockKind] = {
    "h1": BlockKind.Heading,
    "h2": BlockKind.Heading,
    "h3": BlockKind.Heading,
    "h4": BlockKind.Heading,
    "h5": BlockKind.Heading,
    "h6": BlockKind.Heading,
    "ul": BlockKind.List,
    "ol": BlockKind.List,
    "li": BlockKind.ListItem,
    "pre": BlockKind.CodeBlock,
    "div": BlockKind.Container,
    "hr": BlockKind.Rule,
}

_EXTENDED_TAGS: dict[str, BlockKind] = {
    "blockquote": BlockKind.Blockquote,
    "table": BlockKind.Table,
}


def split_segments(text: str) -> list[str]:
    """Split on blank lines; drop segments that are empty after trimming."""
    return [seg.strip() for seg in _BLANK_LINE_RE.split(text) if seg.strip()]


def classify(segment: str, extensions: bool = False) -> BlockKind:
    """Block kind of a trimmed segment, judged by its leading tag only."""
    m = _LEADING_TAG_RE.match(segment)
    if m is None:
        return BlockKind.Paragraph
    tag = m.group(1)
    if tag in _BLOCK_TAGS:
        return _BLOCK_TAGS[tag]
    if extensions and tag in _EXTENDED_TAGS:
        return _EXTENDED_TAGS[tag]
    return BlockKind.Paragraph
