"""Parser registry: detect the diagram kind and dispatch to the right parser."""

from __future__ import annotations

from mdmermaid.parsers.base import Parser
from mdmermaid.parsers.flowchart import FlowchartParser
from mdmermaid.syntax.types import Diagram, DiagramKind

FLOWCHART_KEYWORD = "flowchart"

_PARSERS: dict[DiagramKind, type[Parser]] = {
    DiagramKind.Flowchart: FlowchartParser,
}


def detect_kind(src: str, keyword: str = FLOWCHART_KEYWORD) -> DiagramKind:
    """Substring check: the keyword may appear anywhere in the body."""
    if keyword and keyword in src:
        return DiagramKind.Flowchart
    return DiagramKind.Unsupported


def parse(src: str, keyword: str = FLOWCHART_KEYWORD) -> Diagram:
    """Detect the diagram kind and parse the body.

    Unsupported kinds come back with no declarations; the renderer shows
    them as raw source.
    """
    kind = detect_kind(src, keyword)
    parser_cls = _PARSERS.get(kind)
    if parser_cls is None:
        return Diagram(kind=kind, source=src)
    return parser_cls().parse(src)


__all__ = ["FLOWCHART_KEYWORD", "FlowchartParser", "Parser", "detect_kind", "parse"]
