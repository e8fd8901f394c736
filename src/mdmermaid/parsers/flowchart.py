"""Flowchart parser: independent per-line pattern checks.

Every line of the body is tried against all four declaration patterns and
every pattern that matches contributes its declarations. Lines matching none
are skipped.
"""

from __future__ import annotations

import re

from mdmermaid.syntax.types import Diagram, DiagramKind, EdgeDecl, NodeDecl, NodeShape

# ─── Patterns ────────────────────────────────────────────────────────────────

_RECT_NODE_RE = re.compile(r"(\w+)\[([^\]]+)\]")
_ROUND_NODE_RE = re.compile(r"(\w+)\(([^)]+)\)")

# An edge source may carry its own shape, e.g. A[Start] --> B.
# The target sits in a lookahead so chains like A --> B --> C yield both edges.
_SHAPE_SUFFIX = r"(?:\[[^\]]*\]|\([^)]*\))?"
_EDGE_RE = re.compile(rf"(\w+){_SHAPE_SUFFIX}\s*-->\s*(?=(\w+))")
_LABELED_EDGE_RE = re.compile(rf"(\w+){_SHAPE_SUFFIX}\s*-->\|([^|]+)\|\s*(?=(\w+))")

_LINE_BREAK_RE = re.compile(r"<br\s*/?>", re.IGNORECASE)
_TAG_RE = re.compile(r"<[^>]*>")


def normalize_label(raw: str) -> str:
    """Flatten line breaks to spaces and strip remaining tag-like sequences."""
    label = _LINE_BREAK_RE.sub(" ", raw)
    return _TAG_RE.sub("", label)


def _body_lines(src: str) -> list[str]:
    return [line.strip() for line in src.splitlines() if line.strip()]


class FlowchartParser:
    """Flowchart diagram parser."""

    def parse(self, src: str) -> Diagram:
        diagram = Diagram(kind=DiagramKind.Flowchart, source=src)
        for line in _body_lines(src):
            self.parse_line(line, diagram)
        return diagram

    def parse_line(self, line: str, diagram: Diagram) -> None:
        for m in _RECT_NODE_RE.finditer(line):
            diagram.declare_node(NodeDecl(m.group(1), normalize_label(m.group(2)), NodeShape.Rectangle))

        for m in _ROUND_NODE_RE.finditer(line):
            diagram.declare_node(NodeDecl(m.group(1), normalize_label(m.group(2)), NodeShape.Rounded))

        for m in _EDGE_RE.finditer(line):
            diagram.edges.append(EdgeDecl(m.group(1), m.group(2)))

        for m in _LABELED_EDGE_RE.finditer(line):
            diagram.edges.append(EdgeDecl(m.group(1), m.group(3), m.group(2).strip()))
