"""Declaration types for diagram bodies and block kinds for markup.

These types represent what the parsers saw in the input, before the graph
model is built: enums (NodeShape, DiagramKind, BlockKind) and dataclasses
(NodeDecl, EdgeDecl, Diagram).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


class NodeShape(Enum):
    Rectangle = auto()  # id[Label]
    Rounded = auto()  # id(Label)


class DiagramKind(Enum):
    Flowchart = auto()
    Unsupported = auto()


class BlockKind(Enum):
    Heading = auto()
    Paragraph = auto()
    List = auto()
    ListItem = auto()
    CodeBlock = auto()
    Container = auto()  # <div>, including diagram placeholders
    Rule = auto()
    Blockquote = auto()
    Table = auto()


@dataclass
class NodeDecl:
    id: str
    label: str
    shape: NodeShape = NodeShape.Rectangle


@dataclass
class EdgeDecl:
    from_id: str
    to_id: str
    label: str | None = None


@dataclass
class Diagram:
    """All declarations found in one diagram body, in source order."""

    kind: DiagramKind
    source: str
    nodes: list[NodeDecl] = field(default_factory=list)
    edges: list[EdgeDecl] = field(default_factory=list)

    def declare_node(self, node: NodeDecl) -> None:
        """First-declaration-wins: keep the earliest label for an id."""
        if not any(n.id == node.id for n in self.nodes):
            self.nodes.append(node)
