"""Graph model: converts parsed declarations into a networkx MultiDiGraph.

This module owns the graph data structure used by layout and rendering.
Node insertion order is significant: layout positions are assigned from it.
Identifiers that only appear as edge endpoints are added after all declared
nodes and carry the empty label.
"""

from __future__ import annotations

from dataclasses import dataclass

import networkx as nx

from mdmermaid.syntax.types import Diagram, NodeShape


@dataclass
class NodeData:
    id: str
    label: str
    shape: NodeShape
    declared: bool = True


@dataclass
class EdgeData:
    from_id: str
    to_id: str
    label: str | None = None


class GraphModel:
    """Nodes keyed by identifier plus the declaration-ordered edge list.

    Wraps a networkx MultiDiGraph so repeated edges between the same pair of
    nodes are all kept.
    """

    def __init__(self, digraph: nx.MultiDiGraph, edges: list[EdgeData]) -> None:
        self.digraph = digraph
        self.edges = edges

    @classmethod
    def from_diagram(cls, diagram: Diagram) -> GraphModel:
        """Build a GraphModel from a parsed Diagram."""
        digraph: nx.MultiDiGraph = nx.MultiDiGraph()
        edges: list[EdgeData] = []

        for node in diagram.nodes:
            if node.id not in digraph:
                digraph.add_node(node.id, data=NodeData(node.id, node.label, node.shape))

        for edge in diagram.edges:
            _ensure_node(digraph, edge.from_id)
            _ensure_node(digraph, edge.to_id)
            data = EdgeData(edge.from_id, edge.to_id, edge.label)
            digraph.add_edge(edge.from_id, edge.to_id, data=data)
            edges.append(data)

        return cls(digraph=digraph, edges=edges)

    def node_ids(self) -> list[str]:
        """All identifiers in layout order."""
        return list(self.digraph.nodes)

    def declared_ids(self) -> list[str]:
        return [n for n in self.digraph.nodes if self.digraph.nodes[n]["data"].declared]

    def node(self, node_id: str) -> NodeData:
        return self.digraph.nodes[node_id]["data"]

    def label(self, node_id: str) -> str:
        if node_id not in self.digraph:
            return ""
        return self.node(node_id).label

    def labels(self) -> dict[str, str]:
        """Declared identifier -> label mapping, in first-declaration order."""
        return {n: self.node(n).label for n in self.declared_ids()}

    def node_count(self) -> int:
        return self.digraph.number_of_nodes()

    def edge_count(self) -> int:
        return len(self.edges)

    def in_degree(self, node_id: str) -> int:
        if node_id not in self.digraph:
            return 0
        return self.digraph.in_degree(node_id)

    def out_degree(self, node_id: str) -> int:
        if node_id not in self.digraph:
            return 0
        return self.digraph.out_degree(node_id)


def _ensure_node(digraph: nx.MultiDiGraph, node_id: str) -> None:
    if node_id not in digraph:
        data = NodeData(id=node_id, label="", shape=NodeShape.Rectangle, declared=False)
        digraph.add_node(node_id, data=data)
