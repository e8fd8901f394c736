"""Tests for mdmermaid.ir.graph: GraphModel construction and queries."""

from mdmermaid.ir.graph import GraphModel
from mdmermaid.parsers import parse
from mdmermaid.syntax.types import Diagram, DiagramKind, EdgeDecl, NodeDecl


def _model(src: str) -> GraphModel:
    return GraphModel.from_diagram(parse(src))


class TestBasicConstruction:
    def test_empty_graph(self):
        gm = GraphModel.from_diagram(Diagram(kind=DiagramKind.Flowchart, source=""))
        assert gm.node_count() == 0
        assert gm.edge_count() == 0
        assert gm.labels() == {}

    def test_labels_in_declaration_order(self):
        gm = _model("flowchart\nA[Start] --> B[End]")
        assert gm.labels() == {"A": "Start", "B": "End"}
        assert list(gm.labels()) == ["A", "B"]

    def test_edges_keep_declaration_order(self):
        gm = _model("flowchart\nB --> C\nA --> B")
        assert [(e.from_id, e.to_id) for e in gm.edges] == [("B", "C"), ("A", "B")]

    def test_parallel_edges_are_kept(self):
        gm = _model("flowchart\nA --> B\nA --> B")
        assert gm.edge_count() == 2
        assert gm.out_degree("A") == 2
        assert gm.in_degree("B") == 2


class TestUndeclaredEndpoints:
    def test_endpoints_follow_declared_nodes(self):
        gm = _model("flowchart\nA[Start] --> C\nB[Mid]")
        assert gm.declared_ids() == ["A", "B"]
        assert gm.node_ids() == ["A", "B", "C"]

    def test_undeclared_label_is_empty(self):
        gm = _model("flowchart\nA[Start] --> C")
        assert gm.label("C") == ""
        assert "C" not in gm.labels()

    def test_unknown_id_queries(self):
        gm = _model("flowchart\nA[Start]")
        assert gm.label("missing") == ""
        assert gm.in_degree("missing") == 0
        assert gm.out_degree("missing") == 0


def test_from_hand_built_diagram():
    diagram = Diagram(
        kind=DiagramKind.Flowchart,
        source="",
        nodes=[NodeDecl("X", "Ex")],
        edges=[EdgeDecl("X", "Y", "go")],
    )
    gm = GraphModel.from_diagram(diagram)
    assert gm.node_ids() == ["X", "Y"]
    assert gm.edges[0].label == "go"
    assert gm.node("X").declared
    assert not gm.node("Y").declared
