"""Tests for mdmermaid.parsers: per-line declaration patterns."""

from mdmermaid.parsers import detect_kind, parse
from mdmermaid.parsers.flowchart import FlowchartParser, normalize_label
from mdmermaid.syntax.types import DiagramKind, NodeShape


def test_parse_node_with_label():
    diagram = parse("flowchart\nA[Start] --> B[End]")
    assert [(n.id, n.label) for n in diagram.nodes] == [("A", "Start"), ("B", "End")]
    assert len(diagram.edges) == 1
    assert diagram.edges[0].from_id == "A"
    assert diagram.edges[0].to_id == "B"
    assert diagram.edges[0].label is None


def test_parse_round_node():
    diagram = parse("flowchart LR\n    A(Round)")
    assert diagram.nodes[0].id == "A"
    assert diagram.nodes[0].label == "Round"
    assert diagram.nodes[0].shape == NodeShape.Rounded


def test_parse_plain_edge_between_bare_ids():
    diagram = parse("flowchart TD\n    A --> B")
    assert diagram.nodes == []
    assert [(e.from_id, e.to_id) for e in diagram.edges] == [("A", "B")]


def test_parse_edge_label():
    diagram = parse("flowchart TD\n    A -->|yes| B")
    assert len(diagram.edges) == 1
    assert diagram.edges[0].label == "yes"
    assert diagram.edges[0].to_id == "B"


def test_parse_chain():
    diagram = parse("flowchart TD\n    A --> B --> C")
    assert [(e.from_id, e.to_id) for e in diagram.edges] == [("A", "B"), ("B", "C")]


def test_square_pattern_runs_before_round_pattern():
    diagram = parse("flowchart\nA(Round) --> B[Rect]")
    assert [n.id for n in diagram.nodes] == ["B", "A"]
    assert [(e.from_id, e.to_id) for e in diagram.edges] == [("A", "B")]


def test_all_matching_patterns_are_recorded():
    diagram = parse("flowchart\nA[call(x)]")
    assert [(n.id, n.label) for n in diagram.nodes] == [("A", "call(x)"), ("call", "x")]


def test_first_definition_wins():
    diagram = parse("flowchart TD\n    A[Hello] --> B\n    A[World] --> C\n")
    a_node = next(n for n in diagram.nodes if n.id == "A")
    assert a_node.label == "Hello"
    assert len(diagram.edges) == 2


def test_unparsable_lines_are_skipped():
    src = "flowchart TD\n    %% comment\n    style A fill:#f9f\n\n    A[Go]\n"
    diagram = parse(src)
    assert [n.id for n in diagram.nodes] == ["A"]
    assert diagram.edges == []


def test_label_line_breaks_become_spaces():
    diagram = parse("flowchart\nA[Line1<br>Line2]\nB[One<br/>Two]")
    assert diagram.nodes[0].label == "Line1 Line2"
    assert diagram.nodes[1].label == "One Two"


def test_label_tags_are_stripped():
    assert normalize_label("<b>Bold</b> text") == "Bold text"


def test_quoted_label():
    diagram = parse('flowchart\nA["Hello World"]')
    assert diagram.nodes[0].label == '"Hello World"'


def test_label_whitespace_is_kept():
    diagram = parse("flowchart\nA[ Start ]")
    assert diagram.nodes[0].label == " Start "


def test_detect_kind_is_a_substring_check():
    assert detect_kind("flowchart TD\nA-->B") == DiagramKind.Flowchart
    assert detect_kind("%% not a flowchart header\nA-->B") == DiagramKind.Flowchart
    assert detect_kind("graph TD\nA-->B") == DiagramKind.Unsupported
    assert detect_kind("sequenceDiagram\nA->>B: hi") == DiagramKind.Unsupported


def test_unsupported_kind_has_no_declarations():
    diagram = parse("sequenceDiagram\nA[x] --> B")
    assert diagram.kind == DiagramKind.Unsupported
    assert diagram.nodes == []
    assert diagram.edges == []
    assert diagram.source == "sequenceDiagram\nA[x] --> B"


def test_custom_keyword():
    diagram = parse("graph TD\nA[x]", keyword="graph")
    assert diagram.kind == DiagramKind.Flowchart
    assert diagram.nodes[0].label == "x"


def test_parser_class_direct():
    diagram = FlowchartParser().parse("")
    assert diagram.kind == DiagramKind.Flowchart
    assert diagram.nodes == []
