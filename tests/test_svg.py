"""Tests for mdmermaid.renderers.svg: flowchart and fallback cards."""

from mdmermaid.config import RenderConfig
from mdmermaid.ir.graph import GraphModel
from mdmermaid.layout import full_layout
from mdmermaid.parsers import parse
from mdmermaid.renderers.svg import SvgRenderer, truncate_label

FLOWCHART = "flowchart\nA[Start] --> B[End]"


def _render(src: str, recognized: bool = True, config: RenderConfig | None = None, index: int = 1) -> str:
    graph = GraphModel.from_diagram(parse(src))
    return SvgRenderer(config).render(graph, full_layout(graph), src, recognized, index)


class TestTruncateLabel:
    def test_short_label_unchanged(self):
        assert truncate_label("Start") == "Start"

    def test_exact_limit_unchanged(self):
        assert truncate_label("a" * 15) == "a" * 15

    def test_long_label_gets_ellipsis(self):
        assert truncate_label("abcdefghijklmnop") == "abcdefghijklmno..."

    def test_custom_limit(self):
        assert truncate_label("abcdef", 3) == "abc..."


class TestFlowchartCard:
    def test_contains_labels_and_source(self):
        out = _render(FLOWCHART)
        assert "<svg" in out
        assert ">Start</text>" in out
        assert ">End</text>" in out
        assert f"<code>{FLOWCHART}</code>" in out
        assert "<details" in out

    def test_nodes_at_grid_positions(self):
        out = _render(FLOWCHART)
        # A at (50, 80), B at (250, 80); rectangles are 120x50 around the center.
        assert '<rect x="-10" y="55" width="120" height="50"' in out
        assert '<rect x="190" y="55" width="120" height="50"' in out
        assert '<text x="50" y="85"' in out
        assert '<text x="250" y="85"' in out

    def test_one_group_per_node(self):
        out = _render("flowchart\nA[a]\nB[b]\nC[c]\nD[d]")
        assert out.count('<g class="node">') == 4
        assert '<text x="50" y="205"' in out

    def test_no_edges_are_drawn(self):
        out = _render(FLOWCHART)
        assert "<line" not in out
        assert "<path" not in out

    def test_empty_canvas(self):
        out = _render("flowchart TD")
        assert "<svg" in out
        assert '<g class="node">' not in out

    def test_long_label_truncated(self):
        out = _render("flowchart\nA[A very long node label]")
        assert ">A very long nod...</text>" in out

    def test_undeclared_endpoint_rendered_with_empty_label(self):
        out = _render("flowchart\nA[Start] --> C")
        assert out.count('<g class="node">') == 2
        assert '<text x="250" y="85" text-anchor="middle" class="text-sm font-medium fill-current"></text>' in out

    def test_escaped_source_and_labels(self):
        out = _render("flowchart\nA[Fish & Chips] --> B", config=RenderConfig(escape_html=True))
        assert ">Fish &amp; Chips</text>" in out
        assert "A[Fish &amp; Chips] --&gt; B" in out

    def test_round_node_is_pill_shaped(self):
        out = _render("flowchart\nA(Round)\nB[Square]")
        assert '<rect x="-10" y="55" width="120" height="50" rx="25"' in out
        assert '<rect x="190" y="55" width="120" height="50" rx="5"' in out

    def test_undeclared_endpoint_is_square(self):
        out = _render("flowchart\nA(Round) --> C")
        assert '<rect x="190" y="55" width="120" height="50" rx="5"' in out


class TestFallbackCard:
    def test_fallback_has_no_canvas(self):
        src = "sequenceDiagram\nAlice->>Bob: hi"
        out = _render(src, recognized=False)
        assert "<svg" not in out
        assert "mermaid-fallback" in out
        assert src in out

    def test_fallback_id_uses_index(self):
        out = _render("pie\n\"a\": 1", recognized=False, index=3)
        assert 'id="mermaid-3"' in out

    def test_custom_strings(self):
        config = RenderConfig(fallback_title="Diagram", fallback_message="Not supported here")
        out = _render("pie", recognized=False, config=config)
        assert ">Diagram</h4>" in out
        assert "Not supported here" in out
