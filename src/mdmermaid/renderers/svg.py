"""SVG card renderer.

Flowcharts become a titled card holding an inline SVG canvas (one rectangle
and caption per node, pill-shaped for round-bracket nodes) followed by a
collapsed panel with the raw source. Edges are not drawn. Anything else becomes
an informational card with the same collapsed source panel.
"""

from __future__ import annotations

import html

from mdmermaid.config import RenderConfig
from mdmermaid.ir.graph import GraphModel
from mdmermaid.layout.types import LayoutPosition
from mdmermaid.syntax.types import NodeShape

ELLIPSIS = "..."

NODE_WIDTH = 120
NODE_HEIGHT = 50
NODE_RADII: dict[NodeShape, int] = {
    NodeShape.Rectangle: 5,
    NodeShape.Rounded: NODE_HEIGHT // 2,
}
VIEWBOX = "0 0 600 400"

_CARD_CLASS = "mermaid-simple bg-white dark:bg-gray-800 p-6 rounded-lg border border-gray-200 dark:border-gray-700"
_FALLBACK_CLASS = (
    "mermaid-fallback bg-blue-50 dark:bg-blue-900/20 border border-blue-200 dark:border-blue-800 rounded-lg p-6 my-6"
)
_SUMMARY_CLASS = "cursor-pointer text-sm text-blue-600 dark:text-blue-400 hover:underline"


def truncate_label(label: str, limit: int = 15) -> str:
    if len(label) > limit:
        return label[:limit] + ELLIPSIS
    return label


class SvgRenderer:
    """Diagram renderer producing HTML cards with inline SVG."""

    def __init__(self, config: RenderConfig | None = None) -> None:
        self.config = config or RenderConfig()

    def _text(self, s: str) -> str:
        if self.config.escape_html:
            return html.escape(s, quote=False)
        return s

    def render(
        self,
        graph: GraphModel,
        layout: dict[str, LayoutPosition],
        source: str,
        recognized: bool,
        index: int = 1,
    ) -> str:
        if recognized:
            return self.render_flowchart(graph, layout, source)
        return self.render_fallback(source, index)

    def render_node(self, pos: LayoutPosition, label: str, shape: NodeShape = NodeShape.Rectangle) -> str:
        text = self._text(truncate_label(label, self.config.label_limit))
        x0 = pos.x - NODE_WIDTH // 2
        y0 = pos.y - NODE_HEIGHT // 2
        return (
            f'<g class="node">'
            f'<rect x="{x0}" y="{y0}" width="{NODE_WIDTH}" height="{NODE_HEIGHT}" rx="{NODE_RADII[shape]}" '
            f'fill="currentColor" fill-opacity="0.1" stroke="currentColor" stroke-width="2"/>'
            f'<text x="{pos.x}" y="{pos.y + 5}" text-anchor="middle" class="text-sm font-medium fill-current">'
            f"{text}</text></g>"
        )

    def render_flowchart(self, graph: GraphModel, layout: dict[str, LayoutPosition], source: str) -> str:
        nodes = [
            self.render_node(layout[node_id], graph.label(node_id), graph.node(node_id).shape)
            for node_id in graph.node_ids()
        ]
        lines = [
            f'<div class="{_CARD_CLASS}">',
            '<div class="text-center mb-4">'
            f'<span class="text-sm text-gray-500 dark:text-gray-400">📊 {self._text(self.config.diagram_title)}</span>'
            "</div>",
            f'<svg viewBox="{VIEWBOX}" class="w-full h-64 text-gray-700 dark:text-gray-300">',
            *nodes,
            "</svg>",
            '<details class="mt-4">',
            f'<summary class="{_SUMMARY_CLASS}">{self._text(self.config.source_toggle_text)}</summary>',
            '<pre class="mt-2 p-4 bg-gray-100 dark:bg-gray-700 rounded text-xs overflow-x-auto">'
            f"<code>{self._text(source)}</code></pre>",
            "</details>",
            "</div>",
        ]
        return "\n".join(lines)

    def render_fallback(self, source: str, index: int = 1) -> str:
        lines = [
            f'<div id="mermaid-{index}" class="{_FALLBACK_CLASS}">',
            '<div class="flex items-center gap-2 mb-3">'
            '<span class="text-2xl">📊</span>'
            f'<h4 class="font-semibold text-blue-700 dark:text-blue-300">{self._text(self.config.fallback_title)}</h4>'
            "</div>",
            f'<p class="text-blue-600 dark:text-blue-400 text-sm mb-4">{self._text(self.config.fallback_message)}</p>',
            "<details>",
            f'<summary class="{_SUMMARY_CLASS} font-medium">{self._text(self.config.fallback_toggle_text)}</summary>',
            '<pre class="mt-3 p-4 bg-gray-100 dark:bg-gray-700 rounded text-sm overflow-x-auto">'
            f'<code class="text-gray-800 dark:text-gray-200">{self._text(source)}</code></pre>',
            "</details>",
            "</div>",
        ]
        return "\n".join(lines)
