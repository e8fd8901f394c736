"""Diagram extraction.

Finds fenced diagram blocks (```mermaid ... ```), renders each one on its own
and puts the result back where the fence was. Text outside the fences is
passed through in its original order.

The orchestrator uses the placeholder form: every fence becomes a block-level
slot element, the surrounding text is transformed, and only then are the
rendered diagrams substituted back in.
"""

from __future__ import annotations

import hashlib
import html
import logging
import re
from dataclasses import dataclass, field

from mdmermaid.config import RenderConfig
from mdmermaid.ir.graph import GraphModel
from mdmermaid.layout import full_layout
from mdmermaid.parsers import parse
from mdmermaid.renderers.svg import SvgRenderer
from mdmermaid.syntax.types import DiagramKind

logger = logging.getLogger(__name__)

_SLOT_TEMPLATE = r'<div data-mdmermaid-slot="{token}-(\d+)"></div>'


def fence_pattern(tag: str) -> re.Pattern[str]:
    """Opening fence + tag, newline, body, newline, closing fence. Non-greedy."""
    return re.compile(r"```" + re.escape(tag) + r"\n(.*?)\n```", re.DOTALL)


def placeholder(index: int, token: str) -> str:
    return f'<div data-mdmermaid-slot="{token}-{index}"></div>'


def slot_token(text: str) -> str:
    """A token that does not occur anywhere in text, stable for equal inputs."""
    token = hashlib.sha1(text.encode("utf-8", "surrogatepass")).hexdigest()[:16]
    while token in text:
        token = hashlib.sha1(token.encode("ascii")).hexdigest()[:16]
    return token


@dataclass
class Slots:
    """Rendered diagrams of one call; slot N holds item N-1."""

    token: str
    markup: list[str] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.markup)

    def __getitem__(self, i: int) -> str:
        return self.markup[i]


def render_diagram(source: str, index: int = 1, config: RenderConfig | None = None) -> str:
    """Parse, lay out and render one diagram body."""
    config = config or RenderConfig()
    diagram = parse(source, config.flowchart_keyword)
    graph = GraphModel.from_diagram(diagram)
    layout = full_layout(graph)
    logger.debug(
        "diagram %d: kind=%s nodes=%d edges=%d",
        index,
        diagram.kind.name,
        graph.node_count(),
        graph.edge_count(),
    )
    renderer = SvgRenderer(config)
    return renderer.render(graph, layout, source, diagram.kind == DiagramKind.Flowchart, index)


def _render_isolated(source: str, index: int, config: RenderConfig) -> str:
    # A broken diagram degrades to its source card; the other fences still render.
    try:
        return render_diagram(source, index, config)
    except Exception:
        logger.warning("diagram %d could not be rendered, showing its source instead", index, exc_info=True)
        return SvgRenderer(config).render_fallback(source, index)


def _passthrough(text: str, config: RenderConfig) -> str:
    if config.escape_html:
        return html.escape(text, quote=False)
    return text


def extract_placeholders(text: str, config: RenderConfig | None = None) -> tuple[str, Slots]:
    """Replace each diagram fence with a slot element.

    Slot elements carry a token absent from text, so author-written look-alikes
    are never filled.

    Returns:
        The rewritten text and the rendered diagrams.
    """
    config = config or RenderConfig()
    slots = Slots(token=slot_token(text))
    parts: list[str] = []
    pos = 0
    for m in fence_pattern(config.diagram_tag).finditer(text):
        parts.append(_passthrough(text[pos : m.start()], config))
        slots.markup.append(_render_isolated(m.group(1), len(slots) + 1, config))
        parts.append(placeholder(len(slots), slots.token))
        pos = m.end()
    parts.append(_passthrough(text[pos:], config))
    return "".join(parts), slots


def restore_placeholders(markup: str, slots: Slots) -> str:
    """Substitute rendered diagrams back into their slots."""
    slot_re = re.compile(_SLOT_TEMPLATE.format(token=re.escape(slots.token)))

    def _fill(m: re.Match[str]) -> str:
        i = int(m.group(1))
        if 1 <= i <= len(slots):
            return slots[i - 1]
        return m.group(0)

    return slot_re.sub(_fill, markup)


def extract(text: str, config: RenderConfig | None = None) -> str:
    """Replace every diagram fence with its rendered markup."""
    stripped, slots = extract_placeholders(text, config)
    return restore_placeholders(stripped, slots)
