"""mdmermaid: Markdown with embedded Mermaid flowcharts to styled HTML."""

from dataclasses import replace

from mdmermaid.config import RenderConfig
from mdmermaid.ir.graph import GraphModel
from mdmermaid.layout import grid_layout
from mdmermaid.markup.extract import extract, render_diagram
from mdmermaid.markup.transform import transform
from mdmermaid.parsers import parse
from mdmermaid.pipeline import render, render_document


def render_escaped(text: str, config: RenderConfig | None = None) -> str:
    """Render with HTML escaping of author text, for untrusted documents.

    Args:
        text: Raw document text.
        config: Base options; escape_html is forced on.

    Returns:
        The markup string. Author HTML is escaped and links with schemes other
        than http, https and mailto are emitted as plain text. Attribute values
        other than link targets are not otherwise validated.
    """
    return render(text, replace(config or RenderConfig(), escape_html=True))


__all__ = [
    "GraphModel",
    "RenderConfig",
    "extract",
    "grid_layout",
    "parse",
    "render",
    "render_diagram",
    "render_document",
    "render_escaped",
    "transform",
]
