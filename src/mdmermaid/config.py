"""Centralized configuration for mdmermaid."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class RenderConfig:
    """Configuration for the rendering pipeline."""

    diagram_tag: str = "mermaid"
    flowchart_keyword: str = "flowchart"
    label_limit: int = 15
    escape_html: bool = False
    extensions: bool = False
    diagram_title: str = "Mermaid diagram"
    source_toggle_text: str = "Show source"
    fallback_title: str = "Mermaid diagram"
    fallback_message: str = "Full rendering of this diagram type is not supported. Use a dedicated Mermaid editor to view it."
    fallback_toggle_text: str = "Show diagram source"
