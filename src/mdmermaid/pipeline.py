"""Rendering pipeline: diagram extraction, then block/inline transformation."""

from __future__ import annotations

from mdmermaid.config import RenderConfig
from mdmermaid.markup.extract import extract_placeholders, restore_placeholders
from mdmermaid.markup.transform import Transformer

CONTAINER_CLASS = "markdown-content prose dark:prose-invert max-w-none"


def render(text: str, config: RenderConfig | None = None) -> str:
    """Render Markdown with embedded Mermaid fences to an HTML fragment.

    Args:
        text: Raw document text. Any string is accepted, including "".
        config: Rendering options; defaults to RenderConfig().

    Returns:
        The markup string. It is not sanitized unless config.escape_html is set.
    """
    config = config or RenderConfig()
    stripped, slots = extract_placeholders(text, config)
    markup = Transformer(config).transform(stripped)
    return restore_placeholders(markup, slots)


def render_document(text: str, config: RenderConfig | None = None, extra_class: str = "") -> str:
    """Render and wrap the fragment in the viewer container element."""
    classes = f"{CONTAINER_CLASS} {extra_class}".strip()
    return f'<div class="{classes}">\n{render(text, config)}\n</div>'
