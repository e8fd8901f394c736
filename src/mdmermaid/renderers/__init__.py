"""Diagram renderers."""

from mdmermaid.renderers.base import Renderer
from mdmermaid.renderers.svg import SvgRenderer, truncate_label

__all__ = ["Renderer", "SvgRenderer", "truncate_label"]
