"""Base renderer protocol."""

from __future__ import annotations

from typing import Protocol

from mdmermaid.ir.graph import GraphModel
from mdmermaid.layout.types import LayoutPosition


class Renderer(Protocol):
    """Protocol that all diagram renderers must implement."""

    def render(
        self,
        graph: GraphModel,
        layout: dict[str, LayoutPosition],
        source: str,
        recognized: bool,
        index: int = 1,
    ) -> str:
        """Render a laid-out diagram to a markup string."""
        ...
