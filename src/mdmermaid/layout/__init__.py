"""Layout engine public API."""

from __future__ import annotations

from mdmermaid.ir.graph import GraphModel
from mdmermaid.layout.grid import grid_layout, grid_position
from mdmermaid.layout.types import COLUMNS, H_PITCH, ORIGIN_X, ORIGIN_Y, V_PITCH, LayoutPosition

__all__ = [
    "COLUMNS",
    "H_PITCH",
    "ORIGIN_X",
    "ORIGIN_Y",
    "V_PITCH",
    "LayoutPosition",
    "full_layout",
    "grid_layout",
    "grid_position",
]


def full_layout(graph: GraphModel) -> dict[str, LayoutPosition]:
    """Lay out every node of a graph model in insertion order."""
    return grid_layout(graph.node_ids())
