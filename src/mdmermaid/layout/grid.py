"""Fixed-column grid layout.

Positions depend only on each identifier's index in the input order:
column = index mod COLUMNS, row = index div COLUMNS.
"""

from __future__ import annotations

from collections.abc import Iterable

from mdmermaid.layout.types import COLUMNS, H_PITCH, ORIGIN_X, ORIGIN_Y, V_PITCH, LayoutPosition


def grid_position(index: int) -> LayoutPosition:
    row, col = divmod(index, COLUMNS)
    return LayoutPosition(x=ORIGIN_X + col * H_PITCH, y=ORIGIN_Y + row * V_PITCH)


def grid_layout(node_ids: Iterable[str]) -> dict[str, LayoutPosition]:
    """Assign every identifier a grid position, preserving input order."""
    return {node_id: grid_position(i) for i, node_id in enumerate(node_ids)}
