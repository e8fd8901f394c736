"""Layout types shared by the layout engine and renderers."""

from __future__ import annotations

from dataclasses import dataclass

# Grid constants (SVG user units)
COLUMNS = 3
H_PITCH = 200
V_PITCH = 120
ORIGIN_X = 50
ORIGIN_Y = 80


@dataclass(frozen=True)
class LayoutPosition:
    """Center of a node on the canvas."""

    x: int
    y: int
