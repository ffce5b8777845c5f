"""
Rendering module.

Defines the drawing-command vocabulary and converts grids into
commands.  All coordinates are in cell units, picture space (origin at
the bottom-left corner, +Y up).
"""

from bpd_draw.render.primitives import (
    STYLES,
    Curve,
    DrawCommand,
    PointMarker,
    Rect,
    Segment,
    Text,
)
from bpd_draw.render.renderer import VectorRenderer, cell_origin

__all__ = [
    "STYLES",
    "Curve",
    "DrawCommand",
    "PointMarker",
    "Rect",
    "Segment",
    "Text",
    "VectorRenderer",
    "cell_origin",
]
