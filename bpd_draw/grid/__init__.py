"""
Grid model module.

Defines the tile vocabulary (cell codes) and the immutable rectangular
grid that every drawing mode consumes.

Coordinates are 1-indexed, row 1 at the top.
"""

from bpd_draw.grid.cells import (
    Blank,
    CellCode,
    Dot,
    ElbowNW,
    ElbowSE,
    Empty,
    Horizontal,
    LabeledDrift,
    Plus,
    Special,
    Star,
    Vertical,
    decode_cell,
)
from bpd_draw.grid.model import Grid, load_grid

__all__ = [
    "Blank",
    "CellCode",
    "Dot",
    "ElbowNW",
    "ElbowSE",
    "Empty",
    "Grid",
    "Horizontal",
    "LabeledDrift",
    "Plus",
    "Special",
    "Star",
    "Vertical",
    "decode_cell",
    "load_grid",
]
