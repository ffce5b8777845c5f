"""
PSTricks output module.

Converts drawing commands to a ``pspicture`` program with guide lines,
frame and palette colors, and saves it atomically.
"""

from bpd_draw.pstricks.serializer import (
    PSTricksSerializer,
    coord,
    escape_tex,
    format_unit,
)

__all__ = ["PSTricksSerializer", "coord", "escape_tex", "format_unit"]
