"""Drawing commands -- the vocabulary between grids and output formats.

Every primitive is an immutable, slotted dataclass.  Commands use
**symbolic** style names (``"line"``, not ``blue``) and **cell units**
in picture space: origin at the bottom-left corner of the grid, +Y up,
one unit per cell.  Output backends map style names to concrete colors
through the configured palette.

Styles
------
``grid-guide``        light guide lines between cells
``frame``             outer border of the picture
``fill-highlight``    fill of blank boxes
``stroke-highlight``  outline of blank boxes
``line``              pipes (segments, elbows, dots)
``label-emphasis``    highlighted drift labels
``label-default``     ordinary drift labels
"""

from __future__ import annotations

from abc import ABC
from dataclasses import dataclass
from typing import Literal

# ---------------------------------------------------------------------------
# Type aliases
# ---------------------------------------------------------------------------

Style = Literal[
    "grid-guide",
    "frame",
    "fill-highlight",
    "stroke-highlight",
    "line",
    "label-emphasis",
    "label-default",
]

STYLES: tuple[str, ...] = (
    "grid-guide",
    "frame",
    "fill-highlight",
    "stroke-highlight",
    "line",
    "label-emphasis",
    "label-default",
)

Point = tuple[float, float]


def _check_style(kind: str, style: str) -> None:
    if style not in STYLES:
        raise ValueError(f"{kind} style must be one of {STYLES}, got {style!r}")


# ---------------------------------------------------------------------------
# Base class
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class DrawCommand(ABC):
    """Base class for all drawing primitives."""

    pass


# ---------------------------------------------------------------------------
# Primitives
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Rect(DrawCommand):
    """Axis-aligned rectangle from ``(x0, y0)`` to ``(x1, y1)``.

    Parameters
    ----------
    x0, y0, x1, y1 : float
        Opposite corners in cell units.
    style : Style
        Fill color when *filled*, stroke color otherwise.
    filled : bool
        ``True`` for a solid fill, ``False`` for an outline.
    """

    x0: float
    y0: float
    x1: float
    y1: float
    style: Style
    filled: bool = False

    def __post_init__(self) -> None:
        _check_style("Rect", self.style)


@dataclass(frozen=True, slots=True)
class Segment(DrawCommand):
    """Straight line from ``(x0, y0)`` to ``(x1, y1)``."""

    x0: float
    y0: float
    x1: float
    y1: float
    style: Style = "line"

    def __post_init__(self) -> None:
        _check_style("Segment", self.style)


@dataclass(frozen=True, slots=True)
class Curve(DrawCommand):
    """Cubic Bézier curve.

    Parameters
    ----------
    p0, p3 : Point
        End points.
    p1, p2 : Point
        Control points.
    style : Style
        Stroke color.
    """

    p0: Point
    p1: Point
    p2: Point
    p3: Point
    style: Style = "line"

    def __post_init__(self) -> None:
        _check_style("Curve", self.style)

    @property
    def points(self) -> tuple[Point, Point, Point, Point]:
        return (self.p0, self.p1, self.p2, self.p3)


@dataclass(frozen=True, slots=True)
class PointMarker(DrawCommand):
    """Filled dot of fixed visual size centered at ``(x, y)``."""

    x: float
    y: float
    style: Style = "line"

    def __post_init__(self) -> None:
        _check_style("PointMarker", self.style)


@dataclass(frozen=True, slots=True)
class Text(DrawCommand):
    """Label centered at ``(x, y)``.

    Parameters
    ----------
    x, y : float
        Anchor (text center) in cell units.
    content : str
        Text to show, verbatim.
    color : Style
        ``"label-emphasis"`` or ``"label-default"`` in practice.
    """

    x: float
    y: float
    content: str
    color: Style = "label-default"

    def __post_init__(self) -> None:
        _check_style("Text", self.color)
