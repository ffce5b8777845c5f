"""Vector renderer -- grid cells to drawing commands.

The grid -> picture coordinate transform is applied **here** and only
here (``cell_origin``); output backends receive commands already in
picture space and never look at grid indices.

Ordering:
    Cells are visited in row-major order and every cell's commands are
    emitted contiguously, so the output sequence (and therefore the
    serialized text) is a deterministic function of the grid.
"""

from __future__ import annotations

import logging

from bpd_draw.errors import ValidationError
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
)
from bpd_draw.grid.model import Grid
from bpd_draw.render.primitives import (
    Curve,
    DrawCommand,
    PointMarker,
    Rect,
    Segment,
    Text,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Coordinate transform
# ---------------------------------------------------------------------------


def cell_origin(i: int, j: int, rows: int) -> tuple[float, float]:
    """Return the bottom-left picture corner of grid cell ``(i, j)``.

    Row 1 is drawn at the top: ``y = rows - i``, ``x = j - 1``.  The
    cell then covers ``[x, x + 1] x [y, y + 1]``.
    """
    return float(j - 1), float(rows - i)


# ---------------------------------------------------------------------------
# Renderer
# ---------------------------------------------------------------------------


class VectorRenderer:
    """Convert a ``Grid`` into an ordered list of drawing commands.

    The renderer is stateless; one instance can serve any number of
    grids, including concurrently.
    """

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def render(self, grid: Grid) -> list[DrawCommand]:
        """Render every cell of *grid*.

        Parameters
        ----------
        grid : Grid
            Rectangular grid (validated at construction).

        Returns
        -------
        list[DrawCommand]
            Commands in picture space, row-major, contiguous per cell.

        Raises
        ------
        ValidationError
            If *grid* is not a ``Grid`` or holds an unknown cell code.
        """
        if not isinstance(grid, Grid):
            raise ValidationError(
                f"render() expects a Grid, got {type(grid).__name__}"
            )

        commands: list[DrawCommand] = []
        for i, j, cell in grid.iter_cells():
            x, y = cell_origin(i, j, grid.rows)
            try:
                commands.extend(self.render_cell(cell, x, y))
            except ValidationError as exc:
                raise ValidationError(f"Cell ({i}, {j}): {exc}") from exc

        logger.debug(
            "Rendered %dx%d grid into %d commands",
            grid.rows, grid.cols, len(commands),
        )
        return commands

    def render_cell(self, cell: CellCode, x: float, y: float) -> list[DrawCommand]:
        """Commands for one cell whose bottom-left corner is ``(x, y)``."""
        if isinstance(cell, Blank):
            return self._box(x, y)
        elif isinstance(cell, Plus):
            return [self._vline(x, y), self._hline(x, y)]
        elif isinstance(cell, Vertical):
            return [self._vline(x, y)]
        elif isinstance(cell, Horizontal):
            return [self._hline(x, y)]
        elif isinstance(cell, ElbowSE):
            return [self._elbow_se(x, y)]
        elif isinstance(cell, ElbowNW):
            return [self._elbow_nw(x, y)]
        elif isinstance(cell, (Dot, Star)):
            return [PointMarker(x + 0.5, y + 0.5, "line")]
        elif isinstance(cell, LabeledDrift):
            return self._box(x, y) + [self._label(cell, x, y)]
        elif isinstance(cell, (Empty, Special)):
            return []
        raise ValidationError(f"Unrecognized cell code {cell!r}")

    # ------------------------------------------------------------------
    # Per-tile shapes
    # ------------------------------------------------------------------

    @staticmethod
    def _box(x: float, y: float) -> list[DrawCommand]:
        return [
            Rect(x, y, x + 1, y + 1, "fill-highlight", filled=True),
            Rect(x, y, x + 1, y + 1, "stroke-highlight", filled=False),
        ]

    @staticmethod
    def _vline(x: float, y: float) -> Segment:
        return Segment(x + 0.5, y, x + 0.5, y + 1, "line")

    @staticmethod
    def _hline(x: float, y: float) -> Segment:
        return Segment(x, y + 0.5, x + 1, y + 0.5, "line")

    @staticmethod
    def _elbow_se(x: float, y: float) -> Curve:
        # Right-edge midpoint to bottom-edge midpoint, pulled through the center
        center = (x + 0.5, y + 0.5)
        return Curve((x + 1, y + 0.5), center, center, (x + 0.5, y), "line")

    @staticmethod
    def _elbow_nw(x: float, y: float) -> Curve:
        center = (x + 0.5, y + 0.5)
        return Curve((x, y + 0.5), center, center, (x + 0.5, y + 1), "line")

    @staticmethod
    def _label(cell: LabeledDrift, x: float, y: float) -> Text:
        color = "label-emphasis" if cell.highlighted else "label-default"
        return Text(x + 0.5, y + 0.5, cell.label, color)
