"""matplotlib plotter -- the interactive drawing capability.

Draws the same command stream the PSTricks serializer consumes, as
matplotlib artists on a fresh figure:

=============  ===========================================
Command        Artist
=============  ===========================================
Rect           ``Rectangle`` (filled or outline)
Segment        ``Line2D``
Curve          ``PathPatch`` over a cubic ``Path``
PointMarker    ``Line2D`` with a single round marker
Text           ``Axes.text`` centered on the anchor
=============  ===========================================

Axes span exactly ``[0, cols] x [0, rows]`` with equal aspect, so one
cell is one data unit, as in the vector output.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.lines import Line2D
from matplotlib.patches import PathPatch, Rectangle
from matplotlib.path import Path as MplPath

from bpd_draw.configs.loader import DrawConfig, load_config
from bpd_draw.draw import InteractiveAvailable
from bpd_draw.errors import OutputError, ValidationError
from bpd_draw.grid.model import Grid
from bpd_draw.render.primitives import (
    Curve,
    DrawCommand,
    PointMarker,
    Rect,
    Segment,
    Text,
)
from bpd_draw.render.renderer import VectorRenderer

if TYPE_CHECKING:
    from bpd_draw.draw import DrawOptions

logger = logging.getLogger(__name__)

# Drawing order: boxes below guides below pipes below labels
_Z_FILL = 1
_Z_GUIDE = 2
_Z_PIPE = 3
_Z_TEXT = 4

_CUBIC = [MplPath.MOVETO, MplPath.CURVE4, MplPath.CURVE4, MplPath.CURVE4]


class MatplotlibPlotter:
    """Draw grids as matplotlib figures.

    Parameters
    ----------
    config : DrawConfig | None
        Drawing configuration (palette, dpi, line widths).  ``None``
        loads the default.
    renderer : VectorRenderer | None
        Grid -> commands renderer.
    """

    def __init__(
        self,
        config: DrawConfig | None = None,
        renderer: VectorRenderer | None = None,
    ) -> None:
        self._cfg = config if config is not None else load_config()
        self._renderer = renderer if renderer is not None else VectorRenderer()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def plot(self, grid: Grid, options: DrawOptions) -> Figure:
        """Draw *grid* on a new figure.

        Parameters
        ----------
        grid : Grid
            Grid to draw.
        options : DrawOptions
            Uses ``image_size``, ``show_grid``, ``output_path`` and
            ``visible``.

        Returns
        -------
        Figure
            The figure, shown when ``options.visible`` and closed
            (but still usable for ``savefig``) otherwise.

        Raises
        ------
        OutputError
            If ``options.output_path`` cannot be written.
        """
        commands = self._renderer.render(grid)

        dpi = self._cfg.interactive.dpi
        width_px, height_px = options.image_size
        fig, ax = plt.subplots(figsize=(width_px / dpi, height_px / dpi), dpi=dpi)
        self._setup_axes(ax, grid.rows, grid.cols)
        if options.show_grid:
            self._draw_guides(ax, grid.rows, grid.cols)
        self._draw_frame(ax, grid.rows, grid.cols)
        for cmd in commands:
            self._draw_command(ax, cmd)

        if options.output_path is not None:
            try:
                self._save(fig, options.output_path)
            except OutputError:
                plt.close(fig)
                raise

        if options.visible:
            plt.show(block=False)
        else:
            plt.close(fig)
        return fig

    # ------------------------------------------------------------------
    # Canvas
    # ------------------------------------------------------------------

    @staticmethod
    def _setup_axes(ax: Axes, rows: int, cols: int) -> None:
        ax.set_xlim(0, max(cols, 1))
        ax.set_ylim(0, max(rows, 1))
        ax.set_aspect("equal")
        ax.set_axis_off()
        ax.figure.subplots_adjust(left=0.02, right=0.98, bottom=0.02, top=0.98)

    def _draw_guides(self, ax: Axes, rows: int, cols: int) -> None:
        color = self._color("grid-guide")
        for k in range(1, rows):
            ax.add_line(Line2D([0, cols], [k, k], color=color, lw=0.8, zorder=_Z_GUIDE))
        for k in range(1, cols):
            ax.add_line(Line2D([k, k], [0, rows], color=color, lw=0.8, zorder=_Z_GUIDE))

    def _draw_frame(self, ax: Axes, rows: int, cols: int) -> None:
        ax.add_line(
            Line2D(
                [0, cols, cols, 0, 0],
                [0, 0, rows, rows, 0],
                color=self._color("frame"),
                lw=1.0,
                zorder=_Z_GUIDE,
            )
        )

    # ------------------------------------------------------------------
    # Internal: per-command dispatch
    # ------------------------------------------------------------------

    def _draw_command(self, ax: Axes, cmd: DrawCommand) -> None:
        ic = self._cfg.interactive
        if isinstance(cmd, Rect):
            color = self._color(cmd.style)
            ax.add_patch(
                Rectangle(
                    (cmd.x0, cmd.y0),
                    cmd.x1 - cmd.x0,
                    cmd.y1 - cmd.y0,
                    fill=cmd.filled,
                    facecolor=color if cmd.filled else "none",
                    edgecolor="none" if cmd.filled else color,
                    lw=1.0,
                    zorder=_Z_FILL,
                )
            )
        elif isinstance(cmd, Segment):
            ax.add_line(
                Line2D(
                    [cmd.x0, cmd.x1],
                    [cmd.y0, cmd.y1],
                    color=self._color(cmd.style),
                    lw=ic.line_width,
                    zorder=_Z_PIPE,
                )
            )
        elif isinstance(cmd, Curve):
            ax.add_patch(
                PathPatch(
                    MplPath(list(cmd.points), _CUBIC),
                    fill=False,
                    edgecolor=self._color(cmd.style),
                    lw=ic.line_width,
                    zorder=_Z_PIPE,
                )
            )
        elif isinstance(cmd, PointMarker):
            ax.add_line(
                Line2D(
                    [cmd.x],
                    [cmd.y],
                    marker="o",
                    markersize=ic.marker_size,
                    color=self._color(cmd.style),
                    linestyle="none",
                    zorder=_Z_PIPE,
                )
            )
        elif isinstance(cmd, Text):
            ax.text(
                cmd.x,
                cmd.y,
                cmd.content,
                color=self._color(cmd.color),
                fontsize=ic.font_size,
                ha="center",
                va="center",
                zorder=_Z_TEXT,
            )
        else:
            raise ValidationError(f"Unsupported draw command: {cmd!r}")

    def _color(self, style: str) -> str:
        return self._cfg.color(style, "matplotlib")

    @staticmethod
    def _save(fig: Figure, path: str | Path) -> None:
        path = Path(path)
        try:
            fig.savefig(path)
        except (OSError, ValueError) as exc:
            # ValueError: unknown image format suffix
            raise OutputError(path, str(exc)) from exc
        logger.info("Saved BPD figure to %s", path)


def matplotlib_target(config: DrawConfig | None = None) -> InteractiveAvailable:
    """Interactive render target backed by ``MatplotlibPlotter``."""
    return InteractiveAvailable(MatplotlibPlotter(config))
