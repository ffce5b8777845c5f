"""PSTricks serializer -- drawing commands to a ``pspicture`` program.

The output is a self-contained ``pspicture`` environment that a LaTeX
document can ``\\input`` (with ``pstricks`` and ``xcolor`` loaded).
Symbolic style names are mapped to xcolor expressions through the
configured palette at this boundary.

Number format:
    Every coordinate is written ``%.2f`` so the same grid always
    produces byte-identical text, which keeps golden files diffable::

        \\psline[linecolor=blue] (0.50,1.00)(0.50,2.00)

Atomicity:
    The program is assembled in memory.  ``save`` writes it through a
    temporary file and a rename, so a failed write never leaves a
    truncated document behind.
"""

from __future__ import annotations

import logging
import math
import numbers
import re
from io import StringIO
from pathlib import Path
from typing import Iterable

from bpd_draw.configs.loader import DrawConfig, load_config
from bpd_draw.errors import OutputError, ValidationError
from bpd_draw.render.primitives import (
    Curve,
    DrawCommand,
    PointMarker,
    Rect,
    Segment,
    Text,
)
from bpd_draw.utils.fs import atomic_write_text

logger = logging.getLogger(__name__)

HEADER = "%% Auto-generated by draw_bpd"

_TEX_SPECIALS = re.compile(r"([#$%&_{}])")
_TEX_REPLACE = {
    "\\": r"\textbackslash{}",
    "~": r"\textasciitilde{}",
    "^": r"\textasciicircum{}",
}


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def coord(x: float, y: float) -> str:
    """Format a picture point with 2 decimals."""
    return f"({x:.2f},{y:.2f})"


def format_unit(unit: float) -> str:
    """Format the picture unit at full precision (``1``, ``0.7``, ``0.123456789``)."""
    if isinstance(unit, numbers.Integral):
        return str(int(unit))
    return repr(float(unit))


def escape_tex(text: str) -> str:
    """Escape characters that would break a LaTeX label."""
    out = []
    for ch in text:
        if ch in _TEX_REPLACE:
            out.append(_TEX_REPLACE[ch])
        else:
            out.append(_TEX_SPECIALS.sub(r"\\\1", ch))
    return "".join(out)


# ---------------------------------------------------------------------------
# Serializer
# ---------------------------------------------------------------------------


class PSTricksSerializer:
    """Convert drawing commands to PSTricks text.

    Parameters
    ----------
    config : DrawConfig | None
        Validated drawing configuration.  ``None`` loads the default.

    Notes
    -----
    The serializer holds no per-call state: ``serialize`` may be called
    repeatedly (or concurrently) with identical results.
    """

    def __init__(self, config: DrawConfig | None = None) -> None:
        self._cfg = config if config is not None else load_config()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def serialize(
        self,
        commands: Iterable[DrawCommand],
        rows: int,
        cols: int,
        *,
        unit: float | None = None,
        show_grid: bool | None = None,
    ) -> str:
        """Build the complete ``pspicture`` program.

        Parameters
        ----------
        commands : Iterable[DrawCommand]
            Picture-space commands, emitted in the given order.
        rows, cols : int
            Grid dimensions (canvas is ``cols x rows`` units).
        unit : float | None
            Centimeters per cell unit.  ``None`` uses ``vector.unit_cm``.
        show_grid : bool | None
            Draw light guide lines between cells.  ``None`` uses
            ``vector.show_grid``.

        Returns
        -------
        str
            Complete program, newline terminated.

        Raises
        ------
        ValidationError
            On a non-positive or non-finite unit, negative dimensions, or an unknown
            command type.  Nothing partial is returned.
        """
        vc = self._cfg.vector
        unit = vc.unit_cm if unit is None else unit
        show_grid = vc.show_grid if show_grid is None else show_grid

        if (
            isinstance(unit, bool)
            or not isinstance(unit, numbers.Real)
            or not (unit > 0 and math.isfinite(unit))
        ):
            raise ValidationError(f"unit must be a positive finite number, got {unit!r}")
        if rows < 0 or cols < 0:
            raise ValidationError(
                f"Grid dimensions must be >= 0, got {rows}x{cols}"
            )

        buf = StringIO()
        self._write_header(buf, rows, cols, unit)
        if show_grid:
            self._write_guides(buf, rows, cols)
        self._write_frame(buf, rows, cols)

        count = 0
        for cmd in commands:
            self._write_command(cmd, buf)
            count += 1

        buf.write("\\end{pspicture}\n")
        logger.debug("Serialized %d commands for %dx%d grid", count, rows, cols)
        return buf.getvalue()

    def save(self, text: str, path: str | Path) -> Path:
        """Write *text* to *path* in a single atomic step.

        Raises
        ------
        OutputError
            If the file cannot be written.  No partial file is left.
        """
        path = Path(path)
        try:
            atomic_write_text(path, text)
        except OSError as exc:
            raise OutputError(path, exc.strerror or str(exc)) from exc
        logger.info("Wrote PSTricks picture to %s", path)
        return path

    # ------------------------------------------------------------------
    # Preamble / decorations
    # ------------------------------------------------------------------

    def _write_header(self, buf: StringIO, rows: int, cols: int, unit: float) -> None:
        lw = self._cfg.vector.line_width_pt
        buf.write(f"{HEADER}\n")
        buf.write(f"\\psset{{unit={format_unit(unit)}cm,linewidth={lw:g}pt}}\n")
        buf.write(f"\\begin{{pspicture}}{coord(0, 0)}{coord(cols, rows)}\n")

    def _write_guides(self, buf: StringIO, rows: int, cols: int) -> None:
        c = self._color("grid-guide")
        for k in range(1, rows):
            buf.write(f"\\psline[linecolor={c}] {coord(0, k)}{coord(cols, k)}\n")
        for k in range(1, cols):
            buf.write(f"\\psline[linecolor={c}] {coord(k, 0)}{coord(k, rows)}\n")

    def _write_frame(self, buf: StringIO, rows: int, cols: int) -> None:
        c = self._color("frame")
        path = "".join(
            coord(x, y)
            for x, y in ((0, 0), (cols, 0), (cols, rows), (0, rows), (0, 0))
        )
        buf.write(f"\\psline[linecolor={c}] {path}\n")

    # ------------------------------------------------------------------
    # Internal: per-command dispatch
    # ------------------------------------------------------------------

    def _write_command(self, cmd: DrawCommand, buf: StringIO) -> None:
        if isinstance(cmd, Rect):
            self._gen_rect(cmd, buf)
        elif isinstance(cmd, Segment):
            self._gen_segment(cmd, buf)
        elif isinstance(cmd, Curve):
            self._gen_curve(cmd, buf)
        elif isinstance(cmd, PointMarker):
            self._gen_point(cmd, buf)
        elif isinstance(cmd, Text):
            self._gen_text(cmd, buf)
        else:
            raise ValidationError(f"Unsupported draw command: {cmd!r}")

    def _gen_rect(self, cmd: Rect, buf: StringIO) -> None:
        star = "*" if cmd.filled else ""
        buf.write(
            f"\\psframe{star}[linecolor={self._color(cmd.style)}] "
            f"{coord(cmd.x0, cmd.y0)}{coord(cmd.x1, cmd.y1)}\n"
        )

    def _gen_segment(self, cmd: Segment, buf: StringIO) -> None:
        buf.write(
            f"\\psline[linecolor={self._color(cmd.style)}] "
            f"{coord(cmd.x0, cmd.y0)}{coord(cmd.x1, cmd.y1)}\n"
        )

    def _gen_curve(self, cmd: Curve, buf: StringIO) -> None:
        pts = " ".join(coord(x, y) for x, y in cmd.points)
        buf.write(f"\\psbezier[linecolor={self._color(cmd.style)}] {pts}\n")

    def _gen_point(self, cmd: PointMarker, buf: StringIO) -> None:
        ds = self._cfg.vector.dot_size_pt
        buf.write(
            f"\\psdot[linecolor={self._color(cmd.style)},dotsize={ds:g}pt] "
            f"{coord(cmd.x, cmd.y)}\n"
        )

    def _gen_text(self, cmd: Text, buf: StringIO) -> None:
        buf.write(
            f"\\rput[c]{coord(cmd.x, cmd.y)}"
            f"{{\\textcolor{{{self._color(cmd.color)}}}{{{escape_tex(cmd.content)}}}}}\n"
        )

    def _color(self, style: str) -> str:
        return self._cfg.color(style, "pstricks")
