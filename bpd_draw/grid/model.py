"""Grid model -- the immutable input of every drawing.

A ``Grid`` is a rectangular ``rows x cols`` array of cell codes,
addressed 1-indexed with row 1 at the top.  It is validated once, at
construction, and never mutated afterwards.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import numpy as np
import yaml

from bpd_draw.errors import ValidationError
from bpd_draw.grid.cells import CellCode, decode_cell
from bpd_draw.utils.validators import load_grid_file

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Grid:
    """Rectangular grid of cell codes.

    Parameters
    ----------
    cells : tuple[tuple[CellCode, ...], ...]
        Rows, top row first.  Every row must have the same length and
        every entry must be a ``CellCode``.

    Raises
    ------
    ValidationError
        On a ragged row or a non-``CellCode`` entry.
    """

    cells: tuple[tuple[CellCode, ...], ...]

    def __post_init__(self) -> None:
        # Accept any nested sequence but store tuples
        rows = tuple(tuple(row) for row in self.cells)
        object.__setattr__(self, "cells", rows)

        if not rows:
            return
        width = len(rows[0])
        for i, row in enumerate(rows, 1):
            if len(row) != width:
                raise ValidationError(
                    f"Grid is not rectangular: row {i} has {len(row)} "
                    f"cells, expected {width}"
                )
            for j, cell in enumerate(row, 1):
                if not isinstance(cell, CellCode):
                    raise ValidationError(
                        f"Unrecognized cell code {cell!r} at ({i}, {j})"
                    )

    # -- Shape ---------------------------------------------------------------

    @property
    def rows(self) -> int:
        return len(self.cells)

    @property
    def cols(self) -> int:
        return len(self.cells[0]) if self.cells else 0

    @property
    def shape(self) -> tuple[int, int]:
        return self.rows, self.cols

    # -- Access --------------------------------------------------------------

    def cell(self, i: int, j: int) -> CellCode:
        """Return the cell at row *i*, column *j* (both 1-indexed)."""
        if not (1 <= i <= self.rows and 1 <= j <= self.cols):
            raise IndexError(
                f"Cell ({i}, {j}) outside {self.rows}x{self.cols} grid"
            )
        return self.cells[i - 1][j - 1]

    def iter_cells(self) -> Iterator[tuple[int, int, CellCode]]:
        """Yield ``(i, j, cell)`` in row-major order, 1-indexed."""
        for i, row in enumerate(self.cells, 1):
            for j, cell in enumerate(row, 1):
                yield i, j, cell

    # -- Construction --------------------------------------------------------

    @classmethod
    def from_codes(cls, matrix: Sequence[Sequence[Any]] | np.ndarray) -> Grid:
        """Build a grid from integer codes, tile symbols or drift pairs.

        Parameters
        ----------
        matrix : nested sequence | numpy.ndarray
            Rows of raw entries accepted by ``decode_cell``.  A numpy
            array must be 2-D.

        Raises
        ------
        ValidationError
            On a non-2-D array, a ragged row, or an undecodable entry
            (the message names the 1-indexed coordinates).
        """
        if isinstance(matrix, np.ndarray):
            if matrix.ndim != 2:
                raise ValidationError(
                    f"Code matrix must be 2-D, got shape {matrix.shape}"
                )
            matrix = matrix.tolist()

        rows = []
        for i, raw_row in enumerate(matrix, 1):
            if isinstance(raw_row, (str, bytes)) or not isinstance(raw_row, Sequence):
                raise ValidationError(f"Row {i} is not a sequence: {raw_row!r}")
            row = []
            for j, value in enumerate(raw_row, 1):
                try:
                    row.append(decode_cell(value))
                except ValidationError as exc:
                    raise ValidationError(f"Cell ({i}, {j}): {exc}") from exc
            rows.append(tuple(row))
        return cls(tuple(rows))

    @classmethod
    def from_symbols(cls, lines: Sequence[str]) -> Grid:
        """Build a grid from whitespace-separated symbol lines.

        ``Empty`` has no printable symbol, so it cannot be written in
        this form; use ``from_codes`` with ``""`` or ``8`` instead.

        Examples
        --------
        >>> Grid.from_symbols(["O /", "/ +"]).shape
        (2, 2)
        """
        return cls.from_codes([line.split() for line in lines])


def load_grid(path: str | Path) -> Grid:
    """Load a ``bpd_grid.v1`` YAML file into a ``Grid``.

    Raises
    ------
    FileNotFoundError
        If *path* does not exist.
    ValidationError
        If the file fails schema validation or holds unknown symbols.
    """
    try:
        grid_file = load_grid_file(path)
    except (ValueError, yaml.YAMLError) as exc:
        raise ValidationError(f"Invalid grid file {path}: {exc}") from exc

    grid = Grid.from_codes(grid_file.to_codes())
    logger.info("Loaded %dx%d grid from %s", grid.rows, grid.cols, path)
    return grid
