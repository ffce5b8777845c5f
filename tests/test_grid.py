"""Tests for the grid model.

Validates cell-code decoding (integer codes, symbols, drift pairs),
immutability, rectangularity checks, 1-indexed access, and YAML loading.
"""

from __future__ import annotations

import dataclasses

import numpy as np
import pytest

from bpd_draw.errors import ValidationError
from bpd_draw.grid import (
    Blank,
    CellCode,
    Dot,
    ElbowNW,
    ElbowSE,
    Empty,
    Grid,
    Horizontal,
    LabeledDrift,
    Plus,
    Special,
    Star,
    Vertical,
    decode_cell,
    load_grid,
)


# ---------------------------------------------------------------------------
# Cell decoding
# ---------------------------------------------------------------------------


class TestDecodeCell:
    @pytest.mark.parametrize(
        "code, expected",
        [
            (0, Blank()),
            (1, Plus()),
            (2, ElbowSE()),
            (3, ElbowNW()),
            (4, Vertical()),
            (5, Horizontal()),
            (6, Dot()),
            (7, Star()),
            (8, Empty()),
            (9, Special()),
        ],
    )
    def test_integer_codes(self, code: int, expected: CellCode) -> None:
        assert decode_cell(code) == expected

    @pytest.mark.parametrize(
        "symbol, expected",
        [
            ("O", Blank()),
            ("+", Plus()),
            ("/", ElbowSE()),
            ("%", ElbowNW()),
            ("|", Vertical()),
            ("-", Horizontal()),
            (".", Dot()),
            ("*", Star()),
            ("", Empty()),
            ("o", Special()),
        ],
    )
    def test_symbols(self, symbol: str, expected: CellCode) -> None:
        assert decode_cell(symbol) == expected

    def test_numpy_integer(self) -> None:
        assert decode_cell(np.int8(2)) == ElbowSE()

    def test_drift_pair(self) -> None:
        cell = decode_cell(("3", True))
        assert cell == LabeledDrift(label="3", highlighted=True)

    def test_drift_label_stringified(self) -> None:
        assert decode_cell((12, False)) == LabeledDrift("12", False)

    def test_cell_code_passthrough(self) -> None:
        cell = LabeledDrift("x")
        assert decode_cell(cell) is cell

    def test_out_of_range(self) -> None:
        with pytest.raises(ValidationError, match="out of range"):
            decode_cell(10)

    def test_negative(self) -> None:
        with pytest.raises(ValidationError):
            decode_cell(-1)

    def test_unknown_symbol(self) -> None:
        with pytest.raises(ValidationError, match="Unrecognized tile symbol"):
            decode_cell("#")

    def test_bool_rejected(self) -> None:
        with pytest.raises(ValidationError):
            decode_cell(True)

    def test_wrong_arity_pair(self) -> None:
        with pytest.raises(ValidationError, match="pair"):
            decode_cell(("3", True, 1))

    def test_drift_highlight_must_be_bool(self) -> None:
        with pytest.raises(ValidationError, match="bool"):
            decode_cell(("3", "yes"))

    def test_none_rejected(self) -> None:
        with pytest.raises(ValidationError):
            decode_cell(None)


# ---------------------------------------------------------------------------
# Grid construction
# ---------------------------------------------------------------------------


class TestGridConstruction:
    def test_shape(self, rothe_grid: Grid) -> None:
        assert rothe_grid.rows == 5
        assert rothe_grid.cols == 5
        assert rothe_grid.shape == (5, 5)

    def test_empty_grid(self) -> None:
        grid = Grid(())
        assert grid.shape == (0, 0)
        assert list(grid.iter_cells()) == []

    def test_ragged_rows_rejected(self) -> None:
        with pytest.raises(ValidationError, match="row 2 has 1 cells, expected 2"):
            Grid.from_codes([[0, 1], [2]])

    def test_non_cell_entry_rejected(self) -> None:
        with pytest.raises(ValidationError, match=r"\(1, 2\)"):
            Grid(((Blank(), "O"),))

    def test_bad_code_names_coordinates(self) -> None:
        with pytest.raises(ValidationError, match=r"Cell \(2, 1\)"):
            Grid.from_codes([[0, 1], [42, 1]])

    def test_from_numpy(self) -> None:
        mtx = np.array([[0, 2], [2, 1]], dtype=np.int8)
        grid = Grid.from_codes(mtx)
        assert grid.cell(1, 1) == Blank()
        assert grid.cell(2, 2) == Plus()

    def test_numpy_must_be_2d(self) -> None:
        with pytest.raises(ValidationError, match="2-D"):
            Grid.from_codes(np.zeros(3, dtype=np.int8))

    def test_row_must_be_sequence(self) -> None:
        with pytest.raises(ValidationError, match="Row 1"):
            Grid.from_codes(["O/"])

    def test_from_symbols(self) -> None:
        grid = Grid.from_symbols(["O /", "/ +"])
        assert grid.cells == ((Blank(), ElbowSE()), (ElbowSE(), Plus()))

    def test_frozen(self, rothe_grid: Grid) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            rothe_grid.cells = ()  # type: ignore[misc]

    def test_rows_stored_as_tuples(self) -> None:
        grid = Grid([[Blank(), Plus()]])
        assert isinstance(grid.cells, tuple)
        assert isinstance(grid.cells[0], tuple)

    def test_equal_grids_compare_equal(self) -> None:
        assert Grid.from_codes([[0, 1]]) == Grid.from_symbols(["O +"])


# ---------------------------------------------------------------------------
# Access
# ---------------------------------------------------------------------------


class TestGridAccess:
    def test_cell_is_one_indexed(self, rothe_grid: Grid) -> None:
        assert rothe_grid.cell(1, 1) == ElbowSE()
        assert rothe_grid.cell(2, 2) == Blank()
        assert rothe_grid.cell(5, 5) == Plus()

    def test_cell_out_of_range(self, rothe_grid: Grid) -> None:
        with pytest.raises(IndexError):
            rothe_grid.cell(0, 1)
        with pytest.raises(IndexError):
            rothe_grid.cell(1, 6)

    def test_iter_cells_row_major(self) -> None:
        grid = Grid.from_symbols(["O +", "/ %"])
        assert [(i, j) for i, j, _ in grid.iter_cells()] == [
            (1, 1), (1, 2), (2, 1), (2, 2),
        ]


# ---------------------------------------------------------------------------
# YAML loading
# ---------------------------------------------------------------------------


class TestLoadGrid:
    def test_load(self, grid_file) -> None:
        grid = load_grid(grid_file)
        assert grid.shape == (2, 2)
        assert grid.cell(1, 2) == ElbowSE()
        assert grid.cell(2, 1) == LabeledDrift("3", True)

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(FileNotFoundError):
            load_grid(tmp_path / "nope.yaml")

    def test_wrong_schema(self, tmp_path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("schema: other.v1\nrows: [[O]]\n", encoding="utf-8")
        with pytest.raises(ValidationError, match="bpd_grid.v1"):
            load_grid(path)

    def test_ragged_file(self, tmp_path) -> None:
        path = tmp_path / "ragged.yaml"
        path.write_text("rows:\n  - [O, O]\n  - [O]\n", encoding="utf-8")
        with pytest.raises(ValidationError, match="Row 2"):
            load_grid(path)

    def test_unknown_symbol_in_file(self, tmp_path) -> None:
        path = tmp_path / "sym.yaml"
        path.write_text("rows:\n  - [O, '#']\n", encoding="utf-8")
        with pytest.raises(ValidationError, match=r"Cell \(1, 2\)"):
            load_grid(path)

    def test_empty_file(self, tmp_path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        with pytest.raises(ValidationError, match="Empty grid file"):
            load_grid(path)
