"""Cell codes -- the tile vocabulary of a bumpless pipedream.

Every tile kind is an immutable, slotted dataclass.  Only
``LabeledDrift`` carries data; the others are pure tags, so equality
between two instances of the same tile kind always holds.

Encodings
---------
Grids arrive either as cell-code objects or in the two compact forms
used by BPD construction code:

=============  ====  ======
Tile           int   symbol
=============  ====  ======
Blank          0     ``O``
Plus           1     ``+``
ElbowSE        2     ``/``
ElbowNW        3     ``%``
Vertical       4     ``|``
Horizontal     5     ``-``
Dot            6     ``.``
Star           7     ``*``
Empty          8     ``""``
Special        9     ``o``
=============  ====  ======

A ``(label, highlighted)`` pair is a labeled drift cell.
"""

from __future__ import annotations

import numbers
from abc import ABC
from dataclasses import dataclass
from typing import Any

from bpd_draw.errors import ValidationError

# ---------------------------------------------------------------------------
# Base class
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class CellCode(ABC):
    """Base class for all tile kinds."""

    pass


# ---------------------------------------------------------------------------
# Tiles
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Blank(CellCode):
    """Empty box -- no pipe passes through."""

    pass


@dataclass(frozen=True, slots=True)
class Plus(CellCode):
    """Crossing: one vertical and one horizontal pipe."""

    pass


@dataclass(frozen=True, slots=True)
class ElbowSE(CellCode):
    """Elbow joining the right edge to the bottom edge."""

    pass


@dataclass(frozen=True, slots=True)
class ElbowNW(CellCode):
    """Elbow joining the left edge to the top edge."""

    pass


@dataclass(frozen=True, slots=True)
class Vertical(CellCode):
    pass


@dataclass(frozen=True, slots=True)
class Horizontal(CellCode):
    pass


@dataclass(frozen=True, slots=True)
class Dot(CellCode):
    """Marked cell, drawn as a dot."""

    pass


@dataclass(frozen=True, slots=True)
class Star(CellCode):
    """Marked cell; currently drawn exactly like ``Dot``."""

    pass


@dataclass(frozen=True, slots=True)
class Empty(CellCode):
    """Reserved code.  Accepted everywhere, never drawn."""

    pass


@dataclass(frozen=True, slots=True)
class Special(CellCode):
    """Reserved code.  Accepted everywhere, never drawn."""

    pass


@dataclass(frozen=True, slots=True)
class LabeledDrift(CellCode):
    """Blank box carrying a label (drift configurations).

    Parameters
    ----------
    label : str
        Text shown at the cell center.
    highlighted : bool
        ``True`` draws the label in the emphasis color.
    """

    label: str
    highlighted: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.label, str):
            raise ValidationError(
                f"LabeledDrift label must be a str, got {type(self.label).__name__}"
            )
        if not isinstance(self.highlighted, bool):
            raise ValidationError(
                f"LabeledDrift highlighted must be a bool, got {self.highlighted!r}"
            )


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------

CODE_TABLE: tuple[CellCode, ...] = (
    Blank(),
    Plus(),
    ElbowSE(),
    ElbowNW(),
    Vertical(),
    Horizontal(),
    Dot(),
    Star(),
    Empty(),
    Special(),
)
"""Tile for each integer code (index == code)."""

SYMBOL_TABLE: dict[str, CellCode] = {
    "O": Blank(),
    "+": Plus(),
    "/": ElbowSE(),
    "%": ElbowNW(),
    "|": Vertical(),
    "-": Horizontal(),
    ".": Dot(),
    "*": Star(),
    "": Empty(),
    "o": Special(),
}


def decode_cell(value: Any) -> CellCode:
    """Convert one raw grid entry to a cell code.

    Parameters
    ----------
    value : CellCode | int | str | tuple[Any, bool]
        A cell code (returned unchanged), an integer code 0-9, a tile
        symbol, or a ``(label, highlighted)`` pair.

    Returns
    -------
    CellCode

    Raises
    ------
    ValidationError
        If *value* matches none of the encodings.
    """
    if isinstance(value, CellCode):
        return value
    # bool is an int subclass; True is not a tile
    if isinstance(value, bool):
        raise ValidationError(f"Unrecognized cell code {value!r}")
    if isinstance(value, numbers.Integral):
        if 0 <= value < len(CODE_TABLE):
            return CODE_TABLE[int(value)]
        raise ValidationError(
            f"Cell code {value} out of range [0, {len(CODE_TABLE) - 1}]"
        )
    if isinstance(value, str):
        try:
            return SYMBOL_TABLE[value]
        except KeyError:
            raise ValidationError(
                f"Unrecognized tile symbol {value!r}. "
                f"Known: {sorted(SYMBOL_TABLE)}"
            ) from None
    if isinstance(value, (tuple, list)):
        if len(value) != 2:
            raise ValidationError(
                f"Labeled drift cell must be a (label, highlighted) pair, got {value!r}"
            )
        label, highlighted = value
        return LabeledDrift(label=str(label), highlighted=highlighted)
    raise ValidationError(f"Unrecognized cell code {value!r}")
