"""YAML schema validation for grid input files.

Grid files describe one BPD as rows of tile symbols::

    schema: bpd_grid.v1
    rows:
      - ["O", "O", "/"]
      - ["O", "/", "+"]
      - [{label: "3", highlighted: true}, "%", "|"]

Entries may be tile symbols (``"O"``, ``"+"``, ``"/"``, ...), the
integer codes 0-9, or a drift mapping with ``label`` and
``highlighted``.  Only the *shape* of the file is checked here; symbol
decoding happens in ``bpd_draw.grid`` so the vocabulary lives in one
place.

Usage:
    from bpd_draw.utils import validators
    grid_file = validators.load_grid_file("bpd1.yaml")
"""

from pathlib import Path
from typing import List, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from . import fs


GRID_SCHEMA = "bpd_grid.v1"


class DriftCellV1(BaseModel):
    """Labeled drift cell entry."""
    model_config = ConfigDict(extra="forbid")

    label: str = Field(..., description="Text shown at the cell center")
    highlighted: bool = Field(False, description="Draw the label in the emphasis color")

    @field_validator('label', mode='before')
    @classmethod
    def coerce_label(cls, v):
        # YAML turns bare 3 into an int
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v


GridEntry = Union[DriftCellV1, int, str]


class GridFileV1(BaseModel):
    """Container for one BPD grid (YAML file format)."""
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    schema_version: str = Field(GRID_SCHEMA, alias="schema", description="Schema version")
    rows: List[List[GridEntry]] = Field(..., description="Grid rows, top row first")

    @field_validator('schema_version')
    @classmethod
    def validate_schema(cls, v: str) -> str:
        if v != GRID_SCHEMA:
            raise ValueError(f"Expected schema '{GRID_SCHEMA}', got '{v}'")
        return v

    @model_validator(mode='after')
    def validate_rectangular(self) -> 'GridFileV1':
        if self.rows:
            width = len(self.rows[0])
            for i, row in enumerate(self.rows, 1):
                if len(row) != width:
                    raise ValueError(
                        f"Row {i} has {len(row)} entries, expected {width}"
                    )
        return self

    def to_codes(self) -> List[list]:
        """Return rows with drift entries as ``(label, highlighted)`` pairs."""
        return [
            [
                (e.label, e.highlighted) if isinstance(e, DriftCellV1) else e
                for e in row
            ]
            for row in self.rows
        ]


def load_grid_file(path: Union[str, Path]) -> GridFileV1:
    """Load and validate a grid YAML file.

    Parameters
    ----------
    path : Union[str, Path]
        Grid file path

    Returns
    -------
    GridFileV1
        Validated file contents

    Raises
    ------
    FileNotFoundError
        If the file doesn't exist
    ValueError
        If the file is empty or fails schema validation
        (``pydantic.ValidationError`` is a ``ValueError``)
    """
    data = fs.load_yaml(path)
    if data is None:
        raise ValueError(f"Empty grid file: {path}")
    return GridFileV1.model_validate(data)
