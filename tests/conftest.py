"""Shared fixtures for bpd_draw tests."""

from __future__ import annotations

import matplotlib

matplotlib.use("Agg")

import pytest

from bpd_draw.configs.loader import DrawConfig, load_config
from bpd_draw.grid.model import Grid
from bpd_draw.pstricks.serializer import PSTricksSerializer
from bpd_draw.render.renderer import VectorRenderer


@pytest.fixture()
def config() -> DrawConfig:
    """Load the default draw.yaml shipped with the package."""
    return load_config()


@pytest.fixture()
def renderer() -> VectorRenderer:
    return VectorRenderer()


@pytest.fixture()
def serializer(config: DrawConfig) -> PSTricksSerializer:
    return PSTricksSerializer(config)


@pytest.fixture()
def rothe_grid() -> Grid:
    """Rothe BPD of w = 1 4 5 3 2 (5x5)."""
    return Grid.from_symbols([
        "/ - - - -",
        "| O O / -",
        "| O O | /",
        "| O / + +",
        "| / + + +",
    ])


GRID_YAML = """\
schema: bpd_grid.v1
rows:
  - ["O", "/"]
  - [{label: 3, highlighted: true}, "+"]
"""


@pytest.fixture()
def grid_file(tmp_path):
    path = tmp_path / "bpd.yaml"
    path.write_text(GRID_YAML, encoding="utf-8")
    return path
