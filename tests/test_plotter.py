"""Tests for the matplotlib plotter (Agg backend, set in conftest)."""

from __future__ import annotations

from dataclasses import replace

import matplotlib.pyplot as plt
import pytest
from matplotlib.figure import Figure
from matplotlib.patches import PathPatch, Rectangle

from bpd_draw.configs.loader import DrawConfig
from bpd_draw.draw import BPDDrawer, DrawOptions, InteractiveAvailable
from bpd_draw.errors import OutputError
from bpd_draw.grid import Grid
from bpd_draw.plots import MatplotlibPlotter, matplotlib_target


@pytest.fixture()
def plotter(config: DrawConfig) -> MatplotlibPlotter:
    return MatplotlibPlotter(config)


@pytest.fixture()
def hidden() -> DrawOptions:
    return DrawOptions(visible=False)


class TestFigure:
    def test_returns_figure(self, plotter: MatplotlibPlotter, rothe_grid: Grid, hidden) -> None:
        fig = plotter.plot(rothe_grid, hidden)
        assert isinstance(fig, Figure)

    def test_hidden_figure_closed(self, plotter: MatplotlibPlotter, rothe_grid: Grid, hidden) -> None:
        fig = plotter.plot(rothe_grid, hidden)
        assert fig.number not in plt.get_fignums()

    def test_size_from_options(self, plotter: MatplotlibPlotter, rothe_grid: Grid) -> None:
        fig = plotter.plot(rothe_grid, DrawOptions(image_size=(400, 200), visible=False))
        w, h = fig.get_size_inches() * fig.dpi
        assert (round(w), round(h)) == (400, 200)

    def test_axes_span_grid(self, plotter: MatplotlibPlotter, hidden) -> None:
        grid = Grid.from_symbols(["O O O", "+ + +"])
        ax = plotter.plot(grid, hidden).axes[0]
        assert ax.get_xlim() == (0.0, 3.0)
        assert ax.get_ylim() == (0.0, 2.0)


class TestArtists:
    def test_blank_cell_rectangles(self, plotter: MatplotlibPlotter, hidden) -> None:
        ax = plotter.plot(Grid.from_symbols(["O"]), hidden).axes[0]
        rects = [p for p in ax.patches if isinstance(p, Rectangle)]
        assert len(rects) == 2
        assert sum(r.get_fill() for r in rects) == 1
        assert all(r.get_xy() == (0.0, 0.0) for r in rects)

    def test_elbow_is_curve(self, plotter: MatplotlibPlotter, hidden) -> None:
        ax = plotter.plot(Grid.from_symbols(["/"]), hidden).axes[0]
        curves = [p for p in ax.patches if isinstance(p, PathPatch)]
        assert len(curves) == 1

    def test_guides_and_frame(self, plotter: MatplotlibPlotter, hidden) -> None:
        grid = Grid.from_symbols(["O O O", "O O O"])
        with_guides = plotter.plot(grid, hidden).axes[0]
        without = plotter.plot(
            grid, DrawOptions(show_grid=False, visible=False)
        ).axes[0]
        # (rows - 1) + (cols - 1) guide lines on top of the frame
        assert len(with_guides.lines) - len(without.lines) == 1 + 2
        assert len(without.lines) == 1

    def test_drift_label(self, plotter: MatplotlibPlotter, hidden) -> None:
        grid = Grid.from_codes([[("3", True), ""], ["", ""]])
        ax = plotter.plot(grid, hidden).axes[0]
        (text,) = ax.texts
        assert text.get_text() == "3"
        assert text.get_position() == (0.5, 1.5)

    def test_dot_marker(self, plotter: MatplotlibPlotter) -> None:
        ax = plotter.plot(
            Grid.from_symbols(["."]), DrawOptions(show_grid=False, visible=False)
        ).axes[0]
        markers = [l for l in ax.lines if l.get_marker() == "o"]
        assert len(markers) == 1


class TestSaving:
    def test_png_written(self, plotter: MatplotlibPlotter, rothe_grid: Grid, tmp_path) -> None:
        out = tmp_path / "bpd.png"
        plotter.plot(rothe_grid, DrawOptions(output_path=out, visible=False))
        assert out.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"

    def test_unwritable(self, plotter: MatplotlibPlotter, rothe_grid: Grid, tmp_path) -> None:
        out = tmp_path / "missing" / "bpd.png"
        with pytest.raises(OutputError):
            plotter.plot(rothe_grid, DrawOptions(output_path=out, visible=False))


class TestTarget:
    def test_matplotlib_target(self, config: DrawConfig, rothe_grid: Grid, hidden) -> None:
        target = matplotlib_target(config)
        assert isinstance(target, InteractiveAvailable)
        fig = BPDDrawer(target=target, config=config).draw(rothe_grid, "interactive", hidden)
        assert isinstance(fig, Figure)

    def test_interactive_show_grid_config(self, config: DrawConfig) -> None:
        cfg = replace(config, interactive=replace(config.interactive, show_grid=False))
        drawer = BPDDrawer(target=matplotlib_target(cfg), config=cfg)
        grid = Grid.from_symbols(["O O", "O O"])
        fig = drawer.draw(grid, "interactive", drawer.default_options("interactive", visible=False))
        # Frame only, no guides
        assert len(fig.axes[0].lines) == 1
