"""Dispatcher -- one entry point for both drawing modes.

Vector (production)
    Render the grid to commands, serialize them to PSTricks text,
    optionally save the text, and return it.

Interactive (exploration)
    Hand the grid to an injected plotting capability (normally the
    matplotlib plotter from ``bpd_draw.plots``) and return whatever it
    produces.

The plotting capability is chosen by the caller when the drawer is
built, as a ``RenderTarget``.  Nothing here checks which libraries
happen to be importable: a drawer built with ``InteractiveUnavailable``
refuses interactive mode even if matplotlib is installed.
"""

from __future__ import annotations

import logging
import math
import numbers
from abc import ABC
from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path
from typing import Any, Iterable, Protocol, Sequence

from bpd_draw.configs.loader import DrawConfig, load_config
from bpd_draw.errors import CapabilityUnavailableError, ValidationError
from bpd_draw.grid.model import Grid
from bpd_draw.pstricks.serializer import PSTricksSerializer
from bpd_draw.render.renderer import VectorRenderer

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Mode
# ---------------------------------------------------------------------------


class Mode(Enum):
    """Rendering target."""

    INTERACTIVE = "interactive"
    VECTOR = "vector"

    @classmethod
    def parse(cls, value: Mode | str) -> Mode:
        """Accept a ``Mode``, its value, or the legacy names.

        ``"plots"`` and ``"ps"`` are the names older drawing scripts
        use for interactive and vector mode.

        Raises
        ------
        ValidationError
            If *value* names neither mode.
        """
        if isinstance(value, Mode):
            return value
        if isinstance(value, str):
            key = value.strip().lower().lstrip(":")
            if key in _MODE_ALIASES:
                return _MODE_ALIASES[key]
        raise ValidationError(
            f"mode must be 'interactive' or 'vector', got {value!r}"
        )


_MODE_ALIASES: dict[str, Mode] = {
    "interactive": Mode.INTERACTIVE,
    "plots": Mode.INTERACTIVE,
    "vector": Mode.VECTOR,
    "ps": Mode.VECTOR,
}


# ---------------------------------------------------------------------------
# Options
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class DrawOptions:
    """Options shared by both modes.

    Parameters
    ----------
    output_path : str | Path | None
        File to save to.  ``None`` saves nothing.
    image_size : tuple[int, int]
        Interactive figure ``(width, height)`` in pixels.
    unit : float
        Vector mode: centimeters per grid cell.
    show_grid : bool
        Draw light guide lines between cells.
    visible : bool
        Interactive mode: show the figure.
    """

    output_path: str | Path | None = None
    image_size: tuple[int, int] = (300, 300)
    unit: float = 0.7
    show_grid: bool = True
    visible: bool = True

    def __post_init__(self) -> None:
        size = self.image_size
        if isinstance(size, (str, bytes)) or not isinstance(size, Iterable):
            raise ValidationError(
                f"image_size must be a positive (width, height) pair, got {size!r}"
            )
        size = tuple(size)
        if (
            len(size) != 2
            or not all(isinstance(v, numbers.Real) and not isinstance(v, bool) for v in size)
            or min(size) <= 0
        ):
            raise ValidationError(
                f"image_size must be a positive (width, height) pair, got {size!r}"
            )
        object.__setattr__(self, "image_size", size)
        if isinstance(self.unit, bool) or not isinstance(self.unit, (int, float)):
            raise ValidationError(f"unit must be a positive number, got {self.unit!r}")
        if not (self.unit > 0 and math.isfinite(self.unit)):
            raise ValidationError(f"unit must be a positive number, got {self.unit!r}")

    @classmethod
    def from_config(
        cls,
        config: DrawConfig,
        mode: Mode | str = Mode.VECTOR,
        **overrides: Any,
    ) -> DrawOptions:
        """Defaults from *config*, then keyword *overrides*.

        ``show_grid`` defaults from the config section of *mode*
        (``vector`` or ``interactive``).  ``None`` overrides are
        ignored, so CLI arguments can be passed straight through.
        """
        mode = Mode.parse(mode)
        section = config.interactive if mode is Mode.INTERACTIVE else config.vector
        base = cls(
            image_size=config.interactive.image_size_px,
            unit=config.vector.unit_cm,
            show_grid=section.show_grid,
            visible=config.interactive.visible,
        )
        unknown = set(overrides) - set(cls.__dataclass_fields__)
        if unknown:
            raise ValidationError(f"Unknown draw options: {sorted(unknown)}")
        return replace(base, **{k: v for k, v in overrides.items() if v is not None})


# ---------------------------------------------------------------------------
# Render targets
# ---------------------------------------------------------------------------


class PlotCapability(Protocol):
    """Anything that can draw a grid interactively."""

    def plot(self, grid: Grid, options: DrawOptions) -> Any:
        ...


@dataclass(frozen=True, slots=True)
class RenderTarget(ABC):
    """Whether an interactive plotting capability is available."""

    pass


@dataclass(frozen=True, slots=True)
class InteractiveAvailable(RenderTarget):
    """Interactive mode delegates to *capability*."""

    capability: PlotCapability


@dataclass(frozen=True, slots=True)
class InteractiveUnavailable(RenderTarget):
    """Interactive mode is refused."""

    pass


# ---------------------------------------------------------------------------
# Drawer
# ---------------------------------------------------------------------------


class BPDDrawer:
    """Draw grids in either mode.

    Parameters
    ----------
    target : RenderTarget | None
        Interactive capability.  ``None`` means ``InteractiveUnavailable``.
    config : DrawConfig | None
        Drawing configuration.  ``None`` loads the default.
    renderer : VectorRenderer | None
        Grid -> commands renderer.
    serializer : PSTricksSerializer | None
        Commands -> text serializer.  Defaults to one built on *config*.
    """

    def __init__(
        self,
        target: RenderTarget | None = None,
        config: DrawConfig | None = None,
        renderer: VectorRenderer | None = None,
        serializer: PSTricksSerializer | None = None,
    ) -> None:
        self._target = target if target is not None else InteractiveUnavailable()
        self._cfg = config if config is not None else load_config()
        self._renderer = renderer if renderer is not None else VectorRenderer()
        self._serializer = (
            serializer if serializer is not None else PSTricksSerializer(self._cfg)
        )

    @property
    def config(self) -> DrawConfig:
        return self._cfg

    @property
    def target(self) -> RenderTarget:
        return self._target

    def default_options(
        self, mode: Mode | str = Mode.VECTOR, **overrides: Any,
    ) -> DrawOptions:
        return DrawOptions.from_config(self._cfg, mode, **overrides)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def draw(
        self,
        grid: Grid,
        mode: Mode | str = Mode.VECTOR,
        options: DrawOptions | None = None,
    ) -> Any:
        """Draw *grid* in *mode*.

        Parameters
        ----------
        grid : Grid
            Grid to draw.
        mode : Mode | str
            ``Mode.VECTOR`` / ``"vector"`` or ``Mode.INTERACTIVE`` /
            ``"interactive"``.
        options : DrawOptions | None
            ``None`` uses the configured defaults for *mode*.

        Returns
        -------
        str | Any
            PSTricks text in vector mode; the capability's artifact
            (a matplotlib ``Figure``) in interactive mode.

        Raises
        ------
        ValidationError
            Invalid mode (checked before anything is drawn or written)
            or malformed grid.
        CapabilityUnavailableError
            Interactive mode without an injected plotting capability.
        OutputError
            The output file cannot be written.
        """
        mode = Mode.parse(mode)
        if not isinstance(grid, Grid):
            raise ValidationError(f"draw() expects a Grid, got {type(grid).__name__}")
        if options is None:
            options = self.default_options(mode)

        if mode is Mode.INTERACTIVE:
            return self._draw_interactive(grid, options)
        return self._draw_vector(grid, options)

    # ------------------------------------------------------------------
    # Modes
    # ------------------------------------------------------------------

    def _draw_interactive(self, grid: Grid, options: DrawOptions) -> Any:
        if not isinstance(self._target, InteractiveAvailable):
            raise CapabilityUnavailableError(
                "Interactive mode requires a plotting capability. Build the "
                "drawer with target=bpd_draw.plots.matplotlib_target() "
                "(needs matplotlib installed), or use mode='vector'."
            )
        logger.debug("Delegating %dx%d grid to interactive capability", grid.rows, grid.cols)
        return self._target.capability.plot(grid, options)

    def _draw_vector(self, grid: Grid, options: DrawOptions) -> str:
        commands = self._renderer.render(grid)
        text = self._serializer.serialize(
            commands,
            grid.rows,
            grid.cols,
            unit=options.unit,
            show_grid=options.show_grid,
        )
        if options.output_path is not None:
            self._serializer.save(text, options.output_path)
        return text


# ---------------------------------------------------------------------------
# Convenience
# ---------------------------------------------------------------------------


def draw_bpd(
    grid: Grid | Sequence[Sequence[Any]],
    mode: Mode | str = Mode.VECTOR,
    *,
    target: RenderTarget | None = None,
    config: DrawConfig | None = None,
    **options: Any,
) -> Any:
    """Draw a grid in one call.

    Parameters
    ----------
    grid : Grid | nested sequence
        A ``Grid`` or raw codes accepted by ``Grid.from_codes``.
    mode : Mode | str
        Drawing mode.
    target : RenderTarget | None
        Interactive capability; required for interactive mode.
    config : DrawConfig | None
        Drawing configuration.
    **options
        ``DrawOptions`` fields (``output_path``, ``unit``, ``show_grid``,
        ``image_size``, ``visible``).

    Examples
    --------
    >>> tex = draw_bpd([[0, 2], [2, 1]], "vector", unit=0.5)
    >>> tex.splitlines()[0]
    '%% Auto-generated by draw_bpd'
    """
    mode = Mode.parse(mode)
    if not isinstance(grid, Grid):
        grid = Grid.from_codes(grid)
    drawer = BPDDrawer(target=target, config=config)
    return drawer.draw(grid, mode, drawer.default_options(mode, **options))
