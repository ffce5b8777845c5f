"""Configuration loader for bpd_draw.

Loads and validates ``draw.yaml`` into typed, frozen dataclasses.
Every size, line width and color used by the output backends comes
from the config -- nothing is hardcoded in the serializer or plotter.

Units:
    ``vector.unit_cm`` is centimeters per grid cell; PSTricks line
    widths and dot sizes are points.  Interactive sizes are pixels.

Usage::

    from bpd_draw.configs.loader import load_config
    cfg = load_config()                     # default path
    cfg = load_config("/custom/draw.yaml")  # explicit path
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from bpd_draw.errors import BPDDrawError
from bpd_draw.render.primitives import STYLES
from bpd_draw.utils.fs import load_yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent / "draw.yaml"


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ConfigError(BPDDrawError):
    """Raised when configuration validation fails."""

    pass


# ---------------------------------------------------------------------------
# Dataclasses -- mirror the YAML structure
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class VectorConfig:
    """PSTricks output defaults."""

    unit_cm: float
    show_grid: bool
    line_width_pt: float
    dot_size_pt: float


@dataclass(frozen=True)
class InteractiveConfig:
    """matplotlib output defaults.

    ``image_size_px`` is ``(width, height)``; the figure size in inches
    is ``image_size_px / dpi``.
    """

    image_size_px: tuple[int, int]
    dpi: int
    visible: bool
    show_grid: bool
    line_width: float
    marker_size: float
    font_size: float


@dataclass(frozen=True)
class PaletteEntry:
    """Concrete colors for one symbolic style name."""

    pstricks: str
    matplotlib: str


@dataclass(frozen=True)
class DrawConfig:
    """Complete drawing configuration loaded from ``draw.yaml``."""

    vector: VectorConfig
    interactive: InteractiveConfig
    palette: dict[str, PaletteEntry]

    # -- Convenience helpers ------------------------------------------------

    def color(self, style: str, backend: str) -> str:
        """Return the *backend* color for symbolic *style*.

        Parameters
        ----------
        style : str
            Symbolic style name (e.g. ``"line"``).
        backend : ``"pstricks"`` | ``"matplotlib"``

        Raises
        ------
        ConfigError
            On an unknown style or backend.
        """
        if style not in self.palette:
            raise ConfigError(
                f"Unknown style '{style}'. Available: {list(self.palette.keys())}"
            )
        if backend not in ("pstricks", "matplotlib"):
            raise ConfigError(
                f"Unknown color backend '{backend}'. Expected 'pstricks' or 'matplotlib'"
            )
        return getattr(self.palette[style], backend)


# ---------------------------------------------------------------------------
# Internal parsing helpers
# ---------------------------------------------------------------------------


def _parse_pair(label: str, raw: Any) -> tuple[int, int]:
    if not isinstance(raw, (list, tuple)) or len(raw) != 2:
        raise ConfigError(f"{label} must be a 2-element list, got {raw!r}")
    return int(raw[0]), int(raw[1])


def _parse_vector(data: dict[str, Any]) -> VectorConfig:
    """Parse the ``vector`` section."""
    return VectorConfig(
        unit_cm=float(data["unit_cm"]),
        show_grid=bool(data.get("show_grid", True)),
        line_width_pt=float(data.get("line_width_pt", 0.8)),
        dot_size_pt=float(data.get("dot_size_pt", 4.0)),
    )


def _parse_interactive(data: dict[str, Any]) -> InteractiveConfig:
    """Parse the ``interactive`` section."""
    return InteractiveConfig(
        image_size_px=_parse_pair(
            "interactive.image_size_px", data.get("image_size_px", [300, 300])
        ),
        dpi=int(data.get("dpi", 100)),
        visible=bool(data.get("visible", True)),
        show_grid=bool(data.get("show_grid", True)),
        line_width=float(data.get("line_width", 2.0)),
        marker_size=float(data.get("marker_size", 6.0)),
        font_size=float(data.get("font_size", 12.0)),
    )


def _parse_palette(data: dict[str, Any]) -> dict[str, PaletteEntry]:
    """Parse the ``palette`` section; every style name must be present."""
    missing = [name for name in STYLES if name not in data]
    if missing:
        raise ConfigError(f"palette is missing styles: {missing}")
    unknown = [name for name in data if name not in STYLES]
    if unknown:
        raise ConfigError(f"palette has unknown styles: {unknown}")
    return {
        name: PaletteEntry(
            pstricks=str(data[name]["pstricks"]),
            matplotlib=str(data[name]["matplotlib"]),
        )
        for name in STYLES
    }


def _validate_config(cfg: DrawConfig) -> None:
    """Validate value ranges.

    Raises
    ------
    ConfigError
        On any invalid value.
    """
    v = cfg.vector
    if v.unit_cm <= 0:
        raise ConfigError(f"vector.unit_cm must be > 0, got {v.unit_cm}")
    if v.line_width_pt <= 0:
        raise ConfigError(f"vector.line_width_pt must be > 0, got {v.line_width_pt}")
    if v.dot_size_pt <= 0:
        raise ConfigError(f"vector.dot_size_pt must be > 0, got {v.dot_size_pt}")

    it = cfg.interactive
    w, h = it.image_size_px
    if w <= 0 or h <= 0:
        raise ConfigError(
            f"interactive.image_size_px must be positive, got {[w, h]}"
        )
    if it.dpi <= 0:
        raise ConfigError(f"interactive.dpi must be > 0, got {it.dpi}")
    for name in ("line_width", "marker_size", "font_size"):
        if getattr(it, name) <= 0:
            raise ConfigError(
                f"interactive.{name} must be > 0, got {getattr(it, name)}"
            )

    for name, entry in cfg.palette.items():
        if not entry.pstricks or not entry.matplotlib:
            raise ConfigError(f"palette.{name} has an empty color")


# ---------------------------------------------------------------------------
# Public loader
# ---------------------------------------------------------------------------


def load_config(path: str | Path | None = None) -> DrawConfig:
    """Load and validate drawing configuration from YAML.

    Parameters
    ----------
    path : str | Path | None
        Path to ``draw.yaml``.  ``None`` loads the default shipped
        alongside this module.

    Returns
    -------
    DrawConfig
        Fully validated, frozen configuration object.

    Raises
    ------
    ConfigError
        If the file is not valid YAML, or any field is missing or fails
        validation.
    FileNotFoundError
        If *path* does not exist.
    """
    path = DEFAULT_CONFIG_PATH if path is None else Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    logger.debug("Loading configuration from %s", path)

    try:
        data: dict[str, Any] = load_yaml(path)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Malformed configuration file {path}: {exc}") from exc
    if data is None:
        raise ConfigError(f"Empty configuration file: {path}")
    if not isinstance(data, dict):
        raise ConfigError(
            f"Configuration file {path} must hold a mapping, got {type(data).__name__}"
        )

    try:
        config = DrawConfig(
            vector=_parse_vector(data["vector"]),
            interactive=_parse_interactive(data.get("interactive") or {}),
            palette=_parse_palette(data["palette"]),
        )
    except KeyError as exc:
        raise ConfigError(
            f"Missing required configuration key: {exc}"
        ) from exc
    except (TypeError, ValueError) as exc:
        raise ConfigError(
            f"Invalid configuration value: {exc}"
        ) from exc

    _validate_config(config)
    return config
