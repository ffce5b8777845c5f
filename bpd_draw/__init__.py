"""BPD Draw: diagrams for bumpless pipedreams.

Turns an already-built bumpless pipedream grid into either a PSTricks
picture for LaTeX documents or a matplotlib figure.

Subpackages:
    grid: Cell-code vocabulary and the immutable grid model
    render: Drawing-command IR and the grid -> commands renderer
    pstricks: Commands -> PSTricks text serialization
    plots: matplotlib plotting capability (interactive mode)
    configs: Style/size configuration loading and validation
    utils: Atomic file writes, YAML schemas, logging setup

Dependency order (strict, one-way):
    grid -> render -> {pstricks, plots} -> draw
"""

from bpd_draw.draw import (
    BPDDrawer,
    DrawOptions,
    InteractiveAvailable,
    InteractiveUnavailable,
    Mode,
    RenderTarget,
    draw_bpd,
)
from bpd_draw.errors import (
    BPDDrawError,
    CapabilityUnavailableError,
    OutputError,
    ValidationError,
)
from bpd_draw.grid import Grid, load_grid

__version__ = "0.1.0"

__all__ = [
    "BPDDrawError",
    "BPDDrawer",
    "CapabilityUnavailableError",
    "DrawOptions",
    "Grid",
    "InteractiveAvailable",
    "InteractiveUnavailable",
    "Mode",
    "OutputError",
    "RenderTarget",
    "ValidationError",
    "draw_bpd",
    "load_grid",
]
