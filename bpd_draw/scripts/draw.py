#!/usr/bin/env python3
"""
Draw BPD Script.

Render a bumpless pipedream grid file as a PSTricks picture or a
matplotlib figure.

Usage:
    python -m bpd_draw.scripts.draw bpd1.yaml
    python -m bpd_draw.scripts.draw bpd1.yaml --output bpd1.tex --unit 0.5
    python -m bpd_draw.scripts.draw bpd1.yaml --mode interactive --output bpd1.png --hide

Grid file format (bpd_grid.v1):
    schema: bpd_grid.v1
    rows:
      - ["O", "O", "/"]
      - ["O", "/", "+"]
      - [{label: "3", highlighted: true}, "%", "|"]

Tile symbols:
    O blank   + cross   / SE elbow   % NW elbow   | vertical
    - horizontal   . dot   * star   "" empty   o special
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from bpd_draw.configs.loader import DrawConfig, load_config
from bpd_draw.draw import BPDDrawer, InteractiveUnavailable, Mode, RenderTarget
from bpd_draw.errors import BPDDrawError
from bpd_draw.grid.model import load_grid
from bpd_draw.utils.fs import ensure_dir
from bpd_draw.utils.logging_config import get_logger, push_context, setup_logging

logger = get_logger(__name__)


def _parse_size(text: str) -> tuple[int, int]:
    try:
        w, h = (int(v) for v in text.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"size must be WIDTH,HEIGHT in pixels, got {text!r}"
        ) from None
    return w, h


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Draw a bumpless pipedream",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("grid", help="Grid YAML file (schema bpd_grid.v1)")
    parser.add_argument(
        "--mode",
        default=Mode.VECTOR.value,
        help="'vector' (PSTricks text) or 'interactive' (matplotlib), default: vector",
    )
    parser.add_argument(
        "--output",
        default=None,
        help="Output file (parent directories are created); vector text goes to stdout when omitted",
    )
    parser.add_argument(
        "--unit", type=float, default=None, help="Vector mode: cm per cell"
    )
    parser.add_argument(
        "--no-grid",
        dest="show_grid",
        action="store_const",
        const=False,
        default=None,
        help="Omit the light guide lines",
    )
    parser.add_argument(
        "--size",
        type=_parse_size,
        default=None,
        help="Interactive mode: image size WIDTH,HEIGHT in pixels",
    )
    parser.add_argument(
        "--hide",
        dest="visible",
        action="store_const",
        const=False,
        default=None,
        help="Interactive mode: don't show the figure",
    )
    parser.add_argument("--config", default=None, help="Custom draw.yaml")
    parser.add_argument(
        "--log-level", default="INFO", help="Logging level, default: INFO"
    )
    return parser


def _target_for(mode: Mode, config: DrawConfig) -> RenderTarget:
    if mode is not Mode.INTERACTIVE:
        return InteractiveUnavailable()
    # matplotlib is only imported when a figure is actually wanted
    from bpd_draw.plots import matplotlib_target

    return matplotlib_target(config)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    setup_logging(
        log_level=args.log_level,
        context={"app": "draw_bpd"},
        quiet_libs=["matplotlib", "PIL"],
    )
    push_context(grid=args.grid)

    try:
        mode = Mode.parse(args.mode)
        config = load_config(args.config)
        grid = load_grid(args.grid)
        if args.output is not None:
            ensure_dir(Path(args.output).parent)
        drawer = BPDDrawer(target=_target_for(mode, config), config=config)
        options = drawer.default_options(
            mode,
            output_path=args.output,
            unit=args.unit,
            show_grid=args.show_grid,
            image_size=args.size,
            visible=args.visible,
        )
        result = drawer.draw(grid, mode, options)
    except (BPDDrawError, OSError) as exc:
        logger.error("%s", exc)
        return 1

    if mode is Mode.VECTOR and args.output is None:
        sys.stdout.write(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
