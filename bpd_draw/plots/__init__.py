"""
Interactive plotting module.

matplotlib implementation of the interactive drawing capability.
Importing this package imports matplotlib; callers opt in by building
the drawer with ``matplotlib_target()``.
"""

from bpd_draw.plots.plotter import MatplotlibPlotter, matplotlib_target

__all__ = ["MatplotlibPlotter", "matplotlib_target"]
