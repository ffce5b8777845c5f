"""Exception taxonomy shared by every layer.

``ValidationError`` and ``OutputError`` also derive from the matching
builtin (``ValueError`` / ``OSError``) so callers that only know the
builtins still catch them.
"""

from __future__ import annotations

from pathlib import Path


class BPDDrawError(Exception):
    """Base class for all bpd_draw errors."""

    pass


class ValidationError(BPDDrawError, ValueError):
    """Raised for a malformed grid, an unknown cell code, or bad options."""

    pass


class CapabilityUnavailableError(BPDDrawError, RuntimeError):
    """Raised when interactive mode is requested without a plotter."""

    pass


class OutputError(BPDDrawError, OSError):
    """Raised when the output file cannot be written.

    Parameters
    ----------
    path : str | Path
        Target that could not be written.
    reason : str
        Underlying failure description.
    """

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot write output to {self.path}: {reason}")

    def __str__(self) -> str:
        return f"Cannot write output to {self.path}: {self.reason}"
