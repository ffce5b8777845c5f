"""Cross-cutting utilities (lowest dependency layer).

This package provides shared primitives for:
    - Atomic I/O and YAML loading (fs)
    - Input-file schemas (validators)
    - Unified logging (logging_config)

No module in utils/ may import from upper layers (grid, render, draw, etc.).

Convenience imports:
    from bpd_draw.utils import fs, validators
    from bpd_draw.utils.logging_config import setup_logging, get_logger
"""

from . import fs
from . import logging_config
from . import validators

from .logging_config import get_logger, push_context, setup_logging

__all__ = [
    # Modules
    'fs',
    'logging_config',
    'validators',
    # Direct exports
    'setup_logging',
    'get_logger',
    'push_context',
]
