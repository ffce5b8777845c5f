"""Drawing configuration loading and validation."""

from bpd_draw.configs.loader import (
    ConfigError,
    DrawConfig,
    InteractiveConfig,
    PaletteEntry,
    VectorConfig,
    load_config,
)

__all__ = [
    "ConfigError",
    "DrawConfig",
    "InteractiveConfig",
    "PaletteEntry",
    "VectorConfig",
    "load_config",
]
