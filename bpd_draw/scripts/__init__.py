"""Command-line entrypoints (``python -m bpd_draw.scripts.<name>``)."""
