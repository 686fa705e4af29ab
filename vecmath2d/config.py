"""Default configuration values for vecmath2d."""

from __future__ import annotations

# Absolute tolerance for equals/is_parallel/is_unit. Fixed for compatibility.
EPS = 1e-13

DEFAULT_SEED = None

CLI_PAIR_SEPARATOR = ","
