"""Float helpers that follow IEEE-754 (nan/inf results) instead of raising."""

from __future__ import annotations

import numpy as np

# Past this magnitude integral floats are shown in exponent form.
_PLAIN_INTEGER_LIMIT = 1e21


def ieee_divide(numerator: float, denominator: float) -> float:
    """Divide like a float64 FPU: x/0 gives +-inf and 0/0 gives nan."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(numerator) / np.float64(denominator))


def ieee_cos_sin(angle_rad: float) -> tuple[float, float]:
    """Cosine and sine of an angle; non-finite angles give nan instead of raising."""
    with np.errstate(invalid="ignore"):
        angle = np.float64(angle_rad)
        return float(np.cos(angle)), float(np.sin(angle))


def format_coordinate(value: float) -> str:
    """Render a coordinate for display, dropping the ``.0`` of integral values."""
    value = float(value)
    if value.is_integer() and abs(value) < _PLAIN_INTEGER_LIMIT:
        return str(int(value))
    return repr(value)
