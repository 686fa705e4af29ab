"""2D vector arithmetic for graphics, physics and geometry code."""

from .config import EPS
from .math import InPlace, Vector2

__all__ = [
    "EPS",
    "InPlace",
    "Vector2",
]
