"""Vector math primitives."""

from .floatops import ieee_cos_sin, ieee_divide
from .inplace import InPlace
from .vec2 import Vector2

__all__ = [
    "InPlace",
    "Vector2",
    "ieee_cos_sin",
    "ieee_divide",
]
