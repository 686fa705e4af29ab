"""Mutating counterparts of the pure Vector2 operations."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .vec2 import Vector2


class InPlace:
    """Writes results back into ``target`` and returns it for chaining.

    Every method performs the same float operations as the pure method of the
    same name, so ``v.inplace.add(w)`` leaves ``v`` equal to ``v.add(w)``.
    """

    __slots__ = ("target",)

    def __init__(self, target: "Vector2") -> None:
        self.target = target

    def add(self, other: "Vector2") -> "Vector2":
        target = self.target
        target.x += other.x
        target.y += other.y
        return target

    def sub(self, other: "Vector2") -> "Vector2":
        target = self.target
        target.x -= other.x
        target.y -= other.y
        return target

    def neg(self) -> "Vector2":
        target = self.target
        target.x = -target.x
        target.y = -target.y
        return target

    def scale(self, scalar: float) -> "Vector2":
        target = self.target
        target.x *= scalar
        target.y *= scalar
        return target

    def prod(self, other: "Vector2") -> "Vector2":
        target = self.target
        target.x *= other.x
        target.y *= other.y
        return target

    def normalize(self) -> "Vector2":
        target = self.target
        l2 = target.x * target.x + target.y * target.y
        if l2 == 0 or l2 == 1:
            return target
        inv = 1 / math.sqrt(l2)
        target.x *= inv
        target.y *= inv
        return target

    def set(self, other: "Vector2") -> "Vector2":
        return self.target.set(other)
