"""2D vector value type with pure and in-place operation sets."""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from numbers import Real
from random import Random
from typing import Any, Callable, Iterator, Optional

from .. import config
from .floatops import format_coordinate, ieee_cos_sin, ieee_divide
from .inplace import InPlace

_default_rng = Random(config.DEFAULT_SEED)


def _coordinate(value: Any) -> float | None:
    """Float value of a real number, None for anything else (bools included)."""
    if isinstance(value, bool) or not isinstance(value, Real):
        return None
    try:
        return float(value)
    except OverflowError:
        return None


@dataclass
class Vector2:
    """Point or direction in the plane.

    Methods never modify the receiver; the mutating forms live on
    :attr:`inplace`. Division by a zero-length vector follows IEEE-754 and
    yields nan/inf coordinates instead of raising.
    """

    EPS = config.EPS

    x: float = 0.0
    y: float = 0.0

    def __post_init__(self) -> None:
        x, y = _coordinate(self.x), _coordinate(self.y)
        if x is None or y is None:
            x, y = 0.0, 0.0
        self.x = x
        self.y = y

    # ------------------------------------------------------------------
    # Construction

    @classmethod
    def from_xy(cls, x: float = 0.0, y: float = 0.0) -> "Vector2":
        return cls(x, y)

    @classmethod
    def from_pair(cls, pair: Any) -> "Vector2":
        """Build from the first two items of an indexable, else the origin."""
        if isinstance(pair, (str, bytes)):
            return cls()
        try:
            x, y = pair[0], pair[1]
        except (TypeError, IndexError, KeyError):
            return cls()
        return cls(x, y)

    @classmethod
    def from_fields(cls, source: Any) -> "Vector2":
        """Copy ``x``/``y`` from attributes or mapping keys; missing ones are 0."""
        if isinstance(source, Mapping):
            return cls(source.get("x", 0.0), source.get("y", 0.0))
        return cls(getattr(source, "x", 0.0), getattr(source, "y", 0.0))

    @classmethod
    def random(cls, rng: Random | None = None) -> "Vector2":
        source = rng if rng is not None else _default_rng
        return cls(source.random(), source.random())

    @classmethod
    def from_points(cls, a: "Vector2", b: "Vector2") -> "Vector2":
        return cls(b.x - a.x, b.y - a.y)

    @classmethod
    def from_barycentric(
        cls,
        a: "Vector2",
        b: "Vector2",
        c: "Vector2",
        u: float,
        v: float,
    ) -> "Vector2":
        """Cartesian point for barycentric (u, v, 1 - u - v) over triangle abc.

        Weights are not validated, so points outside the triangle are fine.
        """
        ax, ay = a.x, a.y
        return cls(
            ax + (b.x - ax) * u + (c.x - ax) * v,
            ay + (b.y - ay) * u + (c.y - ay) * v,
        )

    @classmethod
    def from_json(cls, payload: Any) -> "Vector2":
        return cls.from_fields(payload)

    # ------------------------------------------------------------------
    # Algebra

    def add(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x + other.x, self.y + other.y)

    def sub(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x - other.x, self.y - other.y)

    def neg(self) -> "Vector2":
        return Vector2(-self.x, -self.y)

    def scale(self, scalar: float) -> "Vector2":
        return Vector2(self.x * scalar, self.y * scalar)

    def prod(self, other: "Vector2") -> "Vector2":
        """Component-wise (Hadamard) product."""
        return Vector2(self.x * other.x, self.y * other.y)

    # ------------------------------------------------------------------
    # Geometry

    def dot(self, other: "Vector2") -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: "Vector2") -> float:
        """2D cross product returning a scalar (z-component)."""
        return self.x * other.y - self.y * other.x

    def perp(self) -> "Vector2":
        """Rotate 90 degrees counter-clockwise."""
        return Vector2(-self.y, self.x)

    def project_to(self, other: "Vector2") -> "Vector2":
        """Orthogonal projection onto ``other``."""
        bx, by = other.x, other.y
        t = ieee_divide(self.x * bx + self.y * by, bx * bx + by * by)
        return Vector2(bx * t, by * t)

    def reject_from(self, other: "Vector2") -> "Vector2":
        """Component orthogonal to ``other``; complements :meth:`project_to`."""
        bx, by = other.x, other.y
        t = ieee_divide(self.x * bx + self.y * by, bx * bx + by * by)
        return Vector2(self.x - bx * t, self.y - by * t)

    def reflect(self, other: "Vector2") -> "Vector2":
        """Mirror across the line spanned by ``other``."""
        bx, by = other.x, other.y
        t2 = ieee_divide(2 * (self.x * bx + self.y * by), bx * bx + by * by)
        return Vector2(t2 * bx - self.x, t2 * by - self.y)

    def refract(self, normal: "Vector2", eta: float) -> Optional["Vector2"]:
        """Refract this unit direction through a unit ``normal``.

        ``eta`` is the ratio of refractive indices (incident / transmitted).
        Returns None on total internal reflection.
        """
        dot = self.x * normal.x + self.y * normal.y
        k = 1 - eta * eta * (1 - dot * dot)
        if k < 0:
            return None
        t = eta * dot + math.sqrt(k)
        return Vector2(eta * self.x - t * normal.x, eta * self.y - t * normal.y)

    def rotate(self, angle_rad: float) -> "Vector2":
        cos_a, sin_a = ieee_cos_sin(angle_rad)
        return Vector2(
            cos_a * self.x - sin_a * self.y,
            sin_a * self.x + cos_a * self.y,
        )

    def lerp(self, other: "Vector2", t: float) -> "Vector2":
        """Linear interpolation; t outside [0, 1] extrapolates."""
        ax, ay = self.x, self.y
        return Vector2(ax + t * (other.x - ax), ay + t * (other.y - ay))

    def apply(self, fn: Callable[[float, float], float], other: "Vector2" | None = None) -> "Vector2":
        """Combine coordinates pairwise with ``fn``; ``other`` defaults to the origin."""
        ox, oy = (0.0, 0.0) if other is None else (other.x, other.y)
        return Vector2(fn(self.x, ox), fn(self.y, oy))

    # ------------------------------------------------------------------
    # Scalar queries

    def angle(self) -> float:
        return math.atan2(self.y, self.x)

    def norm(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def norm2(self) -> float:
        return self.x * self.x + self.y * self.y

    def distance(self, other: "Vector2") -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        return math.sqrt(dx * dx + dy * dy)

    def normalize(self) -> "Vector2":
        """Unit vector in the same direction.

        Zero and already-unit vectors are returned as-is, so the result is
        not always a new instance.
        """
        l2 = self.x * self.x + self.y * self.y
        if l2 == 0 or l2 == 1:
            return self
        inv = 1 / math.sqrt(l2)
        return Vector2(self.x * inv, self.y * inv)

    def equals(self, other: "Vector2") -> bool:
        return self is other or (
            abs(self.x - other.x) < self.EPS and abs(self.y - other.y) < self.EPS
        )

    def is_parallel(self, other: "Vector2") -> bool:
        return abs(self.cross(other)) < self.EPS

    def is_unit(self) -> bool:
        return abs(self.x * self.x + self.y * self.y - 1) < self.EPS

    # ------------------------------------------------------------------
    # Mutation

    def set(self, other: "Vector2") -> "Vector2":
        self.x = other.x
        self.y = other.y
        return self

    @property
    def inplace(self) -> InPlace:
        return InPlace(self)

    # ------------------------------------------------------------------
    # Representation

    def clone(self) -> "Vector2":
        return Vector2(self.x, self.y)

    def to_array(self) -> list[float]:
        return [self.x, self.y]

    def to_json(self) -> dict[str, float]:
        return {"x": self.x, "y": self.y}

    def __str__(self) -> str:
        return f"({format_coordinate(self.x)}, {format_coordinate(self.y)})"

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y))

    # ------------------------------------------------------------------
    # Operators

    def __add__(self, other: "Vector2") -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: "Vector2") -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        return self.sub(other)

    def __neg__(self) -> "Vector2":
        return self.neg()

    def __mul__(self, scalar: float) -> "Vector2":
        if not isinstance(scalar, Real):
            return NotImplemented
        return self.scale(scalar)

    def __rmul__(self, scalar: float) -> "Vector2":
        return self.__mul__(scalar)

    def __iadd__(self, other: "Vector2") -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        return self.inplace.add(other)

    def __isub__(self, other: "Vector2") -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        return self.inplace.sub(other)

    def __imul__(self, scalar: float) -> "Vector2":
        if not isinstance(scalar, Real):
            return NotImplemented
        return self.inplace.scale(scalar)
