from __future__ import annotations

import re
from dataclasses import dataclass
from math import atan2, cos, sin, sqrt
from numbers import Real
from typing import Tuple, Union

import numpy as np

from shared.generic import as_float, guard

NUM_PATTERN = r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?|[-+]?(?:inf|nan)"
_VEC_RE = re.compile(
    rf"^\s*\(\s*({NUM_PATTERN})\s*,\s*({NUM_PATTERN})\s*\)\s*$", re.IGNORECASE
)

# Anything exposing .x/.y, or a plain (x, y) pair
PointLike = Union["Vector2", Tuple[float, float]]


def _xy_of(p) -> tuple[float, float]:
    if hasattr(p, "x") and hasattr(p, "y"):
        return p.x, p.y
    x, y = p
    return float(x), float(y)


def rotate_xy(
    x: float, y: float, angle: float, center: PointLike | None = None
) -> tuple[float, float]:
    """(x, y) rotated by ``angle`` [rad] about the origin or ``center``.

    ``center`` may be anything with ``.x``/``.y`` or a plain (x, y) pair.
    """
    ox, oy = (0.0, 0.0) if center is None else _xy_of(center)
    px, py = x - ox, y - oy
    c, s = cos(angle), sin(angle)
    return px * c - py * s + ox, px * s + py * c + oy


@dataclass
class Vector2:
    """2D Cartesian vector with value semantics.

    Arithmetic is component-wise; only scalar ``*`` and ``/`` are defined.
    Use ``get_dot`` / ``get_cross`` for vector products.
    """

    x: float = 0.0
    y: float = 0.0

    def __post_init__(self) -> None:
        self.x = as_float(self.x)
        self.y = as_float(self.y)

    @classmethod
    def parse(cls, text: str) -> "Vector2":
        """Inverse of ``str()``: reads ``"(x, y)"``."""
        m = _VEC_RE.match(text)
        if m is None:
            raise ValueError(f"not a vector literal: {text!r}")
        return cls(float(m.group(1)), float(m.group(2)))

    @classmethod
    def from_numpy(cls, arr) -> "Vector2":
        a = np.asarray(arr, dtype=float).reshape(-1)
        if a.size != 2:
            raise ValueError(f"expected 2 elements, got {a.size}")
        return cls(float(a[0]), float(a[1]))

    def to_numpy(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=float)

    def equals(self, other: "Vector2") -> bool:
        return self == other

    def set(self, x: float, y: float) -> None:
        self.x = as_float(x)
        self.y = as_float(y)

    def set_by_polar(self, r: float, angle: float) -> None:
        self.x = r * cos(angle)
        self.y = r * sin(angle)

    def rotate(self, angle: float, center: PointLike | None = None) -> None:
        """Rotate in place by ``angle`` [rad] about the origin or ``center``."""
        self.x, self.y = rotate_xy(self.x, self.y, angle, center)

    def normalize(self) -> None:
        # zero length is not guarded
        self /= self.length()

    def normalized(self) -> "Vector2":
        return self / self.length()

    def length(self) -> float:
        return self.magnitude()

    def magnitude(self) -> float:
        return sqrt(self.sqr_magnitude())

    def sqr_length(self) -> float:
        return self.sqr_magnitude()

    def sqr_magnitude(self) -> float:
        return self.x * self.x + self.y * self.y

    @staticmethod
    def get_dot(a: "Vector2", b: "Vector2") -> float:
        return a.x * b.x + a.y * b.y

    @staticmethod
    def get_cross(a: "Vector2", b: "Vector2") -> float:
        """z-component of the 3D cross product of (a, 0) and (b, 0)."""
        return a.x * b.y - a.y * b.x

    @staticmethod
    def get_angle(a: "Vector2", b: "Vector2") -> float:
        """Heading of the segment a -> b [rad]."""
        return atan2(b.y - a.y, b.x - a.x)

    @staticmethod
    def get_distance(a: "Vector2", b: "Vector2") -> float:
        return (b - a).magnitude()

    @staticmethod
    def lerp(a: "Vector2", b: "Vector2", t: float) -> "Vector2":
        t = guard(t, 0.0, 1.0)
        return Vector2(a.x + (b.x - a.x) * t, a.y + (b.y - a.y) * t)

    @staticmethod
    def get_midpoint(a: "Vector2", b: "Vector2") -> "Vector2":
        return Vector2.lerp(a, b, 0.5)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"

    def __pos__(self) -> "Vector2":
        return Vector2(self.x, self.y)

    def __neg__(self) -> "Vector2":
        return Vector2(-self.x, -self.y)

    def __add__(self, other):
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, s):
        if not isinstance(s, Real):
            return NotImplemented
        return Vector2(self.x * s, self.y * s)

    __rmul__ = __mul__

    def __truediv__(self, s):
        if not isinstance(s, Real):
            return NotImplemented
        return Vector2(self.x / s, self.y / s)

    def __iadd__(self, other):
        if not isinstance(other, Vector2):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        return self

    def __isub__(self, other):
        if not isinstance(other, Vector2):
            return NotImplemented
        self.x -= other.x
        self.y -= other.y
        return self

    def __imul__(self, s):
        if not isinstance(s, Real):
            return NotImplemented
        self.x *= s
        self.y *= s
        return self

    def __itruediv__(self, s):
        if not isinstance(s, Real):
            return NotImplemented
        self.x /= s
        self.y /= s
        return self
