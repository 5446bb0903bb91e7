from __future__ import annotations

import re
from dataclasses import dataclass
from math import atan2, cos, sin, sqrt
from numbers import Real

import numpy as np

from geometry.vector2 import NUM_PATTERN, PointLike, Vector2, rotate_xy
from shared.generic import as_float, guard

_POSE_RE = re.compile(
    rf"^\s*\(\s*({NUM_PATTERN})\s*,\s*({NUM_PATTERN})\s*,\s*({NUM_PATTERN})\s*\)\s*$",
    re.IGNORECASE,
)


@dataclass
class Pose2D:
    """Planar pose: position (x, y) plus heading ``theta`` [rad].

    Arithmetic and interpolation act on all three components alike, so the
    heading of a sum or lerp is never wrapped; run it through
    ``geometry.angles.normalize`` when a bounded heading is needed.
    Rotation only moves the position.
    """

    x: float = 0.0
    y: float = 0.0
    theta: float = 0.0

    def __post_init__(self) -> None:
        self.x = as_float(self.x)
        self.y = as_float(self.y)
        self.theta = as_float(self.theta)

    @classmethod
    def from_vector(cls, v: Vector2, theta: float = 0.0) -> "Pose2D":
        return cls(v.x, v.y, theta)

    @classmethod
    def parse(cls, text: str) -> "Pose2D":
        """Inverse of ``str()``: reads ``"(x, y, theta)"``."""
        m = _POSE_RE.match(text)
        if m is None:
            raise ValueError(f"not a pose literal: {text!r}")
        return cls(float(m.group(1)), float(m.group(2)), float(m.group(3)))

    @classmethod
    def from_numpy(cls, arr) -> "Pose2D":
        a = np.asarray(arr, dtype=float).reshape(-1)
        if a.size not in (2, 3):
            raise ValueError(f"expected 2 or 3 elements, got {a.size}")
        return cls(*(float(v) for v in a))

    def to_numpy(self) -> np.ndarray:
        return np.array([self.x, self.y, self.theta], dtype=float)

    def position(self) -> Vector2:
        return Vector2(self.x, self.y)

    def equals(self, other: "Pose2D") -> bool:
        return self == other

    def set(self, x: float, y: float, theta: float) -> None:
        self.x = as_float(x)
        self.y = as_float(y)
        self.theta = as_float(theta)

    def set_by_polar(self, r: float, angle: float, theta: float) -> None:
        """Position from polar (r, angle); heading set independently."""
        self.x = r * cos(angle)
        self.y = r * sin(angle)
        self.theta = as_float(theta)

    def rotate(self, angle: float, center: PointLike | None = None) -> None:
        """Rotate the position by ``angle`` about the origin or ``center``.

        ``theta`` is left as is.
        """
        self.x, self.y = rotate_xy(self.x, self.y, angle, center)

    def length(self) -> float:
        return self.magnitude()

    def magnitude(self) -> float:
        return sqrt(self.sqr_magnitude())

    def sqr_length(self) -> float:
        return self.sqr_magnitude()

    def sqr_magnitude(self) -> float:
        return self.x * self.x + self.y * self.y

    @staticmethod
    def get_dot(a: "Pose2D", b: "Pose2D") -> float:
        return a.x * b.x + a.y * b.y

    @staticmethod
    def get_cross(a: "Pose2D", b: "Pose2D") -> float:
        return a.x * b.y - a.y * b.x

    @staticmethod
    def get_angle(a: "Pose2D", b: "Pose2D") -> float:
        return atan2(b.y - a.y, b.x - a.x)

    @staticmethod
    def get_distance(a: "Pose2D", b: "Pose2D") -> float:
        return (b - a).magnitude()

    @staticmethod
    def lerp(a: "Pose2D", b: "Pose2D", t: float) -> "Pose2D":
        t = guard(t, 0.0, 1.0)
        return Pose2D(
            a.x + (b.x - a.x) * t,
            a.y + (b.y - a.y) * t,
            a.theta + (b.theta - a.theta) * t,
        )

    @staticmethod
    def get_midpoint(a: "Pose2D", b: "Pose2D") -> "Pose2D":
        return Pose2D.lerp(a, b, 0.5)

    def __str__(self) -> str:
        return f"({self.x}, {self.y}, {self.theta})"

    def __pos__(self) -> "Pose2D":
        return Pose2D(self.x, self.y, self.theta)

    def __neg__(self) -> "Pose2D":
        return Pose2D(-self.x, -self.y, -self.theta)

    def __add__(self, other):
        if not isinstance(other, Pose2D):
            return NotImplemented
        return Pose2D(self.x + other.x, self.y + other.y, self.theta + other.theta)

    def __sub__(self, other):
        if not isinstance(other, Pose2D):
            return NotImplemented
        return Pose2D(self.x - other.x, self.y - other.y, self.theta - other.theta)

    def __mul__(self, s):
        if not isinstance(s, Real):
            return NotImplemented
        return Pose2D(self.x * s, self.y * s, self.theta * s)

    __rmul__ = __mul__

    def __truediv__(self, s):
        if not isinstance(s, Real):
            return NotImplemented
        return Pose2D(self.x / s, self.y / s, self.theta / s)

    def __iadd__(self, other):
        if not isinstance(other, Pose2D):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        self.theta += other.theta
        return self

    def __isub__(self, other):
        if not isinstance(other, Pose2D):
            return NotImplemented
        self.x -= other.x
        self.y -= other.y
        self.theta -= other.theta
        return self

    def __imul__(self, s):
        if not isinstance(s, Real):
            return NotImplemented
        self.x *= s
        self.y *= s
        self.theta *= s
        return self

    def __itruediv__(self, s):
        if not isinstance(s, Real):
            return NotImplemented
        self.x /= s
        self.y /= s
        self.theta /= s
        return self
