"""Lines and segments through two poses.

One ``Line2D`` serves both readings of its endpoints: the ``*_within_range``
operations treat it as the bounded segment ``start -> end``, everything else
as the infinite line through them. A single tolerance ``eps`` drives every
collinearity, parallelism and degenerate-axis decision.

Near-parallel pairs (|cross| <= eps) are reported as not intersecting even
when an ill-conditioned intersection exists.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from math import sqrt
from typing import ClassVar, Tuple, Union

from geometry.pose2d import Pose2D
from geometry.vector2 import Vector2

Endpoint = Union[Pose2D, Vector2]


def _as_pose(p: Endpoint) -> Pose2D:
    if isinstance(p, Pose2D):
        return replace(p)
    if isinstance(p, Vector2):
        return Pose2D.from_vector(p)
    raise TypeError(f"line endpoint must be Pose2D or Vector2, got {type(p).__name__}")


@dataclass
class Line2D:
    start: Pose2D = field(default_factory=Pose2D)
    end: Pose2D = field(default_factory=Pose2D)

    eps: ClassVar[float] = 1e-10

    def __post_init__(self) -> None:
        self.start = _as_pose(self.start)
        self.end = _as_pose(self.end)

    @classmethod
    def from_points(cls, x1: float, y1: float, x2: float, y2: float) -> "Line2D":
        return cls(Pose2D(x1, y1), Pose2D(x2, y2))

    @classmethod
    def from_poses(
        cls, x1: float, y1: float, theta1: float, x2: float, y2: float, theta2: float
    ) -> "Line2D":
        return cls(Pose2D(x1, y1, theta1), Pose2D(x2, y2, theta2))

    def set(self, start: Endpoint, end: Endpoint) -> None:
        self.start = _as_pose(start)
        self.end = _as_pose(end)

    def get_length(self) -> float:
        return Pose2D.get_distance(self.start, self.end)

    def get_angle(self) -> float:
        return Pose2D.get_angle(self.start, self.end)

    def get_line_coefficients(self) -> Tuple[float, float, float]:
        """(a, b, c) with a*x + b*y + c = 0 through start and end."""
        s, e = self.start, self.end
        if abs(s.x - e.x) > self.eps:
            slope = (e.y - s.y) / (e.x - s.x)
            return slope, -1.0, -slope * s.x + s.y
        # vertical within eps
        return 1.0, 0.0, -s.x

    def is_point_on_line(self, p: Pose2D) -> bool:
        return abs(Pose2D.get_cross(self.end - self.start, p - self.start)) < self.eps

    def is_point_on_line_within_range(self, p: Pose2D) -> bool:
        """Collinear and strictly inside the segment's bounding box.

        An axis whose span is below eps only needs p to sit on it (within
        eps); any other axis excludes its bounds, so the endpoints themselves
        are not within range.
        """
        if not self.is_point_on_line(p):
            return False
        return self._within_axis(self.start.x, self.end.x, p.x) and self._within_axis(
            self.start.y, self.end.y, p.y
        )

    def _within_axis(self, a: float, b: float, v: float) -> bool:
        lo, hi = min(a, b), max(a, b)
        if abs(hi - lo) < self.eps:
            return abs(hi - v) <= self.eps
        return lo < v < hi

    @staticmethod
    def get_intersection(line1: "Line2D", line2: "Line2D") -> Tuple[bool, Pose2D]:
        """Intersection of two infinite lines.

        Returns ``(False, Pose2D(0, 0, 0))`` for parallel or coincident lines.
        The heading of the returned pose is interpolated along line1 like the
        position.
        """
        a = line1.end - line1.start
        b = line2.end - line2.start
        if abs(Pose2D.get_cross(a, b)) > line1.eps:
            k = Pose2D.get_cross(b, line2.start - line1.start) / Pose2D.get_cross(b, a)
            return True, line1.start + a * k
        return False, Pose2D(0.0, 0.0, 0.0)

    @staticmethod
    def get_intersection_within_range(line1: "Line2D", line2: "Line2D") -> Tuple[bool, Pose2D]:
        """Intersection of two segments.

        When the lines cross outside either segment the candidate point is
        still returned alongside ``False``.
        """
        hit, point = Line2D.get_intersection(line1, line2)
        if not hit:
            return False, point
        on_first = line1.is_point_on_line_within_range(point)
        on_second = line2.is_point_on_line_within_range(point)
        return on_first and on_second, point

    @staticmethod
    def get_distance_from_point_to_line(pose: Pose2D, line: "Line2D") -> float:
        a, b, c = line.get_line_coefficients()
        return abs(a * pose.x + b * pose.y + c) / sqrt(a * a + b * b)

    @staticmethod
    def get_distance_from_point_to_line_within_range(pose: Pose2D, line: "Line2D") -> float:
        """Distance to the segment: perpendicular when the foot lands inside,
        otherwise to the nearer endpoint."""
        a, b, c = line.get_line_coefficients()
        p, q = pose.x, pose.y
        n2 = a * a + b * b
        r = a * p + b * q + c
        foot = Pose2D((p * n2 - a * r) / n2, (q * n2 - b * r) / n2)

        if line.is_point_on_line_within_range(foot):
            return abs(r) / sqrt(n2)
        return min(Pose2D.get_distance(pose, line.start), Pose2D.get_distance(pose, line.end))

    def __str__(self) -> str:
        return f"[{self.start} -> {self.end}]"
