"""Angle helpers (radians unless stated otherwise).

Pose headings are never wrapped by the geometry types; callers that need a
bounded heading run it through ``normalize`` here.
"""

from __future__ import annotations

import math

TWO_PI = 2.0 * math.pi


def radians(degrees: float) -> float:
    return degrees * math.pi / 180.0


def degrees(radians: float) -> float:
    return radians * 180.0 / math.pi


def normalize_positive(angle: float) -> float:
    """Wrap angle to [0, 2*pi)."""
    a = math.fmod(angle, TWO_PI)
    if a < 0:
        return a + TWO_PI
    return a


def normalize(angle: float) -> float:
    """Wrap angle to (-pi, pi]."""
    a = math.fmod(angle + math.pi, TWO_PI)
    if a <= 0.0:
        return a + math.pi
    return a - math.pi


def shortest_angle(from_angle: float, to_angle: float) -> float:
    """Signed shortest rotation from ``from_angle`` to ``to_angle``, in [-pi, pi]."""
    return normalize(to_angle - from_angle)


def complement(angle: float) -> float:
    """Same direction reached by turning the other way around the unit circle.

    ``complement(pi/2) == -3*pi/2``; zero maps to a full turn.
    """
    if angle > TWO_PI or angle < -TWO_PI:
        angle = math.fmod(angle, TWO_PI)
    if angle < 0:
        return TWO_PI + angle
    if angle > 0:
        return -TWO_PI + angle
    return TWO_PI
