from __future__ import annotations

from numbers import Real


def guard(v: float, lo: float, hi: float) -> float:
    """Clamp v to [lo, hi]."""
    return lo if v < lo else hi if v > hi else v


def as_float(v) -> float:
    """Coerce a real scalar to float; rejects bools, complex and strings."""
    if isinstance(v, bool) or not isinstance(v, Real):
        raise TypeError(f"expected a real number, got {type(v).__name__}")
    return float(v)
