"""Pure math utilities - no external dependencies."""

from __future__ import annotations
import math


def clamp(v: float, a: float, b: float) -> float:
    """Clamp value v to range [a, b]."""
    return a if v < a else b if v > b else v


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation from a to b by factor t (clamped to [0, 1])."""
    t = clamp(t, 0.0, 1.0)
    return a + (b - a) * t


def ease_in_out_sine(t: float) -> float:
    """Sine ease-in-out: starts and ends slowly, fastest in the middle."""
    if t <= 0.0:
        return 0.0
    if t >= 1.0:
        return 1.0
    return math.cos((t + 1.0) * math.pi) / 2.0 + 0.5


def is_positive_finite(v: float) -> bool:
    """True for finite numbers strictly greater than zero."""
    return math.isfinite(v) and v > 0.0
