"""Math utilities for common operations."""

from __future__ import annotations

import math
from typing import TypeVar

import numpy as np

Number = TypeVar("Number", int, float, np.number)


def clamp(value: Number, min_val: Number, max_val: Number) -> Number:
    """Clamp value to range [min_val, max_val].

    Args:
        value: Value to clamp
        min_val: Minimum allowed value
        max_val: Maximum allowed value

    Returns:
        Clamped value
    """
    return max(min_val, min(max_val, value))


def lerp(a: Number, b: Number, t: float) -> float:
    """Linear interpolation between a and b.

    Args:
        a: Start value
        b: End value
        t: Interpolation factor [0, 1]

    Returns:
        Interpolated value
    """
    return float(a) + (float(b) - float(a)) * t


def distance(x0: float, y0: float, x1: float, y1: float) -> float:
    """Euclidean distance between (x0, y0) and (x1, y1)."""
    return math.hypot(x1 - x0, y1 - y0)


def fract(x: float) -> float:
    """Fractional part of x, always in [0, 1)."""
    return x - math.floor(x)


def sine_hash(seed: float) -> float:
    """Deterministic pseudo-random value in [0, 1) derived from a seed.

    Same seed always gives the same value; nearby seeds give unrelated values.
    """
    return fract(math.sin(seed) * 10000.0)
