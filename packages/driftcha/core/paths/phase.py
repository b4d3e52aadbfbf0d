"""Phase and direction transforms for normalized path time.

Path time is cyclic: any real t is projected into [0, 1) before a shape
is evaluated, so every path is periodic with period 1.
"""

from __future__ import annotations

from driftcha.core.paths.models import Direction


def wrap_unit(t: float) -> float:
    """Project t into [0, 1) using modulo (negative values wrap upward).

    Example:
        >>> wrap_unit(1.25)
        0.25
        >>> wrap_unit(-0.25)
        0.75
    """
    return t % 1.0


def apply_direction(t: float, phase: float, direction: Direction | str) -> float:
    """Shift t by phase, wrap into [0, 1) and reverse for counter motion.

    Args:
        t: Normalized time (any real value).
        phase: Phase offset in normalized time.
        direction: Traversal direction.

    Returns:
        Effective time. In [0, 1) for clockwise, in (0, 1] for counter.

    Example:
        >>> apply_direction(0.25, 0.0, "clockwise")
        0.25
        >>> apply_direction(0.25, 0.0, "counter")
        0.75
    """
    effective = wrap_unit(t + phase)
    if Direction(direction) is Direction.COUNTER:
        return 1.0 - effective
    return effective


def spread_phase(index: int, total: int) -> float:
    """Evenly spread phase for member index of a group of total members.

    A group of one (or an empty group) has phase 0.
    """
    if total <= 1:
        return 0.0
    return (index / total) % 1.0


def stepped_phase(index: int, step: float) -> float:
    """Deterministic pseudo-desynchronizing phase: (index * step) mod 1."""
    return (index * step) % 1.0
