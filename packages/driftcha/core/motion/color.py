"""Colour-cycling helpers for renderers.

Pure numbers only; applying them (CSS filters, terminal colours, ...) is
the renderer's business.
"""

from __future__ import annotations

import random

from driftcha.core.utils.rng import resolve_rng

# Seconds per hue cycle at speed 1
BASE_COLOR_PERIOD_S = 3.0


def vividness_to_saturate(value: float) -> float:
    """Map the vividness dial to a saturation factor.

    Linear: 1 gives 0.2, 10 gives 2.0. Values outside 1..10 extrapolate;
    ChallengeConfig already bounds the dial.
    """
    return 0.2 + ((value - 1) / 9) * 1.8


def color_cycle_period(speed: float) -> float | None:
    """Seconds per full hue rotation, or None when cycling is disabled."""
    if speed <= 0:
        return None
    return BASE_COLOR_PERIOD_S / speed


def hue_at(elapsed: float, speed: float, phase_deg: float) -> float | None:
    """Hue rotation in degrees [0, 360) at elapsed seconds.

    Returns None when colour cycling is disabled (speed <= 0).
    """
    period = color_cycle_period(speed)
    if period is None:
        return None
    return ((elapsed / period) * 360.0 + phase_deg) % 360.0


def random_color_phases(count: int, rng: random.Random | None = None) -> tuple[float, ...]:
    """A random starting hue (degrees) per character."""
    rng = resolve_rng(rng)
    return tuple(rng.random() * 360.0 for _ in range(count))
