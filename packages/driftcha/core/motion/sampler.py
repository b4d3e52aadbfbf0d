"""Animation sampler contract.

An external driver (frame loop, test, CLI) calls ``sample(elapsed)`` as
often as it likes; the sampler turns elapsed seconds into each group's
normalized time and evaluates every character's path. No frame rate is
assumed. A sampler is an immutable snapshot, so one frame is always
computed from one consistent configuration.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from driftcha.core.paths.models import PathFunction
from driftcha.core.utils.logging import log_performance

# Seconds per cycle at speed 1
BASE_PERIOD_S = 10.0


def speed_to_period(speed: float) -> float:
    """Seconds for one full path cycle at the given speed.

    Raises:
        ValueError: If speed is not positive.
    """
    if speed <= 0:
        raise ValueError(f"speed must be > 0, got {speed}")
    return BASE_PERIOD_S / speed


def group_time(elapsed: float, period: float) -> float:
    """Normalized path time for a group: (elapsed / period) mod 1."""
    return (elapsed / period) % 1.0


def sample(
    paths: Sequence[PathFunction],
    is_solution: Sequence[bool],
    periods: tuple[float, float],
    elapsed: float,
) -> np.ndarray:
    """Evaluate every path at its group's time for the given elapsed seconds.

    Args:
        paths: One path per character.
        is_solution: Group membership per character (same order as paths).
        periods: (solution_period, noise_period) in seconds.
        elapsed: Seconds since the animation started.

    Returns:
        Array of shape (len(paths), 2) holding x, y per character.
    """
    if len(paths) != len(is_solution):
        raise ValueError(
            f"paths and is_solution differ in length: {len(paths)} != {len(is_solution)}"
        )

    t_solution = group_time(elapsed, periods[0])
    t_noise = group_time(elapsed, periods[1])

    positions = np.empty((len(paths), 2), dtype=float)
    for i, (path, solution) in enumerate(zip(paths, is_solution, strict=True)):
        point = path(t_solution if solution else t_noise)
        positions[i, 0] = point.x
        positions[i, 1] = point.y
    return positions


@dataclass(frozen=True)
class AnimationSampler:
    """Immutable sampling snapshot for one challenge."""

    paths: tuple[PathFunction, ...]
    is_solution: tuple[bool, ...]
    solution_period: float
    noise_period: float

    @classmethod
    def from_speeds(
        cls,
        paths: Sequence[PathFunction],
        is_solution: Sequence[bool],
        speed: float,
        noise_speed: float,
    ) -> AnimationSampler:
        """Build a sampler from group speeds (cycles per BASE_PERIOD_S)."""
        return cls(
            paths=tuple(paths),
            is_solution=tuple(is_solution),
            solution_period=speed_to_period(speed),
            noise_period=speed_to_period(noise_speed),
        )

    def __len__(self) -> int:
        return len(self.paths)

    def times(self, elapsed: float) -> tuple[float, float]:
        """(solution_t, noise_t) at elapsed seconds."""
        return (
            group_time(elapsed, self.solution_period),
            group_time(elapsed, self.noise_period),
        )

    @log_performance
    def sample(self, elapsed: float) -> np.ndarray:
        """Positions of all characters at elapsed seconds, shape (N, 2)."""
        return sample(
            self.paths, self.is_solution, (self.solution_period, self.noise_period), elapsed
        )

    def initial_positions(self) -> np.ndarray:
        """Positions at t = 0, used to place characters before the first frame."""
        return self.sample(0.0)
