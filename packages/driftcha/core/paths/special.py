"""Special motion modes: random wander, matrix rain and teleportation.

These are not retraces of a fixed closed curve, so each folds phase and
direction into its own formula instead of going through apply_direction
plus a shape. All of them are still pure functions of t with period 1.
"""

from __future__ import annotations

from dataclasses import dataclass
import math

from driftcha.core.layout.engine import CHAR_SIZE
from driftcha.core.layout.models import ContentBox, Point
from driftcha.core.paths.models import Direction
from driftcha.core.paths.phase import apply_direction, wrap_unit
from driftcha.core.utils.math import sine_hash

TWO_PI = 2 * math.pi


@dataclass(frozen=True)
class RandomWanderPath:
    """Pseudo-random wander within [-size, +size] of the center.

    Two phase-shifted sinusoids (3 cycles on x, 2 on y) seeded from the
    character's within-group index, so the same character always retraces
    the same apparent random trajectory.

    With bounds set, points are clamped at least margin inside them.
    """

    size: float
    center_x: float
    center_y: float
    phase: float
    index: int
    direction: Direction = Direction.CLOCKWISE
    bounds: ContentBox | None = None
    margin: float = 0.0

    SEED_SCALE = 1234.5678
    X_CYCLES = 3
    Y_CYCLES = 2

    @property
    def seed(self) -> float:
        """Angle offset derived from the within-group index."""
        return self.index * self.SEED_SCALE

    def __call__(self, t: float) -> Point:
        u = wrap_unit(t + self.phase)
        sign = Direction(self.direction).sign
        amp = self.size
        angle_x = self.seed + sign * u * TWO_PI * self.X_CYCLES
        angle_y = self.seed * 1.3 + sign * u * TWO_PI * self.Y_CYCLES
        x = self.center_x + (math.sin(angle_x) * 0.5 + 0.5) * amp * 2 - amp
        y = self.center_y + (math.cos(angle_y) * 0.5 + 0.5) * amp * 2 - amp
        if self.bounds is None:
            return Point(x=x, y=y)
        return self.bounds.fit(x, y, self.margin, self.margin)


@dataclass(frozen=True)
class MatrixRainPath:
    """Vertical scroll that wraps within the box's usable height.

    x stays at the base x. Scroll speed varies with index mod 7 so
    characters do not fall in lockstep; counter direction scrolls upward.
    """

    center_x: float
    center_y: float
    box: ContentBox
    phase: float
    index: int
    direction: Direction = Direction.CLOCKWISE

    @property
    def speed(self) -> float:
        """Fraction of the box height travelled per period."""
        return 0.3 + (self.index % 7) * 0.1

    def __call__(self, t: float) -> Point:
        height = self.box.height
        if height <= 0:
            return Point(x=self.center_x, y=self.box.padding)

        u = wrap_unit(t + self.phase)
        offset = Direction(self.direction).sign * u * self.speed * height
        y = self.box.padding + ((self.center_y - self.box.padding + offset) % height)
        return Point(x=self.center_x, y=y)


@dataclass(frozen=True)
class TeleportPath:
    """Discrete jumps between pseudo-random points in the box.

    The period is split into JUMPS intervals; within each interval the
    position is held at a point derived from a sine hash of index, step
    and phase. Motion is intentionally discontinuous.
    """

    box: ContentBox
    phase: float
    index: int
    direction: Direction = Direction.CLOCKWISE
    char_size: float = CHAR_SIZE

    JUMPS = 8

    def step_at(self, t: float) -> int:
        """Jump interval active at time t."""
        effective = apply_direction(t, self.phase, self.direction)
        return math.floor(effective * self.JUMPS) % self.JUMPS

    def __call__(self, t: float) -> Point:
        margin = self.char_size / 2
        min_x = self.box.padding + margin
        max_x = self.box.padding + self.box.width - margin
        min_y = self.box.padding + margin
        max_y = self.box.padding + self.box.height - margin

        step = self.step_at(t)
        seed_x = self.index * 7.3 + step * 11.7 + self.phase * 100
        seed_y = self.index * 13.1 + step * 17.9 + self.phase * 100 + 1
        return Point(
            x=min_x + sine_hash(seed_x) * max(0.0, max_x - min_x),
            y=min_y + sine_hash(seed_y) * max(0.0, max_y - min_y),
        )

