"""Closed-form shape paths.

Each shape is a small immutable record of its parameters with a pure
``__call__(t) -> Point``. Time is wrapped into [0, 1) first, so every shape
is periodic with period 1. Phase and direction are applied by the caller
(see ``driftcha.core.paths.library``).

A size of 0 collapses a shape to its center point.
"""

from __future__ import annotations

from dataclasses import dataclass
import math

from driftcha.core.layout.models import Point
from driftcha.core.paths.phase import wrap_unit
from driftcha.core.utils.math import distance, lerp

TWO_PI = 2 * math.pi


def _lerp_point(x0: float, y0: float, x1: float, y1: float, t: float) -> Point:
    return Point(x=lerp(x0, x1, t), y=lerp(y0, y1, t))


@dataclass(frozen=True)
class CirclePath:
    """Circle of radius size/2 around the center."""

    size: float
    center_x: float
    center_y: float

    def __call__(self, t: float) -> Point:
        angle = wrap_unit(t) * TWO_PI
        radius = self.size / 2
        return Point(
            x=self.center_x + radius * math.cos(angle),
            y=self.center_y + radius * math.sin(angle),
        )


@dataclass(frozen=True)
class SquarePath:
    """Perimeter walk of a square with half-width size/2.

    Starts at the top-left corner and walks the top edge left to right,
    then the right edge down, bottom edge right to left, left edge up.
    """

    size: float
    center_x: float
    center_y: float

    def __call__(self, t: float) -> Point:
        half = self.size / 2
        edge = self.size
        d = wrap_unit(t) * 4 * edge
        left, right = self.center_x - half, self.center_x + half
        top, bottom = self.center_y - half, self.center_y + half

        if d < edge:
            return Point(x=left + d, y=top)
        d -= edge
        if d < edge:
            return Point(x=right, y=top + d)
        d -= edge
        if d < edge:
            return Point(x=right - d, y=bottom)
        d -= edge
        return Point(x=left, y=bottom - d)


@dataclass(frozen=True)
class TrianglePath:
    """Perimeter walk of an apex-up triangle with base size.

    The triangle's centroid sits at the center. The walk goes
    top -> left -> right -> top, with time shared in proportion to the
    actual segment lengths. On a y-down screen this walk is visually
    counter-clockwise.
    """

    size: float
    center_x: float
    center_y: float

    @property
    def vertices(self) -> tuple[tuple[float, float], tuple[float, float], tuple[float, float]]:
        """Top, left and right vertices."""
        h = self.size * math.sqrt(3) / 2
        top = (self.center_x, self.center_y - h * 2 / 3)
        left = (self.center_x - self.size / 2, self.center_y + h / 3)
        right = (self.center_x + self.size / 2, self.center_y + h / 3)
        return top, left, right

    def __call__(self, t: float) -> Point:
        top, left, right = self.vertices
        seg1 = distance(*top, *left)
        seg2 = distance(*left, *right)
        seg3 = distance(*right, *top)
        total = seg1 + seg2 + seg3
        if total <= 0:
            return Point(x=self.center_x, y=self.center_y)

        d = wrap_unit(t) * total
        if d < seg1:
            return _lerp_point(*top, *left, d / seg1)
        d -= seg1
        if d < seg2:
            return _lerp_point(*left, *right, d / seg2)
        d -= seg2
        return _lerp_point(*right, *top, d / seg3)


@dataclass(frozen=True)
class ZPath:
    """Three strokes of a "Z" in a size x size box, equal time per stroke."""

    size: float
    center_x: float
    center_y: float

    def __call__(self, t: float) -> Point:
        half = self.size / 2
        left, right = self.center_x - half, self.center_x + half
        top, bottom = self.center_y - half, self.center_y + half
        s = wrap_unit(t) * 3

        if s < 1:
            return _lerp_point(left, top, right, top, s)
        if s < 2:
            return _lerp_point(right, top, left, bottom, s - 1)
        return _lerp_point(left, bottom, right, bottom, s - 2)


@dataclass(frozen=True)
class Figure8Path:
    """Lissajous 1:2 figure-eight."""

    size: float
    center_x: float
    center_y: float

    def __call__(self, t: float) -> Point:
        angle = wrap_unit(t) * TWO_PI
        half = self.size / 2
        return Point(
            x=self.center_x + half * math.sin(angle),
            y=self.center_y + half * math.sin(2 * angle),
        )


@dataclass(frozen=True)
class InfinityPath:
    """Lemniscate of Bernoulli (a flatter, pinched figure-eight)."""

    size: float
    center_x: float
    center_y: float

    def __call__(self, t: float) -> Point:
        angle = wrap_unit(t) * TWO_PI
        half = self.size / 2
        sin_a = math.sin(angle)
        cos_a = math.cos(angle)
        denom = 1 + sin_a**2
        return Point(
            x=self.center_x + half * (cos_a / denom),
            y=self.center_y + half * (sin_a * cos_a / denom),
        )


@dataclass(frozen=True)
class VibratePath:
    """Jittery wobble: 3 cycles on x and 4 on y per period."""

    size: float
    center_x: float
    center_y: float

    X_CYCLES = 3
    Y_CYCLES = 4

    def __call__(self, t: float) -> Point:
        u = wrap_unit(t)
        half = self.size / 2
        return Point(
            x=self.center_x + half * math.sin(u * TWO_PI * self.X_CYCLES),
            y=self.center_y + half * math.sin(u * TWO_PI * self.Y_CYCLES),
        )


ClosedShape = (
    CirclePath | SquarePath | TrianglePath | ZPath | Figure8Path | InfinityPath | VibratePath
)
