"""Path library: builds a PathFunction for any PathShape.

Closed shapes are wrapped in a DirectedPath that applies phase and
direction before evaluating the shape; special modes handle both
themselves. Dispatch is exhaustive over PathShape and unknown tags are
rejected rather than silently falling back to a circle.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
import logging
import math

from driftcha.core.layout.engine import CHAR_SIZE
from driftcha.core.layout.models import ContentBox, Point
from driftcha.core.paths.models import Direction, PathFunction, PathShape, parse_shape
from driftcha.core.paths.phase import apply_direction
from driftcha.core.paths.shapes import (
    CirclePath,
    ClosedShape,
    Figure8Path,
    InfinityPath,
    SquarePath,
    TrianglePath,
    VibratePath,
    ZPath,
)
from driftcha.core.paths.special import MatrixRainPath, RandomWanderPath, TeleportPath

logger = logging.getLogger(__name__)

CLOSED_SHAPES: dict[PathShape, Callable[[float, float, float], ClosedShape]] = {
    PathShape.CIRCLE: CirclePath,
    PathShape.SQUARE: SquarePath,
    PathShape.TRIANGLE: TrianglePath,
    PathShape.Z: ZPath,
    PathShape.FIGURE_8: Figure8Path,
    PathShape.INFINITY: InfinityPath,
    PathShape.VIBRATE: VibratePath,
}

# Largest |dx| and |dy| from the center, as multiples of size
HALF_EXTENT_RATIOS: dict[PathShape, tuple[float, float]] = {
    PathShape.CIRCLE: (0.5, 0.5),
    PathShape.SQUARE: (0.5, 0.5),
    PathShape.TRIANGLE: (0.5, 1 / math.sqrt(3)),
    PathShape.Z: (0.5, 0.5),
    PathShape.FIGURE_8: (0.5, 0.5),
    PathShape.INFINITY: (0.5, math.sqrt(2) / 8),
    PathShape.VIBRATE: (0.5, 0.5),
    PathShape.RANDOM: (1.0, 1.0),
    PathShape.MATRIX: (0.0, 0.0),
    PathShape.TELEPORTATION: (0.0, 0.0),
}

# Shapes whose natural traversal runs against the direction label on a y-down screen
_INVERTED_DIRECTION_SHAPES = frozenset({PathShape.TRIANGLE})


@dataclass(frozen=True)
class DirectedPath:
    """A closed shape driven through a phase offset and a direction.

    With bounds set, every point is clamped at least margin inside them.
    """

    shape: ClosedShape
    phase: float
    direction: Direction
    bounds: ContentBox | None = None
    margin: float = 0.0

    def __call__(self, t: float) -> Point:
        point = self.shape(apply_direction(t, self.phase, self.direction))
        if self.bounds is None:
            return point
        return self.bounds.fit(point.x, point.y, self.margin, self.margin)


def half_extent(shape: PathShape | str, size: float) -> tuple[float, float]:
    """How far a path of this shape and size reaches from its center on x and y.

    Matrix rain and teleportation take their bounds from the box itself and
    report (0, 0).
    """
    rx, ry = HALF_EXTENT_RATIOS[parse_shape(shape)]
    return rx * size, ry * size


def effective_direction(shape: PathShape, direction: Direction | str) -> Direction:
    """Direction to drive a shape with so it reads as the labelled direction."""
    direction = Direction(direction)
    if shape in _INVERTED_DIRECTION_SHAPES:
        return direction.inverted()
    return direction


def build_path(
    shape: PathShape | str,
    *,
    center_x: float,
    center_y: float,
    size: float,
    box: ContentBox,
    phase: float = 0.0,
    index: int = 0,
    direction: Direction | str = Direction.CLOCKWISE,
    char_size: float = CHAR_SIZE,
    bounds: ContentBox | None = None,
) -> PathFunction:
    """Build the path function for one character.

    Args:
        shape: Shape or special-mode tag.
        center_x: Path center x (base x for matrix rain).
        center_y: Path center y (base y for matrix rain).
        size: Path extent in drawing units.
        box: Content box, used by modes that need absolute bounds.
        phase: Phase offset in normalized time.
        index: Within-group index, seeds the special modes.
        direction: Traversal direction.
        char_size: Glyph size, keeps half a glyph between paths and the box edge.
        bounds: When given, the center is moved so the whole shape plus half
            a glyph fits inside, and shapes larger than the box are clamped
            point by point.

    Returns:
        Pure function of t, periodic with period 1.

    Raises:
        UnknownPathShapeError: If shape is not a known tag.
    """
    shape = parse_shape(shape)
    direction = Direction(direction)
    margin = char_size / 2

    if bounds is not None:
        extent_x, extent_y = half_extent(shape, size)
        fitted = bounds.fit(center_x, center_y, extent_x + margin, extent_y + margin)
        if (fitted.x, fitted.y) != (center_x, center_y):
            logger.debug(
                f"Moved {shape.value} center ({center_x:.1f}, {center_y:.1f}) -> "
                f"({fitted.x:.1f}, {fitted.y:.1f}) to fit the box"
            )
        center_x, center_y = fitted.x, fitted.y

    if shape is PathShape.RANDOM:
        return RandomWanderPath(
            size=size,
            center_x=center_x,
            center_y=center_y,
            phase=phase,
            index=index,
            direction=direction,
            bounds=bounds,
            margin=margin,
        )
    if shape is PathShape.MATRIX:
        return MatrixRainPath(
            center_x=center_x,
            center_y=center_y,
            box=box,
            phase=phase,
            index=index,
            direction=direction,
        )
    if shape is PathShape.TELEPORTATION:
        return TeleportPath(
            box=box,
            phase=phase,
            index=index,
            direction=direction,
            char_size=char_size,
        )

    factory = CLOSED_SHAPES[shape]
    return DirectedPath(
        shape=factory(size, center_x, center_y),
        phase=phase,
        direction=effective_direction(shape, direction),
        bounds=bounds,
        margin=margin,
    )


def available_shapes() -> list[PathShape]:
    """All shapes build_path accepts, closed shapes first."""
    return [*CLOSED_SHAPES, *(s for s in PathShape if s.is_special)]
