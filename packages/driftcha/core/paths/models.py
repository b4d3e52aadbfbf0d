"""Path identifiers and the path-function contract."""

from __future__ import annotations

from enum import Enum
from typing import Protocol, runtime_checkable

from driftcha.core.errors import UnknownPathShapeError
from driftcha.core.layout.models import Point


class PathShape(str, Enum):
    """Identifiers for the built-in motion paths."""

    # Closed shapes (retraced forward or backward)
    CIRCLE = "circle"
    SQUARE = "square"
    TRIANGLE = "triangle"
    Z = "z"
    FIGURE_8 = "8"  # Lissajous 1:2
    INFINITY = "infinity"  # Lemniscate of Bernoulli
    VIBRATE = "vibrate"  # High-frequency wobble

    # Special modes (fold phase/direction into their own formulas)
    RANDOM = "random"
    MATRIX = "matrix"
    TELEPORTATION = "teleportation"

    @property
    def is_special(self) -> bool:
        """True for modes that are not a retrace of a fixed closed curve."""
        return self in SPECIAL_MODES


SPECIAL_MODES = frozenset({PathShape.RANDOM, PathShape.MATRIX, PathShape.TELEPORTATION})


class Direction(str, Enum):
    """Traversal direction as seen by a viewer."""

    CLOCKWISE = "clockwise"
    COUNTER = "counter"

    @property
    def sign(self) -> int:
        """+1 for clockwise, -1 for counter."""
        return -1 if self is Direction.COUNTER else 1

    def inverted(self) -> Direction:
        """The opposite direction."""
        return Direction.CLOCKWISE if self is Direction.COUNTER else Direction.COUNTER


class SolutionStyle(str, Enum):
    """How solution characters share motion.

    GLOBAL: all solution characters ride one large shared path, evenly spaced.
    SEPARATE: each solution character has its own small path.
    """

    GLOBAL = "global"
    SEPARATE = "separate"


@runtime_checkable
class PathFunction(Protocol):
    """Pure mapping from normalized time to a point, periodic with period 1."""

    def __call__(self, t: float) -> Point: ...


def parse_shape(tag: str | PathShape) -> PathShape:
    """Parse a shape tag into a PathShape.

    Args:
        tag: Shape tag such as "circle" or "8", or a PathShape.

    Returns:
        The matching PathShape.

    Raises:
        UnknownPathShapeError: If the tag is not a known shape.
    """
    if isinstance(tag, PathShape):
        return tag
    try:
        return PathShape(tag)
    except ValueError as exc:
        raise UnknownPathShapeError(str(tag)) from exc
