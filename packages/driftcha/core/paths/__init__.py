"""Parametric motion paths."""

from driftcha.core.paths.library import (
    DirectedPath,
    available_shapes,
    build_path,
    half_extent,
)
from driftcha.core.paths.models import (
    Direction,
    PathFunction,
    PathShape,
    SolutionStyle,
    parse_shape,
)
from driftcha.core.paths.phase import apply_direction, wrap_unit

__all__ = [
    "DirectedPath",
    "Direction",
    "PathFunction",
    "PathShape",
    "SolutionStyle",
    "apply_direction",
    "available_shapes",
    "build_path",
    "half_extent",
    "parse_shape",
    "wrap_unit",
]
