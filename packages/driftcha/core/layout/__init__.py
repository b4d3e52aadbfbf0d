"""Layout models and placement engine."""

from driftcha.core.layout.engine import (
    CHAR_SIZE,
    DEFAULT_PADDING,
    compute_content_box,
    compute_placements,
    random_position_in_box,
)
from driftcha.core.layout.models import ContentBox, Placement, Point

__all__ = [
    "CHAR_SIZE",
    "DEFAULT_PADDING",
    "ContentBox",
    "Placement",
    "Point",
    "compute_content_box",
    "compute_placements",
    "random_position_in_box",
]
