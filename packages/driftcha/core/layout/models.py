"""Layout value models.

All coordinates are relative to the outer origin of the drawing area,
so a point inside the usable region has x in [padding, padding + width].
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from driftcha.core.utils.math import clamp


class Point(BaseModel):
    """A 2D point in drawing coordinates.

    Example:
        >>> Point(x=10.0, y=4.5).x
        10.0
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    x: float
    y: float


def _fit_axis(value: float, start: float, extent: float, half: float) -> float:
    lo = start + half
    hi = start + extent - half
    if hi < lo:
        return start + extent / 2
    return clamp(value, lo, hi)


class ContentBox(BaseModel):
    """Usable drawing rectangle: measured size minus padding on each side.

    Width and height may be zero or negative before the container has been
    measured; consumers clamp when generating positions.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    width: float = Field(..., description="Usable width (measured width - 2 * padding)")
    height: float = Field(..., description="Usable height (measured height - 2 * padding)")
    padding: float = Field(default=0.0, ge=0.0, description="Padding on every side")

    @property
    def min_extent(self) -> float:
        """Smaller of width and height."""
        return min(self.width, self.height)

    def fit(self, x: float, y: float, half_width: float = 0.0, half_height: float = 0.0) -> Point:
        """Nearest point to (x, y) where a half_width x half_height rectangle fits.

        Clamping is per axis. An axis too small for the rectangle collapses
        to the box midpoint on that axis.

        Example:
            >>> ContentBox(width=100, height=50, padding=10).fit(5, 30, 20, 30)
            Point(x=30.0, y=35.0)
        """
        return Point(
            x=_fit_axis(x, self.padding, self.width, half_width),
            y=_fit_axis(y, self.padding, self.height, half_height),
        )


class Placement(BaseModel):
    """A character's starting position plus its group membership.

    Attributes:
        char: The displayed character.
        x: Starting x coordinate.
        y: Starting y coordinate.
        is_solution: True for solution characters, False for noise.
        index: Sequential index within its group (solution or noise), 0-based.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    char: str = Field(..., min_length=1, max_length=1)
    x: float
    y: float
    is_solution: bool
    index: int = Field(..., ge=0)
