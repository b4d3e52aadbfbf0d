"""Tests for closed-form shape paths."""

from __future__ import annotations

import math

import pytest

from driftcha.core.paths.shapes import (
    CirclePath,
    Figure8Path,
    InfinityPath,
    SquarePath,
    TrianglePath,
    VibratePath,
    ZPath,
)

ALL_SHAPES = [CirclePath, SquarePath, TrianglePath, ZPath, Figure8Path, InfinityPath, VibratePath]


def _xy(point) -> tuple[float, float]:
    return point.x, point.y


class TestCirclePath:
    """Tests for CirclePath."""

    def test_starts_at_right(self) -> None:
        """t=0 is at angle 0 (to the right of the center)."""
        assert _xy(CirclePath(20, 100, 100)(0.0)) == pytest.approx((110, 100))

    def test_quarter_turn(self) -> None:
        """t=0.25 is a quarter turn (down on a y-down screen)."""
        assert _xy(CirclePath(20, 100, 100)(0.25)) == pytest.approx((100, 110))

    def test_constant_radius(self) -> None:
        """Every point is size/2 from the center."""
        path = CirclePath(30, 0, 0)
        for i in range(16):
            p = path(i / 16)
            assert math.hypot(p.x, p.y) == pytest.approx(15)


class TestSquarePath:
    """Tests for SquarePath."""

    def test_starts_top_left(self) -> None:
        """Walk starts at the top-left corner."""
        assert _xy(SquarePath(20, 100, 100)(0.0)) == pytest.approx((90, 90))

    def test_top_edge_left_to_right(self) -> None:
        """First quarter walks the top edge left to right."""
        assert _xy(SquarePath(20, 100, 100)(0.125)) == pytest.approx((100, 90))

    def test_corners(self) -> None:
        """Corners at each quarter."""
        path = SquarePath(20, 100, 100)
        assert _xy(path(0.25)) == pytest.approx((110, 90))
        assert _xy(path(0.5)) == pytest.approx((110, 110))
        assert _xy(path(0.75)) == pytest.approx((90, 110))

    def test_left_edge_upward(self) -> None:
        """Last quarter walks the left edge up."""
        assert _xy(SquarePath(20, 100, 100)(0.875)) == pytest.approx((90, 100))


class TestTrianglePath:
    """Tests for TrianglePath."""

    def test_centroid_at_center(self) -> None:
        """Vertices average to the center."""
        path = TrianglePath(20, 50, 60)
        xs, ys = zip(*path.vertices, strict=True)
        assert sum(xs) / 3 == pytest.approx(50)
        assert sum(ys) / 3 == pytest.approx(60)

    def test_starts_at_apex(self) -> None:
        """t=0 is the top vertex."""
        path = TrianglePath(20, 0, 0)
        top = path.vertices[0]
        assert _xy(path(0.0)) == pytest.approx(top)

    def test_first_segment_toward_left(self) -> None:
        """The first sixth reaches the midpoint of the top-left edge."""
        path = TrianglePath(20, 0, 0)
        top, left, _ = path.vertices
        mid = ((top[0] + left[0]) / 2, (top[1] + left[1]) / 2)
        assert _xy(path(1 / 6)) == pytest.approx(mid)

    def test_zero_size_collapses_to_center(self) -> None:
        """Size 0 returns the center instead of dividing by zero."""
        assert _xy(TrianglePath(0, 5, 7)(0.4)) == pytest.approx((5, 7))


class TestZPath:
    """Tests for ZPath."""

    def test_strokes(self) -> None:
        """Top stroke, diagonal, bottom stroke."""
        path = ZPath(20, 0, 0)
        assert _xy(path(0.0)) == pytest.approx((-10, -10))
        assert _xy(path(1 / 6)) == pytest.approx((0, -10))
        assert _xy(path(0.5)) == pytest.approx((0, 0))
        assert _xy(path(5 / 6)) == pytest.approx((0, 10))


class TestLissajousPaths:
    """Tests for Figure8Path, InfinityPath and VibratePath."""

    def test_figure8_quarter(self) -> None:
        """Quarter cycle is at the right lobe's crossing height."""
        assert _xy(Figure8Path(20, 0, 0)(0.25)) == pytest.approx((10, 0), abs=1e-9)

    def test_infinity_start_and_crossing(self) -> None:
        """Starts at the right tip and crosses the center at a quarter."""
        path = InfinityPath(20, 0, 0)
        assert _xy(path(0.0)) == pytest.approx((10, 0))
        assert _xy(path(0.25)) == pytest.approx((0, 0), abs=1e-9)

    def test_vibrate_starts_at_center(self) -> None:
        """Vibrate is at the center at t=0."""
        assert _xy(VibratePath(20, 3, 4)(0.0)) == pytest.approx((3, 4))

    def test_vibrate_bounded(self) -> None:
        """Vibrate stays within size/2 on each axis."""
        path = VibratePath(20, 0, 0)
        for i in range(50):
            p = path(i / 50)
            assert abs(p.x) <= 10 + 1e-9
            assert abs(p.y) <= 10 + 1e-9


class TestShapeProperties:
    """Properties shared by every closed shape."""

    @pytest.mark.parametrize("shape_cls", ALL_SHAPES)
    @pytest.mark.parametrize("t", [0.0, 0.13, 0.37, 0.61, 0.89])
    def test_periodic(self, shape_cls, t: float) -> None:
        """f(t) == f(t + 1) == f(t - 2)."""
        path = shape_cls(24, 50, 50)
        assert _xy(path(t + 1)) == pytest.approx(_xy(path(t)))
        assert _xy(path(t - 2)) == pytest.approx(_xy(path(t)))

    @pytest.mark.parametrize("shape_cls", ALL_SHAPES)
    def test_zero_size_is_a_point(self, shape_cls) -> None:
        """Size 0 collapses every shape to its center."""
        path = shape_cls(0, 8, 9)
        for t in (0.0, 0.3, 0.8):
            assert _xy(path(t)) == pytest.approx((8, 9))

    @pytest.mark.parametrize("shape_cls", ALL_SHAPES)
    def test_deterministic(self, shape_cls) -> None:
        """Same parameters and t give the same point."""
        assert shape_cls(24, 50, 50)(0.42) == shape_cls(24, 50, 50)(0.42)
