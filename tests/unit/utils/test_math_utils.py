"""Tests for math utilities."""

from __future__ import annotations

import pytest

from driftcha.core.utils.math import clamp, distance, fract, lerp, sine_hash


class TestClamp:
    """Test suite for clamp function."""

    def test_value_within_range(self):
        """Test clamping value within range."""
        assert clamp(5, 0, 10) == 5

    def test_value_below_min(self):
        """Test clamping value below minimum."""
        assert clamp(-5, 0, 10) == 0

    def test_value_above_max(self):
        """Test clamping value above maximum."""
        assert clamp(15, 0, 10) == 10

    def test_float_values(self):
        """Test clamping with float values."""
        assert clamp(0.5, 0.0, 1.0) == pytest.approx(0.5)
        assert clamp(1.5, 0.0, 1.0) == pytest.approx(1.0)


class TestLerp:
    """Test suite for lerp function."""

    def test_endpoints(self):
        assert lerp(0, 100, 0.0) == pytest.approx(0)
        assert lerp(0, 100, 1.0) == pytest.approx(100)

    def test_midpoint(self):
        assert lerp(-10, 10, 0.5) == pytest.approx(0)


class TestDistance:
    """Test suite for distance function."""

    def test_pythagorean(self):
        assert distance(0, 0, 3, 4) == pytest.approx(5)

    def test_same_point(self):
        assert distance(2, 2, 2, 2) == 0


class TestHashing:
    """Test suite for fract and sine_hash."""

    def test_fract(self):
        assert fract(2.75) == pytest.approx(0.75)
        assert fract(-0.25) == pytest.approx(0.75)

    def test_sine_hash_in_unit_interval(self):
        for seed in range(-50, 50):
            assert 0 <= sine_hash(seed * 1.7) < 1

    def test_sine_hash_deterministic(self):
        assert sine_hash(12.3) == sine_hash(12.3)
        assert sine_hash(1.0) != sine_hash(2.0)
