"""Unit tests for vector algebra and Bezier evaluation."""

import math

import pytest

from ttf2dxf.core._bezier import (
    cubic_point,
    cubic_tangent,
    quadratic_point,
    quadratic_tangent,
)
from ttf2dxf.core.vector import add, add3, add4, cross, dot, mag, scale, sub, unit
from ttf2dxf.domain import Point


class TestVectorAlgebra:
    """Tests for the component-wise operations."""

    def test_add(self):
        assert add(Point(1, 2), Point(3, 4)) == Point(4, 6)

    def test_add3_add4(self):
        assert add3(Point(1, 0), Point(0, 1), Point(1, 1)) == Point(2, 2)
        assert add4(Point(1, 0), Point(0, 1), Point(1, 1), Point(-2, -2)) == Point(0, 0)

    def test_sub(self):
        assert sub(Point(5, 5), Point(2, 7)) == Point(3, -2)

    def test_scale(self):
        assert scale(Point(1.5, -2), 2) == Point(3, -4)

    def test_dot(self):
        assert dot(Point(1, 2), Point(3, 4)) == 11
        assert dot(Point(1, 0), Point(0, 1)) == 0

    def test_mag(self):
        assert mag(Point(3, 4)) == 5

    def test_cross(self):
        """Test the z component of the cross product."""
        assert cross(Point(1, 0), Point(0, 1)) == 1
        assert cross(Point(2, 2), Point(4, 4)) == 0


class TestUnit:
    """Tests for normalization."""

    def test_unit_length(self):
        u = unit(Point(3, 4))
        assert u.x == pytest.approx(0.6)
        assert u.y == pytest.approx(0.8)
        assert mag(u) == pytest.approx(1.0)

    def test_unit_of_zero_vector(self):
        """Test that a zero vector normalizes to zero instead of failing."""
        assert unit(Point(0, 0)) == Point(0, 0)

    def test_unit_of_tiny_vector(self):
        u = unit(Point(1e-12, 0))
        assert u.x == pytest.approx(1.0)


class TestBezier:
    """Tests for curve point and tangent evaluation."""

    p0 = Point(0, 0)
    control = Point(50, 50)
    p1 = Point(100, 0)

    def test_quadratic_end_points(self):
        assert quadratic_point(self.p0, self.control, self.p1, 0.0) == self.p0
        assert quadratic_point(self.p0, self.control, self.p1, 1.0) == self.p1

    def test_quadratic_midpoint(self):
        assert quadratic_point(self.p0, self.control, self.p1, 0.5) == Point(50, 25)

    def test_quadratic_tangent(self):
        assert quadratic_tangent(self.p0, self.control, self.p1, 0.0) == Point(50, 50)
        assert quadratic_tangent(self.p0, self.control, self.p1, 0.5) == Point(50, 0)
        assert quadratic_tangent(self.p0, self.control, self.p1, 1.0) == Point(50, -50)

    def test_cubic_end_points(self):
        c1, c2, p1 = Point(0, 100), Point(100, 100), Point(100, 0)
        assert cubic_point(self.p0, c1, c2, p1, 0.0) == self.p0
        assert cubic_point(self.p0, c1, c2, p1, 1.0) == p1

    def test_cubic_midpoint(self):
        c1, c2, p1 = Point(0, 100), Point(100, 100), Point(100, 0)
        assert cubic_point(self.p0, c1, c2, p1, 0.5) == Point(50, 75)

    def test_cubic_tangent_follows_control_legs(self):
        c1, c2, p1 = Point(0, 100), Point(100, 100), Point(100, 0)
        assert cubic_tangent(self.p0, c1, c2, p1, 0.0) == Point(0, 100)
        assert cubic_tangent(self.p0, c1, c2, p1, 1.0) == Point(0, -100)
        mid = cubic_tangent(self.p0, c1, c2, p1, 0.5)
        assert mid.y == pytest.approx(0.0)
        assert mid.x > 0

    def test_cubic_tangent_is_parallel_to_derivative(self):
        """Test the tangent direction against a finite difference."""
        c1, c2, p1 = Point(10, 80), Point(90, 120), Point(100, 0)
        t, h = 0.3, 1e-6
        a = cubic_point(self.p0, c1, c2, p1, t - h)
        b = cubic_point(self.p0, c1, c2, p1, t + h)
        tangent = cubic_tangent(self.p0, c1, c2, p1, t)
        assert math.isclose(cross(tangent, sub(b, a)), 0.0, abs_tol=1e-6)
