"""2D vector algebra over Point.

All functions are pure and total. unit() of a zero-length vector returns the
zero vector instead of failing; downstream code treats that as "no defined
direction".
"""

import math

from ttf2dxf.domain import Point


def add(a: Point, b: Point) -> Point:
    """Component-wise sum of two points."""
    return Point(a.x + b.x, a.y + b.y)


def add3(a: Point, b: Point, c: Point) -> Point:
    """Component-wise sum of three points."""
    return Point(a.x + b.x + c.x, a.y + b.y + c.y)


def add4(a: Point, b: Point, c: Point, d: Point) -> Point:
    """Component-wise sum of four points."""
    return Point(a.x + b.x + c.x + d.x, a.y + b.y + c.y + d.y)


def sub(a: Point, b: Point) -> Point:
    """Component-wise difference a - b."""
    return Point(a.x - b.x, a.y - b.y)


def scale(a: Point, factor: float) -> Point:
    """Multiply both components by a scalar."""
    return Point(a.x * factor, a.y * factor)


def dot(a: Point, b: Point) -> float:
    """Dot product."""
    return a.x * b.x + a.y * b.y


def mag(a: Point) -> float:
    """Euclidean length."""
    return math.sqrt(dot(a, a))


def unit(a: Point) -> Point:
    """Normalize to unit length.

    Args:
        a: Vector to normalize

    Returns:
        Unit vector in the direction of a, or (0, 0) if a has zero length

    Examples:
        >>> unit(Point(3.0, 4.0))
        Point(x=0.6, y=0.8)
        >>> unit(Point(0.0, 0.0))
        Point(x=0.0, y=0.0)
    """
    m = mag(a)
    if m:
        return Point(a.x / m, a.y / m)
    return Point(0.0, 0.0)


def cross(a: Point, b: Point) -> float:
    """Z component of the 3D cross product (zero for parallel vectors)."""
    return a.x * b.y - a.y * b.x
