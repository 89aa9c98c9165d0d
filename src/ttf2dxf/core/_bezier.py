"""Internal Bezier curve evaluation.

This is an internal module containing the point and tangent polynomials used
by the curve flattener. Not intended for public use.

Tangents are the Bezier derivative without its constant degree factor; only
their direction matters because the biarc solver normalizes them.
"""

from ttf2dxf.core.vector import add, add3, add4, scale, sub
from ttf2dxf.domain import Point


def quadratic_point(p0: Point, control: Point, p1: Point, t: float) -> Point:
    """Evaluate B(t) = (1-t)^2 P0 + 2t(1-t) C + t^2 P1.

    Args:
        p0: Start point
        control: Off-curve control point
        p1: End point
        t: Curve parameter in [0, 1]

    Returns:
        Point on the curve
    """
    t1 = 1 - t
    return add3(scale(p0, t1 * t1), scale(control, 2 * t * t1), scale(p1, t * t))


def quadratic_tangent(p0: Point, control: Point, p1: Point, t: float) -> Point:
    """Evaluate the direction (1-t)(C-P0) + t(P1-C)."""
    return add(scale(sub(control, p0), 1 - t), scale(sub(p1, control), t))


def cubic_point(p0: Point, c1: Point, c2: Point, p1: Point, t: float) -> Point:
    """Evaluate B(t) = (1-t)^3 P0 + 3t(1-t)^2 C1 + 3t^2(1-t) C2 + t^3 P1.

    Args:
        p0: Start point
        c1: First control point
        c2: Second control point
        p1: End point
        t: Curve parameter in [0, 1]

    Returns:
        Point on the curve
    """
    t1 = 1 - t
    return add4(
        scale(p0, t1 * t1 * t1),
        scale(c1, 3 * t * t1 * t1),
        scale(c2, 3 * t * t * t1),
        scale(p1, t * t * t),
    )


def cubic_tangent(p0: Point, c1: Point, c2: Point, p1: Point, t: float) -> Point:
    """Evaluate the direction (1-t)^2(C1-P0) + 2t(1-t)(C2-C1) + t^2(P1-C2)."""
    t1 = 1 - t
    return add3(
        scale(sub(c1, p0), t1 * t1),
        scale(sub(c2, c1), 2 * t * t1),
        scale(sub(p1, c2), t * t),
    )
