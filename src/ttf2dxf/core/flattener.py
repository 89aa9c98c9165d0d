"""Curve flattening into biarcs.

Each Bezier segment is walked twice:

1. Estimation pass: a fixed number of samples of the exact polynomial. The
   chord lengths add up to an arc length estimate and every sample grows the
   glyph extents, so bounding boxes stay accurate however coarse the arcs are.
2. Adaptive pass: the curve is cut into max(2, length / arc_length_per_pair)
   pieces and each piece is handed to the biarc solver together with the
   curve tangents at both of its ends.
"""

import math
from collections.abc import Callable

from ttf2dxf.core._bezier import (
    cubic_point,
    cubic_tangent,
    quadratic_point,
    quadratic_tangent,
)
from ttf2dxf.core.biarc import biarc
from ttf2dxf.core.context import RenderContext
from ttf2dxf.domain import Point
from ttf2dxf.exceptions import OutlineError

# Ratio between the tangent legs of each biarc
BIARC_RATIO = 1.0

# Minimum number of biarcs per curve
MIN_BIARC_STEPS = 2


def estimate_length(
    ctx: RenderContext, start: Point, point_at: Callable[[float], Point]
) -> float:
    """Sample a curve, summing chord lengths and growing the extents.

    Args:
        ctx: Render context (its extents receive every sample)
        start: Curve start point (t = 0)
        point_at: Curve evaluator for t in [0, 1]

    Returns:
        Approximate arc length
    """
    steps = ctx.flatten.estimation_steps
    previous = start
    length = 0.0

    for i in range(1, steps + 1):
        point = point_at(i / steps)
        length += math.hypot(point.x - previous.x, point.y - previous.y)
        ctx.extents.add_point(point)
        previous = point

    return length


def biarc_steps(length: float, arc_length_per_pair: float) -> int:
    """Number of biarcs for a curve of the given length."""
    return int(max(MIN_BIARC_STEPS, length / arc_length_per_pair))


def _flatten(
    ctx: RenderContext,
    start: Point,
    end: Point,
    point_at: Callable[[float], Point],
    tangent_at: Callable[[float], Point],
) -> None:
    length = estimate_length(ctx, start, point_at)
    steps = biarc_steps(length, ctx.flatten.arc_length_per_pair)

    ps = start
    ts = tangent_at(0.0)
    for i in range(1, steps + 1):
        t = i / steps
        p = point_at(t)
        tangent = tangent_at(t)

        biarc(ctx, ps, ts, p, tangent, BIARC_RATIO)

        ps = p
        ts = tangent

    ctx.current = end


def flatten_quadratic(ctx: RenderContext, control: Point, to: Point) -> None:
    """Flatten a quadratic Bezier from the current point into biarcs.

    Args:
        ctx: Render context holding the current point
        control: Off-curve control point
        to: End point (becomes the current point)

    Raises:
        OutlineError: If there is no current point
    """
    p0 = ctx.current
    if p0 is None:
        raise OutlineError("quadratic")

    _flatten(
        ctx,
        p0,
        to,
        lambda t: quadratic_point(p0, control, to, t),
        lambda t: quadratic_tangent(p0, control, to, t),
    )


def flatten_cubic(ctx: RenderContext, control1: Point, control2: Point, to: Point) -> None:
    """Flatten a cubic Bezier from the current point into biarcs.

    Args:
        ctx: Render context holding the current point
        control1: First control point
        control2: Second control point
        to: End point (becomes the current point)

    Raises:
        OutlineError: If there is no current point
    """
    p0 = ctx.current
    if p0 is None:
        raise OutlineError("cubic")

    _flatten(
        ctx,
        p0,
        to,
        lambda t: cubic_point(p0, control1, control2, to, t),
        lambda t: cubic_tangent(p0, control1, control2, to, t),
    )
