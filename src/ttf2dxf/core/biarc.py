"""Biarc construction and tangent arc emission.

A biarc is a pair of circular arcs joined with a common tangent. Given the
end points of a curve piece and the curve's tangent at both ends, the solver
finds a junction point so that the first arc leaves p0 along the start
tangent, the second arc arrives at p4 along the end tangent and both arcs
share a tangent at the junction.

Ill-conditioned input never raises: the solver and the arc emitter fall back
to a straight line to the end point.
"""

import math
from dataclasses import dataclass

from ttf2dxf.core.vector import add, dot, scale, sub, unit
from ttf2dxf.domain import ArcTo, LineTo, Point, RecordSink

# Below this |denominator| the tangent is treated as parallel to the chord
ARC_DENOMINATOR_EPSILON = 1e-10

# Tangents with cos(angle) above 1 - this are treated as parallel
PARALLEL_TANGENT_EPSILON = 1e-9


@dataclass(frozen=True, slots=True)
class BiarcSolution:
    """Control geometry of a solved biarc.

    Attributes:
        p1: End of the start tangent leg (p0 + alpha * ts)
        p2: Junction point shared by both arcs
        p3: Start of the end tangent leg (p4 - beta * te)
        tangent_mid: Tangent direction at the junction
    """

    p1: Point
    p2: Point
    p3: Point
    tangent_mid: Point


def arc_bulge(p1: Point, p2: Point, direction: Point) -> float | None:
    """Compute the bulge of the arc leaving p1 along direction and ending at p2.

    Args:
        p1: Arc start point
        p2: Arc end point
        direction: Tangent at p1 (any length)

    Returns:
        Bulge value (tan of a quarter of the included angle, negative for
        clockwise arcs), or None when the chord is too close to the tangent
        for a circle to be defined
    """
    d = unit(direction)
    p = sub(p2, p1)
    den = 2 * (p.y * d.x - p.x * d.y)

    if abs(den) < ARC_DENOMINATOR_EPSILON:
        return None

    r = -dot(p, p) / den

    i = d.y * r
    j = -d.x * r

    c = Point(p1.x + i, p1.y + j)
    st = math.atan2(p1.y - c.y, p1.x - c.x)
    en = math.atan2(p2.y - c.y, p2.x - c.x)

    if r < 0:
        while en <= st:
            en += 2 * math.pi
    else:
        while en >= st:
            en -= 2 * math.pi

    bulge = math.tan(abs(en - st) / 4)
    if r > 0:
        bulge = -bulge
    return bulge


def emit_arc(sink: RecordSink, p1: Point, p2: Point, direction: Point) -> None:
    """Emit the tangent arc from p1 to p2, or a line when it is degenerate.

    Args:
        sink: Receiver of the emitted record
        p1: Arc start point (the sink's current point)
        p2: Arc end point
        direction: Tangent at p1
    """
    bulge = arc_bulge(p1, p2, direction)
    if bulge is None:
        sink.emit(LineTo(p2))
    else:
        sink.emit(ArcTo(p2, bulge))


def solve_biarc(
    p0: Point, ts: Point, p4: Point, te: Point, ratio: float
) -> BiarcSolution | None:
    """Solve for the junction of a biarc.

    Finds beta from a*beta^2 + b*beta + c = 0 with c = v.v,
    b = 2 v.(ratio*ts + te), a = 2*ratio*(ts.te - 1) and v = p0 - p4.

    Args:
        p0: Start point
        ts: Tangent at p0 (normalized here)
        p4: End point
        te: Tangent at p4 (normalized here)
        ratio: alpha/beta, the split of tangent leg lengths (1.0 = symmetric)

    Returns:
        BiarcSolution, or None when no forward-pointing solution exists
    """
    ts = unit(ts)
    te = unit(te)

    v = sub(p0, p4)

    c = dot(v, v)
    b = 2 * dot(v, add(scale(ts, ratio), te))
    cos_theta = dot(ts, te)
    a = 2 * ratio * (cos_theta - 1)

    disc = b * b - 4 * a * c

    # a is never positive; rounding leaves it near zero for parallel tangents
    if cos_theta > 1 - PARALLEL_TANGENT_EPSILON or a >= 0 or disc < 0:
        return None

    disq = math.sqrt(disc)
    beta1 = (-b - disq) / 2 / a
    beta2 = (-b + disq) / 2 / a
    beta = max(beta1, beta2)

    if beta <= 0:
        return None

    alpha = beta * ratio
    ab = alpha + beta
    p1 = add(p0, scale(ts, alpha))
    p3 = add(p4, scale(te, -beta))
    p2 = add(scale(p1, beta / ab), scale(p3, alpha / ab))
    return BiarcSolution(p1=p1, p2=p2, p3=p3, tangent_mid=sub(p3, p2))


def biarc(
    sink: RecordSink, p0: Point, ts: Point, p4: Point, te: Point, ratio: float = 1.0
) -> None:
    """Approximate the curve piece from p0 to p4 with two tangent arcs.

    Emits two arc records (either may degrade to a line), or a single line
    to p4 when the biarc cannot be solved.

    Args:
        sink: Receiver of the emitted records
        p0: Start point (the sink's current point)
        ts: Curve tangent at p0
        p4: End point
        te: Curve tangent at p4
        ratio: Tangent leg length ratio
    """
    solution = solve_biarc(p0, ts, p4, te, ratio)
    if solution is None:
        sink.emit(LineTo(p4))
        return

    emit_arc(sink, p0, solution.p2, unit(ts))
    emit_arc(sink, solution.p2, p4, solution.tangent_mid)
