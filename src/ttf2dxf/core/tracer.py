"""Outline traversal driver.

OutlineTracer is a fontTools pen: glyphs draw themselves into it with
moveTo/lineTo/qCurveTo/curveTo calls. Straight segments are emitted as line
records, curved segments go through the biarc flattener. All state lives in
the RenderContext handed in at construction.
"""

from typing import Any

from fontTools.pens.basePen import BasePen

from ttf2dxf.core.context import RenderContext
from ttf2dxf.core.flattener import flatten_cubic, flatten_quadratic
from ttf2dxf.domain import LineTo, PathStart, Point


class OutlineTracer(BasePen):
    """Pen that turns glyph outlines into line/arc records.

    BasePen splits TrueType runs of several off-curve points into single
    quadratic segments (inserting the implied on-curve points) and
    decomposes components through the glyph set.

    Example:
        ctx = RenderContext(sink=collector)
        tracer = OutlineTracer(ctx, glyph_set)
        glyph_set["a"].draw(tracer)
    """

    def __init__(self, context: RenderContext, glyphSet: Any = None) -> None:
        super().__init__(glyphSet)
        self.context = context

    def _moveTo(self, pt: tuple[float, float]) -> None:
        ctx = self.context
        point = Point.from_tuple(pt)
        ctx.emit(PathStart(point))
        ctx.current = point
        ctx.contour_start = point
        ctx.extents.add_point(point)

    def _lineTo(self, pt: tuple[float, float]) -> None:
        ctx = self.context
        point = Point.from_tuple(pt)
        ctx.emit(LineTo(point))
        ctx.current = point
        ctx.extents.add_point(point)

    def _qCurveToOne(self, pt1: tuple[float, float], pt2: tuple[float, float]) -> None:
        flatten_quadratic(self.context, Point.from_tuple(pt1), Point.from_tuple(pt2))

    def _curveToOne(
        self,
        pt1: tuple[float, float],
        pt2: tuple[float, float],
        pt3: tuple[float, float],
    ) -> None:
        flatten_cubic(
            self.context,
            Point.from_tuple(pt1),
            Point.from_tuple(pt2),
            Point.from_tuple(pt3),
        )

    def _closePath(self) -> None:
        # Contours are closed with an explicit segment back to their start
        ctx = self.context
        start = ctx.contour_start
        if start is not None and ctx.current != start:
            self._lineTo(start.to_tuple())
        ctx.contour_start = None

    def _endPath(self) -> None:
        self.context.contour_start = None
