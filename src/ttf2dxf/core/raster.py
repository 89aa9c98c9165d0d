"""Scanline raster tracing.

In line-scale mode a glyph is rasterised at a coarse vertical resolution and
every run of set pixels on a scanline becomes a short horizontal path. The
result is a hatch of lines that fills the glyph, drawn next to its outline.

Spans are kept in plain lists, so any number of runs per scanline is
supported. The traversal direction flips on every other scanline to keep
consecutive spans short to travel between; this is a best-effort heuristic
and gives no guarantee for multi-contour shapes.
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from fontTools.pens.boundsPen import BoundsPen
from fontTools.pens.freetypePen import FreeTypePen

# Span ends are pulled in by this fraction of an em on each side
SPAN_INSET_PER_EM = 8 / 4096

# Gray level at and above which an antialiased pixel counts as set
PIXEL_THRESHOLD = 128


@dataclass
class GlyphBitmap:
    """One-bit raster of a glyph positioned in output units.

    Attributes:
        rows: Scanlines from top to bottom, one bool per pixel column
        left: X of the left edge of column 0, in output units
        top: Raster row index of the top edge of row 0 (in raster rows)
        row_height: Height of one raster row in output units
    """

    rows: list[list[bool]]
    left: float
    top: int
    row_height: float

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def height(self) -> int:
        return len(self.rows)

    def row_y(self, index: int) -> float:
        """Y of the centre of a scanline in output units."""
        return (self.top - index) * self.row_height - self.row_height / 2


def rasterize_glyph(
    glyph_set: Any,
    glyph_name: str,
    font_upm: int,
    output_upm: float,
    line_scale: int,
) -> GlyphBitmap | None:
    """Render a glyph to a one-bit raster.

    Horizontally one pixel equals one output unit; vertically the em is split
    into line_scale rows.

    Args:
        glyph_set: fontTools glyph set of the font
        glyph_name: Glyph to render
        font_upm: The font's units per em
        output_upm: Output units per em
        line_scale: Raster rows per em

    Returns:
        GlyphBitmap, or None for glyphs without an outline
    """
    glyph = glyph_set[glyph_name]

    bounds_pen = BoundsPen(glyph_set)
    glyph.draw(bounds_pen)
    if bounds_pen.bounds is None:
        return None

    x_min, y_min, x_max, y_max = bounds_pen.bounds
    sx = output_upm / font_upm
    sy = line_scale / font_upm

    left = math.floor(x_min * sx)
    bottom = math.floor(y_min * sy)
    top = math.ceil(y_max * sy)
    width = max(1, math.ceil(x_max * sx) - left)
    height = max(1, top - bottom)

    pen = FreeTypePen(glyph_set)
    glyph.draw(pen)
    buffer, (width, height) = pen.buffer(
        width=width,
        height=height,
        transform=(sx, 0, 0, sy, -left, -bottom),
    )

    rows = [
        [buffer[j * width + i] >= PIXEL_THRESHOLD for i in range(width)]
        for j in range(height)
    ]
    return GlyphBitmap(
        rows=rows,
        left=float(left),
        top=top,
        row_height=output_upm / line_scale,
    )


def scanline_spans(
    row: Sequence[bool], left: float, inset: float
) -> list[tuple[float, float]]:
    """Find the runs of set pixels on one scanline.

    Args:
        row: Pixel states from left to right
        left: X of the left edge of the first pixel
        inset: Distance to pull each span end inwards

    Returns:
        (start_x, end_x) pairs, left to right; spans that vanish after the
        inset are dropped
    """
    spans: list[tuple[float, float]] = []
    start: float | None = None

    for i, bit in enumerate(row):
        if bit and start is None:
            start = left + i + inset
        elif not bit and start is not None:
            end = left + i - inset
            if start < end:
                spans.append((start, end))
            start = None

    if start is not None:
        end = left + len(row) - inset
        if start < end:
            spans.append((start, end))

    return spans


def trace_bitmap(bitmap: GlyphBitmap, pen: Any, offset: float, inset: float) -> int:
    """Draw every scanline span of a raster as its own open path.

    Args:
        bitmap: Raster to trace
        pen: fontTools pen receiving moveTo/lineTo/endPath calls
        offset: Horizontal pen offset in output units
        inset: Span end inset in output units

    Returns:
        Number of spans drawn
    """
    count = 0
    for index, row in enumerate(bitmap.rows):
        spans = scanline_spans(row, bitmap.left + offset, inset)
        y = bitmap.row_y(index)
        if index % 2 == 0:
            spans = [(end, start) for start, end in reversed(spans)]
        for start, end in spans:
            pen.moveTo((start, y))
            pen.lineTo((end, y))
            pen.endPath()
        count += len(spans)
    return count
