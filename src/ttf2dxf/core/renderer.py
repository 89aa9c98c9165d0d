"""Glyph rendering: from a character to streamed outline records.

GlyphRenderer is the boundary to the font engine. A missing glyph is
reported as GlyphNotFoundError and a failure inside fontTools as
GlyphRenderError; the caller decides whether to skip the character or stop.
"""

from fontTools.misc.roundTools import otRound
from fontTools.pens.roundingPen import RoundingPen
from fontTools.pens.transformPen import TransformPen

from ttf2dxf.config import Ttf2DxfSettings
from ttf2dxf.core.context import RenderContext
from ttf2dxf.core.raster import SPAN_INSET_PER_EM, rasterize_glyph, trace_bitmap
from ttf2dxf.core.tracer import OutlineTracer
from ttf2dxf.domain import GlyphMetrics, Point, RecordSink
from ttf2dxf.exceptions import GlyphNotFoundError, GlyphRenderError
from ttf2dxf.io.reader import FontReader


class GlyphRenderer:
    """Traces glyphs of a loaded font into a record sink.

    Outline points are scaled to the output units per em, shifted by the
    pen offset and rounded to integers before they reach the tracer, the way
    FreeType hands out its 26.6 outline coordinates.

    Example:
        with FontReader(Path("font.ttf")) as reader:
            renderer = GlyphRenderer(reader, settings)
            metrics = renderer.render("A", collector)
    """

    def __init__(self, reader: FontReader, settings: Ttf2DxfSettings) -> None:
        """Initialize the renderer.

        Args:
            reader: Loaded font reader
            settings: Application settings
        """
        self._reader = reader
        self._settings = settings
        self._font_upm = reader.units_per_em
        self._scale = settings.output.scale_for(self._font_upm)
        self._context = RenderContext(flatten=settings.flatten)
        self._tracer = OutlineTracer(self._context, reader.glyph_set)

    @property
    def scale(self) -> float:
        """Factor from design units to output units."""
        return self._scale

    @property
    def output_upm(self) -> float:
        """Output units per em."""
        return self._font_upm * self._scale

    def render(self, char: str, sink: RecordSink, offset: float = 0.0) -> GlyphMetrics:
        """Trace one character.

        Args:
            char: Character to render
            sink: Receiver of the outline records
            offset: Horizontal pen position in output units

        Returns:
            GlyphMetrics of the rendered glyph

        Raises:
            GlyphNotFoundError: If the font has no glyph for the character
            GlyphRenderError: If fontTools fails while drawing the glyph
        """
        glyph_name = self._reader.glyph_name_for(char)
        if glyph_name is None:
            raise GlyphNotFoundError(char)

        ctx = self._context.reset(sink)
        glyph_set = self._reader.glyph_set

        try:
            raster = self._settings.raster
            if raster.enabled:
                bitmap = rasterize_glyph(
                    glyph_set,
                    glyph_name,
                    self._font_upm,
                    self.output_upm,
                    raster.line_scale,
                )
                if bitmap is not None:
                    trace_bitmap(
                        bitmap,
                        self._tracer,
                        offset,
                        SPAN_INSET_PER_EM * self.output_upm,
                    )

            transform = (self._scale, 0, 0, self._scale, offset, 0)
            glyph_set[glyph_name].draw(TransformPen(RoundingPen(self._tracer), transform))
        except Exception as e:
            raise GlyphRenderError(glyph_name, str(e)) from e

        ctx.advance = Point(otRound(self._reader.advance_width(glyph_name) * self._scale), 0)

        return GlyphMetrics(
            char=char,
            glyph_name=glyph_name,
            extents=ctx.extents.copy(),
            advance=ctx.advance,
            arc_count=ctx.arc_count,
            line_count=ctx.line_count,
        )
