"""Per-glyph render state.

A RenderContext carries everything the traversal driver and the curve
flattener mutate while one glyph is being traced. It is reused from glyph to
glyph and must be reset in between; glyphs are processed strictly one after
another.
"""

from dataclasses import dataclass, field

from ttf2dxf.config import FlattenConfig
from ttf2dxf.domain import (
    ORIGIN,
    ArcTo,
    Extents,
    LineTo,
    OutlineRecord,
    Point,
    RecordCollector,
    RecordSink,
)


@dataclass
class RenderContext:
    """Mutable state threaded through outline traversal.

    The context is itself a RecordSink: records pass through emit(), which
    counts them and forwards them to the downstream sink.

    Attributes:
        sink: Downstream receiver of outline records
        flatten: Curve subdivision settings
        extents: Bounding box of the current glyph
        current: Current pen point (None before the first move)
        contour_start: First point of the current contour
        advance: Pen advance of the most recently rendered glyph
        arc_count: Arc records emitted since the last reset
        line_count: Line records emitted since the last reset
    """

    sink: RecordSink = field(default_factory=RecordCollector)
    flatten: FlattenConfig = field(default_factory=FlattenConfig)
    extents: Extents = field(default_factory=Extents)
    current: Point | None = None
    contour_start: Point | None = None
    advance: Point = ORIGIN
    arc_count: int = 0
    line_count: int = 0

    def reset(self, sink: RecordSink | None = None) -> "RenderContext":
        """Prepare the context for the next glyph.

        Args:
            sink: New downstream sink (keeps the current one if None)

        Returns:
            The context itself
        """
        if sink is not None:
            self.sink = sink
        self.extents.reset()
        self.current = None
        self.contour_start = None
        self.advance = ORIGIN
        self.arc_count = 0
        self.line_count = 0
        return self

    def emit(self, record: OutlineRecord) -> None:
        if isinstance(record, ArcTo):
            self.arc_count += 1
        elif isinstance(record, LineTo):
            self.line_count += 1
        self.sink.emit(record)
