"""Domain models for ttf2dxf.

This module contains the value types that flow through the geometry core.
All models are independent of fontTools and ezdxf:

- Point: An immutable 2D point or direction vector
- Extents: A running integer bounding box
- PathStart, LineTo, ArcTo: Outline records streamed to a writer
- GlyphMetrics: Per-glyph extents, advance and record counts
"""

from ttf2dxf.domain.extents import EXTENT_SENTINEL, Extents
from ttf2dxf.domain.glyph import GlyphMetrics
from ttf2dxf.domain.point import ORIGIN, Point
from ttf2dxf.domain.records import (
    ArcTo,
    LineTo,
    OutlineRecord,
    PathStart,
    RecordCollector,
    RecordSink,
)

__all__: list[str] = [
    # Core types
    "Point",
    "ORIGIN",
    "Extents",
    "EXTENT_SENTINEL",
    "GlyphMetrics",
    # Records
    "ArcTo",
    "LineTo",
    "OutlineRecord",
    "PathStart",
    "RecordCollector",
    "RecordSink",
]
