"""Core processing algorithms for ttf2dxf.

This module contains the geometry core and the pipeline around it:

- Vector algebra over points
- Biarc construction (two tangent arcs per curve piece)
- Curve flattening (length estimate, extents, adaptive biarc subdivision)
- Outline traversal (a fontTools pen that drives the flattener)
- Scanline raster tracing
- Glyph rendering and whole-font processing

The geometry functions are pure apart from the RenderContext they are
handed, and never raise on degenerate input; they fall back to straight
lines instead.

Key functions:
- arc_bulge / emit_arc: Tangent arc between two points
- solve_biarc / biarc: Two-arc approximation of a curve piece
- flatten_quadratic / flatten_cubic: Bezier segment to biarcs

Key classes:
- RenderContext: Per-glyph mutable state (current point, extents, advance)
- OutlineTracer: Traversal driver pen
- GlyphRenderer: Character to records, with font engine error reporting
- FontProcessor: Orchestrates a full conversion run
"""

from ttf2dxf.core.biarc import BiarcSolution, arc_bulge, biarc, emit_arc, solve_biarc
from ttf2dxf.core.context import RenderContext
from ttf2dxf.core.flattener import flatten_cubic, flatten_quadratic
from ttf2dxf.core.processor import FontProcessor
from ttf2dxf.core.raster import GlyphBitmap, scanline_spans, trace_bitmap
from ttf2dxf.core.renderer import GlyphRenderer
from ttf2dxf.core.tracer import OutlineTracer

__all__ = [
    # Biarc
    "BiarcSolution",
    "arc_bulge",
    "biarc",
    "emit_arc",
    "solve_biarc",
    # Flattening and traversal
    "OutlineTracer",
    "RenderContext",
    "flatten_cubic",
    "flatten_quadratic",
    # Raster tracing
    "GlyphBitmap",
    "scanline_spans",
    "trace_bitmap",
    # Pipeline
    "FontProcessor",
    "GlyphRenderer",
]
