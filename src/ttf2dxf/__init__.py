"""ttf2dxf - Convert font glyphs to DXF line/arc polylines.

ttf2dxf is a CLI tool that converts the glyph outlines of a TrueType/OpenType
font into a DXF drawing. Curved outline segments are approximated with pairs
of tangent circular arcs (biarcs) and written as LWPOLYLINE bulge segments.

By default every printable ASCII glyph lands on its own layer together with
DIMENSION entities holding its metrics (minx, maxx, miny, maxy, advx, advy),
which OpenSCAD can read back with dxf_dim().

Example:
    $ ttf2dxf Roboto-Regular.ttf

This will create Roboto-Regular.dxf with one layer per character.
"""

__version__ = "0.1.0"
__author__ = "ttf2dxf contributors"

__all__ = ["__author__", "__version__"]
