"""Font and drawing I/O layer for ttf2dxf.

This module handles reading fonts using fonttools and writing DXF drawings
using ezdxf.

Key responsibilities:
- Load TTF/OTF fonts
- Look up glyphs and advance widths by character
- Build LWPOLYLINE and DIMENSION entities from traced glyphs
- Save the drawing to a file or stdout

Key classes:
- FontReader: Load fonts and look up glyphs
- DxfWriter: Build and save the DXF drawing
"""

from ttf2dxf.io.reader import FontReader
from ttf2dxf.io.writer import DxfWriter, PolylineSink, layer_name_for

__all__ = [
    "DxfWriter",
    "FontReader",
    "PolylineSink",
    "layer_name_for",
]
