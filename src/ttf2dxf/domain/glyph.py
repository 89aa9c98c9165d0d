"""Per-glyph rendering results.

This module defines the metrics produced once a glyph has been fully traced:
its bounding box, its pen advance and a count of emitted records.
"""

from dataclasses import dataclass
from typing import Any

from ttf2dxf.domain.extents import Extents
from ttf2dxf.domain.point import Point


@dataclass
class GlyphMetrics:
    """Metrics of one rendered glyph.

    Attributes:
        char: The character that was rendered
        glyph_name: Name of the glyph in the font
        extents: Bounding box in output units
        advance: Pen advance (x, y) in output units
        arc_count: Number of arc records emitted
        line_count: Number of line records emitted
    """

    char: str
    glyph_name: str
    extents: Extents
    advance: Point
    arc_count: int = 0
    line_count: int = 0

    @property
    def codepoint(self) -> int:
        """Unicode code point of the character."""
        return ord(self.char)

    @property
    def is_empty(self) -> bool:
        """True for glyphs without any outline (e.g. space)."""
        return self.extents.is_empty

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary representation of the metrics
        """
        return {
            "char": self.char,
            "glyph_name": self.glyph_name,
            "extents": self.extents.to_dict(),
            "advance": self.advance.to_dict(),
            "arc_count": self.arc_count,
            "line_count": self.line_count,
        }
