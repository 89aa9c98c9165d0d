"""Font reader for loading TTF/OTF fonts.

This module provides the FontReader class for loading font files and
looking up glyphs and metrics by character.
"""

from pathlib import Path
from typing import Any

from fontTools.ttLib import TTFont

from ttf2dxf.exceptions import FontFormatError

# Tables that carry glyph outlines
OUTLINE_TABLES = ("glyf", "CFF ", "CFF2")


class FontReader:
    """Loads TTF/OTF fonts and exposes glyph lookup by character.

    Example:
        reader = FontReader(Path("font.ttf"))
        reader.load()
        name = reader.glyph_name_for("A")
        reader.glyph_set[name].draw(pen)
    """

    def __init__(self, font_path: Path) -> None:
        """Initialize the font reader.

        Args:
            font_path: Path to the TTF or OTF font file
        """
        self._font_path = font_path
        self._font: TTFont | None = None
        self._cmap: dict[int, str] | None = None
        self._glyph_set: Any = None

    def load(self) -> None:
        """Load the font file.

        Raises:
            FileNotFoundError: If font file does not exist
            FontFormatError: If the font has no glyf or CFF outlines
            Exception: If font file is invalid or cannot be loaded
        """
        if not self._font_path.exists():
            raise FileNotFoundError(f"Font file not found: {self._font_path}")

        font = TTFont(str(self._font_path))
        if not any(tag in font for tag in OUTLINE_TABLES):
            font.close()
            raise FontFormatError(str(self._font_path), "no glyf, CFF or CFF2 outlines")

        self._font = font
        self._cmap = self._font.getBestCmap() or {}
        self._glyph_set = self._font.getGlyphSet()

    def _require_font(self) -> TTFont:
        if self._font is None:
            raise RuntimeError("Font not loaded. Call load() first.")
        return self._font

    @property
    def path(self) -> Path:
        """Path of the font file."""
        return self._font_path

    @property
    def format(self) -> str:
        """Return font format.

        Returns:
            'TrueType' for TTF fonts, 'OpenType' for OTF fonts

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        font = self._require_font()

        if "CFF " in font or "CFF2" in font:
            return "OpenType"
        return "TrueType"

    @property
    def units_per_em(self) -> int:
        """Return font's units per em.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        return self._require_font()["head"].unitsPerEm  # type: ignore[attr-defined]

    @property
    def glyph_count(self) -> int:
        """Return total number of glyphs in the font.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        return self._require_font()["maxp"].numGlyphs

    @property
    def glyph_set(self) -> Any:
        """Return the fontTools glyph set used to draw glyphs.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        self._require_font()
        return self._glyph_set

    def glyph_name_for(self, char: str) -> str | None:
        """Look up the glyph mapped to a character.

        Args:
            char: A single character

        Returns:
            Glyph name, or None if the font has no glyph for it

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        self._require_font()
        return (self._cmap or {}).get(ord(char))

    def advance_width(self, glyph_name: str) -> int:
        """Return the horizontal advance of a glyph in design units.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        font = self._require_font()
        hmtx = font.get("hmtx")
        if hmtx is None or glyph_name not in hmtx.metrics:
            return 0
        advance_width, _lsb = hmtx.metrics[glyph_name]
        return advance_width

    def close(self) -> None:
        """Close the font file and free resources."""
        if self._font is not None:
            self._font.close()
            self._font = None
            self._cmap = None
            self._glyph_set = None

    def __enter__(self) -> "FontReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
