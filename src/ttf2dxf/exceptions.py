"""Exception hierarchy for ttf2dxf."""


class Ttf2DxfError(Exception):
    """Base exception for all ttf2dxf errors."""

    pass


class FontError(Ttf2DxfError):
    """Errors related to font loading."""

    pass


class FontLoadError(FontError):
    """Error loading a font file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load font '{path}': {reason}")


class FontFormatError(FontError):
    """Unsupported or invalid font format."""

    def __init__(self, path: str, details: str) -> None:
        self.path = path
        self.details = details
        super().__init__(f"Invalid font format '{path}': {details}")


class GlyphError(Ttf2DxfError):
    """Errors related to glyph rendering."""

    pass


class GlyphNotFoundError(GlyphError):
    """Requested character has no glyph in the font.

    Callers are expected to skip the character and carry on.
    """

    def __init__(self, char: str) -> None:
        self.char = char
        super().__init__(f"No glyph for character {char!r} (U+{ord(char):04X})")


class GlyphRenderError(GlyphError):
    """The font engine failed while rendering a glyph."""

    def __init__(self, glyph_name: str, reason: str) -> None:
        self.glyph_name = glyph_name
        self.reason = reason
        super().__init__(f"Error rendering glyph '{glyph_name}': {reason}")


class OutlineError(GlyphError):
    """An outline segment arrived without a current point."""

    def __init__(self, segment: str) -> None:
        self.segment = segment
        super().__init__(f"{segment} segment without a current point")


class OutputError(Ttf2DxfError):
    """Errors related to DXF output."""

    pass


class DxfWriteError(OutputError):
    """Error saving the DXF drawing."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write DXF '{path}': {reason}")


class ProcessingCancelledError(Ttf2DxfError):
    """Processing was cancelled by user."""

    def __init__(self, processed_count: int, pending_count: int) -> None:
        self.processed_count = processed_count
        self.pending_count = pending_count
        super().__init__(
            f"Processing cancelled: {processed_count} completed, {pending_count} pending"
        )
