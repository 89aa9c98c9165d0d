"""Processing orchestration for the font-to-DXF pipeline.

This module coordinates a full run: load the font, render the requested
characters one after another into a DXF drawing, record per-glyph metrics
and save the result.

Key components:
- FontProcessor: Main orchestrator class
"""

import time
import traceback
from collections.abc import Callable
from pathlib import Path

from ttf2dxf.config import OutputMode, Ttf2DxfSettings
from ttf2dxf.core.renderer import GlyphRenderer
from ttf2dxf.domain import Point
from ttf2dxf.exceptions import (
    DxfWriteError,
    FontFormatError,
    FontLoadError,
    GlyphNotFoundError,
    GlyphRenderError,
    ProcessingCancelledError,
)
from ttf2dxf.io import DxfWriter, FontReader, layer_name_for
from ttf2dxf.io.writer import DEFAULT_LAYER
from ttf2dxf.utils import ProcessingLogger, ProcessingStats, configure_logging


class FontProcessor:
    """Orchestrates font-to-DXF conversion.

    Manages the complete workflow:
    1. Load font file
    2. Work out the characters to render
    3. Render glyphs strictly in sequence, each into its polyline sink
    4. Write glyph (font mode) or line (text mode) metrics
    5. Save the drawing

    Example:
        settings = Ttf2DxfSettings()
        processor = FontProcessor(settings)
        stats = processor.process(
            font_path=Path("font.ttf"),
            output_path=Path("font.dxf"),
        )
    """

    def __init__(self, config: Ttf2DxfSettings) -> None:
        """Initialize font processor with configuration.

        Args:
            config: Application settings
        """
        self.config = config
        self.logger = configure_logging(
            log_file=config.logging.log_file,
            console_level=config.logging.log_level,
            file_level=config.logging.file_log_level,
        )
        self.processing_logger = ProcessingLogger(self.logger)

    def characters(self, text: str = "") -> list[str]:
        """List the characters a run renders, in order.

        Font mode renders the configured code point range followed by any
        extra characters of text not already in it. Text mode renders text
        as given, repeats included.

        Args:
            text: Text argument from the command line

        Returns:
            Characters to render
        """
        output = self.config.output
        if output.mode == OutputMode.TEXT:
            return list(text)

        chars = [chr(cp) for cp in range(output.first_char, output.last_char + 1)]
        seen = set(chars)
        for char in text:
            if char not in seen:
                seen.add(char)
                chars.append(char)
        return chars

    def layer_for(self, char: str) -> str:
        """Layer a character is drawn on."""
        output = self.config.output
        if output.layer is not None:
            return output.layer
        if output.mode == OutputMode.TEXT:
            return DEFAULT_LAYER
        return layer_name_for(char)

    def process(
        self,
        font_path: Path,
        output_path: Path | None,
        text: str = "",
        progress_callback: Callable[[int, int], None] | None = None,
    ) -> ProcessingStats:
        """Convert a font (or a line of text) into a DXF drawing.

        Args:
            font_path: Path to input font file
            output_path: Path for the DXF file, or None for stdout
            text: Extra characters (font mode) or the text to lay out (text mode)
            progress_callback: Optional callback(completed, total) for progress

        Returns:
            ProcessingStats with processing statistics

        Raises:
            FontLoadError: If the font cannot be loaded
            FontFormatError: If the font has no outlines to trace
            GlyphRenderError: If a glyph fails to render in strict mode
            DxfWriteError: If the drawing cannot be saved
            ProcessingCancelledError: If interrupted with Ctrl+C
        """
        # Fresh counters and line extents for every run
        self.processing_logger = ProcessingLogger(self.logger)
        stats = self.processing_logger.stats
        stats.start_time = time.time()

        self.logger.info(
            "Starting processing",
            font_path=str(font_path),
            output_path=str(output_path) if output_path else "<stdout>",
            mode=self.config.output.mode.value,
        )

        reader = FontReader(font_path)
        try:
            reader.load()
        except FontFormatError:
            raise
        except Exception as e:
            raise FontLoadError(str(font_path), str(e)) from e

        try:
            writer = DxfWriter(self.config.output.dxf_version)
            self._render_all(reader, writer, self.characters(text), progress_callback)
        finally:
            reader.close()

        self.logger.info("Saving drawing", output_path=str(output_path))
        try:
            writer.save(output_path)
        except Exception as e:
            raise DxfWriteError(str(output_path or "<stdout>"), str(e)) from e

        stats.end_time = time.time()
        self.logger.info(
            "Processing complete",
            rendered=stats.rendered_count,
            skipped=stats.skipped_count,
            errors=stats.error_count,
            arcs=stats.arc_count,
            lines=stats.line_count,
            segments=stats.segment_count,
            duration_s=round(stats.duration_seconds, 2),
        )
        return stats

    def _render_all(
        self,
        reader: FontReader,
        writer: DxfWriter,
        chars: list[str],
        progress_callback: Callable[[int, int], None] | None,
    ) -> None:
        """Render every character into the writer, one glyph at a time."""
        stats = self.processing_logger.stats
        renderer = GlyphRenderer(reader, self.config)
        text_mode = self.config.output.mode == OutputMode.TEXT
        offset = 0.0
        total = len(chars)

        self.logger.info(
            "Font loaded",
            format=reader.format,
            units_per_em=reader.units_per_em,
            scale=renderer.scale,
            characters=total,
        )

        for completed, char in enumerate(chars, start=1):
            layer = self.layer_for(char)
            self.processing_logger.log_glyph_start(char)
            start = time.time()

            try:
                with writer.polylines(layer) as sink:
                    metrics = renderer.render(char, sink, offset)
            except GlyphNotFoundError as e:
                self.processing_logger.log_glyph_skipped(char, str(e))
            except GlyphRenderError as e:
                if self.config.processing.strict:
                    raise
                self.processing_logger.log_glyph_error(char, e, traceback.format_exc())
            except KeyboardInterrupt:
                raise ProcessingCancelledError(
                    processed_count=completed - 1,
                    pending_count=total - completed + 1,
                ) from None
            else:
                self.processing_logger.log_glyph_complete(
                    metrics, (time.time() - start) * 1000
                )
                stats.line_extents.merge(metrics.extents)
                if text_mode:
                    offset += metrics.advance.x
                else:
                    writer.add_glyph_metrics(layer, metrics.extents, metrics.advance)

            if progress_callback:
                progress_callback(completed, total)

        if text_mode and stats.rendered_count:
            # Line metrics: merged extents and the total pen advance
            writer.add_glyph_metrics(
                self.config.output.layer or DEFAULT_LAYER,
                stats.line_extents,
                Point(offset, 0),
            )
