"""Logging utilities for ttf2dxf."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

from ttf2dxf.domain import Extents, GlyphMetrics

HANDLER_MARKER = "_ttf2dxf_handler"


@dataclass
class ProcessingStats:
    """Statistics from a processing run."""

    rendered_count: int = 0
    skipped_count: int = 0
    error_count: int = 0
    arc_count: int = 0
    line_count: int = 0
    skipped: list[str] = field(default_factory=list)
    errors: list[tuple[str, str]] = field(default_factory=list)
    line_extents: Extents = field(default_factory=Extents)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate processing duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def segment_count(self) -> int:
        """Total arc and line records written."""
        return self.arc_count + self.line_count


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging to the console and an optional file.

    Args:
        log_file: Path to log file (no file logging if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Drop handlers from an earlier call so repeated runs do not log twice
    for handler in list(root_logger.handlers):
        if getattr(handler, HANDLER_MARKER, False):
            root_logger.removeHandler(handler)
            handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        setattr(file_handler, HANDLER_MARKER, True)
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    setattr(console_handler, HANDLER_MARKER, True)
    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("ttf2dxf")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class ProcessingLogger:
    """Logger for tracking processing progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = ProcessingStats()

    def log_glyph_start(self, char: str) -> None:
        """Log start of glyph rendering."""
        self._logger.debug("Rendering glyph", char=char, codepoint=ord(char))

    def log_glyph_complete(self, metrics: GlyphMetrics, duration_ms: float) -> None:
        """Log successful glyph rendering."""
        self._logger.info(
            "Glyph rendered",
            char=metrics.char,
            glyph=metrics.glyph_name,
            arcs=metrics.arc_count,
            lines=metrics.line_count,
            extents=metrics.extents.to_dict(),
            advance=metrics.advance.to_tuple(),
            duration_ms=round(duration_ms, 2),
        )
        self._stats.rendered_count += 1
        self._stats.arc_count += metrics.arc_count
        self._stats.line_count += metrics.line_count

    def log_glyph_skipped(self, char: str, reason: str) -> None:
        """Log skipped glyph."""
        self._logger.debug("Glyph skipped", char=char, codepoint=ord(char), reason=reason)
        self._stats.skipped_count += 1
        self._stats.skipped.append(char)

    def log_glyph_error(
        self,
        char: str,
        error: Exception,
        traceback: str | None = None,
    ) -> None:
        """Log glyph rendering error."""
        self._logger.error(
            "Glyph rendering failed",
            char=char,
            codepoint=ord(char),
            error=str(error),
            error_type=type(error).__name__,
            traceback=traceback,
        )
        self._stats.error_count += 1
        self._stats.errors.append((char, str(error)))

    @property
    def stats(self) -> ProcessingStats:
        """Get current processing statistics."""
        return self._stats
