"""Rich console output for the CLI.

All console output goes to stderr; stdout is reserved for the drawing when
it is written with ``-o -``.
"""

from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table
from rich.text import Text

console = Console(stderr=True)

MARK_STEP = "›"
MARK_DONE = "✓"
MARK_FAIL = "✗"
SEP = "·"

# Missing characters listed before the rest is summarised
MAX_LISTED_MISSING = 20


def create_progress() -> Progress:
    """Create the glyph rendering progress bar.

    Returns:
        Progress showing rendered/total characters and elapsed time.
    """
    return Progress(
        TextColumn("  [dim]{task.description}"),
        BarColumn(bar_width=32, complete_style="cyan", finished_style="green"),
        MofNCompleteColumn(),
        TimeElapsedColumn(),
        console=console,
    )


def _details_table() -> Table:
    table = Table.grid(padding=(0, 2))
    table.add_column(style="dim", justify="right")
    table.add_column()
    return table


def print_header(version: str) -> None:
    console.print(Text.assemble(("ttf2dxf", "bold cyan"), f" {version}"))


def print_step(message: str) -> None:
    console.print(f"{MARK_STEP} [bold]{message}[/bold]")


def print_font_info(font_path: str, font_type: str, glyph_count: int, upm: int) -> None:
    """Print what was found in the font file.

    Args:
        font_path: Path to the font file
        font_type: "TrueType" or "OpenType"
        glyph_count: Number of glyphs in the font
        upm: Font units per em
    """
    table = _details_table()
    table.add_row("font", Text(font_path))
    table.add_row("format", font_type)
    table.add_row("glyphs", f"{glyph_count:,} {SEP} {upm:,} units/em")
    console.print(table)


def print_render_info(
    mode: str, char_count: int, output_upm: int | None, arc_length: float, line_scale: int | None
) -> None:
    """Print the rendering configuration.

    Args:
        mode: Output mode name
        char_count: Number of characters to render
        output_upm: Output units per em (None for design units)
        arc_length: Curve length per biarc
        line_scale: Raster rows per em, if raster tracing is on
    """
    table = _details_table()
    table.add_row("mode", f"{mode} {SEP} {char_count} characters")
    table.add_row("units", f"{output_upm} per em" if output_upm else "font design units")
    table.add_row("biarcs", f"one per {arc_length:g} units of curve")
    if line_scale:
        table.add_row("raster", f"{line_scale} rows per em")
    console.print(table)


def _format_duration(seconds: float) -> str:
    if seconds >= 60:
        minutes, rest = divmod(seconds, 60)
        return f"{int(minutes)}m {rest:.0f}s"
    if seconds >= 1:
        return f"{seconds:.2f}s"
    return f"{seconds * 1000:.0f}ms"


def print_success(
    output_path: str,
    file_size: str,
    total_time_s: float,
    rendered: int,
    skipped: int,
    errors: int,
    arcs: int,
    lines: int,
) -> None:
    """Print the run summary.

    Args:
        output_path: Drawing location ("<stdout>" when streamed)
        file_size: Human-readable size of the drawing
        total_time_s: Processing time in seconds
        rendered: Glyphs written
        skipped: Characters without a glyph
        errors: Glyphs that failed to render
        arcs: Arc segments written
        lines: Line segments written
    """
    console.print(
        f"{MARK_DONE} [bold green]Done[/bold green] in {_format_duration(total_time_s)}"
    )
    table = _details_table()
    table.add_row("output", Text.assemble((output_path, "bold"), f" ({file_size})"))
    glyph_line = Text(f"{rendered} rendered {SEP} {skipped} missing {SEP} ")
    glyph_line.append(f"{errors} failed", style="red" if errors else "green")
    table.add_row("glyphs", glyph_line)
    table.add_row("segments", f"{arcs:,} arcs {SEP} {lines:,} lines")
    console.print(table)


def print_skipped(chars: list[str]) -> None:
    """List the characters the font has no glyph for."""
    if not chars:
        return
    listed = " ".join(f"U+{ord(c):04X}" for c in chars[:MAX_LISTED_MISSING])
    hidden = len(chars) - MAX_LISTED_MISSING
    if hidden > 0:
        listed += f" and {hidden} more"
    table = _details_table()
    table.add_row("missing", listed)
    console.print(table)


def print_error(message: str, details: str | None = None) -> None:
    """Print an error.

    Args:
        message: One-line description
        details: Optional extra explanation
    """
    console.print(Text.assemble(f"{MARK_FAIL} ", (message, "bold red")))
    if details:
        console.print(Text(details, style="dim"))


def print_cancellation_summary(processed: int, cancelled: int) -> None:
    """Print what was done before Ctrl+C.

    Args:
        processed: Characters handled before cancellation
        cancelled: Characters not reached
    """
    console.print(f"{MARK_FAIL} [bold yellow]Cancelled[/bold yellow]")
    console.print(
        f"  {processed} done {SEP} {cancelled} not reached {SEP} no drawing written",
        style="dim",
    )
