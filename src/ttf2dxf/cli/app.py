"""CLI application entry point for ttf2dxf.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from ttf2dxf import __version__
from ttf2dxf.cli.output import (
    console,
    create_progress,
    print_cancellation_summary,
    print_error,
    print_font_info,
    print_header,
    print_render_info,
    print_skipped,
    print_step,
    print_success,
)
from ttf2dxf.config import (
    FlattenConfig,
    LoggingConfig,
    OutputConfig,
    OutputMode,
    ProcessingConfig,
    RasterConfig,
    Ttf2DxfSettings,
)
from ttf2dxf.core import FontProcessor
from ttf2dxf.exceptions import (
    DxfWriteError,
    FontFormatError,
    FontLoadError,
    ProcessingCancelledError,
    Ttf2DxfError,
)
from ttf2dxf.io import FontReader

# Output path that selects stdout
STDOUT_PATH = "-"

# Create the Typer app
app = typer.Typer(
    name="ttf2dxf",
    help="Convert font glyphs into DXF polylines made of lines and arcs.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]ttf2dxf[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def convert(
    input_font: Annotated[
        Path,
        typer.Argument(
            help="Path to input TTF/OTF font file",
            show_default=False,
        ),
    ],
    text: Annotated[
        str,
        typer.Argument(
            help="Extra characters to render (font mode) or the text to lay out (--text)",
            show_default=False,
        ),
    ] = "",
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: {name}.dxf, '-' for stdout)",
        ),
    ] = None,
    arc_length: Annotated[
        float,
        typer.Option(
            "--arc-length",
            "-s",
            help="Curve length covered by one arc pair, in output units",
        ),
    ] = 200.0,
    steps: Annotated[
        int,
        typer.Option(
            "--steps",
            help="Samples per curve for length and extents estimation",
            min=1,
        ),
    ] = 100,
    line_scale: Annotated[
        int | None,
        typer.Option(
            "--line-scale",
            "-l",
            help="Also trace a scanline raster with this many rows per em (min 24)",
        ),
    ] = None,
    layer: Annotated[
        str | None,
        typer.Option(
            "--layer",
            "-L",
            help="Put everything on this layer instead of one layer per glyph",
        ),
    ] = None,
    text_mode: Annotated[
        bool,
        typer.Option(
            "--text",
            "-t",
            help="Lay out TEXT along the baseline instead of rendering the font",
        ),
    ] = False,
    units_per_em: Annotated[
        int,
        typer.Option(
            "--units-per-em",
            help="Output units per em",
            min=16,
        ),
    ] = 4096,
    raw_units: Annotated[
        bool,
        typer.Option(
            "--raw-units",
            help="Keep the font's design units (ignores --units-per-em)",
        ),
    ] = False,
    first_char: Annotated[
        int,
        typer.Option(
            "--first-char",
            help="First code point rendered in font mode",
            min=0,
        ),
    ] = 0x20,
    last_char: Annotated[
        int,
        typer.Option(
            "--last-char",
            help="Last code point rendered in font mode",
            min=0,
        ),
    ] = 0x7E,
    strict: Annotated[
        bool,
        typer.Option(
            "--strict",
            help="Stop at the first glyph that fails to render",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Convert a font to a DXF drawing of line and arc polylines.

    By default every printable ASCII glyph goes on its own layer, together
    with minx/maxx/miny/maxy/advx/advy dimensions for OpenSCAD's dxf_dim().

    Example:
        ttf2dxf Roboto-Regular.ttf

    This will create Roboto-Regular.dxf next to the font.
    """
    # Validate mutually exclusive options
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    # Validate input file exists
    if not input_font.exists():
        print_error(
            f"Input file not found: {input_font}",
            details=f"The file '{input_font}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not input_font.is_file():
        print_error(
            f"Input path is not a file: {input_font}",
            details="Please provide a path to a TTF or OTF font file.",
        )
        raise typer.Exit(code=1)

    if text_mode and not text:
        print_error("--text needs the text to lay out")
        raise typer.Exit(code=1)

    if first_char > last_char:
        print_error(f"Empty character range: {first_char}..{last_char}")
        raise typer.Exit(code=1)

    try:
        settings = Ttf2DxfSettings(
            flatten=FlattenConfig(
                estimation_steps=steps,
                arc_length_per_pair=arc_length,
            ),
            raster=RasterConfig(line_scale=line_scale),
            output=OutputConfig(
                mode=OutputMode.TEXT if text_mode else OutputMode.FONT,
                layer=layer,
                units_per_em=None if raw_units else units_per_em,
                first_char=first_char,
                last_char=last_char,
            ),
            processing=ProcessingConfig(strict=strict),
            logging=LoggingConfig(
                log_file=log_file,
                log_level=log_level if not quiet else "ERROR",
            ),
        )
    except ValidationError as e:
        print_error("Invalid options", details=str(e))
        raise typer.Exit(code=1)

    if output is None:
        output_path: Path | None = input_font.with_suffix(".dxf")
    elif str(output) == STDOUT_PATH:
        output_path = None
    else:
        output_path = output

    # Print header
    if not quiet:
        print_header(__version__)

    try:
        if not quiet:
            print_step("Loading font")

        try:
            with FontReader(input_font) as reader:
                font_type = reader.format
                glyph_count = reader.glyph_count
                upm = reader.units_per_em
        except FontFormatError:
            raise
        except Exception as e:
            raise FontLoadError(str(input_font), str(e)) from e

        processor = FontProcessor(settings)
        chars = processor.characters(text)

        if not quiet:
            print_font_info(
                font_path=str(input_font),
                font_type=font_type,
                glyph_count=glyph_count,
                upm=upm,
            )
            print_step("Rendering")
            print_render_info(
                mode=settings.output.mode.value,
                char_count=len(chars),
                output_upm=settings.output.units_per_em,
                arc_length=arc_length,
                line_scale=settings.raster.line_scale,
            )

        try:
            if not quiet:
                with create_progress() as progress:
                    task_id = progress.add_task(
                        f"Rendering {len(chars)} characters",
                        total=len(chars),
                    )

                    def update_progress(completed: int, *_: object) -> None:
                        progress.update(task_id, completed=completed)

                    stats = processor.process(
                        font_path=input_font,
                        output_path=output_path,
                        text=text,
                        progress_callback=update_progress,
                    )
            else:
                stats = processor.process(
                    font_path=input_font,
                    output_path=output_path,
                    text=text,
                )
        except ProcessingCancelledError as e:
            if not quiet:
                print_cancellation_summary(
                    processed=e.processed_count,
                    cancelled=e.pending_count,
                )
            raise typer.Exit(code=130) from None  # Standard Unix SIGINT exit code

        if not quiet:
            print_success(
                output_path=str(output_path) if output_path else "<stdout>",
                file_size=_format_file_size(output_path) if output_path else "-",
                total_time_s=stats.duration_seconds,
                rendered=stats.rendered_count,
                skipped=stats.skipped_count,
                errors=stats.error_count,
                arcs=stats.arc_count,
                lines=stats.line_count,
            )
            if verbose:
                print_skipped(stats.skipped)

    except FontLoadError as e:
        print_error(f"Could not load font: {e.reason}")
        raise typer.Exit(code=1)
    except DxfWriteError as e:
        print_error(f"Could not write drawing: {e.reason}")
        raise typer.Exit(code=1)
    except Ttf2DxfError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        # Re-raise typer.Exit to allow clean exits
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


def _format_file_size(path: Path) -> str:
    """Format file size in human-readable form.

    Args:
        path: Path to file

    Returns:
        Human-readable file size (e.g., "428 KB")
    """
    try:
        size_bytes = path.stat().st_size
        if size_bytes < 1024:
            return f"{size_bytes} B"
        elif size_bytes < 1024 * 1024:
            return f"{size_bytes / 1024:.0f} KB"
        else:
            return f"{size_bytes / (1024 * 1024):.1f} MB"
    except OSError:
        return "unknown"


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
