"""CLI application entry point for loopcorner.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from loopcorner import __version__
from loopcorner.cli.output import (
    console,
    print_corners,
    print_error,
    print_header,
    print_source_info,
    print_step,
    print_summary,
)
from loopcorner.config import CornerConfig, LoggingConfig, LoopCornerSettings
from loopcorner.core import LoopAnalyzer
from loopcorner.domain import Loop
from loopcorner.exceptions import FontLoadError, LoopCornerError
from loopcorner.io import FontReader, load_loops
from loopcorner.utils import configure_console_logging, configure_logging

# Create the Typer app
app = typer.Typer(
    name="loopcorner",
    help="Classify the corners of closed bezier loops as sharp, dull or straight.",
    add_completion=False,
    no_args_is_help=True,
)

_FONT_SUFFIXES = {".ttf", ".otf"}


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Loopcorner[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def corners(
    input_path: Annotated[
        Path,
        typer.Argument(
            help="JSON loop file or TTF/OTF font",
            show_default=False,
        ),
    ],
    glyph: Annotated[
        str | None,
        typer.Option(
            "--glyph",
            "-g",
            help="Glyph whose contours to classify (fonts only)",
        ),
    ] = None,
    tolerance: Annotated[
        float,
        typer.Option(
            "--tolerance",
            "-t",
            help="Minimum turn in degrees for quite sharp/dull corners",
        ),
    ] = 4.0,
    only_quite: Annotated[
        bool,
        typer.Option(
            "--only-quite",
            help="Only list quite sharp and quite dull corners",
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
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Only print the summary",
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
    """Classify the corner at the end of every curve of every loop.

    Example:
        loopcorner Roboto-Regular.ttf --glyph A
    """
    if not input_path.is_file():
        print_error(
            f"Input file not found: {input_path}",
            details=f"The file '{input_path}' does not exist or is not a file.",
        )
        raise typer.Exit(code=1)

    is_font = input_path.suffix.lower() in _FONT_SUFFIXES
    if is_font and glyph is None:
        print_error("A glyph name is required for fonts", details="Use --glyph NAME.")
        raise typer.Exit(code=1)

    try:
        settings = LoopCornerSettings(
            corner=CornerConfig(angle_tolerance_degrees=tolerance),
            logging=LoggingConfig(log_file=log_file, log_level=log_level),
        )
    except ValidationError as e:
        print_error("Invalid option", details=str(e.errors()[0]["msg"]))
        raise typer.Exit(code=1) from None

    if settings.logging.log_file is None:
        logger = configure_console_logging(settings.logging.log_level)
    else:
        logger = configure_logging(
            log_file=settings.logging.log_file,
            console_level=settings.logging.log_level,
            file_level=settings.logging.file_log_level,
            quiet=True,
        )

    if not quiet:
        print_header(__version__)
        print_step("Loading loops")

    try:
        if is_font:
            kind, loops = _read_font_loops(input_path, glyph or "", settings)
            source = f"{input_path}:{glyph}"
        else:
            kind = "JSON"
            loops = load_loops(input_path, angle_tolerance=settings.corner.cross_threshold)
            source = str(input_path)

        if not quiet:
            print_source_info(source, kind, len(loops), settings.corner.angle_tolerance_degrees)
            print_step("Classifying corners")

        analyzer = LoopAnalyzer(logger)
        reports = analyzer.analyze_all(loops)
        if only_quite:
            reports = [r for r in reports if r.corner.is_quite_sharp or r.corner.is_quite_dull]

        if not quiet:
            for loop_idx in sorted({r.loop_idx for r in reports}):
                print_corners(loop_idx, [r for r in reports if r.loop_idx == loop_idx])

        print_summary(analyzer.stats)

    except FontLoadError as e:
        print_error(f"Could not load font: {e.reason}")
        raise typer.Exit(code=1) from None
    except LoopCornerError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None


def _read_font_loops(
    font_path: Path, glyph: str, settings: LoopCornerSettings
) -> tuple[str, list[Loop]]:
    """Read the loops of one glyph.

    Raises:
        FontLoadError: If the font cannot be opened
        GlyphNotFoundError: If the glyph does not exist
    """
    reader = FontReader(font_path, angle_tolerance=settings.corner.cross_threshold)
    try:
        reader.load()
    except Exception as e:
        raise FontLoadError(str(font_path), str(e)) from e

    try:
        return reader.format, reader.get_loops(glyph)
    finally:
        reader.close()


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
