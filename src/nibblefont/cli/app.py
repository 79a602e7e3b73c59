"""CLI application entry point for nibblefont.

This module provides the main CLI interface using Typer.
"""

import json
from pathlib import Path
from typing import Annotated

import structlog
import typer
from pydantic import ValidationError

from nibblefont import __version__
from nibblefont.cli.output import (
    console,
    print_error,
    print_font_info,
    print_glyph_table,
    print_header,
    print_step,
    print_success,
    print_warning,
)
from nibblefont.config import LoggingConfig, NibbleFontSettings, OutputConfig
from nibblefont.exceptions import (
    FontLoadError,
    FontSaveError,
    InvalidSizeError,
    NibbleFontError,
)
from nibblefont.io import FontReader, FontWriter
from nibblefont.utils import ConversionStats, configure_logging

app = typer.Typer(
    name="nibblefont",
    help="Pack 16-glyph 4x5 bitmap font sheets into 80-byte binary fonts.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Nibblefont[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
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
    """Pack 16-glyph 4x5 bitmap font sheets into 80-byte binary fonts."""


@app.command()
def pack(
    input_sheet: Annotated[
        Path,
        typer.Argument(
            help="Path to a 16x20 PNG font sheet",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: {name}.nfnt)",
        ),
    ] = None,
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            "-f",
            help="Overwrite the output file if it exists",
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
            help="Minimal console output",
        ),
    ] = False,
) -> None:
    """Extract the glyphs of a font sheet and write them as an encoded font.

    The sheet is a 16x20 image holding a 4x4 grid of 4x5 glyph cells.
    Pixels whose red channel is below 128 are ink.

    Example:
        nibblefont pack digits.png

    This will create digits.nfnt next to the sheet.
    """
    _validate_input(input_sheet)

    try:
        settings = NibbleFontSettings(
            output=OutputConfig(overwrite=force),
            logging=LoggingConfig(log_file=log_file, log_level=log_level),
        )
    except ValidationError:
        print_error(
            f"Invalid log level: {log_level}",
            details="Valid values: DEBUG, INFO, WARNING, ERROR",
        )
        raise typer.Exit(code=1)

    logger = _setup_logging(settings, quiet)

    if not quiet:
        print_header(__version__)

    output_path = output or FontWriter.get_output_path(input_sheet, settings.output.extension)
    stats = ConversionStats(source=str(input_sheet))

    try:
        if not quiet:
            print_step("Extracting glyphs")

        reader = FontReader(input_sheet)
        reader.load()
        font = reader.font
        stats.glyph_count = len(font)
        stats.empty_glyphs = sum(1 for glyph in font if glyph.is_empty())

        if not quiet:
            print_font_info(str(input_sheet), reader.format, stats.glyph_count, stats.empty_glyphs)
            print_step("Writing font")

        writer = FontWriter(font, output_path, overwrite=settings.output.overwrite)
        stats.bytes_written = writer.save()

        if logger is not None:
            logger.info(
                "Font packed",
                source=stats.source,
                output=str(output_path),
                glyphs=stats.glyph_count,
                empty=stats.empty_glyphs,
                bytes=stats.bytes_written,
            )

        if not quiet:
            print_success(str(output_path), stats.bytes_written, stats.glyph_count)

    except InvalidSizeError as e:
        print_error(str(e), details="The sheet must be a 4x4 grid of 4x5 pixel cells.")
        raise typer.Exit(code=1)
    except (FontLoadError, FontSaveError) as e:
        print_error(e.reason, details=e.path)
        raise typer.Exit(code=1)
    except NibbleFontError as e:
        if logger is not None:
            logger.error("Pack failed", error=str(e), error_type=type(e).__name__)
        print_error(str(e))
        raise typer.Exit(code=1)


@app.command()
def dump(
    font_file: Annotated[
        Path,
        typer.Argument(
            help="Path to an encoded font or a PNG font sheet",
            show_default=False,
        ),
    ],
    as_json: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Print the glyphs as JSON",
        ),
    ] = False,
    strict: Annotated[
        bool,
        typer.Option(
            "--strict",
            help="Reject encoded rows with bits outside the 4-pixel row",
        ),
    ] = False,
) -> None:
    """List the row bytes and bit pattern of every glyph in a font.

    Example:
        nibblefont dump digits.nfnt
    """
    _validate_input(font_file)

    try:
        reader = FontReader(font_file, strict=strict)
        reader.load()
        font = reader.font
    except FontLoadError as e:
        print_error(e.reason, details=e.path)
        raise typer.Exit(code=1)
    except NibbleFontError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(json.dumps(font.to_dict()))
        return

    empty = sum(1 for glyph in font if glyph.is_empty())
    print_font_info(str(font_file), reader.format, len(font), empty)
    console.print()
    print_glyph_table(font)

    stray = [str(index) for index, glyph in enumerate(font) if not glyph.is_normalized()]
    if stray:
        print_warning(f"Glyphs with bits outside the 4-pixel row: {', '.join(stray)}")


def _validate_input(path: Path) -> None:
    """Exit with an error unless ``path`` is an existing file."""
    if not path.exists():
        print_error(
            f"Input file not found: {path}",
            details=f"The file '{path}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not path.is_file():
        print_error(f"Input path is not a file: {path}")
        raise typer.Exit(code=1)


def _setup_logging(
    settings: NibbleFontSettings, quiet: bool
) -> structlog.stdlib.BoundLogger | None:
    """Configure structured logging when a log file was requested."""
    if settings.logging.log_file is None:
        return None

    return configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
