"""Rich console output helpers for the CLI."""

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from nibblefont.domain import GLYPH_HEIGHT, GLYPH_WIDTH, Glyph, GlyphCollection

console = Console()

SYM_STEP = "▸"
SYM_OK = "✓"
SYM_ERR = "✗"
SYM_WARN = "!"
SYM_DOT = "·"

INK = "#"
PAPER = "."


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Nibblefont[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_font_info(font_path: str, font_type: str, glyph_count: int, empty: int) -> None:
    """Print information about a loaded font.

    Args:
        font_path: Path to the source file
        font_type: Source format ("PNG sheet" or "Encoded font")
        glyph_count: Number of glyphs in the font
        empty: Number of glyphs with no pixels set
    """
    line = Text("  ")
    line.append(font_path)
    line.append(f" ({font_type})")
    console.print(line)
    console.print(f"  {glyph_count} glyphs {SYM_DOT} {empty} empty")


def glyph_pattern(glyph: Glyph) -> list[str]:
    """Return the glyph's rows as strings of ink and paper characters."""
    return [
        "".join(INK if glyph.pixel(column, row) else PAPER for column in range(GLYPH_WIDTH))
        for row in range(GLYPH_HEIGHT)
    ]


def print_glyph_table(font: GlyphCollection) -> None:
    """Print every glyph's row bytes and bit pattern.

    Args:
        font: Glyph collection to list
    """
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("#", justify="right")
    table.add_column("Rows")
    table.add_column("Pattern")

    for index, glyph in enumerate(font):
        rows = " ".join(f"{value:02x}" for value in glyph.rows)
        style = None if glyph.is_normalized() else "yellow"
        table.add_row(str(index), Text(rows, style=style), "\n".join(glyph_pattern(glyph)))
        table.add_row("", "", "")

    console.print(table)


def print_success(output_path: str, size: int, glyph_count: int) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file
        size: Bytes written
        glyph_count: Number of glyphs encoded
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green]")
    line = Text("  ")
    line.append(output_path, style="bold")
    line.append(f" ({size} B)")
    console.print(line)
    console.print(f"  {glyph_count} glyphs")


def print_warning(message: str) -> None:
    """Print a warning line."""
    console.print(f"[yellow]{SYM_WARN} {message}[/yellow]")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {escape(message)}")
    if details:
        console.print(f"  {escape(details)}")
