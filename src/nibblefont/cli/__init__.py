"""Command-line interface for nibblefont.

This module provides the CLI using Typer with rich output.

Commands:
- pack: Extract a PNG font sheet and write an encoded font
- dump: List the glyphs of an encoded font or sheet
"""

from nibblefont.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
