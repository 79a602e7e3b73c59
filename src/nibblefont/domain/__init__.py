"""Domain models for nibblefont.

This module contains the value types shared by extraction and encoding.
All models are immutable frozen dataclasses with fixed sizes:

- Glyph: five row bytes for one 4x5 character cell
- GlyphCollection: exactly sixteen glyphs in sheet scan order
"""

from nibblefont.domain.font import (
    ENCODED_SIZE,
    GLYPH_COUNT,
    GRID_COLUMNS,
    GRID_ROWS,
    IMAGE_HEIGHT,
    IMAGE_WIDTH,
    GlyphCollection,
)
from nibblefont.domain.glyph import GLYPH_HEIGHT, GLYPH_WIDTH, ROW_MASK, Glyph

__all__: list[str] = [
    # Layout constants
    "ENCODED_SIZE",
    "GLYPH_COUNT",
    "GLYPH_HEIGHT",
    "GLYPH_WIDTH",
    "GRID_COLUMNS",
    "GRID_ROWS",
    "IMAGE_HEIGHT",
    "IMAGE_WIDTH",
    "ROW_MASK",
    # Core types
    "Glyph",
    "GlyphCollection",
]
