"""Core algorithms for nibblefont.

This module contains the two pure transformations:

- Glyph extraction (RGBA8 pixel buffer to glyph collection)
- Binary encoding (glyph collection to and from 80 bytes)

Neither performs I/O or logging; both are safe to call from any thread.

Key functions:
- extract: Pack a 16x20 RGBA8 sheet into sixteen glyphs
- encode: Serialize a glyph collection to bytes
- decode: Rebuild a glyph collection from bytes
"""

from nibblefont.core.codec import decode, encode
from nibblefont.core.extractor import (
    INK_THRESHOLD,
    cell_origin,
    extract,
    extract_glyph,
)

__all__ = [
    "INK_THRESHOLD",
    "cell_origin",
    "decode",
    "encode",
    "extract",
    "extract_glyph",
]
