"""Font I/O layer for nibblefont.

This module handles reading font sheets and encoded fonts from disk and
writing encoded fonts back. PNG decoding is done with Pillow; everything
past the decoded RGBA8 pixels is handed to the core.

Key classes:
- FontReader: Load a sheet or encoded font
- FontWriter: Save an encoded font

Key functions:
- decode_png: Decode image bytes into RGBA8 pixels
- extract_png: Decode image bytes and extract the glyphs
"""

from nibblefont.io.reader import FontReader, decode_png, extract_png
from nibblefont.io.writer import FontWriter

__all__ = [
    "FontReader",
    "FontWriter",
    "decode_png",
    "extract_png",
]
