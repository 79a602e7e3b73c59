"""Nibblefont - Pack 4x5 bitmap fonts into a compact binary format.

Nibblefont reads a 16x20 pixel sheet holding a 4x4 grid of 4x5 glyph cells,
turns each cell into five packed row nibbles and writes the resulting
16-glyph font as a flat 80-byte file.

Example:
    $ nibblefont pack font.png

This will create font.nfnt next to the source image.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
