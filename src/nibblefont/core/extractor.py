"""Glyph extraction from a decoded RGBA8 pixel buffer.

The sheet is a 16x20 image split into a 4x4 grid of 4x5 cells. Only the
red channel is inspected: a pixel counts as ink when its red value is
below the threshold. Green, blue and alpha never affect the result.
"""

from nibblefont.domain import (
    GLYPH_COUNT,
    GLYPH_HEIGHT,
    GLYPH_WIDTH,
    GRID_COLUMNS,
    IMAGE_HEIGHT,
    IMAGE_WIDTH,
    Glyph,
    GlyphCollection,
)
from nibblefont.exceptions import ConversionError, InvalidSizeError

BYTES_PER_PIXEL = 4

# Red values strictly below this are ink.
INK_THRESHOLD = 128


def cell_origin(index: int) -> tuple[int, int]:
    """Return the top-left pixel of the cell holding glyph ``index``.

    Args:
        index: Glyph index in scan order (0-15)

    Returns:
        Tuple of (x, y) pixel coordinates
    """
    column, row = index % GRID_COLUMNS, index // GRID_COLUMNS
    return column * GLYPH_WIDTH, row * GLYPH_HEIGHT


def is_ink(pixels: bytes | bytearray | memoryview, x: int, y: int, width: int = IMAGE_WIDTH) -> bool:
    """Check whether the pixel at (x, y) is dark enough to be ink."""
    return pixels[(y * width + x) * BYTES_PER_PIXEL] < INK_THRESHOLD


def extract_glyph(
    pixels: bytes | bytearray | memoryview,
    index: int,
    width: int = IMAGE_WIDTH,
) -> Glyph:
    """Pack one cell of the sheet into a glyph.

    Args:
        pixels: Flat RGBA8 buffer, row-major
        index: Glyph index in scan order
        width: Image width in pixels

    Returns:
        Glyph whose rows only use the low nibble
    """
    cell_x, cell_y = cell_origin(index)
    rows = []

    for row in range(GLYPH_HEIGHT):
        value = 0
        for column in range(GLYPH_WIDTH):
            if is_ink(pixels, cell_x + column, cell_y + row, width):
                value |= 1 << (GLYPH_WIDTH - 1 - column)
        rows.append(value)

    return Glyph(rows=tuple(rows))


def extract(
    pixels: bytes | bytearray | memoryview,
    width: int = IMAGE_WIDTH,
    height: int = IMAGE_HEIGHT,
) -> GlyphCollection:
    """Extract the sixteen glyphs of a font sheet.

    Args:
        pixels: Flat RGBA8 buffer, 4 bytes per pixel, top-to-bottom rows
        width: Reported image width
        height: Reported image height

    Returns:
        GlyphCollection in scan order

    Raises:
        InvalidSizeError: If the image is not exactly 16x20
        ConversionError: If the buffer is not a complete RGBA8 image
    """
    if width != IMAGE_WIDTH or height != IMAGE_HEIGHT:
        raise InvalidSizeError(width, height, expected=(IMAGE_WIDTH, IMAGE_HEIGHT))

    try:
        buffer = memoryview(pixels).cast("B")
    except TypeError as e:
        raise ConversionError(f"pixel data is not a byte buffer ({e})") from e

    expected = width * height * BYTES_PER_PIXEL
    if len(buffer) != expected:
        raise ConversionError(
            f"expected {expected} bytes of RGBA8 data, got {len(buffer)}"
        )

    return GlyphCollection(
        glyphs=tuple(extract_glyph(buffer, index, width) for index in range(GLYPH_COUNT))
    )
