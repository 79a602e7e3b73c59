"""Binary encoding of glyph collections.

The encoded form is 80 bytes: sixteen 5-byte glyph records in scan order.
There is no header, magic number, version field or checksum. Fields are
fixed-width and little-endian, so the layout is a single struct format.
"""

import struct

from nibblefont.domain import ENCODED_SIZE, GLYPH_COUNT, GLYPH_HEIGHT, Glyph, GlyphCollection
from nibblefont.exceptions import SchemaMismatchError, SerializationError

FONT_STRUCT = struct.Struct(f"<{ENCODED_SIZE}B")


def encode(collection: GlyphCollection) -> bytes:
    """Serialize a glyph collection.

    Args:
        collection: The sixteen glyphs to pack

    Returns:
        Exactly 80 bytes

    Raises:
        SerializationError: If the collection cannot be packed
    """
    try:
        values = [value for glyph in collection.glyphs for value in glyph.rows]
        return FONT_STRUCT.pack(*values)
    except (struct.error, AttributeError, TypeError) as e:
        raise SerializationError(str(e)) from e


def decode(data: bytes | bytearray | memoryview, strict: bool = False) -> GlyphCollection:
    """Rebuild a glyph collection from its encoded form.

    Row bytes are passed through unchanged, including any bits in the upper
    nibble. Use ``strict=True`` to reject such rows instead.

    Args:
        data: Encoded font, exactly 80 bytes
        strict: Reject rows with bits outside the low nibble

    Returns:
        GlyphCollection

    Raises:
        SchemaMismatchError: If the data does not match the fixed layout
    """
    try:
        values = FONT_STRUCT.unpack(data)
    except TypeError as e:
        raise SchemaMismatchError(f"expected a byte buffer ({e})") from e
    except struct.error as e:
        raise SchemaMismatchError(
            f"expected {ENCODED_SIZE} bytes, got {len(data)}",
            expected=ENCODED_SIZE,
            actual=len(data),
        ) from e

    glyphs = tuple(
        Glyph(rows=values[index * GLYPH_HEIGHT:(index + 1) * GLYPH_HEIGHT])
        for index in range(GLYPH_COUNT)
    )

    if strict:
        for index, glyph in enumerate(glyphs):
            if not glyph.is_normalized():
                raise SchemaMismatchError(
                    f"glyph {index} has bits set outside the 4-pixel row",
                    actual=len(data),
                )

    return GlyphCollection(glyphs=glyphs)
