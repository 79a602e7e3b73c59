"""Font reader for loading font sheets and encoded fonts.

This module decodes PNG font sheets with Pillow and hands the RGBA8 pixels
to the extractor, and loads previously encoded fonts through the codec.
"""

import logging
from io import BytesIO
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from nibblefont.core import decode, extract
from nibblefont.domain import IMAGE_HEIGHT, IMAGE_WIDTH, GlyphCollection
from nibblefont.exceptions import (
    ConversionError,
    FontLoadError,
    ImageDecodeError,
    InvalidSizeError,
)

logger = logging.getLogger(__name__)

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"

FORMAT_SHEET = "PNG sheet"
FORMAT_ENCODED = "Encoded font"


def decode_png(data: bytes) -> tuple[bytes, int, int]:
    """Decode an image container into RGBA8 pixels.

    The dimensions are checked from the image header before any pixel
    data is decoded.

    Args:
        data: Raw image file contents

    Returns:
        Tuple of (pixels, width, height)

    Raises:
        ImageDecodeError: If the data is not a readable image
        InvalidSizeError: If the image is not 16x20
        ConversionError: If the image cannot be converted to RGBA8
    """
    try:
        image = Image.open(BytesIO(data))
    except (UnidentifiedImageError, OSError, ValueError) as e:
        raise ImageDecodeError(str(e)) from e

    with image:
        width, height = image.size
        if (width, height) != (IMAGE_WIDTH, IMAGE_HEIGHT):
            raise InvalidSizeError(width, height, expected=(IMAGE_WIDTH, IMAGE_HEIGHT))

        try:
            image.load()
        except (OSError, ValueError, SyntaxError) as e:
            raise ImageDecodeError(str(e)) from e

        try:
            rgba = _to_rgba8(image)
        except (OSError, ValueError) as e:
            raise ConversionError(f"mode {image.mode}: {e}") from e

        return rgba.tobytes(), width, height


def _to_rgba8(image: Image.Image) -> Image.Image:
    """Convert to RGBA with 8 bits per channel.

    Pillow clamps 32-bit integer samples to 255 when converting, so 16-bit
    grayscale is reduced to its high byte first.
    """
    if image.mode.startswith("I"):
        samples = image.convert("I").getdata()
        gray = Image.new("L", image.size)
        gray.putdata([min(max(value, 0), 0xFFFF) >> 8 for value in samples])
        image = gray

    return image.convert("RGBA")


def extract_png(data: bytes) -> GlyphCollection:
    """Extract a font from PNG file contents.

    Args:
        data: Raw PNG bytes

    Returns:
        GlyphCollection in scan order

    Raises:
        ImageDecodeError: If the data is not a readable image
        InvalidSizeError: If the image is not 16x20
        ConversionError: If the image cannot be converted to RGBA8
    """
    pixels, width, height = decode_png(data)
    return extract(pixels, width, height)


class FontReader:
    """Loads a font from a PNG sheet or an encoded font file.

    Files ending in .png or starting with the PNG signature are treated as
    sheets; anything else is decoded as an encoded font.

    Example:
        reader = FontReader(Path("font.png"))
        reader.load()
        for glyph in reader.font:
            print(glyph.rows)
    """

    def __init__(self, font_path: Path, strict: bool = False) -> None:
        """Initialize the font reader.

        Args:
            font_path: Path to a PNG sheet or encoded font
            strict: Reject encoded rows with bits outside the low nibble
        """
        self._font_path = font_path
        self._strict = strict
        self._font: GlyphCollection | None = None
        self._format: str | None = None

    def load(self) -> None:
        """Load and parse the file.

        Raises:
            FileNotFoundError: If the file does not exist
            FontLoadError: If the file cannot be read
            NibbleFontError: If the contents cannot be parsed
        """
        if not self._font_path.exists():
            raise FileNotFoundError(f"Font file not found: {self._font_path}")

        try:
            data = self._font_path.read_bytes()
        except OSError as e:
            raise FontLoadError(str(self._font_path), str(e)) from e

        if self._font_path.suffix.lower() == ".png" or data.startswith(PNG_SIGNATURE):
            self._font = extract_png(data)
            self._format = FORMAT_SHEET
        else:
            self._font = decode(data, strict=self._strict)
            self._format = FORMAT_ENCODED

        logger.debug("Loaded %s from %s (%d bytes)", self._format, self._font_path, len(data))

    @property
    def font(self) -> GlyphCollection:
        """Return the loaded glyph collection.

        Raises:
            RuntimeError: If the font has not been loaded yet
        """
        if self._font is None:
            raise RuntimeError("Font not loaded. Call load() first.")

        return self._font

    @property
    def format(self) -> str:
        """Return the source format of the loaded file.

        Returns:
            'PNG sheet' or 'Encoded font'

        Raises:
            RuntimeError: If the font has not been loaded yet
        """
        if self._format is None:
            raise RuntimeError("Font not loaded. Call load() first.")

        return self._format

    def close(self) -> None:
        """Drop the loaded font."""
        self._font = None
        self._format = None

    def __enter__(self) -> "FontReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
