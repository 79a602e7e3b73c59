"""Exception hierarchy for Nibblefont."""


class NibbleFontError(Exception):
    """Base exception for all Nibblefont errors."""

    pass


class ExtractionError(NibbleFontError):
    """Errors turning a source image into glyphs."""

    pass


class ImageDecodeError(ExtractionError):
    """Input bytes are not a readable image container."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Failed to decode image: {reason}")


class InvalidSizeError(ExtractionError):
    """Source image does not have the fixed sheet dimensions."""

    def __init__(self, width: int, height: int, expected: tuple[int, int] = (16, 20)) -> None:
        self.width = width
        self.height = height
        self.expected = expected
        super().__init__(
            f"Image dimensions must be exactly {expected[0]}x{expected[1]}, "
            f"got {width}x{height}"
        )


class ConversionError(ExtractionError):
    """Source image could not be normalized to 8-bit RGBA."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Failed to convert image to RGBA: {reason}")


class CodecError(NibbleFontError):
    """Errors in the binary font encoding."""

    pass


class SchemaMismatchError(CodecError):
    """Encoded data does not match the fixed 16x5 byte layout."""

    def __init__(self, reason: str, expected: int = 80, actual: int | None = None) -> None:
        self.reason = reason
        self.expected = expected
        self.actual = actual
        super().__init__(f"Failed to decode font: {reason}")


class SerializationError(CodecError):
    """Unexpected failure while packing a glyph collection."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Failed to encode font: {reason}")


class FontFileError(NibbleFontError):
    """Errors related to font file loading or saving."""

    pass


class FontLoadError(FontFileError):
    """Error loading a font or font sheet from disk."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load font '{path}': {reason}")


class FontSaveError(FontFileError):
    """Error saving an encoded font to disk."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save font '{path}': {reason}")
