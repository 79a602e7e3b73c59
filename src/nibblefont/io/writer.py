"""Font writer for saving encoded fonts."""

import logging
from pathlib import Path

from nibblefont.core import encode
from nibblefont.domain import GlyphCollection
from nibblefont.exceptions import FontSaveError

logger = logging.getLogger(__name__)


class FontWriter:
    """Writes a glyph collection as an encoded font file.

    Example:
        writer = FontWriter(font, Path("font.nfnt"))
        writer.save()
    """

    def __init__(self, font: GlyphCollection, output_path: Path, overwrite: bool = False) -> None:
        """Initialize the font writer.

        Args:
            font: The glyph collection to write
            output_path: Path where the font will be saved
            overwrite: Replace the file if it already exists
        """
        self._font = font
        self._output_path = output_path
        self._overwrite = overwrite

    def save(self) -> int:
        """Encode the font and write it to the output path.

        Returns:
            Number of bytes written

        Raises:
            FontSaveError: If the file exists and overwrite is off, or
                cannot be written
        """
        if self._output_path.exists() and not self._overwrite:
            raise FontSaveError(str(self._output_path), "file already exists")

        data = encode(self._font)

        try:
            self._output_path.write_bytes(data)
        except OSError as e:
            raise FontSaveError(str(self._output_path), str(e)) from e

        logger.debug("Wrote %d bytes to %s", len(data), self._output_path)
        return len(data)

    @staticmethod
    def get_output_path(input_path: Path, extension: str = ".nfnt") -> Path:
        """Generate the encoded font path for a sheet.

        Converts: font.png -> font.nfnt
                  sheets/digits.png -> sheets/digits.nfnt

        Args:
            input_path: Source sheet path
            extension: Extension for the encoded font

        Returns:
            Path with the sheet's extension replaced
        """
        return input_path.with_suffix(extension)
