"""Glyph representation.

This module defines the glyph domain model: one character's 4x5 bitmap,
stored as five row bytes with the columns packed into the low nibble.
"""

from dataclasses import dataclass
from typing import Any

GLYPH_WIDTH = 4
GLYPH_HEIGHT = 5

# Bits a row may use; anything above is outside the glyph cell.
ROW_MASK = (1 << GLYPH_WIDTH) - 1


@dataclass(frozen=True, slots=True)
class Glyph:
    """A single 4x5 glyph bitmap.

    Each row is one byte. Column 0 (leftmost) is bit 3 and column 3 is
    bit 0, so a fully inked row is 0x0F. Rows produced by extraction never
    use the upper nibble; rows read back from encoded data may.

    Attributes:
        rows: Exactly five row bytes, top to bottom
    """

    rows: tuple[int, ...]

    def __post_init__(self) -> None:
        rows = tuple(self.rows)
        if len(rows) != GLYPH_HEIGHT:
            raise ValueError(f"Glyph needs exactly {GLYPH_HEIGHT} rows, got {len(rows)}")
        for value in rows:
            if not isinstance(value, int) or not 0 <= value <= 0xFF:
                raise ValueError(f"Glyph row must be a byte value, got {value!r}")
        object.__setattr__(self, "rows", rows)

    @classmethod
    def blank(cls) -> "Glyph":
        """Create a glyph with no pixels set."""
        return cls(rows=(0,) * GLYPH_HEIGHT)

    def pixel(self, column: int, row: int) -> bool:
        """Check whether a pixel of the glyph is set.

        Args:
            column: Column within the glyph (0 = leftmost)
            row: Row within the glyph (0 = top)

        Returns:
            True if the pixel is inked

        Raises:
            IndexError: If the coordinates fall outside the 4x5 cell
        """
        if not 0 <= column < GLYPH_WIDTH or not 0 <= row < GLYPH_HEIGHT:
            raise IndexError(f"Pixel ({column}, {row}) outside {GLYPH_WIDTH}x{GLYPH_HEIGHT} glyph")
        return bool(self.rows[row] >> (GLYPH_WIDTH - 1 - column) & 1)

    def is_normalized(self) -> bool:
        """Check that no row carries bits above the low nibble."""
        return all(value <= ROW_MASK for value in self.rows)

    def is_empty(self) -> bool:
        """Check if glyph has no pixels set."""
        return not any(self.rows)

    def to_bytes(self) -> bytes:
        """Return the raw 5-byte record."""
        return bytes(self.rows)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with the row values
        """
        return {"rows": list(self.rows)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Glyph":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with a "rows" list

        Returns:
            Glyph instance
        """
        return cls(rows=tuple(data["rows"]))
